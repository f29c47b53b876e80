"""
crashlog.utils
~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import hashlib
import hmac


def varmap(func, var, context=None, name=None):
    """
    Executes ``func(key_name, value)`` on all values
    recurisively discovering dict and list scoped
    values.
    """
    if context is None:
        context = {}
    objid = id(var)
    if objid in context:
        return func(name, '<...>')
    context[objid] = 1
    if isinstance(var, dict):
        ret = dict((k, varmap(func, v, context, k))
                   for k, v in var.items())
    elif isinstance(var, (list, tuple)):
        ret = [varmap(func, f, context, name) for f in var]
    else:
        ret = func(name, var)
    del context[objid]
    return ret


def get_signature(secret, timestamp, body):
    """
    HMAC-SHA256 of the request timestamp and body, keyed by the
    project secret.
    """
    if isinstance(body, str):
        body = body.encode('utf-8')
    message = ('%s\n' % (timestamp,)).encode('utf-8') + (body or b'')
    return hmac.new(secret.encode('utf-8'), message, hashlib.sha256).hexdigest()


def get_auth_header(timestamp, client, api_key, api_secret=None,
                    body=None):
    header = [
        ('crashlog_timestamp', timestamp),
        ('crashlog_client', client),
        ('crashlog_key', api_key),
    ]
    if api_secret:
        header.append(('crashlog_signature',
                       get_signature(api_secret, timestamp, body)))

    return 'CrashLog %s' % ', '.join('%s=%s' % (k, v) for k, v in header)
