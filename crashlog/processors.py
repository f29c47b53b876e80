"""
crashlog.processors
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import re

from crashlog.utils import varmap


class Processor(object):
    """
    Rewrites the user supplied sections of a report before it is
    serialized.
    """

    def process(self, data):
        return varmap(self.sanitize, data)

    def sanitize(self, key, value):
        return value


class SanitizePasswordsProcessor(Processor):
    """
    Asterisk out things that look like passwords, credit card numbers,
    and API keys in the context and data sections.
    """

    MASK = '*' * 8
    FIELDS = frozenset([
        'password',
        'secret',
        'passwd',
        'authorization',
        'api_key',
        'apikey',
        'access_token',
    ])
    VALUES_RE = re.compile(r'^(?:\d[ -]*?){13,16}$')

    def __init__(self, fields=None):
        if fields is None:
            fields = self.FIELDS
        self.fields = frozenset(f.lower() for f in fields)

    def sanitize(self, key, value):
        if value is None:
            return

        if isinstance(value, str) and self.VALUES_RE.match(value):
            return self.MASK

        if not key:  # key can be a NoneType
            return value

        # Just in case we have bytes here, we want to make them into text
        # properly without failing so we can perform our check.
        if isinstance(key, bytes):
            key = key.decode('utf-8', 'replace')
        else:
            key = str(key)

        key = key.lower()
        for field in self.fields:
            if field in key:
                # store mask as a fixed length for security
                return self.MASK
        return value
