"""
crashlog.utils.json
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from __future__ import absolute_import

import collections.abc
import datetime
import uuid
import json


class BetterJSONEncoder(json.JSONEncoder):
    ENCODER_BY_TYPE = {
        uuid.UUID: lambda o: o.hex,
        datetime.datetime: lambda o: o.strftime('%Y-%m-%dT%H:%M:%SZ'),
        datetime.date: lambda o: o.isoformat(),
        set: list,
        frozenset: list,
        bytes: lambda o: o.decode('utf-8', errors='replace')
    }

    def encode(self, obj):
        super_encode = super(BetterJSONEncoder, self).encode
        try:
            return super_encode(obj)
        except TypeError:
            # Non-string keys make the C encoder bail out before
            # ``default`` is consulted, massage the data and try again.
            return super_encode(self.encode_keys(obj))

    def encode_keys(self, value):
        # Need to do this recursively, though this is the last resort anyways.
        if isinstance(value, collections.abc.Mapping):
            return {self.encode_key(key): self.encode_keys(val)
                    for key, val in value.items()}
        elif isinstance(value, (list, tuple)):
            return [self.encode_keys(v) for v in value]
        return value

    def encode_key(self, key):
        if isinstance(key, (str, int, float, bool)) or key is None:
            return key
        return repr(key)

    def default(self, obj):
        try:
            encoder = self.ENCODER_BY_TYPE[type(obj)]
        except KeyError:
            try:
                return super(BetterJSONEncoder, self).default(obj)
            except TypeError:
                return repr(obj)
        return encoder(obj)


def dumps(value, **kwargs):
    return json.dumps(value, cls=BetterJSONEncoder, **kwargs)


def loads(value, **kwargs):
    if isinstance(value, bytes):
        value = value.decode('utf-8')
    return json.loads(value, **kwargs)
