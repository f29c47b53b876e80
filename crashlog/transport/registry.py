"""
crashlog.transport.registry
~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from urllib.parse import parse_qsl

from crashlog.transport.exceptions import DuplicateScheme, InvalidScheme
from crashlog.transport.http import HTTPTransport
from crashlog.transport.requests import RequestsHTTPTransport


class TransportRegistry(object):
    def __init__(self, transports=None):
        # setup a default list of senders
        self._schemes = {}
        self._transports = {}

        if transports:
            for transport in transports:
                self.register_transport(transport)

    def register_transport(self, transport):
        if not hasattr(transport, 'scheme') or not hasattr(transport.scheme, '__iter__'):
            raise AttributeError('Transport %s must have a scheme list' % transport.__name__)

        for scheme in transport.scheme:
            self.register_scheme(scheme, transport)

    def register_scheme(self, scheme, cls):
        """
        It is possible to inject new schemes at runtime
        """
        if scheme in self._schemes:
            raise DuplicateScheme()

        self._schemes[scheme] = cls

    def supported_scheme(self, scheme):
        return scheme in self._schemes

    def get_transport(self, parsed_url, **options):
        if not self.supported_scheme(parsed_url.scheme):
            raise InvalidScheme('Unsupported scheme: %r' % parsed_url.scheme)

        # Grab options from the querystring to pass to the transport
        # e.g. ?timeout=30
        options = dict(options, **dict(parse_qsl(parsed_url.query)))

        key = (parsed_url.geturl(), tuple(sorted(options.items())))
        if key not in self._transports:
            self._transports[key] = self._schemes[parsed_url.scheme](parsed_url, **options)
        return self._transports[key]


default_transports = [
    RequestsHTTPTransport,
    HTTPTransport,
]

default_registry = TransportRegistry(transports=default_transports)
