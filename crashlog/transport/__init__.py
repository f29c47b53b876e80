"""
crashlog.transport
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from crashlog.transport.base import Transport  # NOQA
from crashlog.transport.exceptions import InvalidScheme, DuplicateScheme  # NOQA
from crashlog.transport.http import HTTPTransport  # NOQA
from crashlog.transport.requests import RequestsHTTPTransport  # NOQA
from crashlog.transport.registry import TransportRegistry, default_transports, default_registry  # NOQA
