"""
crashlog.utils.testutils
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from unittest import TestCase as BaseTestCase

from exam import Exam

from crashlog.exceptions import APIError
from crashlog.transport.base import Transport, get_real_url
from crashlog.transport.registry import default_registry
from crashlog.utils import json


class TestCase(Exam, BaseTestCase):
    pass


class InMemoryTransport(Transport):
    """
    Records every request and answers with a canned reply.

    Set ``status``/``body`` on the class (or ``error`` to raise) before
    sending.
    """

    scheme = ['mock+http', 'mock+https']

    status = 200
    body = b'{}'
    error = None
    sent = []

    def __init__(self, parsed_url, timeout=None):
        self.check_scheme(parsed_url)
        self.url = get_real_url(parsed_url)
        self.timeout = timeout

    def send(self, data, headers):
        cls = type(self)
        cls.sent.append({
            'url': self.url,
            'data': data,
            'headers': headers,
        })
        if cls.error is not None:
            raise cls.error
        if not 200 <= cls.status < 300:
            raise APIError('Unexpected response from %s' % (self.url,), cls.status)
        return cls.body

    @classmethod
    def reply(cls, status=200, body=None, error=None):
        cls.status = status
        if body is not None and not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        cls.body = body if body is not None else b'{}'
        cls.error = error

    @classmethod
    def reset(cls):
        cls.sent = []
        cls.reply()


def install_test_transport(registry=default_registry):
    for scheme in InMemoryTransport.scheme:
        if not registry.supported_scheme(scheme):
            registry.register_scheme(scheme, InMemoryTransport)
