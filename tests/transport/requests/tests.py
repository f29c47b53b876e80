from __future__ import absolute_import

from urllib.parse import urlparse

import mock
import pytest
import requests
import responses

from crashlog.conf import Configuration
from crashlog.exceptions import APIError
from crashlog.payload import Payload
from crashlog.reporter import Reporter
from crashlog.transport.requests import RequestsHTTPTransport
from crashlog.utils.testutils import TestCase


class RequestsTransportTest(TestCase):
    def setUp(self):
        self.transport = RequestsHTTPTransport(
            urlparse('http://localhost:8143/events'), timeout=3)

    @responses.activate
    def test_does_send(self):
        responses.add(responses.POST, 'http://localhost:8143/events',
                      json={'id': 'abc123'}, status=200)

        body = self.transport.send(b'{"a": 1}', {'Content-Type': 'application/json'})

        assert body == b'{"id": "abc123"}'
        assert len(responses.calls) == 1
        request = responses.calls[0].request
        assert request.body == b'{"a": 1}'
        assert request.headers['Content-Type'] == 'application/json'

    @responses.activate
    def test_error_status(self):
        responses.add(responses.POST, 'http://localhost:8143/events', status=500)

        with pytest.raises(APIError) as excinfo:
            self.transport.send(b'{}', {})
        assert excinfo.value.code == 500

    @responses.activate
    def test_connection_error(self):
        responses.add(responses.POST, 'http://localhost:8143/events',
                      body=requests.ConnectionError('refused'))

        with pytest.raises(requests.ConnectionError):
            self.transport.send(b'{}', {})

    @mock.patch('requests.Session.send')
    def test_passes_timeout(self, mock_send):
        mock_send.return_value.ok = True
        mock_send.return_value.content = b'{}'

        self.transport.send(b'{}', {})

        args, kwargs = mock_send.call_args
        assert args[0].url == 'http://localhost:8143/events'
        assert kwargs['timeout'] == 3


class RequestsReporterTest(TestCase):
    def setUp(self):
        self.config = Configuration(api_key='abc', scheme='http', host='localhost', port=8143)
        self.reporter = Reporter(self.config)
        self.payload = Payload.build(RuntimeError('boom'), self.config)

    @responses.activate
    def test_deliver(self):
        responses.add(responses.POST, 'http://localhost:8143/events',
                      json={'id': 'abc123'}, status=200)

        result = self.reporter.deliver(self.payload)
        assert result
        assert result.location_id == 'abc123'

    @responses.activate
    def test_deliver_server_error(self):
        responses.add(responses.POST, 'http://localhost:8143/events', status=500)
        assert not self.reporter.deliver(self.payload)

    @responses.activate
    def test_deliver_connection_error(self):
        responses.add(responses.POST, 'http://localhost:8143/events',
                      body=requests.ConnectionError('refused'))
        assert not self.reporter.deliver(self.payload)

    @responses.activate
    def test_announce(self):
        responses.add(responses.POST, 'http://localhost:8143/announce',
                      json={'application_name': 'Shop'}, status=200)
        assert self.reporter.announce() == 'Shop'
