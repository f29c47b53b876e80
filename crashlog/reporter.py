"""
crashlog.reporter
~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import time
from urllib.parse import urlparse

import crashlog
from crashlog.exceptions import APIError
from crashlog.payload import NOTIFIER_NAME
from crashlog.transport.registry import default_registry
from crashlog.utils import get_auth_header, json

__all__ = ('NotificationResult', 'Reporter')


class NotificationResult(object):
    """
    Outcome of one delivery attempt. Truthy when the event was accepted.
    """

    def __init__(self, success, location_id=None):
        self.success = bool(success)
        self.location_id = location_id if success else None

    @classmethod
    def delivered(cls, location_id=None):
        return cls(True, location_id)

    @classmethod
    def failure(cls):
        return cls(False)

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return '<%s: delivered location_id=%r>' % (type(self).__name__, self.location_id)
        return '<%s: failed>' % (type(self).__name__,)


class Reporter(object):
    """
    Talks to the CrashLog collector on behalf of one configuration.

    A new reporter is created whenever the configuration changes.
    """

    logger = logging.getLogger('crashlog.errors')

    def __init__(self, configuration, transport_registry=None):
        self.configuration = configuration
        self._registry = transport_registry or default_registry

    @property
    def client_string(self):
        return '%s/%s' % (NOTIFIER_NAME, crashlog.VERSION)

    def get_headers(self, body):
        config = self.configuration
        return {
            'User-Agent': self.client_string,
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'X-CrashLog-Auth': get_auth_header(
                timestamp=int(time.time()),
                client=self.client_string,
                api_key=config.api_key,
                api_secret=config.secret,
                body=body,
            ),
        }

    def get_transport(self, url):
        return self._registry.get_transport(
            urlparse(url), timeout=self.configuration.timeout)

    def send(self, url, body):
        """
        POSTs ``body`` to ``url`` and returns the decoded JSON reply.

        Raises on transport errors, non-success replies and replies which
        are not a JSON object.
        """
        transport = self.get_transport(url)
        self.logger.debug('Sending message of length %d to %s', len(body), url)

        response = transport.send(body, self.get_headers(body))
        result = json.loads(response or b'')
        if not isinstance(result, dict):
            raise ValueError('Unexpected response body: %r' % (result,))
        return result

    def announce(self):
        """
        Identifies this client to CrashLog.

        Returns the application name the api key belongs to, or ``None``
        when the handshake fails for any reason.
        """
        if not self.configuration.is_valid():
            self.logger.debug('Not announcing, invalid settings: %s',
                              ', '.join(sorted(self.configuration.invalid_keys())))
            return None

        body = json.dumps({
            'payload': {
                'notifier': NOTIFIER_NAME,
                'version': crashlog.VERSION,
                'language': 'python',
                'stage': self.configuration.stage,
            },
        }).encode('utf-8')

        try:
            result = self.send(self.configuration.announce_url, body)
        except Exception as e:
            self._failed_send(e, self.configuration.announce_url)
            return None

        return result.get('application_name') or None

    def deliver(self, payload):
        """
        Sends ``payload`` exactly once and returns a ``NotificationResult``.
        """
        url = self.configuration.events_url

        try:
            body = payload.encode()
            result = self.send(url, body)
        except Exception as e:
            self._failed_send(e, url)
            return NotificationResult.failure()

        return NotificationResult.delivered(
            result.get('location_id') or result.get('id'))

    def _failed_send(self, e, url):
        if isinstance(e, APIError):
            self.logger.error(
                'Unable to reach CrashLog: %s (url: %s)', e, url,
                extra={'data': {'status': e.code, 'remote_url': url}})
        else:
            self.logger.error(
                'Unable to reach CrashLog: %s (url: %s)', e, url,
                exc_info=True, extra={'data': {'remote_url': url}})
