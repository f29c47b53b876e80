"""
crashlog.transport.http
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import ssl
from urllib.error import HTTPError
from urllib.request import HTTPSHandler, Request, build_opener

from crashlog.conf import defaults
from crashlog.exceptions import APIError
from crashlog.transport.base import Transport, get_real_url


class HTTPTransport(Transport):

    scheme = ['sync+http', 'sync+https']

    def __init__(self, parsed_url, timeout=defaults.TIMEOUT, verify_ssl=True):
        self.check_scheme(parsed_url)

        self._parsed_url = parsed_url
        self._url = get_real_url(parsed_url)

        if isinstance(timeout, str):
            timeout = int(timeout)
        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.timeout = timeout
        self.verify_ssl = verify_ssl

    def _get_opener(self):
        if self.verify_ssl:
            return build_opener()
        return build_opener(HTTPSHandler(context=ssl._create_unverified_context()))

    def send(self, data, headers):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(self._url, data=data, headers=headers, method='POST')

        try:
            response = self._get_opener().open(req, timeout=self.timeout)
        except HTTPError as e:
            raise APIError('Unexpected response from %s' % (self._url,), e.code)

        with response:
            return response.read()
