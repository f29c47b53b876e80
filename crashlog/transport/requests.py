"""
crashlog.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import requests

from crashlog.conf import defaults
from crashlog.exceptions import APIError
from crashlog.transport.http import HTTPTransport


class RequestsHTTPTransport(HTTPTransport):

    scheme = ['http', 'https', 'requests+http', 'requests+https']

    def __init__(self, parsed_url, timeout=defaults.TIMEOUT, verify_ssl=True):
        super(RequestsHTTPTransport, self).__init__(parsed_url,
                                                    timeout=timeout,
                                                    verify_ssl=verify_ssl)

        self.session = requests.Session()

    def send(self, data, headers):
        response = self.session.post(self._url, data=data, headers=headers,
                                     verify=self.verify_ssl,
                                     timeout=self.timeout)
        if not response.ok:
            raise APIError('Unexpected response from %s' % (self._url,),
                           response.status_code)
        return response.content
