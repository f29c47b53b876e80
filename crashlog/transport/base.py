"""
crashlog.transport.base
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from crashlog.transport.exceptions import InvalidScheme


class Transport(object):
    """
    All transport implementations need to subclass this class

    A transport is bound to a single URL and must implement ``send``,
    which POSTs the body and returns the raw response body. Replies with
    a non-success status raise ``crashlog.exceptions.APIError``, network
    problems raise whatever the underlying client raises.
    """

    scheme = []

    def check_scheme(self, url):
        if url.scheme not in self.scheme:
            raise InvalidScheme()

    def send(self, data, headers):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server
        """
        raise NotImplementedError


def get_real_url(parsed_url):
    """
    Strips the transport selector (``sync+``, ``requests+``) from the
    scheme of ``parsed_url``.
    """
    url = parsed_url.geturl()
    prefix, sep, scheme = parsed_url.scheme.partition('+')
    if sep:
        url = url[len(prefix) + 1:]
    return url
