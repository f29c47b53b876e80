"""
crashlog.exceptions
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class APIError(Exception):
    def __init__(self, message, code=0):
        super(APIError, self).__init__(message, code)
        self.code = code
        self.message = message

    def __str__(self):
        return "%s: %s" % (self.message, self.code)
