"""
crashlog.conf.defaults
~~~~~~~~~~~~~~~~~~~~~~

Represents the default values for all CrashLog settings.

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import os

# Environment variables consulted when a configuration is created
ENV_API_KEY = 'CRASHLOG_API_KEY'
ENV_SECRET = 'CRASHLOG_SECRET'
ENV_STAGE = 'CRASHLOG_STAGE'
ENV_HOST = 'CRASHLOG_HOST'

SCHEME = 'https'

HOST = 'stdin.crashlog.io'

PORT = None

# Path events are POSTed to
ENDPOINT = '/events'

# Path of the handshake performed by ``report_for_duty``
ANNOUNCE_ENDPOINT = '/announce'

TIMEOUT = 5

STAGE = 'production'

# ``None`` reports from every stage
RELEASE_STAGES = None

# Class names which ``notify_or_ignore`` never reports
IGNORE = (
    'SystemExit',
    'KeyboardInterrupt',
    'GeneratorExit',
)

# Maximum number of frames kept in a backtrace, ``None`` keeps them all
BACKTRACE_LIMIT = None

LOCATE_URL = 'https://crashlog.io/locate/%s'

# Settings which must be present and well formed before events are sent
REQUIRED_KEYS = ('api_key', 'host', 'scheme')


def get_project_root():
    try:
        return os.getcwd()
    except OSError:
        return None
