"""
crashlog.utils.system
~~~~~~~~~~~~~~~~~~~~~

Static facts about the running process, gathered once.

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import os
import platform
import socket
import sys
import threading

import crashlog

logger = logging.getLogger('crashlog.errors')

FACTS = (
    ('hostname', socket.gethostname),
    ('pid', os.getpid),
    ('python_version', platform.python_version),
    ('python_implementation', platform.python_implementation),
    ('platform', platform.platform),
    ('os', platform.system),
    ('architecture', platform.machine),
    ('executable', lambda: sys.executable or None),
    ('crashlog_version', lambda: crashlog.VERSION),
)

_lock = threading.Lock()
_cache = None


def _collect():
    info = {}
    for name, getter in FACTS:
        try:
            value = getter()
        except Exception as e:
            logger.debug('Unable to determine %s: %s', name, e)
            continue
        if value not in (None, ''):
            info[name] = value
    return info


def collect():
    """
    Returns the system information snapshot, collecting it on the first
    call only.
    """
    global _cache

    if _cache is None:
        with _lock:
            if _cache is None:
                _cache = _collect()
    return dict(_cache)


def reset():
    global _cache

    with _lock:
        _cache = None
