"""
crashlog
~~~~~~~~

Sends exceptions raised by your application to CrashLog.

>>> import crashlog
>>> crashlog.configure(api_key='0123456789')

>>> try:
>>>     something_dangerous()
>>> except Exception as e:
>>>     crashlog.notify(e, {'context': {'user_id': current_user.id}})

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Notifier', 'Outcome', 'Configuration', 'notify', 'notify_or_ignore',
           'configure', 'report_for_duty', 'configuration', 'is_ignored',
           'is_live', 'logger', 'get_notifier', 'reset')

VERSION = '0.1.0'

import threading  # NOQA

from crashlog.base import Notifier, Outcome  # NOQA
from crashlog.conf import Configuration  # NOQA

# the default notifier, created on first use
_notifier = None
_notifier_lock = threading.Lock()


def get_notifier():
    global _notifier

    if _notifier is None:
        with _notifier_lock:
            if _notifier is None:
                _notifier = Notifier()
    return _notifier


def reset():
    """
    Discards the default notifier along with its configuration and the
    cached system information.
    """
    global _notifier

    from crashlog.utils import system

    with _notifier_lock:
        _notifier = None
    system.reset()


def notify(exception, data=None):
    """
    Sends a notification to CrashLog.

    Returns True if successful, otherwise False.
    """
    return get_notifier().notify(exception, data)


def notify_or_ignore(exception, data=None):
    """
    Sends the notification unless it is one of the ignored exceptions.
    """
    return get_notifier().notify_or_ignore(exception, data)


def configure(mutator=None, announce=False, **options):
    return get_notifier().configure(mutator, announce=announce, **options)


def report_for_duty():
    get_notifier().report_for_duty()


def configuration():
    return get_notifier().configuration


def is_ignored(exception):
    return get_notifier().is_ignored(exception)


def is_live():
    return get_notifier().is_live()


def logger():
    return get_notifier().logger
