"""
crashlog.base
~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import sys

from crashlog.backtrace import Backtrace
from crashlog.conf import Configuration
from crashlog.payload import NotificationData, Payload, get_exception_message, get_exception_type
from crashlog.reporter import Reporter

__all__ = ('Notifier', 'Outcome')

LOG_PREFIX = '** [CrashLog]'


class Outcome(object):
    IGNORED = 'ignored'
    NOT_LIVE = 'not-live'
    BUILD_FAILED = 'build-failed'
    UNDELIVERED = 'undelivered'
    DELIVERED = 'delivered'


def configure_logging():
    logger = logging.getLogger('crashlog')
    if logger.handlers:
        return
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.setLevel(logging.INFO)


class Notifier(object):
    """
    Decides whether an exception is sent to CrashLog, builds the report
    and delivers it.

    >>> notifier = Notifier()
    >>> notifier.configure(api_key='0123456789')

    >>> try:
    >>>     1 / 0
    >>> except ZeroDivisionError as e:
    >>>     notifier.notify(e, {'context': {'user_id': 42}})

    ``notify`` and ``notify_or_ignore`` never raise, every failure ends
    up as ``False`` and a log line.
    """

    def __init__(self, configuration=None, transport_registry=None):
        configure_logging()

        self.configuration = configuration or Configuration()
        self.transport_registry = transport_registry
        self.reporter = self.get_reporter()

    def get_reporter(self):
        return Reporter(self.configuration, transport_registry=self.transport_registry)

    @property
    def logger(self):
        return self.configuration.logger or logging.getLogger('crashlog')

    def info(self, message, *args):
        self.logger.info(LOG_PREFIX + ' ' + message, *args)

    def warning(self, message, *args):
        self.logger.warning(LOG_PREFIX + ' ' + message, *args)

    def error(self, message, *args):
        self.logger.error(LOG_PREFIX + ' ' + message, *args)

    def is_live(self):
        """
        Returns True if the current stage is one of the release stages.
        """
        return self.configuration.is_release_stage()

    def is_ignored(self, exception):
        return self.configuration.is_ignored(exception)

    def notify(self, exception, data=None):
        """
        Sends ``exception`` to CrashLog.

        ``data`` is a mapping of extra information; its ``context`` key is
        reported separately as the user context:

        >>> notifier.notify(e, {'context': {'user_id': 42}, 'path': '/'})

        Returns True if the event was delivered.
        """
        return self.capture(exception, data) == Outcome.DELIVERED

    def notify_or_ignore(self, exception, data=None):
        """
        Same as ``notify``, unless the exception is configured to be
        ignored, in which case nothing happens.
        """
        return self.capture(exception, data, respect_ignore=True) == Outcome.DELIVERED

    def capture(self, exception, data=None, respect_ignore=False):
        """
        Runs one notification and returns its ``Outcome``.
        """
        try:
            return self._capture(exception, data, respect_ignore)
        except Exception:
            self.logger.exception('%s Unexpected error while notifying CrashLog', LOG_PREFIX)
            try:
                self.log_exception(exception)
            except Exception:
                self.logger.exception('%s Unable to log %r', LOG_PREFIX, type(exception))
            return Outcome.UNDELIVERED

    def _capture(self, exception, data, respect_ignore):
        if respect_ignore and self.is_ignored(exception):
            return Outcome.IGNORED

        if not self.is_live():
            self.logger.debug('%s Not notifying, stage %r is not a release stage',
                              LOG_PREFIX, self.configuration.stage)
            return Outcome.NOT_LIVE

        invalid_keys = self.configuration.invalid_keys()
        if invalid_keys:
            self.warning('Not notifying, missing or invalid settings: %s',
                         ', '.join(sorted(invalid_keys)))
            self.log_exception(exception)
            return Outcome.NOT_LIVE

        payload = self.build_payload(exception, data)
        if payload is None:
            self.error('Failed to build event for %r', exception)
            return Outcome.BUILD_FAILED

        result = self.reporter.deliver(payload)
        if result:
            self.info('Event sent to CrashLog.io')
            if result.location_id:
                self.info('Event URL: %s', self.configuration.get_locate_url(result.location_id))
            return Outcome.DELIVERED

        self.error('Failed to send event to CrashLog.io')
        self.log_exception(exception)
        return Outcome.UNDELIVERED

    def build_payload(self, exception, data=None):
        try:
            return Payload.build(exception, self.configuration,
                                 NotificationData.from_mapping(data))
        except Exception:
            self.logger.debug('%s Unable to build payload', LOG_PREFIX, exc_info=True)
            return None

    def log_exception(self, exception):
        """
        Writes the exception to the local log so it is not lost when it
        couldn't be delivered.
        """
        lines = ['%s: %s' % (get_exception_type(exception), get_exception_message(exception))]
        for frame in Backtrace.from_exception(exception):
            lines.append('  %s:%s:in %s' % (frame.file, frame.line, frame.method or '<unknown>'))
        self.error('\n'.join(lines))

    def report_for_duty(self):
        """
        Prints a message at the top of the application's logs to say
        we're ready.
        """
        self.reporter = self.get_reporter()
        application = self.reporter.announce()

        if application:
            self.info("Configured correctly and ready to handle exceptions for '%s'", application)
        else:
            self.error('Failed to report for duty, your application failed to '
                       'authenticate correctly with %s', self.configuration.host)

    def configure(self, mutator=None, announce=False, **options):
        """
        Updates the configuration, at the very least an ``api_key`` is
        required.

        >>> notifier.configure(api_key='0123456789', stage='staging')

        >>> def setup(config):
        >>>     config.release_stages = ['production', 'staging']
        >>> notifier.configure(setup, announce=True)
        """
        if mutator is None and not options:
            return self.configuration

        if mutator is not None:
            mutator(self.configuration)
        if options:
            self.configuration.update(**options)

        self.reporter = self.get_reporter()

        if announce:
            self.report_for_duty()
        elif self.configuration.is_valid():
            self.info('Configuration updated')
        else:
            invalid_keys = self.configuration.invalid_keys()
            if 'api_key' in invalid_keys:
                self.warning('Not configured, an api_key is required to send events')
            else:
                self.error('Not configured correctly. Missing the following keys: %s',
                           ', '.join(sorted(invalid_keys)))

        return self.configuration
