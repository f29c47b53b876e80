"""
crashlog.payload
~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import uuid
from datetime import datetime, timezone

import crashlog
from crashlog.backtrace import Backtrace
from crashlog.processors import SanitizePasswordsProcessor
from crashlog.utils import json, varmap
from crashlog.utils import system

__all__ = ('NotificationData', 'Payload')

NOTIFIER_NAME = 'crashlog-python'

# Key of the caller's data which is reported as the user context
CONTEXT_KEY = 'context'


class NotificationData(object):
    """
    The caller supplied part of a report: the user ``context`` and any
    other ``data``.

    >>> NotificationData.from_mapping({'context': {'user_id': 42}, 'path': '/'})
    <NotificationData: context=['user_id'] data=['path']>
    """

    def __init__(self, context=None, data=None):
        self.context = dict(context or {})
        self.data = dict(data or {})

    def __repr__(self):
        return '<%s: context=%r data=%r>' % (
            type(self).__name__, sorted(self.context), sorted(self.data))

    @classmethod
    def from_mapping(cls, mapping):
        """
        Splits a free-form mapping on the reserved ``context`` key. The
        mapping itself is left untouched.
        """
        if mapping is None:
            return cls()
        if isinstance(mapping, cls):
            return mapping

        data = dict(mapping)
        context = data.pop(CONTEXT_KEY, None)
        if context is not None and not isinstance(context, dict):
            context = {'value': context}
        return cls(context, data)


def _identity(key, value):
    return value


def get_exception_type(exception):
    return getattr(type(exception), '__name__', None) or '<unknown>'


def get_exception_message(exception):
    message = getattr(exception, 'message', None)
    if isinstance(message, str):
        return message
    try:
        return str(exception)
    except Exception:
        return '<unprintable %s object>' % get_exception_type(exception)


class Payload(object):
    """
    A complete, read-only error report.

    Build one with ``Payload.build``; it is serialized with ``encode``
    and handed to a ``Reporter``.
    """

    def __init__(self, event, backtrace, environment, context, data,
                 api_key=None, stage=None):
        self._event = event
        self._backtrace = backtrace
        self._environment = environment
        self._context = context
        self._data = data
        self._api_key = api_key
        self._stage = stage

    @classmethod
    def build(cls, exception, configuration, notification_data=None):
        """
        Assembles the report for ``exception``.

        Returns ``None`` when there is no exception to report.
        """
        if exception is None:
            return None

        notification_data = NotificationData.from_mapping(notification_data)
        processor = SanitizePasswordsProcessor(configuration.sanitize_keys)

        event = {
            'type': get_exception_type(exception),
            'message': get_exception_message(exception),
            'timestamp': datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ'),
            'event_id': uuid.uuid4().hex,
        }

        return cls(
            event=event,
            backtrace=Backtrace.from_exception(exception, configuration),
            environment=system.collect(),
            context=processor.process(notification_data.context),
            data=processor.process(notification_data.data),
            api_key=configuration.api_key,
            stage=configuration.stage,
        )

    @property
    def event(self):
        return dict(self._event)

    @property
    def exception_type(self):
        return self._event['type']

    @property
    def message(self):
        return self._event['message']

    @property
    def event_id(self):
        return self._event['event_id']

    @property
    def backtrace(self):
        return self._backtrace

    @property
    def environment(self):
        return dict(self._environment)

    @property
    def context(self):
        return varmap(_identity, self._context)

    @property
    def data(self):
        return varmap(_identity, self._data)

    @property
    def api_key(self):
        return self._api_key

    @property
    def stage(self):
        return self._stage

    def __repr__(self):
        return '<%s: %s: %s>' % (type(self).__name__, self.exception_type, self.message)

    def to_dict(self):
        return {
            'notifier': {
                'name': NOTIFIER_NAME,
                'version': crashlog.VERSION,
                'language': 'python',
            },
            'api_key': self._api_key,
            'stage': self._stage,
            'event': self.event,
            'backtrace': self._backtrace.to_list(),
            'environment': self.environment,
            'context': self.context,
            'data': self.data,
        }

    def encode(self):
        """
        Serializes the report into UTF-8 encoded JSON.
        """
        return json.dumps(self.to_dict()).encode('utf-8')
