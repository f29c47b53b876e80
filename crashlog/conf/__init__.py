"""
crashlog.conf
~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import os

from crashlog.conf import defaults
from crashlog.processors import SanitizePasswordsProcessor

__all__ = ('Configuration',)


class Configuration(object):
    """
    Holds every CrashLog setting. Only ``api_key`` has to be supplied, the
    rest fall back to the values in ``crashlog.conf.defaults``.

    >>> config = Configuration()
    >>> config.update(api_key='0123456789', stage='staging')
    >>> config.is_valid()
    True

    Settings are changed through ``update`` (or ``crashlog.configure``),
    normally once while the application boots.
    """

    def __init__(self, **options):
        environ = os.environ

        self.api_key = environ.get(defaults.ENV_API_KEY) or None
        self.secret = environ.get(defaults.ENV_SECRET) or None
        self.scheme = defaults.SCHEME
        self.host = environ.get(defaults.ENV_HOST) or defaults.HOST
        self.port = defaults.PORT
        self.endpoint = defaults.ENDPOINT
        self.announce_endpoint = defaults.ANNOUNCE_ENDPOINT
        self.timeout = defaults.TIMEOUT
        self.stage = environ.get(defaults.ENV_STAGE) or defaults.STAGE
        self.release_stages = defaults.RELEASE_STAGES
        self.ignore = list(defaults.IGNORE)
        self.project_root = defaults.get_project_root()
        self.backtrace_filters = []
        self.backtrace_limit = defaults.BACKTRACE_LIMIT
        self.sanitize_keys = set(SanitizePasswordsProcessor.FIELDS)
        self.locate_url = defaults.LOCATE_URL
        self.logger = None

        if options:
            self.update(**options)

    def __repr__(self):
        return '<%s: host=%r stage=%r>' % (
            type(self).__name__, self.host, self.stage)

    def update(self, **options):
        """
        Applies ``options`` to this configuration.

        Unknown settings raise ``AttributeError`` before anything is
        changed.
        """
        unknown = sorted(k for k in options if k not in vars(self))
        if unknown:
            raise AttributeError('Unknown CrashLog settings: %s' % ', '.join(unknown))

        for key, value in options.items():
            setattr(self, key, value)
        return self

    def invalid_keys(self):
        """
        Returns the set of required settings which are missing or
        malformed.
        """
        from crashlog.transport.registry import default_registry

        invalid = set()
        for key in defaults.REQUIRED_KEYS:
            value = getattr(self, key, None)
            if not isinstance(value, str) or not value.strip():
                invalid.add(key)

        if 'scheme' not in invalid and not default_registry.supported_scheme(self.scheme):
            invalid.add('scheme')

        return invalid

    def is_valid(self):
        return not self.invalid_keys()

    def is_ignored(self, exception):
        """
        Returns True if the exception's class, or any of its base classes,
        is named in ``ignore``.

        Names may be bare (``'ValueError'``) or dotted with the module
        (``'myapp.errors.NotFound'``).
        """
        if exception is None or not self.ignore:
            return False

        ignored = set(self.ignore)
        for name in get_class_names(exception):
            if name in ignored:
                return True
        return False

    def is_release_stage(self):
        if self.release_stages is None:
            return True
        return self.stage in self.release_stages

    def get_backtrace_filters(self):
        from crashlog.backtrace import default_filters

        return default_filters(self.project_root) + list(self.backtrace_filters or ())

    @property
    def base_url(self):
        netloc = self.host
        if self.port:
            netloc += ':%s' % self.port
        return '%s://%s' % (self.scheme, netloc)

    @property
    def events_url(self):
        return self.base_url + self.endpoint

    @property
    def announce_url(self):
        return self.base_url + self.announce_endpoint

    def get_locate_url(self, location_id):
        """
        Returns the URL of a delivered event. A ``locate_url`` without a
        ``%s`` placeholder gets the id appended.
        """
        template = self.locate_url or ''
        try:
            return template % (location_id,)
        except (TypeError, ValueError):
            return template + str(location_id)


def get_class_names(exception):
    """
    Yields the bare and dotted names of every class in the exception's
    MRO.
    """
    cls = type(exception)
    for klass in getattr(cls, '__mro__', (cls,)):
        if klass is object:
            continue
        name = getattr(klass, '__name__', None)
        if not name:
            continue
        yield name
        module = getattr(klass, '__module__', None)
        if module:
            yield '%s.%s' % (module, name)
