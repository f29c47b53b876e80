"""
crashlog.backtrace
~~~~~~~~~~~~~~~~~~

Turns raw trace lines into structured frames.

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import re
from collections import namedtuple

from crashlog.utils.stacks import get_raw_backtrace

__all__ = ('Frame', 'Backtrace', 'parse_line', 'default_filters')

Frame = namedtuple('Frame', ('file', 'line', 'method'))

# app/models/user.rb:42:in `save'
_line_re = re.compile(r"^\s*(?P<file>.+?):(?P<line>\d+)(?::in [`'](?P<method>[^']*)')?\s*$")

# File "app/models.py", line 42, in save
_python_line_re = re.compile(r'^\s*File "(?P<file>.+)", line (?P<line>\d+)(?:, in (?P<method>.+?))?\s*$')

_site_packages_re = re.compile(r'^.*?[/\\](?:site|dist)-packages[/\\]')

PROJECT_ROOT = '[PROJECT_ROOT]'
PACKAGES = '[PACKAGES]/'


def parse_line(line):
    """
    Parses a single trace line into a ``Frame``.

    Returns ``None`` for anything which doesn't look like a trace line.
    """
    if not isinstance(line, str):
        return None

    match = _python_line_re.match(line) or _line_re.match(line)
    if match is None:
        return None

    return Frame(match.group('file'), int(match.group('line')),
                 match.group('method') or None)


def default_filters(project_root=None):
    """
    Returns the filters applied to every backtrace: the project root is
    replaced with ``[PROJECT_ROOT]`` and installed packages are shortened
    to ``[PACKAGES]/<package path>``.
    """
    filters = []

    root = (project_root or '').rstrip('/\\')
    # a root of "/" would match every absolute path
    if root:
        # only a leading path, up to a separator, is the project root
        root_re = re.compile(r'^(\s*(?:File ")?)%s(?=[/\\])' % re.escape(root))

        def filter_project_root(line):
            return root_re.sub(r'\g<1>' + PROJECT_ROOT, line, count=1)

        filters.append(filter_project_root)

    filters.append(filter_site_packages)
    return filters


def filter_site_packages(line):
    return _site_packages_re.sub(PACKAGES, line, count=1)


class Backtrace(object):
    """
    An ordered, read-only sequence of ``Frame``, most recent call first.
    """

    def __init__(self, frames=()):
        self._frames = tuple(frames)

    @classmethod
    def parse(cls, lines, filters=(), limit=None):
        """
        Builds a backtrace from raw trace lines.

        Every filter is called with the line and returns the rewritten
        line, or ``None`` to drop it. Lines which fail to parse are
        skipped.
        """
        frames = []
        for line in lines or ():
            if not isinstance(line, str):
                continue

            for func in filters:
                if line is None:
                    break
                line = func(line)

            frame = parse_line(line)
            if frame is not None:
                frames.append(frame)

        if limit is not None:
            frames = frames[:limit]

        return cls(frames)

    @classmethod
    def from_exception(cls, exception, configuration=None):
        lines = get_raw_backtrace(exception)
        if configuration is None:
            return cls.parse(lines)

        return cls.parse(lines,
                         filters=configuration.get_backtrace_filters(),
                         limit=configuration.backtrace_limit)

    @property
    def frames(self):
        return self._frames

    def __iter__(self):
        return iter(self._frames)

    def __len__(self):
        return len(self._frames)

    def __getitem__(self, index):
        return self._frames[index]

    def __eq__(self, other):
        return isinstance(other, Backtrace) and self._frames == other._frames

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return '<%s: %d frames>' % (type(self).__name__, len(self._frames))

    def to_list(self):
        return [{
            'file': frame.file,
            'number': frame.line,
            'method': frame.method,
        } for frame in self._frames]
