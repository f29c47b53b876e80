"""
crashlog.utils.stacks
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the CrashLog Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

LINE_FORMAT = "%s:%s:in `%s'"


def _getitem_from_frame(f_locals, key, default=None):
    """
    f_locals is not guaranteed to have .get(), but it will always
    support __getitem__. Even if it doesnt, we return ``default``.
    """
    try:
        return f_locals[key]
    except Exception:
        return default


def iter_traceback_frames(tb):
    """
    Given a traceback object, it will iterate over all
    frames that do not contain the ``__traceback_hide__``
    local variable.
    """
    while tb:
        # support for __traceback_hide__ which is used by a few libraries
        # to hide internal frames.
        f_locals = getattr(tb.tb_frame, 'f_locals', {})
        if not _getitem_from_frame(f_locals, '__traceback_hide__'):
            yield tb.tb_frame, getattr(tb, 'tb_lineno', None)
        tb = tb.tb_next


def format_frame(frame, lineno):
    f_code = getattr(frame, 'f_code', None)
    if f_code is None:
        return None
    if lineno is None:
        lineno = getattr(frame, 'f_lineno', None)
    return LINE_FORMAT % (f_code.co_filename, lineno, f_code.co_name)


def get_raw_backtrace(exception):
    """
    Returns the trace of ``exception`` as a list of
    ``"file:line:in `method'"`` strings, most recent call first.

    Objects carrying their own ``backtrace`` sequence of strings are
    returned as-is, otherwise the Python traceback is walked. Exceptions
    which were never raised have no trace and yield an empty list.
    """
    backtrace = getattr(exception, 'backtrace', None)
    if isinstance(backtrace, (list, tuple)):
        return list(backtrace)

    lines = []
    for frame, lineno in iter_traceback_frames(getattr(exception, '__traceback__', None)):
        line = format_frame(frame, lineno)
        if line is not None:
            lines.append(line)
    lines.reverse()
    return lines
