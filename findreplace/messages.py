# Copyright (c) 2023, Teriks
#
# findreplace is distributed under the following BSD 3-Clause License
#
# Redistribution and use in source and binary forms, with or without modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice, this list of conditions and the following disclaimer in
#    the documentation and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON
# ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
import contextlib
import sys
import typing

__doc__ = """
Library logging / informational output.

The find / replace controller reports debug information about target attachment,
scope changes and bulk operation counts here, the command line tool writes its
per file results and errors here.
"""

LEVEL = 1
"""
Current log level, a bitfield of :py:attr:`INFO`, :py:attr:`WARNING`, :py:attr:`ERROR` and :py:attr:`DEBUG`

:py:attr:`INFO` prints everything except debug output, :py:attr:`DEBUG` prints everything.
"""

INFO = 1
"""Log level ``INFO``"""
WARNING = 2
"""Log Level ``WARNING``"""
ERROR = 4
"""Log Level ``ERROR``"""
DEBUG = 8
"""Log Level ``DEBUG``"""

_ERROR_FILE = sys.stderr
_MESSAGE_FILE = sys.stdout

_level_stack = []


def push_level(level):
    """
    Set :py:attr:`findreplace.messages.LEVEL` and save the previous value to a stack.

    :param level: one of :py:attr:`.INFO`, :py:attr:`.WARNING`, :py:attr:`.ERROR`, :py:attr:`.DEBUG`
    """
    global LEVEL
    _level_stack.append(LEVEL)
    LEVEL = level


def pop_level():
    """
    Restore the ``LEVEL`` value last saved by :py:func:`.push_level`, no-op when nothing was saved.
    """
    global LEVEL

    if _level_stack:
        LEVEL = _level_stack.pop()


@contextlib.contextmanager
def with_level(level):
    """
    Use a log level for the duration of a ``with`` block.

    :param level: log level
    """
    try:
        push_level(level)
        yield
    finally:
        pop_level()


def set_error_file(file: typing.TextIO):
    """
    Set a file stream or file like object for error output.

    :param file: The file stream
    """
    global _ERROR_FILE
    _ERROR_FILE = file


def set_message_file(file: typing.TextIO):
    """
    Set a file stream or file like object for normal (non error) output.

    :param file: The file stream
    """
    global _MESSAGE_FILE
    _MESSAGE_FILE = file


def get_error_file():
    """
    Get the file stream or file like object for error output.
    """
    return _ERROR_FILE


def get_message_file():
    """
    Get the file stream or file like object for normal (non error) output.
    """
    return _MESSAGE_FILE


def _allowed_levels():
    allowed = set()

    if LEVEL & INFO:
        allowed.update({INFO, ERROR, WARNING})
    if LEVEL & ERROR:
        allowed.add(ERROR)
    if LEVEL & WARNING:
        allowed.add(WARNING)
    if LEVEL & DEBUG:
        allowed.update({INFO, ERROR, WARNING, DEBUG})

    return allowed


def log(*args: typing.Any, level=INFO):
    """
    Write a message to the log.

    :param args: args, objects that will be stringified and joined with a space
    :param level: Log level, one of:
        :py:attr:`.INFO`, :py:attr:`.WARNING`, :py:attr:`.ERROR`, :py:attr:`.DEBUG`
    """
    if level not in _allowed_levels():
        return

    file = _ERROR_FILE if level == ERROR else _MESSAGE_FILE

    prefix = ''
    if level == DEBUG:
        prefix = 'DEBUG: '
    elif level == WARNING:
        prefix = 'WARNING: '

    print(prefix + ' '.join(str(a) for a in args), file=file, flush=True)


def error(*args: typing.Any):
    """
    Write an error message to the log.

    :param args: args, objects that will be stringified and joined with a space
    """
    log(*args, level=ERROR)


def warning(*args: typing.Any):
    """
    Write a warning message to the log.

    :param args: args, objects that will be stringified and joined with a space
    """
    log(*args, level=WARNING)


def debug_log(*func_or_str: typing.Callable[[], typing.Any] | typing.Any):
    """
    Log strings, or the results of possibly expensive callables, only if
    :py:attr:`.LEVEL` has the :py:attr:`.DEBUG` bit set.

    :param func_or_str: objects to be stringified and printed or callables that return said objects
    """
    if LEVEL & DEBUG:
        log(*(val() if callable(val) else val for val in func_or_str), level=DEBUG)


def log_status(status, *prefix: typing.Any):
    """
    Write a find / replace status to the log at the level matching its severity.

    Error statuses go to :py:func:`.error`, warning statuses to :py:func:`.warning`
    and everything else to :py:func:`.log`. Statuses with an empty message are not logged.

    :param status: :py:class:`findreplace.status.Status`
    :param prefix: objects printed in front of the status message
    """
    if not status.message:
        return

    if status.error:
        error(*prefix, status.message)
    elif status.warning:
        warning(*prefix, status.message)
    else:
        log(*prefix, status.message)
