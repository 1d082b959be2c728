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
import types
import typing

__doc__ = """
Commonly used static type definitions and small utilities for introspecting on objects.
"""

Offset = int
Length = int

OptionalString = typing.Optional[str]

CancelCheck = typing.Callable[[], bool]
OptionalCancelCheck = typing.Optional[CancelCheck]


def class_and_id_string(obj) -> str:
    """
    Return a string formatted with an objects class name next to its memory ID.

    IE: `<ClassName: id_integer>`

    :param obj: the obj
    :return: formatted string
    """
    return f'<{obj.__class__.__name__}: {str(id(obj))}>'


def parse_bool(string_or_bool: str | bool) -> bool:
    """
    Parse a case insensitive boolean value from a string, for example "true" or "false"

    Additionally, values that are already bool are passed through.

    :raises ValueError: on parse failure.

    :param string_or_bool: the string, or a bool value
    :return: python boolean type equivalent
    """
    if isinstance(string_or_bool, bool):
        return string_or_bool

    try:
        return {'true': True, 'false': False}[string_or_bool.strip().lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f'"{string_or_bool}" is not a boolean value')


def module_all():
    """
    Return the name of all public non-module type global objects inside the current module.

    Can be used for __all__

    :return: list of names
    """
    import sys

    frame = sys._getframe(1)
    caller_globals = frame.f_globals

    all_names = []
    for name, value in caller_globals.items():
        if not name.startswith('_') and not isinstance(value, types.ModuleType):
            all_names.append(name)

    return all_names


def partial_deep_copy_container(container: list | tuple | dict | set):
    """
    Partially copy nested containers, handles lists, tuples, dicts, and sets.

    :param container: top level container

    :return: structure with all containers copied
    """
    if isinstance(container, list):
        return [partial_deep_copy_container(v) for v in container]
    if isinstance(container, tuple):
        return tuple(partial_deep_copy_container(v) for v in container)
    elif isinstance(container, dict):
        return {k: partial_deep_copy_container(v) for k, v in container.items()}
    elif isinstance(container, set):
        return {partial_deep_copy_container(v) for v in container}
    else:
        return container


__all__ = module_all()
