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
import enum

import findreplace.types as _types

__doc__ = """
Search option flags toggled on a :py:class:`findreplace.controller.SearchController`.
"""


class SearchOptions(enum.Enum):
    """
    Represents the toggleable find / replace options.
    """

    FORWARD = 1
    """
    Search towards the end of the target, when inactive searches go backward.
    """

    GLOBAL = 2
    """
    Search the entire target, when inactive searches are restricted to the selected lines (range scope).
    """

    CASE_SENSITIVE = 3
    """
    Respect case when matching.
    """

    WHOLE_WORD = 4
    """
    Only match whole words, only applied to single word literal search strings.
    """

    REGEX = 5
    """
    Interpret the search string as a regular expression, if the target supports it.
    """

    WRAP = 6
    """
    Wrap around the start or end of the target when a search runs off the end.
    """

    INCREMENTAL = 7
    """
    Search as you type, relative to a stable anchor position.
    """


_OPTION_STRINGS = {
    SearchOptions.FORWARD: 'forward',
    SearchOptions.GLOBAL: 'global',
    SearchOptions.CASE_SENSITIVE: 'case-sensitive',
    SearchOptions.WHOLE_WORD: 'whole-word',
    SearchOptions.REGEX: 'regex',
    SearchOptions.WRAP: 'wrap',
    SearchOptions.INCREMENTAL: 'incremental'
}

_STRING_OPTIONS = {v: k for k, v in _OPTION_STRINGS.items()}


def get_search_option_enum(id_str: SearchOptions | str) -> SearchOptions:
    """
    Get a :py:class:`.SearchOptions` enum value from a string.

    Underscores are accepted in place of dashes and case is ignored.

    :param id_str: one of: "forward", "global", "case-sensitive",
        "whole-word", "regex", "wrap", or "incremental"

    :raises ValueError: if an invalid string value (name) is passed

    :return: :py:class:`.SearchOptions`
    """

    if isinstance(id_str, SearchOptions):
        return id_str

    try:
        return _STRING_OPTIONS[id_str.strip().lower().replace('_', '-')]
    except (KeyError, AttributeError):
        raise ValueError(f'invalid SearchOptions string: {id_str}')


def get_search_option_string(option_enum: SearchOptions | str) -> str:
    """
    Convert a :py:class:`.SearchOptions` enum value to a string.

    :param option_enum: :py:class:`.SearchOptions` value

    :return: one of: "forward", "global", "case-sensitive",
        "whole-word", "regex", "wrap", or "incremental"
    """
    return _OPTION_STRINGS[get_search_option_enum(option_enum)]


def supported_search_option_strings() -> list[str]:
    """
    Return every string accepted by :py:func:`.get_search_option_enum`

    :return: list of strings
    """
    return list(_OPTION_STRINGS.values())


__all__ = _types.module_all()
