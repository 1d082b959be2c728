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
import re
import typing

import findreplace.exceptions as _exceptions
import findreplace.target as _target
import findreplace.textprocessing as _textprocessing
import findreplace.types as _types

__doc__ = """
In memory string buffer implementing :py:class:`findreplace.target.FindReplaceTarget`
"""

ModificationListener = typing.Callable[['DocumentTarget'], None]
"""
Callback invoked with the target after its text changes.
"""


class DocumentTarget(_target.FindReplaceTarget):
    """
    Find / replace target over an in memory string.

    Searching is implemented with :py:mod:`re`, literal search strings are escaped,
    whole word search uses word boundary lookarounds and case insensitive search uses
    :py:attr:`re.IGNORECASE`. Matches are restricted to the scope when one is set.

    Capabilities can be disabled through constructor arguments to model simpler targets.
    """

    def __init__(self,
                 text: str = '',
                 editable: bool = True,
                 regex: bool = True,
                 scoping: bool = True,
                 multi_selection: bool = True,
                 validate_state: typing.Callable[[], bool] | None = None):
        """
        :param text: initial text
        :param editable: can the text be modified?
        :param regex: advertise and honor regex search
        :param scoping: advertise and honor search scopes
        :param multi_selection: advertise multi selection
        :param validate_state: optional callable consulted before modification, returning ``False`` vetoes it
        """
        self.__text = text
        self.__editable = editable
        self.__regex = regex
        self.__scoping = scoping
        self.__multi_selection_supported = multi_selection
        self.__validate_state = validate_state

        self.__selection = _target.Match()
        self.__scope: _target.Match | None = None
        self.__multi_selection: list[_target.Match] = []

        self.__last_match: re.Match | None = None
        self.__last_find_failed = False

        self.__pattern_cache_key = None
        self.__pattern_cache: re.Pattern | None = None

        self.__listeners: list[ModificationListener] = []
        self.__replace_all_mode = False
        self.__modified_in_replace_all_mode = False

        self.__in_session = False

    @property
    def text(self) -> str:
        """
        The current text.
        """
        return self.__text

    def set_text(self, text: str):
        """
        Replace the entire text, resetting the selection and scope.

        :param text: new text
        """
        self.__text = text
        self.__selection = _target.Match()
        self.__scope = None
        self.__multi_selection = []
        self.__last_match = None
        self.__last_find_failed = False
        self.__modified()

    @property
    def multi_selection(self) -> list[_target.Match]:
        """
        Ranges last passed to :py:meth:`.DocumentTarget.set_multi_selection`
        """
        return list(self.__multi_selection)

    @property
    def in_session(self) -> bool:
        """
        Is this target attached to a controller session?
        """
        return self.__in_session

    @property
    def replace_all_mode(self) -> bool:
        """
        Is a replace all operation in progress?
        """
        return self.__replace_all_mode

    def add_modification_listener(self, listener: ModificationListener):
        """
        Add a callback invoked after the text changes.

        Callbacks are not invoked for each replacement during replace all mode,
        they are invoked once when replace all mode ends.

        :param listener: the callback
        """
        self.__listeners.append(listener)

    def remove_modification_listener(self, listener: ModificationListener):
        """
        Remove a modification callback by reference.

        :param listener: the previously added callback
        """
        self.__listeners.remove(listener)

    def __modified(self):
        if self.__replace_all_mode:
            self.__modified_in_replace_all_mode = True
            return

        for listener in self.__listeners:
            listener(self)

    # capabilities

    def supports_regex(self) -> bool:
        return self.__regex

    def supports_scoping(self) -> bool:
        return self.__scoping

    def supports_multi_selection(self) -> bool:
        return self.__multi_selection_supported

    def is_editable(self) -> bool:
        return self.__editable

    def validate_target_state(self) -> bool:
        if self.__validate_state is not None:
            return self.__validate_state()
        return True

    # session

    def begin_session(self):
        self.__in_session = True

    def end_session(self):
        self.__in_session = False

    def set_replace_all_mode(self, replace_all: bool):
        self.__replace_all_mode = replace_all

        if not replace_all and self.__modified_in_replace_all_mode:
            self.__modified_in_replace_all_mode = False
            self.__modified()

    # selection

    def get_selection(self) -> _target.Match:
        return self.__selection

    def get_selection_text(self) -> str:
        return self.__text[self.__selection.offset:self.__selection.end]

    def set_selection(self, offset: _types.Offset, length: _types.Length):
        offset = min(max(offset, 0), len(self.__text))
        length = min(max(length, 0), len(self.__text) - offset)

        self.__selection = _target.Match(offset, length)
        self.__last_match = None
        self.__last_find_failed = False

    def get_line_selection(self) -> _target.Match:
        selection = self.__selection

        start = self.__text.rfind('\n', 0, selection.offset) + 1

        if selection.length > 0 and self.__text[selection.end - 1] == '\n':
            end = selection.end
        else:
            end = self.__text.find('\n', selection.end)
            end = len(self.__text) if end == -1 else end + 1

        return _target.Match(start, end - start)

    def set_multi_selection(self, ranges: list[_target.Match]):
        self.__multi_selection = list(ranges)

    # scope

    def get_scope(self) -> _target.Match | None:
        return self.__scope

    def set_scope(self, scope: _target.Match | None):
        if scope is not None and scope.end > len(self.__text):
            raise ValueError(f'Scope {scope} exceeds text length {len(self.__text)}')
        self.__scope = scope

    def __search_region(self):
        if self.__scoping and self.__scope is not None:
            return self.__scope.offset, self.__scope.end
        return 0, len(self.__text)

    # searching

    def __get_pattern(self, find: str, case_sensitive: bool, whole_word: bool, regex: bool) -> re.Pattern:
        key = (find, case_sensitive, whole_word and not regex, regex)

        if key != self.__pattern_cache_key:
            self.__pattern_cache = _textprocessing.compile_search_pattern(
                find, case_sensitive=case_sensitive, whole_word=whole_word, regex=regex)
            self.__pattern_cache_key = key

        return self.__pattern_cache

    def find_and_select(self,
                        offset: _types.Offset,
                        find: str,
                        forward: bool,
                        case_sensitive: bool,
                        whole_word: bool,
                        regex: bool = False) -> _types.Offset:
        if not find:
            return -1

        pattern = self.__get_pattern(find, case_sensitive, whole_word, regex and self.__regex)

        start, end = self.__search_region()

        if forward:
            match = _textprocessing.search_forward(pattern, self.__text, offset, start, end)
        else:
            match = _textprocessing.search_backward(pattern, self.__text, offset, start, end)

        if match is None:
            self.__last_match = None
            self.__last_find_failed = True
            return -1

        self.__selection = _target.Match(match.start(), match.end() - match.start())
        self.__last_match = match
        self.__last_find_failed = False
        return match.start()

    # replacing

    def __replace_range(self, offset: _types.Offset, length: _types.Length, text: str):
        self.__text = self.__text[:offset] + text + self.__text[offset + length:]

        scope = self.__scope
        if scope is not None:
            delta = len(text) - length
            edit_end = offset + length

            if scope.offset <= offset:
                new_start = scope.offset
            elif scope.offset >= edit_end:
                new_start = scope.offset + delta
            else:
                new_start = offset

            if scope.end >= edit_end:
                new_end = scope.end + delta
            elif scope.end <= offset:
                new_end = scope.end
            else:
                new_end = offset + len(text)

            self.__scope = _target.Match(new_start, max(new_end - new_start, 0))

        self.__modified()

    def replace_selection(self, text: str, regex: bool = False):
        if not self.__editable:
            raise _exceptions.TargetStateError('Target is read only.')

        if self.__last_find_failed:
            raise _exceptions.TargetStateError(
                'The selection can not be replaced, the last find operation did not succeed.')

        if regex and self.__regex:
            if self.__last_match is None:
                raise _exceptions.TargetStateError(
                    'Regex replacement requires a preceding successful find operation.')
            text = _textprocessing.expand_replacement(self.__last_match, text)

        selection = self.__selection
        self.__replace_range(selection.offset, selection.length, text)

        self.__selection = _target.Match(selection.offset, len(text))
        self.__last_match = None

    def __str__(self):
        return f'{_types.class_and_id_string(self)} selection={self.__selection} scope={self.__scope}'


__all__ = _types.module_all()
