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
import typing

import findreplace.contributions as _contributions
import findreplace.exceptions as _exceptions
import findreplace.matchers as _matchers
import findreplace.target as _target
import findreplace.types as _types

__doc__ = """
Read only find / replace target over a list of rows, for example the entries of a problem view.

Offsets address rows rather than characters, a selected row is the range ``[row, row + 1)``.
Searching is done with :py:class:`findreplace.matchers.Matcher` chains built from search contributions.
"""


class RowListTarget(_target.FindReplaceTarget):
    """
    Searchable, read only list of text rows.
    """

    def __init__(self,
                 rows: typing.Iterable[str],
                 search_contributions: typing.Sequence[_contributions.SearchContribution] | None = None):
        """
        :param rows: the rows
        :param search_contributions: contributions offered to the controller,
            defaults to case sensitive, case insensitive, whole word and grouped search
        """
        self.__rows = list(rows)
        self.__selection = _target.Match()
        self.__multi_selection: list[_target.Match] = []

        if search_contributions is None:
            search_contributions = [
                _contributions.CaseSensitiveSearchContribution(),
                _contributions.CaseInsensitiveSearchContribution(),
                _contributions.WholeWordSearchContribution(),
                _contributions.GroupedSearchContribution()
            ]

        self.__search_contributions = list(search_contributions)

    @property
    def rows(self) -> list[str]:
        """
        The rows.
        """
        return list(self.__rows)

    @property
    def selected_rows(self) -> list[int]:
        """
        Indices of the rows covered by the multi selection, or the single selection when there is none.
        """
        ranges = self.__multi_selection if self.__multi_selection else [self.__selection]
        indices = []
        for r in ranges:
            indices.extend(range(r.offset, r.end))
        return indices

    def is_editable(self) -> bool:
        return False

    def supports_multi_selection(self) -> bool:
        return True

    def uses_custom_search_contributions(self) -> bool:
        return True

    def get_search_contributions(self) -> list[_contributions.SearchContribution]:
        return list(self.__search_contributions)

    def get_selection(self) -> _target.Match:
        return self.__selection

    def get_selection_text(self) -> str:
        return '\n'.join(self.__rows[self.__selection.offset:self.__selection.end])

    def set_selection(self, offset: _types.Offset, length: _types.Length):
        offset = min(max(offset, 0), len(self.__rows))
        length = min(max(length, 0), len(self.__rows) - offset)
        self.__selection = _target.Match(offset, length)
        self.__multi_selection = []

    def set_multi_selection(self, ranges: list[_target.Match]):
        self.__multi_selection = list(ranges)

    def find_and_select(self,
                        offset: _types.Offset,
                        find: str,
                        forward: bool,
                        case_sensitive: bool,
                        whole_word: bool,
                        regex: bool = False) -> _types.Offset:
        matcher = _matchers.CaseSensitiveMatcher() if case_sensitive else _matchers.NormalMatcher()
        if whole_word:
            matcher = matcher.chain(_matchers.WholeWordMatcher())
        return self.find_and_select_matching(offset, find, forward, matcher)

    def find_and_select_matching(self,
                                 offset: _types.Offset,
                                 find: str,
                                 forward: bool,
                                 matcher: _matchers.Matcher) -> _types.Offset:
        count = len(self.__rows)

        if forward:
            start = 0 if offset == -1 else offset
            indices = range(start, count)
        else:
            start = count - 1 if offset == -1 else min(offset, count - 1)
            indices = range(start, -1, -1)

        for index in indices:
            if matcher.matches(self.__rows[index], find):
                self.__selection = _target.Match(index, 1)
                self.__multi_selection = []
                return index

        return -1

    def replace_selection(self, text: str, regex: bool = False):
        raise _exceptions.TargetStateError('Rows can not be replaced, the target is read only.')


__all__ = _types.module_all()
