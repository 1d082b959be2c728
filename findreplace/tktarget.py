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
import tkinter as tk

import findreplace.exceptions as _exceptions
import findreplace.target as _target
import findreplace.textprocessing as _textprocessing
import findreplace.types as _types

__doc__ = """
Adapter exposing a :py:class:`tkinter.Text` widget as a :py:class:`findreplace.target.FindReplaceTarget`
"""


class TkTextTarget(_target.FindReplaceTarget):
    """
    Find / replace target backed by a :py:class:`tkinter.Text` widget.

    The selection is the widget's ``sel`` tag, or the insert cursor when nothing is
    selected. The search scope is kept in the :py:attr:`.TkTextTarget.SCOPE_TAG` tag and
    is highlighted while a controller session is active.
    """

    SCOPE_TAG = 'findreplace_scope'
    """
    Text tag marking the search scope.
    """

    def __init__(self, text_widget: tk.Text, scope_background: str = '#e8e8ff'):
        """
        :param text_widget: the widget
        :param scope_background: background color used to highlight the scope during a session
        """
        self.__widget = text_widget
        self.__scope_background = scope_background
        self.__last_match: re.Match | None = None
        self.__last_find_failed = False

    @property
    def text_widget(self) -> tk.Text:
        """
        The wrapped widget.
        """
        return self.__widget

    def __index(self, offset: _types.Offset) -> str:
        return self.__widget.index(f'1.0 + {offset} chars')

    def __offset(self, index) -> _types.Offset:
        return len(self.__widget.get('1.0', index))

    def __content(self) -> str:
        return self.__widget.get('1.0', 'end-1c')

    def __tag_range(self, tag: str) -> _target.Match | None:
        ranges = self.__widget.tag_ranges(tag)
        if not ranges:
            return None
        start = self.__offset(ranges[0])
        end = self.__offset(ranges[-1])
        return _target.Match(start, end - start)

    # capabilities

    def supports_regex(self) -> bool:
        return True

    def supports_scoping(self) -> bool:
        return True

    def supports_multi_selection(self) -> bool:
        return True

    def is_editable(self) -> bool:
        return str(self.__widget.cget('state')) != tk.DISABLED

    # session

    def begin_session(self):
        self.__widget.tag_configure(self.SCOPE_TAG, background=self.__scope_background)
        self.__widget.tag_lower(self.SCOPE_TAG, 'sel')

    def end_session(self):
        self.__widget.tag_remove(self.SCOPE_TAG, '1.0', tk.END)

    def set_replace_all_mode(self, replace_all: bool):
        if replace_all:
            self.__widget.edit_separator()

    # selection

    def get_selection(self) -> _target.Match:
        selection = self.__tag_range(tk.SEL)
        if selection is not None:
            return selection
        return _target.Match(self.__offset(tk.INSERT), 0)

    def get_selection_text(self) -> str:
        selection = self.get_selection()
        return self.__content()[selection.offset:selection.end]

    def set_selection(self, offset: _types.Offset, length: _types.Length):
        self.__select(offset, length)
        self.__last_match = None
        self.__last_find_failed = False

    def __select(self, offset: _types.Offset, length: _types.Length):
        self.__widget.tag_remove(tk.SEL, '1.0', tk.END)

        start = self.__index(offset)
        end = self.__index(offset + length)

        if length > 0:
            self.__widget.tag_add(tk.SEL, start, end)

        self.__widget.mark_set(tk.INSERT, end)
        self.__widget.see(tk.INSERT)

    def get_line_selection(self) -> _target.Match:
        selection = self.get_selection()

        start = self.__widget.index(f'{self.__index(selection.offset)} linestart')

        if selection.length > 0 and self.get_selection_text().endswith('\n'):
            end = self.__index(selection.end)
        else:
            end = self.__widget.index(f'{self.__index(selection.end)} lineend + 1 chars')

        start_offset = self.__offset(start)
        end_offset = min(self.__offset(end), len(self.__content()))
        return _target.Match(start_offset, end_offset - start_offset)

    def set_multi_selection(self, ranges: list[_target.Match]):
        self.__widget.tag_remove(tk.SEL, '1.0', tk.END)
        for r in ranges:
            self.__widget.tag_add(tk.SEL, self.__index(r.offset), self.__index(r.end))

    # scope

    def get_scope(self) -> _target.Match | None:
        return self.__tag_range(self.SCOPE_TAG)

    def set_scope(self, scope: _target.Match | None):
        self.__widget.tag_remove(self.SCOPE_TAG, '1.0', tk.END)
        if scope is not None and scope.length > 0:
            self.__widget.tag_add(self.SCOPE_TAG, self.__index(scope.offset), self.__index(scope.end))

    # searching

    def find_and_select(self,
                        offset: _types.Offset,
                        find: str,
                        forward: bool,
                        case_sensitive: bool,
                        whole_word: bool,
                        regex: bool = False) -> _types.Offset:
        if not find:
            return -1

        pattern = _textprocessing.compile_search_pattern(
            find, case_sensitive=case_sensitive, whole_word=whole_word, regex=regex)

        content = self.__content()
        scope = self.get_scope()

        if scope is not None:
            start, end = scope.offset, scope.end
        else:
            start, end = 0, len(content)

        if forward:
            match = _textprocessing.search_forward(pattern, content, offset, start, end)
        else:
            match = _textprocessing.search_backward(pattern, content, offset, start, end)

        if match is None:
            self.__last_match = None
            self.__last_find_failed = True
            return -1

        self.__select(match.start(), match.end() - match.start())
        self.__last_match = match
        self.__last_find_failed = False
        return match.start()

    def replace_selection(self, text: str, regex: bool = False):
        if not self.is_editable():
            raise _exceptions.TargetStateError('Text widget is disabled.')

        if self.__last_find_failed:
            raise _exceptions.TargetStateError(
                'The selection can not be replaced, the last find operation did not succeed.')

        if regex:
            if self.__last_match is None:
                raise _exceptions.TargetStateError(
                    'Regex replacement requires a preceding successful find operation.')
            text = _textprocessing.expand_replacement(self.__last_match, text)

        selection = self.get_selection()
        scope = self.get_scope()

        start = self.__index(selection.offset)
        self.__widget.delete(start, self.__index(selection.end))
        self.__widget.insert(start, text)

        if scope is not None and scope.offset <= selection.offset and selection.end <= scope.end:
            self.set_scope(_target.Match(scope.offset, scope.length - selection.length + len(text)))

        self.__select(selection.offset, len(text))
        self.__last_match = None


__all__ = _types.module_all()
