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
import abc
import dataclasses

import findreplace.types as _types

__doc__ = """
The abstract find / replace target, the text buffer a
:py:class:`findreplace.controller.SearchController` searches and edits.
"""


@dataclasses.dataclass(frozen=True)
class Match:
    """
    A half open range ``[offset, offset + length)`` within the text of a target.
    """

    offset: _types.Offset = 0
    """
    Start offset, never negative.
    """

    length: _types.Length = 0
    """
    Length of the range, never negative.
    """

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f'Match offset may not be negative, got: {self.offset}')
        if self.length < 0:
            raise ValueError(f'Match length may not be negative, got: {self.length}')

    @property
    def end(self) -> _types.Offset:
        """
        Offset one past the last character of the range.
        """
        return self.offset + self.length

    def contains(self, other: 'Match') -> bool:
        """
        Does this range fully contain another range?

        :param other: the other range
        :return: ``True`` or ``False``
        """
        return self.offset <= other.offset and other.end <= self.end

    def __str__(self):
        return f'[{self.offset}, {self.end})'


class FindReplaceTarget(abc.ABC):
    """
    Abstract text buffer searched and edited by a :py:class:`findreplace.controller.SearchController`

    Implementations must provide selection access, the option aware
    :py:meth:`.FindReplaceTarget.find_and_select` search primitive, and
    :py:meth:`.FindReplaceTarget.replace_selection`.

    Extended capabilities (regex, scoping, multi selection, custom search contributions)
    are advertised through the ``supports_*`` methods, which are queried once when the target
    is attached to a controller. The default implementations of the extended operations do
    nothing or fall back to the basic operations.
    """

    @abc.abstractmethod
    def get_selection(self) -> Match:
        """
        Return the current selection.

        :return: :py:class:`.Match`
        """
        pass

    @abc.abstractmethod
    def get_selection_text(self) -> str:
        """
        Return the text of the current selection.

        :return: selected text, empty string if the selection is empty
        """
        pass

    @abc.abstractmethod
    def set_selection(self, offset: _types.Offset, length: _types.Length):
        """
        Select a range of text.

        :param offset: start offset
        :param length: length of the selection
        """
        pass

    @abc.abstractmethod
    def find_and_select(self,
                        offset: _types.Offset,
                        find: str,
                        forward: bool,
                        case_sensitive: bool,
                        whole_word: bool,
                        regex: bool = False) -> _types.Offset:
        """
        Search for a string and select the match.

        A forward search finds the first match starting at or after ``offset``, a
        backward search finds the last match starting at or before ``offset``. An
        ``offset`` of ``-1`` starts at the beginning (forward) or end (backward)
        of the searchable region.

        :param offset: start offset, or ``-1``
        :param find: the search string
        :param forward: search direction
        :param case_sensitive: respect case?
        :param whole_word: only match whole words?
        :param regex: is ``find`` a regular expression?

        :raises findreplace.exceptions.PatternSyntaxError: if ``find`` is not a valid regular expression

        :return: the offset of the selected match, or ``-1`` if nothing was found
        """
        pass

    @abc.abstractmethod
    def replace_selection(self, text: str, regex: bool = False):
        """
        Replace the current selection, the inserted text becomes the new selection.

        :param text: replacement text
        :param regex: is ``text`` a regular expression replacement pattern
            that may reference groups of the last match?

        :raises findreplace.exceptions.PatternSyntaxError: if ``text`` is an invalid replacement pattern
        :raises findreplace.exceptions.TargetStateError: if the target refuses to replace in its current state
        """
        pass

    @abc.abstractmethod
    def is_editable(self) -> bool:
        """
        Can this target be modified?

        :return: ``True`` or ``False``
        """
        pass

    def validate_target_state(self) -> bool:
        """
        Give the target a chance to veto a modification, for example a
        file that must be checked out of version control before editing.

        :return: ``True`` if modification may proceed
        """
        return True

    def supports_regex(self) -> bool:
        """
        Does :py:meth:`.FindReplaceTarget.find_and_select` honor its ``regex`` argument?
        """
        return False

    def supports_scoping(self) -> bool:
        """
        Does this target implement scopes and line selection?
        """
        return False

    def supports_multi_selection(self) -> bool:
        """
        Does this target implement :py:meth:`.FindReplaceTarget.set_multi_selection`?
        """
        return False

    def uses_custom_search_contributions(self) -> bool:
        """
        Should searches go through :py:meth:`.FindReplaceTarget.find_and_select_matching`
        using a matcher chain built from :py:class:`findreplace.contributions.SearchContribution` objects?
        """
        return False

    def get_scope(self) -> Match | None:
        """
        Return the current search scope.

        :return: :py:class:`.Match` or ``None`` when the entire target is searched
        """
        return None

    def set_scope(self, scope: Match | None):
        """
        Restrict searching to a range, ``None`` removes the restriction.

        :param scope: :py:class:`.Match` or ``None``
        :raises ValueError: if the scope does not fit inside the target's text
        """
        pass

    def get_line_selection(self) -> Match:
        """
        Return the current selection extended to whole lines.

        :return: :py:class:`.Match`
        """
        return self.get_selection()

    def set_multi_selection(self, ranges: list[Match]):
        """
        Select several ranges at once.

        :param ranges: list of :py:class:`.Match`
        """
        pass

    def begin_session(self):
        """
        Called when the target is attached to a controller.
        """
        pass

    def end_session(self):
        """
        Called when the target is detached from a controller.
        """
        pass

    def set_replace_all_mode(self, replace_all: bool):
        """
        Hint that a bulk replace is starting (``True``) or finished (``False``).

        Targets may suppress expensive change notifications while in this mode.

        :param replace_all: entering or leaving bulk mode
        """
        pass

    def get_search_contributions(self) -> list:
        """
        Return the :py:class:`findreplace.contributions.SearchContribution` objects this target offers.

        :return: list of contributions
        """
        return []

    def find_and_select_matching(self,
                                 offset: _types.Offset,
                                 find: str,
                                 forward: bool,
                                 matcher) -> _types.Offset:
        """
        Search using a :py:class:`findreplace.matchers.Matcher` chain instead of the built in options.

        Only called when :py:meth:`.FindReplaceTarget.uses_custom_search_contributions` returns ``True``

        :param offset: start offset, or ``-1``
        :param find: the search string
        :param forward: search direction
        :param matcher: :py:class:`findreplace.matchers.Matcher`
        :return: the offset of the selected match, or ``-1`` if nothing was found
        """
        raise NotImplementedError(
            f'{self.__class__.__name__} does not support custom search contributions.')


__all__ = _types.module_all()
