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
import typing

import findreplace.matchers as _matchers
import findreplace.types as _types

__doc__ = """
Pluggable search contributions.

A search contribution pairs a label with a :py:class:`findreplace.matchers.Matcher` factory, targets
that search something other than plain text (for example rows of a problem view) offer contributions
and the controller folds the active ones into a matcher chain with :py:func:`findreplace.matchers.build_matcher_chain`.
"""


class SearchContribution(abc.ABC):
    """
    Abstract search contribution.
    """

    label: str = ''
    """
    Short display label.
    """

    tooltip: str = ''
    """
    Longer description of what the contribution does.
    """

    @abc.abstractmethod
    def create_matcher(self) -> _matchers.Matcher:
        """
        Create the matcher implementing this contribution.

        :return: :py:class:`findreplace.matchers.Matcher`
        """
        pass

    def is_active(self, active_contributions: typing.Sequence['SearchContribution']) -> bool:
        """
        Decide if this contribution participates given the set of currently active contributions.

        :param active_contributions: active contributions, may include this one
        :return: ``True`` if this contribution should be part of the matcher chain
        """
        return True

    def __str__(self):
        return self.label

    def __repr__(self):
        return f'{self.__class__.__name__}({self.label!r})'


class CaseSensitiveSearchContribution(SearchContribution):
    """
    Match the search string respecting case.
    """

    label = 'Case'
    tooltip = 'Perform a Case-Sensitive Search'

    def create_matcher(self) -> _matchers.Matcher:
        return _matchers.CaseSensitiveMatcher()


class CaseInsensitiveSearchContribution(SearchContribution):
    """
    Match the search string ignoring case.

    Steps aside whenever a :py:class:`.CaseSensitiveSearchContribution` is active.
    """

    label = 'case insensitive'
    tooltip = 'Perform a Case-Insensitive Search'

    def create_matcher(self) -> _matchers.Matcher:
        return _matchers.NormalMatcher()

    def is_active(self, active_contributions: typing.Sequence[SearchContribution]) -> bool:
        return not any(isinstance(c, CaseSensitiveSearchContribution) for c in active_contributions)


class WholeWordSearchContribution(SearchContribution):
    """
    Match the search string only as a whole space separated token.
    """

    label = 'whole word'
    tooltip = 'Only search for whole words'

    def create_matcher(self) -> _matchers.Matcher:
        return _matchers.WholeWordMatcher()


class GroupedSearchContribution(SearchContribution):
    """
    Suppress consecutive duplicate candidates.

    Every call to :py:meth:`.GroupedSearchContribution.create_matcher` returns a
    fresh :py:class:`findreplace.matchers.GroupedSearch`, so duplicate tracking
    never leaks between separately built chains.
    """

    label = 'grouped'
    tooltip = 'Skip consecutive duplicate matches'

    def create_matcher(self) -> _matchers.Matcher:
        return _matchers.GroupedSearch()


__all__ = _types.module_all()
