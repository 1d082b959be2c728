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

import findreplace.textprocessing as _textprocessing
import findreplace.types as _types

__doc__ = """
Composable string predicates used to filter candidate strings by several search criteria at once.

A matcher may wrap a delegate matcher, a candidate matches only if every matcher in the chain matches it.
Chains are persistent, :py:meth:`Matcher.chain` never modifies the matcher it is called on.

Example:

.. code-block:: python

    matcher = WholeWordMatcher().chain(CaseSensitiveMatcher())

    matcher.matches('two Two words', 'Two')  # True
    matcher.matches('two words', 'Two')  # False
"""


class Matcher(abc.ABC):
    """
    Abstract string predicate with an optional delegate.
    """

    def __init__(self, delegate: typing.Optional['Matcher'] = None):
        """
        :param delegate: matcher that must also match for this matcher to match
        """
        self.__delegate = delegate

    @property
    def delegate(self) -> typing.Optional['Matcher']:
        """
        The wrapped matcher, or ``None``
        """
        return self.__delegate

    def chain(self, next_matcher: 'Matcher') -> 'Matcher':
        """
        Return a new matcher of the same kind that additionally requires ``next_matcher`` to match.

        ``next_matcher`` is appended to the end of this matcher's delegate chain,
        this matcher is left unmodified.

        :param next_matcher: the matcher to append
        :return: new :py:class:`.Matcher`
        """
        if self.__delegate is not None:
            return self._with_delegate(self.__delegate.chain(next_matcher))
        return self._with_delegate(next_matcher)

    def _with_delegate(self, delegate: 'Matcher') -> 'Matcher':
        return self.__class__(delegate)

    def delegate_matches(self, candidate: str, search: str) -> bool:
        """
        Evaluate the delegate chain, ``True`` when there is no delegate.

        :param candidate: candidate string
        :param search: search string
        :return: ``True`` or ``False``
        """
        if self.__delegate is None:
            return True
        return self.__delegate.matches(candidate, search)

    def matches(self, candidate: str, search: str) -> bool:
        """
        Test a candidate string against this matcher and its delegates.

        :param candidate: candidate string, for example a row of text
        :param search: search string
        :return: ``True`` if every matcher in the chain matches
        """
        delegate_matched = self.delegate_matches(candidate, search)
        return self._matches(candidate, search) and delegate_matched

    @abc.abstractmethod
    def _matches(self, candidate: str, search: str) -> bool:
        """
        Implementation specific test, ignoring the delegate.
        """
        pass

    def __str__(self):
        if self.__delegate is None:
            return self.__class__.__name__
        return f'{self.__class__.__name__} -> {self.__delegate}'

    def __repr__(self):
        return str(self)


class CaseSensitiveMatcher(Matcher):
    """
    Matches when the first line of the candidate contains the search string verbatim.
    """

    def _matches(self, candidate: str, search: str) -> bool:
        return search in _textprocessing.first_line(candidate)


class NormalMatcher(Matcher):
    """
    Matches when the first line of the candidate contains the search string, ignoring case.
    """

    def _matches(self, candidate: str, search: str) -> bool:
        return search.lower() in _textprocessing.first_line(candidate.lower())


class WholeWordMatcher(Matcher):
    """
    Matches when the search string is one of the space separated tokens on the first line of the candidate.
    """

    def _matches(self, candidate: str, search: str) -> bool:
        return search in _textprocessing.first_line(candidate).split(' ')


class GroupedSearch(Matcher):
    """
    Suppresses consecutive duplicate candidates.

    Remembers the last candidate accepted by the delegate chain, and rejects that
    same candidate if it is presented again immediately afterward. State belongs to
    the instance, matchers returned by :py:meth:`.Matcher.chain` start fresh.
    """

    def __init__(self, delegate: Matcher | None = None):
        super().__init__(delegate)
        self.__last_match = None

    def matches(self, candidate: str, search: str) -> bool:
        delegate_matched = self.delegate_matches(candidate, search)

        if self.__last_match == candidate:
            return False

        if delegate_matched:
            self.__last_match = candidate

        return delegate_matched

    def _matches(self, candidate: str, search: str) -> bool:
        return self.__last_match != candidate

    def reset(self):
        """
        Forget the last accepted candidate.
        """
        self.__last_match = None


class MatchAll(Matcher):
    """
    Neutral element, matches everything its delegate matches, or anything at all when it has no delegate.
    """

    def _matches(self, candidate: str, search: str) -> bool:
        return True


def build_matcher_chain(contributions: typing.Sequence,
                        active_contributions: typing.Sequence | None = None,
                        root: Matcher | None = None) -> Matcher:
    """
    Fold the matchers of eligible search contributions onto a root matcher.

    A contribution is eligible when its ``is_active`` method accepts the active contribution set.

    :param contributions: :py:class:`findreplace.contributions.SearchContribution` objects to fold, in order
    :param active_contributions: the currently active contributions used for eligibility
        checks, defaults to ``contributions``
    :param root: matcher to fold onto, defaults to a new :py:class:`.MatchAll`
    :return: :py:class:`.Matcher`, ``root`` itself when nothing is eligible
    """
    if active_contributions is None:
        active_contributions = contributions

    chain = root if root is not None else MatchAll()
    for contribution in contributions:
        if contribution.is_active(active_contributions):
            chain = chain.chain(contribution.create_matcher())
    return chain


__all__ = _types.module_all()
