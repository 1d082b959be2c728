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

import findreplace.constants as _constants
import findreplace.contributions as _contributions
import findreplace.exceptions as _exceptions
import findreplace.matchers as _matchers
import findreplace.messages as _messages
import findreplace.options as _options
import findreplace.session as _session
import findreplace.status as _status
import findreplace.target as _target
import findreplace.textprocessing as _textprocessing
import findreplace.types as _types

__doc__ = """
The find / replace controller.

:py:class:`SearchController` owns the search options and the session for the currently
attached :py:class:`findreplace.target.FindReplaceTarget`, it decides where each search starts,
interprets the results of the target's search primitive and reports the outcome as a
:py:class:`findreplace.status.Status`.

Status is never cleared automatically, callers should call :py:meth:`SearchController.reset_status`
before each new logical operation.

Example:

.. code-block:: python

    import findreplace

    target = findreplace.DocumentTarget('aaaa')
    controller = findreplace.SearchController()
    controller.attach_target(target, editable=True)

    controller.perform_replace_all('a', 'b')

    print(target.text)  # bbbb
    print(controller.status.message)  # 4 matches replaced
"""

StatusLineCallback = typing.Callable[[bool, str], None]
"""
Callback receiving ``(error, message)`` for every status message the controller produces.
"""

_DEFAULT_OPTIONS = frozenset({_options.SearchOptions.FORWARD,
                              _options.SearchOptions.GLOBAL})


class SearchController:
    """
    Drives find / replace operations over a :py:class:`findreplace.target.FindReplaceTarget`

    Options are held by the controller and survive attaching a different target,
    everything specific to the attached target lives in a :py:class:`findreplace.session.SearchSession`
    """

    def __init__(self,
                 status_line: StatusLineCallback | None = None,
                 search_contributions: typing.Sequence[_contributions.SearchContribution] | None = None):
        """
        :param status_line: optional callback mirroring status messages to an editor status line
        :param search_contributions: active search contributions, used with targets that
            declare :py:meth:`findreplace.target.FindReplaceTarget.uses_custom_search_contributions`
        """
        self.__options = set(_DEFAULT_OPTIONS)
        self.__session: _session.SearchSession | None = None
        self.__status = _status.Status()
        self.__status_line = status_line
        self.__search_contributions = list(search_contributions) if search_contributions else []

    # options

    @property
    def options(self) -> frozenset[_options.SearchOptions]:
        """
        The set of currently active options.
        """
        return frozenset(self.__options)

    def activate(self, option: _options.SearchOptions | str):
        """
        Activate an option.

        Activating :py:attr:`findreplace.options.SearchOptions.GLOBAL` leaves range scope mode.
        Activating ``FORWARD``, ``INCREMENTAL`` or ``REGEX`` re-initializes the incremental
        anchor when incremental search is in effect afterward.

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        """
        option = _options.get_search_option_enum(option)

        if option in self.__options:
            return

        self.__options.add(option)

        if option == _options.SearchOptions.GLOBAL:
            self.set_scope(False)
        elif option in {_options.SearchOptions.FORWARD,
                        _options.SearchOptions.INCREMENTAL,
                        _options.SearchOptions.REGEX}:
            if self.is_incremental_search_effective():
                self._init_incremental_anchor()

    def deactivate(self, option: _options.SearchOptions | str):
        """
        Deactivate an option.

        Deactivating :py:attr:`findreplace.options.SearchOptions.GLOBAL` enters range scope mode.
        Deactivating ``FORWARD``, ``INCREMENTAL`` or ``REGEX`` re-initializes the incremental
        anchor when incremental search is in effect afterward.

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        """
        option = _options.get_search_option_enum(option)

        if option not in self.__options:
            return

        self.__options.discard(option)

        if option == _options.SearchOptions.GLOBAL:
            self.set_scope(True)
        elif option in {_options.SearchOptions.FORWARD,
                        _options.SearchOptions.INCREMENTAL,
                        _options.SearchOptions.REGEX}:
            if self.is_incremental_search_effective():
                self._init_incremental_anchor()

    def set_active(self, option: _options.SearchOptions | str, active: bool):
        """
        Activate or deactivate an option.

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        :param active: ``True`` to activate
        """
        if active:
            self.activate(option)
        else:
            self.deactivate(option)

    def is_active(self, option: _options.SearchOptions | str) -> bool:
        """
        Is an option toggled on? This does not consider availability.

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        :return: ``True`` or ``False``
        """
        return _options.get_search_option_enum(option) in self.__options

    def is_available(self, option: _options.SearchOptions | str) -> bool:
        """
        Can an option currently have an effect?

        Regex is only available when the attached target supports it, whole word
        and incremental search are unavailable while regex search is in effect.

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        :return: ``True`` or ``False``
        """
        option = _options.get_search_option_enum(option)

        if option == _options.SearchOptions.REGEX:
            return self.__session is not None and self.__session.regex_supported
        if option in {_options.SearchOptions.WHOLE_WORD, _options.SearchOptions.INCREMENTAL}:
            return not self.is_available_and_active(_options.SearchOptions.REGEX)
        return True

    def is_available_and_active(self, option: _options.SearchOptions | str) -> bool:
        """
        Is an option both toggled on and available?

        :param option: :py:class:`findreplace.options.SearchOptions` or its string name
        :return: ``True`` or ``False``
        """
        return self.is_active(option) and self.is_available(option)

    def is_regex_search_effective(self) -> bool:
        """
        Is regex search toggled on and supported by the attached target?
        """
        return self.is_available_and_active(_options.SearchOptions.REGEX)

    def is_incremental_search_effective(self) -> bool:
        """
        Is incremental search toggled on, and not suppressed by regex search?
        """
        return self.is_available_and_active(_options.SearchOptions.INCREMENTAL)

    def is_whole_word_search_available(self, find: str) -> bool:
        """
        Could whole word search apply to a search string?

        :param find: the search string
        :return: ``False`` if regex search is in effect or ``find`` is not a single word
        """
        return self.is_available(_options.SearchOptions.WHOLE_WORD) and _textprocessing.is_word(find)

    def _is_whole_word_search(self, find: str) -> bool:
        return self.is_active(_options.SearchOptions.WHOLE_WORD) and self.is_whole_word_search_available(find)

    # search contributions

    @property
    def search_contributions(self) -> list[_contributions.SearchContribution]:
        """
        Currently active search contributions.
        """
        return list(self.__search_contributions)

    def set_search_contributions(self, contributions: typing.Sequence[_contributions.SearchContribution]):
        """
        Set the active search contributions.

        Only contributions of a kind offered by the attached target, see
        :py:meth:`findreplace.target.FindReplaceTarget.get_search_contributions`,
        take part in searches.

        :param contributions: :py:class:`findreplace.contributions.SearchContribution` objects
        """
        self.__search_contributions = list(contributions)

    def _offered_search_contributions(self) -> list[_contributions.SearchContribution]:
        offered = tuple(type(c) for c in self.__session.offered_contributions)
        return [c for c in self.__search_contributions if isinstance(c, offered)]

    def _create_matcher(self, find: str) -> _matchers.Matcher | None:
        if self.__session is None or not self.__session.custom_search_contributions:
            return None

        if self.is_active(_options.SearchOptions.CASE_SENSITIVE):
            root = _matchers.MatchAll().chain(_matchers.CaseSensitiveMatcher())
        else:
            root = _matchers.MatchAll().chain(_matchers.NormalMatcher())

        if self._is_whole_word_search(find):
            root = root.chain(_matchers.WholeWordMatcher())

        return _matchers.build_matcher_chain(self._offered_search_contributions(), root=root)

    # status

    @property
    def status(self) -> _status.Status:
        """
        Status of the last operation(s), see :py:meth:`.SearchController.reset_status`
        """
        return self.__status

    def reset_status(self):
        """
        Reset the status to an empty message without severity.

        The controller never does this on its own.
        """
        self.__set_status(_status.Status())

    def __set_status(self, status: _status.Status):
        self.__status = status
        if self.__session is not None:
            self.__session.last_status = status

    def __status_message(self, message: str):
        self.__set_status(_status.Status(message=message, warning=self.__status.warning))
        if self.__status_line is not None:
            self.__status_line(False, message)

    def __status_warning(self, message: str):
        self.__set_status(self.__status.with_warning(message))
        if self.__status_line is not None:
            self.__status_line(False, message)

    def __status_error(self, message: str):
        self.__set_status(self.__status.with_error(message))
        if self.__status_line is not None:
            self.__status_line(True, message)

    def __status_not_found(self, find: str):
        self.__status_warning(_constants.STRING_NOT_FOUND_MESSAGE.format(find))

    # target lifecycle

    @property
    def session(self) -> _session.SearchSession | None:
        """
        Session for the attached target, or ``None``
        """
        return self.__session

    @property
    def target(self) -> _target.FindReplaceTarget | None:
        """
        The attached target, or ``None``
        """
        return self.__session.target if self.__session is not None else None

    def is_target_available(self) -> bool:
        """
        Is a target attached?
        """
        return self.__session is not None

    def attach_target(self, target: _target.FindReplaceTarget | None, editable: bool = True):
        """
        Attach a target, ending the session of the previously attached target.

        Target capabilities are queried once here. Re-attaching the same target only
        updates the editable flag and resets the incremental anchor.

        :param target: the target, ``None`` is equivalent to :py:meth:`.SearchController.end_session`
        :param editable: does the caller allow editing the target?
        """
        if target is None:
            self.end_session()
            return

        if self.__session is not None and self.__session.target is target:
            self.__session.editable = editable
            self.__session.needs_initial_find_before_replace = True
            self._init_incremental_anchor()
            return

        self.end_session()

        self.__session = _session.SearchSession(
            target=target,
            editable=editable,
            regex_supported=target.supports_regex(),
            scoping_supported=target.supports_scoping(),
            multi_selection_supported=target.supports_multi_selection(),
            custom_search_contributions=target.uses_custom_search_contributions(),
            offered_contributions=list(target.get_search_contributions()),
            last_status=self.__status)

        _messages.debug_log(
            f'Attached find / replace target {_types.class_and_id_string(target)}, '
            f'editable={editable}, regex={self.__session.regex_supported}, '
            f'scoping={self.__session.scoping_supported}, '
            f'multi_selection={self.__session.multi_selection_supported}, '
            f'custom_search_contributions={self.__session.custom_search_contributions}')

        target.begin_session()

        self.__options.add(_options.SearchOptions.GLOBAL)

        self._init_incremental_anchor()

    def end_session(self):
        """
        End the session with the attached target, if any, and detach it.
        """
        if self.__session is None:
            return

        target = self.__session.target
        self.__session = None

        target.end_session()

        _messages.debug_log(
            f'Detached find / replace target {_types.class_and_id_string(target)}')

    def deactivate_scope(self):
        """
        Remove the search scope from the target and forget any saved scope.
        """
        if self.__session is None:
            return

        if self.__session.scoping_supported:
            self.__session.target.set_scope(None)

        self.__session.saved_scope = None

    def set_scope(self, use_range: bool):
        """
        Enter or leave range scope mode.

        Entering range mode restores the saved scope if there is one, otherwise the
        current line selection becomes the scope. The selection is collapsed to the
        start of the scope for forward search, or the end of the scope for backward search.

        Leaving range mode saves the current scope for later and removes it from the target.

        A saved scope the target no longer accepts, because its text shrank in the
        meantime, is discarded in favor of the current line selection. Either transition
        makes the next search start at the current selection.

        :param use_range: ``True`` to restrict searching to a range
        """
        if self.is_incremental_search_effective():
            self._init_incremental_anchor()

        session = self.__session

        if session is None or not session.scoping_supported:
            return

        target = session.target

        if use_range:
            scope = session.saved_scope
            session.saved_scope = None

            if scope is not None:
                try:
                    target.set_scope(scope)
                except ValueError as e:
                    _messages.debug_log(f'Discarding saved find / replace scope {scope}: {e}')
                    scope = None

            if scope is None:
                scope = target.get_line_selection()
                target.set_scope(scope)

            offset = scope.offset if self.is_active(_options.SearchOptions.FORWARD) else scope.end

            target.set_selection(offset, 0)

            _messages.debug_log(f'Find / replace scope set to {scope}')
        else:
            session.saved_scope = target.get_scope()
            target.set_scope(None)

            _messages.debug_log(f'Find / replace scope cleared, saved {session.saved_scope}')

        session.needs_initial_find_before_replace = True
        session.last_found = None

    def _init_incremental_anchor(self):
        if self.__session is None:
            return

        if self.is_incremental_search_effective():
            self.__session.incremental_anchor = self.__session.target.get_selection()
        else:
            self.__session.incremental_anchor = _target.Match()

    # queries

    def current_selection_text(self) -> str | None:
        """
        Text of the target's selection, ``None`` when no target is attached.
        """
        if self.__session is None:
            return None
        return self.__session.target.get_selection_text()

    def is_editable(self) -> bool:
        """
        Does both the caller and the attached target allow editing?
        """
        if self.__session is None:
            return False
        return self.__session.editable and self.__session.target.is_editable()

    def supports_multi_selection(self) -> bool:
        """
        Does the attached target support multi selection?
        """
        return self.__session is not None and self.__session.multi_selection_supported

    def validate_target_state(self) -> bool:
        """
        Check that the attached target may be modified, setting an error status if not.

        :return: ``True`` if modification may proceed
        """
        if self.__session is None:
            self.__status_error(_constants.NO_TARGET_MESSAGE)
            return False

        if not self.__session.target.validate_target_state() or not self.is_editable():
            self.__status_error(_constants.READ_ONLY_MESSAGE)
            return False

        return True

    # searching

    def _find_and_select(self,
                         offset: _types.Offset,
                         find: str,
                         forward: bool,
                         matcher: _matchers.Matcher | None) -> _types.Offset:
        target = self.__session.target

        if matcher is not None:
            return target.find_and_select_matching(offset, find, forward, matcher)

        return target.find_and_select(offset, find, forward,
                                      self.is_active(_options.SearchOptions.CASE_SENSITIVE),
                                      self._is_whole_word_search(find),
                                      self.is_regex_search_effective())

    def _find_index(self, find: str, position: _types.Offset, matcher: _matchers.Matcher | None) -> _types.Offset:
        forward = self.is_active(_options.SearchOptions.FORWARD)

        if forward:
            index = self._find_and_select(position, find, True, matcher)
        elif position == 0:
            index = -1
        else:
            index = self._find_and_select(position - 1, find, False, matcher)

        if index == -1:
            self.__set_status(self.__status.with_warning(self.__status.message))

            if self.is_active(_options.SearchOptions.WRAP):
                self.__status_warning(_constants.WRAPPED_SEARCH_MESSAGE)
                index = self._find_and_select(-1, find, forward, matcher)

        return index

    def _find_next(self, find: str) -> bool:
        session = self.__session
        target = session.target
        forward = self.is_active(_options.SearchOptions.FORWARD)

        if self.is_incremental_search_effective():
            anchor = session.incremental_anchor
        else:
            anchor = target.get_selection()

        position = anchor.offset
        if forward != session.needs_initial_find_before_replace:
            position += anchor.length

        session.needs_initial_find_before_replace = False

        index = self._find_index(find, position, self._create_matcher(find))

        if index == -1:
            self.__status_not_found(find)
            return False

        session.last_found = target.get_selection()
        session.last_query = self._search_query(find)

        if (forward and index >= position) or (not forward and index <= position):
            self.__status_message('')

        return True

    def perform_search(self, find: str, init_incremental_anchor: bool | None = None) -> bool:
        """
        Search for the next occurrence of a string in the current direction.

        When the search runs off the end of the target and wrap is active, the search
        is retried from the opposite boundary and the status becomes a ``Wrapped search`` warning.
        When nothing is found the status is a not found warning and the selection is left alone.
        An invalid regex results in an error status.

        :param find: the search string, an empty string or ``None`` searches nothing
        :param init_incremental_anchor: re-initialize the incremental anchor from the current
            selection before searching, defaults to whether incremental search is in effect
        :return: ``True`` if a match was selected
        """
        if init_incremental_anchor is None:
            init_incremental_anchor = self.is_incremental_search_effective()

        if init_incremental_anchor:
            self._init_incremental_anchor()

        if not find or self.__session is None:
            return False

        try:
            return self._find_next(find)
        except _exceptions.PatternSyntaxError as e:
            self.__status_error(str(e))
        except _exceptions.TargetStateError as e:
            _messages.debug_log(f'Find / replace target refused search: {e}')
        return False

    def perform_incremental_search(self, find: str) -> bool:
        """
        Search as you type, relative to the incremental anchor.

        Does nothing unless incremental search is in effect. Searching for the same
        string repeatedly selects the same match. An empty string collapses the
        selection at the anchor.

        :param find: the search string
        :return: ``True`` if a match was selected or the selection was collapsed
        """
        if not self.is_incremental_search_effective() or self.__session is None:
            return False

        session = self.__session

        if not find:
            anchor = session.incremental_anchor
            offset = anchor.offset

            if self.is_active(_options.SearchOptions.FORWARD) != session.needs_initial_find_before_replace:
                offset += anchor.length

            session.needs_initial_find_before_replace = False
            session.target.set_selection(offset, 0)
            return True

        return self.perform_search(find, init_incremental_anchor=False)

    # bulk operations

    def _bulk_find(self, position: _types.Offset, find: str, matcher: _matchers.Matcher | None):
        index = self._find_and_select(position, find, True, matcher)
        if index == -1:
            return None
        return self.__session.target.get_selection()

    def _select_all(self,
                    find: str,
                    should_cancel: _types.OptionalCancelCheck) -> int:
        session = self.__session
        matcher = self._create_matcher(find)

        ranges = []
        position = 0

        while should_cancel is None or not should_cancel():
            selection = self._bulk_find(position, find, matcher)
            if selection is None:
                break

            ranges.append(selection)

            position = selection.end
            if selection.length == 0:
                position += 1

        if ranges and session.multi_selection_supported:
            session.target.set_multi_selection(ranges)

        return len(ranges)

    def _replace_all(self,
                     find: str,
                     replace: str,
                     should_cancel: _types.OptionalCancelCheck) -> int:
        session = self.__session
        target = session.target
        matcher = self._create_matcher(find)
        regex = self.is_regex_search_effective()

        count = 0
        position = 0

        target.set_replace_all_mode(True)
        try:
            while should_cancel is None or not should_cancel():
                found = self._bulk_find(position, find, matcher)
                if found is None:
                    break

                target.replace_selection(replace, regex)
                count += 1

                position = target.get_selection().end
                if found.length == 0:
                    position += 1
        finally:
            target.set_replace_all_mode(False)

        return count

    def perform_select_all(self, find: str, should_cancel: _types.OptionalCancelCheck = None) -> int:
        """
        Select every occurrence of a string.

        Scanning always starts at the beginning of the target (or scope) and moves
        forward, regardless of the search direction. The matches are pushed to the
        target as a multi selection when the target supports it.

        :param find: the search string
        :param should_cancel: optional callable polled once per match, returning ``True`` stops the scan
        :return: the number of matches
        """
        if not find or self.__session is None:
            return 0

        try:
            count = self._select_all(find, should_cancel)
        except _exceptions.PatternSyntaxError as e:
            self.__status_error(str(e))
            return 0
        except _exceptions.TargetStateError as e:
            _messages.debug_log(f'Find / replace target refused select all: {e}')
            return 0

        _messages.debug_log(f'Select all "{find}" selected {count} match(es)')

        if count == 0:
            self.__status_not_found(find)
        else:
            self.__status_message(_textprocessing.plural(
                count, _constants.MATCH_SELECTED_MESSAGE, _constants.MATCHES_SELECTED_MESSAGE))

        self.__session.last_found = None
        return count

    def perform_replace_all(self, find: str, replace: str | None, should_cancel: _types.OptionalCancelCheck = None) -> int:
        """
        Replace every occurrence of a string.

        Scanning always starts at the beginning of the target (or scope) and moves
        forward, continuing after each inserted replacement. The target is put into
        replace all mode for the duration of the scan.

        :param find: the search string
        :param replace: the replacement, ``None`` is treated as an empty string
        :param should_cancel: optional callable polled once per match, returning ``True`` stops the scan
        :return: the number of replacements
        """
        if not find:
            return 0

        if not self.validate_target_state():
            return 0

        try:
            count = self._replace_all(find, replace or '', should_cancel)
        except _exceptions.PatternSyntaxError as e:
            self.__status_error(str(e))
            return 0
        except _exceptions.TargetStateError as e:
            _messages.debug_log(f'Find / replace target refused replace all: {e}')
            return 0

        _messages.debug_log(f'Replace all "{find}" replaced {count} match(es)')

        if count == 0:
            self.__status_not_found(find)
        else:
            self.__status_message(_textprocessing.plural(
                count, _constants.MATCH_REPLACED_MESSAGE, _constants.MATCHES_REPLACED_MESSAGE))

        self.__session.last_found = None
        return count

    # replacing

    def perform_replace_selection(self, replace: str | None) -> bool:
        """
        Replace the current selection.

        :param replace: the replacement, ``None`` is treated as an empty string, may reference
            regex groups of the last match when regex search is in effect
        :return: ``True`` if the selection was replaced
        """
        if not self.validate_target_state():
            return False

        try:
            self.__session.target.replace_selection(replace or '', self.is_regex_search_effective())
        except _exceptions.PatternSyntaxError as e:
            self.__status_error(str(e))
            return False
        except _exceptions.TargetStateError as e:
            _messages.debug_log(f'Find / replace target refused replacement: {e}')
            return False

        self.__session.last_found = None
        return True

    def _search_query(self, find: str) -> tuple:
        return (find,
                self.is_active(_options.SearchOptions.CASE_SENSITIVE),
                self._is_whole_word_search(find),
                self.is_regex_search_effective())

    def _selection_is_located_match(self, find: str) -> bool:
        session = self.__session
        if session is None:
            return False

        selection = session.target.get_selection()
        if (session.last_found is not None and selection == session.last_found
                and session.last_query == self._search_query(find)):
            return True

        if self.is_regex_search_effective():
            return False

        text = session.target.get_selection_text()
        if self.is_active(_options.SearchOptions.CASE_SENSITIVE):
            return text == find
        return text.lower() == find.lower()

    def perform_replace_and_find(self, find: str, replace: str | None) -> bool:
        """
        Replace the current match and select the next one.

        The match is located first unless the selection already is one.

        :param find: the search string
        :param replace: the replacement
        :return: ``True`` if a replacement was made
        """
        if not find:
            return False

        if not self._selection_is_located_match(find):
            if not self.perform_search(find):
                return False

        if self.perform_replace_selection(replace):
            self.perform_search(find)
            return True

        return False

    def perform_select_and_replace(self, find: str, replace: str | None) -> bool:
        """
        Replace the current match, locating it first if needed.

        A search is performed first only when the anchor was invalidated (a target was
        attached or the scope changed), otherwise the current selection is assumed to be
        the intended match and is replaced directly.

        After replacing, the caret is placed past the inserted text in the search direction
        and the next call searches again before replacing.

        :param find: the search string
        :param replace: the replacement
        :return: ``True`` if a replacement was made
        """
        session = self.__session

        if not find:
            return False

        if session is not None and session.needs_initial_find_before_replace:
            if not self.perform_search(find):
                return False

        if not self.perform_replace_selection(replace):
            return False

        target = session.target
        inserted = target.get_selection()
        if self.is_active(_options.SearchOptions.FORWARD):
            target.set_selection(inserted.end, 0)
        else:
            target.set_selection(inserted.offset, 0)

        session.needs_initial_find_before_replace = True
        return True


__all__ = _types.module_all()
