import unittest

import findreplace.constants as _constants
import findreplace.controller as _controller
import findreplace.documenttarget as _documenttarget
from findreplace.options import SearchOptions
from findreplace.target import Match


def _attach(text, editable=True, **kwargs):
    target = _documenttarget.DocumentTarget(text, **kwargs)
    controller = _controller.SearchController()
    controller.attach_target(target, editable=editable)
    return controller, target


class TestOptions(unittest.TestCase):

    def test_defaults(self):
        controller = _controller.SearchController()
        self.assertEqual(controller.options, frozenset({SearchOptions.FORWARD, SearchOptions.GLOBAL}))
        self.assertFalse(controller.is_active(SearchOptions.WRAP))

    def test_toggle_by_name(self):
        controller = _controller.SearchController()
        controller.activate('case-sensitive')
        self.assertTrue(controller.is_active(SearchOptions.CASE_SENSITIVE))
        controller.set_active('CASE_SENSITIVE', False)
        self.assertFalse(controller.is_active('case-sensitive'))

        # idempotent
        controller.deactivate(SearchOptions.CASE_SENSITIVE)
        self.assertFalse(controller.is_active(SearchOptions.CASE_SENSITIVE))

        with self.assertRaises(ValueError):
            controller.activate('backwards')

    def test_regex_availability(self):
        controller = _controller.SearchController()
        controller.activate(SearchOptions.REGEX)

        # no target attached
        self.assertTrue(controller.is_active(SearchOptions.REGEX))
        self.assertFalse(controller.is_regex_search_effective())

        controller.attach_target(_documenttarget.DocumentTarget('abc', regex=False))
        self.assertFalse(controller.is_regex_search_effective())

        controller.attach_target(_documenttarget.DocumentTarget('abc'))
        self.assertTrue(controller.is_regex_search_effective())

    def test_regex_suppresses_whole_word_and_incremental(self):
        controller, _ = _attach('abc')
        controller.activate(SearchOptions.WHOLE_WORD)
        controller.activate(SearchOptions.INCREMENTAL)

        self.assertTrue(controller.is_available_and_active(SearchOptions.WHOLE_WORD))
        self.assertTrue(controller.is_incremental_search_effective())

        controller.activate(SearchOptions.REGEX)

        self.assertFalse(controller.is_available_and_active(SearchOptions.WHOLE_WORD))
        self.assertFalse(controller.is_incremental_search_effective())
        self.assertFalse(controller.is_whole_word_search_available('abc'))
        self.assertFalse(controller.perform_incremental_search('abc'))

    def test_whole_word_available(self):
        controller, _ = _attach('abc')
        self.assertTrue(controller.is_whole_word_search_available('word'))
        self.assertFalse(controller.is_whole_word_search_available('two words'))
        self.assertFalse(controller.is_whole_word_search_available(''))

    def test_options_survive_reattach(self):
        controller, _ = _attach('abc')
        controller.activate(SearchOptions.WRAP)
        controller.attach_target(_documenttarget.DocumentTarget('def'))
        self.assertTrue(controller.is_active(SearchOptions.WRAP))


class TestTargetLifecycle(unittest.TestCase):

    def test_attach_and_end_session(self):
        controller, target = _attach('abc')
        self.assertTrue(target.in_session)
        self.assertIs(controller.target, target)
        self.assertTrue(controller.is_target_available())
        self.assertTrue(controller.session.needs_initial_find_before_replace)

        other = _documenttarget.DocumentTarget('def')
        controller.attach_target(other)
        self.assertFalse(target.in_session)
        self.assertTrue(other.in_session)

        controller.attach_target(None)
        self.assertFalse(other.in_session)
        self.assertIsNone(controller.target)
        self.assertIsNone(controller.session)
        self.assertIsNone(controller.current_selection_text())

    def test_attach_activates_global(self):
        controller = _controller.SearchController()
        controller.deactivate(SearchOptions.GLOBAL)
        controller.attach_target(_documenttarget.DocumentTarget('abc'))
        self.assertTrue(controller.is_active(SearchOptions.GLOBAL))

    def test_reattach_same_target_refreshes_session(self):
        controller, target = _attach('abc abc')
        session = controller.session

        controller.perform_search('abc')
        self.assertFalse(session.needs_initial_find_before_replace)

        controller.attach_target(target, editable=False)
        self.assertIs(controller.session, session)
        self.assertTrue(target.in_session)
        self.assertFalse(session.editable)
        self.assertTrue(session.needs_initial_find_before_replace)

    def test_capabilities_captured(self):
        controller, _ = _attach('abc', regex=False, scoping=False, multi_selection=False)
        session = controller.session
        self.assertFalse(session.regex_supported)
        self.assertFalse(session.scoping_supported)
        self.assertFalse(session.multi_selection_supported)
        self.assertFalse(controller.supports_multi_selection())

    def test_editable(self):
        controller, _ = _attach('abc', editable=False)
        self.assertFalse(controller.is_editable())

        controller.attach_target(_documenttarget.DocumentTarget('abc', editable=False), editable=True)
        self.assertFalse(controller.is_editable())

        controller.attach_target(_documenttarget.DocumentTarget('abc'), editable=True)
        self.assertTrue(controller.is_editable())


class TestSearch(unittest.TestCase):

    def test_forward(self):
        controller, target = _attach('abc abc abc')

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(0, 3))
        self.assertTrue(controller.status.is_ok)

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(4, 3))

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(8, 3))

        self.assertFalse(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(8, 3))
        self.assertTrue(controller.status.warning)
        self.assertFalse(controller.status.error)
        self.assertEqual(controller.status.message, 'String "abc" not found')

    def test_forward_wrap(self):
        controller, target = _attach('abc abc')
        controller.activate(SearchOptions.WRAP)

        controller.perform_search('abc')
        controller.perform_search('abc')
        self.assertEqual(target.get_selection(), Match(4, 3))

        controller.reset_status()
        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(0, 3))
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, _constants.WRAPPED_SEARCH_MESSAGE)

    def test_backward(self):
        controller, target = _attach('abc abc abc')
        controller.deactivate(SearchOptions.FORWARD)
        target.set_selection(11, 0)

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(8, 3))

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(4, 3))

        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(0, 3))

        self.assertFalse(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(0, 3))
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, 'String "abc" not found')

    def test_backward_wrap(self):
        controller, target = _attach('abc abc abc')
        controller.deactivate(SearchOptions.FORWARD)
        controller.activate(SearchOptions.WRAP)

        # the selection starts at offset 0, the search immediately wraps to the end
        self.assertTrue(controller.perform_search('abc'))
        self.assertEqual(target.get_selection(), Match(8, 3))
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, _constants.WRAPPED_SEARCH_MESSAGE)

    def test_empty_search(self):
        controller, target = _attach('abc')
        self.assertFalse(controller.perform_search(''))
        self.assertFalse(controller.perform_search(None))
        self.assertEqual(target.get_selection(), Match(0, 0))
        self.assertTrue(controller.status.is_ok)

    def test_no_target(self):
        controller = _controller.SearchController()
        self.assertFalse(controller.perform_search('abc'))
        self.assertEqual(controller.perform_select_all('abc'), 0)

    def test_case_sensitive(self):
        controller, target = _attach('Foo foo')

        controller.perform_search('foo')
        self.assertEqual(target.get_selection(), Match(0, 3))

        target.set_selection(0, 0)
        controller.attach_target(target)
        controller.activate(SearchOptions.CASE_SENSITIVE)

        controller.perform_search('foo')
        self.assertEqual(target.get_selection(), Match(4, 3))

    def test_whole_word(self):
        controller, target = _attach('word longerword word')
        controller.activate(SearchOptions.WHOLE_WORD)

        self.assertTrue(controller.perform_search('word'))
        self.assertEqual(target.get_selection(), Match(0, 4))

        self.assertTrue(controller.perform_search('word'))
        self.assertEqual(target.get_selection(), Match(16, 4))

        self.assertFalse(controller.perform_search('word'))
        self.assertEqual(target.get_selection(), Match(16, 4))

    def test_whole_word_ignored_for_multiple_words(self):
        controller, target = _attach('foo barx foo bar')
        controller.activate(SearchOptions.WHOLE_WORD)

        self.assertTrue(controller.perform_search('foo bar'))
        self.assertEqual(target.get_selection(), Match(0, 7))

    def test_regex(self):
        controller, target = _attach('a1 b22 c333')
        controller.activate(SearchOptions.REGEX)

        controller.perform_search(r'\d+')
        self.assertEqual(target.get_selection(), Match(1, 1))

        controller.perform_search(r'\d+')
        self.assertEqual(target.get_selection(), Match(4, 2))

    def test_invalid_regex(self):
        controller, target = _attach('abc [')
        controller.activate(SearchOptions.REGEX)

        self.assertFalse(controller.perform_search('['))
        self.assertTrue(controller.status.error)
        self.assertFalse(controller.status.warning)
        self.assertIn('[', controller.status.message)
        self.assertEqual(target.get_selection(), Match(0, 0))

    def test_regex_unsupported_searches_literally(self):
        controller, target = _attach('a.c abc', regex=False)
        controller.activate(SearchOptions.REGEX)

        controller.perform_search('a.c')
        self.assertEqual(target.get_selection(), Match(0, 3))

        controller.perform_search('a.c')
        self.assertTrue(controller.status.warning)
        self.assertEqual(target.get_selection(), Match(0, 3))

    def test_status_line(self):
        messages = []

        controller = _controller.SearchController(status_line=lambda error, message: messages.append((error, message)))
        controller.attach_target(_documenttarget.DocumentTarget('abc'))

        controller.perform_search('xyz')
        self.assertEqual(messages[-1], (False, 'String "xyz" not found'))

        controller.activate(SearchOptions.REGEX)
        controller.perform_search('(')
        self.assertTrue(messages[-1][0])

    def test_status_not_cleared_automatically(self):
        controller, _ = _attach('abc')

        controller.perform_search('xyz')
        self.assertTrue(controller.status.warning)

        controller.perform_search('abc')
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, '')
        self.assertIs(controller.session.last_status, controller.status)

        controller.reset_status()
        self.assertTrue(controller.status.is_ok)


class TestIncrementalSearch(unittest.TestCase):

    def test_idempotent(self):
        controller, target = _attach('foo food fool')
        controller.activate(SearchOptions.INCREMENTAL)

        self.assertTrue(controller.perform_incremental_search('f'))
        self.assertEqual(target.get_selection(), Match(0, 1))

        self.assertTrue(controller.perform_incremental_search('fo'))
        self.assertEqual(target.get_selection(), Match(0, 2))

        self.assertTrue(controller.perform_incremental_search('foo'))
        self.assertEqual(target.get_selection(), Match(0, 3))

        self.assertTrue(controller.perform_incremental_search('foo'))
        self.assertEqual(target.get_selection(), Match(0, 3))

        self.assertTrue(controller.perform_incremental_search('food'))
        self.assertEqual(target.get_selection(), Match(4, 4))

        self.assertTrue(controller.perform_incremental_search('foo'))
        self.assertEqual(target.get_selection(), Match(0, 3))

    def test_find_next_advances(self):
        controller, target = _attach('foo food fool')
        controller.activate(SearchOptions.INCREMENTAL)

        controller.perform_incremental_search('foo')
        self.assertEqual(target.get_selection(), Match(0, 3))

        controller.perform_search('foo')
        self.assertEqual(target.get_selection(), Match(4, 3))

        controller.perform_search('foo')
        self.assertEqual(target.get_selection(), Match(9, 3))

    def test_empty_collapses_selection(self):
        controller, target = _attach('foo food')
        target.set_selection(4, 0)
        controller.activate(SearchOptions.INCREMENTAL)

        controller.perform_incremental_search('food')
        self.assertEqual(target.get_selection(), Match(4, 4))

        self.assertTrue(controller.perform_incremental_search(''))
        self.assertEqual(target.get_selection(), Match(4, 0))

    def test_not_effective(self):
        controller, target = _attach('foo')
        self.assertFalse(controller.perform_incremental_search('foo'))
        self.assertEqual(target.get_selection(), Match(0, 0))

    def test_anchor_initialized_on_activate(self):
        controller, target = _attach('foo foo')
        target.set_selection(4, 3)
        controller.activate(SearchOptions.INCREMENTAL)
        self.assertEqual(controller.session.incremental_anchor, Match(4, 3))

        controller.deactivate(SearchOptions.INCREMENTAL)
        self.assertEqual(controller.session.incremental_anchor, Match(0, 0))


class TestBulkOperations(unittest.TestCase):

    def test_replace_all(self):
        controller, target = _attach('aaaa')
        self.assertEqual(controller.perform_replace_all('a', 'b'), 4)
        self.assertEqual(target.text, 'bbbb')
        self.assertEqual(controller.status.message, '4 matches replaced')
        self.assertTrue(controller.status.is_ok)

    def test_replace_all_longer_replacement(self):
        controller, target = _attach('bbbb')
        self.assertEqual(controller.perform_replace_all('b', 'aa'), 4)
        self.assertEqual(target.text, 'aaaaaaaa')
        self.assertEqual(controller.status.message, '4 matches replaced')

    def test_replace_all_not_found(self):
        controller, target = _attach('bbbb')
        self.assertEqual(controller.perform_replace_all('x', 'y'), 0)
        self.assertEqual(target.text, 'bbbb')
        self.assertTrue(controller.status.warning)
        self.assertFalse(controller.status.error)
        self.assertEqual(controller.status.message, 'String "x" not found')

    def test_replace_all_regex(self):
        controller, target = _attach('hello@eclipse.com rest')
        controller.activate(SearchOptions.REGEX)

        self.assertEqual(controller.perform_replace_all(r'.+\@.+\.com', ''), 1)
        self.assertEqual(target.text, ' rest')
        self.assertEqual(controller.status.message, '1 match replaced')

    def test_replace_all_regex_groups(self):
        controller, target = _attach('a1 b22 c333')
        controller.activate(SearchOptions.REGEX)

        self.assertEqual(controller.perform_replace_all(r'(\w)(\d+)', r'\2\1'), 3)
        self.assertEqual(target.text, '1a 22b 333c')

    def test_replace_all_invalid_regex(self):
        controller, target = _attach('abc [')
        controller.activate(SearchOptions.REGEX)

        self.assertEqual(controller.perform_replace_all('[', 'x'), 0)
        self.assertEqual(target.text, 'abc [')
        self.assertTrue(controller.status.error)
        self.assertIn('[', controller.status.message)
        self.assertFalse(target.replace_all_mode)

    def test_replace_all_read_only(self):
        controller, target = _attach('aaaa', editable=False)
        self.assertEqual(controller.perform_replace_all('a', 'b'), 0)
        self.assertEqual(target.text, 'aaaa')
        self.assertTrue(controller.status.error)
        self.assertEqual(controller.status.message, _constants.READ_ONLY_MESSAGE)

    def test_replace_all_vetoed(self):
        controller, target = _attach('aaaa', validate_state=lambda: False)
        self.assertEqual(controller.perform_replace_all('a', 'b'), 0)
        self.assertEqual(target.text, 'aaaa')
        self.assertTrue(controller.status.error)

    def test_replace_all_scans_forward_regardless_of_direction(self):
        controller, target = _attach('a-a-a')
        controller.deactivate(SearchOptions.FORWARD)
        target.set_selection(3, 0)

        self.assertEqual(controller.perform_replace_all('a', 'b'), 3)
        self.assertEqual(target.text, 'b-b-b')

    def test_replace_all_notifies_once(self):
        controller, target = _attach('aaaa')
        notified = []
        target.add_modification_listener(lambda t: notified.append(t.text))

        controller.perform_replace_all('a', 'b')
        self.assertEqual(notified, ['bbbb'])

    def test_replace_all_cancel(self):
        controller, target = _attach('aaaa')
        polls = []

        def should_cancel():
            polls.append(True)
            return len(polls) > 2

        self.assertEqual(controller.perform_replace_all('a', 'b', should_cancel=should_cancel), 2)
        self.assertEqual(target.text, 'bbaa')
        self.assertEqual(controller.status.message, '2 matches replaced')

    def test_replace_all_in_scope(self):
        controller, target = _attach('a a\nb a\na a')
        target.set_selection(4, 0)
        controller.deactivate(SearchOptions.GLOBAL)

        self.assertEqual(target.get_scope(), Match(4, 4))

        self.assertEqual(controller.perform_replace_all('a', 'XY'), 1)
        self.assertEqual(target.text, 'a a\nb XY\na a')
        self.assertEqual(target.get_scope(), Match(4, 5))
        self.assertEqual(controller.status.message, '1 match replaced')

    def test_select_all(self):
        controller, target = _attach('one two one two one')
        self.assertEqual(controller.perform_select_all('one'), 3)
        self.assertEqual(target.multi_selection, [Match(0, 3), Match(8, 3), Match(16, 3)])
        self.assertEqual(controller.status.message, '3 matches selected')

        self.assertEqual(controller.perform_select_all('two'), 2)
        self.assertEqual(controller.status.message, '2 matches selected')

        controller.reset_status()
        self.assertEqual(controller.perform_select_all('xyz'), 0)
        self.assertTrue(controller.status.warning)

    def test_select_all_single(self):
        controller, _ = _attach('one two')
        self.assertEqual(controller.perform_select_all('two'), 1)
        self.assertEqual(controller.status.message, '1 match selected')

    def test_select_all_without_multi_selection(self):
        controller, target = _attach('one one', multi_selection=False)
        self.assertEqual(controller.perform_select_all('one'), 2)
        self.assertEqual(target.multi_selection, [])

    def test_select_all_empty_matches_terminate(self):
        controller, _ = _attach('ab')
        controller.activate(SearchOptions.REGEX)
        self.assertEqual(controller.perform_select_all('x*'), 3)


class TestScope(unittest.TestCase):

    def test_enter_and_leave_range_mode(self):
        controller, target = _attach('one\ntwo two\nthree')
        target.set_selection(6, 1)

        controller.deactivate(SearchOptions.GLOBAL)
        self.assertEqual(target.get_scope(), Match(4, 8))
        self.assertEqual(target.get_selection(), Match(4, 0))
        self.assertTrue(controller.session.needs_initial_find_before_replace)

        controller.activate(SearchOptions.GLOBAL)
        self.assertIsNone(target.get_scope())
        self.assertEqual(controller.session.saved_scope, Match(4, 8))

        # the saved scope is restored rather than recomputed
        target.set_selection(0, 0)
        controller.deactivate(SearchOptions.GLOBAL)
        self.assertEqual(target.get_scope(), Match(4, 8))
        self.assertIsNone(controller.session.saved_scope)

    def test_backward_selects_scope_end(self):
        controller, target = _attach('one\ntwo two\nthree')
        target.set_selection(6, 0)
        controller.deactivate(SearchOptions.FORWARD)
        controller.deactivate(SearchOptions.GLOBAL)

        self.assertEqual(target.get_selection(), Match(12, 0))

    def test_search_restricted_to_scope(self):
        controller, target = _attach('two\ntwo two\ntwo')
        target.set_selection(4, 0)
        controller.deactivate(SearchOptions.GLOBAL)
        controller.activate(SearchOptions.WRAP)

        controller.perform_search('two')
        self.assertEqual(target.get_selection(), Match(4, 3))
        controller.perform_search('two')
        self.assertEqual(target.get_selection(), Match(8, 3))
        controller.perform_search('two')
        self.assertEqual(target.get_selection(), Match(4, 3))
        self.assertEqual(controller.status.message, _constants.WRAPPED_SEARCH_MESSAGE)

    def test_leave_range_mode_forces_initial_find(self):
        controller, target = _attach('one\ntwo two\nthree')
        target.set_selection(6, 1)
        controller.deactivate(SearchOptions.GLOBAL)

        self.assertTrue(controller.perform_search('two'))
        self.assertFalse(controller.session.needs_initial_find_before_replace)

        controller.activate(SearchOptions.GLOBAL)
        self.assertTrue(controller.session.needs_initial_find_before_replace)
        self.assertIsNone(controller.session.last_found)

    def test_saved_scope_discarded_after_text_shrinks(self):
        controller, target = _attach('aaaa\nbbbb\ncccc')
        target.set_selection(10, 0)
        controller.deactivate(SearchOptions.GLOBAL)
        self.assertEqual(target.get_scope(), Match(10, 4))

        controller.activate(SearchOptions.GLOBAL)
        self.assertEqual(controller.perform_replace_all('a', ''), 4)
        self.assertEqual(target.text, 'bbbb\ncccc')

        controller.deactivate(SearchOptions.GLOBAL)
        self.assertEqual(target.get_scope(), Match(0, 5))
        self.assertEqual(target.get_selection(), Match(0, 0))
        self.assertIsNone(controller.session.saved_scope)

    def test_deactivate_scope(self):
        controller, target = _attach('one\ntwo')
        controller.deactivate(SearchOptions.GLOBAL)
        controller.activate(SearchOptions.GLOBAL)
        controller.deactivate_scope()

        self.assertIsNone(target.get_scope())
        self.assertIsNone(controller.session.saved_scope)

    def test_scoping_unsupported(self):
        controller, target = _attach('one\ntwo', scoping=False)
        target.set_selection(5, 0)
        controller.deactivate(SearchOptions.GLOBAL)

        self.assertIsNone(target.get_scope())
        self.assertEqual(target.get_selection(), Match(5, 0))


class TestReplace(unittest.TestCase):

    def test_replace_selection(self):
        controller, target = _attach('abc def')
        controller.perform_search('def')

        self.assertTrue(controller.perform_replace_selection('xyz'))
        self.assertEqual(target.text, 'abc xyz')
        self.assertEqual(target.get_selection(), Match(4, 3))

    def test_replace_selection_none_is_empty(self):
        controller, target = _attach('abc def')
        controller.perform_search('def')

        self.assertTrue(controller.perform_replace_selection(None))
        self.assertEqual(target.text, 'abc ')

    def test_replace_selection_no_target(self):
        controller = _controller.SearchController()
        self.assertFalse(controller.perform_replace_selection('x'))
        self.assertTrue(controller.status.error)
        self.assertEqual(controller.status.message, _constants.NO_TARGET_MESSAGE)

    def test_replace_selection_read_only(self):
        controller, target = _attach('abc', editable=False)
        controller.perform_search('abc')
        self.assertFalse(controller.perform_replace_selection('x'))
        self.assertEqual(target.text, 'abc')
        self.assertTrue(controller.status.error)

    def test_replace_selection_after_failed_find(self):
        controller, target = _attach('abc')
        controller.perform_search('xyz')

        status = controller.status
        self.assertFalse(controller.perform_replace_selection('x'))
        self.assertEqual(target.text, 'abc')
        self.assertIs(controller.status, status)

    def test_replace_selection_invalid_group(self):
        controller, target = _attach('abc')
        controller.activate(SearchOptions.REGEX)
        controller.perform_search('(b)')

        self.assertFalse(controller.perform_replace_selection(r'\5'))
        self.assertEqual(target.text, 'abc')
        self.assertTrue(controller.status.error)

    def test_select_and_replace_forward(self):
        controller, target = _attach('Hello<replace>World<replace>!')

        self.assertTrue(controller.perform_select_and_replace('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World<replace>!')
        self.assertEqual(target.get_selection(), Match(6, 0))

        self.assertTrue(controller.perform_select_and_replace('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World !')

        self.assertFalse(controller.perform_select_and_replace('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World !')

    def test_select_and_replace_backward_wrap(self):
        controller, target = _attach('Hello<replace>World<replace>!')
        controller.deactivate(SearchOptions.FORWARD)
        controller.activate(SearchOptions.WRAP)

        self.assertTrue(controller.perform_select_and_replace('<replace>', ' '))
        self.assertEqual(target.text, 'Hello<replace>World !')
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, _constants.WRAPPED_SEARCH_MESSAGE)

        self.assertTrue(controller.perform_select_and_replace('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World !')

    def test_select_and_replace_uses_located_selection(self):
        controller, target = _attach('abc abc')
        controller.perform_search('abc')
        controller.perform_search('abc')
        self.assertEqual(target.get_selection(), Match(4, 3))

        self.assertTrue(controller.perform_select_and_replace('abc', 'x'))
        self.assertEqual(target.text, 'abc x')

    def test_select_and_replace_uses_current_selection(self):
        controller, target = _attach('one two one')
        controller.perform_search('two')
        target.set_selection(0, 3)

        self.assertTrue(controller.perform_select_and_replace('two', 'X'))
        self.assertEqual(target.text, 'X two one')

    def test_select_and_replace_after_attach_searches(self):
        controller, target = _attach('one two one')
        target.set_selection(0, 3)

        self.assertTrue(controller.perform_select_and_replace('two', 'X'))
        self.assertEqual(target.text, 'one X one')

    def test_replace_and_find(self):
        controller, target = _attach('Hello<replace>World<replace>!')

        self.assertTrue(controller.perform_replace_and_find('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World<replace>!')
        self.assertEqual(target.get_selection(), Match(11, 9))

        self.assertTrue(controller.perform_replace_and_find('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World !')
        self.assertTrue(controller.status.warning)
        self.assertEqual(controller.status.message, 'String "<replace>" not found')

        self.assertFalse(controller.perform_replace_and_find('<replace>', ' '))
        self.assertEqual(target.text, 'Hello World !')

    def test_replace_and_find_other_string(self):
        controller, target = _attach('foo bar')
        controller.perform_search('foo')

        self.assertTrue(controller.perform_replace_and_find('bar', 'X'))
        self.assertEqual(target.text, 'foo X')

    def test_replace_and_find_options_changed(self):
        controller, target = _attach('Abc abc')
        controller.perform_search('abc')
        self.assertEqual(target.get_selection(), Match(0, 3))

        controller.activate(SearchOptions.CASE_SENSITIVE)

        self.assertTrue(controller.perform_replace_and_find('abc', 'x'))
        self.assertEqual(target.text, 'Abc x')

    def test_replace_and_find_empty(self):
        controller, target = _attach('abc')
        self.assertFalse(controller.perform_replace_and_find('', 'x'))
        self.assertFalse(controller.perform_select_and_replace('', 'x'))
        self.assertEqual(target.text, 'abc')

    def test_replace_and_find_regex(self):
        controller, target = _attach('k=1 k=2')
        controller.activate(SearchOptions.REGEX)

        self.assertTrue(controller.perform_replace_and_find(r'k=(\d)', r'v\1'))
        self.assertEqual(target.text, 'v1 k=2')
        self.assertEqual(target.get_selection(), Match(3, 3))

        self.assertTrue(controller.perform_replace_and_find(r'k=(\d)', r'v\1'))
        self.assertEqual(target.text, 'v1 v2')


if __name__ == '__main__':
    unittest.main()
