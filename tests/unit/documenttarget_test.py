import unittest

import findreplace.documenttarget as _documenttarget
from findreplace.exceptions import PatternSyntaxError, TargetStateError
from findreplace.target import Match


class TestDocumentTarget(unittest.TestCase):

    def test_selection_clamped(self):
        target = _documenttarget.DocumentTarget('abc')
        target.set_selection(2, 10)
        self.assertEqual(target.get_selection(), Match(2, 1))
        self.assertEqual(target.get_selection_text(), 'c')

        target.set_selection(10, 1)
        self.assertEqual(target.get_selection(), Match(3, 0))

    def test_find_forward_and_backward(self):
        target = _documenttarget.DocumentTarget('aaa')

        self.assertEqual(target.find_and_select(0, 'aa', True, False, False), 0)
        self.assertEqual(target.find_and_select(1, 'aa', True, False, False), 1)
        self.assertEqual(target.find_and_select(2, 'aa', True, False, False), -1)

        # overlapping candidates are found backward
        self.assertEqual(target.find_and_select(-1, 'aa', False, False, False), 1)
        self.assertEqual(target.find_and_select(0, 'aa', False, False, False), 0)

    def test_find_empty(self):
        target = _documenttarget.DocumentTarget('abc')
        self.assertEqual(target.find_and_select(0, '', True, False, False), -1)

    def test_find_case_and_whole_word(self):
        target = _documenttarget.DocumentTarget('Cat concat cat')

        self.assertEqual(target.find_and_select(1, 'cat', True, False, False), 7)
        self.assertEqual(target.find_and_select(1, 'cat', True, False, True), 11)
        self.assertEqual(target.find_and_select(0, 'cat', True, True, True), 11)

    def test_find_literal_special_characters(self):
        target = _documenttarget.DocumentTarget('a+b (c)')
        self.assertEqual(target.find_and_select(0, '(c)', True, False, False), 4)
        self.assertEqual(target.find_and_select(0, 'a+b', True, False, False), 0)

    def test_find_invalid_regex(self):
        target = _documenttarget.DocumentTarget('abc')
        with self.assertRaises(PatternSyntaxError) as context:
            target.find_and_select(0, '(', True, False, False, regex=True)
        self.assertEqual(context.exception.pattern, '(')

    def test_scope(self):
        target = _documenttarget.DocumentTarget('ab ab ab')
        target.set_scope(Match(3, 2))

        self.assertEqual(target.find_and_select(-1, 'ab', True, False, False), 3)
        self.assertEqual(target.find_and_select(4, 'ab', True, False, False), -1)
        self.assertEqual(target.find_and_select(-1, 'ab', False, False, False), 3)

        with self.assertRaises(ValueError):
            target.set_scope(Match(5, 10))

    def test_scope_tracks_edits(self):
        target = _documenttarget.DocumentTarget('xx ab xx')
        target.set_scope(Match(3, 2))

        target.find_and_select(-1, 'ab', True, False, False)
        target.replace_selection('abcd')
        self.assertEqual(target.text, 'xx abcd xx')
        self.assertEqual(target.get_scope(), Match(3, 4))

        target.set_scope(None)
        target.find_and_select(0, 'xx', True, False, False)
        target.set_scope(Match(5, 3))
        target.replace_selection('')
        self.assertEqual(target.text, ' abcd xx')
        self.assertEqual(target.get_scope(), Match(3, 3))

    def test_line_selection(self):
        target = _documenttarget.DocumentTarget('one\ntwo\nthree')

        target.set_selection(5, 0)
        self.assertEqual(target.get_line_selection(), Match(4, 4))

        target.set_selection(1, 5)
        self.assertEqual(target.get_line_selection(), Match(0, 8))

        target.set_selection(9, 1)
        self.assertEqual(target.get_line_selection(), Match(8, 5))

        target.set_selection(0, 4)
        self.assertEqual(target.get_line_selection(), Match(0, 4))

    def test_replace_selection(self):
        target = _documenttarget.DocumentTarget('hello world')
        target.find_and_select(0, 'world', True, False, False)
        target.replace_selection('there')

        self.assertEqual(target.text, 'hello there')
        self.assertEqual(target.get_selection(), Match(6, 5))

    def test_replace_regex_groups(self):
        target = _documenttarget.DocumentTarget('key=value')

        target.find_and_select(0, r'(\w+)=(?P<v>\w+)', True, False, False, regex=True)
        target.replace_selection(r'\2=\1', regex=True)
        self.assertEqual(target.text, 'value=key')

        target.find_and_select(0, r'(\w+)=(?P<v>\w+)', True, False, False, regex=True)
        target.replace_selection(r'\g<v>:\{1}:\0', regex=True)
        self.assertEqual(target.text, 'key:value:value=key')

    def test_replace_regex_invalid_group(self):
        target = _documenttarget.DocumentTarget('abc')
        target.find_and_select(0, '(b)', True, False, False, regex=True)

        with self.assertRaises(PatternSyntaxError):
            target.replace_selection(r'\{3}', regex=True)

        self.assertEqual(target.text, 'abc')

    def test_replace_refused(self):
        target = _documenttarget.DocumentTarget('abc')
        target.find_and_select(0, 'x', True, False, False)
        with self.assertRaises(TargetStateError):
            target.replace_selection('y')

        target.set_selection(0, 1)
        with self.assertRaises(TargetStateError):
            target.replace_selection('y', regex=True)

        target.replace_selection('y')
        self.assertEqual(target.text, 'ybc')

        read_only = _documenttarget.DocumentTarget('abc', editable=False)
        read_only.find_and_select(0, 'a', True, False, False)
        with self.assertRaises(TargetStateError):
            read_only.replace_selection('y')

    def test_modification_listeners(self):
        target = _documenttarget.DocumentTarget('abc')
        notified = []

        def listener(t):
            notified.append(t.text)

        target.add_modification_listener(listener)

        target.set_selection(0, 1)
        target.replace_selection('x')
        self.assertEqual(notified, ['xbc'])

        target.set_replace_all_mode(True)
        target.set_selection(1, 1)
        target.replace_selection('y')
        target.set_selection(2, 1)
        target.replace_selection('z')
        self.assertEqual(notified, ['xbc'])

        target.set_replace_all_mode(False)
        self.assertEqual(notified, ['xbc', 'xyz'])

        target.remove_modification_listener(listener)
        target.set_text('new')
        self.assertEqual(notified, ['xbc', 'xyz'])
        self.assertEqual(target.text, 'new')

    def test_session_hooks(self):
        target = _documenttarget.DocumentTarget('abc', validate_state=lambda: False)
        self.assertFalse(target.validate_target_state())

        target.begin_session()
        self.assertTrue(target.in_session)
        target.end_session()
        self.assertFalse(target.in_session)


if __name__ == '__main__':
    unittest.main()
