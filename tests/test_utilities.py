"""
# AsciiDoc-Compat: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from asciicompat.utilities import join_lines, none_to_empty_string, split_lines


class TestUtilities(unittest.TestCase):
    def test_split_lines(self):
        self.assertEqual(split_lines(''), ([], False))
        self.assertEqual(split_lines('\n'), ([''], True))
        self.assertEqual(split_lines('abc'), (['abc'], False))
        self.assertEqual(split_lines('a\nb\n'), (['a', 'b'], True))
        self.assertEqual(split_lines('a\r\nb\r\n'), (['a', 'b'], True))
        self.assertEqual(split_lines('a\n\n\nb'), (['a', '', '', 'b'], False))

    def test_join_lines(self):
        self.assertEqual(join_lines([], False), '')
        self.assertEqual(join_lines([], True), '')
        self.assertEqual(join_lines([''], True), '\n')
        self.assertEqual(join_lines(['a', 'b'], False), 'a\nb')
        self.assertEqual(join_lines(['a', 'b'], True), 'a\nb\n')

    def test_none_to_empty_string(self):
        self.assertEqual(none_to_empty_string(''), '')
        self.assertEqual(none_to_empty_string(None), '')
        self.assertEqual(none_to_empty_string('xyz'), 'xyz')


if __name__ == '__main__':
    unittest.main()
