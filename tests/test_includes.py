"""
# AsciiDoc-Compat: test_includes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `includes.py`.
"""

import unittest

from asciicompat.diagnostics import DiagnosticLog
from asciicompat.includes import DirectiveIncludeResolver
from asciicompat.sources import Cursor, LineSource


class TestIncludes(unittest.TestCase):
    def test_is_valid_target(self):
        self.assertTrue(DirectiveIncludeResolver.is_valid_target('elastic-include-tagged:foo'))
        self.assertTrue(DirectiveIncludeResolver.is_valid_target('elastic-include-tagged:{doc-tests}/Foo.java'))
        self.assertFalse(DirectiveIncludeResolver.is_valid_target('elastic-include-tagged:'))
        self.assertFalse(DirectiveIncludeResolver.is_valid_target('elastic-include-tagged:foo bar'))
        self.assertFalse(DirectiveIncludeResolver.is_valid_target('elastic-include-tagged:foo]'))
        self.assertFalse(DirectiveIncludeResolver.is_valid_target(''))

    def test_resolve_valid(self):
        diagnostic_log = DiagnosticLog()
        source = LineSource(['include-tagged::foo[tag]', 'next'], 'doc.asciidoc')
        resolver = DirectiveIncludeResolver(diagnostic_log)

        self.assertTrue(resolver.resolve(source, 'elastic-include-tagged:foo', 'tag'))
        self.assertEqual(source.lines, ['include::elastic-include-tagged:foo[tag]', 'next'])
        self.assertEqual(source.cursor, Cursor('doc.asciidoc', 1))
        self.assertEqual(source.look_ahead, 1)
        self.assertEqual(len(diagnostic_log), 0)

    def test_resolve_without_attributes(self):
        source = LineSource(['include-tagged::foo[]'], 'doc.asciidoc')
        resolver = DirectiveIncludeResolver(DiagnosticLog())

        self.assertTrue(resolver.resolve(source, 'elastic-include-tagged:foo', None))
        self.assertEqual(source.lines, ['include::elastic-include-tagged:foo[]'])

    def test_resolve_invalid(self):
        diagnostic_log = DiagnosticLog()
        source = LineSource(['include-tagged::foo bar[tag]'], 'doc.asciidoc')
        resolver = DirectiveIncludeResolver(diagnostic_log)

        self.assertFalse(resolver.resolve(source, 'elastic-include-tagged:foo bar', 'tag'))
        self.assertEqual(source.lines, ['include-tagged::foo bar[tag]'])
        self.assertEqual(source.look_ahead, 0)
        self.assertEqual(diagnostic_log.codes, ['invalid-include'])
        self.assertEqual(diagnostic_log.diagnostics[0].cursor, Cursor('doc.asciidoc', 1))


if __name__ == '__main__':
    unittest.main()
