"""
# AsciiDoc-Compat: test_preprocessor.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `preprocessor.py`.
"""

import unittest
from typing import Optional

from asciicompat.diagnostics import DiagnosticLog
from asciicompat.includes import IncludeResolver
from asciicompat.preprocessor import CompatPreprocessor
from asciicompat.sources import Cursor, LineSource


class RecordingIncludeResolver(IncludeResolver):
    def __init__(self, accepts: bool):
        self.accepts = accepts
        self.calls = []

    def resolve(self, source: LineSource, target: str, attributes: Optional[str]) -> bool:
        self.calls.append((target, attributes))
        if not self.accepts:
            return False

        source.replace_next_line(f'// resolved {target}')
        return True


def run_preprocessor(lines: list[str], include_resolver: Optional[IncludeResolver] = None):
    diagnostic_log = DiagnosticLog()
    source = LineSource(lines, 'doc.asciidoc')
    preprocessor = CompatPreprocessor(source, diagnostic_log, include_resolver)
    output_lines = source.read_lines()

    return output_lines, preprocessor, diagnostic_log


class TestPreprocessor(unittest.TestCase):
    def test_is_attribute_entry(self):
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':api: bulk'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':request: BulkRequest'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':api:'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':!api:'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':api!:'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':écrit: oui'))
        self.assertTrue(CompatPreprocessor.is_attribute_entry(':api-名前: bulk'))
        self.assertFalse(CompatPreprocessor.is_attribute_entry('api: bulk'))
        self.assertFalse(CompatPreprocessor.is_attribute_entry(':api bulk'))
        self.assertFalse(CompatPreprocessor.is_attribute_entry('::'))
        self.assertFalse(CompatPreprocessor.is_attribute_entry(''))

    def test_compute_include_tagged_match(self):
        match = CompatPreprocessor.compute_include_tagged_match('include-tagged::foo[tag]')
        self.assertEqual(match.group('target'), 'foo')
        self.assertEqual(match.group('attributes'), 'tag')

        match = CompatPreprocessor.compute_include_tagged_match('include-tagged::foo[]')
        self.assertEqual(match.group('target'), 'foo')
        self.assertIsNone(match.group('attributes'))

        self.assertIsNone(CompatPreprocessor.compute_include_tagged_match('include-tagged::[tag]'))
        self.assertIsNone(CompatPreprocessor.compute_include_tagged_match('include::foo[tag]'))
        self.assertIsNone(CompatPreprocessor.compute_include_tagged_match(' include-tagged::foo[tag]'))

    def test_may_need_rewrite(self):
        self.assertTrue(CompatPreprocessor.may_need_rewrite('added[1.0]'))
        self.assertTrue(CompatPreprocessor.may_need_rewrite('----'))
        self.assertTrue(CompatPreprocessor.may_need_rewrite('// CONSOLE'))
        self.assertFalse(CompatPreprocessor.may_need_rewrite('Plain words.'))
        self.assertFalse(CompatPreprocessor.may_need_rewrite(''))

    def test_attribute_only_block(self):
        output_lines, preprocessor, diagnostic_log = run_preprocessor(
            ['--', ':api: bulk', ':request: BulkRequest', '--', 'added[6.0.0]']
        )
        self.assertEqual(output_lines, ['', ':api: bulk', ':request: BulkRequest', '', 'added::[6.0.0]'])
        self.assertFalse(preprocessor.state.in_attribute_only_block)
        self.assertTrue(preprocessor.state.is_idle)
        self.assertEqual(len(diagnostic_log), 0)

    def test_attribute_only_block_passes_lines_through(self):
        output_lines, _, _ = run_preprocessor(['--', ':api: bulk', '--'])
        self.assertEqual(output_lines, ['', ':api: bulk', ''])

    def test_attribute_only_block_with_non_ascii_names(self):
        output_lines, preprocessor, _ = run_preprocessor(['--', ':écrit: oui', ':api: bulk', '--'])
        self.assertEqual(output_lines, ['', ':écrit: oui', ':api: bulk', ''])
        self.assertFalse(preprocessor.state.in_attribute_only_block)

    def test_long_attribute_run_without_closing_delimiter(self):
        attribute_lines = [f':attribute-{index}: value' for index in range(2000)]
        lines = ['--', *attribute_lines, 'Some words.', '--']
        output_lines, preprocessor, diagnostic_log = run_preprocessor(lines)
        self.assertEqual(output_lines, lines)
        self.assertFalse(preprocessor.state.in_attribute_only_block)
        self.assertEqual(len(diagnostic_log), 0)

    def test_empty_attribute_only_block(self):
        output_lines, preprocessor, _ = run_preprocessor(['--', '--', 'words'])
        self.assertEqual(output_lines, ['', '', 'words'])
        self.assertFalse(preprocessor.state.in_attribute_only_block)

    def test_ordinary_block(self):
        lines = ['--', ':api: bulk', 'Some words added[6.0].', '--']
        output_lines, preprocessor, _ = run_preprocessor(lines)
        self.assertEqual(output_lines, ['--', ':api: bulk', 'Some words added:[6.0].', '--'])
        self.assertFalse(preprocessor.state.in_attribute_only_block)

    def test_unclosed_block(self):
        output_lines, preprocessor, diagnostic_log = run_preprocessor(['--', ':api: bulk'])
        self.assertEqual(output_lines, ['--', ':api: bulk'])
        self.assertFalse(preprocessor.state.in_attribute_only_block)
        self.assertEqual(len(diagnostic_log), 0)

    def test_fence_mismatch(self):
        output_lines, preprocessor, diagnostic_log = run_preprocessor(['----', 'foo', '------', 'bar'])
        self.assertEqual(output_lines, ['----', 'foo', '----', 'bar'])
        self.assertIsNone(preprocessor.state.open_fence)
        self.assertEqual(diagnostic_log.codes, ['delimiter-mismatch'])
        self.assertEqual(diagnostic_log.diagnostics[0].cursor, Cursor('doc.asciidoc', 3))

    def test_fence_match(self):
        lines = ['------', 'foo', '------', '----', 'bar', '----']
        output_lines, _, diagnostic_log = run_preprocessor(lines)
        self.assertEqual(output_lines, lines)
        self.assertEqual(len(diagnostic_log), 0)

    def test_unterminated_fence(self):
        output_lines, preprocessor, diagnostic_log = run_preprocessor(['words', '----', 'foo'])
        self.assertEqual(output_lines, ['words', '----', 'foo'])
        self.assertEqual(diagnostic_log.codes, ['unterminated-fence'])
        self.assertEqual(diagnostic_log.diagnostics[0].cursor, Cursor('doc.asciidoc', 2))
        self.assertIsNone(preprocessor.state.open_fence)

    def test_unterminated_attribute_only_block(self):
        diagnostic_log = DiagnosticLog()
        source = LineSource([], 'doc.asciidoc')
        preprocessor = CompatPreprocessor(source, diagnostic_log)
        preprocessor.state.enter_attribute_only_block(Cursor('doc.asciidoc', 7))

        self.assertEqual(source.read_lines(), [])
        self.assertEqual(diagnostic_log.codes, ['unterminated-block'])
        self.assertEqual(diagnostic_log.diagnostics[0].cursor, Cursor('doc.asciidoc', 7))
        self.assertTrue(preprocessor.state.is_idle)

        source.read_lines()
        self.assertEqual(len(diagnostic_log), 1)

    def test_include_tagged_resolved(self):
        include_resolver = RecordingIncludeResolver(accepts=True)
        output_lines, _, _ = run_preprocessor(['include-tagged::foo[tag]', 'after'], include_resolver)

        self.assertEqual(include_resolver.calls, [('elastic-include-tagged:foo', 'tag')])
        self.assertEqual(output_lines, ['// resolved elastic-include-tagged:foo', 'after'])

    def test_include_tagged_rejected(self):
        include_resolver = RecordingIncludeResolver(accepts=False)
        source = LineSource(['include-tagged::foo[tag]', 'after'], 'doc.asciidoc')
        preprocessor = CompatPreprocessor(source, DiagnosticLog(), include_resolver)

        line = source.peek_line()
        self.assertEqual(line.text, 'include-tagged::foo[tag]')
        self.assertEqual(source.look_ahead, 1)
        self.assertEqual(include_resolver.calls, [('elastic-include-tagged:foo', 'tag')])

        self.assertEqual(source.read_lines(), ['include-tagged::foo[tag]', 'after'])
        self.assertEqual(len(include_resolver.calls), 1)
        self.assertTrue(preprocessor.state.is_idle)

    def test_include_tagged_default_resolver(self):
        output_lines, _, diagnostic_log = run_preprocessor(
            ['include-tagged::{doc-tests}/CRUDDocumentationIT.java[index-request]', 'include-tagged::foo bar[tag]']
        )
        self.assertEqual(
            output_lines,
            ['include::elastic-include-tagged:{doc-tests}/CRUDDocumentationIT.java[index-request]',
             'include-tagged::foo bar[tag]'],
        )
        self.assertEqual(diagnostic_log.codes, ['invalid-include'])
        self.assertEqual(diagnostic_log.diagnostics[0].cursor, Cursor('doc.asciidoc', 2))

    def test_resolved_include_is_not_rewritten(self):
        output_lines, _, _ = run_preprocessor(['include-tagged::added[tag]'])
        self.assertEqual(output_lines, ['include::elastic-include-tagged:added[tag]'])

    def test_rewrite_sequence_order(self):
        preprocessor = CompatPreprocessor(LineSource([], 'doc.asciidoc'), DiagnosticLog())
        self.assertEqual(
            [rewrite.id_ for rewrite in preprocessor.rewrite_sequence.rewrites],
            [
                'subs-callouts',
                'code-block-delimiters',
                'legacy-block-macros',
                'legacy-inline-macros',
                'snippet-markers',
            ],
        )

    def test_separate_documents_have_separate_state(self):
        first_output_lines, _, _ = run_preprocessor(['----', 'foo'])
        second_output_lines, _, diagnostic_log = run_preprocessor(['------', 'bar', '------'])
        self.assertEqual(first_output_lines, ['----', 'foo'])
        self.assertEqual(second_output_lines, ['------', 'bar', '------'])
        self.assertEqual(len(diagnostic_log), 0)


if __name__ == '__main__':
    unittest.main()
