"""
# AsciiDoc-Compat: preprocessor.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The line-rewriting state machine sitting in front of the converter.
"""

import re
from typing import Optional

from asciicompat.constants import (
    ATTRIBUTE_ENTRY_PATTERN,
    BLOCK_DELIMITER,
    INCLUDE_TAGGED_PATTERN,
    INCLUDE_TAGGED_SCHEME,
    LEGACY_BLOCK_MACRO_PATTERN,
    LEGACY_BLOCK_MACRO_SUBSTITUTE,
    LEGACY_INLINE_MACRO_PATTERN,
    LEGACY_INLINE_MACRO_SUBSTITUTE,
    SNIPPET_PATTERN,
    SNIPPET_SUBSTITUTE,
    UNTERMINATED_BLOCK_CODE,
    UNTERMINATED_FENCE_CODE,
)
from asciicompat.diagnostics import DiagnosticLog
from asciicompat.includes import DirectiveIncludeResolver, IncludeResolver
from asciicompat.rewrites import FenceDelimiterRewrite, RegexDictionaryRewrite, RewriteSequence, SubsCalloutsRewrite
from asciicompat.sources import Line, LineProcessor, LineSource
from asciicompat.states import PreprocessorState


class CompatPreprocessor(LineProcessor):
    """
    Object rewriting the lines of one legacy document as the line source hands them out.

    A line is dispatched on its shape, first match wins:
    1. inside an attribute only block: passed through, except the closing `--` which is blanked;
    2. `--` opening a block whose body is only attribute entries: blanked, entering the attribute only block;
    3. `include-tagged::«target»[«tag»]`: redirected through the include resolver;
    4. anything else: the rewrite sequence (see `build_rewrite_sequence`).

    ## Attribute only blocks

    Turns
    ````
    --
    :api: bulk
    :request: BulkRequest
    --
    ````
    into the bare attribute entries (with the delimiters blanked),
    because the converter scopes attributes set inside a block to that block.
    Nested blocks are not supported: the first `--` ends the absorption.

    ## Tagged includes

    Turns `include-tagged::foo[tag]` into `include::elastic-include-tagged:foo[tag]` (by default),
    so that a dedicated include processor with the legacy tag semantics can pick it up.
    If the resolver rejects the directive, the line is kept as it is.
    """
    _ATTRIBUTE_ENTRY_PATTERN_COMPILED = re.compile(ATTRIBUTE_ENTRY_PATTERN, flags=re.VERBOSE)
    _INCLUDE_TAGGED_PATTERN_COMPILED = re.compile(INCLUDE_TAGGED_PATTERN, flags=re.ASCII | re.VERBOSE)

    _source: 'LineSource'
    _state: 'PreprocessorState'
    _diagnostic_log: 'DiagnosticLog'
    _include_resolver: 'IncludeResolver'
    _rewrite_sequence: 'RewriteSequence'
    _verbose_mode_enabled: bool

    def __init__(self, source: 'LineSource', diagnostic_log: 'DiagnosticLog',
                 include_resolver: Optional['IncludeResolver'] = None, verbose_mode_enabled: bool = False):
        if include_resolver is None:
            include_resolver = DirectiveIncludeResolver(diagnostic_log)

        self._source = source
        self._state = PreprocessorState()
        self._diagnostic_log = diagnostic_log
        self._include_resolver = include_resolver
        self._verbose_mode_enabled = verbose_mode_enabled
        self._rewrite_sequence = self.build_rewrite_sequence()

        source.attach(self)

    @property
    def state(self) -> 'PreprocessorState':
        return self._state

    @property
    def rewrite_sequence(self) -> 'RewriteSequence':
        return self._rewrite_sequence

    def build_rewrite_sequence(self) -> 'RewriteSequence':
        """
        Build the rewrites applied to ordinary lines, in order.

        Order matters: the block macro rewrite runs before the inline one
        so that a macro alone on its line is not converted twice.
        """
        verbose_mode_enabled = self._verbose_mode_enabled

        subs_callouts = SubsCalloutsRewrite('subs-callouts', verbose_mode_enabled)

        code_block_delimiters = FenceDelimiterRewrite('code-block-delimiters', verbose_mode_enabled)
        code_block_delimiters.bind(self._state, self._source, self._diagnostic_log)

        legacy_block_macros = RegexDictionaryRewrite('legacy-block-macros', verbose_mode_enabled)
        legacy_block_macros.add_substitution(LEGACY_BLOCK_MACRO_PATTERN, LEGACY_BLOCK_MACRO_SUBSTITUTE)

        legacy_inline_macros = RegexDictionaryRewrite('legacy-inline-macros', verbose_mode_enabled)
        legacy_inline_macros.add_substitution(LEGACY_INLINE_MACRO_PATTERN, LEGACY_INLINE_MACRO_SUBSTITUTE)

        snippet_markers = RegexDictionaryRewrite('snippet-markers', verbose_mode_enabled)
        snippet_markers.add_substitution(SNIPPET_PATTERN, SNIPPET_SUBSTITUTE)

        rewrite_sequence = RewriteSequence('postprocess', verbose_mode_enabled)
        rewrite_sequence.rewrites = [
            subs_callouts,
            code_block_delimiters,
            legacy_block_macros,
            legacy_inline_macros,
            snippet_markers,
        ]
        rewrite_sequence.commit()

        if verbose_mode_enabled:
            rewrite_ids = [
                f'#{rewrite.id_}'
                for rewrite in rewrite_sequence.rewrites
            ]
            print(f'Rewrite sequence: {rewrite_ids}\n')

        return rewrite_sequence

    @staticmethod
    def is_attribute_entry(line: str) -> bool:
        return CompatPreprocessor._ATTRIBUTE_ENTRY_PATTERN_COMPILED.fullmatch(line) is not None

    @staticmethod
    def compute_include_tagged_match(line: str) -> Optional[re.Match]:
        return CompatPreprocessor._INCLUDE_TAGGED_PATTERN_COMPILED.fullmatch(line)

    @staticmethod
    def may_need_rewrite(line: str) -> bool:
        """
        Whether a line could be changed by the rewrite sequence at all.

        Every rewrite needs either a bracket, a leading hyphen (code block delimiters),
        or a leading double slash (snippet comments).
        """
        return '[' in line or line.startswith('-') or line.startswith('//')

    def process_line(self, line: 'Line') -> Optional['Line']:
        if self._state.in_attribute_only_block:
            return self._process_in_attribute_only_block(line)

        if line.text == BLOCK_DELIMITER:
            return self._process_start_block(line)

        include_tagged_match = CompatPreprocessor.compute_include_tagged_match(line.text)
        if include_tagged_match is not None:
            return self._process_include_tagged(line, include_tagged_match)

        return self._postprocess(line)

    def conclude(self):
        state = self._state

        if state.in_attribute_only_block:
            self._diagnostic_log.warn(state.attribute_only_block_cursor, UNTERMINATED_BLOCK_CODE,
                                      'attribute only block is never closed')

        if state.open_fence is not None:
            self._diagnostic_log.warn(state.open_fence_cursor, UNTERMINATED_FENCE_CODE,
                                      f'code block opened with `{state.open_fence}` is never closed')

        state.reset()

    def _accept(self, line: 'Line') -> 'Line':
        self._source.look_ahead += 1

        return line

    def _process_in_attribute_only_block(self, line: 'Line') -> 'Line':
        if line.text == BLOCK_DELIMITER:
            self._state.exit_attribute_only_block()
            line.clear()

        return self._accept(line)

    def _process_start_block(self, line: 'Line') -> 'Line':
        closing_line = None
        for following_line in self._source.iter_texts(start=1):
            if not CompatPreprocessor.is_attribute_entry(following_line):
                closing_line = following_line
                break

        if closing_line != BLOCK_DELIMITER:
            return self._postprocess(line)

        self._state.enter_attribute_only_block(line.cursor)
        line.clear()

        return self._accept(line)

    def _process_include_tagged(self, line: 'Line', include_tagged_match: re.Match) -> Optional['Line']:
        target = f'{INCLUDE_TAGGED_SCHEME}:{include_tagged_match.group("target")}'
        attributes = include_tagged_match.group('attributes')

        if self._include_resolver.resolve(self._source, target, attributes):
            return None

        # rejected by the resolver, which has logged it; the line goes on as it is
        return self._accept(line)

    def _postprocess(self, line: 'Line') -> 'Line':
        if CompatPreprocessor.may_need_rewrite(line.text):
            line.text = self._rewrite_sequence.apply(line.text)

        return self._accept(line)
