"""
# AsciiDoc-Compat: rewrites.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Line rewrites applied to every ordinary line of a document.
"""

import copy
import re
from typing import Optional

from asciicompat.bases import Rewrite, RewriteWithSubstitutions
from asciicompat.constants import CODE_BLOCK_DELIMITER_PATTERN, DELIMITER_MISMATCH_CODE, SOURCE_WITH_SUBS_PATTERN
from asciicompat.diagnostics import DiagnosticLog
from asciicompat.exceptions import CommittedMutateException, MissingAttributeException
from asciicompat.sources import LineSource
from asciicompat.states import PreprocessorState


class RewriteSequence(Rewrite):
    """
    A rewrite that applies a sequence of rewrites, each to the output of the one before.
    """
    _rewrites: list['Rewrite']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._rewrites = []

    @property
    def rewrites(self) -> list['Rewrite']:
        return self._rewrites

    @rewrites.setter
    def rewrites(self, value: list['Rewrite']):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `rewrites` after `commit()`')

        self._rewrites = copy.copy(value)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        for rewrite in self._rewrites:
            if not rewrite.is_committed:
                rewrite.commit()

    def _apply(self, string: str) -> str:
        for rewrite in self._rewrites:
            string = rewrite.apply(string)

        return string


class RegexDictionaryRewrite(RewriteWithSubstitutions):
    """
    A rewrite for a dictionary of regex substitutions.

    Substitutions are applied in order,
    with `flags=re.ASCII | re.VERBOSE`.
    """
    _compiled_patterns: list[tuple[re.Pattern, str]]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._compiled_patterns = []

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._compiled_patterns = [
            (re.compile(pattern, flags=re.ASCII | re.VERBOSE), substitute)
            for pattern, substitute in self._substitute_from_pattern.items()
        ]

    def _apply(self, string: str) -> str:
        for compiled_pattern, substitute in self._compiled_patterns:
            string = compiled_pattern.sub(substitute, string)

        return string


class SubsCalloutsRewrite(Rewrite):
    """
    A rewrite adding `callouts` to the `subs` of a source block header.

    The legacy toolchain applied callouts to every source block;
    the converter only applies the subs that are listed.
    """
    _SOURCE_WITH_SUBS_PATTERN_COMPILED = re.compile(SOURCE_WITH_SUBS_PATTERN, flags=re.ASCII | re.VERBOSE)

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        match = SubsCalloutsRewrite._SOURCE_WITH_SUBS_PATTERN_COMPILED.fullmatch(string)
        if match is None:
            return string

        old_subs = match.group('subs')
        if 'callouts' in old_subs:
            return string

        return string.replace(f'subs="{old_subs}"', f'subs="{old_subs},callouts"', 1)


class FenceDelimiterRewrite(Rewrite):
    """
    A rewrite making the closing delimiter of a code block match its opening delimiter.

    The legacy toolchain accepts `----` closed by `------`; the converter does not.
    A mismatched closing delimiter is replaced by the opening one and a `delimiter-mismatch` warning is logged.
    Reads and writes `open_fence` of the document state, and reads the position of the line being processed
    from the line source.
    """
    _CODE_BLOCK_DELIMITER_PATTERN_COMPILED = re.compile(CODE_BLOCK_DELIMITER_PATTERN, flags=re.ASCII | re.VERBOSE)

    _state: Optional['PreprocessorState']
    _source: Optional['LineSource']
    _diagnostic_log: Optional['DiagnosticLog']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._state = None
        self._source = None
        self._diagnostic_log = None

    def bind(self, state: 'PreprocessorState', source: 'LineSource', diagnostic_log: 'DiagnosticLog'):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `bind(...)` after `commit()`')

        self._state = state
        self._source = source
        self._diagnostic_log = diagnostic_log

    @staticmethod
    def is_code_block_delimiter(string: str) -> bool:
        return FenceDelimiterRewrite._CODE_BLOCK_DELIMITER_PATTERN_COMPILED.fullmatch(string) is not None

    def _validate_mandatory_attributes(self):
        for attribute_name in ('state', 'source', 'diagnostic_log'):
            if getattr(self, f'_{attribute_name}') is None:
                raise MissingAttributeException(attribute_name)

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        if not FenceDelimiterRewrite.is_code_block_delimiter(string):
            return string

        state = self._state
        open_fence = state.open_fence
        if open_fence is None:
            state.open_code_block(string, self._source.cursor)
            return string

        if string != open_fence:
            self._diagnostic_log.warn(self._source.cursor, DELIMITER_MISMATCH_CODE, "code block end doesn't match start")
            string = open_fence

        state.close_code_block()

        return string
