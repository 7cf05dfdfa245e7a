"""
# AsciiDoc-Compat: includes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Resolution of redirected include directives.
"""

import abc
import re
from typing import Optional

from asciicompat.constants import INCLUDE_TARGET_PATTERN, INVALID_INCLUDE_CODE
from asciicompat.diagnostics import DiagnosticLog
from asciicompat.sources import LineSource
from asciicompat.utilities import none_to_empty_string


class IncludeResolver(abc.ABC):
    """
    Base class for an include directive resolver.

    `resolve` is called with the line source positioned on the directive line.
    On success it has replaced or consumed that line and returns True;
    on a structurally invalid directive it logs a diagnostic, leaves the source untouched and returns False.
    """
    @abc.abstractmethod
    def resolve(self, source: 'LineSource', target: str, attributes: Optional[str]) -> bool:
        raise NotImplementedError


class DirectiveIncludeResolver(IncludeResolver):
    """
    Resolver that rewrites the directive line into a standard `include::«target»[«attributes»]` directive.

    The included file is not read; expansion is left to the converter.
    """
    _INCLUDE_TARGET_PATTERN_COMPILED = re.compile(INCLUDE_TARGET_PATTERN, flags=re.ASCII | re.VERBOSE)

    _diagnostic_log: 'DiagnosticLog'

    def __init__(self, diagnostic_log: 'DiagnosticLog'):
        self._diagnostic_log = diagnostic_log

    @staticmethod
    def is_valid_target(target: str) -> bool:
        if target.endswith(':'):
            return False

        return DirectiveIncludeResolver._INCLUDE_TARGET_PATTERN_COMPILED.fullmatch(target) is not None

    def resolve(self, source: 'LineSource', target: str, attributes: Optional[str]) -> bool:
        if not DirectiveIncludeResolver.is_valid_target(target):
            self._diagnostic_log.warn(source.cursor, INVALID_INCLUDE_CODE, f'include target `{target}` is invalid')
            return False

        source.replace_next_line(f'include::{target}[{none_to_empty_string(attributes)}]')

        return True
