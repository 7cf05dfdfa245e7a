"""
# AsciiDoc-Compat: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core preprocessing entry points.

Legacy AsciiDoc documents are rewritten line by line into AsciiDoc that Asciidoctor accepts.
Lines may be blanked or rewritten but are never merged,
so that positions reported by the converter still point at the legacy document.
"""

from typing import Iterable, Optional

from asciicompat.diagnostics import DiagnosticLog
from asciicompat.includes import IncludeResolver
from asciicompat.preprocessor import CompatPreprocessor
from asciicompat.sources import LineSource
from asciicompat.utilities import join_lines, split_lines


def preprocess_lines(lines: Iterable[str], file_name: str,
                     diagnostic_log: Optional[DiagnosticLog] = None,
                     include_resolver: Optional[IncludeResolver] = None,
                     verbose_mode_enabled: bool = False) -> list[str]:
    """
    Preprocess the lines (without line endings) of one document.

    A fresh preprocessor state is used for every call.
    """
    if diagnostic_log is None:
        diagnostic_log = DiagnosticLog()

    source = LineSource(lines, file_name)
    CompatPreprocessor(source, diagnostic_log, include_resolver, verbose_mode_enabled)

    return source.read_lines()


def preprocess(text: str, file_name: str,
               diagnostic_log: Optional[DiagnosticLog] = None,
               include_resolver: Optional[IncludeResolver] = None,
               verbose_mode_enabled: bool = False) -> str:
    """
    Preprocess the text of one document.
    """
    lines, has_final_newline = split_lines(text)
    lines = preprocess_lines(lines, file_name, diagnostic_log, include_resolver, verbose_mode_enabled)

    return join_lines(lines, has_final_newline)
