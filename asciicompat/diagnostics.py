"""
# AsciiDoc-Compat: diagnostics.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Diagnostics raised while preprocessing.
"""

import sys
from typing import Iterator, NamedTuple, Optional, TextIO

from asciicompat.constants import DIAGNOSTIC_SEVERITY_WARNING
from asciicompat.sources import Cursor


class Diagnostic(NamedTuple):
    severity: str
    code: str
    message: str
    cursor: Optional[Cursor]


class DiagnosticLog:
    """
    Object collecting the diagnostics of one or more documents.

    Diagnostics are only ever recorded, never raised;
    it is up to the caller to print them (see `print_diagnostics`).
    """
    _diagnostics: list['Diagnostic']

    def __init__(self):
        self._diagnostics = []

    @property
    def diagnostics(self) -> list['Diagnostic']:
        return list(self._diagnostics)

    @property
    def codes(self) -> list[str]:
        return [diagnostic.code for diagnostic in self._diagnostics]

    def warn(self, cursor: Optional[Cursor], code: str, message: str):
        self._diagnostics.append(Diagnostic(DIAGNOSTIC_SEVERITY_WARNING, code, message, cursor))

    def clear(self):
        self._diagnostics.clear()

    def print_diagnostics(self, file: Optional[TextIO] = None):
        if file is None:
            file = sys.stderr

        for diagnostic in self._diagnostics:
            print(DiagnosticLog.format_diagnostic(diagnostic), file=file)

    @staticmethod
    def format_diagnostic(diagnostic: 'Diagnostic') -> str:
        cursor = diagnostic.cursor
        if cursor is None:
            location = ''
        else:
            location = f'`{cursor.file_name}`, line {cursor.line_number}: '

        return f'{diagnostic.severity}: {location}{diagnostic.code}: {diagnostic.message}'

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator['Diagnostic']:
        return iter(self._diagnostics)
