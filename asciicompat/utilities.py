"""
# AsciiDoc-Compat: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from typing import Optional


def split_lines(text: str) -> tuple[list[str], bool]:
    """
    Split text into lines, reporting whether it ended with a newline.

    Both `\\n` and `\\r\\n` endings are accepted; the result carries no line endings.
    """
    if text == '':
        return [], False

    has_final_newline = text.endswith('\n')
    if has_final_newline:
        text = text[:-1]

    lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]

    return lines, has_final_newline


def join_lines(lines: list[str], has_final_newline: bool) -> str:
    text = '\n'.join(lines)
    if has_final_newline and len(lines) > 0:
        text += '\n'

    return text


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
