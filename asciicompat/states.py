"""
# AsciiDoc-Compat: states.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Per-document preprocessor state.
"""

from typing import Optional

from asciicompat.sources import Cursor


class PreprocessorState:
    """
    The cross-line memory of the preprocessor for one document.

    - `in_attribute_only_block`: whether a `--` block whose body is only attribute entries is being absorbed
    - `open_fence`: the exact text of the currently open code block delimiter, if any

    The cursors record where each construct was opened, for reporting unterminated constructs.
    """
    in_attribute_only_block: bool
    attribute_only_block_cursor: Optional[Cursor]
    open_fence: Optional[str]
    open_fence_cursor: Optional[Cursor]

    def __init__(self):
        self.reset()

    def reset(self):
        self.in_attribute_only_block = False
        self.attribute_only_block_cursor = None
        self.open_fence = None
        self.open_fence_cursor = None

    def enter_attribute_only_block(self, cursor: Optional[Cursor]):
        self.in_attribute_only_block = True
        self.attribute_only_block_cursor = cursor

    def exit_attribute_only_block(self):
        self.in_attribute_only_block = False
        self.attribute_only_block_cursor = None

    def open_code_block(self, delimiter: str, cursor: Optional[Cursor]):
        self.open_fence = delimiter
        self.open_fence_cursor = cursor

    def close_code_block(self):
        self.open_fence = None
        self.open_fence_cursor = None

    @property
    def is_idle(self) -> bool:
        return not self.in_attribute_only_block and self.open_fence is None
