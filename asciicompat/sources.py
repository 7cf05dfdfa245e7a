"""
# AsciiDoc-Compat: sources.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The line source feeding the preprocessor.
"""

import abc
import collections
import itertools
import warnings
from typing import Iterable, Iterator, NamedTuple, Optional

from asciicompat.exceptions import ExhaustedSourceException


class Cursor(NamedTuple):
    file_name: str
    line_number: int


class Line:
    """
    A line of text together with the position it was read from.

    The text is mutable so that a processor can rewrite a line in place.
    """
    _text: str
    _cursor: 'Cursor'

    def __init__(self, text: str, cursor: 'Cursor'):
        self._text = text
        self._cursor = cursor

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        self._text = value

    @property
    def cursor(self) -> 'Cursor':
        return self._cursor

    def clear(self):
        self._text = ''

    def __repr__(self) -> str:
        return f'Line({self._text!r}, {self._cursor!r})'


class LineProcessor(abc.ABC):
    """
    Base class for an object that processes lines as a LineSource hands them out.
    """
    @abc.abstractmethod
    def process_line(self, line: 'Line') -> Optional['Line']:
        """
        Process the line at the head of the source.

        Return the line to be handed out, or None if the source has been altered
        (the head line replaced or consumed) and the new head should be processed instead.
        A processor that has finished with a line increments `look_ahead` on the source.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def conclude(self):
        """
        Called once when the source runs out of lines.
        """
        raise NotImplementedError


class LineSource:
    """
    Object supplying the lines of one document in order.

    ## `look_ahead`

    The number of lines at the head of the source that have already been processed.
    Such lines are handed out as they are, without calling the processor again.

    ## `peek_line` / `read_line`

    `peek_line` returns the head line (processing it if necessary) without consuming it;
    `read_line` does the same but also consumes it.
    """
    _file_name: str
    _lines: collections.deque
    _line_processor: Optional['LineProcessor']
    _is_concluded: bool
    look_ahead: int

    def __init__(self, lines: Iterable[str], file_name: str, start_line_number: int = 1):
        self._file_name = file_name
        self._lines = collections.deque()
        for line_number, text in enumerate(lines, start=start_line_number):
            if not isinstance(text, str):
                warnings.warn(f'warning: `{file_name}`, line {line_number}: non-string line {text!r} coerced to str')
                text = str(text)
            self._lines.append(Line(text, Cursor(file_name, line_number)))
        self._line_processor = None
        self._is_concluded = False
        self.look_ahead = 0

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def lines(self) -> list[str]:
        """
        The texts of the remaining lines, head first.
        """
        return [line.text for line in self._lines]

    def iter_texts(self, start: int = 0) -> Iterator[str]:
        """
        Iterate lazily over the texts of the remaining lines, starting `start` lines past the head.
        """
        for line in itertools.islice(self._lines, start, None):
            yield line.text

    @property
    def cursor(self) -> Optional['Cursor']:
        if len(self._lines) == 0:
            return None

        return self._lines[0].cursor

    def attach(self, line_processor: 'LineProcessor'):
        self._line_processor = line_processor

    def has_more_lines(self) -> bool:
        return self.peek_line() is not None

    def peek_line(self) -> Optional['Line']:
        while True:
            if len(self._lines) == 0:
                self.look_ahead = 0
                self._conclude()
                return None

            next_line = self._lines[0]
            if self.look_ahead > 0 or self._line_processor is None:
                return next_line

            line = self._line_processor.process_line(next_line)
            if line is not None:
                return line

    def read_line(self) -> Optional[str]:
        line = self.peek_line()
        if line is None:
            return None

        self.shift()

        return line.text

    def read_lines(self) -> list[str]:
        texts = []
        while True:
            text = self.read_line()
            if text is None:
                return texts

            texts.append(text)

    def shift(self) -> 'Line':
        if len(self._lines) == 0:
            raise ExhaustedSourceException(f'error: `{self._file_name}`: cannot shift from an exhausted source')

        if self.look_ahead > 0:
            self.look_ahead -= 1

        return self._lines.popleft()

    def unshift(self, line: 'Line'):
        """
        Put a line back at the head of the source, counting it as already processed.
        """
        self.look_ahead += 1
        self._lines.appendleft(line)

    def replace_next_line(self, text: str):
        """
        Replace the head line with a processed line of the given text at the same position.
        """
        replaced_line = self.shift()
        self.unshift(Line(text, replaced_line.cursor))

    def _conclude(self):
        if self._is_concluded or self._line_processor is None:
            return

        self._is_concluded = True
        self._line_processor.conclude()
