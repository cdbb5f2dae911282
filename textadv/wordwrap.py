"""Word-wrapped console output that never breaks words across lines."""

from __future__ import annotations

import shutil
import sys
from typing import TextIO

_DEFAULT_COLUMNS = 82
_SCROLLBAR_ALLOWANCE = 2


def console_width() -> int:
    """Return the usable width of the console, leaving room for a scroll bar."""
    columns = shutil.get_terminal_size(fallback=(_DEFAULT_COLUMNS, 24)).columns
    return max(columns - _SCROLLBAR_ALLOWANCE, 1)


class WordWrapper:
    """Writes text to a stream, wrapping at word boundaries.

    The wrapper remembers how far along the current line it is, so several
    calls to :meth:`wrap_out` flow together as one paragraph until
    :meth:`end_para` is called.
    """

    def __init__(self, width: int | None = None, stream: TextIO | None = None) -> None:
        if width is None:
            width = console_width()
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self.width = width
        self._stream = stream
        self._offset = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def offset(self) -> int:
        """Number of characters already written on the current line."""
        return self._offset

    def wrap_out(self, text: str) -> None:
        """Write ``text`` followed by a space, wrapping lines at spaces."""
        out = self.stream
        length = len(text)
        position = 0
        while position < length:
            left = self.width - self._offset
            remaining = length - position
            if remaining < left:
                out.write(text[position:] + " ")
                self._offset += remaining + 1
                break

            found = text.rfind(" ", position + 1, position + left + 1)
            last_space = found - position if found != -1 else 0

            if last_space == 0:
                if self._offset > 0:
                    # Start the word afresh on a new line.
                    out.write("\n")
                    self._offset = 0
                    continue
                # A single word wider than the line: break it hard.
                out.write(text[position:position + left] + "\n")
                position += left
                continue

            out.write(text[position:position + last_space] + "\n")
            position += last_space + 1
            self._offset = 0

    def end_para(self) -> None:
        """End the current line if needed, then write a blank line."""
        out = self.stream
        if self._offset != 0:
            out.write("\n")
        out.write("\n")
        self._offset = 0