"""Viewport windowing over a buffer document."""

from __future__ import annotations

from typing import Iterator, List

from .document import BufferDocument, Line

Row = List[str]


def clip_segment(segment: str, start: int, window_start: int, window_end: int) -> str:
    """Return the part of ``segment`` (placed at column ``start``) inside
    the half-open column window ``[window_start, window_end)``."""

    lo = max(start, window_start)
    hi = min(start + len(segment), window_end)
    if lo >= hi:
        return ""
    return segment[lo - start : hi - start]


def clip_line(line: Line, hcol: int, width: int) -> Row:
    row: Row = []
    column = 0
    for segment in (line.left, line.right):
        visible = clip_segment(segment, column, hcol, hcol + width)
        if visible:
            row.append(visible)
        column += len(segment)
    return row


class BufferWindow(Iterator[Row]):
    """Single-use iterator over the rows visible in one frame.

    Yields at most ``height`` rows starting at ``vrow``; stops early once
    the document runs out of lines. Each row holds the visible fragments of
    the line's ``left`` and ``right`` segments.
    """

    def __init__(
        self,
        document: BufferDocument,
        *,
        width: int,
        height: int,
        vrow: int = 0,
        hcol: int = 0,
    ) -> None:
        self._document = document
        self._width = max(width, 0)
        self._height = max(height, 0)
        self._vrow = vrow
        self._hcol = hcol
        self._index = 0

    def __iter__(self) -> "BufferWindow":
        return self

    def __next__(self) -> Row:
        if self._index >= self._height:
            raise StopIteration
        line = self._document.get_line(self._index + self._vrow)
        if line is None:
            self._index = self._height
            raise StopIteration
        self._index += 1
        return clip_line(line, self._hcol, self._width)


__all__ = ["BufferWindow", "Row", "clip_line", "clip_segment"]
