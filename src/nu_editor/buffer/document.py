"""Cursor-split line storage for nu_editor buffers."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, Tuple

Cursor = Tuple[int, int]  # (row, column)


class Effect(enum.Flag):
    """What an edit or motion may have invalidated."""

    NONE = 0
    VSCROLL = enum.auto()
    HSCROLL = enum.auto()
    MODIFIED = enum.auto()


@dataclass(slots=True)
class Line:
    """A line split at a column into ``left`` and ``right``.

    On the active line the split is the cursor column. Other lines keep
    whatever split they had when the cursor last left them.
    """

    left: str = ""
    right: str = ""

    @property
    def text(self) -> str:
        return self.left + self.right


@dataclass(slots=True)
class BufferDocument:
    """Two-sequence document model with the cursor encoded structurally.

    ``before`` runs from the first line through the active line (its last
    element); ``after`` holds every following line. Every operation is
    total: at a document boundary it simply does nothing.
    """

    before: Deque[Line] = field(default_factory=lambda: deque([Line()]))
    after: Deque[Line] = field(default_factory=deque)

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        after = deque(Line(right=segment) for segment in text.split("\n"))
        return cls(before=deque([after.popleft()]), after=after)

    @property
    def active(self) -> Line:
        return self.before[-1]

    @property
    def cursor(self) -> Cursor:
        return (len(self.before) - 1, len(self.active.left))

    def line_count(self) -> int:
        return len(self.before) + len(self.after)

    def get_line(self, index: int) -> Line | None:
        """Return the line at absolute ``index`` or ``None`` past the end."""

        if index < 0:
            return None
        if index < len(self.before):
            return self.before[index]
        offset = index - len(self.before)
        if offset < len(self.after):
            return self.after[offset]
        return None

    def lines(self) -> Iterator[Line]:
        yield from self.before
        yield from self.after

    def render(self) -> str:
        return "\n".join(line.text for line in self.lines())

    # -- motions -----------------------------------------------------------

    def move_left(self) -> Effect:
        line = self.active
        if line.left:
            line.right = line.left[-1] + line.right
            line.left = line.left[:-1]
            return Effect.HSCROLL
        if len(self.before) > 1:
            self.after.appendleft(self.before.pop())
            return Effect.VSCROLL | Effect.HSCROLL
        return Effect.HSCROLL

    def move_right(self) -> Effect:
        line = self.active
        if line.right:
            line.left += line.right[0]
            line.right = line.right[1:]
            return Effect.HSCROLL
        if self.after:
            self.before.append(self.after.popleft())
            return Effect.VSCROLL | Effect.HSCROLL
        return Effect.HSCROLL

    def move_down(self) -> Effect:
        if not self.after:
            return Effect.NONE
        self.before.append(self.after.popleft())
        return Effect.VSCROLL | Effect.HSCROLL

    def move_up(self) -> Effect:
        if len(self.before) <= 1:
            return Effect.NONE
        self.after.appendleft(self.before.pop())
        return Effect.VSCROLL | Effect.HSCROLL

    # -- edits -------------------------------------------------------------

    def insert_char(self, char: str) -> Effect:
        self.active.left += char
        return Effect.MODIFIED | Effect.HSCROLL

    def backspace(self) -> Effect:
        # Marks the buffer modified even when nothing was removed.
        line = self.active
        if line.left:
            line.left = line.left[:-1]
            return Effect.MODIFIED | Effect.HSCROLL
        if len(self.before) > 1:
            removed = self.before.pop()
            self.active.right += removed.right
            return Effect.MODIFIED | Effect.HSCROLL | Effect.VSCROLL
        return Effect.MODIFIED | Effect.HSCROLL

    def split_line(self) -> Effect:
        line = self.active
        moved, line.right = line.right, ""
        self.before.append(Line(right=moved))
        return Effect.MODIFIED | Effect.VSCROLL | Effect.HSCROLL


__all__ = ["BufferDocument", "Cursor", "Effect", "Line"]
