"""Lazily recomputed scroll offsets for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .document import BufferDocument, Effect


@dataclass(slots=True)
class ScrollAxis:
    """One scroll offset plus the flag saying it needs recomputing."""

    value: int = 0
    dirty: bool = False


@dataclass(slots=True)
class ScrollState:
    """First visible row (``vrow``) and column (``hcol``) of the viewport.

    Offsets are only pulled back when the cursor would otherwise leave the
    viewport; the cursor is never re-centred.
    """

    vertical: ScrollAxis = field(default_factory=ScrollAxis)
    horizontal: ScrollAxis = field(default_factory=ScrollAxis)

    @property
    def vrow(self) -> int:
        return self.vertical.value

    @property
    def hcol(self) -> int:
        return self.horizontal.value

    def invalidate(self, effect: Effect) -> None:
        if effect & Effect.VSCROLL:
            self.vertical.dirty = True
        if effect & Effect.HSCROLL:
            self.horizontal.dirty = True

    def refresh(self, document: BufferDocument, width: int, height: int) -> None:
        """Recompute the dirty axes against a ``width`` x ``height`` viewport."""

        width = max(width, 1)
        height = max(height, 1)

        if self.vertical.dirty:
            self.vertical.dirty = False
            rows = len(document.before)
            if rows - self.vertical.value > height:
                self.vertical.value = rows - height
            elif rows - self.vertical.value <= 0:
                self.vertical.value = rows - 1

        if self.horizontal.dirty:
            self.horizontal.dirty = False
            column = len(document.active.left)
            if column - self.horizontal.value > width - 1:
                self.horizontal.value = column - width + 1
            elif column - self.horizontal.value <= 0:
                self.horizontal.value = column


__all__ = ["ScrollAxis", "ScrollState"]
