"""High-level buffer façade combining document, scroll state and metadata."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable, ContextManager, Optional, Tuple

from nu_editor.runtime import telemetry

from .document import BufferDocument, Cursor, Effect
from .state import ScrollState
from .window import BufferWindow

DEFAULT_BUFFER_NAME = "[buffer]"


class Buffer:
    """One open document plus its name, flags and scroll offsets."""

    def __init__(
        self,
        name: str = DEFAULT_BUFFER_NAME,
        is_persistable: bool = False,
        content: str = "",
    ) -> None:
        self.name = name
        self.is_persistable = is_persistable
        self.modified = False
        self.document = BufferDocument.from_text(content)
        self.scroll = ScrollState()

    @classmethod
    def placeholder(cls) -> "Buffer":
        return cls(DEFAULT_BUFFER_NAME, False, "")

    def __repr__(self) -> str:
        return (
            f"Buffer(name={self.name!r}, is_persistable={self.is_persistable}, "
            f"modified={self.modified}, cursor={self.cursor})"
        )

    @property
    def cursor(self) -> Cursor:
        return self.document.cursor

    @property
    def vrow(self) -> int:
        return self.scroll.vrow

    @property
    def hcol(self) -> int:
        return self.scroll.hcol

    def render(self) -> str:
        return self.document.render()

    def line_count(self) -> int:
        return self.document.line_count()

    # -- motions -----------------------------------------------------------

    def move_left(self) -> None:
        self._apply(self.document.move_left())

    def move_right(self) -> None:
        self._apply(self.document.move_right())

    def move_up(self) -> None:
        self._apply(self.document.move_up())

    def move_down(self) -> None:
        self._apply(self.document.move_down())

    # -- edits -------------------------------------------------------------

    def insert_char(self, char: str) -> None:
        with Transaction(self, "insert_char") as tx:
            tx.run(lambda: self.document.insert_char(char))

    def insert_text(self, text: str) -> None:
        for char in text:
            if char == "\n":
                self.split_line()
            else:
                self.insert_char(char)

    def backspace(self) -> None:
        with Transaction(self, "backspace") as tx:
            tx.run(self.document.backspace)

    def split_line(self) -> None:
        with Transaction(self, "split_line") as tx:
            tx.run(self.document.split_line)

    # -- viewport ----------------------------------------------------------

    def update_scrolls(self, width: int, height: int) -> None:
        self.scroll.refresh(self.document, width, height)

    def window(self, width: int, height: int) -> BufferWindow:
        return BufferWindow(
            self.document,
            width=width,
            height=height,
            vrow=self.scroll.vrow,
            hcol=self.scroll.hcol,
        )

    def cursor_screen_pos(self, x: int, y: int) -> Tuple[int, int]:
        row, column = self.cursor
        return (x + column - self.scroll.hcol, y + row - self.scroll.vrow)

    def _apply(self, effect: Effect) -> None:
        self.scroll.invalidate(effect)
        if effect & Effect.MODIFIED:
            self.modified = True


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps an edit in a telemetry span and applies its effects."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.effect = Effect.NONE
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def run(self, edit: Callable[[], Effect]) -> Effect:
        self.effect |= edit()
        return self.effect

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer._apply(self.effect)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "DEFAULT_BUFFER_NAME", "Transaction"]
