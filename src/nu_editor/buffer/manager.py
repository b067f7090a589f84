"""Ordered collection of open buffers with a current selector."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from nu_editor.runtime import telemetry

from .buffer import Buffer


class BufferManager:
    """Owns every open buffer and which one is current.

    The collection is never empty and ``current_index`` is always valid;
    every mutating method re-establishes both before returning.
    """

    def __init__(self, initial: Optional[Buffer] = None) -> None:
        self._buffers: List[Buffer] = [initial or Buffer.placeholder()]
        self._current = 0

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self) -> Iterator[Buffer]:
        return iter(self._buffers)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def current(self) -> Buffer:
        return self._buffers[self._current]

    def ids(self) -> List[Tuple[int, Buffer]]:
        return list(enumerate(self._buffers))

    def add_buffer(self, buffer: Buffer) -> int:
        self._buffers.append(buffer)
        buffer_id = len(self._buffers) - 1
        telemetry.record_event(
            "buffers.add",
            level="debug",
            data={"id": buffer_id, "name": buffer.name},
        )
        return buffer_id

    def any_modified(self) -> Optional[Buffer]:
        return next((buffer for buffer in self._buffers if buffer.modified), None)

    def remove_current(self) -> None:
        removed = self._buffers.pop(self._current)
        if not self._buffers:
            self._buffers.append(Buffer.placeholder())
        if self._current >= len(self._buffers):
            self._current = len(self._buffers) - 1
        telemetry.record_event(
            "buffers.remove",
            level="debug",
            data={"name": removed.name, "remaining": len(self._buffers)},
        )

    def next(self) -> None:
        self._current = (self._current + 1) % len(self._buffers)

    def prev(self) -> None:
        self._current = (self._current - 1) % len(self._buffers)

    def switch(self, buffer_id: int) -> None:
        if 0 <= buffer_id < len(self._buffers):
            self._current = buffer_id


__all__ = ["BufferManager"]
