"""Cursor motions and buffer cycling."""

from __future__ import annotations

from nu_editor.modes.base_mode import ModeContext, ModeResult


def _moved(context: ModeContext) -> ModeResult:
    context.bus.emit("cursor.move", context.buffer.cursor)
    return ModeResult(consumed=True, status="motion")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_left()
    return _moved(context)


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_right()
    return _moved(context)


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_up()
    return _moved(context)


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_down()
    return _moved(context)


def next_buffer(context: ModeContext, match) -> ModeResult:
    del match
    context.editor.buffers.next()
    context.bus.emit("buffer.switch", context.editor.buffers.current_index)
    return ModeResult(consumed=True, status="buffer_switch")


def prev_buffer(context: ModeContext, match) -> ModeResult:
    del match
    context.editor.buffers.prev()
    context.bus.emit("buffer.switch", context.editor.buffers.current_index)
    return ModeResult(consumed=True, status="buffer_switch")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "next_buffer",
    "prev_buffer",
]
