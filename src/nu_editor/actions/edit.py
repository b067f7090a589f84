"""Insert-mode editing actions."""

from __future__ import annotations

from nu_editor.modes.base_mode import ModeContext, ModeResult


def insert_text(context: ModeContext, text: str) -> ModeResult:
    context.buffer.insert_text(text)
    return ModeResult(consumed=True, status="insert")


def backspace(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.backspace()
    return ModeResult(consumed=True, status="backspace")


def split_line(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.split_line()
    return ModeResult(consumed=True, status="split_line")


__all__ = ["insert_text", "backspace", "split_line"]
