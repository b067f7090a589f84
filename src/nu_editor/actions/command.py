"""Actions that edit and evaluate Ex-style command lines."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Optional

from nu_editor.buffer import Buffer
from nu_editor.modes.base_mode import ModeContext, ModeResult
from nu_editor.runtime import telemetry

CommandHandler = Callable[[ModeContext, List[str]], ModeResult]


def delete_command_char(context: ModeContext, match) -> ModeResult:
    """Drop the last typed character, or leave command mode on an empty line."""

    del match
    editor = context.editor
    if not editor.command_text:
        return ModeResult(consumed=True, switch_to="normal", message="command_cancel")
    editor.command_text = editor.command_text[:-1]
    return ModeResult(consumed=True, status="editing")


def submit_command_line(context: ModeContext, match) -> ModeResult:
    del match
    editor = context.editor
    editor.message = None
    text = editor.command_text.strip()
    editor.command_text = ""
    context.bus.emit("command.submit", text)
    if not text:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")

    command, *args = text.split()
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        return _reply(
            context, "command_error", f"`{command}` is not a valid command"
        )
    with telemetry.span(
        f"command::{command}",
        component="commands",
        metadata={"args": args, "buffer": context.buffer.name},
    ):
        return handler(context, args)


def _reply(context: ModeContext, status: str, message: Optional[str]) -> ModeResult:
    context.editor.message = message
    if message is not None:
        context.bus.emit("command.message", message)
    return ModeResult(
        consumed=True, switch_to="normal", status=status, message=message
    )


def _handle_quit(
    context: ModeContext, args: List[str], *, force: bool = False
) -> ModeResult:
    del args
    if not force:
        unsaved = context.editor.buffers.any_modified()
        if unsaved is not None:
            return _reply(
                context, "command_refused", f"Cannot quit: unsaved buffer `{unsaved.name}`"
            )
    context.editor.running = False
    context.bus.emit("command.quit", {"force": force})
    return _reply(context, "command_quit", None)


def _handle_close(
    context: ModeContext, args: List[str], *, force: bool = False
) -> ModeResult:
    del args
    buffer = context.buffer
    if buffer.modified and not force:
        return _reply(
            context, "command_refused", f"Cannot close unsaved buffer `{buffer.name}`"
        )
    context.editor.buffers.remove_current()
    context.bus.emit("buffer.close", {"name": buffer.name, "force": force})
    return _reply(context, "command_close", None)


def _handle_new(context: ModeContext, args: List[str]) -> ModeResult:
    if len(args) > 1:
        return _reply(context, "command_error", "`new` takes in at most 1 argument")

    buffer = Buffer.placeholder()
    if args:
        name = args[0]
        try:
            content = context.store.read(name)
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "buffer.open_failed",
                level="warning",
                data={"name": name, "error": exc},
            )
            return _reply(context, "command_error", f"Could not open file `{name}`: {exc}")
        buffer = Buffer(name, True, content or "")

    buffers = context.editor.buffers
    buffers.switch(buffers.add_buffer(buffer))
    context.bus.emit("buffer.new", {"name": buffer.name})
    return _reply(context, "command_new", None)


def _handle_write(context: ModeContext, args: List[str]) -> ModeResult:
    if len(args) > 1:
        return _reply(context, "command_error", "`write` takes in at most 1 argument")

    buffer = context.buffer
    if args:
        buffer.name = args[0]
        buffer.is_persistable = True

    if not buffer.is_persistable:
        return _reply(
            context, "command_refused", f"Cannot save nonfile buffer `{buffer.name}`"
        )

    try:
        context.store.write(buffer.name, buffer.render())
    except OSError as exc:
        telemetry.record_event(
            "buffer.write_failed",
            level="warning",
            data={"name": buffer.name, "error": exc},
        )
        return _reply(
            context, "command_write_failed", f"Could not save file `{buffer.name}`: {exc}"
        )

    buffer.modified = False
    context.bus.emit("command.write", {"name": buffer.name})
    return _reply(context, "command_write", f"Saved file `{buffer.name}`")


def _handle_buffer(context: ModeContext, args: List[str]) -> ModeResult:
    if len(args) != 1:
        return _reply(context, "command_error", "`buffer` takes exactly 1 argument")

    buffers = context.editor.buffers
    try:
        buffer_id = int(args[0])
    except ValueError:
        buffer_id = -1
    if not 0 <= buffer_id < len(buffers):
        return _reply(context, "command_error", f"No buffer with id `{args[0]}`")
    buffers.switch(buffer_id)
    context.bus.emit("buffer.switch", buffer_id)
    return _reply(context, "command_buffer", None)


def _handle_buffers(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    buffers = context.editor.buffers
    entries = []
    for buffer_id, buffer in buffers.ids():
        marker = "*" if buffer_id == buffers.current_index else ""
        suffix = " [+]" if buffer.modified else ""
        entries.append(f"{marker}{buffer_id}:{buffer.name}{suffix}")
    return _reply(context, "command_buffers", " ".join(entries))


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "quit": _handle_quit,
    "q": _handle_quit,
    "quit!": partial(_handle_quit, force=True),
    "q!": partial(_handle_quit, force=True),
    "close": _handle_close,
    "c": _handle_close,
    "close!": partial(_handle_close, force=True),
    "c!": partial(_handle_close, force=True),
    "new": _handle_new,
    "n": _handle_new,
    "write": _handle_write,
    "w": _handle_write,
    "buffer": _handle_buffer,
    "b": _handle_buffer,
    "buffers": _handle_buffers,
    "ls": _handle_buffers,
}


__all__ = ["delete_command_char", "submit_command_line"]
