"""Command-line mode with inline editing and keymap integration."""

from __future__ import annotations

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode, is_text_input


class CommandMode(KeymapMode):
    name = "command"

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.editor.command_text = ""
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        # Submitted lines are published through ``command.submit``.
        self.context.editor.command_text = ""
        self.context.bus.emit("command.end", None)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.text is not None and is_text_input(key):
            self.context.editor.command_text += key.text
            return ModeResult(consumed=True, status="editing")
        return ModeResult(consumed=False, status="miss", message="unhandled")
