"""Insert mode: bound editing keys plus literal text entry."""

from __future__ import annotations

from nu_editor.actions.edit import insert_text

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode, is_text_input


class InsertMode(KeymapMode):
    name = "insert"

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.text is not None and is_text_input(key):
            return insert_text(self.context, key.text)
        return ModeResult(consumed=False, status="miss")
