"""Textual-facing controller that feeds keys into the mode manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from nu_editor.actions.edit import insert_text
from nu_editor.editor import EditorState
from nu_editor.modes import KeyInput, ModeResult
from nu_editor.modes.mode_manager import ModeManager
from nu_editor.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update the host UI."""

    refresh: Callable[[], None]
    quit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


_FORWARDED_EVENTS = (
    "command.start",
    "command.end",
    "command.submit",
    "command.message",
    "command.write",
    "command.quit",
    "buffer.new",
    "buffer.close",
    "buffer.switch",
)


class TextualEditorAdapter:
    """Bridges ModeManager and bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self.logger = telemetry.get_logger("nu_editor.adapters.textual")
        for event in _FORWARDED_EVENTS:
            manager.context.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self.hooks.refresh()

    @property
    def state(self) -> EditorState:
        return self.manager.context.editor

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a normalized key into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        self.hooks.refresh()
        if not self.state.running:
            self.hooks.quit()
        return result

    def handle_textual_paste(self, text: str) -> ModeResult:
        """Insert pasted text, newlines included; ignored outside insert mode."""

        if self.state.mode != "insert":
            return ModeResult(consumed=False, status="miss")
        self._log_state("paste ->", length=len(text))
        result = insert_text(self.manager.context, text.replace("\r\n", "\n"))
        self.hooks.refresh()
        return result

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{k}={v!r}" for k, v in snapshot.items())])
        self.logger.debug(line)
        self.hooks.log(line)

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.state.buffers.current
        return {
            "mode": self.state.mode,
            "buffer": buffer.name,
            "cursor": buffer.cursor,
            "modified": buffer.modified,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
