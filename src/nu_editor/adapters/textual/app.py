"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from typing import Any, List, Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from nu_editor.buffer import Buffer, BufferManager
from nu_editor.editor import EditorState, compose_frame
from nu_editor.modes import ModeBus, ModeContext
from nu_editor.modes.mode_manager import ModeManager, create_default_manager
from nu_editor.runtime import telemetry
from nu_editor.storage import BufferStore, FileStore

from .controller import TextualEditorAdapter, TextualUIHooks

_SPECIAL_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
    "delete": "DELETE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
}


class EditorView(Widget):
    """Paints one composed frame of the editor state per render."""

    DEFAULT_CSS = """
    EditorView {
        height: 1fr;
        width: 1fr;
    }
    """

    def __init__(self, state: EditorState, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.state = state

    def render(self) -> Text:
        frame = compose_frame(self.state, self.size.width, self.size.height)
        lines = frame.screen_lines()
        text = Text("\n".join(lines), no_wrap=True, overflow="crop")

        line_stride = frame.width + 1
        text_height = frame.text_size[1]
        for row in range(text_height):
            start = row * line_stride
            text.stylize("dim", start, start + frame.gutter_width)
        status_start = (text_height + 1) * line_stride
        text.stylize("bold reverse", status_start, status_start + frame.width)

        if frame.cursor is not None:
            x, y = frame.cursor
            if 0 <= x < frame.width and 0 <= y < frame.height:
                offset = y * line_stride + x
                text.stylize("reverse", offset, offset + 1)
        return text


class EditorApp(App[None]):
    """Terminal host: polls keys, runs the update step, repaints."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        store: Optional[BufferStore] = None,
    ) -> None:
        super().__init__()
        self.state = state or EditorState()
        self.store = store or FileStore()
        self.manager: ModeManager | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._view: EditorView | None = None

    def compose(self) -> ComposeResult:
        self._view = EditorView(self.state, id="editor")
        yield self._view

    async def on_mount(self) -> None:
        context = ModeContext(editor=self.state, bus=ModeBus(), store=self.store)
        self.manager = create_default_manager(context)
        hooks = TextualUIHooks(refresh=self._refresh, quit=self.exit)
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        self.set_interval(0.1, self._refresh)

    def _refresh(self) -> None:
        if self._view:
            self._view.refresh()

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    async def on_paste(self, event: events.Paste) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_paste(event.text)
        event.stop()

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        *prefix, base = event.key.split("+")
        modifiers = tuple(part.upper() for part in prefix)
        if event.key == "ctrl+q":
            return None
        if base in _SPECIAL_KEYS:
            return (_SPECIAL_KEYS[base], None, modifiers)
        if event.is_printable and event.character:
            shiftless = tuple(mod for mod in modifiers if mod != "SHIFT")
            return (event.character, event.character, shiftless)
        return (base.upper(), None, modifiers)


def load_state(paths: Sequence[str], store: BufferStore) -> EditorState:
    """Open each path as a persistable buffer; missing files start empty.

    Paths that cannot be read are skipped and reported in the message line.
    """

    buffers: BufferManager | None = None
    failures: List[str] = []
    for path in paths:
        try:
            content = store.read(path)
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "buffer.open_failed",
                level="warning",
                data={"name": path, "error": exc},
            )
            failures.append(f"Could not open file `{path}`: {exc}")
            continue
        buffer = Buffer(path, True, content or "")
        if buffers is None:
            buffers = BufferManager(buffer)
        else:
            buffers.add_buffer(buffer)
    return EditorState(
        buffers=buffers or BufferManager(),
        message="; ".join(failures) or None,
    )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Modal terminal text editor.")
    parser.add_argument("files", nargs="*", help="Files to open, one buffer each")
    parser.add_argument(
        "--log-preset",
        default="editor",
        choices=sorted(telemetry.PRESETS),
        help="Telemetry preset (default: editor, file output only)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Log file path (overrides NU_EDITOR_LOG_FILE)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_file:
        os.environ[f"{telemetry.ENV_PREFIX}LOG_FILE"] = args.log_file
    telemetry.configure(preset=args.log_preset)

    store = FileStore()
    state = load_state(args.files, store)
    telemetry.record_event("editor.start", data={"files": len(args.files)})
    EditorApp(state, store=store).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
