from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from nu_editor.buffer import DEFAULT_BUFFER_NAME, Buffer, BufferManager
from nu_editor.editor import EditorState
from nu_editor.modes import KeyInput, ModeBus, ModeContext, NormalMode
from nu_editor.modes.mode_manager import ModeManager, create_default_manager
from nu_editor.storage import FileStore, MemoryStore


def make_manager(
    *buffers: Buffer,
    files: Optional[Dict[str, str]] = None,
    store=None,
) -> ModeManager:
    state = EditorState()
    if buffers:
        state.buffers = BufferManager(buffers[0])
        for buffer in buffers[1:]:
            state.buffers.add_buffer(buffer)
    context = ModeContext(
        editor=state, bus=ModeBus(), store=store or MemoryStore(files)
    )
    return create_default_manager(context)


def press(manager: ModeManager, *keys: str) -> None:
    for key in keys:
        text = key if len(key) == 1 else None
        manager.handle_key(KeyInput(key=key, text=text))


def run_command(manager: ModeManager, line: str) -> EditorState:
    press(manager, ":", *line, "ENTER")
    return manager.context.editor


def test_first_registered_mode_is_active() -> None:
    manager = make_manager()

    assert manager.active_mode is not None
    assert manager.active_mode.name == "normal"
    assert manager.context.editor.mode == "normal"


def test_switch_to_unknown_mode_raises() -> None:
    manager = make_manager()

    with pytest.raises(KeyError):
        manager.switch_mode("visual")


def test_duplicate_mode_registration_rejected() -> None:
    manager = make_manager()

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)


def test_keymap_mode_requires_resolver() -> None:
    context = ModeContext(editor=EditorState(), bus=ModeBus())

    with pytest.raises(RuntimeError):
        NormalMode(context)


def test_normal_mode_motions_move_cursor() -> None:
    manager = make_manager(Buffer("f", True, "abc\ndef"))

    press(manager, "l", "j", "l", "l", "h")

    assert manager.context.buffer.cursor == (1, 1)
    press(manager, "UP", "RIGHT")
    assert manager.context.buffer.cursor == (0, 2)


def test_normal_mode_unbound_key_is_not_consumed() -> None:
    manager = make_manager()

    result = manager.handle_key(KeyInput(key="z", text="z"))

    assert result.consumed is False
    assert result.status == "miss"
    assert manager.context.buffer.render() == ""


def test_insert_mode_types_text_and_returns_to_normal() -> None:
    manager = make_manager()

    press(manager, "i")
    assert manager.context.editor.mode == "insert"
    press(manager, "a", "b", "ENTER", "c", "BACKSPACE", "d", "ESC")

    buffer = manager.context.buffer
    assert buffer.render() == "ab\nd"
    assert buffer.modified is True
    assert manager.context.editor.mode == "normal"


def test_insert_mode_ignores_control_chords() -> None:
    manager = make_manager()
    press(manager, "i")

    result = manager.handle_key(KeyInput(key="x", modifiers=("CTRL",), text="x"))

    assert result.consumed is False
    assert manager.context.buffer.render() == ""


def test_insert_mode_literal_characters_shadow_normal_bindings() -> None:
    manager = make_manager()

    press(manager, "i", "h", "j", ":", "i")

    assert manager.context.buffer.render() == "hj:i"
    assert manager.context.editor.mode == "insert"


def test_bracket_keys_cycle_buffers() -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True), Buffer("c", True))
    buffers = manager.context.editor.buffers

    press(manager, "]")
    assert buffers.current.name == "b"

    press(manager, "[", "[")
    assert buffers.current.name == "c"


def test_command_mode_collects_and_edits_text() -> None:
    manager = make_manager()
    editor = manager.context.editor

    press(manager, ":", "w", "x", "BACKSPACE")

    assert editor.mode == "command"
    assert editor.command_text == "w"


def test_command_backspace_on_empty_line_cancels() -> None:
    manager = make_manager()
    editor = manager.context.editor

    press(manager, ":", "BACKSPACE")

    assert editor.mode == "normal"


def test_command_escape_discards_text() -> None:
    manager = make_manager()
    editor = manager.context.editor

    press(manager, ":", "q", "ESC")

    assert editor.mode == "normal"
    assert editor.command_text == ""
    assert editor.running is True


def test_empty_command_returns_to_normal_silently() -> None:
    manager = make_manager()

    editor = run_command(manager, "   ")

    assert editor.mode == "normal"
    assert editor.message is None


def test_unknown_command_reports_error() -> None:
    editor = run_command(make_manager(), "frobnicate now")

    assert editor.message == "`frobnicate` is not a valid command"
    assert editor.mode == "normal"


def test_command_submit_event_carries_line() -> None:
    manager = make_manager()
    submitted: List[object] = []
    manager.context.bus.subscribe("command.submit", submitted.append)

    run_command(manager, " ls ")

    assert submitted == ["ls"]


@pytest.mark.parametrize("command", ["quit", "q"])
def test_quit_refuses_with_unsaved_buffer(command: str) -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True, "x"))
    manager.context.editor.buffers.switch(1)
    manager.context.buffer.insert_char("y")

    editor = run_command(manager, command)

    assert editor.running is True
    assert editor.message == "Cannot quit: unsaved buffer `b`"


@pytest.mark.parametrize("command", ["quit!", "q!"])
def test_forced_quit_ignores_unsaved_buffers(command: str) -> None:
    manager = make_manager(Buffer("a", True))
    manager.context.buffer.insert_char("y")

    editor = run_command(manager, command)

    assert editor.running is False


def test_quit_with_clean_buffers_stops_editor() -> None:
    editor = run_command(make_manager(), "q")

    assert editor.running is False
    assert editor.message is None


def test_close_refuses_unsaved_buffer() -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True))
    manager.context.buffer.insert_char("y")

    editor = run_command(manager, "close")

    assert editor.message == "Cannot close unsaved buffer `a`"
    assert len(editor.buffers) == 2


@pytest.mark.parametrize("command", ["close!", "c!"])
def test_forced_close_removes_current_buffer(command: str) -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True))
    manager.context.buffer.insert_char("y")

    editor = run_command(manager, command)

    assert [buffer.name for buffer in editor.buffers] == ["b"]


def test_close_last_buffer_leaves_placeholder() -> None:
    editor = run_command(make_manager(Buffer("a", True)), "c")

    assert len(editor.buffers) == 1
    assert editor.buffers.current.name == DEFAULT_BUFFER_NAME


def test_new_without_name_adds_placeholder_and_switches() -> None:
    manager = make_manager(Buffer("a", True))

    editor = run_command(manager, "new")

    assert len(editor.buffers) == 2
    assert editor.buffers.current_index == 1
    assert editor.buffers.current.is_persistable is False


def test_new_with_name_loads_stored_content() -> None:
    manager = make_manager(files={"notes.txt": "x\ny"})

    editor = run_command(manager, "n notes.txt")

    current = editor.buffers.current
    assert current.name == "notes.txt"
    assert current.is_persistable is True
    assert current.render() == "x\ny"
    assert current.modified is False


def test_new_with_unknown_name_starts_empty() -> None:
    editor = run_command(make_manager(), "new fresh.txt")

    assert editor.buffers.current.name == "fresh.txt"
    assert editor.buffers.current.render() == ""


def test_new_rejects_extra_arguments() -> None:
    editor = run_command(make_manager(), "new a b")

    assert editor.message == "`new` takes in at most 1 argument"
    assert len(editor.buffers) == 1


class BrokenStore(MemoryStore):
    def read(self, name: str) -> Optional[str]:
        raise OSError("permission denied")

    def write(self, name: str, text: str) -> None:
        raise OSError("disk full")


def test_new_reports_read_failure() -> None:
    editor = run_command(make_manager(store=BrokenStore()), "new secret")

    assert editor.message == "Could not open file `secret`: permission denied"
    assert len(editor.buffers) == 1


def test_write_saves_and_clears_modified() -> None:
    store = MemoryStore()
    manager = make_manager(Buffer("a.txt", True, "hi"), store=store)
    press(manager, "i", "o", "ESC")

    editor = run_command(manager, "w")

    assert store.files == {"a.txt": "ohi"}
    assert editor.message == "Saved file `a.txt`"
    assert editor.buffers.current.modified is False


def test_write_refuses_nonfile_buffer() -> None:
    store = MemoryStore()
    editor = run_command(make_manager(store=store), "write")

    assert editor.message == f"Cannot save nonfile buffer `{DEFAULT_BUFFER_NAME}`"
    assert store.files == {}


def test_write_with_name_renames_and_makes_persistable() -> None:
    store = MemoryStore()
    manager = make_manager(store=store)
    press(manager, "i", "x", "ESC")

    editor = run_command(manager, "w out.txt")

    current = editor.buffers.current
    assert current.name == "out.txt"
    assert current.is_persistable is True
    assert store.files == {"out.txt": "x"}


def test_write_rejects_extra_arguments() -> None:
    editor = run_command(make_manager(Buffer("a", True)), "w b c")

    assert editor.message == "`write` takes in at most 1 argument"


def test_write_failure_keeps_buffer_modified() -> None:
    manager = make_manager(Buffer("a.txt", True), store=BrokenStore())
    manager.context.buffer.insert_char("x")

    editor = run_command(manager, "w")

    assert editor.message == "Could not save file `a.txt`: disk full"
    assert editor.buffers.current.modified is True


def test_write_through_file_store(tmp_path) -> None:
    manager = make_manager(
        Buffer("doc.txt", True, "line\r\nnext"), store=FileStore(tmp_path)
    )
    manager.context.buffer.insert_char(">")

    run_command(manager, "w")

    assert (tmp_path / "doc.txt").read_bytes() == b">line\r\nnext"


def test_buffer_command_switches_by_id() -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True))

    editor = run_command(manager, "b 1")

    assert editor.buffers.current.name == "b"
    assert editor.message is None


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ("buffer", "`buffer` takes exactly 1 argument"),
        ("b 1 2", "`buffer` takes exactly 1 argument"),
        ("b 5", "No buffer with id `5`"),
        ("b -1", "No buffer with id `-1`"),
        ("b two", "No buffer with id `two`"),
    ],
)
def test_buffer_command_errors(line: str, message: str) -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True))

    editor = run_command(manager, line)

    assert editor.message == message
    assert editor.buffers.current_index == 0


def test_buffers_command_lists_ids_and_flags() -> None:
    manager = make_manager(Buffer("a", True), Buffer("b", True))
    list(manager.context.editor.buffers)[1].insert_char("x")

    editor = run_command(manager, "ls")

    assert editor.message == "*0:a 1:b [+]"


def test_message_is_replaced_by_next_command() -> None:
    manager = make_manager()
    run_command(manager, "bogus")

    editor = run_command(manager, "ls")

    assert editor.message == f"*0:{DEFAULT_BUFFER_NAME}"


def test_new_reports_undecodable_file(tmp_path) -> None:
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00bad")
    manager = make_manager(Buffer("a", True), store=FileStore(tmp_path))

    editor = run_command(manager, "new blob.bin")

    assert editor.message is not None
    assert editor.message.startswith("Could not open file `blob.bin`: ")
    assert [buffer.name for buffer in editor.buffers] == ["a"]
    assert editor.mode == "normal"
    assert editor.running is True
