from __future__ import annotations

from nu_editor.buffer import Buffer, BufferManager
from nu_editor.editor import EditorState, compose_frame


def make_state(content: str, name: str = "f.txt") -> EditorState:
    return EditorState(buffers=BufferManager(Buffer(name, True, content)))


def test_frame_layout_for_short_document() -> None:
    frame = compose_frame(make_state("one\ntwo"), 20, 6)

    assert frame.text_origin == (3, 0)
    assert frame.text_size == (17, 3)
    assert frame.gutter == ["1", "2"]
    assert frame.rows == [["one"], ["two"]]
    assert frame.cursor == (3, 0)
    assert frame.screen_lines() == [
        "1│ one".ljust(20),
        "2│ two".ljust(20),
        " │ ".ljust(20),
        "─" * 20,
        "f.txt".ljust(20),
        " " * 20,
    ]


def test_status_line_marks_modified_buffer() -> None:
    state = make_state("abc")
    state.buffers.current.insert_char("x")

    frame = compose_frame(state, 20, 6)

    assert frame.status == "f.txt [+]"


def test_command_mode_moves_cursor_to_command_line() -> None:
    state = make_state("abc")
    state.mode = "command"
    state.command_text = "w"

    frame = compose_frame(state, 20, 6)

    assert frame.command_line == ":w"
    assert frame.cursor == (2, 5)


def test_message_is_shown_outside_command_mode() -> None:
    state = make_state("abc")
    state.message = "Saved file `f.txt`"

    frame = compose_frame(state, 40, 6)

    assert frame.screen_lines()[-1].rstrip() == "Saved file `f.txt`"


def test_gutter_follows_vertical_scroll() -> None:
    state = make_state("\n".join(str(i) for i in range(10)))
    buffer = state.buffers.current
    for _ in range(5):
        buffer.move_down()

    frame = compose_frame(state, 20, 6)

    assert frame.gutter_width == 3
    assert buffer.vrow == 3
    assert frame.gutter == ["4", "5", "6"]
    assert frame.rows == [["3"], ["4"], ["5"]]
    assert frame.cursor == (4, 2)
    assert frame.screen_lines()[0].startswith(" 4│ 3")


def test_long_line_scrolls_horizontally_in_text_area() -> None:
    state = make_state("abcdefghijkl")
    buffer = state.buffers.current
    for _ in range(10):
        buffer.move_right()

    frame = compose_frame(state, 8, 5)

    # 1 digit + border + blank leaves 5 text columns.
    assert frame.text_size == (5, 2)
    assert buffer.hcol == 6
    assert frame.rows == [["ghij", "k"]]
    assert frame.cursor == (7, 0)


def test_degenerate_terminal_size_is_clamped() -> None:
    frame = compose_frame(make_state("abc"), 0, 0)

    lines = frame.screen_lines()
    assert len(lines) == 4
    assert all(len(line) == 1 for line in lines)
