from __future__ import annotations

import pytest

from nu_editor.buffer import Buffer, Line, clip_line, clip_segment


def rows_of(buffer: Buffer, width: int, height: int) -> list[str]:
    return ["".join(row) for row in buffer.window(width, height)]


def test_window_yields_visible_lines_from_both_sequences() -> None:
    buffer = Buffer("f", True, "one\ntwo\nthree")
    buffer.move_down()

    assert rows_of(buffer, 10, 5) == ["one", "two", "three"]


def test_window_stops_at_height() -> None:
    buffer = Buffer("f", True, "\n".join("abcdef"))

    assert rows_of(buffer, 10, 2) == ["a", "b"]


def test_window_starts_at_vrow() -> None:
    buffer = Buffer("f", True, "\n".join("abcdef"))
    for _ in range(4):
        buffer.move_down()
    buffer.update_scrolls(10, 2)

    assert buffer.vrow == 3
    assert rows_of(buffer, 10, 2) == ["d", "e"]


def test_window_ends_early_past_document_end() -> None:
    buffer = Buffer("f", True, "a\nb")
    buffer.scroll.vertical.value = 1

    assert rows_of(buffer, 10, 5) == ["b"]


def test_window_is_single_use() -> None:
    window = Buffer("f", True, "a\nb").window(10, 5)

    assert iter(window) is window
    assert len(list(window)) == 2
    assert list(window) == []


def test_window_rows_keep_segments_separate() -> None:
    buffer = Buffer("f", True, "abcd")
    buffer.move_right()
    buffer.move_right()

    assert list(buffer.window(10, 1)) == [["ab", "cd"]]


def test_window_clips_columns_to_hcol_and_width() -> None:
    buffer = Buffer("f", True, "abcdefgh")
    for _ in range(3):
        buffer.move_right()
    buffer.scroll.horizontal.value = 2

    assert list(buffer.window(4, 1)) == [["c", "def"]]


@pytest.mark.parametrize(
    ("segment", "start", "expected"),
    [
        ("abc", 0, ""),  # wholly left of the window
        ("abc", 20, ""),  # wholly right of the window
        ("abcdef", 2, "def"),  # straddles the left edge
        ("abcdef", 8, "ab"),  # straddles the right edge
        ("abc", 6, "abc"),  # fully inside
        ("a" * 20, 0, "a" * 5),  # covers the whole window
        ("abc", 2, ""),  # ends exactly on the left edge
        ("abc", 10, ""),  # starts exactly on the right edge
    ],
)
def test_clip_segment_by_interval_intersection(
    segment: str, start: int, expected: str
) -> None:
    assert clip_segment(segment, start, 5, 10) == expected


def test_clip_line_drops_empty_segments() -> None:
    assert clip_line(Line("", "xyz"), 0, 10) == ["xyz"]
    assert clip_line(Line("", ""), 0, 10) == []


@pytest.mark.parametrize("width", [1, 2, 3, 7])
@pytest.mark.parametrize("height", [1, 2, 4])
def test_window_never_exceeds_viewport(width: int, height: int) -> None:
    buffer = Buffer("f", True, "short\n" + "x" * 30 + "\n\nmid line\nend")
    buffer.move_down()
    for _ in range(12):
        buffer.move_right()
    buffer.update_scrolls(width, height)

    rows = list(buffer.window(width, height))

    assert len(rows) <= height
    assert all(sum(len(fragment) for fragment in row) <= width for row in rows)
