"""Editor-wide state and the per-frame render step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from nu_editor.buffer import BufferManager, Row

COMMAND_AREA_HEIGHT = 3
GUTTER_BORDER = "│"
SEPARATOR = "─"


@dataclass
class EditorState:
    """Everything the update and render steps share between frames."""

    buffers: BufferManager = field(default_factory=BufferManager)
    mode: str = "normal"
    command_text: str = ""
    message: Optional[str] = None
    running: bool = True


@dataclass
class Frame:
    """Screen contents for one frame, independent of any UI toolkit."""

    width: int
    height: int
    text_origin: Tuple[int, int]
    text_size: Tuple[int, int]
    gutter: List[str]
    rows: List[Row]
    status: str
    command_line: str
    cursor: Optional[Tuple[int, int]] = None

    @property
    def gutter_width(self) -> int:
        return self.text_origin[0] - 1

    def screen_lines(self) -> List[str]:
        """Flatten the frame into exactly ``height`` lines of ``width`` chars."""

        digits = self.gutter_width - len(GUTTER_BORDER)
        text_height = self.text_size[1]
        lines: List[str] = []
        for index in range(text_height):
            number = self.gutter[index] if index < len(self.gutter) else ""
            text = "".join(self.rows[index]) if index < len(self.rows) else ""
            lines.append(f"{number:>{digits}}{GUTTER_BORDER} {text}")
        lines.append(SEPARATOR * self.width)
        lines.append(self.status)
        lines.append(self.command_line)
        return [_fit(line, self.width) for line in lines]


def _fit(line: str, width: int) -> str:
    return line[:width].ljust(width)


def compose_frame(state: EditorState, width: int, height: int) -> Frame:
    """Refresh the current buffer's scrolls and collect what is visible.

    The bottom :data:`COMMAND_AREA_HEIGHT` rows hold a separator, the
    status line and the command line; the rest is a line-number gutter, a
    blank column and the text area.
    """

    width = max(width, 1)
    height = max(height, COMMAND_AREA_HEIGHT + 1)
    buffer = state.buffers.current

    text_height = height - COMMAND_AREA_HEIGHT
    digits = len(str(max(buffer.line_count(), 1)))
    gutter_width = digits + len(GUTTER_BORDER)
    text_x = gutter_width + 1
    text_width = max(width - text_x, 1)

    buffer.update_scrolls(text_width, text_height)
    rows = list(buffer.window(text_width, text_height))
    gutter = [str(buffer.vrow + index + 1) for index in range(len(rows))]

    status = buffer.name + (" [+]" if buffer.modified else "")
    if state.mode == "command":
        command_line = ":" + state.command_text
        cursor: Optional[Tuple[int, int]] = (len(command_line), height - 1)
    else:
        command_line = state.message or ""
        cursor = buffer.cursor_screen_pos(text_x, 0)

    return Frame(
        width=width,
        height=height,
        text_origin=(text_x, 0),
        text_size=(text_width, text_height),
        gutter=gutter,
        rows=rows,
        status=status,
        command_line=command_line,
        cursor=cursor,
    )


__all__ = ["COMMAND_AREA_HEIGHT", "EditorState", "Frame", "compose_frame"]
