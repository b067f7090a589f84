"""Editing verbs bound to keys by the default keymaps."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode
from .edit import backspace, insert_text, split_line
from .motion import move_down, move_left, move_right, move_up, next_buffer, prev_buffer
from .command import delete_command_char, submit_command_line

__all__ = [
    "enter_insert_mode",
    "enter_command_mode",
    "exit_to_normal_mode",
    "insert_text",
    "backspace",
    "split_line",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "next_buffer",
    "prev_buffer",
    "delete_command_char",
    "submit_command_line",
]
