"""Built-in keymaps that seed each mode with the editor's default keys."""

from __future__ import annotations

from typing import Iterable

from nu_editor.actions import command as command_actions
from nu_editor.actions import core as core_actions
from nu_editor.actions import edit as edit_actions
from nu_editor.actions import motion as motion_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="motion.left",
        handler=motion_actions.move_left,
        description="Move the cursor left",
    ),
    ActionRef(
        id="motion.right",
        handler=motion_actions.move_right,
        description="Move the cursor right",
    ),
    ActionRef(
        id="motion.up",
        handler=motion_actions.move_up,
        description="Move the cursor up",
    ),
    ActionRef(
        id="motion.down",
        handler=motion_actions.move_down,
        description="Move the cursor down",
    ),
    ActionRef(
        id="buffers.next",
        handler=motion_actions.next_buffer,
        description="Switch to the next buffer",
    ),
    ActionRef(
        id="buffers.prev",
        handler=motion_actions.prev_buffer,
        description="Switch to the previous buffer",
    ),
    ActionRef(
        id="edit.backspace",
        handler=edit_actions.backspace,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.split_line",
        handler=edit_actions.split_line,
        description="Break the line at the cursor",
    ),
    ActionRef(
        id="command.delete_char",
        handler=command_actions.delete_command_char,
        description="Delete the last command-line character",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
)


def _binding(mode: str, key: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{mode}.{key.lower()}",
        mode=mode,
        sequence=KeySequence.from_strings(key),
        action_id=action_id,
        description=description,
    )


_ARROWS = (
    ("LEFT", "motion.left"),
    ("RIGHT", "motion.right"),
    ("UP", "motion.up"),
    ("DOWN", "motion.down"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("normal", ":", "core.enter_command", "Enter command-line mode"),
    _binding("normal", "i", "core.enter_insert", "Enter insert mode"),
    _binding("normal", "h", "motion.left", "Move left"),
    _binding("normal", "j", "motion.down", "Move down"),
    _binding("normal", "k", "motion.up", "Move up"),
    _binding("normal", "l", "motion.right", "Move right"),
    _binding("normal", "[", "buffers.prev", "Previous buffer"),
    _binding("normal", "]", "buffers.next", "Next buffer"),
    *(_binding("normal", key, action) for key, action in _ARROWS),
    _binding("insert", "ESC", "core.exit_to_normal", "Leave insert mode"),
    _binding("insert", "BACKSPACE", "edit.backspace", "Delete before cursor"),
    _binding("insert", "ENTER", "edit.split_line", "Split the line"),
    *(_binding("insert", key, action) for key, action in _ARROWS),
    _binding("command", "ESC", "core.exit_to_normal", "Cancel the command line"),
    _binding("command", "BACKSPACE", "command.delete_char", "Delete last character"),
    _binding("command", "ENTER", "command.submit_line", "Submit the command line"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register built-in actions and bindings, then any ``extra_bindings``."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
