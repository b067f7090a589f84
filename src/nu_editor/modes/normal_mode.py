"""Normal mode: motions, buffer cycling and mode switches."""

from __future__ import annotations

from .keymap_helpers import KeymapMode


class NormalMode(KeymapMode):
    name = "normal"
