"""Modal terminal text editor built on a cursor-split buffer engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "editor",
    "keymaps",
    "modes",
    "runtime",
    "storage",
]

__version__ = "0.1.0"
