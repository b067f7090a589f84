"""Persistence collaborators that read and write buffer text by name."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Protocol


class BufferStore(Protocol):
    """Where ``write`` sends a rendered buffer and ``new NAME`` reads from."""

    def read(self, name: str) -> Optional[str]:
        """Return the stored text for ``name`` or ``None`` if there is none.

        Raises ``OSError`` when the text cannot be fetched and
        ``UnicodeDecodeError`` when it is not valid UTF-8.
        """
        ...

    def write(self, name: str, text: str) -> None:
        """Persist ``text`` under ``name``; raise ``OSError`` on failure."""
        ...


class FileStore:
    """Stores buffers as UTF-8 files, names resolved against ``root``."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()

    def path_for(self, name: str) -> Path:
        return self.root / Path(name).expanduser()

    def read(self, name: str) -> Optional[str]:
        path = self.path_for(name)
        if not path.is_file():
            return None
        # newline="" keeps "\r\n" intact so render() round-trips the file.
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write(self, name: str, text: str) -> None:
        with self.path_for(name).open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)


class MemoryStore:
    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.files: Dict[str, str] = dict(files or {})

    def read(self, name: str) -> Optional[str]:
        return self.files.get(name)

    def write(self, name: str, text: str) -> None:
        self.files[name] = text


__all__ = ["BufferStore", "FileStore", "MemoryStore"]
