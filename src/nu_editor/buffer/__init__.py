"""Buffer engine: cursor-split documents, scrolling, windowing, buffer set."""

from .buffer import DEFAULT_BUFFER_NAME, Buffer, Transaction
from .document import BufferDocument, Cursor, Effect, Line
from .manager import BufferManager
from .state import ScrollAxis, ScrollState
from .window import BufferWindow, Row, clip_line, clip_segment

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferManager",
    "BufferWindow",
    "Cursor",
    "DEFAULT_BUFFER_NAME",
    "Effect",
    "Line",
    "Row",
    "ScrollAxis",
    "ScrollState",
    "Transaction",
    "clip_line",
    "clip_segment",
]
