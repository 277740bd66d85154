"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import LineBuffer
from .state import Caret, EditorState


class BufferValidationError(RuntimeError):
    """Raised when a caret or anchor falls outside the buffer."""

    def __init__(self, message: str, *, cursor: Caret | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_caret(buffer: LineBuffer, caret: Caret) -> Caret:
    row, col = caret
    if row < 0 or row >= buffer.line_count:
        raise BufferValidationError("Row out of range", cursor=caret)
    if col < 0 or col > buffer.line_length(row):
        raise BufferValidationError("Column out of range", cursor=caret)
    return caret


def check_state(state: EditorState) -> EditorState:
    """Raise unless caret and anchor both sit inside the buffer."""

    ensure_caret(state.buffer, state.caret)
    if state.anchor is not None:
        ensure_caret(state.buffer, state.anchor)
    return state


__all__ = [
    "BufferValidationError",
    "check_state",
    "ensure_caret",
]
