"""Line buffer, caret/selection state, and invariant checks."""

from .document import LineBuffer
from .state import Caret, EditorState, Selection
from .validation import BufferValidationError, check_state, ensure_caret

__all__ = [
    "LineBuffer",
    "Caret",
    "Selection",
    "EditorState",
    "BufferValidationError",
    "check_state",
    "ensure_caret",
]
