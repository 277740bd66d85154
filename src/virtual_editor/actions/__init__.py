"""Action records and the reducer that interprets them."""

from .models import (
    ActionKind,
    ActionRecord,
    Caption,
    caption_for,
    is_editor_action,
    is_repeatable_action,
    is_speech_action,
    parse_repeat_count,
    resolve_kind,
)
from .selection import delete_selection, highlighted_text, normalize
from .dispatch import has_valid_repeat_count, reduce, repeat_count

__all__ = [
    "ActionKind",
    "ActionRecord",
    "Caption",
    "caption_for",
    "is_editor_action",
    "is_repeatable_action",
    "is_speech_action",
    "parse_repeat_count",
    "resolve_kind",
    "delete_selection",
    "highlighted_text",
    "normalize",
    "has_valid_repeat_count",
    "reduce",
    "repeat_count",
]
