"""Dataclasses describing scripted actions and their classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class ActionKind(str, Enum):
    """Closed set of actions the interpreter understands.

    Values are the canonical names used in recorded traces.
    """

    INSERT_TEXT = "editor-type"
    NEWLINE = "editor-enter"
    MOVE_LEFT = "editor-arrow-left"
    MOVE_RIGHT = "editor-arrow-right"
    MOVE_UP = "editor-arrow-up"
    MOVE_DOWN = "editor-arrow-down"
    LINE_START = "editor-command-left"
    LINE_END = "editor-command-right"
    EXTEND_LEFT = "editor-shift+arrow-left"
    EXTEND_RIGHT = "editor-shift+arrow-right"
    EXTEND_UP = "editor-shift+arrow-up"
    EXTEND_DOWN = "editor-shift+arrow-down"
    DELETE_BACKWARD = "editor-backspace"
    INSERT_SPACE = "editor-space"
    INSERT_TAB = "editor-tab"
    SHOW_MENU = "editor-show-context-menu"
    HIDE_MENU = "editor-hide-context-menu"
    MARK_SAVED = "editor-save"
    SPEAK_BEFORE = "author-speak-before"
    SPEAK_AFTER = "author-speak-after"
    SPEAK_DURING = "author-speak-during"

    @property
    def is_editor(self) -> bool:
        return self.value.startswith("editor-")

    @property
    def is_speech(self) -> bool:
        return self in _SPEECH_KINDS

    @property
    def is_repeatable(self) -> bool:
        return self in _REPEATABLE_KINDS

    @property
    def mutates_buffer(self) -> bool:
        return self in _MUTATING_KINDS


_SPEECH_KINDS = frozenset(
    {ActionKind.SPEAK_BEFORE, ActionKind.SPEAK_AFTER, ActionKind.SPEAK_DURING}
)

_REPEATABLE_KINDS = frozenset(
    {
        ActionKind.NEWLINE,
        ActionKind.MOVE_LEFT,
        ActionKind.MOVE_RIGHT,
        ActionKind.MOVE_UP,
        ActionKind.MOVE_DOWN,
        ActionKind.LINE_START,
        ActionKind.LINE_END,
        ActionKind.EXTEND_LEFT,
        ActionKind.EXTEND_RIGHT,
        ActionKind.EXTEND_UP,
        ActionKind.EXTEND_DOWN,
        ActionKind.DELETE_BACKWARD,
        ActionKind.INSERT_SPACE,
        ActionKind.INSERT_TAB,
    }
)

_MUTATING_KINDS = frozenset(
    {
        ActionKind.INSERT_TEXT,
        ActionKind.NEWLINE,
        ActionKind.DELETE_BACKWARD,
        ActionKind.INSERT_SPACE,
        ActionKind.INSERT_TAB,
    }
)

# Spellings found in older traces, before the editor-/author- prefixes.
_ALIASES: Dict[str, ActionKind] = {
    "type-editor": ActionKind.INSERT_TEXT,
    "enter": ActionKind.NEWLINE,
    "arrow-left": ActionKind.MOVE_LEFT,
    "arrow-right": ActionKind.MOVE_RIGHT,
    "arrow-up": ActionKind.MOVE_UP,
    "arrow-down": ActionKind.MOVE_DOWN,
    "command-left": ActionKind.LINE_START,
    "command-right": ActionKind.LINE_END,
    "shift+arrow-left": ActionKind.EXTEND_LEFT,
    "shift+arrow-right": ActionKind.EXTEND_RIGHT,
    "shift+arrow-up": ActionKind.EXTEND_UP,
    "shift+arrow-down": ActionKind.EXTEND_DOWN,
    "backspace": ActionKind.DELETE_BACKWARD,
    "space": ActionKind.INSERT_SPACE,
    "tab": ActionKind.INSERT_TAB,
    "save": ActionKind.MARK_SAVED,
    "speak-before": ActionKind.SPEAK_BEFORE,
    "speak-after": ActionKind.SPEAK_AFTER,
    "speak-during": ActionKind.SPEAK_DURING,
}


def resolve_kind(name: str) -> Optional[ActionKind]:
    """Map a canonical or legacy action name to its kind, if any."""

    cleaned = name.strip().lower()
    try:
        return ActionKind(cleaned)
    except ValueError:
        return _ALIASES.get(cleaned)


def parse_repeat_count(raw: str) -> Optional[int]:
    """Parse a textual repeat count; ``None`` when it is not an integer."""

    try:
        return int(str(raw).strip())
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """One scripted command: a kind plus its string payload.

    Unknown names are kept verbatim as ``kind`` so they can still be recorded.
    """

    kind: Union[ActionKind, str]
    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ActionKind):
            resolved = resolve_kind(str(self.kind))
            if resolved is not None:
                object.__setattr__(self, "kind", resolved)
        value = "" if self.value is None else str(self.value)
        object.__setattr__(self, "value", value)

    @property
    def name(self) -> str:
        if isinstance(self.kind, ActionKind):
            return self.kind.value
        return str(self.kind)

    @property
    def is_known(self) -> bool:
        return isinstance(self.kind, ActionKind)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ActionRecord":
        if "name" not in data:
            raise KeyError("action mapping requires a 'name' entry")
        return cls(kind=str(data["name"]), value=data.get("value", ""))

    def to_mapping(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True, slots=True)
class Caption:
    """Narration attached to a single step of the trace."""

    speech_kind: ActionKind
    text: str


def is_editor_action(action: ActionRecord) -> bool:
    return isinstance(action.kind, ActionKind) and action.kind.is_editor


def is_repeatable_action(action: ActionRecord) -> bool:
    return isinstance(action.kind, ActionKind) and action.kind.is_repeatable


def is_speech_action(action: ActionRecord) -> bool:
    return isinstance(action.kind, ActionKind) and action.kind.is_speech


def caption_for(action: ActionRecord) -> Optional[Caption]:
    if isinstance(action.kind, ActionKind) and action.kind.is_speech:
        return Caption(speech_kind=action.kind, text=action.value)
    return None


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
]
