"""Append-only, index-aligned record of editor state after every action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from virtual_editor.actions.models import (
    ActionRecord,
    Caption,
    is_editor_action,
    is_speech_action,
)
from virtual_editor.buffer.state import Caret


class HistoryIndexError(IndexError):
    """Raised for a history lookup outside the recorded range."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Action index {index} out of bounds (recorded: {size})")
        self.index = index
        self.size = size


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    lines: Tuple[str, ...]
    caret: Caret
    anchor: Optional[Caret]
    highlighted: str
    action: ActionRecord
    caption: Optional[Caption]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class HistoryRecorder:
    """Holds one entry per applied action, plus the initial seed at index 0.

    Entries are never modified or removed once recorded.
    """

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self,
        lines: Sequence[str],
        caret: Caret,
        anchor: Optional[Caret],
        highlighted: str,
        action: ActionRecord,
        caption: Optional[Caption] = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            lines=tuple(lines),
            caret=(caret[0], caret[1]),
            anchor=None if anchor is None else (anchor[0], anchor[1]),
            highlighted=highlighted,
            action=action,
            caption=caption,
        )
        self._entries.append(entry)
        return entry

    def state_at(self, index: int) -> HistoryEntry:
        if index < 0 or index >= len(self._entries):
            raise HistoryIndexError(index, len(self._entries))
        return self._entries[index]

    def lines_at(self, index: int) -> Tuple[str, ...]:
        return self.state_at(index).lines

    def text_at(self, index: int) -> str:
        return self.state_at(index).text

    def highlighted_at(self, index: int) -> str:
        return self.state_at(index).highlighted

    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def lines_history(self) -> List[Tuple[str, ...]]:
        return [entry.lines for entry in self._entries]

    def text_history(self) -> List[str]:
        return [entry.text for entry in self._entries]

    def actions(self) -> List[ActionRecord]:
        return [entry.action for entry in self._entries]

    def editor_actions(self) -> List[ActionRecord]:
        return [entry.action for entry in self._entries if is_editor_action(entry.action)]

    def speech_actions(self) -> List[ActionRecord]:
        return [entry.action for entry in self._entries if is_speech_action(entry.action)]

    def captions(self) -> List[Optional[Caption]]:
        return [entry.caption for entry in self._entries]


__all__ = ["HistoryEntry", "HistoryIndexError", "HistoryRecorder"]
