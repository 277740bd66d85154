"""Caret, selection, and flag state threaded through the reducer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from .document import LineBuffer

Caret = Tuple[int, int]  # (row, column), 0-indexed
Selection = Tuple[Caret, Caret]  # (anchor, caret)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Complete editor state after some number of actions.

    ``anchor`` is the fixed end of the selection (``None`` when nothing is
    selected); the caret is the moving end. ``goal_col`` remembers the column
    a run of plain up/down moves started from.
    """

    buffer: LineBuffer = LineBuffer()
    caret: Caret = (0, 0)
    anchor: Optional[Caret] = None
    goal_col: Optional[int] = None
    highlighted: str = ""
    saved: bool = False
    context_menu_open: bool = False

    @classmethod
    def initial(cls, lines: Sequence[str]) -> "EditorState":
        return cls(buffer=LineBuffer.from_lines(lines))

    @property
    def lines(self) -> Tuple[str, ...]:
        return self.buffer.lines

    @property
    def has_selection(self) -> bool:
        return self.anchor is not None

    @property
    def selection(self) -> Optional[Selection]:
        if self.anchor is None:
            return None
        return (self.anchor, self.caret)

    def with_caret(self, row: int, col: int) -> "EditorState":
        return replace(self, caret=(row, col))

    def clear_selection(self) -> "EditorState":
        return replace(self, anchor=None, highlighted="")

    def edited(self, buffer: LineBuffer, caret: Caret) -> "EditorState":
        """Swap in new text; any edit marks the document unsaved."""

        return replace(self, buffer=buffer, caret=caret, saved=False)


__all__ = ["Caret", "Selection", "EditorState"]
