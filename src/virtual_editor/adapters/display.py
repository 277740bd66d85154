"""Physical-coordinate view over a :class:`VirtualEditor`.

The engine counts rows and columns from zero; renderers and recorded
editor snapshots usually count from one. The adapter applies a fixed offset
in both directions so the engine itself has a single coordinate system.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from virtual_editor.buffer import Caret
from virtual_editor.editor import VirtualEditor

PhysicalRange = Tuple[Caret, Caret]


class DisplayAdapter:
    def __init__(self, editor: VirtualEditor, *, offset: Optional[int] = None) -> None:
        self.editor = editor
        self.offset = editor.settings.display_offset if offset is None else offset

    def to_physical(self, position: Caret) -> Caret:
        return (position[0] + self.offset, position[1] + self.offset)

    def to_logical(self, position: Caret) -> Caret:
        return (position[0] - self.offset, position[1] - self.offset)

    def caret(self) -> Caret:
        return self.to_physical(self.editor.caret)

    def selection(self) -> Optional[PhysicalRange]:
        """``(start, end)`` where start is the anchor and end the caret."""

        selection = self.editor.selection
        if selection is None:
            return None
        anchor, caret = selection
        return self.to_physical(anchor), self.to_physical(caret)

    def set_caret(self, row: int, col: int) -> Caret:
        """Place the caret at physical ``(row, col)``; raises if out of range."""

        self.editor.place_caret(*self.to_logical((row, col)))
        return self.caret()

    def frames(self) -> List[Dict[str, Any]]:
        return [frame.to_mapping(self.offset) for frame in self.editor.frames()]


__all__ = ["DisplayAdapter", "PhysicalRange"]
