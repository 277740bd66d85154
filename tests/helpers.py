from __future__ import annotations

from typing import Sequence

from virtual_editor import ActionKind, ActionRecord, VirtualEditor
from virtual_editor.runtime.settings import Settings


def act(kind: ActionKind | str, value: str = "1") -> ActionRecord:
    return ActionRecord(kind, value)


def make_editor(
    lines: Sequence[str] = (),
    *actions: ActionRecord,
    caret: tuple[int, int] | None = None,
    settings: Settings | None = None,
) -> VirtualEditor:
    editor = VirtualEditor(list(lines), settings=settings or Settings())
    if caret is not None:
        editor.place_caret(*caret)
    editor.apply_actions(actions)
    return editor
