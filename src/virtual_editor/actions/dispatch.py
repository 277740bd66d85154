"""The action interpreter: a pure ``(state, action) -> state`` reducer."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict

from virtual_editor.buffer import EditorState

from . import editing, motion, selection
from .models import ActionKind, ActionRecord, parse_repeat_count

Reducer = Callable[[EditorState, int, str], EditorState]


def _show_menu(state: EditorState, count: int, payload: str) -> EditorState:
    del count, payload
    return replace(state, context_menu_open=True)


def _hide_menu(state: EditorState, count: int, payload: str) -> EditorState:
    del count, payload
    return replace(state, context_menu_open=False)


def _mark_saved(state: EditorState, count: int, payload: str) -> EditorState:
    del count, payload
    return replace(state, saved=True)


def _speak(state: EditorState, count: int, payload: str) -> EditorState:
    # Narration lives in the caption log only.
    del count, payload
    return state


_REDUCERS: Dict[ActionKind, Reducer] = {
    ActionKind.INSERT_TEXT: editing.insert_text,
    ActionKind.NEWLINE: editing.newline,
    ActionKind.MOVE_LEFT: motion.move_left,
    ActionKind.MOVE_RIGHT: motion.move_right,
    ActionKind.MOVE_UP: motion.move_up,
    ActionKind.MOVE_DOWN: motion.move_down,
    ActionKind.LINE_START: motion.line_start,
    ActionKind.LINE_END: motion.line_end,
    ActionKind.EXTEND_LEFT: selection.extend_left,
    ActionKind.EXTEND_RIGHT: selection.extend_right,
    ActionKind.EXTEND_UP: selection.extend_up,
    ActionKind.EXTEND_DOWN: selection.extend_down,
    ActionKind.DELETE_BACKWARD: editing.delete_backward,
    ActionKind.INSERT_SPACE: editing.insert_space,
    ActionKind.INSERT_TAB: editing.insert_tab,
    ActionKind.SHOW_MENU: _show_menu,
    ActionKind.HIDE_MENU: _hide_menu,
    ActionKind.MARK_SAVED: _mark_saved,
    ActionKind.SPEAK_BEFORE: _speak,
    ActionKind.SPEAK_AFTER: _speak,
    ActionKind.SPEAK_DURING: _speak,
}

_unhandled = set(ActionKind) - set(_REDUCERS)
if _unhandled:
    raise RuntimeError(
        f"No reducer registered for {sorted(kind.value for kind in _unhandled)}"
    )

# Actions that leave the caret alone, plus plain vertical motion, keep the
# remembered column; everything else starts a fresh one.
_KEEPS_GOAL_COLUMN = frozenset(
    {
        ActionKind.MOVE_UP,
        ActionKind.MOVE_DOWN,
        ActionKind.SHOW_MENU,
        ActionKind.HIDE_MENU,
        ActionKind.MARK_SAVED,
        ActionKind.SPEAK_BEFORE,
        ActionKind.SPEAK_AFTER,
        ActionKind.SPEAK_DURING,
    }
)


def has_valid_repeat_count(action: ActionRecord) -> bool:
    """False only for a repeatable action whose count is not an integer."""

    if not isinstance(action.kind, ActionKind) or not action.kind.is_repeatable:
        return True
    return parse_repeat_count(action.value) is not None


def repeat_count(action: ActionRecord) -> int:
    """How many times ``action`` applies; malformed counts fall back to one."""

    if not isinstance(action.kind, ActionKind) or not action.kind.is_repeatable:
        return 1
    parsed = parse_repeat_count(action.value)
    if parsed is None:
        return 1
    return max(parsed, 0)


def reduce(state: EditorState, action: ActionRecord) -> EditorState:
    """Apply ``action`` to ``state`` and return the resulting state.

    Never raises for an unknown kind: the state comes back unchanged apart
    from the per-step highlight reset.
    """

    state = replace(state, highlighted="")
    if not isinstance(action.kind, ActionKind):
        return state
    kind = action.kind
    result = _REDUCERS[kind](state, repeat_count(action), action.value)
    if kind.mutates_buffer:
        result = replace(result, saved=False)
    if kind not in _KEEPS_GOAL_COLUMN:
        result = replace(result, goal_col=None)
    return result


__all__ = ["Reducer", "has_valid_repeat_count", "reduce", "repeat_count"]
