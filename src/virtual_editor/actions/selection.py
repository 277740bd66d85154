"""Selection helpers: range normalization, highlight text, extend, delete."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Tuple

from virtual_editor.buffer import Caret, EditorState, LineBuffer

from .motion import step_left, step_right

CaretStep = Callable[[LineBuffer, Caret], Caret]


def normalize(anchor: Caret, caret: Caret) -> Tuple[Caret, Caret]:
    """Order the two selection ends by row, then column."""

    if anchor <= caret:
        return anchor, caret
    return caret, anchor


def highlighted_text(buffer: LineBuffer, anchor: Caret, caret: Caret) -> str:
    (start_row, start_col), (end_row, end_col) = normalize(anchor, caret)
    if start_row == end_row:
        return buffer.get_line(start_row)[start_col:end_col]
    parts = [buffer.get_line(start_row)[start_col:]]
    parts.extend(buffer.lines[start_row + 1 : end_row])
    parts.append(buffer.get_line(end_row)[:end_col])
    return "\n".join(parts)


def delete_selection(state: EditorState) -> EditorState:
    """Remove the selected range and collapse the caret to its start.

    The selection is always cleared, even when the range is empty.
    """

    if state.anchor is None:
        return state.clear_selection()
    (start_row, start_col), (end_row, end_col) = normalize(state.anchor, state.caret)
    buffer = state.buffer
    joined = buffer.get_line(start_row)[:start_col] + buffer.get_line(end_row)[end_col:]
    buffer = buffer.update_lines(start_row, end_row + 1, [joined])
    return state.edited(buffer, (start_row, start_col)).clear_selection()


def step_up_clamped(buffer: LineBuffer, caret: Caret) -> Caret:
    row, col = caret
    if row == 0:
        return caret
    return (row - 1, min(col, buffer.line_length(row - 1)))


def step_down_clamped(buffer: LineBuffer, caret: Caret) -> Caret:
    row, col = caret
    if row >= buffer.last_row:
        return caret
    return (row + 1, min(col, buffer.line_length(row + 1)))


def _extend(state: EditorState, count: int, step: CaretStep) -> EditorState:
    anchor = state.anchor if state.anchor is not None else state.caret
    caret = state.caret
    for _ in range(count):
        caret = step(state.buffer, caret)
    return replace(
        state,
        caret=caret,
        anchor=anchor,
        goal_col=None,
        highlighted=highlighted_text(state.buffer, anchor, caret),
    )


def extend_left(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _extend(state, count, step_left)


def extend_right(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _extend(state, count, step_right)


def extend_up(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _extend(state, count, step_up_clamped)


def extend_down(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _extend(state, count, step_down_clamped)


__all__ = [
    "normalize",
    "highlighted_text",
    "delete_selection",
    "extend_left",
    "extend_right",
    "extend_up",
    "extend_down",
]
