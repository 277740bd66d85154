"""Plain caret motion. Every motion drops the active selection."""

from __future__ import annotations

from dataclasses import replace

from virtual_editor.buffer import Caret, EditorState, LineBuffer


def step_left(buffer: LineBuffer, caret: Caret) -> Caret:
    row, col = caret
    if col > 0:
        return (row, col - 1)
    if row > 0:
        return (row - 1, buffer.line_length(row - 1))
    return caret


def step_right(buffer: LineBuffer, caret: Caret) -> Caret:
    row, col = caret
    if col < buffer.line_length(row):
        return (row, col + 1)
    if row < buffer.last_row:
        return (row + 1, 0)
    return caret


def _repeat_step(state: EditorState, count: int, step) -> EditorState:
    caret = state.caret
    for _ in range(count):
        caret = step(state.buffer, caret)
    return replace(state.clear_selection(), caret=caret)


def move_left(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _repeat_step(state, count, step_left)


def move_right(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _repeat_step(state, count, step_right)


def _move_vertical(state: EditorState, delta: int) -> EditorState:
    # The starting column survives a trip across shorter lines; the visible
    # caret is clamped to whatever line it lands on.
    goal = state.goal_col if state.goal_col is not None else state.caret[1]
    row = max(0, min(state.caret[0] + delta, state.buffer.last_row))
    col = min(goal, state.buffer.line_length(row))
    return replace(state.clear_selection(), caret=(row, col), goal_col=goal)


def move_up(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _move_vertical(state, -max(count, 0))


def move_down(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    return _move_vertical(state, max(count, 0))


def line_start(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    state = state.clear_selection()
    if count <= 0:
        return state
    return state.with_caret(state.caret[0], 0)


def line_end(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    state = state.clear_selection()
    if count <= 0:
        return state
    row = state.caret[0]
    return state.with_caret(row, state.buffer.line_length(row))


__all__ = [
    "step_left",
    "step_right",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
]
