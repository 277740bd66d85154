"""Text-changing actions: typing, line breaks, backspace, whitespace."""

from __future__ import annotations

from typing import Tuple

from virtual_editor.buffer import Caret, EditorState, LineBuffer

from .selection import delete_selection


def insert_at(buffer: LineBuffer, caret: Caret, text: str) -> Tuple[LineBuffer, Caret]:
    """Insert ``text`` at ``caret``; embedded ``\\n`` opens new lines.

    The part of the line after the caret ends up behind the last inserted
    segment, and the returned caret sits right after the inserted text.
    """

    row, col = caret
    line = buffer.get_line(row)
    head, tail = line[:col], line[col:]
    segments = text.split("\n")
    if len(segments) == 1:
        return buffer.replace_line(row, head + text + tail), (row, col + len(text))
    new_lines = [head + segments[0], *segments[1:-1], segments[-1] + tail]
    buffer = buffer.update_lines(row, row + 1, new_lines)
    return buffer, (row + len(segments) - 1, len(segments[-1]))


def split_line(buffer: LineBuffer, caret: Caret) -> Tuple[LineBuffer, Caret]:
    row, col = caret
    line = buffer.get_line(row)
    buffer = buffer.update_lines(row, row + 1, [line[:col], line[col:]])
    return buffer, (row + 1, 0)


def _collapse(state: EditorState) -> EditorState:
    if state.has_selection:
        return delete_selection(state)
    return state


def insert_text(state: EditorState, count: int, payload: str) -> EditorState:
    state = _collapse(state)
    buffer, caret = state.buffer, state.caret
    for _ in range(count):
        buffer, caret = insert_at(buffer, caret, payload)
    return state.edited(buffer, caret)


def newline(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    state = _collapse(state)
    buffer, caret = state.buffer, state.caret
    for _ in range(count):
        buffer, caret = split_line(buffer, caret)
    return state.edited(buffer, caret)


def delete_backward(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    if state.has_selection:
        return delete_selection(state)
    buffer = state.buffer
    row, col = state.caret
    for _ in range(count):
        if col > 0:
            line = buffer.get_line(row)
            buffer = buffer.replace_line(row, line[: col - 1] + line[col:])
            col -= 1
        elif row > 0:
            previous = buffer.get_line(row - 1)
            merged = previous + buffer.get_line(row)
            buffer = buffer.update_lines(row - 1, row + 1, [merged])
            row, col = row - 1, len(previous)
    return state.edited(buffer, (row, col))


def insert_space(state: EditorState, count: int, payload: str) -> EditorState:
    del payload
    state = _collapse(state)
    buffer, caret = insert_at(state.buffer, state.caret, " " * max(count, 0))
    return state.edited(buffer, caret)


def insert_tab(state: EditorState, count: int, payload: str) -> EditorState:
    # Unlike insert_space, an active selection is left in place.
    del payload
    buffer, caret = insert_at(state.buffer, state.caret, "\t" * max(count, 0))
    return state.edited(buffer, caret)


__all__ = [
    "insert_at",
    "split_line",
    "insert_text",
    "newline",
    "delete_backward",
    "insert_space",
    "insert_tab",
]
