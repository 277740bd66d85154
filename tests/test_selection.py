from __future__ import annotations

from virtual_editor import ActionKind
from virtual_editor.actions import highlighted_text, normalize
from virtual_editor.buffer import LineBuffer

from helpers import act, make_editor

K = ActionKind


def test_normalize_orders_by_row_then_column() -> None:
    assert normalize((2, 0), (1, 5)) == ((1, 5), (2, 0))
    assert normalize((1, 3), (1, 1)) == ((1, 1), (1, 3))
    assert normalize((0, 0), (0, 4)) == ((0, 0), (0, 4))


def test_highlighted_text_single_and_multi_line() -> None:
    buffer = LineBuffer(("alpha", "beta", "gamma"))

    assert highlighted_text(buffer, (0, 4), (0, 1)) == "lph"
    assert highlighted_text(buffer, (2, 2), (0, 3)) == "ha\nbeta\nga"


def test_backward_highlight_then_delete_and_type() -> None:
    editor = make_editor(
        [],
        act(K.INSERT_TEXT, "abcdef"),
        act(K.EXTEND_LEFT, "3"),
        act(K.DELETE_BACKWARD, "1"),
        act(K.INSERT_TEXT, "123"),
    )

    assert editor.highlighted_at(0) == ""
    assert editor.highlighted_at(2) == "def"
    assert editor.highlighted_at(3) == ""
    assert editor.text_at(4) == "abc123"


def test_extend_keeps_first_anchor() -> None:
    editor = make_editor(
        [],
        act(K.INSERT_TEXT, "abcdef"),
        act(K.EXTEND_LEFT, "2"),
        act(K.EXTEND_LEFT, "1"),
    )

    assert editor.selection == ((0, 6), (0, 3))
    assert editor.highlighted == "def"


def test_extend_back_across_anchor() -> None:
    editor = make_editor(
        ["abcdef"],
        act(K.EXTEND_RIGHT, "2"),
        act(K.EXTEND_LEFT, "4"),
        caret=(0, 3),
    )

    assert editor.selection == ((0, 3), (0, 1))
    assert editor.highlighted == "bc"


def test_extend_right_wraps_lines() -> None:
    editor = make_editor(["ab", "cd"], act(K.EXTEND_RIGHT, "2"), caret=(0, 1))

    assert editor.caret == (1, 0)
    assert editor.highlighted == "b\n"


def test_extend_up_clamps_to_shorter_line() -> None:
    editor = make_editor(["ab", "abcdef"], act(K.EXTEND_UP, "1"), caret=(1, 5))

    assert editor.selection == ((1, 5), (0, 2))
    assert editor.highlighted == "\nabcde"


def test_extend_down_preserves_column_on_longer_line() -> None:
    editor = make_editor(["abcdef", "abcdefgh"], act(K.EXTEND_DOWN, "1"), caret=(0, 4))

    assert editor.caret == (1, 4)
    assert editor.highlighted == "ef\nabcd"


def test_extend_vertical_forgets_column_unlike_plain_motion() -> None:
    lines = ["long line", "ab", "long line"]

    plain = make_editor(lines, act(K.MOVE_DOWN, "2"), caret=(0, 8))
    extended = make_editor(lines, act(K.EXTEND_DOWN, "2"), caret=(0, 8))

    assert plain.caret == (2, 8)
    assert extended.caret == (2, 2)


def test_extend_with_zero_count_starts_empty_selection() -> None:
    editor = make_editor(["abc"], act(K.EXTEND_RIGHT, "0"), caret=(0, 1))

    assert editor.selection == ((0, 1), (0, 1))
    assert editor.highlighted == ""


def test_highlight_cache_resets_on_following_action() -> None:
    editor = make_editor(
        ["abcdef"],
        act(K.EXTEND_RIGHT, "3"),
        act(K.SPEAK_DURING, "look at this"),
    )

    assert editor.highlighted_at(1) == "abc"
    assert editor.highlighted == ""
    assert editor.selection == ((0, 0), (0, 3))
