from __future__ import annotations

import pytest

from virtual_editor import ActionKind
from virtual_editor.adapters.display import DisplayAdapter
from virtual_editor.buffer import BufferValidationError
from virtual_editor.runtime.settings import Settings

from helpers import act, make_editor

K = ActionKind


def test_caret_and_selection_are_one_indexed_by_default() -> None:
    editor = make_editor(["abcdef", "gh"], act(K.EXTEND_DOWN, "1"), caret=(0, 1))
    adapter = DisplayAdapter(editor)

    assert adapter.caret() == (2, 2)
    assert adapter.selection() == ((1, 2), (2, 2))


def test_selection_absent_without_highlight() -> None:
    adapter = DisplayAdapter(make_editor(["abc"]))

    assert adapter.selection() is None


def test_offset_comes_from_settings() -> None:
    editor = make_editor(["abc"], act(K.LINE_END), settings=Settings(display_offset=0))

    assert DisplayAdapter(editor).caret() == (0, 3)
    assert editor.display_caret == (0, 3)
    assert DisplayAdapter(editor, offset=5).caret() == (5, 8)


def test_set_caret_uses_physical_coordinates_without_recording() -> None:
    editor = make_editor(["abc", "defg"])
    adapter = DisplayAdapter(editor)

    assert adapter.set_caret(2, 5) == (2, 5)
    assert editor.caret == (1, 4)
    assert len(editor.history) == 1

    editor.apply_action(act(K.INSERT_TEXT, "!"))
    assert editor.lines == ("abc", "defg!")


@pytest.mark.parametrize("position", [(0, 1), (3, 1), (1, 5)])
def test_set_caret_rejects_positions_outside_buffer(position: tuple[int, int]) -> None:
    editor = make_editor(["abc", "de"])

    with pytest.raises(BufferValidationError) as info:
        DisplayAdapter(editor).set_caret(*position)

    assert info.value.cursor is not None
    assert editor.caret == (0, 0)


def test_frames_are_shifted_mappings() -> None:
    editor = make_editor([""], act(K.INSERT_TEXT, "hi"), act(K.SPEAK_AFTER, "said hi"))

    frames = DisplayAdapter(editor).frames()

    assert frames[1]["caretPosition"] == {"row": 1, "col": 3}
    assert frames[2]["speechCaptions"] == [
        {"speechType": "author-speak-after", "speechValue": "said hi"}
    ]
    assert frames[0]["highlightStartPosition"] is None
