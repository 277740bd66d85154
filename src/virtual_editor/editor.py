"""High-level editor façade combining state, reducer, and history."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from virtual_editor.actions import (
    ActionKind,
    ActionRecord,
    Caption,
    caption_for,
    has_valid_repeat_count,
    reduce,
)
from virtual_editor.buffer import Caret, EditorState, Selection, check_state
from virtual_editor.history import (
    AnnotatedFrame,
    HistoryEntry,
    HistoryRecorder,
    project_frames,
)
from virtual_editor.runtime import telemetry
from virtual_editor.runtime.settings import Settings, load_settings

ActionLike = Union[ActionRecord, Mapping[str, Any]]


@dataclass(slots=True)
class EditorView:
    text: str
    caret: Caret
    selection: Optional[Selection]


class VirtualEditor:
    """Replays scripted actions against an in-memory line buffer.

    Index 0 of every history log is the initial content, so after ``n``
    calls to :meth:`apply_action` each log holds ``n + 1`` entries.
    """

    def __init__(
        self,
        initial_lines: Sequence[str],
        actions: Optional[Iterable[ActionLike]] = None,
        verbose: bool = False,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.verbose = verbose or self.settings.verbose
        self._state = EditorState.initial(initial_lines)
        self._history = HistoryRecorder()
        seed = ActionRecord(ActionKind.INSERT_TEXT, self._state.buffer.text)
        self._record(seed, caption=None)
        if actions is not None:
            self.apply_actions(actions)

    # -- applying actions -------------------------------------------------

    def apply_actions(self, actions: Iterable[ActionLike]) -> str:
        for action in actions:
            self.apply_action(action)
        return self.text

    def apply_action(self, action: ActionLike) -> str:
        record = _coerce(action)
        step = len(self._history)
        with telemetry.span(
            name=f"editor::{record.name}",
            logger_name=self.logger_name,
            component="editor",
            metadata={"step": step},
        ):
            before = self._state
            self._state = reduce(before, record)
            if not record.is_known and self.verbose:
                telemetry.record_event(
                    "editor.unknown_action",
                    level="warning",
                    data={"action": record.name, "step": step},
                    logger_name=self.logger_name,
                )
            if not has_valid_repeat_count(record) and self.verbose:
                telemetry.record_event(
                    "action.repeat_count_invalid",
                    level="warning",
                    data={"action": record.name, "value": record.value, "step": step},
                    logger_name=self.logger_name,
                )
            self._record(record, caption=caption_for(record))
            if self.verbose:
                telemetry.record_event(
                    "editor.action",
                    data={
                        "step": step,
                        "action": record.to_mapping(),
                        "before": before.buffer.text,
                        "after": self._state.buffer.text,
                        "caret": self._state.caret,
                    },
                    logger_name=self.logger_name,
                )
        return self.text

    def _record(self, action: ActionRecord, *, caption: Optional[Caption]) -> None:
        state = self._state
        self._history.record(
            state.lines,
            state.caret,
            state.anchor,
            state.highlighted,
            action,
            caption,
        )

    @property
    def logger_name(self) -> str:
        return f"{self.settings.logger_name}.editor"

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose

    def place_caret(self, row: int, col: int) -> None:
        """Move the caret directly, outside of any recorded action."""

        self._state = check_state(replace(self._state, caret=(row, col), goal_col=None))

    # -- current state ----------------------------------------------------

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._state.lines

    @property
    def text(self) -> str:
        return self._state.buffer.text

    @property
    def caret(self) -> Caret:
        return self._state.caret

    @property
    def display_caret(self) -> Caret:
        offset = self.settings.display_offset
        row, col = self._state.caret
        return (row + offset, col + offset)

    @property
    def selection(self) -> Optional[Selection]:
        return self._state.selection

    @property
    def highlighted(self) -> str:
        return self._state.highlighted

    @property
    def is_saved(self) -> bool:
        return self._state.saved

    @property
    def is_context_menu_open(self) -> bool:
        return self._state.context_menu_open

    # -- history ----------------------------------------------------------

    @property
    def history(self) -> HistoryRecorder:
        return self._history

    def state_at(self, index: int) -> HistoryEntry:
        return self._history.state_at(index)

    def lines_at(self, index: int) -> Tuple[str, ...]:
        return self._history.lines_at(index)

    def text_at(self, index: int) -> str:
        return self._history.text_at(index)

    def highlighted_at(self, index: int) -> str:
        return self._history.highlighted_at(index)

    def lines_history(self) -> List[Tuple[str, ...]]:
        return self._history.lines_history()

    def text_after_each_step(self) -> List[str]:
        return self._history.text_history()

    def state_after_each_step(self) -> List[EditorView]:
        return [
            EditorView(
                text=entry.text,
                caret=entry.caret,
                selection=None if entry.anchor is None else (entry.anchor, entry.caret),
            )
            for entry in self._history.entries()
        ]

    @property
    def actions_applied(self) -> List[ActionRecord]:
        return self._history.actions()

    @property
    def editor_actions_applied(self) -> List[ActionRecord]:
        return self._history.editor_actions()

    @property
    def speech_actions_applied(self) -> List[ActionRecord]:
        return self._history.speech_actions()

    @property
    def captions(self) -> List[Optional[Caption]]:
        return self._history.captions()

    def frames(self) -> List[AnnotatedFrame]:
        return project_frames(self._history)


def _coerce(action: ActionLike) -> ActionRecord:
    if isinstance(action, ActionRecord):
        return action
    return ActionRecord.from_mapping(action)


__all__ = ["ActionLike", "EditorView", "VirtualEditor"]
