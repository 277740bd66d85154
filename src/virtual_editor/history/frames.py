"""Per-step frames handed to the downstream video renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from virtual_editor.actions.models import ActionRecord, Caption
from virtual_editor.buffer.state import Caret

from .recorder import HistoryRecorder


@dataclass(frozen=True, slots=True)
class AnnotatedFrame:
    index: int
    action: ActionRecord
    text: str
    caret: Caret
    anchor: Optional[Caret]
    highlighted: str
    captions: Tuple[Caption, ...] = ()

    def to_mapping(self, offset: int = 0) -> Dict[str, Any]:
        """Plain-dict form; ``offset`` shifts every row and column."""

        def shift(position: Optional[Caret]) -> Optional[Dict[str, int]]:
            if position is None:
                return None
            return {"row": position[0] + offset, "col": position[1] + offset}

        return {
            "index": self.index,
            "action": self.action.to_mapping(),
            "code": self.text,
            "caretPosition": shift(self.caret),
            "highlightStartPosition": shift(self.anchor),
            "highlightedCode": self.highlighted,
            "speechCaptions": [
                {"speechType": caption.speech_kind.value, "speechValue": caption.text}
                for caption in self.captions
            ],
        }


def project_frames(recorder: HistoryRecorder) -> List[AnnotatedFrame]:
    return [
        AnnotatedFrame(
            index=index,
            action=entry.action,
            text=entry.text,
            caret=entry.caret,
            anchor=entry.anchor,
            highlighted=entry.highlighted,
            captions=(entry.caption,) if entry.caption is not None else (),
        )
        for index, entry in enumerate(recorder.entries())
    ]


__all__ = ["AnnotatedFrame", "project_frames"]
