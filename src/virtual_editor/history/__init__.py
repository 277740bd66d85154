"""Step history and the frames projected from it."""

from .recorder import HistoryEntry, HistoryIndexError, HistoryRecorder
from .frames import AnnotatedFrame, project_frames

__all__ = [
    "HistoryEntry",
    "HistoryIndexError",
    "HistoryRecorder",
    "AnnotatedFrame",
    "project_frames",
]
