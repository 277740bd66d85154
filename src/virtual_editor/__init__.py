"""Headless editor simulation that replays scripted editing actions."""

from virtual_editor.actions import ActionKind, ActionRecord, Caption
from virtual_editor.editor import EditorView, VirtualEditor

__all__ = [
    "ActionKind",
    "ActionRecord",
    "Caption",
    "EditorView",
    "VirtualEditor",
    "actions",
    "adapters",
    "buffer",
    "history",
    "runtime",
]

__version__ = "0.1.0"
