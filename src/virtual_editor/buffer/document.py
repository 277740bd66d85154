"""Line storage for the virtual editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class LineBuffer:
    """Immutable list-of-lines text model.

    Every edit returns a new buffer, so a reference held by a history entry
    never changes underneath it. The buffer always holds at least one line.
    """

    lines: Tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        normalized = tuple(self.lines)
        if not normalized:
            normalized = ("",)
        object.__setattr__(self, "lines", normalized)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(tuple(lines))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def last_row(self) -> int:
        return len(self.lines) - 1

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def line_length(self, index: int) -> int:
        return len(self.lines[index])

    def replace_line(self, index: int, text: str) -> "LineBuffer":
        lines = list(self.lines)
        lines[index] = text
        return LineBuffer(tuple(lines))

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "LineBuffer":
        """Return a buffer with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self.lines)
        lines[start:end] = list(new_lines)
        return LineBuffer(tuple(lines))


__all__ = ["LineBuffer"]
