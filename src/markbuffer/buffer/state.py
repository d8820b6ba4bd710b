"""Cursor and marker bookkeeping for buffers."""

from __future__ import annotations

from dataclasses import dataclass


def clamp(offset: int, length: int) -> int:
    """Pin ``offset`` into ``[0, length]``."""

    return max(0, min(offset, length))


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + marker pair; both address gaps between characters."""

    cursor: int = 0
    marker: int = 0

    def set_cursor(self, offset: int) -> None:
        self.cursor = offset

    def set_marker(self, offset: int) -> None:
        self.marker = offset

    def collapse_to(self, offset: int) -> None:
        self.cursor = offset
        self.marker = offset

    def clamp_marker(self, length: int) -> None:
        if self.marker > length:
            self.marker = length
