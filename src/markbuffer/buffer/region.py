"""Region derivation from cursor and marker."""

from __future__ import annotations

from dataclasses import dataclass

from .state import BufferState, clamp


@dataclass(frozen=True, slots=True)
class Region:
    """Half-open ``[start, end)`` range over a buffer."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return max(0, self.end - self.start)

    @property
    def is_empty(self) -> bool:
        return self.width == 0

    def indices(self) -> range:
        return range(self.start, self.end)


def normalized_region(state: BufferState, length: int) -> Region:
    """``[min(marker, cursor), max(marker, cursor))`` clamped to the buffer."""

    lower = clamp(min(state.marker, state.cursor), length)
    upper = clamp(max(state.marker, state.cursor), length)
    return Region(lower, upper)


def literal_region(state: BufferState, length: int) -> Region:
    """``[marker, cursor)`` as written; empty when the marker is past the cursor."""

    start = clamp(state.marker, length)
    end = clamp(state.cursor, length)
    if start > end:
        return Region(start, start)
    return Region(start, end)
