"""Buffer façade combining document, cursor/marker state, and paste register.

The cursor and the marker both sit *between* characters::

     B U F F E R         marker = 0
    ^_______^            cursor = 4
    m       c            region covers "BUFF"

Copy, cut and duplicate removal work on the normalized region
``[min(marker, cursor), max(marker, cursor))``. Case inversion and character
substitution walk the literal ``[marker, cursor)`` interval and do nothing
when the marker sits past the cursor.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Any, Callable, ContextManager, List, Optional

from markbuffer.runtime import telemetry

from .document import TextDocument
from .region import Region, literal_region, normalized_region
from .registers import PasteRegister
from .state import BufferState, clamp
from .validation import (
    Predicate,
    ensure_char,
    ensure_offset,
    ensure_predicate,
    ensure_text,
)


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    text: str
    cursor: int
    marker: int
    paste: str


class Buffer:
    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        paste: Optional[PasteRegister] = None,
    ) -> None:
        self.name = name
        self.document = TextDocument.from_text(ensure_text(text))
        self.state = BufferState()
        self.registers = paste if paste is not None else PasteRegister()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(text, name=name)

    # -- queries -----------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def marker(self) -> int:
        return self.state.marker

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def paste(self) -> str:
        return self.registers.text

    def __len__(self) -> int:
        return len(self.document)

    def __str__(self) -> str:
        return self.document.text

    def __repr__(self) -> str:
        return (
            f"Buffer({self.text!r}, cursor={self.cursor}, "
            f"marker={self.marker}, paste={self.paste!r})"
        )

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            cursor=self.state.cursor,
            marker=self.state.marker,
            paste=self.registers.text,
        )

    def region(self) -> Region:
        return normalized_region(self.state, len(self.document))

    def literal_region(self) -> Region:
        return literal_region(self.state, len(self.document))

    # -- cursor movement ---------------------------------------------------

    def move_left(self) -> None:
        if self.state.cursor > 0:
            self.state.set_cursor(self.state.cursor - 1)

    def move_right(self) -> None:
        if self.state.cursor < len(self.document):
            self.state.set_cursor(self.state.cursor + 1)

    def go_to(self, offset: int) -> None:
        target = ensure_offset(offset, argument="offset")
        self.state.set_cursor(clamp(target, len(self.document)))

    def to_start(self) -> None:
        self.state.set_cursor(0)

    def to_end(self) -> None:
        self.state.set_cursor(len(self.document))

    # -- marking -----------------------------------------------------------

    def mark(self) -> None:
        self.state.set_marker(self.state.cursor)

    def mark_all(self) -> None:
        self.state.set_marker(0)
        self.state.set_cursor(len(self.document))

    # -- insertion and paste -----------------------------------------------

    def insert(self, text: str) -> None:
        text = ensure_text(text)
        if not text:
            return
        with Transaction(self, "insert") as tx:
            cursor = self.state.cursor
            self.document.splice(cursor, cursor, text)
            self.state.set_cursor(cursor + len(text))
            tx.note(inserted=len(text))

    def copy(self) -> None:
        region = self.region()
        if region.is_empty:
            return
        with Transaction(self, "copy") as tx:
            self.registers.append(self.document.slice(region.start, region.end))
            tx.note(width=region.width)

    def cut(self) -> None:
        region = self.region()
        if region.is_empty:
            return
        with Transaction(self, "cut") as tx:
            self.registers.append(self.document.slice(region.start, region.end))
            self.document.splice(region.start, region.end, "")
            self.state.collapse_to(region.start)
            tx.note(width=region.width)

    def paste_insert(self) -> None:
        self.insert(self.registers.text)

    # -- character deletion ------------------------------------------------

    def delete_forward(self) -> None:
        cursor = self.state.cursor
        if cursor >= len(self.document):
            return
        with Transaction(self, "delete_forward"):
            self.document.splice(cursor, cursor + 1, "")
            self.state.clamp_marker(len(self.document))

    def delete_backward(self) -> None:
        cursor = self.state.cursor
        if cursor <= 0:
            return
        with Transaction(self, "delete_backward"):
            self.document.splice(cursor - 1, cursor, "")
            self.state.set_cursor(cursor - 1)
            self.state.clamp_marker(len(self.document))

    # -- region transforms -------------------------------------------------

    def invert_case(self) -> None:
        region = self.literal_region()
        if region.is_empty:
            return
        with Transaction(self, "invert_case") as tx:
            replaced = 0
            for index in region.indices():
                char = self.document.char_at(index)
                swapped = _swap_case(char)
                if swapped != char:
                    self.document.set_char(index, swapped)
                    replaced += 1
            tx.note(replaced=replaced)

    def substitute_char(self, old: str, new: str) -> None:
        old = ensure_char(old, argument="old")
        new = ensure_char(new, argument="new")
        region = self.literal_region()
        if region.is_empty:
            return
        with Transaction(self, "substitute_char") as tx:
            replaced = 0
            for index in region.indices():
                if self.document.char_at(index) == old:
                    self.document.set_char(index, new)
                    replaced += 1
            tx.note(replaced=replaced)

    def remove_duplicates(self) -> None:
        region = self.region()
        with Transaction(self, "remove_duplicates") as tx:
            segment = self.document.slice(region.start, region.end)
            reduced = "".join(dict.fromkeys(segment))
            if len(reduced) != len(segment):
                self.document.splice(region.start, region.end, reduced)
            self.state.set_cursor(region.start)
            self.state.set_marker(region.start + len(reduced))
            tx.note(removed=len(segment) - len(reduced))

    # -- search ------------------------------------------------------------

    def find_forward(self, target: Predicate | str) -> bool:
        """Move to the first match at or after the cursor.

        On failure the cursor is left at the end of the buffer.
        """

        predicate = ensure_predicate(target)
        length = len(self.document)
        for index in range(self.state.cursor, length):
            if predicate(self.document.char_at(index)):
                self.state.set_cursor(index)
                return self._search_outcome("forward", True)
        self.state.set_cursor(length)
        return self._search_outcome("forward", False)

    def find_backward(self, target: Predicate | str) -> bool:
        """Move to the nearest match strictly before the cursor.

        On failure the cursor is left at the start of the buffer.
        """

        predicate = ensure_predicate(target)
        for index in range(self.state.cursor - 1, -1, -1):
            if predicate(self.document.char_at(index)):
                self.state.set_cursor(index)
                return self._search_outcome("backward", True)
        self.state.set_cursor(0)
        return self._search_outcome("backward", False)

    def _search_outcome(self, direction: str, found: bool) -> bool:
        telemetry.search_event(
            buffer=self.name,
            direction=direction,
            found=found,
            cursor=self.state.cursor,
        )
        return found

    # -- combinators -------------------------------------------------------

    def repeat(self, times: int, *commands: Callable[[], Any]) -> List[Any]:
        """Run ``commands`` in order, ``times`` times over.

        Returns the results of the final round, or an empty list when
        nothing ran.
        """

        times = ensure_offset(times, argument="times")
        results: List[Any] = []
        for _ in range(times):
            results = [command() for command in commands]
        return results


class Transaction(AbstractContextManager["Transaction"]):
    """Span around one operation that touches the text or the paste register.

    Details passed to ``note`` are written when the span closes.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self._version_before = 0

    def __enter__(self) -> "Transaction":
        self._version_before = self.buffer.document.version
        self._span_cm = telemetry.buffer_span(self.label, buffer=self.buffer.name)
        self._handle = self._span_cm.__enter__()
        return self

    def note(self, **details: Any) -> None:
        if self._handle is not None:
            for key, value in details.items():
                self._handle.add_metadata(key, value)

    @property
    def changed(self) -> bool:
        return self.buffer.document.version != self._version_before

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self.note(changed=self.changed, cursor=self.buffer.state.cursor)
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _swap_case(char: str) -> str:
    if char.isupper():
        swapped = char.lower()
    elif char.islower():
        swapped = char.upper()
    else:
        return char
    # keep the buffer fixed-width: "ß".upper() is "SS"
    return swapped if len(swapped) == 1 else char
