"""Paste register storage."""

from __future__ import annotations


class PasteRegister:
    """Append-only store of copied and cut text.

    Buffers only ever append; ``clear`` exists for callers that want to
    start over. A single register may be shared by several buffers.
    """

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def clear(self) -> None:
        self._parts.clear()

    def __repr__(self) -> str:
        return f"PasteRegister({self.text!r})"
