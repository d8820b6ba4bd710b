"""Character storage backing a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List


@dataclass(slots=True)
class TextDocument:
    """Mutable sequence of single characters with a change counter.

    ``version`` is bumped on every call that actually changes content, so
    no-op edits can be told apart from real ones by comparing versions.
    """

    _chars: List[str] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_chars=list(text), version=0)

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def char_at(self, index: int) -> str:
        return self._chars[index]

    def slice(self, start: int, end: int) -> str:
        return "".join(self._chars[start:end])

    def splice(self, start: int, end: int, text: Iterable[str]) -> None:
        """Replace ``[start:end]`` with the characters of ``text``."""

        replacement = list(text)
        if start == end and not replacement:
            return
        self._chars[start:end] = replacement
        self._touch()

    def set_char(self, index: int, char: str) -> None:
        if self._chars[index] == char:
            return
        self._chars[index] = char
        self._touch()

    def _touch(self) -> None:
        self.version += 1
