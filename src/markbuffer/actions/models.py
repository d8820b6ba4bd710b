"""Dataclasses describing named buffer operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, MutableMapping


def _normalize_aliases(aliases: Iterable[str]) -> tuple[str, ...]:
    seen: MutableMapping[str, None] = {}
    result: list[str] = []
    for alias in aliases:
        cleaned = alias.strip()
        if cleaned and cleaned not in seen:
            seen[cleaned] = None
            result.append(cleaned)
    return tuple(result)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata binding an operation name to its handler.

    ``handler`` receives the target buffer followed by the operation's own
    arguments, so unbound ``Buffer`` methods can be used directly.
    """

    id: str
    handler: Callable[..., object]
    description: str = ""
    aliases: tuple[str, ...] = ()
    arity: int = 0
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.arity < 0:
            raise ValueError("arity cannot be negative")
        object.__setattr__(self, "aliases", _normalize_aliases(self.aliases))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def names(self) -> tuple[str, ...]:
        return (self.id, *self.aliases)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


__all__ = ["ActionRef"]
