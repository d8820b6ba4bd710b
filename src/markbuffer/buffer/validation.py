"""Argument validation shared by buffer operations."""

from __future__ import annotations

from typing import Callable

Predicate = Callable[[str], bool]


class BufferValidationError(ValueError):
    """Raised when a caller passes an argument of the wrong type or shape."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


def ensure_offset(value: object, *, argument: str = "offset") -> int:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise BufferValidationError(
            f"{argument} must be an int, got {type(value).__name__}",
            argument=argument,
        )
    return value


def ensure_text(value: object, *, argument: str = "text") -> str:
    if not isinstance(value, str):
        raise BufferValidationError(
            f"{argument} must be a str, got {type(value).__name__}",
            argument=argument,
        )
    return value


def ensure_char(value: object, *, argument: str = "char") -> str:
    text = ensure_text(value, argument=argument)
    if len(text) != 1:
        raise BufferValidationError(
            f"{argument} must be a single character, got {text!r}",
            argument=argument,
        )
    return text


def char_equals(char: str) -> Predicate:
    """Return a predicate matching exactly ``char``."""

    target = ensure_char(char)

    def _matches(candidate: str) -> bool:
        return candidate == target

    _matches.__name__ = f"char_equals({target!r})"
    return _matches


def ensure_predicate(target: object, *, argument: str = "target") -> Predicate:
    """Accept a predicate or a single character (sugar for equality)."""

    if isinstance(target, str):
        return char_equals(ensure_char(target, argument=argument))
    if callable(target):
        return target
    raise BufferValidationError(
        f"{argument} must be a callable or a single character, "
        f"got {type(target).__name__}",
        argument=argument,
    )
