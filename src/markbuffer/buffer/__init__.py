"""Buffer engine: character document, cursor/marker state and paste register."""

from .buffer import Buffer, BufferView, Transaction
from .document import TextDocument
from .region import Region, literal_region, normalized_region
from .registers import PasteRegister
from .state import BufferState, clamp
from .validation import (
    BufferValidationError,
    Predicate,
    char_equals,
    ensure_char,
    ensure_offset,
    ensure_predicate,
    ensure_text,
)

__all__ = [
    "Buffer",
    "BufferView",
    "Transaction",
    "TextDocument",
    "BufferState",
    "PasteRegister",
    "Region",
    "normalized_region",
    "literal_region",
    "clamp",
    "BufferValidationError",
    "Predicate",
    "char_equals",
    "ensure_char",
    "ensure_offset",
    "ensure_predicate",
    "ensure_text",
]
