"""In-memory text buffer with cursor/marker regions, paste register and search."""

from .buffer import Buffer, BufferValidationError, PasteRegister, char_equals

__all__ = [
    "Buffer",
    "BufferValidationError",
    "PasteRegister",
    "char_equals",
    "actions",
    "buffer",
    "runtime",
]

__version__ = "0.1.0"
