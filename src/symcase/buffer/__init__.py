"""Buffer abstractions and symbol boundary rules."""

from .buffer import Position, TextBuffer
from .symbols import SymbolBounds, SymbolScanner
from .sync import BufferMirror, BufferValidationError, SymbolBuffer
from .validation import ensure_offset, ensure_range

__all__ = [
    "TextBuffer",
    "Position",
    "SymbolBounds",
    "SymbolScanner",
    "SymbolBuffer",
    "BufferMirror",
    "BufferValidationError",
    "ensure_offset",
    "ensure_range",
]
