"""Capability boundary between the transformer and a host's text buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Optional,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:  # pragma: no cover
    from .symbols import SymbolBounds


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    cursor: int
    attributes: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class SymbolBuffer(Protocol):
    """Operations the transformer needs from whatever owns the text.

    Offsets are zero-based character indexes into the flat buffer text.
    Editors wrap their own widgets in this protocol; ``TextBuffer`` is the
    in-memory implementation.
    """

    def __len__(self) -> int:
        ...

    def read_range(self, start: int, end: int) -> str:
        ...

    def replace_range(self, start: int, end: int, text: str) -> None:
        """Swap ``[start, end)`` for ``text``; the cursor may move freely."""
        ...

    def cursor_offset(self) -> int:
        ...

    def set_cursor_offset(self, offset: int) -> None:
        ...

    def find_symbol_bounds(
        self, offset: int
    ) -> Optional[Union["SymbolBounds", Tuple[int, int]]]:
        """Return the symbol at or just before ``offset``, if any.

        Either a ``SymbolBounds`` or a plain half-open ``(start, end)`` tuple.
        """
        ...

    def find_next_symbol_start(self, from_offset: int) -> Optional[int]:
        """Return where the next symbol after ``from_offset`` begins."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-range offset."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset
