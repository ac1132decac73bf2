"""In-memory text buffer implementing the ``SymbolBuffer`` protocol."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from symcase.config import DEFAULT_SYMBOL_CHARS
from symcase.runtime import telemetry

from .symbols import SymbolBounds, SymbolScanner
from .sync import BufferMirror
from .validation import ensure_offset, ensure_range

Position = Tuple[int, int]  # (row, column)


class TextBuffer:
    """Flat string storage with a single cursor offset."""

    def __init__(
        self,
        text: str = "",
        *,
        cursor: int = 0,
        name: str = "default",
        symbol_chars: Iterable[str] = DEFAULT_SYMBOL_CHARS,
    ) -> None:
        self.name = name
        self.version = 0
        self.scanner = SymbolScanner(symbol_chars)
        self._text = text
        self._cursor = ensure_offset(text, cursor)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        cursor: int = 0,
        name: str = "default",
        symbol_chars: Iterable[str] = DEFAULT_SYMBOL_CHARS,
    ) -> "TextBuffer":
        return cls(text, cursor=cursor, name=name, symbol_chars=symbol_chars)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self._text,
            cursor=self._cursor,
            attributes=dict(attributes or {}),
        )

    def cursor_offset(self) -> int:
        return self._cursor

    def set_cursor_offset(self, offset: int) -> None:
        self._cursor = ensure_offset(self._text, offset)

    def move_cursor(self, delta: int) -> int:
        """Shift the cursor by ``delta``, clamped to the buffer."""

        self._cursor = min(max(self._cursor + delta, 0), len(self._text))
        return self._cursor

    def cursor_position(self) -> Position:
        return _position_for_offset(self._text, self._cursor)

    def read_range(self, start: int, end: int) -> str:
        start, end = ensure_range(self._text, start, end)
        return self._text[start:end]

    def replace_range(
        self, start: int, end: int, text: str, *, label: str = "replace_range"
    ) -> None:
        start, end = ensure_range(self._text, start, end)
        with telemetry.span(
            f"buffer::{label}",
            component="buffer",
            metadata={"buffer": self.name, "start": start, "end": end},
        ):
            self._text = self._text[:start] + text + self._text[end:]
            self._cursor = start + len(text)
            self.version += 1

    def insert_text(self, text: str) -> None:
        self.replace_range(self._cursor, self._cursor, text, label="insert_text")

    def delete_backward(self) -> bool:
        """Remove the character before the cursor; ``False`` at offset 0."""

        if self._cursor == 0:
            return False
        self.replace_range(self._cursor - 1, self._cursor, "", label="delete_backward")
        return True

    def find_symbol_bounds(self, offset: int) -> Optional[SymbolBounds]:
        return self.scanner.bounds_at(self._text, ensure_offset(self._text, offset))

    def find_next_symbol_start(self, from_offset: int) -> Optional[int]:
        return self.scanner.next_symbol_start(
            self._text, ensure_offset(self._text, from_offset)
        )


def _position_for_offset(text: str, offset: int) -> Position:
    row = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return (row, offset - line_start)


__all__ = ["TextBuffer", "Position"]
