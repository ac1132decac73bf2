"""Symbol boundary rules: runs of alphanumerics plus symbol constituents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from symcase.config import DEFAULT_SYMBOL_CHARS


@dataclass(frozen=True, slots=True)
class SymbolBounds:
    """Half-open ``[start, end)`` range covering one symbol."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid symbol bounds [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def touches(self, offset: int) -> bool:
        return self.start <= offset <= self.end


class SymbolScanner:
    """Locates symbols in plain text.

    A symbol character is anything ``str.isalnum`` accepts plus the
    configured constituents (``_`` and ``-`` by default). The scanner looks
    at the character under the offset first and falls back to the one
    before it, so a cursor parked right after a symbol still finds it.
    """

    def __init__(self, symbol_chars: Iterable[str] = DEFAULT_SYMBOL_CHARS) -> None:
        self.symbol_chars = frozenset(symbol_chars)

    def is_symbol_char(self, char: str) -> bool:
        return char.isalnum() or char in self.symbol_chars

    def bounds_at(self, text: str, offset: int) -> Optional[SymbolBounds]:
        length = len(text)
        if 0 <= offset < length and self.is_symbol_char(text[offset]):
            anchor = offset
        elif 0 < offset <= length and self.is_symbol_char(text[offset - 1]):
            anchor = offset - 1
        else:
            return None

        start = anchor
        while start > 0 and self.is_symbol_char(text[start - 1]):
            start -= 1
        end = anchor + 1
        while end < length and self.is_symbol_char(text[end]):
            end += 1
        return SymbolBounds(start, end)

    def next_symbol_start(self, text: str, from_offset: int) -> Optional[int]:
        length = len(text)
        index = max(from_offset, 0)
        # finish the symbol we are standing in before looking for the next one
        while index < length and self.is_symbol_char(text[index]):
            index += 1
        while index < length and not self.is_symbol_char(text[index]):
            index += 1
        if index >= length:
            return None
        return index


__all__ = ["SymbolBounds", "SymbolScanner"]
