"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .sync import BufferValidationError


def ensure_offset(text: str, offset: int) -> int:
    if offset < 0 or offset > len(text):
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def ensure_range(text: str, start: int, end: int) -> tuple[int, int]:
    ensure_offset(text, start)
    ensure_offset(text, end)
    if start > end:
        raise BufferValidationError("Range start after end", offset=start)
    return start, end
