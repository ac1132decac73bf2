"""Rewrite the symbol at the cursor and work out where the cursor goes next."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from symcase.buffer import SymbolBounds, SymbolBuffer
from symcase.casing import CasingStyle, casify
from symcase.config import CursorPolicy, TransformConfig
from symcase.runtime import telemetry

Casify = Callable[[str, CasingStyle], str]
BoundsLike = Union[SymbolBounds, Tuple[int, int]]


class NoSymbolAtPoint(LookupError):
    """Raised when neither the cursor character nor its predecessor is a symbol."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"No symbol at offset {offset}")
        self.offset = offset


@dataclass(frozen=True, slots=True)
class TransformResult:
    text: str
    cursor_offset: int
    bounds: SymbolBounds
    original: str
    style: CasingStyle
    policy: CursorPolicy

    @property
    def replaced_bounds(self) -> SymbolBounds:
        """Bounds of the rewritten symbol in the updated buffer."""
        return SymbolBounds(self.bounds.start, self.bounds.start + len(self.text))

    @property
    def changed(self) -> bool:
        return self.text != self.original


class SymbolTransformer:
    """Applies one casing style to the symbol around a cursor offset.

    The transformer edits only the symbol's own range. The buffer cursor
    keeps its place relative to the surrounding text: offsets after the
    symbol shift by the change in length, offsets inside it are clamped to
    the rewritten symbol. ``transform_at_cursor`` is the convenience that
    also moves the cursor to the computed offset, which is what editor
    commands want.
    """

    def __init__(
        self,
        config: Optional[TransformConfig] = None,
        *,
        casify: Casify = casify,
        logger_name: str | None = None,
    ) -> None:
        self.config = config or TransformConfig()
        self._casify = casify
        self._logger_name = logger_name

    def transform(
        self,
        buffer: SymbolBuffer,
        cursor_offset: int,
        style: CasingStyle,
        policy: "CursorPolicy | str | None" = None,
    ) -> TransformResult:
        resolved_policy = (
            self.config.cursor_after_transform
            if policy is None
            else CursorPolicy.parse(policy)
        )
        with telemetry.span(
            "transform::symbol",
            logger_name=self._logger_name,
            component="transform",
            metadata={
                "offset": cursor_offset,
                "style": style.value,
                "policy": resolved_policy.value,
            },
        ) as handle:
            bounds = _coerce_bounds(buffer.find_symbol_bounds(cursor_offset))
            if bounds is None or bounds.start == bounds.end:
                handle.add_metadata("status", "no_symbol")
                raise NoSymbolAtPoint(cursor_offset)

            original = buffer.read_range(bounds.start, bounds.end)
            transformed = self._casify(original, style)
            anchor = buffer.cursor_offset()
            buffer.replace_range(bounds.start, bounds.end, transformed)
            buffer.set_cursor_offset(_shift_offset(anchor, bounds, len(transformed)))
            new_end = bounds.start + len(transformed)

            new_offset = self._place_cursor(buffer, bounds, new_end, resolved_policy)
            handle.add_metadata("status", "ok")
            handle.add_metadata("cursor", new_offset)

        telemetry.record_event(
            "symbol.transform",
            level="debug",
            data={
                "style": style.value,
                "original": original,
                "text": transformed,
                "cursor": new_offset,
            },
            logger_name=self._logger_name,
        )
        return TransformResult(
            text=transformed,
            cursor_offset=new_offset,
            bounds=bounds,
            original=original,
            style=style,
            policy=resolved_policy,
        )

    def transform_at_cursor(
        self,
        buffer: SymbolBuffer,
        style: CasingStyle,
        policy: "CursorPolicy | str | None" = None,
    ) -> TransformResult:
        result = self.transform(buffer, buffer.cursor_offset(), style, policy)
        buffer.set_cursor_offset(result.cursor_offset)
        return result

    @staticmethod
    def _place_cursor(
        buffer: SymbolBuffer,
        bounds: SymbolBounds,
        new_end: int,
        policy: CursorPolicy,
    ) -> int:
        if policy is CursorPolicy.SYMBOL_START:
            return bounds.start
        if policy is CursorPolicy.SYMBOL_END:
            return new_end
        next_start = buffer.find_next_symbol_start(new_end)
        if next_start is not None:
            return next_start
        # nothing further: clamp to the end of the buffer
        return len(buffer)


def _coerce_bounds(bounds: Optional[BoundsLike]) -> Optional[SymbolBounds]:
    if bounds is None or isinstance(bounds, SymbolBounds):
        return bounds
    start, end = bounds
    return SymbolBounds(start, end)


def _shift_offset(offset: int, bounds: SymbolBounds, new_length: int) -> int:
    """Where ``offset`` lands once ``bounds`` holds ``new_length`` characters."""

    if offset >= bounds.end:
        return offset + new_length - len(bounds)
    if offset > bounds.start:
        return min(offset, bounds.start + new_length)
    return offset
