"""Shared types every user-facing command works with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from symcase.buffer import SymbolBuffer
from symcase.transform import SymbolTransformer


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed over by a host."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class CommandResult:
    """Outcome of running a command."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    cursor: Optional[int] = None


class CommandBus:
    """Minimal event bus so hosts can observe what commands did."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class CommandContext:
    """Services a command can reach: the buffer, the transformer and the bus."""

    buffer: SymbolBuffer
    transformer: SymbolTransformer = field(default_factory=SymbolTransformer)
    bus: CommandBus = field(default_factory=CommandBus)
    extras: Dict[str, object] = field(default_factory=dict)


def key_to_token(key: KeyInput) -> str:
    modifiers = sorted({m.strip().lower() for m in key.modifiers if m.strip()})
    if modifiers:
        return f"{'+'.join(modifiers)}+{key.key}"
    return key.key


__all__ = [
    "KeyInput",
    "CommandResult",
    "CommandBus",
    "CommandContext",
    "key_to_token",
]
