"""Dataclasses describing menu key bindings and the actions they run."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press. ``key`` is case-sensitive: ``c`` and ``C`` differ."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return f"{'+'.join(self.modifiers)}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+t"`` style tokens; a lone ``+`` or ``-`` is a plain key."""

        if len(token) > 1 and "+" in token[:-1]:
            head, _, key = token.rpartition("+")
            return cls(key, tuple(head.split("+")))
        return cls(token)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one keystroke in a mode with an action."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "ActionRef", "Binding"]
