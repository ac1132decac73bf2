"""Cursor placement preference and symbol character configuration."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "SYMCASE_"
DEFAULT_SYMBOL_CHARS = "_-"


class CursorPolicy(str, enum.Enum):
    """Where the cursor lands after a symbol has been rewritten."""

    SYMBOL_START = "symbol-start"
    SYMBOL_END = "symbol-end"
    NEXT_SYMBOL = "next-symbol"

    @classmethod
    def parse(cls, value: "str | CursorPolicy") -> "CursorPolicy":
        if isinstance(value, CursorPolicy):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Unknown cursor policy '{value}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True, slots=True)
class TransformConfig:
    """Process-wide settings handed explicitly to the transformer."""

    cursor_after_transform: CursorPolicy = CursorPolicy.SYMBOL_END
    symbol_chars: str = DEFAULT_SYMBOL_CHARS

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "cursor_after_transform",
            CursorPolicy.parse(self.cursor_after_transform),
        )
        if any(char.isspace() for char in self.symbol_chars):
            raise ValueError("symbol_chars cannot contain whitespace")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransformConfig":
        env = os.environ if environ is None else environ
        policy = env.get(f"{ENV_PREFIX}CURSOR_AFTER_TRANSFORM")
        symbol_chars = env.get(f"{ENV_PREFIX}SYMBOL_CHARS")
        return cls(
            cursor_after_transform=CursorPolicy.parse(policy)
            if policy
            else CursorPolicy.SYMBOL_END,
            symbol_chars=DEFAULT_SYMBOL_CHARS if symbol_chars is None else symbol_chars,
        )

    def with_policy(self, policy: "str | CursorPolicy") -> "TransformConfig":
        return TransformConfig(
            cursor_after_transform=CursorPolicy.parse(policy),
            symbol_chars=self.symbol_chars,
        )


__all__ = ["CursorPolicy", "TransformConfig", "DEFAULT_SYMBOL_CHARS"]
