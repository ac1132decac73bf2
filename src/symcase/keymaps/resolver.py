"""Single-key resolution against the registry, cached per mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from symcase.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Maps a key token to its binding, rebuilding per-mode tables on registry changes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, Dict[str, str]]] = {}

    def resolve(self, mode: str, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "token": token},
        ) as handle:
            binding_id = self._ensure_table(mode).get(token)
            if binding_id is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")

            binding = self._registry.get_binding(binding_id)
            action = self._registry.get_action(binding.action_id)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(
                status="match", match=ResolutionMatch(binding=binding, action=action)
            )

    def _ensure_table(self, mode: str) -> Dict[str, str]:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        table = {
            binding.key_signature: binding.id
            for binding in self._registry.iter_bindings(mode)
        }
        self._cache[mode] = (revision, table)
        return table


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
