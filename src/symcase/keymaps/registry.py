"""Keymap registry storing actions and their key bindings."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from symcase.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a binding reuses a key another binding already owns."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and binding metadata.

    Bindings are indexed per mode by key signature. Every change bumps
    ``revision()`` so resolvers know when to rebuild their lookup tables.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, set[str]]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = [
                existing
                for existing in self.detect_conflicts(binding)
                if existing.id != binding.id
            ]
            if conflicts and not replace:
                handle.add_metadata("conflicts", ",".join(c.id for c in conflicts))
                raise KeymapConflictError(binding, conflicts)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in conflicts:
                self._drop(stale)
            if binding.id in self._bindings:
                self._drop(self._bindings[binding.id])

            self._bindings[binding.id] = binding
            self._index_binding(binding)
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._drop(binding)
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding in self._bindings.values():
            if binding.mode == mode:
                yield binding

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        matches = self._mode_index.get(binding.mode, {}).get(
            binding.key_signature, set()
        )
        return [self._bindings[match_id] for match_id in sorted(matches)]

    def _index_binding(self, binding: Binding) -> None:
        by_signature = self._mode_index.setdefault(binding.mode, {})
        by_signature.setdefault(binding.key_signature, set()).add(binding.id)

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        mode_bucket = self._mode_index.get(binding.mode)
        if not mode_bucket:
            return
        signatures = mode_bucket.get(binding.key_signature)
        if signatures is not None:
            signatures.discard(binding.id)
            if not signatures:
                mode_bucket.pop(binding.key_signature, None)
        if not mode_bucket:
            self._mode_index.pop(binding.mode, None)


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
]
