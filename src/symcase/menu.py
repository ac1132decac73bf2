"""Aggregate case menu: pick one of the eight styles with a single key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from symcase.casing import CasingStyle
from symcase.commands import CommandContext, CommandResult, KeyInput, key_to_token
from symcase.keymaps import (
    MENU_MODE,
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
)
from symcase.runtime import telemetry

ESCAPE_KEYS = frozenset({"ESC", "<Esc>", "escape"})


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    description: str
    style: Optional[CasingStyle]
    action_id: str

    @property
    def label(self) -> str:
        return f"{self.key}  {self.description}"


class CaseMenu:
    """Presents the style bindings of ``case_menu`` and runs the chosen one.

    ``open()`` publishes the entries on the bus (``menu.open``); the next
    ``handle_key`` call always closes the menu again, whether the key
    selected a style, cancelled, or matched nothing.
    """

    def __init__(
        self,
        context: CommandContext,
        *,
        registry: KeymapRegistry | None = None,
        resolver: KeymapResolver | None = None,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("symcase.menu")
        if registry is None:
            registry = KeymapRegistry(logger_name="symcase.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self.resolver = resolver or KeymapResolver(
            registry, logger_name="symcase.keymaps"
        )
        self.is_open = False
        self.context.extras.setdefault("case_menu", self)

    def entries(self) -> tuple[MenuEntry, ...]:
        entries = []
        for binding in self.registry.iter_bindings(MENU_MODE):
            action = self.registry.get_action(binding.action_id)
            style = action.metadata.get("style")
            entries.append(
                MenuEntry(
                    key=binding.key_signature,
                    description=binding.description or action.description,
                    style=style if isinstance(style, CasingStyle) else None,
                    action_id=action.id,
                )
            )
        order = list(CasingStyle)
        entries.sort(
            key=lambda entry: order.index(entry.style)
            if entry.style is not None
            else len(order)
        )
        return tuple(entries)

    def style_entries(self) -> tuple[MenuEntry, ...]:
        return tuple(entry for entry in self.entries() if entry.style is not None)

    def describe(self) -> str:
        return "   ".join(entry.label for entry in self.style_entries())

    def open(self) -> CommandResult:
        self.is_open = True
        self.context.bus.emit("menu.open", self.style_entries())
        telemetry.record_event("menu.open", level="debug")
        return CommandResult(consumed=True, status="menu_open", message=self.describe())

    def close(self, reason: str) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self.context.bus.emit("menu.close", reason)

    def handle_key(self, key: KeyInput) -> CommandResult:
        if not self.is_open:
            return CommandResult(consumed=False, status="menu_closed")

        token = key_to_token(key)
        if token in ESCAPE_KEYS:
            token = "ESC"
        result = self.resolver.resolve(MENU_MODE, token)
        if result.status == "match" and result.match:
            self.close("cancel" if result.match.action.id == "menu.cancel" else "select")
            return self._execute_match(result.match)

        self.logger.debug(f"no case menu binding for {token!r}")
        self.close("miss")
        return CommandResult(consumed=True, status="menu_miss", message=token)

    def select(self, style: CasingStyle | str) -> CommandResult:
        """Open-and-pick in one step, as if the style's key had been pressed."""

        self.open()
        return self.handle_key(KeyInput(key=CasingStyle.parse(style).key))

    def _execute_match(self, match: ResolutionMatch) -> CommandResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context)

        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(consumed=True)


__all__ = ["CaseMenu", "MenuEntry", "ESCAPE_KEYS"]
