"""Built-in actions and the single-key bindings of the case menu."""

from __future__ import annotations

from typing import Iterable, Sequence

from symcase.casing import CasingStyle
from symcase.commands import case as case_commands
from symcase.commands import menu as menu_commands

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

MENU_MODE = "case_menu"
EDITOR_MODE = "editor"
MENU_OPEN_KEY = "ctrl+t"

STYLE_ACTIONS: tuple[ActionRef, ...] = tuple(
    ActionRef(
        id=case_commands.COMMAND_IDS[style],
        handler=case_commands.STYLE_COMMANDS[style],
        description=f"Symbol to {style.description}",
        metadata={"style": style},
    )
    for style in CasingStyle
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = STYLE_ACTIONS + (
    ActionRef(
        id="menu.open",
        handler=menu_commands.open_case_menu,
        description="Open the case menu",
    ),
    ActionRef(
        id="menu.cancel",
        handler=menu_commands.cancel_case_menu,
        description="Close the case menu",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"{MENU_MODE}.{style.value}",
        mode=MENU_MODE,
        stroke=KeyStroke(style.key),
        action_id=case_commands.COMMAND_IDS[style],
        description=style.description,
    )
    for style in CasingStyle
) + (
    Binding(
        id=f"{MENU_MODE}.cancel",
        mode=MENU_MODE,
        stroke=KeyStroke("ESC"),
        action_id="menu.cancel",
        description="Cancel",
    ),
    Binding(
        id=f"{EDITOR_MODE}.open_menu",
        mode=EDITOR_MODE,
        stroke=KeyStroke.parse(MENU_OPEN_KEY),
        action_id="menu.open",
        description="Symbol case menu",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the style actions plus the menu and editor bindings."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "STYLE_ACTIONS",
    "MENU_MODE",
    "EDITOR_MODE",
    "MENU_OPEN_KEY",
]
