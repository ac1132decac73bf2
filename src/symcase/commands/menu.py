"""Actions that drive the case menu from a key binding."""

from __future__ import annotations

from typing import Any

from .base import CommandContext, CommandResult


def require_case_menu(context: CommandContext) -> Any:
    menu = context.extras.get("case_menu")
    if menu is None:
        raise RuntimeError("CommandContext.extras missing 'case_menu'")
    return menu


def open_case_menu(context: CommandContext) -> CommandResult:
    return require_case_menu(context).open()


def cancel_case_menu(context: CommandContext) -> CommandResult:
    del context
    return CommandResult(consumed=True, status="menu_cancel")


__all__ = ["open_case_menu", "cancel_case_menu", "require_case_menu"]
