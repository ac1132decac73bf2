"""User-facing commands: one per casing style."""

from .base import CommandBus, CommandContext, CommandResult, KeyInput, key_to_token
from .case import (
    COMMAND_IDS,
    STYLE_COMMANDS,
    StyleCommand,
    capitalize_words_symbol,
    command_for,
    downcase_symbol,
    kebab_case_symbol,
    lower_camel_case_symbol,
    snake_case_symbol,
    titleize_words_symbol,
    transform_symbol,
    upcase_symbol,
    upper_camel_case_symbol,
)
from .menu import cancel_case_menu, open_case_menu, require_case_menu

__all__ = [
    "CommandBus",
    "CommandContext",
    "CommandResult",
    "KeyInput",
    "key_to_token",
    "COMMAND_IDS",
    "STYLE_COMMANDS",
    "StyleCommand",
    "command_for",
    "transform_symbol",
    "lower_camel_case_symbol",
    "upper_camel_case_symbol",
    "snake_case_symbol",
    "kebab_case_symbol",
    "downcase_symbol",
    "capitalize_words_symbol",
    "titleize_words_symbol",
    "upcase_symbol",
    "open_case_menu",
    "cancel_case_menu",
    "require_case_menu",
]
