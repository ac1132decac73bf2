"""One standalone command per casing style."""

from __future__ import annotations

from typing import Callable, Dict, Mapping

from symcase.casing import CasingStyle
from symcase.config import CursorPolicy
from symcase.runtime import telemetry
from symcase.transform import NoSymbolAtPoint

from .base import CommandContext, CommandResult

StyleCommand = Callable[[CommandContext], CommandResult]


def transform_symbol(
    context: CommandContext,
    style: CasingStyle,
    policy: CursorPolicy | str | None = None,
) -> CommandResult:
    """Rewrite the symbol under the buffer cursor and move the cursor."""

    try:
        result = context.transformer.transform_at_cursor(context.buffer, style, policy)
    except NoSymbolAtPoint as exc:
        telemetry.record_event(
            "symbol.no_symbol",
            level="warning",
            data={"offset": exc.offset, "style": style.value},
        )
        context.bus.emit("symbol.error", exc)
        return CommandResult(consumed=True, status="no_symbol", message=str(exc))

    context.bus.emit("symbol.transform", result)
    return CommandResult(
        consumed=True,
        status="transformed",
        message=result.text,
        cursor=result.cursor_offset,
    )


def lower_camel_case_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.LOWER_CAMEL)


def upper_camel_case_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.UPPER_CAMEL)


def snake_case_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.SNAKE)


def kebab_case_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.KEBAB)


def downcase_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.DOWNCASE)


def capitalize_words_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.CAPITALIZED_WORDS)


def titleize_words_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.TITLEIZED_WORDS)


def upcase_symbol(context: CommandContext) -> CommandResult:
    return transform_symbol(context, CasingStyle.UPCASE)


STYLE_COMMANDS: Mapping[CasingStyle, StyleCommand] = {
    CasingStyle.LOWER_CAMEL: lower_camel_case_symbol,
    CasingStyle.UPPER_CAMEL: upper_camel_case_symbol,
    CasingStyle.SNAKE: snake_case_symbol,
    CasingStyle.KEBAB: kebab_case_symbol,
    CasingStyle.DOWNCASE: downcase_symbol,
    CasingStyle.CAPITALIZED_WORDS: capitalize_words_symbol,
    CasingStyle.TITLEIZED_WORDS: titleize_words_symbol,
    CasingStyle.UPCASE: upcase_symbol,
}

COMMAND_IDS: Dict[CasingStyle, str] = {
    style: f"symbol.{style.value}" for style in CasingStyle
}


def command_for(style: CasingStyle | str) -> StyleCommand:
    return STYLE_COMMANDS[CasingStyle.parse(style)]


__all__ = [
    "StyleCommand",
    "STYLE_COMMANDS",
    "COMMAND_IDS",
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
]
