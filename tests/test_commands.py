from __future__ import annotations

from typing import List, Tuple

import pytest

from symcase.buffer import TextBuffer
from symcase.casing import CasingStyle
from symcase.commands import (
    STYLE_COMMANDS,
    CommandBus,
    CommandContext,
    command_for,
    snake_case_symbol,
    transform_symbol,
    upper_camel_case_symbol,
)
from symcase.config import CursorPolicy, TransformConfig
from symcase.transform import NoSymbolAtPoint, SymbolTransformer, TransformResult


def make_context(
    text: str, cursor: int = 0, *, config: TransformConfig | None = None
) -> CommandContext:
    return CommandContext(
        buffer=TextBuffer.from_text(text, cursor=cursor),
        transformer=SymbolTransformer(config),
        bus=CommandBus(),
    )


def record_events(context: CommandContext) -> List[Tuple[str, object]]:
    events: List[Tuple[str, object]] = []
    for name in ("symbol.transform", "symbol.error"):
        context.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )
    return events


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (CasingStyle.LOWER_CAMEL, "myVarName = 1"),
        (CasingStyle.UPPER_CAMEL, "MyVarName = 1"),
        (CasingStyle.SNAKE, "my_var_name = 1"),
        (CasingStyle.KEBAB, "my-var-name = 1"),
        (CasingStyle.DOWNCASE, "my_varname = 1"),
        (CasingStyle.CAPITALIZED_WORDS, "My var name = 1"),
        (CasingStyle.TITLEIZED_WORDS, "My Var Name = 1"),
        (CasingStyle.UPCASE, "MY_VARNAME = 1"),
    ],
)
def test_every_style_has_a_command(style: CasingStyle, expected: str) -> None:
    context = make_context("my_varName = 1", cursor=2)

    result = STYLE_COMMANDS[style](context)

    assert result.status == "transformed"
    assert context.buffer.read_range(0, len(expected)) == expected


def test_command_moves_cursor_per_config() -> None:
    config = TransformConfig(cursor_after_transform=CursorPolicy.NEXT_SYMBOL)
    context = make_context("fooBar baz", cursor=3, config=config)

    result = snake_case_symbol(context)

    assert result.cursor == 8
    assert context.buffer.cursor_offset() == 8


def test_command_publishes_transform_event() -> None:
    context = make_context("my_var", cursor=0)
    events = record_events(context)

    upper_camel_case_symbol(context)

    name, payload = events[-1]
    assert name == "symbol.transform"
    assert isinstance(payload, TransformResult)
    assert payload.text == "MyVar"


def test_missing_symbol_is_reported_not_raised() -> None:
    context = make_context("   ", cursor=1)
    events = record_events(context)

    result = snake_case_symbol(context)

    assert result.status == "no_symbol"
    assert result.consumed is True
    assert context.buffer.read_range(0, 3) == "   "
    assert context.buffer.cursor_offset() == 1
    assert events and isinstance(events[-1][1], NoSymbolAtPoint)


def test_transform_symbol_policy_override() -> None:
    context = make_context("fooBar baz", cursor=3)

    result = transform_symbol(context, CasingStyle.KEBAB, CursorPolicy.SYMBOL_START)

    assert result.cursor == 0
    assert context.buffer.cursor_offset() == 0


def test_command_for_accepts_names() -> None:
    assert command_for("snake_case") is snake_case_symbol
    assert command_for(CasingStyle.UPPER_CAMEL) is upper_camel_case_symbol
