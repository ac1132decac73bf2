from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from symcase.buffer import TextBuffer
from symcase.casing import CasingStyle
from symcase.commands import CommandContext, KeyInput, open_case_menu
from symcase.keymaps import MENU_MODE, ActionRef, Binding, KeyStroke, KeymapRegistry
from symcase.menu import CaseMenu


def make_menu(text: str = "fooBar baz", cursor: int = 3) -> CaseMenu:
    context = CommandContext(buffer=TextBuffer.from_text(text, cursor=cursor))
    return CaseMenu(context)


def record(menu: CaseMenu) -> List[Tuple[str, Any]]:
    events: List[Tuple[str, Any]] = []
    for name in ("menu.open", "menu.close", "symbol.transform"):
        menu.context.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )
    return events


def test_open_lists_all_eight_styles_in_order() -> None:
    menu = make_menu()
    events = record(menu)

    result = menu.open()

    assert result.status == "menu_open"
    assert menu.is_open is True
    name, entries = events[0]
    assert name == "menu.open"
    assert [entry.style for entry in entries] == list(CasingStyle)
    assert [entry.key for entry in entries] == ["c", "C", "_", "-", "d", "u", "t", "U"]
    assert "_  snake_case" in result.message


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("c", "fooBar baz"),
        ("C", "FooBar baz"),
        ("_", "foo_bar baz"),
        ("-", "foo-bar baz"),
        ("d", "foobar baz"),
        ("u", "Foo bar baz"),
        ("t", "Foo Bar baz"),
        ("U", "FOOBAR baz"),
    ],
)
def test_single_key_selects_style(key: str, expected: str) -> None:
    menu = make_menu()
    menu.open()

    result = menu.handle_key(KeyInput(key=key, text=key))

    assert result.status == "transformed"
    assert menu.context.buffer.read_range(0, len(expected)) == expected
    assert menu.is_open is False


def test_escape_cancels_without_editing() -> None:
    menu = make_menu()
    events = record(menu)
    menu.open()

    result = menu.handle_key(KeyInput(key="ESC"))

    assert result.status == "menu_cancel"
    assert menu.is_open is False
    assert ("menu.close", "cancel") in events
    assert menu.context.buffer.read_range(0, 6) == "fooBar"


def test_unknown_key_closes_menu() -> None:
    menu = make_menu()
    events = record(menu)
    menu.open()

    result = menu.handle_key(KeyInput(key="z", text="z"))

    assert result.status == "menu_miss"
    assert ("menu.close", "miss") in events
    assert menu.context.buffer.read_range(0, 6) == "fooBar"


def test_closed_menu_ignores_keys() -> None:
    menu = make_menu()

    result = menu.handle_key(KeyInput(key="_"))

    assert result.consumed is False
    assert menu.context.buffer.read_range(0, 6) == "fooBar"


def test_menu_reports_missing_symbol() -> None:
    menu = make_menu("   ", cursor=1)
    menu.open()

    result = menu.handle_key(KeyInput(key="U"))

    assert result.status == "no_symbol"
    assert menu.context.buffer.read_range(0, 3) == "   "


def test_select_opens_and_picks() -> None:
    menu = make_menu()

    result = menu.select(CasingStyle.KEBAB)

    assert result.status == "transformed"
    assert menu.context.buffer.read_range(0, 7) == "foo-bar"


def test_open_action_finds_menu_through_context() -> None:
    menu = make_menu()

    result = open_case_menu(menu.context)

    assert result.status == "menu_open"
    assert menu.is_open is True


def test_custom_registry_entries_are_listed() -> None:
    registry = KeymapRegistry()
    registry.register_action(
        ActionRef(
            id="symbol.snake",
            handler=lambda context: None,
            metadata={"style": CasingStyle.SNAKE},
        )
    )
    registry.register_binding(
        Binding(
            id="menu.snake",
            mode=MENU_MODE,
            stroke=KeyStroke("s"),
            action_id="symbol.snake",
            description="snake",
        )
    )
    context = CommandContext(buffer=TextBuffer.from_text("x"))
    menu = CaseMenu(context, registry=registry)

    assert [(entry.key, entry.style) for entry in menu.entries()] == [
        ("s", CasingStyle.SNAKE)
    ]
