from __future__ import annotations

from symcase.keymaps import ActionRef, Binding, KeyStroke, KeymapRegistry, KeymapResolver


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "case_menu",
    key: str = "_",
    action_id: str = "symbol.snake",
) -> Binding:
    return Binding(
        id=binding_id, mode=mode, stroke=KeyStroke.parse(key), action_id=action_id
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in {binding.action_id for binding in bindings}:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_token() -> None:
    binding = make_binding("case_menu.snake")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve("case_menu", "_")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "symbol.snake"


def test_resolver_keys_are_case_sensitive() -> None:
    registry = build_registry(
        [
            make_binding("case_menu.lower", key="c", action_id="symbol.lower"),
            make_binding("case_menu.upper", key="C", action_id="symbol.upper"),
        ]
    )
    resolver = KeymapResolver(registry)

    lower = resolver.resolve("case_menu", "c")
    upper = resolver.resolve("case_menu", "C")

    assert lower.match is not None and lower.match.action.id == "symbol.lower"
    assert upper.match is not None and upper.match.action.id == "symbol.upper"


def test_resolver_reports_miss_for_other_mode() -> None:
    resolver = KeymapResolver(build_registry([make_binding("case_menu.snake")]))

    assert resolver.resolve("editor", "_").status == "miss"
    assert resolver.resolve("case_menu", "x").status == "miss"


def test_resolver_matches_modified_stroke() -> None:
    binding = make_binding(
        "editor.open_menu", mode="editor", key="ctrl+t", action_id="menu.open"
    )
    resolver = KeymapResolver(build_registry([binding]))

    assert resolver.resolve("editor", "ctrl+t").status == "match"
    assert resolver.resolve("editor", "t").status == "miss"


def test_resolver_picks_up_registry_changes() -> None:
    registry = build_registry([make_binding("case_menu.snake")])
    resolver = KeymapResolver(registry)
    assert resolver.resolve("case_menu", "-").status == "miss"

    registry.register_action(make_action("symbol.kebab"))
    registry.register_binding(
        make_binding("case_menu.kebab", key="-", action_id="symbol.kebab")
    )

    assert resolver.resolve("case_menu", "-").status == "match"

    registry.unregister_binding("case_menu.kebab")

    assert resolver.resolve("case_menu", "-").status == "miss"