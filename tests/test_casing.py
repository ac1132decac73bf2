from __future__ import annotations

import pytest

from symcase.casing import CasingStyle, casify, split_words, transformer

SAMPLES = ("fooBar", "my_var_name", "some-symbol", "HTTPServer", "Already Titled")


def test_style_spot_checks() -> None:
    assert casify("my_var_name", CasingStyle.UPPER_CAMEL) == "MyVarName"
    assert casify("MyVarName", CasingStyle.SNAKE) == "my_var_name"
    assert casify("my-var", CasingStyle.UPCASE) == "MY-VAR"


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (CasingStyle.LOWER_CAMEL, "fooBarBaz"),
        (CasingStyle.UPPER_CAMEL, "FooBarBaz"),
        (CasingStyle.SNAKE, "foo_bar_baz"),
        (CasingStyle.KEBAB, "foo-bar-baz"),
        (CasingStyle.DOWNCASE, "foo_barbaz"),
        (CasingStyle.CAPITALIZED_WORDS, "Foo bar baz"),
        (CasingStyle.TITLEIZED_WORDS, "Foo Bar Baz"),
        (CasingStyle.UPCASE, "FOO_BARBAZ"),
    ],
)
def test_every_style_from_mixed_input(style: CasingStyle, expected: str) -> None:
    assert casify("foo_barBaz", style) == expected


def test_downcase_and_upcase_keep_separators() -> None:
    assert casify("My-Var_Name", CasingStyle.DOWNCASE) == "my-var_name"
    assert casify("my-var_name", CasingStyle.UPCASE) == "MY-VAR_NAME"


def test_acronyms_split_into_words() -> None:
    assert casify("HTTPServer", CasingStyle.SNAKE) == "http_server"
    assert casify("HTTPServer", CasingStyle.LOWER_CAMEL) == "httpServer"


@pytest.mark.parametrize("style", list(CasingStyle))
def test_casify_is_deterministic(style: CasingStyle) -> None:
    for sample in SAMPLES:
        assert casify(sample, style) == casify(sample, style)


@pytest.mark.parametrize("style", list(CasingStyle))
def test_reapplying_a_style_is_stable(style: CasingStyle) -> None:
    for sample in SAMPLES:
        once = casify(sample, style)
        assert casify(once, style) == once


def test_empty_input_maps_to_empty_output() -> None:
    for style in CasingStyle:
        assert casify("", style) == ""


def test_split_words_handles_every_separator() -> None:
    assert split_words("fooBar_baz-qux Quux") == ["foo", "bar", "baz", "qux", "quux"]


def test_transformer_lookup_matches_casify() -> None:
    snake = transformer(CasingStyle.SNAKE)

    assert snake("fooBar") == casify("fooBar", CasingStyle.SNAKE)
    assert CasingStyle.KEBAB.transformer("fooBar") == "foo-bar"


def test_menu_key_labels() -> None:
    labels = {style: style.key for style in CasingStyle}

    assert labels == {
        CasingStyle.LOWER_CAMEL: "c",
        CasingStyle.UPPER_CAMEL: "C",
        CasingStyle.SNAKE: "_",
        CasingStyle.KEBAB: "-",
        CasingStyle.DOWNCASE: "d",
        CasingStyle.CAPITALIZED_WORDS: "u",
        CasingStyle.TITLEIZED_WORDS: "t",
        CasingStyle.UPCASE: "U",
    }
    assert CasingStyle.from_key("U") is CasingStyle.UPCASE
    with pytest.raises(ValueError):
        CasingStyle.from_key("x")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("snake", CasingStyle.SNAKE),
        ("snake_case", CasingStyle.SNAKE),
        ("kebab-case", CasingStyle.KEBAB),
        ("lowerCamel", CasingStyle.LOWER_CAMEL),
        ("PascalCase", CasingStyle.UPPER_CAMEL),
        ("titleized_words", CasingStyle.TITLEIZED_WORDS),
        ("UPCASE", CasingStyle.UPCASE),
        ("Capitalized Words", CasingStyle.CAPITALIZED_WORDS),
        ("Titleized  Words", CasingStyle.TITLEIZED_WORDS),
        (" upper camel ", CasingStyle.UPPER_CAMEL),
    ],
)
def test_parse_style_names(raw: str, expected: CasingStyle) -> None:
    assert CasingStyle.parse(raw) is expected


def test_parse_rejects_unknown_style() -> None:
    with pytest.raises(ValueError, match="Unknown casing style"):
        CasingStyle.parse("screaming")
