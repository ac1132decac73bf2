from __future__ import annotations

import enum
import functools
import re
from types import MappingProxyType
from typing import Callable, Mapping

import inflection

__all__ = (
    "CasingStyle",
    "CaseTransformerT",
    "casify",
    "split_words",
    "transformer",
)


class CasingStyle(str, enum.Enum):
    """The closed set of conventions a symbol can be rewritten into."""

    LOWER_CAMEL = "lower-camel"
    UPPER_CAMEL = "upper-camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    DOWNCASE = "downcase"
    CAPITALIZED_WORDS = "capitalized-words"
    TITLEIZED_WORDS = "titleized-words"
    UPCASE = "upcase"

    @property
    def key(self) -> str:
        """Single-key label shown in the case menu."""
        return _KEYS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def transformer(self) -> CaseTransformerT:
        return transformer(self)

    @classmethod
    def from_key(cls, key: str) -> "CasingStyle":
        for style, label in _KEYS.items():
            if label == key:
                return style
        raise ValueError(f"No casing style bound to key '{key}'")

    @classmethod
    def parse(cls, value: "str | CasingStyle") -> "CasingStyle":
        if isinstance(value, CasingStyle):
            return value
        normalized = "-".join(split_words(str(value)))
        normalized = normalized.removesuffix("-case")
        aliases = {"pascal": cls.UPPER_CAMEL, "camel": cls.LOWER_CAMEL}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(style.value for style in cls)
            raise ValueError(
                f"Unknown casing style '{value}' (expected one of: {choices})"
            ) from None


CaseTransformerT = Callable[[str], str]
"""A callable rewriting a symbol into one casing style."""

_WORD_SEPARATORS = re.compile(r"[_\s]+")


def transformer(style: CasingStyle) -> CaseTransformerT:
    return _TRANSFORMERS[style]


def casify(text: str, style: CasingStyle) -> str:
    """Rewrite ``text`` into ``style``. Pure and total; ``""`` maps to ``""``."""
    if not text:
        return text
    return _TRANSFORMERS[style](text)


def split_words(text: str) -> list[str]:
    """Break a symbol into lowercase words on case changes, ``_``, ``-`` and spaces."""
    return [word for word in _WORD_SEPARATORS.split(inflection.underscore(text)) if word]


def _camelize(text: str, *, uppercase_first_letter: bool) -> str:
    words = split_words(text)
    if not words:
        return text
    return inflection.camelize(
        "_".join(words), uppercase_first_letter=uppercase_first_letter
    )


def _snake(text: str) -> str:
    return "_".join(split_words(text)) or text


def _kebab(text: str) -> str:
    return inflection.dasherize(_snake(text))


def _capitalized_words(text: str) -> str:
    words = split_words(text)
    return " ".join(words).capitalize() if words else text


def _titleized_words(text: str) -> str:
    words = split_words(text)
    return " ".join(word.capitalize() for word in words) if words else text


_KEYS: Mapping[CasingStyle, str] = MappingProxyType(
    {
        CasingStyle.LOWER_CAMEL: "c",
        CasingStyle.UPPER_CAMEL: "C",
        CasingStyle.SNAKE: "_",
        CasingStyle.KEBAB: "-",
        CasingStyle.DOWNCASE: "d",
        CasingStyle.CAPITALIZED_WORDS: "u",
        CasingStyle.TITLEIZED_WORDS: "t",
        CasingStyle.UPCASE: "U",
    }
)

_DESCRIPTIONS: Mapping[CasingStyle, str] = MappingProxyType(
    {
        CasingStyle.LOWER_CAMEL: "lowerCamelCase",
        CasingStyle.UPPER_CAMEL: "UpperCamelCase",
        CasingStyle.SNAKE: "snake_case",
        CasingStyle.KEBAB: "kebab-case",
        CasingStyle.DOWNCASE: "downcase",
        CasingStyle.CAPITALIZED_WORDS: "Capitalized words",
        CasingStyle.TITLEIZED_WORDS: "Titleized Words",
        CasingStyle.UPCASE: "UPCASE",
    }
)

_TRANSFORMERS: Mapping[CasingStyle, CaseTransformerT] = MappingProxyType(
    {
        CasingStyle.LOWER_CAMEL: functools.partial(
            _camelize, uppercase_first_letter=False
        ),
        CasingStyle.UPPER_CAMEL: functools.partial(
            _camelize, uppercase_first_letter=True
        ),
        CasingStyle.SNAKE: _snake,
        CasingStyle.KEBAB: _kebab,
        CasingStyle.DOWNCASE: str.lower,
        CasingStyle.CAPITALIZED_WORDS: _capitalized_words,
        CasingStyle.TITLEIZED_WORDS: _titleized_words,
        CasingStyle.UPCASE: str.upper,
    }
)
