"""Casing styles and the ``casify`` dispatch table."""

from .styles import CaseTransformerT, CasingStyle, casify, split_words, transformer

__all__ = [
    "CasingStyle",
    "CaseTransformerT",
    "casify",
    "split_words",
    "transformer",
]
