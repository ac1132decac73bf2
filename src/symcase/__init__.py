"""Rewrite the symbol under the cursor into another casing convention."""

from .casing import CasingStyle, casify
from .config import CursorPolicy, TransformConfig
from .transform import NoSymbolAtPoint, SymbolTransformer, TransformResult

__all__ = [
    "CasingStyle",
    "CursorPolicy",
    "NoSymbolAtPoint",
    "SymbolTransformer",
    "TransformConfig",
    "TransformResult",
    "casify",
    "adapters",
    "buffer",
    "commands",
    "keymaps",
    "menu",
    "runtime",
]

__version__ = "0.1.0"
