"""Symbol transformation at the cursor."""

from .transformer import Casify, NoSymbolAtPoint, SymbolTransformer, TransformResult

__all__ = [
    "Casify",
    "NoSymbolAtPoint",
    "SymbolTransformer",
    "TransformResult",
]
