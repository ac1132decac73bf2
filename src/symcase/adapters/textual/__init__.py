"""Textual host integration. The app module needs ``textual`` installed."""

from .controller import TextualCaseAdapter, TextualUIHooks

__all__ = ["TextualCaseAdapter", "TextualUIHooks"]
