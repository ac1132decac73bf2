"""Executable Textual app hosting the symbol case commands."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use symcase.adapters.textual.app"
    ) from exc

from symcase.buffer import BufferMirror, TextBuffer
from symcase.commands import CommandContext
from symcase.config import CursorPolicy, TransformConfig
from symcase.menu import CaseMenu
from symcase.runtime import telemetry
from symcase.transform import SymbolTransformer

from .controller import TextualCaseAdapter, TextualUIHooks

SAMPLE_TEXT = "fooBar baz_qux some-symbol HTTPServer\n"
_NAMED_KEYS = {"left", "right", "home", "end", "backspace"}


def create_default_menu(text: str, config: TransformConfig) -> CaseMenu:
    """Build a CaseMenu over a fresh TextBuffer with the default keymaps."""

    buffer = TextBuffer.from_text(text, symbol_chars=config.symbol_chars)
    context = CommandContext(buffer=buffer, transformer=SymbolTransformer(config))
    return CaseMenu(context)


def render_buffer(mirror: BufferMirror) -> Text:
    """Render buffer text with the cursor cell shown in reverse video."""

    text = mirror.text
    cursor = mirror.cursor
    if cursor >= len(text) or text[cursor] == "\n":
        text = text[:cursor] + " " + text[cursor:]
    rendered = Text(text)
    rendered.stylize("reverse", cursor, cursor + 1)
    return rendered


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    menu_text: str = ""


class CaseEditorApp(App[None]):
    """Tiny editor: type, move the cursor, press ctrl+t to recase a symbol."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#menu-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        text: str = SAMPLE_TEXT,
        config: TransformConfig | None = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._text = text
        self._config = config or TransformConfig.from_env()
        self.adapter: TextualCaseAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._menu_widget: Static | None = None
        self._logger = telemetry.get_logger("symcase.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._menu_widget = Static("", id="menu-line")
        yield self._status_widget
        yield self._menu_widget
        yield Footer()

    async def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_menu=self._show_menu,
            log=self._log_line,
        )
        self.adapter = TextualCaseAdapter(
            create_default_menu(self._text, self._config), hooks
        )
        self._update_status(
            f"cursor after transform: {self._config.cursor_after_transform.value}"
        )

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = mirror.text
        if self._buffer_widget:
            self._buffer_widget.update(render_buffer(mirror))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(Text(status))

    def _show_menu(self, menu: str) -> None:
        self._state.menu_text = menu
        if self._menu_widget:
            self._menu_widget.update(Text(menu))

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key.startswith("ctrl+"):
            return (key[len("ctrl+") :], None, ("ctrl",))
        if key == "escape":
            return ("ESC", None, ())
        if key in {"enter", "return"}:
            return ("ENTER", None, ())
        if key in _NAMED_KEYS:
            return (key.upper(), None, ())
        if event.character and event.character.isprintable():
            return (event.character, event.character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = TransformConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Edit text and recase the symbol under the cursor."
    )
    parser.add_argument(
        "--cursor-after-transform",
        choices=[policy.value for policy in CursorPolicy],
        default=defaults.cursor_after_transform.value,
        help="Where the cursor lands after a transform (default: %(default)s)",
    )
    parser.add_argument(
        "--symbol-chars",
        default=defaults.symbol_chars,
        help="Non-alphanumeric characters that belong to symbols (default: %(default)s)",
    )
    parser.add_argument(
        "--text",
        default=SAMPLE_TEXT,
        help="Initial buffer contents",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="quiet")
    config = TransformConfig(
        cursor_after_transform=CursorPolicy.parse(args.cursor_after_transform),
        symbol_chars=args.symbol_chars,
    )
    CaseEditorApp(text=args.text, config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
