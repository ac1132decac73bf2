"""Adapter wiring case commands and the case menu into Textual UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from symcase.buffer import BufferMirror, TextBuffer
from symcase.commands import CommandResult, KeyInput, key_to_token
from symcase.keymaps import EDITOR_MODE
from symcase.menu import CaseMenu
from symcase.transform import NoSymbolAtPoint, TransformResult

# statuses whose status line is written by the matching bus event
_EVENT_STATUSES = frozenset({"editing", "menu_open", "transformed", "no_symbol"})


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_menu: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualCaseAdapter:
    """Bridges host key events to buffer edits, the case menu and the bus.

    While the menu is open every key goes to it. Otherwise keys bound in
    the ``editor`` keymap run their action and anything left over is a
    plain edit on the ``TextBuffer``.
    """

    def __init__(self, menu: CaseMenu, hooks: TextualUIHooks) -> None:
        self.menu = menu
        self.context = menu.context
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_menu()

    @property
    def buffer(self) -> TextBuffer:
        buffer = self.context.buffer
        if not isinstance(buffer, TextBuffer):
            raise RuntimeError("TextualCaseAdapter requires a TextBuffer")
        return buffer

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> CommandResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key_input = KeyInput(
            key=key,
            text=text,
            modifiers=tuple(str(mod).lower() for mod in modifiers),
        )
        self._log_state("key ->", key=key, text=text, mods=key_input.modifiers)
        if self.menu.is_open:
            result = self.menu.handle_key(key_input)
        else:
            result = self._dispatch(key_input)
        self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def _dispatch(self, key: KeyInput) -> CommandResult:
        resolution = self.menu.resolver.resolve(EDITOR_MODE, key_to_token(key))
        if resolution.status == "match" and resolution.match:
            outcome = resolution.match.action(self.context)
            if isinstance(outcome, CommandResult):
                return outcome
            return CommandResult(consumed=True)
        return self._edit(key)

    def _edit(self, key: KeyInput) -> CommandResult:
        buffer = self.buffer
        if key.modifiers:
            return CommandResult(consumed=False, status="miss")
        if key.key == "LEFT":
            buffer.move_cursor(-1)
        elif key.key == "RIGHT":
            buffer.move_cursor(1)
        elif key.key == "HOME":
            _, col = buffer.cursor_position()
            buffer.move_cursor(-col)
        elif key.key == "END":
            offset = buffer.cursor_offset()
            line_end = buffer.text.find("\n", offset)
            buffer.set_cursor_offset(len(buffer) if line_end == -1 else line_end)
        elif key.key == "BACKSPACE":
            buffer.delete_backward()
        elif key.key == "ENTER":
            buffer.insert_text("\n")
        elif key.text:
            buffer.insert_text(key.text)
        else:
            return CommandResult(consumed=False, status="miss")
        return CommandResult(consumed=True, status="editing")

    def _after_result(self, result: CommandResult) -> None:
        status = result.message or result.status
        if status and result.status not in _EVENT_STATUSES:
            self.hooks.update_status(status)
        self._refresh_buffer()
        self._refresh_menu()

    def _subscribe_events(self) -> None:
        bus = self.context.bus
        for event in ("symbol.transform", "symbol.error", "menu.open", "menu.close"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "symbol.transform" and isinstance(payload, TransformResult):
            self.hooks.update_status(
                f"{payload.style.description}: {payload.original} -> {payload.text}"
            )
        elif name == "symbol.error" and isinstance(payload, NoSymbolAtPoint):
            self.hooks.update_status("No symbol at point")
        elif name == "menu.open":
            self.hooks.update_status("Symbol case")

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.buffer.mirror())

    def _refresh_menu(self) -> None:
        self.hooks.show_menu(self.menu.describe() if self.menu.is_open else "")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix] + [f"{key}={value!r}" for key, value in snapshot.items()])
        self.hooks.log(line)

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.buffer
        return {
            "menu_open": self.menu.is_open,
            "cursor": buffer.cursor_offset(),
            "buffer": buffer.name,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualCaseAdapter", "TextualUIHooks"]
