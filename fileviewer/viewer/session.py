"""One open document plus the viewer state driven by key events.

The session is the single owner of both the document and the current
``ViewerState``. Each key is fully reduced and clamped before the next one
is accepted.
"""

from __future__ import annotations

import logging

from ..document import Document
from ..input import keys
from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from .commands import Command, reduce, type_character
from .state import Mode, ViewerState, Viewport
from .view_model import ViewModel, build_view_model

logger = logging.getLogger(__name__)

QUIT_KEYS: tuple[str, ...] = ("q",)


class ViewerSession:
    """Map key tokens onto viewer commands for a single document."""

    def __init__(self, document: Document, state: ViewerState | None = None) -> None:
        self.document = document
        self.state = state if state is not None else ViewerState()
        self._viewport = Viewport(width=80, height=24)
        self._registry = self._build_registry()

    def _build_registry(self) -> KeyComboRegistry:
        run = self._run
        return KeyComboRegistry().register_bindings(
            KeyComboBinding(("/",), lambda: run(Command.START_CAPTURE)),
            KeyComboBinding(("n",), lambda: run(Command.NEXT_MATCH)),
            KeyComboBinding(("p",), lambda: run(Command.PREVIOUS_MATCH)),
            KeyComboBinding(QUIT_KEYS, self._quit),
            KeyComboBinding((keys.ENTER,), self._enter),
            KeyComboBinding((keys.ESC,), self._escape),
            KeyComboBinding((keys.BACKSPACE,), self._backspace),
            KeyComboBinding((keys.UP,), lambda: self._vertical(Command.PREVIOUS_MATCH, Command.PREVIOUS_LINE)),
            KeyComboBinding((keys.DOWN,), lambda: self._vertical(Command.NEXT_MATCH, Command.NEXT_LINE)),
            KeyComboBinding((keys.LEFT,), lambda: run(Command.PREVIOUS_COLUMN)),
            KeyComboBinding((keys.RIGHT,), lambda: run(Command.NEXT_COLUMN)),
            KeyComboBinding((keys.HOME,), lambda: run(Command.LEFTMOST_COLUMN)),
            KeyComboBinding((keys.END,), lambda: run(Command.RIGHTMOST_COLUMN)),
            KeyComboBinding((keys.CTRL_HOME,), lambda: run(Command.START_OF_DOCUMENT)),
            KeyComboBinding((keys.CTRL_END,), lambda: run(Command.END_OF_DOCUMENT)),
            KeyComboBinding((keys.PAGE_UP,), lambda: self._page(Command.PREVIOUS_FILTERED_PAGE, Command.PREVIOUS_PAGE)),
            KeyComboBinding((keys.PAGE_DOWN,), lambda: self._page(Command.NEXT_FILTERED_PAGE, Command.NEXT_PAGE)),
            KeyComboBinding((keys.CTRL_L,), lambda: run(Command.TOGGLE_LINE_NUMBERS)),
            KeyComboBinding((keys.CTRL_T,), lambda: run(Command.TOGGLE_FILTERING)),
            KeyComboBinding((keys.CTRL_G,), lambda: run(Command.START_GOTO_LINE)),
        )

    def _run(self, command: Command) -> bool:
        self.state = reduce(self.state, command, self.document, self._viewport)
        return False

    def _quit(self) -> bool:
        return True

    def _enter(self) -> bool:
        if self.state.mode is Mode.GOTO_LINE:
            return self._run(Command.END_GOTO_LINE)
        return self._run(Command.END_CAPTURE)

    def _escape(self) -> bool:
        if self.state.mode is Mode.GOTO_LINE:
            return self._run(Command.CANCEL_GOTO_LINE)
        return self._run(Command.CANCEL_CAPTURE)

    def _backspace(self) -> bool:
        if self.state.mode is Mode.GOTO_LINE:
            return self._run(Command.BACKSPACE_GOTO_LINE)
        return self._run(Command.BACKSPACE_CAPTURE)

    def _vertical(self, match_command: Command, line_command: Command) -> bool:
        # Filtering turns line-by-line movement into match-to-match movement.
        return self._run(match_command if self.state.filters_lines else line_command)

    def _page(self, filtered_command: Command, plain_command: Command) -> bool:
        return self._run(filtered_command if self.state.is_filtering else plain_command)

    def handle_key(self, key: str, viewport: Viewport) -> bool:
        """Process one key token; return ``True`` when the viewer should quit.

        Printable keys feed the active prompt outside ``IDLE``; unbound keys
        change nothing but still run the clamp.
        """
        self._viewport = viewport
        if keys.is_printable_key(key) and self.state.mode is not Mode.IDLE:
            self.state = type_character(self.state, key, self.document, viewport)
            return False
        handled = self._registry.dispatch(key)
        if handled is None:
            logger.debug("Ignoring unbound key %r", key)
            self.state = reduce(self.state, None, self.document, viewport)
            return False
        return handled

    def resize(self, viewport: Viewport) -> None:
        """Re-clamp against a new viewport without running a command."""
        self._viewport = viewport
        self.state = reduce(self.state, None, self.document, viewport)

    def view_model(self, viewport: Viewport) -> ViewModel:
        return build_view_model(self.state, self.document, viewport)
