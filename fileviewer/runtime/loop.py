"""Main interactive event loop for the terminal UI.

Reads one key at a time, hands it to the session, and re-renders after
every processed key or terminal resize. Feature logic lives in the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..input import keys, read_key
from ..viewer.session import ViewerSession
from ..viewer.state import Viewport
from ..viewer.view_model import ViewModel
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 120


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str, bool]:
    """Fold CR, LF, and CRLF into a single ``ENTER`` token.

    Returns the normalized key (``""`` when an LF completes a CRLF pair) and
    the updated "skip next LF" flag.
    """
    if key == "":
        return "", skip_next_lf
    if skip_next_lf and key == keys.ENTER_LF:
        return "", False
    if key == keys.ENTER_CR:
        return keys.ENTER, True
    if key == keys.ENTER_LF:
        return keys.ENTER, False
    return key, False


def run_main_loop(
    session: ViewerSession,
    terminal: TerminalController,
    stdin_fd: int,
    render: Callable[[ViewModel, Viewport], None],
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the interactive loop until the session reports a quit key."""
    skip_next_lf = False
    last_viewport: Viewport | None = None
    dirty = True
    with terminal.raw_mode():
        while True:
            viewport = terminal.viewport()
            if viewport != last_viewport:
                session.resize(viewport)
                last_viewport = viewport
                dirty = True
            if dirty:
                render(session.view_model(viewport), viewport)
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                # Only an external SIGINT lands here; raw mode reads Ctrl+C as CTRL_C.
                continue
            key, skip_next_lf = normalize_enter(key, skip_next_lf)
            if key == "":
                continue

            if session.handle_key(key, viewport):
                logger.debug("Quit requested")
                break
            dirty = True
