"""Runtime composition layer for fileviewer.

Loads the document, builds the initial viewer state from config, wires the
renderer, and starts the loop. Non-interactive stdin prints the document.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import partial
from pathlib import Path

from ..document import Document
from ..render import render_frame
from ..render.highlight import colorize_lines
from ..ui_theme import resolve_theme
from ..viewer.session import ViewerSession
from ..viewer.state import ViewerState
from .config import ViewerConfig, load_viewer_config
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def initial_state(config: ViewerConfig) -> ViewerState:
    return ViewerState(
        show_line_numbers=config.show_line_numbers,
        line_number_margin=config.line_number_margin,
    )


def print_document(document: Document) -> None:
    """Write the document plainly, one line per row."""
    for line in document:
        sys.stdout.write(line)
        sys.stdout.write("\n")


def run_viewer(path: Path, config: ViewerConfig | None = None) -> None:
    """Open ``path`` in the interactive viewer (or print it when piped)."""
    if config is None:
        config = load_viewer_config()
    document = Document.load(path)

    if not os.isatty(sys.stdin.fileno()):
        print_document(document)
        return

    no_color = config.no_color or not os.isatty(sys.stdout.fileno())
    styled_lines = None if no_color else colorize_lines(document.lines, path, config.style)
    theme = resolve_theme(config.theme, no_color=no_color)
    session = ViewerSession(document, initial_state(config))
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    logger.info("Viewing %s (%d lines)", path, document.size())
    run_main_loop(
        session,
        terminal,
        sys.stdin.fileno(),
        partial(render_frame, styled_lines=styled_lines, theme=theme),
    )
