"""Syntax colouring of document lines via Pygments.

Colouring is presentation only: the document keeps plain lines for search,
and this module produces a parallel list of ANSI-styled lines with the same
visible characters, so match spans computed on plain text line up.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..ansi import ANSI_ESCAPE_RE

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"

_PYGMENTS_READY = False
_PYGMENTS_AVAILABLE = False
_PYGMENTS_HIGHLIGHT = None
_PYGMENTS_GET_LEXER_FOR_FILENAME = None
_PYGMENTS_TEXT_LEXER = None
_PYGMENTS_TERMINAL_FORMATTER = None
_PYGMENTS_GET_STYLE_BY_NAME = None
_PYGMENTS_FORMATTERS: dict[str, object] = {}
_PYGMENTS_VALID_STYLES: set[str] = set()
_PYGMENTS_INVALID_STYLES: set[str] = set()


def _ensure_pygments_loaded() -> bool:
    """Lazily import and cache Pygments callables.

    Returns whether Pygments is available in the runtime environment.
    """
    global _PYGMENTS_READY
    global _PYGMENTS_AVAILABLE
    global _PYGMENTS_HIGHLIGHT
    global _PYGMENTS_GET_LEXER_FOR_FILENAME
    global _PYGMENTS_TEXT_LEXER
    global _PYGMENTS_TERMINAL_FORMATTER
    global _PYGMENTS_GET_STYLE_BY_NAME

    if _PYGMENTS_READY:
        return _PYGMENTS_AVAILABLE

    _PYGMENTS_READY = True
    try:
        from pygments import highlight as pygments_highlight
        from pygments.formatters import Terminal256Formatter
        from pygments.lexers import TextLexer, get_lexer_for_filename
        from pygments.styles import get_style_by_name
    except ImportError:
        logger.debug("Pygments unavailable; syntax colouring disabled")
        _PYGMENTS_AVAILABLE = False
        return False

    _PYGMENTS_HIGHLIGHT = pygments_highlight
    _PYGMENTS_GET_LEXER_FOR_FILENAME = get_lexer_for_filename
    _PYGMENTS_TEXT_LEXER = TextLexer
    _PYGMENTS_TERMINAL_FORMATTER = Terminal256Formatter
    _PYGMENTS_GET_STYLE_BY_NAME = get_style_by_name
    _PYGMENTS_AVAILABLE = True
    return True


def _normalize_style(style: str) -> str:
    """Validate/canonicalize requested style name with cache-backed checks."""
    if style in _PYGMENTS_VALID_STYLES:
        return style
    if style in _PYGMENTS_INVALID_STYLES:
        return DEFAULT_STYLE

    try:
        assert _PYGMENTS_GET_STYLE_BY_NAME is not None
        _PYGMENTS_GET_STYLE_BY_NAME(style)
        _PYGMENTS_VALID_STYLES.add(style)
        return style
    except Exception:
        logger.debug("Unknown Pygments style %r, using %s", style, DEFAULT_STYLE)
        _PYGMENTS_INVALID_STYLES.add(style)
        return DEFAULT_STYLE


def _formatter_for_style(style: str):
    """Return cached Pygments terminal formatter for style name."""
    formatter = _PYGMENTS_FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    assert _PYGMENTS_TERMINAL_FORMATTER is not None
    formatter = _PYGMENTS_TERMINAL_FORMATTER(style=style)
    _PYGMENTS_FORMATTERS[style] = formatter
    return formatter


def pygments_highlight(source: str, path: Path, style: str = DEFAULT_STYLE) -> str | None:
    """Highlight source with Pygments, returning ``None`` on any failure."""
    if not _ensure_pygments_loaded():
        return None

    style = _normalize_style(style)
    formatter = _formatter_for_style(style)

    try:
        assert _PYGMENTS_GET_LEXER_FOR_FILENAME is not None
        lexer = _PYGMENTS_GET_LEXER_FOR_FILENAME(path.name, source, stripnl=False, ensurenl=False)
    except Exception:
        assert _PYGMENTS_TEXT_LEXER is not None
        lexer = _PYGMENTS_TEXT_LEXER(stripnl=False, ensurenl=False)

    try:
        assert _PYGMENTS_HIGHLIGHT is not None
        return _PYGMENTS_HIGHLIGHT(source, lexer, formatter)
    except Exception:
        logger.debug("Pygments failed to highlight %s", path, exc_info=True)
        return None


def colorize_lines(lines: tuple[str, ...], path: Path | None, style: str = DEFAULT_STYLE) -> tuple[str, ...]:
    """Return ANSI-styled versions of ``lines``, or ``lines`` itself on failure.

    The result is only used when every styled line shows exactly the
    characters of its plain line; otherwise span offsets would drift, so
    plain lines are kept.
    """
    if not lines or path is None:
        return lines
    rendered = pygments_highlight("\n".join(lines), path, style)
    if not rendered:
        return lines
    styled = tuple(rendered.split("\n"))
    if len(styled) != len(lines):
        logger.debug("Highlighted line count mismatch for %s; using plain text", path)
        return lines
    for plain, colored in zip(lines, styled):
        if ANSI_ESCAPE_RE.sub("", colored) != plain:
            logger.debug("Highlighted text differs from source for %s; using plain text", path)
            return lines
    return styled
