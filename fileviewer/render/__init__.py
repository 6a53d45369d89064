"""Rendering engine for the single-pane document view.

Turns a ``ViewModel`` into a fully composed ANSI frame: line-number gutter,
horizontally scrolled text with match highlights, and a status row. Nothing
here mutates viewer state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from ..ansi import clip_ansi_line, highlight_ansi_spans, slice_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme
from ..viewer.state import Viewport
from ..viewer.view_model import ViewModel, ViewRow


def format_gutter(line_number: int, margin_width: int) -> str:
    """Right-align ``line_number`` in the gutter, leaving one spacer column."""
    if margin_width <= 1:
        return " " * max(0, margin_width)
    label = str(line_number).rjust(margin_width - 1)
    return label[-(margin_width - 1):] + " "


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1) if right_text else usable
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _status_right_text(view_model: ViewModel) -> str:
    parts: list[str] = []
    if view_model.pattern and not view_model.is_capturing:
        parts.append(f"/{view_model.pattern}")
    if view_model.is_filtering:
        parts.append("[filter]")
    return " ".join(parts)


def render_row(
    row: ViewRow,
    styled_text: str,
    view_model: ViewModel,
    width: int,
    theme: UITheme,
) -> str:
    """Compose one content row: gutter, then the visible slice of the line."""
    out: list[str] = []
    margin = min(view_model.margin_width, width)
    if margin:
        gutter_style = theme.gutter_match if row.is_match else theme.gutter
        out.append(f"{gutter_style}{format_gutter(row.line_number, margin)}{theme.reset if gutter_style else ''}")
    text = highlight_ansi_spans(styled_text, row.spans, theme.match_start, theme.match_end)
    text = slice_ansi_line(text, view_model.left_edge, width - margin)
    out.append(text)
    if "\033" in text:
        out.append("\033[0m")
    return "".join(out)


def compose_frame(
    view_model: ViewModel,
    viewport: Viewport,
    styled_lines: Sequence[str] | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Build the complete ANSI frame for ``view_model``.

    ``styled_lines`` holds syntax-coloured lines indexed like the document;
    rows fall back to their plain text when it is absent.
    """
    out: list[str] = ["\033[H\033[J"]
    width = max(1, viewport.width)
    for row_idx in range(viewport.content_rows):
        if row_idx < len(view_model.rows):
            row = view_model.rows[row_idx]
            styled = row.text
            if styled_lines is not None and 0 < row.line_number <= len(styled_lines):
                styled = styled_lines[row.line_number - 1]
            out.append(render_row(row, styled, view_model, width, theme))
        out.append("\r\n")

    status = build_status_line(view_model.status_text, width, _status_right_text(view_model))
    if view_model.prompt:
        # Prompt echo sits right after the position; style it separately.
        split_at = min(len(status), len(view_model.status_text) - len(view_model.prompt))
        status = f"{status[:split_at]}{theme.status_prompt}{status[split_at:]}"
    out.append(theme.status)
    out.append(clip_ansi_line(status, width))
    out.append(theme.reset)
    return "".join(out)


def render_frame(
    view_model: ViewModel,
    viewport: Viewport,
    styled_lines: Sequence[str] | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    frame = compose_frame(view_model, viewport, styled_lines, theme)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "build_status_line",
    "compose_frame",
    "format_gutter",
    "render_frame",
    "render_row",
]
