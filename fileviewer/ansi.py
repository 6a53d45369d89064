"""ANSI-aware text measurement and line shaping utilities.

Provides display-width measurement, clipping, horizontal slicing, and span
highlighting that preserve escape sequences. These helpers keep rendering
aligned when color codes, tabs, and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def plain_display_width(text: str) -> int:
    """Return terminal display width for plain text, honoring tab stops."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return a horizontal viewport of a styled line.

    The slice starts at ``start_cols`` display columns and includes up to
    ``max_cols`` columns. SGR sequences skipped before the viewport are
    replayed ahead of the first visible cell so it keeps its styling.
    """
    if max_cols <= 0 or not text:
        return ""
    if start_cols < 0:
        start_cols = 0

    out: list[str] = []
    col = 0
    shown = 0
    i = 0
    n = len(text)
    pending_sgr: list[str] = []
    injected_style = False
    while i < n and shown < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                if col >= start_cols:
                    if not injected_style:
                        out.extend(pending_sgr)
                        injected_style = True
                    out.append(seq)
                elif seq.endswith("m"):
                    pending_sgr.append(seq)
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w <= start_cols:
            col += w
            i += 1
            continue
        if not injected_style:
            out.extend(pending_sgr)
            injected_style = True
        if ch == "\t" or col < start_cols:
            # Tabs and wide characters cut by the left edge show as blanks.
            visible = min(col + w - max(col, start_cols), max_cols - shown)
            out.append(" " * visible)
            shown += visible
            col += w
            i += 1
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
        i += 1

    return "".join(out)


def highlight_ansi_spans(
    text: str,
    spans: Iterable[tuple[int, int]],
    start_sgr: str,
    end_sgr: str,
) -> str:
    """Wrap ``(index, length)`` spans of visible characters in SGR sequences.

    Indices count visible characters only, so spans computed on the plain
    line apply unchanged to its colorized rendition.
    """
    if not text:
        return text

    visible_start: list[int] = []
    visible_end: list[int] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                i = match.end()
                continue
        visible_start.append(i)
        i += 1
        visible_end.append(i)

    out: list[str] = []
    raw_cursor = 0
    for start, length in spans:
        end = min(len(visible_start), start + length)
        if length <= 0 or start < 0 or start >= end:
            continue
        raw_start = visible_start[start]
        raw_end = visible_end[end - 1]
        if raw_start < raw_cursor:
            continue
        out.append(text[raw_cursor:raw_start])
        out.append(start_sgr)
        out.append(text[raw_start:raw_end])
        out.append(end_sgr)
        raw_cursor = raw_end
    out.append(text[raw_cursor:])
    return "".join(out)
