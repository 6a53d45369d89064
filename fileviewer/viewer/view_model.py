"""Renderer-facing snapshot of one frame.

The view model is derived from ``ViewerState`` and the ``Document`` without
mutating either, so renderers only ever read it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..document import Document
from ..search.matching import line_matches, match_spans
from .state import Mode, ViewerState, Viewport


@dataclass(frozen=True)
class ViewRow:
    line_number: int  # 1-based
    text: str
    spans: tuple[tuple[int, int], ...] = ()

    @property
    def is_match(self) -> bool:
        return bool(self.spans)


@dataclass(frozen=True)
class ViewModel:
    rows: tuple[ViewRow, ...]
    status_text: str
    left_edge: int
    show_line_numbers: bool
    margin_width: int
    pattern: str = ""
    mode: Mode = Mode.IDLE
    is_filtering: bool = False
    content_rows: int = 0
    prompt: str = ""

    @property
    def is_capturing(self) -> bool:
        return self.mode is Mode.CAPTURING


def visible_rows(state: ViewerState, document: Document, viewport: Viewport) -> tuple[ViewRow, ...]:
    """Collect up to ``content_rows`` rows from ``top_line``, honoring the filter."""
    rows: list[ViewRow] = []
    line = state.top_line
    while len(rows) < viewport.content_rows and 0 <= line < document.size():
        text = document[line]
        if not state.filters_lines or line_matches(text, state.pattern):
            rows.append(ViewRow(line_number=line + 1, text=text, spans=tuple(match_spans(text, state.pattern))))
        line += 1
    return tuple(rows)


def status_text(state: ViewerState, document: Document) -> str:
    """Format ``"<top>/<size>"`` plus the echo of any prompt being typed."""
    if document.size() == 0:
        position = "0/0"
    else:
        position = f"{state.top_line + 1}/{document.size()}"
    prompt = prompt_text(state)
    return f"{position} {prompt}" if prompt else position


def prompt_text(state: ViewerState) -> str:
    if state.mode is Mode.CAPTURING:
        return f"/{state.pattern}"
    if state.mode is Mode.GOTO_LINE:
        return f":{state.goto_digits}"
    return ""


def build_view_model(state: ViewerState, document: Document, viewport: Viewport) -> ViewModel:
    return ViewModel(
        rows=visible_rows(state, document, viewport),
        status_text=status_text(state, document),
        left_edge=state.left_edge,
        show_line_numbers=state.show_line_numbers,
        margin_width=state.margin_width,
        pattern=state.pattern,
        mode=state.mode,
        is_filtering=state.is_filtering,
        content_rows=viewport.content_rows,
        prompt=prompt_text(state),
    )
