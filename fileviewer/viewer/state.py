"""Viewer interaction state and its invariant-restoring clamp."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ..document import Document

DEFAULT_LINE_NUMBER_MARGIN = 8


class Mode(Enum):
    """Interaction mode deciding how printable keys are interpreted."""

    IDLE = "idle"
    CAPTURING = "capturing"
    GOTO_LINE = "goto_line"


@dataclass(frozen=True)
class Viewport:
    """Terminal size in cells; ``height`` includes the status row."""

    width: int
    height: int

    @property
    def content_rows(self) -> int:
        return max(0, self.height - 1)


@dataclass(frozen=True)
class ViewerState:
    top_line: int = 0
    left_edge: int = 0
    pattern: str = ""
    mode: Mode = Mode.IDLE
    is_filtering: bool = False
    show_line_numbers: bool = True
    matching_line: int | None = None
    goto_digits: str = ""
    line_number_margin: int = DEFAULT_LINE_NUMBER_MARGIN

    @property
    def is_capturing(self) -> bool:
        return self.mode is Mode.CAPTURING

    @property
    def filters_lines(self) -> bool:
        """Whether non-matching lines are currently hidden."""
        return self.is_filtering and bool(self.pattern)

    @property
    def margin_width(self) -> int:
        return self.line_number_margin if self.show_line_numbers else 0


def clamp_state(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    """Clamp ``top_line`` into the document and ``left_edge`` into the viewport.

    An empty document pins ``top_line`` to 0 rather than going negative.
    """
    top_line = max(0, min(state.top_line, document.size() - 1))
    left_edge = max(0, min(state.left_edge, viewport.width - 1))
    if top_line == state.top_line and left_edge == state.left_edge:
        return state
    return replace(state, top_line=top_line, left_edge=left_edge)
