"""Viewer command set as a pure reducer.

``reduce`` maps ``(state, command)`` to the next state and always finishes
with the clamp, so ``top_line`` and ``left_edge`` stay valid no matter which
command ran or how the viewport changed since the previous event.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from enum import Enum

from ..ansi import plain_display_width
from ..document import Document
from ..search.matching import line_matches
from . import paging
from .state import Mode, ViewerState, Viewport, clamp_state


class Command(Enum):
    START_CAPTURE = "start_capture"
    END_CAPTURE = "end_capture"
    CANCEL_CAPTURE = "cancel_capture"
    BACKSPACE_CAPTURE = "backspace_capture"
    PREVIOUS_MATCH = "previous_match"
    NEXT_MATCH = "next_match"
    PREVIOUS_LINE = "previous_line"
    NEXT_LINE = "next_line"
    PREVIOUS_COLUMN = "previous_column"
    NEXT_COLUMN = "next_column"
    START_OF_DOCUMENT = "start_of_document"
    END_OF_DOCUMENT = "end_of_document"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"
    PREVIOUS_FILTERED_PAGE = "previous_filtered_page"
    NEXT_FILTERED_PAGE = "next_filtered_page"
    LEFTMOST_COLUMN = "leftmost_column"
    RIGHTMOST_COLUMN = "rightmost_column"
    TOGGLE_LINE_NUMBERS = "toggle_line_numbers"
    TOGGLE_FILTERING = "toggle_filtering"
    START_GOTO_LINE = "start_goto_line"
    END_GOTO_LINE = "end_goto_line"
    CANCEL_GOTO_LINE = "cancel_goto_line"
    BACKSPACE_GOTO_LINE = "backspace_goto_line"


CommandHandler = Callable[[ViewerState, Document, Viewport], ViewerState]


def _with_match(state: ViewerState, document: Document, pattern: str) -> ViewerState:
    """Store ``pattern`` and the first line after ``top_line`` that matches it."""
    return replace(
        state,
        pattern=pattern,
        matching_line=document.find_next_matching_line(state.top_line, pattern),
    )


def start_capture(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, mode=Mode.CAPTURING, pattern="", matching_line=None, goto_digits="")


def end_capture(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    """Leave capture mode, jumping to the pending match when there is one."""
    if not state.is_capturing:
        return state
    top_line = state.top_line if state.matching_line is None else state.matching_line
    return replace(state, mode=Mode.IDLE, top_line=top_line)


def cancel_capture(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    if not state.is_capturing:
        return state
    return replace(state, mode=Mode.IDLE, pattern="", matching_line=None)


def backspace_capture(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    if not state.is_capturing or not state.pattern:
        return state
    return _with_match(state, document, state.pattern[:-1])


def previous_match(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=document.locate_previous_match(state.top_line, state.pattern))


def next_match(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=document.locate_next_match(state.top_line, state.pattern))


def previous_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=state.top_line - 1)


def next_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=state.top_line + 1)


def previous_column(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, left_edge=state.left_edge - 1)


def next_column(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, left_edge=state.left_edge + 1)


def start_of_document(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=0)


def end_of_document(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    # Short documents go negative here; the clamp brings them back to 0.
    return replace(state, top_line=document.size() - viewport.content_rows)


def previous_page(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=state.top_line - viewport.content_rows)


def next_page(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, top_line=state.top_line + viewport.content_rows)


def previous_filtered_page(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    top_line = paging.previous_filtered_page(document, state.top_line, state.pattern, viewport.content_rows)
    return replace(state, top_line=top_line)


def next_filtered_page(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    top_line = paging.next_filtered_page(document, state.top_line, state.pattern, viewport.content_rows)
    return replace(state, top_line=top_line)


def leftmost_column(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, left_edge=0)


def rightmost_column(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    """Scroll so the longest visible line ends at the viewport's right edge."""
    longest = 0
    remaining = viewport.content_rows
    line = state.top_line
    while remaining > 0 and line < document.size():
        text = document[line]
        if not state.filters_lines or line_matches(text, state.pattern):
            longest = max(longest, plain_display_width(text))
            remaining -= 1
        line += 1
    return replace(state, left_edge=max(0, longest - viewport.width + state.margin_width))


def toggle_line_numbers(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, show_line_numbers=not state.show_line_numbers)


def toggle_filtering(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    return replace(state, is_filtering=not state.is_filtering)


def _goto_digit_limit(document: Document) -> int:
    # Longer entries already point past the last line.
    return len(str(document.size())) + 1


def start_goto_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    if state.mode is not Mode.IDLE:
        return state
    return replace(state, mode=Mode.GOTO_LINE, goto_digits="")


def end_goto_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    """Jump to the typed 1-based line number; an empty entry just exits."""
    if state.mode is not Mode.GOTO_LINE:
        return state
    top_line = state.top_line
    if state.goto_digits:
        top_line = int(state.goto_digits[: _goto_digit_limit(document)]) - 1
    return replace(state, mode=Mode.IDLE, goto_digits="", top_line=top_line)


def cancel_goto_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    if state.mode is not Mode.GOTO_LINE:
        return state
    return replace(state, mode=Mode.IDLE, goto_digits="")


def backspace_goto_line(state: ViewerState, document: Document, viewport: Viewport) -> ViewerState:
    if state.mode is not Mode.GOTO_LINE or not state.goto_digits:
        return state
    return replace(state, goto_digits=state.goto_digits[:-1])


COMMAND_HANDLERS: dict[Command, CommandHandler] = {
    Command.START_CAPTURE: start_capture,
    Command.END_CAPTURE: end_capture,
    Command.CANCEL_CAPTURE: cancel_capture,
    Command.BACKSPACE_CAPTURE: backspace_capture,
    Command.PREVIOUS_MATCH: previous_match,
    Command.NEXT_MATCH: next_match,
    Command.PREVIOUS_LINE: previous_line,
    Command.NEXT_LINE: next_line,
    Command.PREVIOUS_COLUMN: previous_column,
    Command.NEXT_COLUMN: next_column,
    Command.START_OF_DOCUMENT: start_of_document,
    Command.END_OF_DOCUMENT: end_of_document,
    Command.PREVIOUS_PAGE: previous_page,
    Command.NEXT_PAGE: next_page,
    Command.PREVIOUS_FILTERED_PAGE: previous_filtered_page,
    Command.NEXT_FILTERED_PAGE: next_filtered_page,
    Command.LEFTMOST_COLUMN: leftmost_column,
    Command.RIGHTMOST_COLUMN: rightmost_column,
    Command.TOGGLE_LINE_NUMBERS: toggle_line_numbers,
    Command.TOGGLE_FILTERING: toggle_filtering,
    Command.START_GOTO_LINE: start_goto_line,
    Command.END_GOTO_LINE: end_goto_line,
    Command.CANCEL_GOTO_LINE: cancel_goto_line,
    Command.BACKSPACE_GOTO_LINE: backspace_goto_line,
}


def reduce(
    state: ViewerState,
    command: Command | None,
    document: Document,
    viewport: Viewport,
) -> ViewerState:
    """Apply ``command`` (``None`` means an ignored key) and re-clamp."""
    if command is not None:
        state = COMMAND_HANDLERS[command](state, document, viewport)
    return clamp_state(state, document, viewport)


def type_character(state: ViewerState, ch: str, document: Document, viewport: Viewport) -> ViewerState:
    """Feed one printable character to the active prompt, then re-clamp."""
    if state.is_capturing:
        state = _with_match(state, document, state.pattern + ch)
    elif state.mode is Mode.GOTO_LINE and ch.isascii() and ch.isdigit():
        if len(state.goto_digits) < _goto_digit_limit(document):
            state = replace(state, goto_digits=state.goto_digits + ch)
    return clamp_state(state, document, viewport)
