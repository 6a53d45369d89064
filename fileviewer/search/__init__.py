"""Literal substring search over document lines."""

from .matching import (
    find_next_matching_line,
    find_previous_matching_line,
    line_matches,
    locate_next_match,
    locate_previous_match,
    match_spans,
)

__all__ = [
    "find_next_matching_line",
    "find_previous_matching_line",
    "line_matches",
    "locate_next_match",
    "locate_previous_match",
    "match_spans",
]
