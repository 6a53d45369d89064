"""Line-level substring matching with optional circular wrap.

All functions are pure over ``(lines, current, pattern)``. Matching is a
literal, case-sensitive ``in`` test; an empty pattern never matches.
Searches always exclude ``current`` itself, so repeated "next" calls walk
every matching line once per cycle.
"""

from __future__ import annotations

from collections.abc import Sequence


def line_matches(line: str, pattern: str) -> bool:
    """Return whether ``line`` contains ``pattern`` (empty never matches)."""
    return bool(pattern) and pattern in line


def match_spans(line: str, pattern: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(column, length)`` occurrences of ``pattern``."""
    if not pattern:
        return []

    spans: list[tuple[int, int]] = []
    cursor = 0
    while True:
        found = line.find(pattern, cursor)
        if found < 0:
            break
        spans.append((found, len(pattern)))
        cursor = found + len(pattern)
    return spans


def find_next_matching_line(lines: Sequence[str], current: int, pattern: str) -> int | None:
    """Return the first index after ``current`` whose line contains ``pattern``.

    ``current`` may be ``-1`` to allow matching line 0. Returns ``None`` when
    there is no line after ``current`` or none of them match.
    """
    if current >= len(lines) - 1:
        return None
    for idx in range(max(0, current + 1), len(lines)):
        if line_matches(lines[idx], pattern):
            return idx
    return None


def find_previous_matching_line(lines: Sequence[str], current: int, pattern: str) -> int | None:
    """Return the last index before ``current`` whose line contains ``pattern``.

    ``current`` may be ``len(lines)`` to allow matching the last line.
    """
    if current < 1:
        return None
    for idx in range(min(current, len(lines)) - 1, -1, -1):
        if line_matches(lines[idx], pattern):
            return idx
    return None


def locate_next_match(lines: Sequence[str], current: int, pattern: str) -> int:
    """Return the next matching line, wrapping to the top once.

    Returns ``current`` unchanged for an empty pattern or when nothing matches.
    """
    if not pattern:
        return current
    line = find_next_matching_line(lines, current, pattern)
    if line is None:
        line = find_next_matching_line(lines, -1, pattern)
    return current if line is None else line


def locate_previous_match(lines: Sequence[str], current: int, pattern: str) -> int:
    """Return the previous matching line, wrapping to the bottom once."""
    if not pattern:
        return current
    line = find_previous_matching_line(lines, current, pattern)
    if line is None:
        line = find_previous_matching_line(lines, len(lines), pattern)
    return current if line is None else line
