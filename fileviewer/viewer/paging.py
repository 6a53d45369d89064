"""Page movement measured in matching lines while filtering.

A filtered page advances by exactly ``quota`` matching lines. When fewer
matches exist in the requested direction, the direction's shortfall policy
decides the outcome: forward stays put, backward snaps to the document
start. The backward behavior is kept behind ``BACKWARD_SHORTFALL_POLICY``
so it can be changed in one place.
"""

from __future__ import annotations

from enum import Enum

from ..document import Document


class ShortfallPolicy(Enum):
    """What a filtered page does when the quota of matches is not met."""

    STAY = "stay"
    SNAP_TO_START = "snap_to_start"


FORWARD_SHORTFALL_POLICY = ShortfallPolicy.STAY
BACKWARD_SHORTFALL_POLICY = ShortfallPolicy.SNAP_TO_START


def _apply_shortfall(policy: ShortfallPolicy, top_line: int) -> int:
    if policy is ShortfallPolicy.SNAP_TO_START:
        return 0
    return top_line


def next_filtered_page(
    document: Document,
    top_line: int,
    pattern: str,
    quota: int,
    policy: ShortfallPolicy = FORWARD_SHORTFALL_POLICY,
) -> int:
    """Return the ``quota``-th matching line after ``top_line``."""
    if quota <= 0:
        return top_line
    line = top_line
    for _hit in range(quota):
        found = document.find_next_matching_line(line, pattern)
        if found is None:
            return _apply_shortfall(policy, top_line)
        line = found
    return line


def previous_filtered_page(
    document: Document,
    top_line: int,
    pattern: str,
    quota: int,
    policy: ShortfallPolicy = BACKWARD_SHORTFALL_POLICY,
) -> int:
    """Return the ``quota``-th matching line before ``top_line``."""
    if quota <= 0:
        return top_line
    line = top_line
    for _hit in range(quota):
        found = document.find_previous_matching_line(line, pattern)
        if found is None:
            return _apply_shortfall(policy, top_line)
        line = found
    return line
