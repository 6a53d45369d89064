"""Tests for quota-based filtered paging and its shortfall policies."""

from __future__ import annotations

import unittest

from fileviewer.document import Document
from fileviewer.viewer import Command, ViewerState, Viewport, reduce
from fileviewer.viewer.paging import (
    BACKWARD_SHORTFALL_POLICY,
    FORWARD_SHORTFALL_POLICY,
    ShortfallPolicy,
    next_filtered_page,
    previous_filtered_page,
)


def _even_hits(count: int = 16) -> Document:
    return Document(["hit" if idx % 2 == 0 else "miss" for idx in range(count)])


class FilteredPagingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = _even_hits()

    def test_default_policies_are_asymmetric(self) -> None:
        self.assertIs(FORWARD_SHORTFALL_POLICY, ShortfallPolicy.STAY)
        self.assertIs(BACKWARD_SHORTFALL_POLICY, ShortfallPolicy.SNAP_TO_START)

    def test_next_page_lands_on_quota_th_match(self) -> None:
        self.assertEqual(next_filtered_page(self.document, 0, "hit", 3), 6)

    def test_next_page_shortfall_stays_put(self) -> None:
        self.assertEqual(next_filtered_page(self.document, 14, "hit", 3), 14)
        self.assertEqual(next_filtered_page(self.document, 12, "hit", 3), 12)

    def test_previous_page_lands_on_quota_th_match(self) -> None:
        self.assertEqual(previous_filtered_page(self.document, 10, "hit", 3), 4)

    def test_previous_page_shortfall_snaps_to_start(self) -> None:
        self.assertEqual(previous_filtered_page(self.document, 4, "hit", 3), 0)

    def test_previous_page_shortfall_can_stay_with_other_policy(self) -> None:
        self.assertEqual(
            previous_filtered_page(self.document, 4, "hit", 3, policy=ShortfallPolicy.STAY),
            4,
        )

    def test_no_matches_at_all(self) -> None:
        self.assertEqual(next_filtered_page(self.document, 5, "zzz", 3), 5)
        self.assertEqual(previous_filtered_page(self.document, 5, "zzz", 3), 0)

    def test_zero_quota_is_noop(self) -> None:
        self.assertEqual(next_filtered_page(self.document, 5, "hit", 0), 5)
        self.assertEqual(previous_filtered_page(self.document, 5, "hit", 0), 5)


class FilteredPageCommandTests(unittest.TestCase):
    def test_commands_use_content_rows_as_quota(self) -> None:
        document = _even_hits()
        viewport = Viewport(width=80, height=4)
        state = ViewerState(pattern="hit", is_filtering=True)
        state = reduce(state, Command.NEXT_FILTERED_PAGE, document, viewport)
        self.assertEqual(state.top_line, 6)
        state = reduce(state, Command.NEXT_FILTERED_PAGE, document, viewport)
        self.assertEqual(state.top_line, 12)
        state = reduce(state, Command.NEXT_FILTERED_PAGE, document, viewport)
        self.assertEqual(state.top_line, 12)
        state = reduce(state, Command.PREVIOUS_FILTERED_PAGE, document, viewport)
        self.assertEqual(state.top_line, 6)
        state = reduce(state, Command.PREVIOUS_FILTERED_PAGE, document, viewport)
        self.assertEqual(state.top_line, 0)


if __name__ == "__main__":
    unittest.main()
