"""Tests for line matching and wrap-around match location.

Covers forward/backward linear search bounds, the single-wrap locate
helpers, empty-pattern identity, and the visit-every-match cycle.
"""

from __future__ import annotations

import unittest

from fileviewer.search import (
    find_next_matching_line,
    find_previous_matching_line,
    line_matches,
    locate_next_match,
    locate_previous_match,
    match_spans,
)

FRUIT = ["apple", "banana", "cherry", "banana"]


class FindMatchingLineTests(unittest.TestCase):
    def test_find_next_skips_current_line_and_stops_at_end(self) -> None:
        self.assertEqual(find_next_matching_line(FRUIT, 0, "banana"), 1)
        self.assertEqual(find_next_matching_line(FRUIT, 1, "banana"), 3)
        self.assertIsNone(find_next_matching_line(FRUIT, 3, "banana"))

    def test_find_next_from_before_first_line_can_match_line_zero(self) -> None:
        self.assertEqual(find_next_matching_line(FRUIT, -1, "apple"), 0)
        self.assertIsNone(find_next_matching_line(FRUIT, 0, "apple"))

    def test_find_previous_skips_current_line_and_stops_at_start(self) -> None:
        self.assertEqual(find_previous_matching_line(FRUIT, 3, "banana"), 1)
        self.assertIsNone(find_previous_matching_line(FRUIT, 1, "banana"))
        self.assertIsNone(find_previous_matching_line(FRUIT, 0, "apple"))

    def test_find_previous_from_past_last_line_can_match_last_line(self) -> None:
        self.assertEqual(find_previous_matching_line(FRUIT, len(FRUIT), "banana"), 3)

    def test_matching_is_case_sensitive_and_literal(self) -> None:
        lines = ["Banana", "ban.na", "banana"]
        self.assertEqual(find_next_matching_line(lines, -1, "banana"), 2)
        self.assertEqual(find_next_matching_line(lines, -1, "n.n"), 1)

    def test_empty_lines_never_match(self) -> None:
        self.assertIsNone(find_next_matching_line([], -1, "a"))
        self.assertIsNone(find_previous_matching_line([], 0, "a"))

    def test_empty_pattern_matches_nothing(self) -> None:
        self.assertFalse(line_matches("anything", ""))
        self.assertIsNone(find_next_matching_line(FRUIT, -1, ""))


class LocateMatchTests(unittest.TestCase):
    def test_locate_next_wraps_to_first_match(self) -> None:
        self.assertEqual(locate_next_match(FRUIT, 3, "banana"), 1)

    def test_locate_previous_wraps_to_last_match(self) -> None:
        self.assertEqual(locate_previous_match(FRUIT, 1, "banana"), 3)

    def test_empty_pattern_is_identity(self) -> None:
        for current in range(len(FRUIT)):
            self.assertEqual(locate_next_match(FRUIT, current, ""), current)
            self.assertEqual(locate_previous_match(FRUIT, current, ""), current)

    def test_no_match_leaves_current_unchanged(self) -> None:
        self.assertEqual(locate_next_match(FRUIT, 2, "kiwi"), 2)
        self.assertEqual(locate_previous_match(FRUIT, 2, "kiwi"), 2)

    def test_single_match_returns_itself_from_the_match(self) -> None:
        lines = ["x marks", "a", "b"]
        self.assertEqual(locate_next_match(lines, 0, "x"), 0)
        self.assertEqual(locate_previous_match(lines, 0, "x"), 0)
        self.assertEqual(locate_next_match(lines, 1, "x"), 0)

    def test_repeated_next_visits_every_match_once_per_cycle(self) -> None:
        lines = ["hit" if idx in {1, 4, 6} else "miss" for idx in range(8)]
        for start in range(len(lines)):
            seen: list[int] = []
            current = start
            for _ in range(3):
                current = locate_next_match(lines, current, "hit")
                seen.append(current)
            self.assertEqual(sorted(seen), [1, 4, 6])
            self.assertNotEqual(seen[0], start)

    def test_repeated_previous_visits_every_match_once_per_cycle(self) -> None:
        lines = ["hit" if idx in {0, 3, 7} else "miss" for idx in range(8)]
        current = 5
        seen = []
        for _ in range(3):
            current = locate_previous_match(lines, current, "hit")
            seen.append(current)
        self.assertEqual(seen, [3, 0, 7])


class MatchSpanTests(unittest.TestCase):
    def test_spans_are_non_overlapping_left_to_right(self) -> None:
        self.assertEqual(match_spans("aaaa", "aa"), [(0, 2), (2, 2)])
        self.assertEqual(match_spans("a banana", "an"), [(3, 2), (5, 2)])

    def test_spans_empty_for_empty_pattern_or_no_hit(self) -> None:
        self.assertEqual(match_spans("banana", ""), [])
        self.assertEqual(match_spans("banana", "x"), [])


if __name__ == "__main__":
    unittest.main()
