"""Tests for ANSI-aware width, clipping, slicing, and span highlighting."""

import unittest

from fileviewer.ansi import (
    char_display_width,
    clip_ansi_line,
    highlight_ansi_spans,
    plain_display_width,
    slice_ansi_line,
)


class AnsiWidthTests(unittest.TestCase):
    def test_tabs_expand_to_next_stop(self) -> None:
        self.assertEqual(plain_display_width("a\tb"), 9)
        self.assertEqual(char_display_width("\t", 3), 5)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(char_display_width("漢", 0), 2)
        self.assertEqual(plain_display_width("é"), 1)


class AnsiClipAndSliceTests(unittest.TestCase):
    def test_clip_keeps_escape_sequences(self) -> None:
        self.assertEqual(clip_ansi_line("\033[1mbold text", 4), "\033[1mbold")
        self.assertEqual(clip_ansi_line("ab\tc", 5), "ab")
        self.assertEqual(clip_ansi_line("abc", 0), "")

    def test_slice_replays_style_from_before_viewport(self) -> None:
        self.assertEqual(slice_ansi_line("\033[31mhello", 2, 2), "\033[31mll")

    def test_slice_blanks_tab_cut_by_left_edge(self) -> None:
        self.assertEqual(slice_ansi_line("a\tb", 3, 10), "     b")

    def test_slice_past_end_is_empty(self) -> None:
        self.assertEqual(slice_ansi_line("short", 10, 5), "")


class HighlightSpanTests(unittest.TestCase):
    def test_spans_index_visible_characters(self) -> None:
        styled = "\033[31mhello\033[0m world"
        self.assertEqual(
            highlight_ansi_spans(styled, [(6, 5)], "<", ">"),
            "\033[31mhello\033[0m <world>",
        )

    def test_multiple_spans_on_plain_text(self) -> None:
        self.assertEqual(highlight_ansi_spans("banana", [(1, 2), (3, 2)], "[", "]"), "b[an][an]a")

    def test_out_of_range_spans_are_ignored(self) -> None:
        self.assertEqual(highlight_ansi_spans("abc", [(5, 2), (0, 0)], "[", "]"), "abc")


if __name__ == "__main__":
    unittest.main()
