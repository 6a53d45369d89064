"""Tests for Pygments-backed line colouring."""

import unittest
from pathlib import Path
from unittest import mock

from fileviewer.ansi import ANSI_ESCAPE_RE
from fileviewer.render.highlight import colorize_lines


class ColorizeLinesTests(unittest.TestCase):
    def test_styled_lines_keep_visible_text(self) -> None:
        lines = ("def add(a, b):", "    return a + b", "")
        styled = colorize_lines(lines, Path("example.py"))

        self.assertEqual(len(styled), len(lines))
        self.assertEqual([ANSI_ESCAPE_RE.sub("", line) for line in styled], list(lines))

    def test_unknown_extension_and_style_fall_back(self) -> None:
        lines = ("plain words",)
        styled = colorize_lines(lines, Path("notes.unknown-ext"), style="no-such-style")
        self.assertEqual([ANSI_ESCAPE_RE.sub("", line) for line in styled], list(lines))

    def test_missing_path_returns_input_unchanged(self) -> None:
        lines = ("a", "b")
        self.assertIs(colorize_lines(lines, None), lines)
        self.assertEqual(colorize_lines((), Path("x.py")), ())

    def test_dropped_characters_fall_back_to_plain_lines(self) -> None:
        lines = ("\ufeffx = 1", "y = 2")
        with mock.patch(
            "fileviewer.render.highlight.pygments_highlight",
            return_value="\033[38;5;1mx\033[39m = 1\ny = 2",
        ):
            self.assertIs(colorize_lines(lines, Path("a.py")), lines)


if __name__ == "__main__":
    unittest.main()
