"""Tests for view model construction."""

from __future__ import annotations

import unittest

from fileviewer.document import Document
from fileviewer.viewer import Mode, ViewerState, Viewport, build_view_model


class ViewModelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = Document(["alpha", "beta", "gamma", "delta", "epsilon"])
        self.viewport = Viewport(width=40, height=4)

    def test_rows_start_at_top_line_and_fill_content_rows(self) -> None:
        view = build_view_model(ViewerState(top_line=1), self.document, self.viewport)

        self.assertEqual([row.line_number for row in view.rows], [2, 3, 4])
        self.assertEqual([row.text for row in view.rows], ["beta", "gamma", "delta"])
        self.assertEqual(view.content_rows, 3)
        self.assertEqual(view.status_text, "2/5")

    def test_rows_stop_at_document_end(self) -> None:
        view = build_view_model(ViewerState(top_line=4), self.document, self.viewport)
        self.assertEqual([row.text for row in view.rows], ["epsilon"])

    def test_filtering_hides_non_matching_lines(self) -> None:
        state = ViewerState(pattern="ta", is_filtering=True)
        view = build_view_model(state, self.document, self.viewport)

        self.assertEqual([row.text for row in view.rows], ["beta", "delta"])
        self.assertTrue(all(row.is_match for row in view.rows))
        self.assertEqual(view.rows[0].spans, ((2, 2),))

    def test_filtering_with_empty_pattern_shows_everything(self) -> None:
        view = build_view_model(ViewerState(is_filtering=True), self.document, self.viewport)
        self.assertEqual(len(view.rows), 3)
        self.assertFalse(any(row.is_match for row in view.rows))

    def test_margin_follows_line_number_toggle(self) -> None:
        shown = build_view_model(ViewerState(), self.document, self.viewport)
        hidden = build_view_model(ViewerState(show_line_numbers=False), self.document, self.viewport)
        self.assertEqual(shown.margin_width, 8)
        self.assertEqual(hidden.margin_width, 0)

    def test_empty_document_status(self) -> None:
        view = build_view_model(ViewerState(), Document(), self.viewport)
        self.assertEqual(view.rows, ())
        self.assertEqual(view.status_text, "0/0")

    def test_prompts_are_echoed_in_status(self) -> None:
        capturing = ViewerState(mode=Mode.CAPTURING, pattern="gam")
        view = build_view_model(capturing, self.document, self.viewport)
        self.assertTrue(view.is_capturing)
        self.assertEqual(view.prompt, "/gam")
        self.assertEqual(view.status_text, "1/5 /gam")

        goto = ViewerState(mode=Mode.GOTO_LINE, goto_digits="4")
        self.assertEqual(build_view_model(goto, self.document, self.viewport).status_text, "1/5 :4")


if __name__ == "__main__":
    unittest.main()
