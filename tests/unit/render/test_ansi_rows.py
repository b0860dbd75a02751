"""ANSI row formatting and viewport helpers."""

from __future__ import annotations

import unittest
from dataclasses import fields

from foldview.render import DEFAULT_THEME, PLAIN_THEME, clip_ansi_line, format_row, render_rows, resolve_theme, visible_window
from foldview.render.ansi import ANSI_ESCAPE_RE, build_status_line, display_width
from foldview.render.theme import UITheme, available_theme_names, normalize_theme_name
from foldview.tree import Node
from foldview.view import TreeView, TreeViewConfig, build_rows


def _rows(select: str | None = None):
    forest = [Node("root", (Node("dir", (Node("file"),)), Node("note")))]
    view = TreeView.initialize(TreeViewConfig(uid_of=lambda node: node.data), forest).set_expanded("dir", False)
    if select is not None:
        view = view.select_by_uid(select)
    return build_rows(view)


class FormatRowTests(unittest.TestCase):
    def test_plain_rows_show_indent_and_bullets(self) -> None:
        lines = [format_row(row, PLAIN_THEME) for row in _rows()]
        self.assertEqual(lines, ["  ▾ root", "    ▸ dir", "    · note"])

    def test_plain_selected_row_uses_gutter_marker(self) -> None:
        lines = [format_row(row, PLAIN_THEME) for row in _rows(select="note")]
        self.assertEqual(lines[-1], ">   · note")

    def test_colored_selected_row_is_reverse_video(self) -> None:
        selected = format_row(_rows(select="dir")[1], DEFAULT_THEME)
        self.assertTrue(selected.startswith("\033[7m"))
        self.assertEqual(ANSI_ESCAPE_RE.sub("", selected), "  ▸ dir")

    def test_render_rows_clips_and_windows(self) -> None:
        lines = render_rows(_rows(), 6, PLAIN_THEME, start=1, height=1)
        self.assertEqual(lines, ["    ▸ "])


class AnsiHelperTests(unittest.TestCase):
    def test_clip_keeps_escape_sequences(self) -> None:
        self.assertEqual(clip_ansi_line("\033[1mabcdef\033[0m", 3), "\033[1mabc\033[0m")
        self.assertEqual(clip_ansi_line("abc", 0), "")

    def test_clipped_styled_line_ends_with_reset(self) -> None:
        clipped = clip_ansi_line("\033[38;5;81mlong label\033[0m", 4)
        self.assertEqual(clipped, "\033[38;5;81mlong\033[0m")
        self.assertEqual(clip_ansi_line("\033[1mab\033[0m", 5), "\033[1mab\033[0m")
        self.assertEqual(clip_ansi_line("abcdef", 3), "abc")

    def test_default_theme_rows_never_leave_color_open(self) -> None:
        for line in render_rows(_rows(), 4, DEFAULT_THEME):
            self.assertTrue(line.endswith("\033[0m"), repr(line))

    def test_theme_has_no_unused_size_slot(self) -> None:
        self.assertNotIn("size", {field.name for field in fields(UITheme)})

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(clip_ansi_line("日本", 3), "日")

    def test_status_line_is_padded(self) -> None:
        self.assertEqual(build_status_line("ok", 5, PLAIN_THEME), "ok   ")


class VisibleWindowTests(unittest.TestCase):
    def test_scrolls_down_to_keep_selection_visible(self) -> None:
        self.assertEqual(visible_window(12, 0, 5, 20), 8)

    def test_scrolls_up_to_selection(self) -> None:
        self.assertEqual(visible_window(2, 6, 5, 20), 2)

    def test_clamps_start_without_selection(self) -> None:
        self.assertEqual(visible_window(None, 30, 5, 20), 15)
        self.assertEqual(visible_window(None, 3, 5, 4), 0)


class ThemeTests(unittest.TestCase):
    def test_theme_resolution(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))
        self.assertEqual(normalize_theme_name(" Ocean "), "ocean")
        self.assertEqual(normalize_theme_name("missing"), "default")
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
