"""CLI argument handling for render and interactive modes."""

from __future__ import annotations

import io
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from foldview import cli, config

DOCUMENT = {
    "server": {"host": "example.org", "port": 80},
    "users": [{"name": "ada"}],
}


class CliRenderTests(unittest.TestCase):
    def _render(self, *extra: str) -> str:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.json"
            target.write_text(json.dumps(DOCUMENT), encoding="utf-8")
            stdout = io.StringIO()
            with mock.patch.object(sys, "stdout", stdout):
                cli.main([str(target), "--render", "--max-cols", "80", *extra])
        return stdout.getvalue()

    def test_render_prints_all_rows_without_color_when_not_a_tty(self) -> None:
        self.assertEqual(
            self._render().splitlines(),
            [
                "  ▾ server {2}",
                '    · host: "example.org"',
                "    · port: 80",
                "  ▾ users [1]",
                "    ▾ 0 {1}",
                '      · name: "ada"',
            ],
        )

    def test_render_collapse_all(self) -> None:
        self.assertEqual(self._render("--collapse-all").splitlines(), ["  ▸ server {2}", "  ▸ users [1]"])

    def test_render_expand_only_and_select(self) -> None:
        lines = self._render("--expand-only", "ada", "--select", "/users/0/name").splitlines()
        self.assertEqual(lines, ["  ▸ server {2}", "  ▾ users [1]", "    ▾ 0 {1}", '>     · name: "ada"'])

    def test_render_clips_to_max_cols(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.json"
            target.write_text(json.dumps(DOCUMENT), encoding="utf-8")
            stdout = io.StringIO()
            with mock.patch.object(sys, "stdout", stdout):
                cli.main([str(target), "--render", "--max-cols", "5", "--collapse-all"])
        self.assertEqual(stdout.getvalue().splitlines(), ["  ▸ s", "  ▸ u"])


class CliErrorTests(unittest.TestCase):
    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["/definitely/not/here.json", "--render"])
        self.assertIn("Path not found", str(ctx.exception))

    def test_invalid_json_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "bad.json"
            target.write_text("{oops", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(target), "--render"])
        self.assertIn("Invalid JSON", str(ctx.exception))

    def test_non_positive_max_cols_is_rejected(self) -> None:
        with self.assertRaises(SystemExit), mock.patch.object(sys, "stderr", io.StringIO()):
            cli.main(["doc.json", "--max-cols", "0"])

    def test_interactive_mode_requires_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.json"
            target.write_text("[]", encoding="utf-8")
            stdin = mock.Mock()
            stdin.isatty.return_value = False
            with mock.patch.object(sys, "stdin", stdin), self.assertRaises(SystemExit) as ctx:
                cli.main([str(target)])
        self.assertIn("needs a terminal", str(ctx.exception))


class CliInteractiveTests(unittest.TestCase):
    def test_interactive_restores_and_saves_collapsed_uids(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.json"
            target.write_text(json.dumps(DOCUMENT), encoding="utf-8")
            config_path = Path(tmp) / "config.json"
            stdin = mock.Mock()
            stdin.isatty.return_value = True
            sessions = []

            def fake_run_browser(session):
                sessions.append(session)
                return session.view.set_expanded("/users", False)

            with (
                mock.patch("foldview.config.CONFIG_PATH", config_path),
                mock.patch.object(sys, "stdin", stdin),
                mock.patch("foldview.cli.run_browser", side_effect=fake_run_browser),
            ):
                config.save_collapsed_uids(target, ["/server"])
                cli.main([str(target), "--theme", "ocean"])
                saved = config.load_collapsed_uids(target)
                theme_name = config.load_theme_name()

        (session,) = sessions
        self.assertEqual(session.view.collapsed_uids, frozenset({"/server"}))
        self.assertEqual(session.view.get_selected().data.pointer, "/server")
        self.assertEqual(session.theme.name, "ocean")
        self.assertEqual(saved, frozenset({"/server", "/users"}))
        self.assertEqual(theme_name, "ocean")


if __name__ == "__main__":
    unittest.main()
