"""Command-line front door for foldview.

Loads a JSON document into a forest, applies the requested collapse state,
then either prints the visible rows or starts the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from . import config
from .json_forest import item_matcher, json_view_config, load_json_forest
from .render import render_rows, resolve_theme
from .render.highlight import DEFAULT_STYLE
from .render.theme import available_theme_names
from .runtime import BrowserSession, run_browser
from .view import TreeView, build_rows

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldview",
        description="Browse a JSON document as a collapsible tree.",
    )
    parser.add_argument("path", help="JSON file to open.")
    parser.add_argument("--render", action="store_true", help="Print the visible rows and exit.")
    parser.add_argument("--collapse-all", action="store_true", help="Start with every branch collapsed.")
    parser.add_argument(
        "--expand-only",
        metavar="TEXT",
        default=None,
        help="Expand only branches leading to keys or values containing TEXT.",
    )
    parser.add_argument("--select", metavar="POINTER", default=None, help="Select the node at a JSON pointer.")
    parser.add_argument("--style", default=None, help="Pygments style name for scalar values.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--debug", action="store_true", help="Log state transitions to stderr.")
    return parser


def build_view(path: Path, args: argparse.Namespace, style: str | None) -> TreeView[Any]:
    """Load ``path`` and apply the collapse/selection flags from ``args``."""
    try:
        forest = load_json_forest(path)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc

    view = TreeView.initialize(json_view_config(style), forest)
    if args.collapse_all:
        view = view.collapse_all()
    elif args.expand_only:
        view = view.expand_only(item_matcher(args.expand_only))
    elif not args.render:
        saved = config.load_collapsed_uids(path)
        if saved is not None:
            view = view.collapse_uids(saved)
    if args.select is not None:
        view = view.select_by_uid(args.select)
    logger.debug("loaded %s: %r", path, view)
    return view


def render_view(view: TreeView[Any], theme_name: str | None, no_color: bool, max_cols: int) -> str:
    """Return the visible rows of ``view`` as newline-terminated text."""
    theme = resolve_theme(theme_name, no_color=no_color)
    return "".join(f"{line}\n" for line in render_rows(build_rows(view), max_cols, theme))


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and render or browse the requested document."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    no_color = args.no_color or (args.render and not sys.stdout.isatty())
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    style = None
    if not no_color:
        style = args.style or config.load_style_name() or DEFAULT_STYLE
    view = build_view(path, args, style)

    if args.render:
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_view(view, theme_name, no_color, max_cols))
        return

    if not sys.stdin.isatty():
        raise SystemExit("Interactive mode needs a terminal; use --render instead.")
    if view.selection is None:
        view = view.step_selection(1)
    session = BrowserSession(
        view=view,
        matcher_for=item_matcher,
        theme=resolve_theme(theme_name, no_color=no_color),
    )
    final_view = run_browser(session)
    config.save_collapsed_uids(path, final_view.collapsed_uids)
    if args.theme is not None:
        config.save_theme_name(args.theme)
    if args.style is not None:
        config.save_style_name(args.style)


if __name__ == "__main__":
    main()
