"""ANSI row formatting and frame composition for the terminal host.

Rows arrive as ``TreeRow`` values whose ``rendered`` field is already a
label string; this module only adds indentation, bullets, selection, and
width clipping.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence
from typing import Any

from ..view import ExpansionState, TreeRow
from .theme import DEFAULT_THEME, UITheme

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
INDENT = "  "

_BULLETS: dict[ExpansionState, str] = {
    ExpansionState.EXPANDED: "▾ ",
    ExpansionState.COLLAPSED: "▸ ",
    ExpansionState.LEAF: "· ",
}


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward the width.
    A clipped line that carried styling is closed with a reset so colors
    do not bleed into whatever is printed next.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    styled = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                styled = True
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            break
        out.append(text[i])
        col += w
        i += 1
    if i < n and styled:
        out.append("\033[0m")
    return "".join(out)


def selected_with_ansi(text: str, theme: UITheme = DEFAULT_THEME) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text
    # Keep reverse video active across resets embedded in the label.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def format_row(row: TreeRow[Any], theme: UITheme = DEFAULT_THEME) -> str:
    """Render one visible row as indented, bulleted, ANSI-styled text."""
    indent = INDENT * row.level
    bullet = f"{theme.marker}{_BULLETS[row.expansion]}{theme.reset}"
    label = str(row.rendered)
    if row.expansion is ExpansionState.LEAF:
        text = f"{indent}{bullet}{theme.leaf}{label}{theme.reset}"
    else:
        text = f"{indent}{bullet}{theme.branch}{label}{theme.reset}"
    if not theme.reverse:
        # Without reverse video the cursor gets its own gutter column.
        return ("> " if row.selected else "  ") + text
    if row.selected:
        return selected_with_ansi(text, theme)
    return text


def visible_window(selected_index: int | None, start: int, height: int, total: int) -> int:
    """Return a scroll start that keeps ``selected_index`` inside ``height`` rows."""
    max_start = max(0, total - max(1, height))
    if selected_index is None:
        return max(0, min(start, max_start))
    if selected_index < start:
        start = selected_index
    elif selected_index >= start + height:
        start = selected_index - height + 1
    return max(0, min(start, max_start))


def render_rows(
    rows: Sequence[TreeRow[Any]],
    width: int,
    theme: UITheme = DEFAULT_THEME,
    start: int = 0,
    height: int | None = None,
) -> list[str]:
    """Format a window of rows, each clipped to ``width`` columns."""
    end = len(rows) if height is None else start + max(0, height)
    return [clip_ansi_line(format_row(row, theme), width) for row in rows[start:end]]


def build_status_line(left_text: str, width: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Return a dimmed status line padded to ``width``."""
    clipped = clip_ansi_line(left_text, width)
    padding = " " * max(0, width - display_width(clipped))
    return f"{theme.status}{clipped}{padding}{theme.reset}"
