"""Terminal rendering of visible tree rows."""

from __future__ import annotations

from .ansi import build_status_line, clip_ansi_line, format_row, render_rows, visible_window
from .highlight import highlight_scalar, normalize_style
from .theme import DEFAULT_THEME, PLAIN_THEME, UITheme, available_theme_names, resolve_theme

__all__ = [
    "format_row",
    "render_rows",
    "clip_ansi_line",
    "build_status_line",
    "visible_window",
    "highlight_scalar",
    "normalize_style",
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
