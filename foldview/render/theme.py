"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows and the status line. Highlighting of
scalar values uses a separate Pygments style name.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the row renderer."""

    name: str
    reset: str
    reverse: str
    marker: str
    branch: str
    leaf: str
    status: str
    filter_query: str
    filter_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    marker="\033[38;5;44m",
    branch="\033[1;34m",
    leaf="\033[38;5;252m",
    status="\033[2m",
    filter_query="\033[1;38;5;81m",
    filter_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    marker="\033[38;5;39m",
    branch="\033[1;38;5;45m",
    leaf="\033[38;5;153m",
    status="\033[2;38;5;31m",
    filter_query="\033[1;38;5;45m",
    filter_hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    marker="",
    branch="",
    leaf="",
    status="",
    filter_query="",
    filter_hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
