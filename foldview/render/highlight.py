"""Pygments highlighting for scalar values shown in tree rows."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=style)


_LEXER = JsonLexer()


def highlight_scalar(text: str, style: str = DEFAULT_STYLE) -> str:
    """Colorize one JSON scalar literal for terminal output.

    Pygments appends a newline to its output; it is stripped so the result
    can be embedded in a row.
    """
    if not text:
        return text
    formatter = _formatter_for_style(normalize_style(style))
    return highlight(text, _LEXER, formatter).rstrip("\n")
