"""Interactive terminal browser for a ``TreeView``.

``BrowserSession`` holds everything the loop needs besides the terminal, so
key handling and frame composition can be driven directly in tests.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .input import KeyAction, key_action, key_direction
from .input.read import read_key
from .render import build_status_line, render_rows, visible_window
from .render.theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController
from .view import Direction, ExpansionState, TreeView, build_rows

logger = logging.getLogger(__name__)


@dataclass
class BrowserSession:
    """Key handling and screen composition around one tree view."""

    view: TreeView[Any]
    matcher_for: Callable[[str], Callable[[Any], bool]]
    theme: UITheme = DEFAULT_THEME
    tree_start: int = 0
    filter_editing: bool = False
    filter_query: str = ""
    running: bool = True
    _collapsed_before_filter: frozenset[Any] | None = None

    def _replace_view(self, view: TreeView[Any]) -> bool:
        if view is not self.view:
            logger.debug("view transition: %r", view)
        self.view = view
        return True

    def _move(self, direction: Direction) -> bool:
        return self._replace_view(self.view.handle_direction(direction))

    def _toggle_selected(self) -> bool:
        selected = self.view.get_selected()
        if selected is None or selected.is_leaf:
            return False
        collapsed = self.view.expansion_state(selected) is ExpansionState.COLLAPSED
        uid = self.view.config.uid_of(selected.node)
        return self._replace_view(self.view.set_expanded(uid, collapsed))

    def _quit(self) -> bool:
        self.running = False
        return True

    def _open_filter(self) -> bool:
        if self._collapsed_before_filter is None:
            self._collapsed_before_filter = self.view.collapsed_uids
        self.filter_editing = True
        return True

    def _clear_filter(self) -> bool:
        if self._collapsed_before_filter is None:
            return False
        self._replace_view(self.view.collapse_uids(self._collapsed_before_filter))
        self._collapsed_before_filter = None
        self.filter_editing = False
        self.filter_query = ""
        return True

    def _apply_filter_query(self) -> None:
        if not self.filter_query:
            restore = self._collapsed_before_filter or frozenset()
            self._replace_view(self.view.collapse_uids(restore))
            return
        self._replace_view(self.view.expand_only(self.matcher_for(self.filter_query)))

    def _handle_filter_key(self, key: str) -> bool:
        if key == "Escape":
            return self._clear_filter()
        if key == "Enter":
            self.filter_editing = False
            return True
        if key == "Backspace":
            self.filter_query = self.filter_query[:-1]
            self._apply_filter_query()
            return True
        direction = key_direction(key, vi_aliases=False)
        if direction is not Direction.OTHER:
            return self._move(direction)
        if len(key) == 1 and key.isprintable():
            self.filter_query += key
            self._apply_filter_query()
            return True
        return key_action(key) is KeyAction.QUIT and self._quit()

    def handle_key(self, key: str) -> bool:
        """Apply one key; returns whether anything was handled."""
        if not key:
            return False
        if self.filter_editing:
            return self._handle_filter_key(key)
        direction = key_direction(key)
        if direction is not Direction.OTHER:
            return self._move(direction)
        action = key_action(key)
        if action is None:
            return False
        handlers: dict[KeyAction, Callable[[], bool]] = {
            KeyAction.TOGGLE: self._toggle_selected,
            KeyAction.EXPAND_ALL: lambda: self._replace_view(self.view.expand_all()),
            KeyAction.COLLAPSE_ALL: lambda: self._replace_view(self.view.collapse_all()),
            KeyAction.OPEN_FILTER: self._open_filter,
            KeyAction.CLEAR_FILTER: self._clear_filter,
            KeyAction.QUIT: self._quit,
        }
        return handlers[action]()

    def _status_text(self, row_count: int) -> str:
        if self.filter_editing or self.filter_query:
            hint = "enter keep · esc clear" if self.filter_editing else "/ edit · esc clear"
            return (
                f"{self.theme.filter_query}/{self.filter_query}{self.theme.reset}"
                f"  {self.theme.filter_hint}{hint}{self.theme.reset}"
            )
        total = len(self.view.get_annotated_nodes())
        return f"{row_count}/{total} rows · ←→ fold · E/C all · / filter · q quit"

    def frame(self, width: int, height: int) -> list[str]:
        """Compose ``height`` screen lines: tree rows then a status line."""
        rows = build_rows(self.view)
        tree_height = max(1, height - 1)
        selection = self.view.selection
        selected_index = selection.index if selection is not None else None
        self.tree_start = visible_window(selected_index, self.tree_start, tree_height, len(rows))
        lines = render_rows(rows, width, self.theme, start=self.tree_start, height=tree_height)
        lines.extend("" for _ in range(tree_height - len(lines)))
        lines.append(build_status_line(self._status_text(len(rows)), width, self.theme))
        return lines


def run_browser(session: BrowserSession) -> TreeView[Any]:
    """Run the raw-mode key loop until quit; returns the final view."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        while session.running:
            width, height = terminal.size()
            terminal.write_frame(session.frame(width, height))
            key = read_key(stdin_fd)
            if not key:
                break
            session.handle_key(key)
    return session.view
