"""Key-name decoding and node-event dispatch tests."""

from __future__ import annotations

import unittest

from foldview.input import Collapse, Expand, KeyAction, Select, apply_event, decode_key_name, key_action, key_direction
from foldview.tree import Node
from foldview.view import Direction, TreeView, TreeViewConfig


def _view() -> TreeView[str]:
    forest = [Node("a", (Node("b"), Node("c", (Node("d"),))))]
    return TreeView.initialize(TreeViewConfig(uid_of=lambda node: node.data), forest)


class DecodeKeyNameTests(unittest.TestCase):
    def test_arrow_names(self) -> None:
        self.assertEqual(decode_key_name("ArrowLeft"), Direction.LEFT)
        self.assertEqual(decode_key_name("ArrowRight"), Direction.RIGHT)
        self.assertEqual(decode_key_name("ArrowUp"), Direction.UP)
        self.assertEqual(decode_key_name("ArrowDown"), Direction.DOWN)

    def test_everything_else_is_other(self) -> None:
        for name in ("Enter", "a", "", "arrowup", "Left"):
            self.assertEqual(decode_key_name(name), Direction.OTHER, name)


class ApplyEventTests(unittest.TestCase):
    def test_expand_collapse_select(self) -> None:
        view = apply_event(_view(), Collapse("c"))
        self.assertEqual([item.data for item in view.get_visible_annotated_nodes()], ["a", "b", "c"])
        view = apply_event(view, Select("c"))
        self.assertEqual(view.get_selected().data, "c")
        view = apply_event(view, Expand("c"))
        self.assertEqual(len(view.get_visible_annotated_nodes()), 4)

    def test_direction_events(self) -> None:
        view = apply_event(_view(), decode_key_name("ArrowDown"))
        self.assertEqual(view.get_selected().data, "a")
        view = apply_event(view, decode_key_name("ArrowLeft"))
        self.assertEqual([item.data for item in view.get_visible_annotated_nodes()], ["a"])
        self.assertIs(apply_event(view, decode_key_name("x")), view)


class KeymapTests(unittest.TestCase):
    def test_arrows_and_vi_letters_share_directions(self) -> None:
        for arrow, letter in (("ArrowUp", "k"), ("ArrowDown", "j"), ("ArrowLeft", "h"), ("ArrowRight", "l")):
            self.assertEqual(key_direction(arrow), key_direction(letter))
            self.assertIsNot(key_direction(arrow), Direction.OTHER)

    def test_vi_aliases_can_be_disabled(self) -> None:
        self.assertEqual(key_direction("j", vi_aliases=False), Direction.OTHER)
        self.assertEqual(key_direction("ArrowDown", vi_aliases=False), Direction.DOWN)

    def test_actions(self) -> None:
        self.assertEqual(key_action("Enter"), KeyAction.TOGGLE)
        self.assertEqual(key_action(" "), KeyAction.TOGGLE)
        self.assertEqual(key_action("/"), KeyAction.OPEN_FILTER)
        self.assertEqual(key_action("Ctrl+C"), KeyAction.QUIT)
        self.assertIsNone(key_action("x"))
        self.assertIsNone(key_action("ArrowUp"))


if __name__ == "__main__":
    unittest.main()
