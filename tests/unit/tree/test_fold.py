"""Evaluation-order tests for the generic tree fold."""

from __future__ import annotations

import unittest

from foldview.tree import DEFAULT_FOLD_OPTIONS, FoldOptions, Node, fold_forest, fold_tree


def _sample_tree() -> Node[str]:
    return Node("a", (Node("b", (Node("c"),)), Node("d")))


class FoldOrderTests(unittest.TestCase):
    def test_callbacks_run_pre_children_post_with_sibling_combines(self) -> None:
        events: list[str] = []

        def pre(state: int, node: Node[str]) -> int:
            events.append(f"pre {node.data} {state}")
            return state + 1

        def post(state_from_parent: int, node: Node[str], after_children: int) -> int:
            events.append(f"post {node.data} {state_from_parent}->{after_children}")
            return after_children

        def combine(before: int, node: Node[str], after: int) -> int:
            events.append(f"combine {node.data} {before},{after}")
            return after

        result = fold_tree(FoldOptions(pre, post, combine), 0, _sample_tree())

        self.assertEqual(
            events,
            [
                "pre a 0",
                "pre b 1",
                "pre c 2",
                "post c 2->3",
                "combine c 2,3",
                "post b 1->3",
                "combine b 1,3",
                "pre d 3",
                "post d 3->4",
                "combine d 3,4",
                "post a 0->4",
            ],
        )
        self.assertEqual(result, 4)

    def test_leaf_post_visit_receives_pre_visit_result(self) -> None:
        seen: list[tuple[str, str]] = []

        def post(state_from_parent: str, _node: Node[str], after_children: str) -> str:
            seen.append((state_from_parent, after_children))
            return after_children

        options = FoldOptions(pre_visit=lambda state, node: state + node.data, post_visit=post)
        self.assertEqual(fold_tree(options, ">", Node("x")), ">x")
        self.assertEqual(seen, [(">", ">x")])

    def test_default_options_pass_state_through(self) -> None:
        self.assertEqual(fold_tree(DEFAULT_FOLD_OPTIONS, "seed", _sample_tree()), "seed")
        self.assertEqual(fold_forest(DEFAULT_FOLD_OPTIONS, 7, [_sample_tree(), Node("z")]), 7)

    def test_fold_forest_combines_roots_left_to_right(self) -> None:
        options = FoldOptions(
            pre_visit=lambda state, node: state,
            combine_sibling=lambda before, node, after: before + [node.data],
        )
        result = fold_forest(options, [], [Node("r1", (Node("x"),)), Node("r2")])
        self.assertEqual(result, ["r1", "r2"])

    def test_fold_forest_of_empty_sequence_returns_initial_state(self) -> None:
        self.assertEqual(fold_forest(DEFAULT_FOLD_OPTIONS, "init", []), "init")


class NodeTests(unittest.TestCase):
    def test_children_are_stored_as_tuple(self) -> None:
        node = Node("p", [Node("c")])
        self.assertIsInstance(node.children, tuple)
        self.assertFalse(node.is_leaf)
        self.assertTrue(node.children[0].is_leaf)


if __name__ == "__main__":
    unittest.main()
