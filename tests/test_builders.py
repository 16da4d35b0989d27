"""Tests for tree construction and serialisation helpers."""

import unittest

from bintreemetrics import (
    BinaryNode,
    TreeSyntaxError,
    build_tree_from_level_order,
    count,
    format_tree,
    height,
    level_order_values,
    mirror,
    parse_tree,
    render_tree,
)
from bintreemetrics.testing import chain, classroom_tree


class TestBraceNotation(unittest.TestCase):
    """parse_tree / format_tree."""

    def test_classroom_tree(self):
        root = parse_tree("1{2{4,5},3{6,7}}")

        self.assertEqual(root.value, 1)
        self.assertEqual(root.left.value, 2)
        self.assertEqual(root.right.right.value, 7)
        self.assertEqual(format_tree(root), "1{2{4,5},3{6,7}}")
        self.assertEqual(format_tree(classroom_tree()), "1{2{4,5},3{6,7}}")

    def test_single_child_forms(self):
        left_only = parse_tree("1{2}")
        right_only = parse_tree("1{,3}")

        self.assertEqual(left_only.left.value, 2)
        self.assertIsNone(left_only.right)
        self.assertIsNone(right_only.left)
        self.assertEqual(right_only.right.value, 3)
        self.assertEqual(format_tree(right_only), "1{,3}")

    def test_whitespace_and_signs(self):
        root = parse_tree("  -5 { 2 , +3 }\n")
        self.assertEqual(format_tree(root), "-5{2,3}")

    def test_empty_braces_are_a_leaf(self):
        self.assertEqual(format_tree(parse_tree("7{}")), "7")
        self.assertEqual(format_tree(parse_tree("7{,}")), "7")
        self.assertEqual(format_tree(parse_tree("7{2,}")), "7{2}")

    def test_absent_tree(self):
        self.assertIsNone(parse_tree(""))
        self.assertIsNone(parse_tree("   "))
        self.assertEqual(format_tree(None), "")

    def test_syntax_errors(self):
        cases = {
            "1{2,3,4}": 5,
            "1{,,2}": 3,
            "{": 0,
            "1 2": 2,
            "1{a}": 2,
            "1{2}}": 4,
            "1{2": 3,
        }
        for text, position in cases.items():
            with self.subTest(text=text):
                with self.assertRaises(TreeSyntaxError) as ctx:
                    parse_tree(text)
                self.assertEqual(ctx.exception.position, position)
                self.assertIsInstance(ctx.exception, ValueError)

    def test_deep_round_trip(self):
        text = format_tree(chain(20_000))
        root = parse_tree(text)

        self.assertEqual(height(root), 20_000)
        self.assertEqual(format_tree(root), text)


class TestLevelOrder(unittest.TestCase):

    def test_build_and_read_back(self):
        values = [1, 2, 3, None, 5]
        root = build_tree_from_level_order(values)

        self.assertEqual(format_tree(root), "1{2{,5},3}")
        self.assertEqual(level_order_values(root), values)

    def test_empty_inputs(self):
        self.assertIsNone(build_tree_from_level_order([]))
        self.assertIsNone(build_tree_from_level_order([None, 1]))
        self.assertEqual(level_order_values(None), [])

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            build_tree_from_level_order([1, "x"])
        with self.assertRaises(TypeError):
            build_tree_from_level_order([True])

    def test_accepts_any_iterable(self):
        root = build_tree_from_level_order(iter(range(1, 8)))
        self.assertEqual(format_tree(root), "1{2{4,5},3{6,7}}")


class TestMirror(unittest.TestCase):

    def test_mirror_swaps_children(self):
        original = classroom_tree()
        flipped = mirror(original)

        self.assertEqual(format_tree(flipped), "1{3{7,6},2{5,4}}")
        self.assertEqual(format_tree(original), "1{2{4,5},3{6,7}}")

    def test_mirror_twice_is_identity(self):
        root = parse_tree("1{2{,4},3{5}}")
        self.assertEqual(format_tree(mirror(mirror(root))), format_tree(root))

    def test_mirror_builds_new_nodes(self):
        root = classroom_tree()
        self.assertIsNot(mirror(root), root)
        self.assertIsNone(mirror(None))

    def test_mirror_deep_chain(self):
        flipped = mirror(chain(30_000))
        self.assertIsNone(flipped.left)
        self.assertEqual(count(flipped), 30_000)


class TestRender(unittest.TestCase):

    def test_render_classroom(self):
        self.assertEqual(render_tree(classroom_tree()), "1\n2 3\n4 5 6 7")

    def test_render_marks_missing_children(self):
        self.assertEqual(render_tree(parse_tree("1{,3{6}}")), "1\n· 3\n6 ·")

    def test_render_empty(self):
        self.assertEqual(render_tree(None), "<empty>")
        self.assertEqual(render_tree(BinaryNode(4)), "4")
