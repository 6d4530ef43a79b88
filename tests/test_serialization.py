"""Tests for writing trees as text and reading them back.

The format keeps only values in walk order. Reading it back always fills a
complete binary tree, so round trips are exact for complete trees and
change the shape of sparse ones.
"""

import io
import random
import unittest
from pathlib import Path

import pytest

from bintreelib import (
    BinaryNode,
    Direction,
    InvalidConfigError,
    SerializeConfig,
    deserialize,
    dump_file,
    dumps,
    generate_tree,
    load_file,
    loads,
    serialize,
)


def walk_values(tree):
    return [node.value for node in tree.iter_nodes()]


def shape(tree):
    """(value, depth, direction) per node in walk order."""
    return [(node.value, node.depth, node.direction) for node in tree.iter_nodes()]


class TestSerialize(unittest.TestCase):

    def setUp(self):
        self.root = BinaryNode(5)
        self.root.attach_left(BinaryNode(3))
        self.root.attach_right(BinaryNode(8))

    def test_plain_lines_in_walk_order(self):
        self.assertEqual(dumps(self.root), "5\n8\n3\n")

    def test_stream_form_returns_line_count(self):
        stream = io.StringIO()
        written = serialize(self.root, stream)
        self.assertEqual(written, 3)
        self.assertEqual(stream.getvalue(), "5\n8\n3\n")

    def test_node_method(self):
        stream = io.StringIO()
        self.root.serialize(stream)
        self.assertEqual(stream.getvalue(), "5\n8\n3\n")

    def test_missing_children_are_not_recorded(self):
        root = BinaryNode(1)
        root.attach_right(BinaryNode(2))
        self.assertEqual(dumps(root), "1\n2\n")

    def test_values_written_with_str(self):
        root = BinaryNode(1.5)
        root.attach_left(BinaryNode("text"))
        self.assertEqual(dumps(root), "1.5\ntext\n")

    def test_pretty_prefixes(self):
        # Root: no tabs; right child: one tab; left child: one tab fewer
        self.assertEqual(dumps(self.root, pretty=True), "0: 5\n\t1: 8\n1: 3\n")

    def test_pretty_tabs_are_capped(self):
        root = BinaryNode(0)
        current = root
        for value in range(1, 41):
            child = BinaryNode(value)
            current.attach_right(child)
            current = child

        last_line = dumps(root, pretty=True).splitlines()[-1]
        self.assertEqual(last_line, "\t" * 32 + "40: 40")

    def test_pretty_cap_is_configurable(self):
        root = BinaryNode(0)
        child = BinaryNode(1)
        root.attach_right(child)
        grandchild = BinaryNode(2)
        child.attach_right(grandchild)

        config = SerializeConfig(pretty=True, max_tab_depth=1)
        self.assertEqual(dumps(root, config=config), "0: 0\n\t1: 1\n\t2: 2\n")

    def test_skip_deep_prints_full_levels_then_ellipsis(self):
        self.root.right.attach_right(BinaryNode(9))
        self.root.left.attach_left(BinaryNode(1))

        output = dumps(self.root, skip_deep=1, pretty=True)
        self.assertEqual(output, "0: 5\n\t1: 8\n1: 3\n...\n")

    def test_skip_deep_without_deeper_nodes_has_no_ellipsis(self):
        self.assertEqual(dumps(self.root, skip_deep=1, pretty=True), "0: 5\n\t1: 8\n1: 3\n")

    def test_skip_deep_zero(self):
        self.assertEqual(dumps(self.root, skip_deep=0), "5\n...\n")

    def test_skip_deep_halts_whole_walk(self):
        """The first node past the ceiling ends the walk; it is not written."""
        stream = io.StringIO()
        written = serialize(self.root, stream, skip_deep=1)
        self.assertEqual(written, 3)

        self.root.right.attach_left(BinaryNode(4))
        stream = io.StringIO()
        written = serialize(self.root, stream, skip_deep=1)
        self.assertEqual(written, 3)
        self.assertTrue(stream.getvalue().endswith("...\n"))

    def test_display_config(self):
        config = SerializeConfig.display(skip_deep=1)
        self.assertTrue(config.pretty)
        self.assertEqual(dumps(self.root, config=config), "0: 5\n\t1: 8\n1: 3\n")

    def test_custom_ellipsis(self):
        config = SerializeConfig(skip_deep=0, ellipsis="[more]")
        self.assertEqual(dumps(self.root, config=config), "5\n[more]\n")

    def test_negative_skip_deep_rejected(self):
        with self.assertRaises(InvalidConfigError):
            dumps(self.root, skip_deep=-1)

    def test_multiline_ellipsis_rejected(self):
        with self.assertRaises(InvalidConfigError):
            dumps(self.root, config=SerializeConfig(ellipsis="a\nb"))


class TestDeserialize(unittest.TestCase):

    def test_sample_tree(self):
        root = loads("5\n8\n3\n", int)

        self.assertEqual(root.value, 5)
        self.assertEqual(root.right.value, 8)
        self.assertEqual(root.left.value, 3)
        self.assertEqual(root.right.depth, 1)
        self.assertEqual(root.left.direction, Direction.LEFT)

    def test_fills_levels_right_before_left(self):
        root = loads("\n".join(str(v) for v in range(7)), int)

        self.assertEqual(root.right.value, 1)
        self.assertEqual(root.left.value, 2)
        self.assertEqual(root.right.right.value, 3)
        self.assertEqual(root.right.left.value, 4)
        self.assertEqual(root.left.right.value, 5)
        self.assertEqual(root.left.left.value, 6)
        self.assertEqual(root.left.left.depth, 2)

    def test_partial_last_level(self):
        root = loads("1\n2\n3\n4\n", int)
        self.assertEqual(walk_values(root), [1, 2, 3, 4])
        self.assertEqual(root.right.right.value, 4)
        self.assertIsNone(root.right.left)
        self.assertIsNone(root.left.right)

    def test_blank_lines_are_skipped(self):
        root = loads("\n5\n\n\n8\n\n3\n\n", int)
        self.assertEqual(walk_values(root), [5, 8, 3])

    def test_windows_line_endings(self):
        root = deserialize(["5\r\n", "8\r\n", "3"], int)
        self.assertEqual(walk_values(root), [5, 8, 3])

    def test_empty_input(self):
        self.assertIsNone(loads("", int))
        self.assertIsNone(loads("\n\n", int))

    def test_converter_errors_propagate(self):
        with self.assertRaises(ValueError):
            loads("5\nnot a number\n3\n", int)

    def test_custom_converter(self):
        root = loads("a\nb\n", str.upper)
        self.assertEqual(walk_values(root), ["A", "B"])

    def test_node_classmethod(self):
        root = BinaryNode.deserialize(io.StringIO("5\n8\n3\n"), int)
        self.assertIsInstance(root, BinaryNode)
        self.assertEqual(walk_values(root), [5, 8, 3])

    def test_node_subclass_factory(self):
        class Tagged(BinaryNode):
            __slots__ = ()

        root = Tagged.deserialize(io.StringIO("1\n2\n"), int)
        self.assertIsInstance(root, Tagged)
        self.assertIsInstance(root.right, Tagged)


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 5])
def test_complete_tree_round_trip(complete_tree_factory, depth):
    tree = complete_tree_factory(depth)
    restored = loads(dumps(tree), int)

    assert shape(restored) == shape(tree)


def test_generated_tree_round_trip():
    tree = generate_tree(37, rng=random.Random(11))
    restored = loads(dumps(tree), int)

    assert shape(restored) == shape(tree)


def test_sparse_tree_does_not_round_trip(sparse_tree):
    """Root with only a left child: the next line lands in the right slot."""
    text = dumps(sparse_tree)
    assert text == "1\n2\n3\n"

    restored = loads(text, int)

    assert sparse_tree.right is None
    assert restored.right is not None
    assert restored.right.value == 2
    assert restored.left.value == 3
    assert walk_values(restored) == walk_values(sparse_tree)
    assert shape(restored) != shape(sparse_tree)


def test_pretty_output_is_not_readable(sample_tree):
    with pytest.raises(ValueError):
        loads(dumps(sample_tree, pretty=True), int)


def test_file_round_trip(tmp_path: Path, complete_tree):
    path = tmp_path / "btree.bt"

    assert dump_file(complete_tree, path) == 7
    assert path.read_text(encoding="utf-8") == "0\n1\n2\n3\n4\n5\n6\n"

    restored = load_file(path, int)
    assert shape(restored) == shape(complete_tree)


def test_load_file_accepts_str_path(tmp_path: Path):
    path = tmp_path / "tree.bt"
    path.write_text("1\n2\n3\n", encoding="utf-8")
    assert walk_values(load_file(str(path), int)) == [1, 2, 3]
