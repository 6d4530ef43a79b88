"""Shared fixtures for the BinTreeLib test suite."""

from collections import deque

import pytest

from bintreelib import BinaryNode


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests (excluded by run_tests.py)")


def build_complete_tree(depth: int) -> BinaryNode:
    """Build a complete tree whose values are 0, 1, 2, ... in walk order.

    Children are created right before left, the same order in which a
    breadth-first walk expands them.
    """
    total = 2 ** (depth + 1) - 1
    root = BinaryNode(0)
    queue = deque([root])
    next_value = 1

    while queue and next_value < total:
        node = queue.popleft()
        right = BinaryNode(next_value)
        left = BinaryNode(next_value + 1)
        node.attach_right(right)
        node.attach_left(left)
        queue.extend([right, left])
        next_value += 2

    return root


@pytest.fixture
def sample_tree() -> BinaryNode:
    """Root 5 with left child 3 and right child 8.

    Structure:
          5
         / \\
        3   8
    """
    root = BinaryNode(5)
    root.attach_left(BinaryNode(3))
    root.attach_right(BinaryNode(8))
    return root


@pytest.fixture
def complete_tree() -> BinaryNode:
    """Complete tree of depth 2 with values 0..6 in walk order.

    Structure:
              0
           /     \\
          2       1
         / \\     / \\
        6   5   4   3
    """
    return build_complete_tree(2)


@pytest.fixture
def complete_tree_factory():
    return build_complete_tree


@pytest.fixture
def sparse_tree() -> BinaryNode:
    """Root 1 with only a left child 2, which has only a left child 3."""
    root = BinaryNode(1)
    middle = BinaryNode(2)
    root.attach_left(middle)
    middle.attach_left(BinaryNode(3))
    return root
