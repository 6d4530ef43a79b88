#!/usr/bin/env python3
"""Demo script for weight ratio analytics in BinTreeLib.

Builds a small tree by hand, generates a larger random one, and shows
the walk order, per-node ratios, the ratio extremes and the text format.
"""

import random
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    BinaryNode,
    DataRequirement,
    collect_tree_data,
    dumps,
    generate_tree,
    get_tree_stats,
    loads,
    min_max_weight_sum_children_ratio,
)


def demo_walk_order():
    """Show the order nodes are visited in."""
    print("\n=== Walk Order ===")

    root = BinaryNode(5)
    root.attach_left(BinaryNode(3))
    root.attach_right(BinaryNode(8))
    root.right.attach_left(BinaryNode(7))

    values = [node.value for node in root.iter_nodes()]
    print(f"With root:    {values}")
    values = [node.value for node in root.iter_nodes(include_self=False)]
    print(f"Without root: {values}")
    return root


def demo_ratios(root: BinaryNode):
    """Show the weight ratio of every node."""
    print("\n=== Weight Ratios ===")

    for node, ratio in collect_tree_data(root, DataRequirement.WEIGHT_RATIO):
        indent = "  " * node.depth
        print(f"{indent}{node.value} (depth: {node.depth}) ratio {ratio:.2f}")

    bounds = min_max_weight_sum_children_ratio(root)
    print(f"\nLowest:  {bounds.min_value:.2f} at node {bounds.min_node.value}")
    print(f"Highest: {bounds.max_value:.2f} at node {bounds.max_node.value}")


def demo_generated_tree(size: int, seed: int):
    """Generate a tree and print its statistics."""
    print(f"\n=== Generated Tree ({size} nodes, seed {seed}) ===")

    tree = generate_tree(size, rng=random.Random(seed))
    stats = get_tree_stats(tree)
    print(f"Nodes: {stats['total_nodes']} ({stats['leaf_nodes']} leaves)")
    for depth in sorted(stats['depths']):
        print(f"  Depth {depth}: {stats['depths'][depth]} nodes")

    print("\nFirst levels:")
    print(dumps(tree, skip_deep=2, pretty=True), end="")
    return tree


def demo_round_trip(tree: BinaryNode):
    """Save a tree as text and read it back."""
    print("\n=== Text Round Trip ===")

    text = dumps(tree)
    restored = loads(text, int)
    same = [n.value for n in restored.iter_nodes()] == [n.value for n in tree.iter_nodes()]
    print(f"{len(text.splitlines())} lines written, values restored in order: {same}")


def main():
    root = demo_walk_order()
    demo_ratios(root)
    tree = demo_generated_tree(20, seed=7)
    demo_round_trip(tree)


if __name__ == "__main__":
    main()
