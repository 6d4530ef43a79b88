"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the ExecutionPlan and collectors for
ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .core.node import BinaryNode
from .core.collector import DataCollector
from .config import TraversalConfig, DataRequirement
from .planning import ExecutionPlan


def traverse_tree(
    root: BinaryNode,
    include_self: bool = True,
    max_nodes: Optional[int] = None,
    stop_when: Optional[Callable[[BinaryNode], bool]] = None,
) -> Iterator[BinaryNode]:
    """Simple interface for breadth-first traversal.

    Args:
        root: Starting node for traversal
        include_self: Whether root itself is yielded
        max_nodes: Stop after this many nodes
        stop_when: Stop after the first node for which this returns True

    Yields:
        Nodes in walk order

    Example:
        >>> for node in traverse_tree(root, include_self=False):
        ...     print(node.depth, node.value)
    """
    config = TraversalConfig(
        include_self=include_self,
        max_nodes=max_nodes,
        stop_when=stop_when,
    )

    plan = ExecutionPlan(config)
    for node, _ in plan.execute(root):
        yield node


def collect_tree_data(
    root: BinaryNode,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    custom_collector: Optional[DataCollector] = None,
    **kwargs
) -> Iterator[Tuple[BinaryNode, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but yields both nodes and collected data.

    Args:
        root: Starting node for traversal
        data_requirement: What data to collect
        custom_collector: Collector used with DataRequirement.CUSTOM
        **kwargs: Additional TraversalConfig fields (include_self, max_nodes, stop_when)

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> for node, ratio in collect_tree_data(root, DataRequirement.WEIGHT_RATIO):
        ...     print(f"{node.value}: {ratio:.2f}")
    """
    config = TraversalConfig(
        data_requirements=data_requirement,
        custom_collector=custom_collector,
        **kwargs
    )

    plan = ExecutionPlan(config)
    yield from plan.execute(root)


def count_nodes(root: BinaryNode, **kwargs) -> int:
    """Count nodes reached by a traversal (see traverse_tree for options)."""
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: BinaryNode,
    predicate: Callable[[BinaryNode], bool],
    **kwargs
) -> Iterator[BinaryNode]:
    """Find nodes that match a predicate, in walk order.

    Example:
        >>> evens = list(find_nodes(root, lambda n: n.value % 2 == 0))
    """
    for node in traverse_tree(root, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(root: BinaryNode, **kwargs) -> Iterator[BinaryNode]:
    """Get all leaf nodes (nodes with no children), in walk order."""
    return find_nodes(root, lambda node: node.is_leaf, **kwargs)


def get_byte_size(root: BinaryNode) -> int:
    """Fixed per-node footprint summed over the whole tree, root included."""
    return root.byte_size()


def get_tree_stats(root: BinaryNode, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Depths are the ones recorded on the nodes, which may be stale for
    subtrees that were re-attached by hand.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in collect_tree_data(root, DataRequirement.DEPTH, **kwargs):
        stats['total_nodes'] += 1

        if node.is_leaf:
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
