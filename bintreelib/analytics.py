"""Weight ratio analytics for BinTreeLib.

A node's weight is depth * value. The weight ratio of a node is the summed
weight of the node and all its descendants divided by the number of
descendants (the node itself not counted, divisor at least 1). A leaf's
ratio is therefore its own weight.
"""

from typing import Optional

from .core.node import BinaryNode
from .core.traverser import walk
from .core.collector import RatioBounds, RatioExtremaCollector, WeightRatioCollector


def weight_sum_children_ratio(node: BinaryNode) -> float:
    """Weight ratio of the subtree rooted at node.

    Example:
        >>> root = BinaryNode(5)
        >>> root.attach_left(BinaryNode(3))
        >>> root.attach_right(BinaryNode(8))
        >>> weight_sum_children_ratio(root)   # (0*5 + 1*3 + 1*8) / 2
        5.5
    """
    return WeightRatioCollector().collect(node)


def min_max_weight_sum_children_ratio(tree: BinaryNode,
                                      bounds: Optional[RatioBounds] = None) -> RatioBounds:
    """Find the nodes with the lowest and highest weight ratio.

    Every node of the tree, root included, is scored with
    weight_sum_children_ratio(), which walks that node's own subtree, so the
    cost is quadratic in the size of the tree.

    The given bounds are updated in place and never reset. Passing bounds
    primed with something other than +inf / -inf may leave min_node or
    max_node as None; check RatioBounds.found.

    Args:
        tree: Root of the tree to search
        bounds: Bounds to update (default: fresh +inf / -inf sentinels)

    Returns:
        The updated bounds
    """
    collector = RatioExtremaCollector(bounds)
    walk(tree, collector.collect)
    return collector.bounds


__all__ = [
    "RatioBounds",
    "weight_sum_children_ratio",
    "min_max_weight_sum_children_ratio",
]
