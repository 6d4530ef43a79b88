"""Core abstractions for BinTreeLib.

This package contains the node itself, the breadth-first traverser every
other operation is built on, and the data collectors fed by it.
"""

from .node import BinaryNode, BinaryTree, Direction, DepthOverflowError, PendingSlot, MAX_DEPTH
from .traverser import TreeTraverser, BreadthFirstTraverser, walk
from .collector import (
    DataCollector,
    FullNodeCollector,
    ValueCollector,
    DepthCollector,
    WeightCollector,
    WeightRatioCollector,
    CustomCollector,
    WeightSumCollector,
    ByteSizeCollector,
    RatioBounds,
    RatioExtremaCollector,
)

__all__ = [
    "BinaryNode",
    "BinaryTree",
    "Direction",
    "DepthOverflowError",
    "PendingSlot",
    "MAX_DEPTH",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "walk",
    "DataCollector",
    "FullNodeCollector",
    "ValueCollector",
    "DepthCollector",
    "WeightCollector",
    "WeightRatioCollector",
    "CustomCollector",
    "WeightSumCollector",
    "ByteSizeCollector",
    "RatioBounds",
    "RatioExtremaCollector",
]
