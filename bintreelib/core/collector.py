"""Data collection strategies for BinTreeLib.

DataCollectors define what information is extracted from nodes during a
walk. Simple collectors return one value per node; accumulating collectors
keep running totals that are read once the walk is over.

Every collect() returns a value that is falsy for accumulating
collectors, so collector.collect can be handed to walk() directly without
stopping it.
"""

import math
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .node import BinaryNode
from .traverser import walk


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: BinaryNode) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from

        Returns:
            Collected data (type depends on collector)
        """
        pass


class FullNodeCollector(DataCollector):
    """Returns the node object itself."""

    def collect(self, node: BinaryNode) -> BinaryNode:
        return node


class ValueCollector(DataCollector):
    """Returns the node payload."""

    def collect(self, node: BinaryNode) -> Any:
        return node.value


class DepthCollector(DataCollector):
    """Returns the depth recorded on the node."""

    def collect(self, node: BinaryNode) -> int:
        return node.depth


class WeightCollector(DataCollector):
    """Returns a node's weight, depth * value."""

    def collect(self, node: BinaryNode) -> Any:
        return node.depth * node.value


class WeightRatioCollector(DataCollector):
    """Returns the weight ratio of the subtree under each node.

    Each call is itself a full walk of the node's subtree.
    """

    def collect(self, node: BinaryNode) -> float:
        descendants = WeightSumCollector()
        walk(node, descendants.collect, include_self=False)

        # Own weight counts in the sum but not in the divisor
        weight_sum = node.depth * node.value + descendants.total
        return weight_sum / max(1, descendants.count)


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function."""

    def __init__(self, collect_func: Callable[[BinaryNode], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: BinaryNode) -> Any:
        return self.collect_func(node)


# Accumulating collectors

class WeightSumCollector(DataCollector):
    """Sums depth * value over every collected node and counts them."""

    def __init__(self):
        self.total = 0
        self.count = 0

    def collect(self, node: BinaryNode) -> bool:
        self.total += node.depth * node.value
        self.count += 1
        return False


class ByteSizeCollector(DataCollector):
    """Sums the fixed in-memory footprint of each node object.

    The payload's own memory is not included; every node of the same class
    contributes the same amount.
    """

    def __init__(self):
        self.total = 0

    def collect(self, node: BinaryNode) -> bool:
        self.total += sys.getsizeof(node)
        return False


@dataclass
class RatioBounds:
    """Running minimum and maximum weight ratio and the nodes holding them.

    The defaults are the +inf / -inf sentinels. A caller that primes other
    bounds (e.g. min_value=99999999.0, max_value=0.0) must be ready for a
    node field to stay None when no ratio beats its bound.
    """

    min_value: float = math.inf
    min_node: Optional[BinaryNode] = None
    max_value: float = -math.inf
    max_node: Optional[BinaryNode] = None

    @property
    def found(self) -> bool:
        """True once both a minimum and a maximum node have been recorded."""
        return self.min_node is not None and self.max_node is not None


class RatioExtremaCollector(DataCollector):
    """Tracks the nodes with the lowest and highest weight ratio.

    Comparisons are strict, so on ties the first node in walk order wins.
    """

    def __init__(self, bounds: Optional[RatioBounds] = None):
        self.bounds = bounds if bounds is not None else RatioBounds()
        self._ratio = WeightRatioCollector()

    def collect(self, node: BinaryNode) -> bool:
        ratio = self._ratio.collect(node)

        if ratio < self.bounds.min_value:
            self.bounds.min_value = ratio
            self.bounds.min_node = node

        if ratio > self.bounds.max_value:
            self.bounds.max_value = ratio
            self.bounds.max_node = node

        return False
