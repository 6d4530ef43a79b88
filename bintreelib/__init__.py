"""BinTreeLib - Binary Tree Container with Breadth-First Analytics.

BinTreeLib provides a binary tree whose nodes double as tree handles,
a breadth-first walk every other operation is built on, weight ratio
analytics, and a line-oriented text format for saving and loading trees.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import BinaryNode, dumps, loads

    root = BinaryNode(5)
    root.attach_left(BinaryNode(3))
    root.attach_right(BinaryNode(8))

    text = dumps(root)          # "5\\n8\\n3\\n"
    copy = loads(text, int)
━━━━━━━━━━━━━━━━━━━━━━━━━━

The text format only records values, in walk order. Reading it back always
fills a complete binary tree, so only complete trees survive a round trip.
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryNode, BinaryTree, Direction, DepthOverflowError, PendingSlot, MAX_DEPTH
from .core.traverser import TreeTraverser, BreadthFirstTraverser, walk
from .core.collector import (
    DataCollector,
    FullNodeCollector,
    ValueCollector,
    DepthCollector,
    WeightCollector,
    WeightRatioCollector,
    CustomCollector,
    WeightSumCollector,
    ByteSizeCollector,
    RatioExtremaCollector,
)

# Configuration and planning
from .config import DataRequirement, TraversalConfig, SerializeConfig, GenerationConfig
from .planning import ExecutionPlan, InvalidConfigError

# Analytics and serialization
from .analytics import RatioBounds, weight_sum_children_ratio, min_max_weight_sum_children_ratio
from .serialization import serialize, deserialize, dumps, loads, dump_file, load_file
from .generation import generate_tree
from .profiling import ProfileResult, profile_section

# High-level API
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_byte_size,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
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
    "RatioExtremaCollector",
    # Config
    "DataRequirement",
    "TraversalConfig",
    "SerializeConfig",
    "GenerationConfig",
    "ExecutionPlan",
    "InvalidConfigError",
    # Analytics and serialization
    "RatioBounds",
    "weight_sum_children_ratio",
    "min_max_weight_sum_children_ratio",
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    "dump_file",
    "load_file",
    "generate_tree",
    "ProfileResult",
    "profile_section",
    # API
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_byte_size",
    "get_tree_stats",
]
