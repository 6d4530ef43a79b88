"""Execution planning for BinTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
walk, pairing every visited node with the data its collector produced.
"""

import logging
from typing import Any, Iterator, Tuple

from .core.node import BinaryNode
from .core.traverser import BreadthFirstTraverser, TreeTraverser
from .core.collector import (
    DataCollector,
    FullNodeCollector,
    ValueCollector,
    DepthCollector,
    WeightCollector,
    WeightRatioCollector,
)
from .config import TraversalConfig, DataRequirement

logger = logging.getLogger(__name__)


class InvalidConfigError(ValueError):
    """Raised when a configuration object fails validation."""
    pass


def ensure_valid(config: Any) -> None:
    """Raise InvalidConfigError if config.validate() reports any problem."""
    errors = config.validate()
    if errors:
        raise InvalidConfigError(
            f"Invalid {type(config).__name__}: {'; '.join(errors)}"
        )


class ExecutionPlan:
    """Validated execution plan for a tree walk.

    The plan is the bridge between user intent (TraversalConfig) and
    execution. The configuration is checked up front so that no node is
    visited under an inconsistent configuration.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration

        Raises:
            InvalidConfigError: If config is inconsistent
        """
        ensure_valid(config)

        self.config = config
        self.traverser: TreeTraverser = BreadthFirstTraverser()
        self.collector = self._select_collector()

        # Track execution state
        self.nodes_processed = 0
        self.stopped_early = False

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.DEPTH: DepthCollector,
            DataRequirement.WEIGHT: WeightCollector,
            DataRequirement.WEIGHT_RATIO: WeightRatioCollector,
        }

        return collector_map[self.config.data_requirements]()

    def execute(self, root: BinaryNode) -> Iterator[Tuple[BinaryNode, Any]]:
        """Walk the tree and yield (node, collected_data) pairs.

        Yields:
            Tuples of (node, collected_data) in breadth-first walk order
        """
        self.nodes_processed = 0
        self.stopped_early = False
        max_nodes = self.config.max_nodes
        stop_when = self.config.stop_when

        for node in self.traverser.traverse(root, self.config.include_self):
            if max_nodes is not None and self.nodes_processed >= max_nodes:
                self.stopped_early = True
                break

            data = self.collector.collect(node)
            self.nodes_processed += 1
            yield (node, data)

            if stop_when is not None and stop_when(node):
                self.stopped_early = True
                break

        logger.debug(
            "Walk from %r visited %d node(s)%s",
            root, self.nodes_processed, " (stopped early)" if self.stopped_early else ""
        )

    def get_execution_summary(self) -> dict:
        """Describe the plan and its last run, for debugging."""
        return {
            'include_self': self.config.include_self,
            'data_requirements': self.config.data_requirements.value,
            'collector': type(self.collector).__name__,
            'max_nodes': self.config.max_nodes,
            'nodes_processed': self.nodes_processed,
            'stopped_early': self.stopped_early,
        }
