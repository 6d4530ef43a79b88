"""Configuration system for BinTreeLib.

This module defines how users specify what a traversal collects, how a
tree is written out as text and how random trees are generated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    FULL_NODE = "full"              # The node object itself
    VALUE = "value"                 # Node payload
    DEPTH = "depth"                 # Recorded depth
    WEIGHT = "weight"               # depth * value
    WEIGHT_RATIO = "weight_ratio"   # Weight sum / descendant count (quadratic)
    CUSTOM = "custom"               # User-defined collection


@dataclass
class TraversalConfig:
    """Complete configuration for a breadth-first traversal.

    The ExecutionPlan validates this configuration and drives the walk.
    Both max_nodes and stop_when end the entire walk; neither prunes a
    single subtree.
    """

    include_self: bool = True

    # Data collection
    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None  # DataCollector instance

    # Early stop
    max_nodes: Optional[int] = None
    stop_when: Optional[Callable[[Any], bool]] = None  # Checked after collecting

    @classmethod
    def descendants_only(cls, **kwargs) -> 'TraversalConfig':
        """Create config that skips the starting node."""
        return cls(include_self=False, **kwargs)

    @classmethod
    def weights(cls, include_self: bool = True) -> 'TraversalConfig':
        """Create config that collects depth * value per node."""
        return cls(include_self=include_self, data_requirements=DataRequirement.WEIGHT)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        if self.stop_when is not None and not callable(self.stop_when):
            errors.append("stop_when must be callable")

        return errors


@dataclass
class SerializeConfig:
    """How a tree is written as text.

    Only storage() output can be read back by deserialize(); pretty output
    and depth truncation are for display.
    """

    skip_deep: Optional[int] = None   # Stop once a node deeper than this is reached
    pretty: bool = False              # Tabs and "<depth>: " prefix
    max_tab_depth: int = 32
    ellipsis: str = "..."

    @classmethod
    def storage(cls) -> 'SerializeConfig':
        """Plain one-value-per-line format, readable by deserialize()."""
        return cls()

    @classmethod
    def display(cls, skip_deep: Optional[int] = 6) -> 'SerializeConfig':
        """Indented console format truncated after skip_deep levels."""
        return cls(skip_deep=skip_deep, pretty=True)

    def validate(self) -> List[str]:
        errors = []

        if self.skip_deep is not None and self.skip_deep < 0:
            errors.append("skip_deep cannot be negative")

        if self.max_tab_depth < 0:
            errors.append("max_tab_depth cannot be negative")

        if "\n" in self.ellipsis:
            errors.append("ellipsis must fit on a single line")

        return errors


@dataclass
class GenerationConfig:
    """Parameters for random tree generation."""

    max_leaves: int = 1
    max_value: int = 255          # Values are drawn from range(max_value)
    seed: Optional[int] = None    # None = nondeterministic

    def validate(self) -> List[str]:
        errors = []

        if self.max_value <= 0:
            errors.append("max_value must be positive")

        return errors
