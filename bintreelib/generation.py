"""Random tree generation for BinTreeLib.

Trees are grown breadth-first through the same population queue that
deserialization uses, so a generated tree is complete up to its last
level and survives a serialize/deserialize round trip.
"""

import logging
import random
from collections import deque
from typing import Deque, Optional

from .core.node import BinaryNode, PendingSlot
from .config import GenerationConfig
from .planning import ensure_valid

logger = logging.getLogger(__name__)


def generate_tree(max_leaves: int = 1,
                  rng: Optional[random.Random] = None,
                  max_value: int = 255,
                  config: Optional[GenerationConfig] = None) -> BinaryNode:
    """Generate a tree of random integer values.

    The node limit is checked after each node is created, so at least one
    node is produced even when max_leaves is zero or negative.

    Args:
        max_leaves: Number of nodes to create
        rng: Source of randomness (default: random.Random(config.seed))
        max_value: Values are drawn from range(max_value)
        config: Full configuration; overrides max_leaves and max_value

    Returns:
        Root of the generated tree

    Raises:
        InvalidConfigError: If the configuration is inconsistent
    """
    if config is None:
        config = GenerationConfig(max_leaves=max_leaves, max_value=max_value)
    ensure_valid(config)

    if rng is None:
        rng = random.Random(config.seed)

    root: Optional[BinaryNode] = None
    to_generate: Deque[PendingSlot] = deque([PendingSlot.root()])
    generated = 0

    while to_generate:
        slot = to_generate[0]

        node = slot.fill(BinaryNode(rng.randrange(config.max_value)))
        if slot.parent is None:
            root = node

        generated += 1
        if generated >= config.max_leaves:
            break

        to_generate.extend(PendingSlot.children_of(node))
        to_generate.popleft()

    logger.debug("Generated %d node(s)", generated)
    return root
