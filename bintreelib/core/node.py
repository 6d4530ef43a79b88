"""BinaryNode for BinTreeLib.

A node doubles as a tree handle: the root of a tree is simply a node that
has no parent. Each node exclusively owns up to two children and records
its own depth and the side of its parent it hangs from.

Depth is bookkeeping, not a computed property. It is written once, at the
moment a node is attached, and is never propagated down into an attached
subtree. A subtree that is re-attached somewhere shallower keeps the depths
of its original position below the attached node itself.
"""

from enum import IntEnum
from typing import Any, Callable, Generic, Iterator, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")

# Depth is stored as an unsigned 16-bit quantity.
MAX_DEPTH = 0xFFFF


class Direction(IntEnum):
    """Which side of its parent a node occupies."""
    ROOT = 0    # No parent (tree top or a free-standing node)
    LEFT = 1
    RIGHT = 2


class DepthOverflowError(OverflowError):
    """Raised when attaching a node would push its depth past MAX_DEPTH."""
    pass


class BinaryNode(Generic[T]):
    """A binary tree node holding a value, its depth and its direction.

    Children are attached with attach_left()/attach_right(). Attaching
    replaces whatever occupied the slot before; the previous child is simply
    dropped from this node, it is not destroyed.

    No check is made that an attached child is not an ancestor of this
    node. Callers building trees by hand must not create cycles.

    Example:
        >>> root = BinaryNode(5)
        >>> root.attach_left(BinaryNode(3))
        >>> root.attach_right(BinaryNode(8))
        >>> [n.value for n in root.iter_nodes()]
        [5, 8, 3]
    """

    __slots__ = ('_value', '_depth', '_direction', '_left', '_right')

    def __init__(self, value: Optional[T] = None):
        """Create a free-standing node.

        Args:
            value: Payload for the node (None when omitted)
        """
        self._value = value
        self._depth = 0
        self._direction = Direction.ROOT
        self._left: Optional['BinaryNode[T]'] = None
        self._right: Optional['BinaryNode[T]'] = None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}({self._value!r}, "
                f"depth={self._depth}, direction={self._direction.name})")

    # Value and bookkeeping

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def get_value(self) -> T:
        return self._value

    def set_value(self, value: T) -> None:
        self._value = value

    @property
    def depth(self) -> int:
        """Depth recorded when this node was last attached (root = 0)."""
        return self._depth

    def get_depth(self) -> int:
        return self._depth

    @property
    def direction(self) -> Direction:
        return self._direction

    # Children

    @property
    def left(self) -> Optional['BinaryNode[T]']:
        return self._left

    @property
    def right(self) -> Optional['BinaryNode[T]']:
        return self._right

    def get_left_child(self) -> Optional['BinaryNode[T]']:
        return self._left

    def get_right_child(self) -> Optional['BinaryNode[T]']:
        return self._right

    def child(self, direction: Direction) -> Optional['BinaryNode[T]']:
        """Return the child in the given slot (None for an empty slot)."""
        if direction == Direction.LEFT:
            return self._left
        if direction == Direction.RIGHT:
            return self._right
        raise ValueError(f"A node has no {Direction(direction).name} child slot")

    @property
    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    @property
    def is_root(self) -> bool:
        return self._direction == Direction.ROOT

    def attach_left(self, child: 'BinaryNode[T]') -> None:
        """Put child in the left slot, fixing its depth and direction."""
        self.attach(child, Direction.LEFT)

    def attach_right(self, child: 'BinaryNode[T]') -> None:
        """Put child in the right slot, fixing its depth and direction."""
        self.attach(child, Direction.RIGHT)

    # Accessor-style aliases
    set_left_child = attach_left
    set_right_child = attach_right

    def attach(self, child: 'BinaryNode[T]', direction: Direction) -> None:
        """Attach child on the given side of this node.

        Only the child itself is updated: its depth becomes this node's
        depth plus one and its direction becomes the given side. The
        child's own descendants keep the depths they already had.

        Args:
            child: Node to attach
            direction: Direction.LEFT or Direction.RIGHT

        Raises:
            ValueError: If direction is Direction.ROOT
            DepthOverflowError: If the new depth does not fit in 16 bits
        """
        if direction == Direction.ROOT:
            raise ValueError("Cannot attach a child in the ROOT direction")

        depth = self._depth + 1
        if depth > MAX_DEPTH:
            raise DepthOverflowError(
                f"Depth {depth} exceeds the maximum of {MAX_DEPTH}"
            )

        if direction == Direction.LEFT:
            self._left = child
        else:
            self._right = child

        child._depth = depth
        child._direction = Direction(direction)

    # Whole-subtree operations, delegated to the layers built on traversal

    def iter_nodes(self, include_self: bool = True) -> Iterator['BinaryNode[T]']:
        """Iterate the subtree breadth-first (see BreadthFirstTraverser)."""
        from .traverser import BreadthFirstTraverser
        return BreadthFirstTraverser().traverse(self, include_self)

    def walk(self,
             walker: Callable[['BinaryNode[T]'], Any],
             include_self: bool = True) -> int:
        """Call walker on every node breadth-first until it returns True.

        Returns:
            Number of nodes handed to walker
        """
        from .traverser import walk
        return walk(self, walker, include_self)

    def destroy(self) -> int:
        """Tear down every descendant of this node, breadth-first.

        Each descendant is emptied in walk order; this node itself is kept
        and is left without children.

        Returns:
            Number of descendants destroyed
        """
        from .traverser import walk

        def _destroy(node: 'BinaryNode[T]') -> bool:
            node._left = None
            node._right = None
            return False

        destroyed = walk(self, _destroy, include_self=False)
        self._left = None
        self._right = None
        return destroyed

    def byte_size(self) -> int:
        """Fixed per-node footprint summed over the subtree, root included."""
        from .collector import ByteSizeCollector
        from .traverser import walk

        collector = ByteSizeCollector()
        walk(self, collector.collect)
        return collector.total

    get_byte_size = byte_size

    def weight_sum_children_ratio(self) -> float:
        from ..analytics import weight_sum_children_ratio
        return weight_sum_children_ratio(self)

    def min_max_weight_sum_children_ratio(self, bounds=None):
        from ..analytics import min_max_weight_sum_children_ratio
        return min_max_weight_sum_children_ratio(self, bounds)

    def serialize(self, stream, skip_deep: Optional[int] = None, pretty: bool = False) -> None:
        from ..serialization import serialize
        serialize(self, stream, skip_deep=skip_deep, pretty=pretty)

    @classmethod
    def deserialize(cls, stream, converter: Callable[[str], T]) -> Optional['BinaryNode[T]']:
        from ..serialization import deserialize
        return deserialize(stream, converter, node_factory=cls)


# Alias: a tree is just its root node
BinaryTree = BinaryNode


class PendingSlot(NamedTuple):
    """A child slot that will be filled by a node created later.

    Used by the population queues of deserialization and generation, where
    a slot has to be queued before the node that goes into it exists. A
    slot without a parent is the output (root) slot.
    """
    parent: Optional[BinaryNode]
    direction: Direction

    @classmethod
    def root(cls) -> 'PendingSlot':
        return cls(None, Direction.ROOT)

    def fill(self, node: BinaryNode) -> BinaryNode:
        """Place node into this slot, attaching it to the parent if any."""
        if self.parent is not None:
            self.parent.attach(node, self.direction)
        return node

    @staticmethod
    def children_of(node: BinaryNode) -> Tuple['PendingSlot', 'PendingSlot']:
        """Slots for node's children in population order (right, then left)."""
        return (PendingSlot(node, Direction.RIGHT), PendingSlot(node, Direction.LEFT))
