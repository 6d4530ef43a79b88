"""Breadth-first traversal for BinTreeLib.

Every subtree operation in the library (byte size, analytics,
serialization, teardown) is a walk over the same breadth-first order
produced here.

Enqueue order
-------------
The order is not the textbook left-to-right level order:

* With include_self=False the queue is seeded with the node's direct
  children, left before right.
* Every dequeued node pushes its own children right before left.

So for a root 5 with left 3 and right 8 a full walk visits 5, 8, 3, while a
descendants-only walk of the same root visits 3, 8. Serialization and
deserialization both rely on the right-before-left expansion to line up.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator

from .node import BinaryNode


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies over BinaryNode trees."""

    @abstractmethod
    def traverse(self, root: BinaryNode, include_self: bool = True) -> Iterator[BinaryNode]:
        """Traverse the subtree under root.

        Args:
            root: Starting node
            include_self: Whether root itself is produced

        Yields:
            Nodes in traversal order
        """
        pass


class BreadthFirstTraverser(TreeTraverser):
    """Iterative breadth-first traversal over an explicit FIFO queue.

    Children of a node are queued before that node is yielded, so a
    consumer may empty the node's child slots (as destroy() does) without
    cutting its children out of the walk.
    """

    def traverse(self, root: BinaryNode, include_self: bool = True) -> Iterator[BinaryNode]:
        queue: Deque[BinaryNode] = deque()

        if include_self:
            queue.append(root)
        else:
            if root.left is not None:
                queue.append(root.left)
            if root.right is not None:
                queue.append(root.right)

        while queue:
            node = queue.popleft()

            if node.right is not None:
                queue.append(node.right)
            if node.left is not None:
                queue.append(node.left)

            yield node


def walk(root: BinaryNode,
         walker: Callable[[BinaryNode], Any],
         include_self: bool = True) -> int:
    """Call walker on each node breadth-first until it asks to stop.

    A truthy return from walker ends the whole walk at once; whatever is
    still queued is discarded. There is no way to skip only one subtree.

    Args:
        root: Node to start from
        walker: Callback receiving each node; return True to stop
        include_self: Whether root itself is visited

    Returns:
        Number of nodes passed to walker (including the one that stopped it)
    """
    visited = 0
    for node in BreadthFirstTraverser().traverse(root, include_self):
        visited += 1
        if walker(node):
            break
    return visited
