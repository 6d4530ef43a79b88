"""Text serialization for BinTreeLib trees.

Format
------
One value per line, written with str(value), in the breadth-first walk
order of the tree with the root included. Nothing else is recorded: no
count, no depths, no marker for a missing child. Blank lines are skipped
when reading and never written.

Reading rebuilds the tree through a population queue that always offers
both child slots of every created node, so lines are poured into a
complete binary tree, level by level. A tree only survives a round trip
if it was complete to begin with. For a sparse tree the lines that
belonged to deeper nodes land in slots the original tree had left empty,
and the result silently has a different shape. That is a property of the
format, not an error, and nothing here tries to detect it.

Pretty output (tabs, "<depth>: " prefixes, "..." truncation) is for
display only and cannot be read back.
"""

import logging
from collections import deque
from io import StringIO
from pathlib import Path
from typing import Callable, Deque, Iterable, Optional, TextIO, TypeVar, Union

from .core.node import BinaryNode, Direction, PendingSlot
from .core.traverser import walk
from .config import SerializeConfig
from .planning import ensure_valid

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, Path]


def _line_prefix(node: BinaryNode, config: SerializeConfig) -> str:
    """Indentation and depth label for pretty output."""
    tabs = min(node.depth, config.max_tab_depth)

    # Left children sit one tab closer to the margin than right ones
    if node.direction == Direction.LEFT:
        tabs = max(0, tabs - 1)

    return "\t" * tabs + f"{node.depth}: "


def serialize(tree: BinaryNode,
              stream: TextIO,
              skip_deep: Optional[int] = None,
              pretty: bool = False,
              config: Optional[SerializeConfig] = None) -> int:
    """Write tree to stream, one node per line.

    With skip_deep set, the first node deeper than skip_deep is not written;
    an ellipsis line is written in its place and the whole walk ends there.
    Because nodes are visited level by level this prints every complete
    level up to depth skip_deep and nothing below it.

    Args:
        tree: Root of the tree to write
        stream: Text stream to write to
        skip_deep: Depth ceiling (None = write everything)
        pretty: Indent lines and prefix them with the node depth
        config: Full configuration; overrides skip_deep and pretty

    Returns:
        Number of node lines written

    Raises:
        InvalidConfigError: If the configuration is inconsistent
    """
    if config is None:
        config = SerializeConfig(skip_deep=skip_deep, pretty=pretty)
    ensure_valid(config)

    written = 0

    def _write(node: BinaryNode) -> bool:
        nonlocal written

        if config.skip_deep is not None and node.depth > config.skip_deep:
            stream.write(config.ellipsis + "\n")
            return True

        if config.pretty:
            stream.write(_line_prefix(node, config))
        stream.write(f"{node.value}\n")
        written += 1
        return False

    walk(tree, _write)
    logger.debug("Serialized %d node(s)", written)
    return written


def dumps(tree: BinaryNode, skip_deep: Optional[int] = None, pretty: bool = False,
          config: Optional[SerializeConfig] = None) -> str:
    """Serialize tree to a string."""
    buffer = StringIO()
    serialize(tree, buffer, skip_deep=skip_deep, pretty=pretty, config=config)
    return buffer.getvalue()


def dump_file(tree: BinaryNode, path: PathLike) -> int:
    """Write tree to path in the storage format.

    Returns:
        Number of node lines written
    """
    with Path(path).open("w", encoding="utf-8", newline="\n") as stream:
        return serialize(tree, stream, config=SerializeConfig.storage())


def deserialize(stream: Iterable[str],
                converter: Callable[[str], T],
                node_factory: Callable[[T], BinaryNode] = BinaryNode) -> Optional[BinaryNode]:
    """Rebuild a tree from lines written by serialize().

    Lines fill a complete binary tree in walk order: the root first, then
    each created node's right slot and left slot are queued behind the
    slots already waiting. Whatever converter raises for a malformed line
    propagates to the caller.

    Args:
        stream: Text stream (or any iterable of lines)
        converter: Turns one line's text into a node value
        node_factory: Creates a node from a value

    Returns:
        The root node, or None if the stream holds no non-empty line
    """
    root: Optional[BinaryNode] = None
    to_populate: Deque[PendingSlot] = deque([PendingSlot.root()])
    created = 0

    lines = iter(stream)
    while to_populate:
        line = next(lines, None)
        if line is None:
            break

        line = line.rstrip("\r\n")
        if not line:
            continue

        node = node_factory(converter(line))

        slot = to_populate[0]
        slot.fill(node)
        if slot.parent is None:
            root = node

        to_populate.extend(PendingSlot.children_of(node))
        to_populate.popleft()
        created += 1

    logger.debug("Deserialized %d node(s)", created)
    return root


def loads(text: str, converter: Callable[[str], T]) -> Optional[BinaryNode]:
    """Rebuild a tree from a string produced by dumps()."""
    return deserialize(StringIO(text), converter)


def load_file(path: PathLike, converter: Callable[[str], T]) -> Optional[BinaryNode]:
    """Rebuild a tree from a file written by dump_file()."""
    with Path(path).open("r", encoding="utf-8") as stream:
        return deserialize(stream, converter)
