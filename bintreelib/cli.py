"""Command line driver for BinTreeLib.

Loads a tree from a file if it exists, otherwise generates a random one
and saves it there. Then searches the tree for the subtrees with the
lowest and highest weight ratio and prints everything to the console.

Usage:
    bintree                         # Load btree.bt, or generate (prompts for size)
    bintree --leaves 1000 --seed 7  # Generate without prompting
    bintree --file other.bt -v      # Different file, debug logging
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .analytics import min_max_weight_sum_children_ratio
from .config import GenerationConfig, SerializeConfig
from .generation import generate_tree
from .profiling import ProfileResult, profile_section
from .serialization import dump_file, load_file, serialize

logger = logging.getLogger(__name__)


def _report(step: str, result: ProfileResult, out: TextIO) -> None:
    print(f"{step} took {result.elapsed_us} microseconds.", file=out)
    print(f"\t with {result.allocated_bytes} bytes of memory allocated in total", file=out)
    print(file=out)


def _read_leaves(args: argparse.Namespace) -> int:
    if args.leaves is not None:
        return args.leaves
    try:
        answer = input("Enter max amount of leaves: ")
    except EOFError:
        raise ValueError("no leaf count given (standard input is closed); use --leaves") from None
    return int(answer.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintree",
        description="Generate or load a binary tree and report its weight ratio extremes",
    )
    parser.add_argument("--file", type=Path, default=Path("btree.bt"),
                        help="Tree file to load, or to create when missing (default: btree.bt)")
    parser.add_argument("--leaves", type=int, default=None,
                        help="Number of nodes to generate (prompted for when omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for generation")
    parser.add_argument("--max-value", type=int, default=255,
                        help="Generated values are drawn from 0..MAX_VALUE-1 (default: 255)")
    parser.add_argument("--skip-deep", type=int, default=6,
                        help="Depth after which printed trees are truncated (default: 6)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Run the driver with parsed arguments.

    Returns:
        Process exit status
    """
    if out is None:
        out = sys.stdout
    display = SerializeConfig.display(skip_deep=args.skip_deep)
    save_to: Optional[Path] = None

    if args.file.exists():
        logger.debug("Loading tree from %s", args.file)
        try:
            with profile_section() as loading:
                tree = load_file(args.file, int)
        except ValueError as error:
            print(f"error: cannot parse {args.file}: {error}", file=sys.stderr)
            return 1
        if tree is None:
            print(f"error: {args.file} holds no tree", file=sys.stderr)
            return 1
        _report("1. Deserialization (loading from file)", loading, out)
    else:
        try:
            config = GenerationConfig(
                max_leaves=_read_leaves(args),
                max_value=args.max_value,
                seed=args.seed,
            )
            with profile_section() as generating:
                tree = generate_tree(config=config)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        _report("1. Generation", generating, out)
        save_to = args.file

    with profile_section() as searching:
        bounds = min_max_weight_sum_children_ratio(tree)
    _report("2. Search", searching, out)

    if save_to is not None:
        with profile_section() as saving:
            dump_file(tree, save_to)
        _report("3. Serialization (writing to file)", saving, out)

    print(f"{tree.byte_size()} bytes used by tree", file=out)
    print(file=out)
    print("Tree: ", file=out)
    serialize(tree, out, config=display)

    print(file=out)
    print("Minimum ratio subtree: ", file=out)
    print(f"{bounds.min_value} ratio; Tree: ", file=out)
    serialize(bounds.min_node, out, config=display)

    print(file=out)
    print("Maximum ratio subtree: ", file=out)
    print(f"{bounds.max_value} ratio; Tree: ", file=out)
    serialize(bounds.max_node, out, config=display)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.skip_deep < 0:
        parser.error("--skip-deep cannot be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
