import argparse
import logging
import os
import sys

from rbtree.models.exceptions import KeyNotFoundError
from rbtree.models.sortedcontainers import RedBlackTree
from rbtree.observers import LoggingObserver

logger = logging.getLogger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m rbtree",
        description="Build a red-black tree from integer keys and print it.",
    )
    parser.add_argument("keys", nargs="*", type=int, help="keys to insert, in order")
    parser.add_argument(
        "--remove",
        nargs="+",
        type=int,
        default=[],
        metavar="KEY",
        help="keys to remove after all insertions",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    tree = RedBlackTree(observer=LoggingObserver())
    for key in args.keys:
        tree.insert(key)

    for key in args.remove:
        try:
            tree.remove(key)
        except KeyNotFoundError as e:
            logger.error(f"Error removing key: {e}")
            return 1

    tree.validate()
    logger.info(f"size={tree.size()} height={tree.height()} black_height={tree.black_height()}")
    print(tree.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
