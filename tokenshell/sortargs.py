"""Print the program name and then the remaining arguments in sorted order."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .bst import BinarySearchTree


def sort_args(args: Iterable[str]) -> list[str]:
    """Return ``args`` sorted through a binary search tree."""
    tree = BinarySearchTree()
    for arg in args:
        tree.insert(arg)
    result = list(tree)
    tree.clear()
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the program name, then each argument in order."""
    argv = list(sys.argv if argv is None else argv)
    name = argv[0] if argv else ""
    print(f"the program name is <{name}>")
    for arg in sort_args(argv[1:]):
        print(arg)
    return 0