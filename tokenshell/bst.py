"""Unbalanced binary search tree of strings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO


def bst_compare(a: str, b: str) -> int:
    """Positive if ``a`` sorts after ``b``, zero if equal, negative otherwise."""
    for x, y in zip(a, b):
        diff = ord(x) - ord(y)
        if diff:
            return diff
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


@dataclass
class BstNode:
    """A tree node holding one string."""

    text: str
    left: Optional["BstNode"] = None
    right: Optional["BstNode"] = None


class BinarySearchTree:
    """Strings kept in sorted order; equal strings go to the left."""

    def __init__(self) -> None:
        self.root: Optional[BstNode] = None
        self._size = 0

    def insert(self, text: str) -> None:
        """Add ``text`` to the tree."""
        node = BstNode(text)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if bst_compare(text, current.text) > 0:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def __iter__(self) -> Iterator[str]:
        stack: list[BstNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __len__(self) -> int:
        return self._size

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the strings in order, one per line."""
        out = file or sys.stdout
        for text in self:
            out.write(text + "\n")

    def clear(self) -> None:
        """Remove every string."""
        self.root = None
        self._size = 0