"""An ordered record of entered lines, each with a numeric id."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO


@dataclass(frozen=True)
class HistoryItem:
    """One remembered line."""

    id: int
    text: str


class History:
    """Lines kept in the order they were added."""

    def __init__(self) -> None:
        self._items: list[HistoryItem] = []

    def add(self, item_id: int, text: str) -> HistoryItem:
        """Append a line with the given id and return the new item."""
        item = HistoryItem(item_id, text)
        self._items.append(item)
        return item

    def recall(self, item_id: int) -> Optional[HistoryItem]:
        """Return the first item with ``item_id``, or None if there is none."""
        return next((item for item in self._items if item.id == item_id), None)

    def __iter__(self) -> Iterator[HistoryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Render every item as ``id: text`` with no separator between items."""
        return "".join(f"{item.id}: {item.text}" for item in self._items)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered history to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format())

    def clear(self) -> None:
        """Forget every item."""
        self._items.clear()