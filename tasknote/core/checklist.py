"""
FILE: tasknote/core/checklist.py
PURPOSE: Ordered checklist item collection with dense reindexing
EXPORTS:
  - ChecklistStore (mutable ordered list of ChecklistItem)
  - normalize_items(items) -> List[ChecklistItem]
DEPENDENCIES:
  - uuid (stdlib, item ids)
  - datetime (stdlib, createdAt timestamps)
  - dataclasses (stdlib, copying items)
  - tasknote.core.models (ChecklistItem)
NOTES:
  - After every add/remove/move, order values are exactly 0..n-1
  - Unknown ids are no-ops and move targets are clamped, so UI races
    (e.g. deleting an item mid-drag) never raise
  - The store works on its own copies of the items it is seeded with
"""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator, List, Optional

from .models import ChecklistItem


def _new_item_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_items(items: Iterable[ChecklistItem]) -> List[ChecklistItem]:
    """
    Copy items into order-ascending sequence with dense order values.

    Sorting is stable, so items sharing an order value keep their
    relative position from the input.
    """
    ordered = sorted(items, key=lambda item: item.order)
    return [replace(item, order=index) for index, item in enumerate(ordered)]


class ChecklistStore:
    """
    Ordered collection of checklist items.

    The internal list is always kept in position order, and each item's
    ``order`` equals its index in that list.
    """

    def __init__(
        self,
        items: Optional[Iterable[ChecklistItem]] = None,
        id_factory: Callable[[], str] = _new_item_id,
        clock: Callable[[], str] = _utc_now,
    ):
        self._items: List[ChecklistItem] = normalize_items(items or [])
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ChecklistItem]:
        return iter(self.sorted_items())

    def _index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _reindex(self) -> None:
        for index, item in enumerate(self._items):
            item.order = index

    def get(self, item_id: str) -> Optional[ChecklistItem]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def add(self, text: str) -> Optional[ChecklistItem]:
        """
        Append a new unchecked item.

        Returns:
            The new item, or None if text is empty after trimming
        """
        text = text.strip() if text else ""
        if not text:
            return None

        item = ChecklistItem(
            id=self._id_factory(),
            text=text,
            completed=False,
            order=len(self._items),
            created_at=self._clock(),
        )
        self._items.append(item)
        return item

    def remove(self, item_id: str) -> None:
        """Delete an item and close the gap it leaves in the ordering."""
        index = self._index_of(item_id)
        if index is None:
            return
        del self._items[index]
        self._reindex()

    def toggle_completed(self, item_id: str) -> None:
        item = self.get(item_id)
        if item is not None:
            item.completed = not item.completed

    def update_text(self, item_id: str, text: str) -> None:
        """Replace an item's text. Unlike add(), empty text is allowed."""
        item = self.get(item_id)
        if item is not None:
            item.text = text

    def move(self, item_id: str, to_index: int) -> None:
        """
        Move an item to a new position.

        The item is taken out of the list and reinserted at to_index,
        clamped to [0, len - 1], and every item is then reindexed.
        This is what a drag-reorder gesture resolves to.
        """
        index = self._index_of(item_id)
        if index is None:
            return
        item = self._items.pop(index)
        to_index = max(0, min(to_index, len(self._items)))
        self._items.insert(to_index, item)
        self._reindex()

    def sorted_items(self) -> List[ChecklistItem]:
        """Items ordered by their order value, ascending."""
        return sorted(self._items, key=lambda item: item.order)
