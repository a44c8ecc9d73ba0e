"""
Observable List
===============
A list wrapper that announces structural changes through Qt signals, so
view-models can mirror one collection into another.

Signals:
    items_added(items, index): `items` were inserted starting at `index`.
    items_removed(items, index): `items` were removed starting at `index`.
    items_replaced(new_items, old_items, index): slot `index` was overwritten.
    items_reset(): the list was cleared.

Signals are emitted after the mutation, so handlers always see the new
contents. Membership and lookups use object identity; the items are
view-models and two distinct view-models are never "the same" item.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from PySide6.QtCore import QObject, Signal


class ObservableList(QObject):
    items_added = Signal(object, int)
    items_removed = Signal(object, int)
    items_replaced = Signal(object, object, int)
    items_reset = Signal()

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        super().__init__()
        self._items: list[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        # Iterate over a snapshot: handlers may mutate the list mid-iteration
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return self.index_of(item) is not None

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    def index_of(self, item: object) -> Optional[int]:
        for i, existing in enumerate(self._items):
            if existing is item:
                return i
        return None

    def first_or_none(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        return next((item for item in self._items if predicate(item)), None)

    def append(self, item: Any) -> None:
        self._items.append(item)
        self.items_added.emit([item], len(self._items) - 1)

    def extend(self, items: Iterable[Any]) -> None:
        new_items = list(items)
        if not new_items:
            return
        start = len(self._items)
        self._items.extend(new_items)
        self.items_added.emit(new_items, start)

    def insert(self, index: int, item: Any) -> None:
        # Clamp like list.insert so the emitted index is the real position
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, item)
        self.items_added.emit([item], index)

    def remove(self, item: Any) -> None:
        index = self.index_of(item)
        if index is None:
            raise ValueError(f"{item!r} is not in the list")
        self.pop(index)

    def pop(self, index: int = -1) -> Any:
        if index < 0:
            index += len(self._items)
        item = self._items.pop(index)
        self.items_removed.emit([item], index)
        return item

    def __setitem__(self, index: int, item: Any) -> None:
        if index < 0:
            index += len(self._items)
        old = self._items[index]
        self._items[index] = item
        self.items_replaced.emit([item], [old], index)

    def clear(self) -> None:
        self._items.clear()
        self.items_reset.emit()
