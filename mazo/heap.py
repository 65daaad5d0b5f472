"""A binary min-heap keyed by a hash map, supporting decrease-key and increase-key."""

from __future__ import annotations

import enum
from typing import Callable, Generic, Hashable, TypeVar

T = TypeVar("T")


class PushAction(enum.Enum):
    """What to do when an item with the same key is already in the heap."""

    KEEP = enum.auto()
    DECREASE_KEY = enum.auto()
    INCREASE_KEY = enum.auto()


class BinaryHashHeap(Generic[T]):
    """Min-heap of items, each identified by a hashable key and ordered by a value.

    ``key`` and ``value`` are callables extracting the key and the ordering
    value from an item.  At most one item per key is held at a time.
    """

    def __init__(
        self,
        key: Callable[[T], Hashable],
        value: Callable[[T], object],
    ) -> None:
        self._key = key
        self._value = value
        self._items: list[T] = []
        self._positions: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        self._positions[self._key(items[i])] = i
        self._positions[self._key(items[j])] = j

    def _less(self, i: int, j: int) -> bool:
        return self._value(self._items[i]) < self._value(self._items[j])

    def _sift_up(self, index: int) -> None:
        while index:
            parent = (index - 1) // 2
            if self._less(parent, index):
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._items)
        while True:
            left = index * 2 + 1
            right = left + 1
            if left >= size:
                return
            if right < size and not self._less(left, right):
                child = right
            else:
                child = left
            if self._less(index, child):
                return
            self._swap(index, child)
            index = child

    def push(self, action: PushAction, item: T) -> bool:
        """Push ``item``; if its key is present, apply ``action``.

        Returns True if the heap was changed.
        """
        key = self._key(item)
        index = self._positions.get(key)
        if index is None:
            self._positions[key] = len(self._items)
            self._items.append(item)
            self._sift_up(len(self._items) - 1)
            return True

        current = self._value(self._items[index])
        new = self._value(item)
        if action is PushAction.KEEP:
            return False
        if action is PushAction.DECREASE_KEY:
            if current <= new:
                return False
            self._items[index] = item
            self._sift_up(index)
            return True
        if action is PushAction.INCREASE_KEY:
            if current >= new:
                return False
            self._items[index] = item
            self._sift_down(index)
            return True
        raise ValueError(f"unknown push action: {action!r}")

    def pop(self) -> T:
        """Remove and return the item with the smallest value.

        Raises IndexError if the heap is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty heap")
        result = self._items[0]
        last = self._items.pop()
        del self._positions[self._key(result)]
        if self._items:
            self._items[0] = last
            self._positions[self._key(last)] = 0
            self._sift_down(0)
        return result