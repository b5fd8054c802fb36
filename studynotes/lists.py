"""A singly linked list with a header node and a cursor-based static list."""

from __future__ import annotations

from typing import Iterator

MAX_SIZE = 100
CAPACITY = MAX_SIZE - 2


class LinkedList:
    """Sequence of values with the 1-based positional operations of a header-node list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def create_head(self, n: int) -> None:
        """Replace the contents with 0..n-1, each pushed at the front."""
        self._items = list(range(n))[::-1]

    def create_end(self, n: int) -> None:
        """Replace the contents with 0..n-1, each appended at the back."""
        self._items = list(range(n))

    def insert_head(self, n: int, data: int) -> None:
        """Insert ``data`` so that it becomes element ``n``; element ``n`` must exist."""
        if not 1 <= n <= len(self._items):
            raise IndexError(f"no element at position {n}")
        self._items.insert(n - 1, data)

    def insert_end(self, n: int, data: int) -> None:
        """Insert ``data`` after the first ``n`` elements, or at the end if shorter."""
        if n < 0:
            raise IndexError(f"negative position {n}")
        self._items.insert(min(n, len(self._items)), data)

    def delete(self, n: int) -> int:
        """Remove element ``n`` (1-based) and return its value."""
        if not 1 <= n <= len(self._items):
            raise IndexError(f"no element at position {n}")
        return self._items.pop(n - 1)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def render(self) -> str:
        """Return the printed form of the list."""
        if not self._items:
            return "Node_Printf:\nEmpty List!!\n"
        return "Node_Printf:\n" + "".join(f"{value} " for value in self._items) + "\n"


class StaticList:
    """A linked list kept in fixed arrays, chained by slot numbers.

    Slot 0 heads the chain of free slots and the last slot heads the list.
    """

    def __init__(self) -> None:
        self._data = [0] * MAX_SIZE
        self._next = list(range(1, MAX_SIZE - 1)) + [0, 0]
        self._head = MAX_SIZE - 1

    def _allocate(self) -> int:
        slot = self._next[0]
        if not slot:
            raise OverflowError(f"static list is full ({CAPACITY} elements)")
        self._next[0] = self._next[slot]
        return slot

    def _release(self, slot: int) -> None:
        self._next[slot] = self._next[0]
        self._next[0] = slot

    def _slots(self) -> Iterator[int]:
        slot = self._next[self._head]
        while slot:
            yield slot
            slot = self._next[slot]

    def _slot_before(self, position: int) -> int:
        slot = self._head
        for _ in range(position - 1):
            slot = self._next[slot]
        return slot

    def __len__(self) -> int:
        return sum(1 for _ in self._slots())

    def insert(self, n: int, data: int) -> None:
        """Insert ``data`` so that it becomes element ``n`` (1-based)."""
        if not 1 <= n <= len(self) + 1:
            raise IndexError(f"cannot insert at position {n}")
        slot = self._allocate()
        self._data[slot] = data
        before = self._slot_before(n)
        self._next[slot] = self._next[before]
        self._next[before] = slot

    def delete(self, i: int) -> int:
        """Remove element ``i`` (1-based) and return its value."""
        if not 1 <= i <= len(self):
            raise IndexError(f"no element at position {i}")
        before = self._slot_before(i)
        slot = self._next[before]
        self._next[before] = self._next[slot]
        self._release(slot)
        return self._data[slot]

    def __iter__(self) -> Iterator[int]:
        return (self._data[slot] for slot in self._slots())

    def render(self) -> str:
        """Return the printed form of the list."""
        values = list(self)
        if not values:
            return "const list value:\nEmpty Const List!!\n"
        return "const list value:\n" + "".join(f"{value} " for value in values) + "\n"