"""Closed numeric ranges and frequency unit helpers."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

_T = TypeVar("_T")


class Range(Generic[_T]):
    """A closed interval ``[left, right]`` with ``left <= right``."""

    def __init__(self, left: Any = 0, right: Any = 0) -> None:
        self._check(left, right)
        self._left = left
        self._right = right

    @staticmethod
    def _check(left: Any, right: Any) -> None:
        if not left <= right:
            raise ValueError(f"range left {left} exceeds right {right}")

    @property
    def left(self) -> Any:
        return self._left

    @property
    def right(self) -> Any:
        return self._right

    def set_range(self, left: Any, right: Any) -> None:
        self._check(left, right)
        self._left, self._right = left, right

    def set_range_by_diff(self, mid: Any, diff: Any) -> None:
        """Set the range to ``mid - diff .. mid + diff``."""
        self.set_range(mid - diff, mid + diff)

    def __contains__(self, value: Any) -> bool:
        return self._left <= value <= self._right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._left == other._left and self._right == other._right

    def __hash__(self) -> int:
        return hash(self._left) ^ hash(self._right)

    def cast(self, kind: Callable[[Any], Any]) -> Range:
        """Return a new range with both ends converted by ``kind``."""
        return Range(kind(self._left), kind(self._right))

    def __str__(self) -> str:
        return f"[{self._left},{self._right}]"

    def __repr__(self) -> str:
        return f"Range({self._left!r}, {self._right!r})"


def bhz(value: float) -> int:
    """Hundreds of hertz to hertz, rounded."""
    return int(value * 100.0 + 0.5)


def khz(value: float) -> int:
    """Kilohertz to hertz, rounded."""
    return int(value * 1000.0 + 0.5)


def mhz(value: float) -> int:
    """Megahertz to hertz, rounded."""
    return int(value * 1000000.0 + 0.5)


def ghz(value: float) -> int:
    """Gigahertz to hertz, rounded."""
    return int(value * 1000000000.0 + 0.5)