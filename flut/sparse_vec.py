"""A vector whose freed slots are recycled by later pushes."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

_VACANT: Any = object()


class SparseVec(Generic[T]):
    """Slot storage with stable indices; freed indices are reused first-in, first-out."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._slots: list[Any] = list(items)
        self._free: deque[int] = deque()

    def push(self, item: T) -> int:
        """Store ``item`` and return its index."""
        if self._free:
            index = self._free.popleft()
            self._slots[index] = item
            return index
        self._slots.append(item)
        return len(self._slots) - 1

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def _check(self, index: int) -> Any:
        if index < 0 or index >= len(self._slots):
            raise IndexError(f"index {index} out of range")
        value = self._slots[index]
        if value is _VACANT:
            raise IndexError(f"slot {index} is vacant")
        return value

    def __getitem__(self, index: int) -> T:
        return self._check(index)

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._slots[index] = value

    def take(self, index: int) -> T:
        """Remove and return the item at ``index``, freeing the slot."""
        value = self._check(index)
        self._slots[index] = _VACANT
        self._free.append(index)
        return value

    def replace_with_and_return(
        self, index: int, f: Callable[[T], tuple[T | None, R]]
    ) -> R:
        """Hand the item to ``f``; store its replacement, or free the slot if it is None."""
        item = self._check(index)
        self._slots[index] = _VACANT
        try:
            replacement, result = f(item)
        except BaseException:
            self._slots[index] = item
            raise
        if replacement is None:
            self._free.append(index)
        else:
            self._slots[index] = replacement
        return result