from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from errors import OutOfRangeError

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class DynamicArray(Generic[T]):
    """Growable array with amortized O(1) append.

    Storage is a fixed-size slot list that doubles when full. Negative
    indexes are rejected rather than counted from the end.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Capacity must be at least 1.")
        self._capacity = capacity
        self._size = 0
        self._data: List[Optional[T]] = [None] * capacity

    def _resize(self) -> None:
        self._capacity *= 2
        new_data: List[Optional[T]] = [None] * self._capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Index must be an int, not {type(index).__name__}")
        if index < 0 or index >= self._size:
            raise OutOfRangeError("Index out of bounds")

    # ------------------------- Core operations ------------------------- #
    def add(self, item: T) -> None:
        """Append an item, growing the storage when it is full."""
        if self._size == self._capacity:
            self._resize()
        self._data[self._size] = item
        self._size += 1

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._data[index]  # type: ignore[return-value]

    def set(self, index: int, item: T) -> None:
        self._check_index(index)
        self._data[index] = item

    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    # ------------------------- Python protocol ------------------------- #
    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, item: T) -> None:
        self.set(index, item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]  # type: ignore[misc]

    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in self)
        return f"DynamicArray([{items}], capacity={self._capacity})"
