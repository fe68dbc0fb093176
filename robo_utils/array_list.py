"""A growable list whose storage is reserved through an allocator."""

from __future__ import annotations

import inspect
from typing import Any

from .allocator import allocator_is_valid
from .errors import (
    BadAllocError,
    InvalidArgumentError,
    NotInitializedError,
    set_error_state,
)


def _error(exc_type, message: str):
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    set_error_state(message, __file__, caller.f_lineno if caller is not None else 0)
    return exc_type(message)


class ArrayList:
    """An ordered list of items of a fixed element size.

    Capacity starts at ``initial_capacity`` and doubles whenever an added item
    does not fit; each growth is requested from the allocator.
    """

    def __init__(self, initial_capacity, data_size, allocator):
        if not allocator_is_valid(allocator):
            raise _error(InvalidArgumentError, "invalid allocator")
        if initial_capacity < 1:
            raise _error(InvalidArgumentError, "initial_capacity cannot be less than 1")
        if data_size < 1:
            raise _error(InvalidArgumentError, "data_size cannot be less than 1")
        block = allocator.allocate(initial_capacity * data_size, allocator.state)
        if block is None:
            raise _error(BadAllocError, "failed to allocate memory for array list data")
        self._allocator = allocator
        self._block = block
        self._capacity = initial_capacity
        self._data_size = data_size
        self._items: list[Any] = []
        self._initialized = True

    def __enter__(self) -> "ArrayList":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._initialized:
            self.fini()

    @property
    def capacity(self) -> int:
        """Number of items that fit before the next growth."""
        self._check_initialized()
        return self._capacity

    @property
    def data_size(self) -> int:
        """Size in bytes of one element."""
        return self._data_size

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise _error(NotInitializedError, "array_list is not initialized")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise _error(InvalidArgumentError, "index is out of bounds of the list")

    def _grow(self) -> None:
        new_capacity = 2 * self._capacity
        new_block = self._allocator.reallocate(
            self._block, self._data_size * new_capacity, self._allocator.state
        )
        if new_block is None:
            raise BadAllocError("failed to grow array list")
        self._block = new_block
        self._capacity = new_capacity

    def fini(self) -> None:
        """Release the storage; the list cannot be used afterwards."""
        self._check_initialized()
        self._allocator.deallocate(self._block, self._allocator.state)
        self._block = None
        self._items = []
        self._initialized = False

    def add(self, data) -> None:
        """Append an item, growing the capacity if needed."""
        self._check_initialized()
        if data is None:
            raise _error(InvalidArgumentError, "data argument is None")
        if len(self._items) + 1 > self._capacity:
            self._grow()
        self._items.append(data)

    def set(self, index, data) -> None:
        """Replace the item at an index."""
        self._check_initialized()
        if data is None:
            raise _error(InvalidArgumentError, "data argument is None")
        self._check_index(index)
        self._items[index] = data

    def remove(self, index) -> None:
        """Remove the item at an index, shifting later items down."""
        self._check_initialized()
        self._check_index(index)
        del self._items[index]

    def get(self, index):
        """Return the item at an index."""
        self._check_initialized()
        self._check_index(index)
        return self._items[index]

    def __len__(self) -> int:
        self._check_initialized()
        return len(self._items)