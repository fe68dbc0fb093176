"""Pluggable allocation strategies handing out byte buffers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional


def _default_allocate(size: int, state: Any) -> bytearray:
    return bytearray(size)


def _default_deallocate(pointer: Any, state: Any) -> None:
    # Release the buffer's contents so the memory can be reclaimed.
    if isinstance(pointer, bytearray):
        pointer.clear()


def _default_reallocate(pointer: Optional[bytearray], size: int, state: Any) -> bytearray:
    new = bytearray(size)
    if pointer is not None:
        keep = min(size, len(pointer))
        new[:keep] = pointer[:keep]
    return new


def _default_zero_allocate(number_of_elements: int, size_of_element: int, state: Any) -> bytearray:
    return bytearray(number_of_elements * size_of_element)


@dataclass
class Allocator:
    """A set of allocation functions sharing an opaque state.

    Each function returns None when it cannot provide memory.
    """

    allocate: Optional[Callable[[int, Any], Any]] = None
    deallocate: Optional[Callable[[Any, Any], None]] = None
    reallocate: Optional[Callable[[Any, int, Any], Any]] = None
    zero_allocate: Optional[Callable[[int, int, Any], Any]] = None
    state: Any = None

    def is_valid(self) -> bool:
        """Return whether every allocation function is present."""
        return None not in (
            self.allocate,
            self.deallocate,
            self.zero_allocate,
            self.reallocate,
        )


def get_zero_initialized_allocator() -> Allocator:
    """Return an allocator with no functions set."""
    return Allocator()


def get_default_allocator() -> Allocator:
    """Return the allocator backed by Python byte arrays."""
    return Allocator(
        allocate=_default_allocate,
        deallocate=_default_deallocate,
        reallocate=_default_reallocate,
        zero_allocate=_default_zero_allocate,
    )


def allocator_is_valid(allocator) -> bool:
    """Return whether the allocator is present and complete."""
    return allocator is not None and allocator.is_valid()


def reallocf(pointer, size, allocator):
    """Reallocate, releasing the old memory when reallocation fails."""
    if not allocator_is_valid(allocator):
        sys.stderr.write(
            "[robo_utils|allocator] reallocf(): "
            "invalid allocator or allocator function pointers, memory leaked\n"
        )
        return None
    new_pointer = allocator.reallocate(pointer, size, allocator.state)
    if new_pointer is None:
        allocator.deallocate(pointer, allocator.state)
    return new_pointer