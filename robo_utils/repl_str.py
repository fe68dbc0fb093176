"""Replace every occurrence of one substring with another."""

from __future__ import annotations

from .allocator import allocator_is_valid
from .errors import InvalidArgumentError


def repl_str(string, old, new, allocator):
    """Return ``string`` with every ``old`` replaced by ``new``.

    Returns None when the allocator cannot provide room for the result.
    """
    if string is None or old is None or new is None:
        raise InvalidArgumentError("arguments must not be None")
    if not old:
        raise InvalidArgumentError("the string to replace must not be empty")
    if not allocator_is_valid(allocator):
        raise InvalidArgumentError("invalid allocator")
    result = string.replace(old, new)
    block = allocator.allocate(len(result.encode("utf-8")) + 1, allocator.state)
    if block is None:
        return None
    allocator.deallocate(block, allocator.state)
    return result