"""printf-style formatting into allocator-backed storage with a size limit."""

from __future__ import annotations

from .allocator import allocator_is_valid
from .errors import InvalidArgumentError


def format_string_limit(allocator, limit, format_string, *args):
    """Return ``format_string % args`` cut to at most ``limit - 1`` bytes.

    Returns None when the format string is None, the allocator is invalid or
    fails, or the arguments do not match the format.
    """
    if format_string is None:
        return None
    if not allocator_is_valid(allocator):
        return None
    if limit < 1:
        raise InvalidArgumentError("limit must be at least 1")
    try:
        text = format_string % args
    except (TypeError, ValueError, KeyError):
        return None
    encoded = text.encode("utf-8")
    size = min(len(encoded), limit - 1)
    block = allocator.allocate(size + 1, allocator.state)
    if block is None:
        return None
    block[:size] = encoded[:size]
    block[size] = 0
    result = bytes(block[:size]).decode("utf-8", errors="ignore")
    allocator.deallocate(block, allocator.state)
    return result