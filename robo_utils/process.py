"""Information about the running process."""

from __future__ import annotations

import os
import sys
from typing import Optional

from .allocator import allocator_is_valid


def get_pid() -> int:
    """Return the current process ID."""
    return os.getpid()


def get_executable_name(allocator) -> Optional[str]:
    """Return the base name of the running program, or None on failure."""
    if not allocator_is_valid(allocator):
        return None
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not program:
        return None
    name = os.path.basename(program)
    block = allocator.allocate(len(name.encode("utf-8")) + 1, allocator.state)
    if block is None:
        return None
    allocator.deallocate(block, allocator.state)
    return name