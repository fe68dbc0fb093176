"""A character buffer whose storage is managed through an allocator."""

from __future__ import annotations

import inspect

from .allocator import allocator_is_valid, reallocf
from .errors import BadAllocError, InvalidArgumentError, RcutilsError, set_error_state


def _error(exc_type, message: str):
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    set_error_state(message, __file__, caller.f_lineno if caller is not None else 0)
    return exc_type(message)


def _to_bytes(src) -> bytes:
    if src is None:
        raise _error(InvalidArgumentError, "source argument is None")
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


class CharArray:
    """A NUL-terminated byte buffer that grows on demand.

    ``buffer_capacity`` is the size of the storage and ``buffer_length`` the
    number of bytes in use, counting the terminating NUL byte. A buffer that
    is not owned (``owns_buffer`` false) is never reallocated or released;
    resizing copies it into fresh storage that is owned from then on.
    """

    def __init__(self, buffer_capacity, allocator):
        if not allocator_is_valid(allocator):
            raise _error(RcutilsError, "char array has no valid allocator")
        if buffer_capacity < 0:
            raise _error(InvalidArgumentError, "buffer_capacity cannot be negative")
        self.buffer = None
        self._setup(buffer_capacity, allocator)

    def _setup(self, capacity: int, allocator) -> None:
        self.owns_buffer = True
        self.buffer_length = 0
        self.buffer_capacity = capacity
        self.allocator = allocator
        if capacity > 0:
            buffer = allocator.allocate(capacity, allocator.state)
            if buffer is None:
                self.buffer = None
                self.buffer_capacity = 0
                self.buffer_length = 0
                raise _error(BadAllocError, "failed to allocate memory for char array")
            self.buffer = buffer

    @property
    def value(self) -> str:
        """The text held in the buffer, up to the first NUL byte."""
        if self.buffer is None:
            return ""
        raw = bytes(self.buffer)
        return raw[: self._strlen()].decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.value

    def _strlen(self) -> int:
        if self.buffer is None:
            return 0
        raw = bytes(self.buffer)
        end = raw.find(b"\0")
        return end if end >= 0 else len(raw)

    def _write(self, offset: int, data: bytes) -> None:
        end = offset + len(data)
        self.buffer[offset:end] = data
        self.buffer[end] = 0

    def _expand(self, new_size: int) -> None:
        try:
            self.expand_as_needed(new_size)
        except RcutilsError:
            set_error_state("char array failed to expand", __file__, 0)
            raise

    def fini(self) -> None:
        """Release owned storage and empty the array."""
        if self.owns_buffer:
            if not allocator_is_valid(self.allocator):
                raise _error(RcutilsError, "char array has no valid allocator")
            self.allocator.deallocate(self.buffer, self.allocator.state)
        self.buffer = None
        self.buffer_length = 0
        self.buffer_capacity = 0

    def resize(self, new_size) -> None:
        """Change the capacity to exactly ``new_size`` bytes."""
        if new_size <= 0:
            raise _error(
                InvalidArgumentError, "new size of char_array has to be greater than zero"
            )
        if not allocator_is_valid(self.allocator):
            raise _error(RcutilsError, "char array has no valid allocator")
        if new_size == self.buffer_capacity:
            return

        old_buffer = self.buffer
        old_size = self.buffer_capacity
        old_length = self.buffer_length

        if self.owns_buffer:
            self.buffer = reallocf(self.buffer, new_size, self.allocator)
            if self.buffer is None:
                raise _error(BadAllocError, "failed to reallocate memory for char array")
        else:
            self._setup(new_size, self.allocator)
            n = min(new_size, old_size)
            if n > 0 and old_buffer is not None:
                self.buffer[:n] = bytes(old_buffer[:n])
                self.buffer[n - 1] = 0

        self.buffer_capacity = new_size
        self.buffer_length = min(new_size, old_length)

    def expand_as_needed(self, new_size) -> None:
        """Grow to ``new_size`` bytes unless the capacity already suffices."""
        if new_size <= self.buffer_capacity:
            return
        self.resize(new_size)

    def sprintf(self, format_string, *args) -> None:
        """Replace the contents with ``format_string % args``."""
        try:
            text = format_string % args
        except (TypeError, ValueError, KeyError) as exc:
            raise _error(RcutilsError, "vsprintf on char array failed") from exc
        encoded = _to_bytes(text)
        new_size = len(encoded) + 1
        if new_size > self.buffer_capacity:
            self._expand(new_size)
        self._write(0, encoded)
        self.buffer_length = new_size

    def memcpy(self, src, n) -> None:
        """Copy the first ``n`` bytes of ``src`` to the start of the buffer."""
        data = _to_bytes(src)
        if n < 0 or n > len(data):
            raise _error(InvalidArgumentError, "n is out of bounds of the source")
        self._expand(n)
        if n > 0:
            self.buffer[:n] = data[:n]
        self.buffer_length = n

    def strcpy(self, src) -> None:
        """Copy ``src`` and a terminating NUL byte into the buffer."""
        data = _to_bytes(src).split(b"\0", 1)[0]
        self.memcpy(data + b"\0", len(data) + 1)

    def strncat(self, src, n) -> None:
        """Append at most ``n`` bytes of ``src`` to the current text."""
        if n < 0:
            raise _error(InvalidArgumentError, "n cannot be negative")
        data = _to_bytes(src)
        current = self._strlen()
        new_length = current + n + 1
        self._expand(new_length)
        piece = data[:n].split(b"\0", 1)[0]
        self._write(current, piece)
        self.buffer_length = new_length

    def strcat(self, src) -> None:
        """Append the whole of ``src`` to the current text."""
        data = _to_bytes(src).split(b"\0", 1)[0]
        self.strncat(data, len(data))