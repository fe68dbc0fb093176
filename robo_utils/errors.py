"""Thread-local error state and the exceptions raised by the package."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass

from .allocator import allocator_is_valid

_NOT_SET = "error not set"


class RcutilsError(Exception):
    """Base class of every error raised by the package."""


class InvalidArgumentError(RcutilsError, ValueError):
    """An argument was missing, out of range or otherwise unusable."""


class NotInitializedError(RcutilsError, RuntimeError):
    """An object was used before initialisation or after finalisation."""


class BadAllocError(RcutilsError, MemoryError):
    """The allocator could not provide the requested memory."""


@dataclass(frozen=True)
class ErrorState:
    """The message and origin of the most recent error in a thread."""

    message: str = ""
    file: str = ""
    line_number: int = 0


class _ThreadState(threading.local):
    def __init__(self) -> None:
        self.initialized = False
        self.state = ErrorState()
        self.string = ""
        self.string_is_formatted = False
        self.is_set = False


_tls = _ThreadState()


def _format_error_string(state: ErrorState) -> str:
    return f"{state.message}, at {state.file}:{state.line_number}"


def _overwrite_message(new_state: ErrorState) -> str:
    return (
        "\n"
        ">>> [robo_utils|errors] set_error_state()\n"
        "This error state is being overwritten:\n"
        "\n"
        f"  '{get_error_string()}'\n"
        "\n"
        "with this new error message:\n"
        "\n"
        f"  '{_format_error_string(new_state)}'\n"
        "\n"
        "reset_error() should be called after error handling to avoid this.\n"
        "<<<\n"
    )


def initialize_error_handling_thread_local_storage(allocator) -> None:
    """Prepare this thread's error storage; raise if the allocator is invalid."""
    if _tls.initialized:
        return
    if not allocator_is_valid(allocator):
        sys.stderr.write(
            "[robo_utils|errors] initialize_error_handling_thread_local_storage() "
            "given invalid allocator\n"
        )
        raise InvalidArgumentError("invalid allocator")
    _tls.initialized = True
    reset_error()
    set_error_state("no error - initializing thread-local storage", __file__, 0)
    get_error_string()
    reset_error()


def set_error_state(error_string, file, line_number) -> None:
    """Record an error for the current thread, warning if one is overwritten."""
    if error_string is None:
        sys.stderr.write(
            "[robo_utils|errors] set_error_state() given None for error_string, "
            "error was not set\n"
        )
        return
    if file is None:
        sys.stderr.write(
            "[robo_utils|errors] set_error_state() given None for file, "
            "error was not set\n"
        )
        return
    new_state = ErrorState(str(error_string), str(file), int(line_number))
    if (
        _tls.is_set
        and not _tls.string.startswith(new_state.message)
        and not _tls.state.message.startswith(new_state.message)
    ):
        sys.stderr.write(_overwrite_message(new_state))
    _tls.state = new_state
    _tls.string_is_formatted = False
    _tls.string = ""
    _tls.is_set = True


def error_is_set() -> bool:
    """Return whether an error is recorded for the current thread."""
    return _tls.is_set


def get_error_state() -> ErrorState:
    """Return the current thread's error state."""
    return _tls.state


def get_error_string() -> str:
    """Return the formatted error string, or "error not set"."""
    if not _tls.is_set:
        return _NOT_SET
    if not _tls.string_is_formatted:
        _tls.string = _format_error_string(_tls.state)
        _tls.string_is_formatted = True
    return _tls.string


def reset_error() -> None:
    """Clear the current thread's error state."""
    _tls.state = ErrorState()
    _tls.string_is_formatted = False
    _tls.string = ""
    _tls.is_set = False