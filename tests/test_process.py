import os
import sys

from robo_utils.allocator import Allocator, get_default_allocator, get_zero_initialized_allocator
from robo_utils.process import get_executable_name, get_pid


def _failing_allocator():
    default = get_default_allocator()
    return Allocator(
        allocate=lambda size, state: None,
        deallocate=default.deallocate,
        reallocate=lambda pointer, size, state: None,
        zero_allocate=lambda n, size, state: None,
    )


def test_get_pid_matches_os():
    assert get_pid() == os.getpid()


def test_get_executable_name_is_base_name(monkeypatch):
    monkeypatch.setattr(sys, "argv", [os.path.join("some", "dir", "prog")])
    assert get_executable_name(get_default_allocator()) == "prog"


def test_get_executable_name_plain(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tool", "--flag"])
    assert get_executable_name(get_default_allocator()) == "tool"


def test_get_executable_name_invalid_allocator():
    assert get_executable_name(get_zero_initialized_allocator()) is None


def test_get_executable_name_failing_allocator():
    assert get_executable_name(_failing_allocator()) is None