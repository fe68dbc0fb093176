import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from robo_utils.allocator import get_default_allocator, get_zero_initialized_allocator
from robo_utils.errors import (
    ErrorState,
    InvalidArgumentError,
    RcutilsError,
    error_is_set,
    get_error_state,
    get_error_string,
    initialize_error_handling_thread_local_storage,
    reset_error,
    set_error_state,
)


@pytest.fixture(autouse=True)
def clean_error():
    reset_error()
    yield
    reset_error()


def _in_fresh_thread(function, *args):
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(function, *args).result()


def test_not_set_string():
    assert error_is_set() is False
    assert get_error_string() == "error not set"


def test_set_and_get_state():
    set_error_state("bad thing", "file.c", 12)
    assert error_is_set() is True
    assert get_error_state() == ErrorState("bad thing", "file.c", 12)
    text = get_error_string()
    assert "bad thing" in text
    assert "file.c" in text
    assert "12" in text


def test_reset_clears_state():
    set_error_state("bad thing", "file.c", 12)
    reset_error()
    assert error_is_set() is False
    assert get_error_state() == ErrorState()
    assert get_error_string() == "error not set"


def test_none_arguments_do_not_set(capsys):
    set_error_state(None, "file.c", 1)
    assert error_is_set() is False
    set_error_state("msg", None, 1)
    assert error_is_set() is False
    assert "error was not set" in capsys.readouterr().err


def test_overwrite_warns(capsys):
    set_error_state("first", "a.c", 1)
    set_error_state("second", "b.c", 2)
    err = capsys.readouterr().err
    assert "first" in err
    assert "second" in err
    assert get_error_state().message == "second"


def test_same_message_does_not_warn(capsys):
    set_error_state("same", "a.c", 1)
    set_error_state("same", "a.c", 2)
    assert capsys.readouterr().err == ""
    assert get_error_state().line_number == 2


def test_state_is_thread_local():
    set_error_state("main", "a.c", 1)
    seen = []

    def worker():
        seen.append(error_is_set())
        set_error_state("worker", "b.c", 2)
        seen.append(get_error_state().message)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    assert seen == [False, "worker"]
    assert get_error_state().message == "main"


def test_initialize_rejects_invalid_allocator():
    with pytest.raises(InvalidArgumentError) as info:
        _in_fresh_thread(
            initialize_error_handling_thread_local_storage,
            get_zero_initialized_allocator(),
        )
    assert isinstance(info.value, RcutilsError)
    assert isinstance(info.value, ValueError)


def test_initialize_leaves_error_unset():
    def worker():
        initialize_error_handling_thread_local_storage(get_default_allocator())
        first = error_is_set()
        initialize_error_handling_thread_local_storage(get_default_allocator())
        return first, get_error_string()

    assert _in_fresh_thread(worker) == (False, "error not set")