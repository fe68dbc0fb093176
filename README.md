# robo_utils

A small library of general-purpose helpers with no dependencies outside the
standard library.

## Modules

- `robo_utils.errors`: a per-thread error state (`set_error_state`,
  `error_is_set`, `get_error_state`, `get_error_string`, `reset_error`,
  `initialize_error_handling_thread_local_storage`), the `ErrorState`
  dataclass, and the exceptions `RcutilsError`, `InvalidArgumentError`,
  `NotInitializedError` and `BadAllocError`. Setting a new error while a
  different one is still set writes a warning to standard error.
- `robo_utils.allocator`: the `Allocator` dataclass (`allocate`, `deallocate`,
  `reallocate`, `zero_allocate`, `state`), `get_default_allocator`,
  `get_zero_initialized_allocator`, `allocator_is_valid` and `reallocf`.
  The default allocator hands out `bytearray` blocks.
- `robo_utils.array_list`: `ArrayList(initial_capacity, data_size, allocator)`,
  a list whose capacity starts at `initial_capacity` and doubles when full,
  with `add`, `set`, `get`, `remove`, `len()`, `fini` and use as a context
  manager.
- `robo_utils.char_array`: `CharArray(buffer_capacity, allocator)`, a
  NUL-terminated byte buffer with `resize`, `expand_as_needed`, `sprintf`
  (Python `%` formatting), `memcpy`, `strcpy`, `strncat`, `strcat`, `fini`
  and a `value` property holding the text.
- `robo_utils.format_string`: `format_string_limit(allocator, limit, fmt, *args)`,
  `%` formatting cut to at most `limit - 1` bytes; returns `None` on a `None`
  format, an invalid or failing allocator, or mismatched arguments.
- `robo_utils.cmdline_parser`: `cli_option_exist(args, option)` and
  `cli_get_option(args, option)`, which returns the argument following the
  first one that starts with `option`.
- `robo_utils.repl_str`: `repl_str(string, old, new, allocator)`, replacing
  every occurrence of `old` with `new`.
- `robo_utils.filesystem`: `get_cwd`, `is_directory`, `is_file`, `exists`,
  `is_readable`, `is_writable`, `is_readable_and_writable` (owner permission
  bits), `join_path`, `to_native_path` and `mkdir` (mode `0o775`, absolute
  paths only outside Windows, succeeds when the directory already exists).
- `robo_utils.get_env`: `get_env(name)`, returning `""` for an unset
  variable, and `get_home_dir()`, from `HOME` (or `USERPROFILE` on Windows).
- `robo_utils.process`: `get_pid()` and `get_executable_name(allocator)`.

## Installation

```
pip install .
```

## Example

```python
from robo_utils.allocator import get_default_allocator
from robo_utils.array_list import ArrayList
from robo_utils.format_string import format_string_limit
from robo_utils.cmdline_parser import cli_get_option

allocator = get_default_allocator()

items = ArrayList(2, 4, allocator)
for value in (0, 2, 4, 6):
    items.add(value)
items.remove(2)
print(len(items), items.get(2))  # 3 6

print(format_string_limit(allocator, 3, "%s", "test"))  # te

print(cli_get_option(["prog", "--name", "node"], "--name"))  # node
```

## Errors

`ArrayList` and `CharArray` raise exceptions from `robo_utils.errors` and
also record the message in the current thread's error state.
`get_error_string()` reads that message (or `"error not set"`) and
`reset_error()` clears it. Other functions either raise without recording
or return `None`, as described above.

## Not included

The package has no single-character search helpers; use `str.find` and
`str.rfind` instead. It provides no command-line program.

## Running the tests

```
pip install .[test]
pytest
```