"""Minimal lookup of options in a command line."""

from __future__ import annotations

from typing import Optional, Sequence


def cli_option_exist(args: Sequence[str], option: str) -> bool:
    """Return whether ``option`` appears exactly among ``args``."""
    return option in args


def cli_get_option(args: Sequence[str], option: str) -> Optional[str]:
    """Return the argument after the first one starting with ``option``.

    Returns None when no argument matches or the match is the last one.
    """
    for index, arg in enumerate(args):
        if arg.startswith(option):
            if index + 1 < len(args):
                return args[index + 1]
            return None
    return None