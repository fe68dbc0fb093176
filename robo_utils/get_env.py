"""Environment variable lookup."""

from __future__ import annotations

import os
import sys
from typing import Optional

from .errors import InvalidArgumentError


def get_env(env_name) -> str:
    """Return the value of an environment variable, or "" when it is unset."""
    if env_name is None:
        raise InvalidArgumentError("argument env_name is null")
    return os.environ.get(env_name, "")


def get_home_dir() -> Optional[str]:
    """Return the user's home directory from the environment, or None."""
    home = get_env("HOME")
    if home:
        return home
    if sys.platform.startswith("win"):
        profile = get_env("USERPROFILE")
        if profile:
            return profile
    return None