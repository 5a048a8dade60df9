# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "HASHWRAP_"
DOT_ENV_PATH = Path.cwd() / ".env"
T = TypeVar("T")


def load_dot_env() -> bool:
    """Load the .env file of the working directory, if any.

    Returns
    -------
    bool
        Whether a .env file was loaded
    """
    if DOT_ENV_PATH.exists():
        return load_dotenv(DOT_ENV_PATH, override=False)
    return False


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : str
        The CLI argument key
    env_key : str
        The environment variable key (without the prefix)
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value

    Returns
    -------
    T
        The value
    """
    value_str: Optional[str] = None

    # Check CLI arg
    if cli_key in sys.argv:
        cli_index = sys.argv.index(cli_key) + 1
        if cli_index < len(sys.argv):
            value_str = sys.argv[cli_index]

    # Check env var
    if not value_str:
        from_env = os.environ.get(f"{ENV_PREFIX}{env_key}")
        if from_env:
            value_str = from_env

    # pylint: disable=too-many-try-statements
    if value_str:
        try:
            return cast(value_str)
        except (ValueError, TypeError):
            pass

    return fallback
