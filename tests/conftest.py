# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator

import pytest

from hashwrap import BlowfishHasher, Hash

ENV_KEY_PREFIX = "HASHWRAP_"
SECRET = "909b96914de6866224f70f52a13e9fa6"  # nosemgrep # nosec


@pytest.fixture(autouse=True, name="clean_env")
def clean_env_fixture() -> Generator[None, None, None]:
    """Run each test without HASHWRAP_* variables or extra CLI args."""
    original_envs = {
        key: os.environ.pop(key)
        for key in list(os.environ)
        if key.startswith(ENV_KEY_PREFIX)
    }
    original_argv = sys.argv[:]
    sys.argv = sys.argv[:1]
    yield
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            del os.environ[key]
    os.environ.update(original_envs)
    sys.argv = original_argv


@pytest.fixture(name="hasher")
def hasher_fixture() -> Hash:
    """A facade around a default Blowfish hasher, with the test secret."""
    return Hash(BlowfishHasher(), SECRET)
