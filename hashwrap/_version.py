# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.
"""Version information for hashwrap."""

__version__ = "1.0.0"
