# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Numerical conversion core for Tinycolors.

All functions are pure NumPy over arrays of shape (..., 3), keep no state,
and never raise on out-of-range input.
"""

from tinycolors.convert.route import conversion_path, convert

__all__ = ["convert", "conversion_path"]
