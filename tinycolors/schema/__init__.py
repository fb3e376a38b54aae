# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Schema definitions for color records.

All types in this module are immutable (frozen dataclasses).
Every record converts to every other record through ``Color.to``.
"""

from tinycolors.schema.colors import (
    COLOR_TYPES,
    NAMED_COLORS,
    Color,
    ColorSpace,
    HSLColor,
    HSVColor,
    LinearRGBColor,
    OKHSLColor,
    OKHSVColor,
    OKLabColor,
    SRGBColor,
    named_color,
)

__all__ = [
    # Spaces
    "ColorSpace",
    "COLOR_TYPES",
    # Shared behavior
    "Color",
    # Records
    "SRGBColor",
    "LinearRGBColor",
    "OKLabColor",
    "OKHSLColor",
    "OKHSVColor",
    "HSLColor",
    "HSVColor",
    # Named colors (sRGB only)
    "NAMED_COLORS",
    "named_color",
]
