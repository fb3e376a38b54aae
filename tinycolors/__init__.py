# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Tinycolors -- Conversions between sRGB, linear RGB, OKLab, Okhsl, Okhsv,
HSL and HSV.

Quick start::

    from tinycolors import SRGBColor

    c = SRGBColor(1.0, 0.5, 0.25)
    c.to_okhsl()        # OKHSLColor(h=..., s=..., l=...)
    c.to("oklab")       # OKLabColor(l=..., a=..., b=...)

Arrays of shape (..., 3) convert directly::

    from tinycolors import convert

    convert(pixels, "srgb", "okhsv")
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinycolors.convert import conversion_path, convert
from tinycolors.schema import (
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
    # Core API
    "convert",
    "conversion_path",
    "ColorSpace",
    "Color",
    # Records
    "SRGBColor",
    "LinearRGBColor",
    "OKLabColor",
    "OKHSLColor",
    "OKHSVColor",
    "HSLColor",
    "HSVColor",
    "COLOR_TYPES",
    # Named colors
    "NAMED_COLORS",
    "named_color",
    # Version
    "__version__",
]
