# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
String serializers.

JSON form wraps :func:`to_record`. Text form is CSS-like functional
notation with space-separated components::

    srgb(1 0.5 0.25)
    okhsl(0.0812 1 0.568)

Numbers are written with ``precision`` significant digits; Python's ``%g``
drops trailing zeros.
"""

from __future__ import annotations

import json
import re

from tinycolors.runtime.serializers.base import SerializerFormat
from tinycolors.runtime.serializers.record import from_record, to_record
from tinycolors.schema import COLOR_TYPES, Color, ColorSpace

_NUMBER = r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|nan|[-+]?inf)"
_TEXT_RE = re.compile(
    rf"^\s*([a-z]+)\(\s*{_NUMBER}[\s,]+{_NUMBER}[\s,]+{_NUMBER}\s*\)\s*$",
    re.IGNORECASE,
)


def _format_component(value: float, precision: int) -> str:
    text = f"{value:.{precision}g}"
    # Text output never shows negative zero
    return "0" if text == "-0" else text


def to_string(
    color: Color,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    precision: int = 6,
) -> str:
    """Serialize a color record to a string.

    Args:
        color: The record to serialize.
        format: JSON (compact), JSON_PRETTY, or TEXT.
        precision: Significant digits in TEXT format.

    Returns:
        Serialized string.

    Example::

        >>> to_string(SRGBColor(1.0, 0.5, 0.25))
        '{"space":"srgb","r":1.0,"g":0.5,"b":0.25}'
        >>> to_string(SRGBColor(1.0, 0.5, 0.25), format=SerializerFormat.TEXT)
        'srgb(1 0.5 0.25)'
    """
    if format == SerializerFormat.TEXT:
        parts = " ".join(_format_component(x, precision) for x in color.to_tuple())
        return f"{color.space.value}({parts})"
    elif format == SerializerFormat.JSON_PRETTY:
        return json.dumps(to_record(color), indent=2)
    else:
        return json.dumps(to_record(color), separators=(",", ":"))


def from_string(text: str) -> Color:
    """Parse a string produced by :func:`to_string` in any format.

    Raises:
        ValueError: If the text is neither a JSON record nor functional
            notation, or names an unknown space.
    """
    stripped = text.strip()
    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid color JSON: {e}") from e
        return from_record(data)

    m = _TEXT_RE.match(stripped)
    if not m:
        raise ValueError(f"Cannot parse color from {text!r}")
    space = ColorSpace.coerce(m.group(1))
    return COLOR_TYPES[space](*(float(m.group(i)) for i in (2, 3, 4)))
