# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Dict records.

A record is the flat three-field form of a color plus the space name::

    {"space": "okhsl", "h": 0.0812, "s": 1.0, "l": 0.568}
"""

from __future__ import annotations

from tinycolors.schema import COLOR_TYPES, Color, ColorSpace


def to_record(color: Color) -> dict:
    """Serialize a color record to a tagged dictionary."""
    record: dict = {"space": color.space.value}
    record.update(color.to_dict())
    return record


def from_record(data: dict) -> Color:
    """Deserialize a tagged dictionary produced by :func:`to_record`.

    Raises:
        ValueError: If ``space`` is missing or unknown.
        KeyError: If a component is missing.
    """
    if "space" not in data:
        raise ValueError("Color record has no 'space' field")
    space = ColorSpace.coerce(data["space"])
    return COLOR_TYPES[space].from_dict(data)
