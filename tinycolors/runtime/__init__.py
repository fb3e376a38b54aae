# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Persistence runtime for Tinycolors.

Serialization of color records to and from their flat three-field form:

1. Record -- Plain dict tagged with the space name
2. JSON -- Compact or pretty-printed record
3. Text -- CSS-like functional notation, e.g. ``okhsl(0.0812 1 0.568)``

Serializers never convert: a record is written in its own space.
"""

from tinycolors.runtime.serializers import (
    SerializerFormat,
    from_record,
    from_string,
    to_record,
    to_string,
)

__all__ = [
    "to_record",
    "from_record",
    "to_string",
    "from_string",
    "SerializerFormat",
]
