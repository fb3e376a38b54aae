# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Serializers for color records.

Each record is stored as its three components in storage order, tagged
with the space name. Components are written exactly as held.
"""

from tinycolors.runtime.serializers.base import SerializerFormat
from tinycolors.runtime.serializers.record import from_record, to_record
from tinycolors.runtime.serializers.text import from_string, to_string

__all__ = [
    "SerializerFormat",
    "to_record",
    "from_record",
    "to_string",
    "from_string",
]
