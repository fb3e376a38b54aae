# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Conversion between any two color spaces.

Only a handful of conversions have a direct formula. Every other pair is
composed along the shortest chain of direct conversions:

    hsl ─┐                  ┌─ okhsl
         srgb ── rgb ── oklab
    hsv ─┘                  └─ okhsv
"""

from __future__ import annotations

from collections import deque
from functools import lru_cache
from typing import Callable, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinycolors.convert.colorspace import (
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_linear_rgb,
    srgb_to_linear,
)
from tinycolors.convert.legacy import (
    hsl_to_srgb,
    hsv_to_srgb,
    srgb_to_hsl,
    srgb_to_hsv,
)
from tinycolors.convert.okhsx import (
    okhsl_to_oklab,
    okhsv_to_oklab,
    oklab_to_okhsl,
    oklab_to_okhsv,
)
from tinycolors.schema import ColorSpace

Conversion = Callable[[ArrayLike], NDArray[np.float64]]
SpaceLike = Union[ColorSpace, str]


# Direct conversions, keyed by (source, target)
DIRECT_CONVERSIONS: dict[tuple[ColorSpace, ColorSpace], Conversion] = {
    (ColorSpace.SRGB, ColorSpace.RGB): srgb_to_linear,
    (ColorSpace.RGB, ColorSpace.SRGB): linear_to_srgb,
    (ColorSpace.RGB, ColorSpace.OKLAB): linear_rgb_to_oklab,
    (ColorSpace.OKLAB, ColorSpace.RGB): oklab_to_linear_rgb,
    (ColorSpace.OKLAB, ColorSpace.OKHSL): oklab_to_okhsl,
    (ColorSpace.OKHSL, ColorSpace.OKLAB): okhsl_to_oklab,
    (ColorSpace.OKLAB, ColorSpace.OKHSV): oklab_to_okhsv,
    (ColorSpace.OKHSV, ColorSpace.OKLAB): okhsv_to_oklab,
    (ColorSpace.SRGB, ColorSpace.HSL): srgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.SRGB): hsl_to_srgb,
    (ColorSpace.SRGB, ColorSpace.HSV): srgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.SRGB): hsv_to_srgb,
}


@lru_cache(maxsize=None)
def conversion_path(source: SpaceLike, target: SpaceLike) -> tuple[ColorSpace, ...]:
    """
    Shortest chain of spaces from source to target, both ends included.

    Example:
        >>> conversion_path("hsl", "okhsv")
        (<ColorSpace.HSL: 'hsl'>, <ColorSpace.SRGB: 'srgb'>, <ColorSpace.RGB: 'rgb'>,
         <ColorSpace.OKLAB: 'oklab'>, <ColorSpace.OKHSV: 'okhsv'>)
    """
    source = ColorSpace.coerce(source)
    target = ColorSpace.coerce(target)

    # Breadth-first search over the direct conversions
    previous: dict[ColorSpace, ColorSpace | None] = {source: None}
    queue = deque([source])
    while queue:
        space = queue.popleft()
        if space is target:
            break
        for start, end in DIRECT_CONVERSIONS:
            if start is space and end not in previous:
                previous[end] = space
                queue.append(end)

    path = [target]
    while path[-1] is not source:
        path.append(previous[path[-1]])
    return tuple(reversed(path))


def convert(
    values: ArrayLike,
    source: SpaceLike,
    target: SpaceLike,
) -> NDArray[np.float64]:
    """
    Convert color coordinates from one space to another.

    Args:
        values: Array of shape (..., 3) in the source space
        source: Source space (ColorSpace or name, e.g. "srgb")
        target: Target space (ColorSpace or name, e.g. "okhsl")

    Returns:
        Array of shape (..., 3) in the target space

    Raises:
        ValueError: If a space name is unknown or the last axis is not 3
    """
    values = np.asarray(values, dtype=np.float64)
    if values.ndim == 0 or values.shape[-1] != 3:
        raise ValueError(
            f"Expected (..., 3) array, got shape {values.shape}"
        )

    path = conversion_path(source, target)
    for start, end in zip(path, path[1:]):
        values = DIRECT_CONVERSIONS[start, end](values)
    return values
