# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Classic HSL / HSV ↔ sRGB.

These operate directly on gamma-encoded sRGB, like CSS hsl() and most
color pickers. Hue is a fraction of a full turn in [0, 1); grays get
h = 0 and s = 0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _hue(
    r: NDArray[np.float64],
    g: NDArray[np.float64],
    b: NDArray[np.float64],
    mx: NDArray[np.float64],
    d: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Hue shared by HSL and HSV, from the max channel and the range d."""
    safe_d = np.where(d == 0.0, 1.0, d)
    h = np.select(
        [d == 0.0, mx == r, mx == g],
        [
            0.0,
            (g - b) / safe_d + np.where(g < b, 6.0, 0.0),
            (b - r) / safe_d + 2.0,
        ],
        default=(r - g) / safe_d + 4.0,
    )
    return h / 6.0


def srgb_to_hsl(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to HSL.

    Args:
        srgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with HSL values (h, s, l)
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    d = mx - mn

    l = (mx + mn) / 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        s = np.where(l > 0.5, d / (2.0 - mx - mn), d / (mx + mn))
    s = np.where(d == 0.0, 0.0, s)

    return np.stack([_hue(r, g, b, mx, d), s, l], axis=-1)


def _hue_to_channel(
    p: NDArray[np.float64],
    q: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    t = np.mod(t, 1.0)
    return np.select(
        [t < 1.0 / 6.0, t < 0.5, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        default=p,
    )


def hsl_to_srgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB.

    Args:
        hsl: Array of shape (..., 3) with HSL values (h, s, l)

    Returns:
        Array of shape (..., 3) with sRGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    rgb = np.stack([
        _hue_to_channel(p, q, h + 1.0 / 3.0),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1.0 / 3.0),
    ], axis=-1)

    gray = np.stack([l, l, l], axis=-1)
    return np.where((s == 0.0)[..., None], gray, rgb)


def srgb_to_hsv(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to HSV.

    Args:
        srgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with HSV values (h, s, v)
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    d = mx - mn

    with np.errstate(divide="ignore", invalid="ignore"):
        s = np.where(mx == 0.0, 0.0, d / mx)

    return np.stack([_hue(r, g, b, mx, d), s, mx], axis=-1)


def hsv_to_srgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to sRGB.

    Args:
        hsv: Array of shape (..., 3) with HSV values (h, s, v)

    Returns:
        Array of shape (..., 3) with sRGB values
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]

    i = np.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    # Sextant of the hue circle
    i = np.mod(i, 6.0).astype(np.intp)

    r = np.choose(i, [v, q, p, p, t, v])
    g = np.choose(i, [t, v, v, q, p, p])
    b = np.choose(i, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)
