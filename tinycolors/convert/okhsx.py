# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
OKLab ↔ Okhsl / Okhsv.

Okhsl and Okhsv are hue/saturation/lightness (value) spaces built on OKLab,
with saturation made relative to the sRGB gamut so that s = 1 always lands
on the gamut boundary, and lightness passed through the toe remap.

Reference: https://bottosson.github.io/posts/colorpicker/

Hue is a fraction of a full turn in [0, 1), with the origin chosen so that
h = 0 is the hue vector (a, b) = (1, 0).

Arrays have shape (..., 3). Degenerate inputs never raise:
- chroma below ACHROMATIC_CHROMA is gray: h = 0, s = 0
- okhsl l = 0 / l = 1 are exact black / white
- okhsv v = 0 and OKLab L = 0 are black
Anything else outside the nominal domain propagates NaN.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinycolors.convert.colorspace import oklab_to_linear_rgb
from tinycolors.convert.gamut import get_cs, get_st_max, toe, toe_inv

# Below this chroma a color is treated as gray. Exact grays land around
# 1e-8 in OKLab because the published matrices are rounded.
ACHROMATIC_CHROMA = 1e-6

# Okhsl saturation of the C_mid control point, and its reciprocal
_MID = 0.8
_MID_INV = 1.25

# Okhsv saturation of the reference "full value" curve
_S0 = 0.5


def _split(values: ArrayLike) -> tuple[NDArray[np.float64], ...]:
    values = np.asarray(values, dtype=np.float64)
    return values[..., 0], values[..., 1], values[..., 2]


def _polar(a: NDArray[np.float64], b: NDArray[np.float64]):
    """Chroma, unit hue vector, hue fraction and gray mask of OKLab a/b."""
    c = np.sqrt(a * a + b * b)
    achromatic = c < ACHROMATIC_CHROMA

    safe_c = np.where(achromatic, 1.0, c)
    a_ = np.where(achromatic, 1.0, a / safe_c)
    b_ = np.where(achromatic, 0.0, b / safe_c)
    # atan2 returns +pi for b = -0.0; wrap so h stays in [0, 1)
    h = np.mod(0.5 + 0.5 * np.arctan2(-b, -a) / np.pi, 1.0)
    h = np.where(achromatic, 0.0, h)

    return c, a_, b_, h, achromatic


def _hue_vector(h: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    angle = 2.0 * np.pi * h
    return np.cos(angle), np.sin(angle)


def _rgb_scale(
    l_vt: NDArray[np.float64],
    c_vt: NDArray[np.float64],
    a_: NDArray[np.float64],
    b_: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Lightness factor that puts the toe-adjusted full-value color on the gamut."""
    rgb = oklab_to_linear_rgb(np.stack([l_vt, a_ * c_vt, b_ * c_vt], axis=-1))
    return np.cbrt(1.0 / np.maximum(np.max(rgb, axis=-1), 0.0))


# =============================================================================
# Okhsl
# =============================================================================


def oklab_to_okhsl(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to Okhsl.

    Chroma is mapped to saturation through two rational segments: one from
    (0, 0) to (0.8, C_mid) shaped by C_0, and one from (0.8, C_mid) to
    (1, C_max).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with Okhsl values (h, s, l)
    """
    L, a, b = _split(lab)

    with np.errstate(divide="ignore", invalid="ignore"):
        c, a_, b_, h, achromatic = _polar(a, b)

        c_0, c_mid, c_max = get_cs(L, a_, b_)

        k_1 = _MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        t = c / (k_1 + k_2 * c)
        s_low = t * _MID

        k_0 = c_mid
        k_1 = (1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        t = (c - k_0) / (k_1 + k_2 * (c - k_0))
        s_high = _MID + (1.0 - _MID) * t

        s = np.where(c < c_mid, s_low, s_high)
        s = np.where(achromatic, 0.0, s)

        l = toe(L)

    return np.stack([h, s, l], axis=-1)


def okhsl_to_oklab(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Okhsl to OKLab.

    Inverse of :func:`oklab_to_okhsl`.

    Args:
        hsl: Array of shape (..., 3) with Okhsl values (h, s, l)

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    h, s, l = _split(hsl)

    with np.errstate(divide="ignore", invalid="ignore"):
        a_, b_ = _hue_vector(h)
        L = np.where(l != 0.0, toe_inv(l), 0.0)

        c_0, c_mid, c_max = get_cs(L, a_, b_)

        t = _MID_INV * s
        k_1 = _MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        c_low = t * k_1 / (1.0 - k_2 * t)

        t = (s - _MID) / (1.0 - _MID)
        k_0 = c_mid
        k_1 = (1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        c_high = k_0 + t * k_1 / (1.0 - k_2 * t)

        c = np.where(s < _MID, c_low, c_high)

        # Black and white have no chroma to spend
        c = np.where((l == 0.0) | (l == 1.0), 0.0, c)
        L = np.where(l == 1.0, 1.0, L)

    return np.stack([L, c * a_, c * b_], axis=-1)


# =============================================================================
# Okhsv
# =============================================================================


def oklab_to_okhsv(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to Okhsv.

    The color is projected along a ray from black onto the full-value curve
    (v = 1), whose shape follows the gamut triangle. The toe and a final
    gamut rescale keep v = 1 on the sRGB boundary.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with Okhsv values (h, s, v)
    """
    L, a, b = _split(lab)
    black = L == 0.0

    with np.errstate(divide="ignore", invalid="ignore"):
        c, a_, b_, h, achromatic = _polar(a, b)

        s_max, t_max = get_st_max(a_, b_)
        k = 1.0 - _S0 / s_max

        # Where the ray from black through (L, C) meets the full-value curve
        t = t_max / (c + L * t_max)
        l_v = t * L
        c_v = t * c

        l_vt = toe_inv(l_v)
        c_vt = c_v * l_vt / l_v

        scale_l = _rgb_scale(l_vt, c_vt, a_, b_)

        L = L / scale_l
        c = c / scale_l

        c = c * toe(L) / L
        L = toe(L)

        v = L / l_v
        s = (_S0 + t_max) * c_v / ((t_max * _S0) + t_max * k * c_v)

        s = np.where(achromatic | black, 0.0, s)
        v = np.where(black, 0.0, v)
        h = np.where(black, 0.0, h)

    return np.stack([h, s, v], axis=-1)


def okhsv_to_oklab(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Okhsv to OKLab.

    Inverse of :func:`oklab_to_okhsv`. The same gamut rescale is applied,
    so v = 1 never leaves the sRGB gamut.

    Args:
        hsv: Array of shape (..., 3) with Okhsv values (h, s, v)

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    h, s, v = _split(hsv)

    with np.errstate(divide="ignore", invalid="ignore"):
        a_, b_ = _hue_vector(h)

        s_max, t_max = get_st_max(a_, b_)
        k = 1.0 - _S0 / s_max

        # Point on the full-value curve for this saturation
        denom = _S0 + t_max - t_max * k * s
        l_v = 1.0 - s * _S0 / denom
        c_v = s * t_max * _S0 / denom

        L = v * l_v
        c = v * c_v

        # Toe-adjusted full-value point, computed before L is remapped
        l_vt = toe_inv(l_v)
        c_vt = c_v * l_vt / l_v

        l_new = toe_inv(L)
        c = c * l_new / L
        L = l_new

        scale_l = _rgb_scale(l_vt, c_vt, a_, b_)

        L = L * scale_l
        c = c * scale_l

        black = v == 0.0
        L = np.where(black, 0.0, L)
        c = np.where(black, 0.0, c)

    return np.stack([L, c * a_, c * b_], axis=-1)
