# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
The sRGB transfer curve and the OKLab codec.

    sRGB ⇄ linear RGB ⇄ LMS (cone responses) ⇄ OKLab

OKLab is defined at https://bottosson.github.io/posts/oklab/

All conversions are pure NumPy and operate on arrays of shape (..., 3).
Values outside [0, 1] are passed through unchanged (no clipping), so
out-of-gamut colors survive a round trip.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB values to linear RGB.

    Piecewise: a linear toe of slope 1/12.92 up to 0.04045, then a
    2.4 power curve with a 0.055 offset.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Keep the power branch away from negative bases (np.where evaluates both)
    srgb_safe = np.maximum(srgb, 0.04045)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb_safe + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear. Extended values are not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    linear_safe = np.maximum(linear, 0.0031308)
    srgb = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return srgb


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/
# The gamut polynomials in convert.gamut are fitted to these exact values.

# Linear sRGB to LMS (cone responses)
LINEAR_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# Cube-rooted LMS to OKLab
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab to cube-rooted LMS
OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
LMS_TO_LINEAR = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def apply_matrix(matrix: NDArray[np.float64], values: ArrayLike) -> NDArray[np.float64]:
    """Multiply every 3-vector in ``values`` (shape (..., 3)) by ``matrix``."""
    return np.einsum('...j,ij->...i', values, matrix)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = apply_matrix(LINEAR_TO_LMS, rgb)

    # Cube root (real-valued for negative, out-of-gamut responses)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return apply_matrix(LMS_TO_OKLAB, lms_cbrt)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cube-rooted)
    lms_cbrt = apply_matrix(OKLAB_TO_LMS, lab)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    return apply_matrix(LMS_TO_LINEAR, lms)


# =============================================================================
# Convenience: sRGB ↔ OKLab (full chain)
# =============================================================================


def srgb_to_oklab(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to OKLab.

    Full chain: sRGB → Linear RGB → OKLab
    """
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to gamma-encoded sRGB.

    Full chain: OKLab → Linear RGB → sRGB. Out-of-gamut colors produce
    values outside [0, 1]; callers that need a displayable value clip.
    """
    return linear_to_srgb(oklab_to_linear_rgb(lab))
