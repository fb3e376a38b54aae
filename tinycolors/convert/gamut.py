# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
sRGB gamut queries in OKLab.

For a hue given as a unit vector (a, b) in the OKLab a/b plane, the sRGB
gamut cross-section is a curved triangle between black, white and a single
"cusp" of maximum chroma. This module finds that cusp, intersects
lightness/chroma rays with the gamut boundary, and provides the chroma
anchors used by the okhsl and okhsv codecs.

Reference: https://bottosson.github.io/posts/colorpicker/

Every function accepts scalars or broadcastable arrays and returns NumPy
arrays. Nothing here raises on degenerate input; division by zero and
invalid operations propagate inf/NaN.

Hue vectors must be normalized: a**2 + b**2 == 1.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinycolors.convert.colorspace import (
    LMS_TO_LINEAR,
    OKLAB_TO_LMS,
    apply_matrix,
    oklab_to_linear_rgb,
)

Cusp = tuple[NDArray[np.float64], NDArray[np.float64]]


# =============================================================================
# Toe (perceptual lightness remap)
# =============================================================================

TOE_K1 = 0.206
TOE_K2 = 0.03
TOE_K3 = (1.0 + TOE_K1) / (1.0 + TOE_K2)


def toe(x: ArrayLike) -> NDArray[np.float64]:
    """
    Map OKLab lightness to a lightness estimate closer to CIE Lab L*.

    Positive root of y**2 + (K1 - K3*x)*y - K2*K3*x = 0.
    toe(0) == 0 and toe(1) == 1.
    """
    x = np.asarray(x, dtype=np.float64)
    k3x = TOE_K3 * x - TOE_K1
    return 0.5 * (k3x + np.sqrt(k3x * k3x + 4.0 * TOE_K2 * TOE_K3 * x))


def toe_inv(x: ArrayLike) -> NDArray[np.float64]:
    """Exact inverse of :func:`toe`."""
    x = np.asarray(x, dtype=np.float64)
    return (x * x + TOE_K1 * x) / (TOE_K3 * (x + TOE_K2))


# =============================================================================
# Cusp
# =============================================================================

# Polynomial coefficients (k0..k4) of the max-saturation estimate,
# one row per RGB channel that clips first: red, green, blue.
_MAX_SATURATION_POLY = np.array([
    [1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245],
    [0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204],
    [1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167],
], dtype=np.float64)

# Correction returned for channels that never reach the boundary
_NO_INTERSECTION = 1e6


def _lms_slopes(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    """Change of cube-rooted LMS per unit chroma along the hue (shape (..., 3))."""
    return a[..., None] * OKLAB_TO_LMS[:, 1] + b[..., None] * OKLAB_TO_LMS[:, 2]


def _clipping_channel(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.intp]:
    """Index (0=r, 1=g, 2=b) of the channel that goes negative first for this hue."""
    return np.where(
        -1.88170328 * a - 0.80936493 * b > 1.0,
        0,
        np.where(1.81444104 * a - 1.19445276 * b > 1.0, 1, 2),
    )


def compute_max_saturation(
    a: ArrayLike,
    b: ArrayLike,
    *,
    steps: int = 1,
) -> NDArray[np.float64]:
    """
    Find the maximum saturation S = C/L that fits in sRGB for a hue.

    Max saturation is reached when one of r, g or b goes below zero. A
    polynomial fitted per clipping channel gives the estimate, then
    ``steps`` iterations of Halley's method on that channel refine it.
    One step leaves the clipping channel within about 2e-3 of zero (worst
    for hues around h = 0.8 to 0.9); further steps converge
    to machine precision.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    channel = _clipping_channel(a, b)
    k0, k1, k2, k3, k4 = np.moveaxis(_MAX_SATURATION_POLY[channel], -1, 0)
    weights = LMS_TO_LINEAR[channel]

    s = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_lms = _lms_slopes(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        for _ in range(steps):
            lms_ = 1.0 + np.asarray(s)[..., None] * k_lms
            lms = lms_ ** 3
            lms_ds = 3.0 * k_lms * lms_ * lms_
            lms_ds2 = 6.0 * k_lms * k_lms * lms_

            f = np.sum(weights * lms, axis=-1)
            f1 = np.sum(weights * lms_ds, axis=-1)
            f2 = np.sum(weights * lms_ds2, axis=-1)

            s = s - f * f1 / (f1 * f1 - 0.5 * f * f2)

    return s


def find_cusp(a: ArrayLike, b: ArrayLike, *, steps: int = 1) -> Cusp:
    """
    Find the cusp (L_cusp, C_cusp) of the gamut triangle for a hue.

    The cusp is the max-saturation color scaled in lightness until the
    largest linear RGB channel is exactly 1.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    s_cusp = compute_max_saturation(a, b, steps=steps)

    lab_at_max = np.stack([np.ones_like(s_cusp), s_cusp * a, s_cusp * b], axis=-1)
    rgb_at_max = oklab_to_linear_rgb(lab_at_max)

    # Linear RGB scales with L**3 along a constant-saturation ray
    with np.errstate(divide="ignore"):
        l_cusp = np.cbrt(1.0 / np.max(rgb_at_max, axis=-1))
    c_cusp = l_cusp * s_cusp

    return l_cusp, c_cusp


# =============================================================================
# Gamut intersection
# =============================================================================


def find_gamut_intersection(
    a: ArrayLike,
    b: ArrayLike,
    l1: ArrayLike,
    c1: ArrayLike,
    l0: ArrayLike,
    cusp: Optional[Cusp] = None,
    *,
    steps: int = 1,
) -> NDArray[np.float64]:
    """
    Intersect a lightness/chroma ray with the sRGB gamut boundary.

    The ray runs from (L0, 0) towards (L1, C1) at the hue (a, b). Returns t
    such that (L0 * (1 - t) + t * L1, t * C1) lies on the boundary.

    Below the cusp the boundary is the straight line from black to the cusp,
    so the triangle intersection is exact there. Above it, the triangle
    estimate is refined by ``steps`` Halley steps, one per RGB channel,
    keeping the smallest correction among channels moving towards 1.

    Args:
        a, b: Normalized hue vector
        l1, c1: Second point of the ray
        l0: Lightness where the ray crosses the neutral axis
        cusp: Precomputed ``find_cusp(a, b)`` result, if available
        steps: Halley iterations for the upper half
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    l1 = np.asarray(l1, dtype=np.float64)
    c1 = np.asarray(c1, dtype=np.float64)
    l0 = np.asarray(l0, dtype=np.float64)

    if cusp is None:
        cusp = find_cusp(a, b)
    l_cusp, c_cusp = cusp

    with np.errstate(divide="ignore", invalid="ignore"):
        lower = (l1 - l0) * c_cusp - (l_cusp - l0) * c1 <= 0.0

        # Lower half: intersect with the black-cusp edge
        t_lower = c_cusp * l0 / (c1 * l_cusp + c_cusp * (l0 - l1))

        # Upper half: intersect with the white-cusp edge, then refine
        t = c_cusp * (l0 - 1.0) / (c1 * (l_cusp - 1.0) + c_cusp * (l0 - l1))

        k_lms = _lms_slopes(a, b)
        lms_dt = np.asarray(l1 - l0)[..., None] + c1[..., None] * k_lms

        for _ in range(steps):
            l = l0 * (1.0 - t) + t * l1
            c = t * c1

            lms_ = np.asarray(l)[..., None] + np.asarray(c)[..., None] * k_lms
            lms = lms_ ** 3
            lms_dt1 = 3.0 * lms_dt * lms_ * lms_
            lms_dt2 = 6.0 * lms_dt * lms_dt * lms_

            rgb = apply_matrix(LMS_TO_LINEAR, lms) - 1.0
            rgb1 = apply_matrix(LMS_TO_LINEAR, lms_dt1)
            rgb2 = apply_matrix(LMS_TO_LINEAR, lms_dt2)

            u = rgb1 / (rgb1 * rgb1 - 0.5 * rgb * rgb2)
            t_rgb = np.where(u >= 0.0, -rgb * u, _NO_INTERSECTION)

            t = t + np.min(t_rgb, axis=-1)

        return np.where(lower, t_lower, t)


# =============================================================================
# Saturation anchors
# =============================================================================


def get_st_max(
    a: ArrayLike,
    b: ArrayLike,
    cusp: Optional[Cusp] = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Saturation S = C/L and T = C/(1 - L) of the cusp.

    These are the slopes of the two straight edges of the gamut triangle.
    """
    if cusp is None:
        cusp = find_cusp(a, b)
    l_cusp, c_cusp = cusp
    with np.errstate(divide="ignore", invalid="ignore"):
        return c_cusp / l_cusp, c_cusp / (1.0 - l_cusp)


def get_st_mid(
    a: ArrayLike,
    b: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Smooth approximation of the cusp saturations (S_mid, T_mid).

    Fitted globally over all hues, so there is no channel branch. Used to
    place the middle control point of the okhsl saturation curve.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    s = 0.11516993 + 1.0 / (
        7.44778970 + 4.15901240 * b
        + a * (-2.19557347 + 1.75198401 * b
        + a * (-2.13704948 - 10.02301043 * b
        + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a)))
    )

    t = 0.11239642 + 1.0 / (
        1.61320320 - 0.68124379 * b
        + a * (0.40370612 + 0.90148123 * b
        + a * (-0.27087943 + 0.61223990 * b
        + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a)))
    )

    return s, t


def get_cs(
    l: ArrayLike,
    a: ArrayLike,
    b: ArrayLike,
    cusp: Optional[Cusp] = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """
    Chroma control points (C_0, C_mid, C_max) at lightness L for a hue.

    - C_0: hue-independent chroma from fixed anchors 0.4 (dark) and 0.8 (light)
    - C_mid: smooth mid-gamut chroma, scaled to this hue's triangle
    - C_max: chroma where the constant-lightness ray leaves the gamut
    """
    l = np.asarray(l, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if cusp is None:
        cusp = find_cusp(a, b)

    c_max = find_gamut_intersection(a, b, l, 1.0, l, cusp)
    s_max, t_max = get_st_max(a, b, cusp)
    s_mid, t_mid = get_st_mid(a, b)

    with np.errstate(divide="ignore", invalid="ignore"):
        # Scale factor relating the true boundary to the triangle
        k = c_max / np.minimum(l * s_max, (1.0 - l) * t_max)

        c_a = l * s_mid
        c_b = (1.0 - l) * t_mid
        c_mid = 0.9 * k * np.sqrt(np.sqrt(1.0 / (1.0 / c_a ** 4 + 1.0 / c_b ** 4)))

        c_a = l * 0.4
        c_b = (1.0 - l) * 0.8
        c_0 = np.sqrt(1.0 / (1.0 / c_a ** 2 + 1.0 / c_b ** 2))

    return c_0, c_mid, c_max
