# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""Tests for gamut queries (cusp, gamut intersection, chroma anchors) and the toe."""

import numpy as np
import pytest

from tinycolors.convert.colorspace import oklab_to_linear_rgb, srgb_to_oklab
from tinycolors.convert.gamut import (
    compute_max_saturation,
    find_cusp,
    find_gamut_intersection,
    get_cs,
    get_st_max,
    get_st_mid,
    toe,
    toe_inv,
)


def _hue_vector(h):
    return np.cos(2.0 * np.pi * h), np.sin(2.0 * np.pi * h)


def _hue_of(srgb):
    lab = srgb_to_oklab(np.array(srgb, dtype=np.float64))
    c = np.hypot(lab[1], lab[2])
    return lab[0], c, lab[1] / c, lab[2] / c


# Fully saturated sRGB colors (max channel 1, min channel 0) are the cusps
# of their own hues.
CUSP_COLORS = [
    [1.0, 0.0, 0.0],
    [1.0, 0.5, 0.0],
    [1.0, 1.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 1.0, 1.0],
    [0.0, 0.0, 1.0],
    [1.0, 0.0, 1.0],
]

HUES = np.linspace(0.0, 1.0, 24, endpoint=False)


class TestToe:
    """The toe must be a monotonic bijection on [0, 1]."""

    def test_endpoints(self):
        assert float(toe(0.0)) == pytest.approx(0.0, abs=1e-12)
        assert float(toe(1.0)) == pytest.approx(1.0, abs=1e-12)

    def test_inverse_endpoints(self):
        assert float(toe_inv(0.0)) == pytest.approx(0.0, abs=1e-12)
        assert float(toe_inv(1.0)) == pytest.approx(1.0, abs=1e-12)

    def test_roundtrip(self):
        x = np.linspace(0.0, 1.0, 1000)
        np.testing.assert_allclose(toe_inv(toe(x)), x, atol=1e-5)

    def test_inverse_roundtrip(self):
        x = np.linspace(0.0, 1.0, 1000)
        np.testing.assert_allclose(toe(toe_inv(x)), x, atol=1e-5)

    def test_monotonic(self):
        y = toe(np.linspace(0.0, 1.0, 1000))
        assert np.all(np.diff(y) > 0.0)

    def test_darkens_midtones(self):
        """OKLab lightness is remapped below the identity in the dark range."""
        assert float(toe(0.5)) < 0.5


class TestMaxSaturation:

    @pytest.mark.parametrize("srgb", CUSP_COLORS)
    def test_channel_reaches_zero(self, srgb):
        """At the max saturation the weakest linear channel is zero."""
        _, _, a, b = _hue_of(srgb)
        s = compute_max_saturation(a, b)
        rgb = oklab_to_linear_rgb(np.array([1.0, s * a, s * b]))
        assert float(np.min(rgb)) == pytest.approx(0.0, abs=1e-3)

    def test_more_steps_same_point(self):
        a, b = _hue_vector(HUES)
        np.testing.assert_allclose(
            compute_max_saturation(a, b, steps=3),
            compute_max_saturation(a, b),
            atol=1e-3,
        )

    def test_more_steps_converge_near_magenta(self):
        """The single-step estimate is weakest between blue and red."""
        a, b = _hue_vector(20.0 / 24.0)
        for steps, tol in ((1, 3e-3), (3, 1e-9)):
            s = compute_max_saturation(a, b, steps=steps)
            rgb = oklab_to_linear_rgb(np.array([1.0, s * a, s * b]))
            assert abs(float(np.min(rgb))) < tol


class TestFindCusp:

    @pytest.mark.parametrize("srgb", CUSP_COLORS)
    def test_saturated_colors_are_cusps(self, srgb):
        L, C, a, b = _hue_of(srgb)
        l_cusp, c_cusp = find_cusp(a, b)
        assert float(l_cusp) == pytest.approx(L, abs=1e-3)
        assert float(c_cusp) == pytest.approx(C, abs=1e-3)

    def test_dominant_channel_is_one(self):
        a, b = _hue_vector(HUES)
        l_cusp, c_cusp = find_cusp(a, b)
        lab = np.stack([l_cusp, c_cusp * a, c_cusp * b], axis=-1)
        rgb = oklab_to_linear_rgb(lab)
        np.testing.assert_allclose(np.max(rgb, axis=-1), 1.0, atol=1e-6)

    def test_vectorized_matches_scalar(self):
        a, b = _hue_vector(HUES)
        l_batch, c_batch = find_cusp(a, b)
        for i, h in enumerate(HUES):
            l_one, c_one = find_cusp(*_hue_vector(h))
            assert float(l_one) == pytest.approx(float(l_batch[i]), abs=1e-12)
            assert float(c_one) == pytest.approx(float(c_batch[i]), abs=1e-12)


class TestGamutIntersection:

    @pytest.mark.parametrize("L", [0.1, 0.3, 0.5, 0.7, 0.9, 0.97])
    def test_constant_lightness_ray_hits_boundary(self, L):
        a, b = _hue_vector(HUES)
        t = find_gamut_intersection(a, b, L, 1.0, L)
        lab = np.stack([np.full_like(t, L), t * a, t * b], axis=-1)
        rgb = oklab_to_linear_rgb(lab)

        assert np.all(rgb >= -1e-3)
        assert np.all(rgb <= 1.0 + 1e-3)
        on_boundary = (
            np.isclose(np.max(rgb, axis=-1), 1.0, atol=1e-3)
            | np.isclose(np.min(rgb, axis=-1), 0.0, atol=1e-3)
        )
        assert np.all(on_boundary)

    def test_sloped_ray_towards_white(self):
        """Rays aimed close to white leave through the upper boundary."""
        a, b = _hue_vector(HUES)
        t = find_gamut_intersection(a, b, 1.0, 0.05, 0.5)
        L = 0.5 * (1.0 - t) + t * 1.0
        C = t * 0.05
        rgb = oklab_to_linear_rgb(np.stack([L, C * a, C * b], axis=-1))
        np.testing.assert_allclose(np.max(rgb, axis=-1), 1.0, atol=1e-3)

    def test_precomputed_cusp_is_inert(self):
        a, b = _hue_vector(HUES)
        cusp = find_cusp(a, b)
        np.testing.assert_allclose(
            find_gamut_intersection(a, b, 0.8, 1.0, 0.8, cusp),
            find_gamut_intersection(a, b, 0.8, 1.0, 0.8),
        )

    def test_more_steps_same_point(self):
        a, b = _hue_vector(HUES)
        np.testing.assert_allclose(
            find_gamut_intersection(a, b, 0.85, 1.0, 0.85, steps=3),
            find_gamut_intersection(a, b, 0.85, 1.0, 0.85),
            atol=1e-4,
        )

    def test_scalar_returns_scalar_shape(self):
        t = find_gamut_intersection(1.0, 0.0, 0.5, 1.0, 0.5)
        assert np.shape(t) == ()


class TestSaturationAnchors:

    def test_st_max_ratios(self):
        a, b = _hue_vector(HUES)
        l_cusp, c_cusp = find_cusp(a, b)
        s_max, t_max = get_st_max(a, b)
        np.testing.assert_allclose(s_max, c_cusp / l_cusp)
        np.testing.assert_allclose(t_max, c_cusp / (1.0 - l_cusp))

    def test_st_max_accepts_cusp(self):
        a, b = _hue_vector(0.3)
        cusp = find_cusp(a, b)
        np.testing.assert_allclose(get_st_max(a, b, cusp), get_st_max(a, b))

    def test_st_mid_positive_everywhere(self):
        a, b = _hue_vector(np.linspace(0.0, 1.0, 360, endpoint=False))
        s_mid, t_mid = get_st_mid(a, b)
        assert np.all(np.isfinite(s_mid)) and np.all(s_mid > 0.0)
        assert np.all(np.isfinite(t_mid)) and np.all(t_mid > 0.0)


class TestGetCs:

    def test_c_max_at_cusp_is_cusp_chroma(self):
        a, b = _hue_vector(HUES)
        l_cusp, c_cusp = find_cusp(a, b)
        _, _, c_max = get_cs(l_cusp, a, b)
        np.testing.assert_allclose(c_max, c_cusp, atol=1e-6)

    def test_c_max_matches_gamut_intersection(self):
        a, b = _hue_vector(HUES)
        _, _, c_max = get_cs(0.6, a, b)
        np.testing.assert_allclose(c_max, find_gamut_intersection(a, b, 0.6, 1.0, 0.6))

    @pytest.mark.parametrize("L", [0.2, 0.5, 0.8])
    def test_control_points_positive(self, L):
        a, b = _hue_vector(HUES)
        c_0, c_mid, c_max = get_cs(L, a, b)
        for c in (c_0, c_mid, c_max):
            assert np.all(np.isfinite(c)) and np.all(c > 0.0)

    def test_c_0_is_hue_independent(self):
        a, b = _hue_vector(HUES)
        c_0, _, _ = get_cs(np.full_like(a, 0.5), a, b)
        np.testing.assert_allclose(c_0, c_0[0])
