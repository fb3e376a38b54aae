# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ Linear RGB ↔ OKLab)."""

import numpy as np
import pytest

from tinycolors.convert.colorspace import (
    LINEAR_TO_LMS,
    LMS_TO_LINEAR,
    LMS_TO_OKLAB,
    OKLAB_TO_LMS,
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    srgb_to_oklab,
    oklab_to_srgb,
)


class TestTransferCurve:
    """The sRGB transfer curve and its inverse."""

    @pytest.mark.parametrize("value", [0.0, 0.01, 0.04045, 0.2, 0.5, 1.0])
    def test_roundtrip(self, value):
        srgb = np.full(3, value)
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-7)

    def test_mid_gray_decodes(self):
        linear = srgb_to_linear(np.array([0.5, 0.5, 0.5]))
        np.testing.assert_allclose(linear, [0.21404114] * 3, atol=1e-7)

    def test_white_encodes_to_white(self):
        srgb = linear_to_srgb(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(srgb, [1.0, 1.0, 1.0], atol=1e-12)

    def test_primaries_unchanged(self):
        for primary in np.eye(3):
            np.testing.assert_allclose(srgb_to_linear(primary), primary, atol=1e-12)

    def test_linear_toe(self):
        """Dark values are scaled, not raised to a power."""
        assert float(srgb_to_linear(0.03)) == pytest.approx(0.03 / 12.92, abs=1e-12)
        assert float(linear_to_srgb(0.002)) == pytest.approx(0.002 * 12.92, abs=1e-12)

    def test_extended_values_not_clipped(self):
        srgb = np.array([-0.1, 1.2, 0.5])
        linear = srgb_to_linear(srgb)
        assert linear[0] < 0.0
        assert linear[1] > 1.0
        np.testing.assert_allclose(linear_to_srgb(linear), srgb, atol=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestMatrices:
    """Published matrix pairs must be inverses of each other."""

    def test_lms_pair(self):
        np.testing.assert_allclose(LMS_TO_LINEAR @ LINEAR_TO_LMS, np.eye(3), atol=1e-6)

    def test_oklab_pair(self):
        np.testing.assert_allclose(OKLAB_TO_LMS @ LMS_TO_OKLAB, np.eye(3), atol=1e-6)


class TestOKLab:
    """Linear RGB ⇄ OKLab."""

    @pytest.mark.parametrize("rgb", [[1.0, 1.0, 1.0], [0.0, 0.0, 0.0], [0.0, 0.5, 1.0]])
    def test_roundtrip(self, rgb):
        rgb = np.array(rgb)
        np.testing.assert_allclose(oklab_to_linear_rgb(linear_rgb_to_oklab(rgb)), rgb, atol=1e-5)

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert np.hypot(lab[1], lab[2]) < 1e-6

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-6)

    def test_srgb_red(self):
        lab = srgb_to_oklab(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [0.627955, 0.224863, 0.125846], atol=1e-4)

    def test_srgb_blue(self):
        lab = srgb_to_oklab(np.array([0.0, 0.0, 1.0]))
        np.testing.assert_allclose(lab, [0.452014, -0.032457, -0.311528], atol=1e-4)

    def test_negative_response_is_real(self):
        """Out-of-gamut colors give real cube roots, not NaN."""
        lab = linear_rgb_to_oklab(np.array([-0.2, 0.5, 0.1]))
        assert np.all(np.isfinite(lab))

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-6)

    def test_batch_shape_preserved(self):
        rgb = np.random.RandomState(42).random((4, 5, 3))
        assert linear_rgb_to_oklab(rgb).shape == (4, 5, 3)


class TestFullChainRoundtrip:
    """sRGB → OKLab → sRGB must roundtrip."""

    @pytest.mark.parametrize("srgb", [
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.2, 0.4, 0.8],
    ])
    def test_roundtrip(self, srgb):
        srgb = np.array(srgb)
        np.testing.assert_allclose(oklab_to_srgb(srgb_to_oklab(srgb)), srgb, atol=1e-4)
