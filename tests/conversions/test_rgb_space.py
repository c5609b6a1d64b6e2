import numpy as np
import pytest

from prismatic.rgb_space import (
    RgbSpace, SRGB, LINEAR_SRGB, ADOBE_RGB, srgb_to_linear, linear_to_srgb, primaries_to_matrix,
)
from prismatic.white_point import D65, D50


def test_srgb_transfer_curve():
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert srgb_to_linear(0.04) == pytest.approx(0.04 / 12.92)
    assert srgb_to_linear(0.5) == pytest.approx(0.214041, abs=1e-6)
    for c in (0.001, 0.02, 0.3, 0.75, 1.0):
        assert linear_to_srgb(srgb_to_linear(c)) == pytest.approx(c)


def test_transfer_curve_keeps_sign():
    assert srgb_to_linear(-0.5) == pytest.approx(-srgb_to_linear(0.5))
    assert linear_to_srgb(-0.2) == pytest.approx(-linear_to_srgb(0.2))


def test_srgb_matrix():
    expected = np.array([
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ])
    assert np.allclose(SRGB.to_xyz_matrix, expected, atol=2e-4)
    assert np.allclose(SRGB.to_xyz_matrix @ SRGB.from_xyz_matrix, np.eye(3))


def test_white_maps_to_reference_white():
    for space in (SRGB, LINEAR_SRGB, ADOBE_RGB):
        assert np.allclose(space.rgb_to_xyz(1.0, 1.0, 1.0), D65.xyz)
    d50_space = RgbSpace("sRGB D50", SRGB.red, SRGB.green, SRGB.blue, D50)
    assert np.allclose(d50_space.rgb_to_xyz(1.0, 1.0, 1.0), D50.xyz)


def test_rgb_xyz_round_trip():
    for space in (SRGB, LINEAR_SRGB, ADOBE_RGB):
        for rgb in ((0.2, 0.4, 0.6), (1.0, 0.0, 0.0), (0.05, 0.01, 0.9)):
            assert np.allclose(space.xyz_to_rgb(*space.rgb_to_xyz(*rgb)), rgb)


def test_gamma_round_trip_keeps_zero_channels_at_zero():
    for space in (SRGB, ADOBE_RGB):
        r, g, b = space.xyz_to_rgb(*space.rgb_to_xyz(1.0, 0.0, 0.0))
        assert r == pytest.approx(1.0)
        assert g == 0.0
        assert b == 0.0


def test_encodings_differ():
    assert np.allclose(LINEAR_SRGB.rgb_to_xyz(0.5, 0.5, 0.5), np.array(D65.xyz) * 0.5)
    assert not np.allclose(SRGB.rgb_to_xyz(0.5, 0.5, 0.5), LINEAR_SRGB.rgb_to_xyz(0.5, 0.5, 0.5))
    assert ADOBE_RGB.decode(0.5) == pytest.approx(0.5 ** (563.0 / 256.0))
    assert ADOBE_RGB.encode(ADOBE_RGB.decode(0.3)) == pytest.approx(0.3)


def test_primaries_to_matrix_columns_sum_to_white():
    matrix = primaries_to_matrix((0.64, 0.33), (0.21, 0.71), (0.15, 0.06), D65)
    assert np.allclose(matrix.sum(axis=1), D65.xyz)
    assert np.allclose(matrix, ADOBE_RGB.to_xyz_matrix)
