import numpy as np
import pytest

from prismatic import white_point
from prismatic.conversions import (
    xyz_to_lab, lab_to_xyz, xyz_to_luv, luv_to_xyz, to_lch, from_lch,
    xyz_to_xyy, xyy_to_xyz, xyz_to_lms, lms_to_xyz, EPSILON, KAPPA,
)
from prismatic.errors import InvariantViolation
from prismatic.white_point import WHITE_POINTS, get_white_point, D65, D50


def test_cie_constants():
    assert EPSILON == pytest.approx(216.0 / 24389.0)
    assert KAPPA == pytest.approx(24389.0 / 27.0)


def test_xyz_to_lab():
    assert np.allclose(xyz_to_lab(0.3, 0.22, 0.5), (54.0270, 38.5919, -33.5640), atol=1e-4)
    assert np.allclose(xyz_to_lab(1.0, 1.0, 1.0), (100.0, 8.5385, 5.5939), atol=1e-4)
    assert np.allclose(xyz_to_lab(*D65.xyz), (100.0, 0.0, 0.0))


def test_xyz_to_lab_white_points():
    assert np.allclose(xyz_to_lab(0.6, 0.8, 0.1, white_point.D50), (91.6849, -37.2895, 86.6924), atol=1e-4)
    assert np.allclose(xyz_to_lab(0.6, 0.8, 0.1, white_point.E), (91.6849, -42.4425, 92.8319), atol=1e-3)


def test_lab_to_xyz():
    assert np.allclose(lab_to_xyz(54.0270, 38.5919, -33.5640), (0.3, 0.22, 0.5), atol=1e-5)
    assert np.allclose(lab_to_xyz(50.0, 33.0, -66.0), (0.243326, 0.184187, 0.791023), atol=1e-5)
    assert np.allclose(lab_to_xyz(100.0, -100.0, -100.0, white_point.D75), (0.486257, 1.0, 4.139032), atol=1e-5)


def test_lab_dark_colors_use_linear_segment():
    xyz = (0.001, 0.002, 0.0015)
    lab = xyz_to_lab(*xyz)
    assert lab[0] == pytest.approx(KAPPA * 0.002)
    assert np.allclose(lab_to_xyz(*lab), xyz)


def test_luv_round_trip():
    for xyz in ((0.3, 0.22, 0.5), (0.9, 0.95, 1.0), (0.001, 0.002, 0.0015)):
        assert np.allclose(luv_to_xyz(*xyz_to_luv(*xyz)), xyz)
        assert np.allclose(luv_to_xyz(*xyz_to_luv(*xyz, D50), D50), xyz)


def test_luv_white_and_black():
    assert np.allclose(xyz_to_luv(*D65.xyz), (100.0, 0.0, 0.0))
    assert xyz_to_luv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert luv_to_xyz(0.0, 10.0, 10.0) == (0.0, 0.0, 0.0)


def test_lch():
    assert np.allclose(to_lch(50.0, 0.0, 10.0), (50.0, 10.0, 90.0))
    assert np.allclose(to_lch(50.0, -10.0, 0.0), (50.0, 10.0, 180.0))
    assert np.allclose(to_lch(50.0, 0.0, -10.0), (50.0, 10.0, 270.0))
    assert to_lch(50.0, 0.0, 0.0) == (50.0, 0.0, 0.0)
    assert np.allclose(from_lch(50.0, 10.0, 90.0), (50.0, 0.0, 10.0))
    assert np.allclose(from_lch(*to_lch(54.0, 38.6, -33.6)), (54.0, 38.6, -33.6))


def test_xyz_to_xyy():
    assert np.allclose(xyz_to_xyy(0.8, 0.1, 0.5), (0.571429, 0.071429, 0.1), atol=1e-6)
    assert xyz_to_xyy(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    with pytest.raises(InvariantViolation):
        xyz_to_xyy(-0.1, 0.2, 0.3)


def test_xyy_to_xyz():
    assert np.allclose(xyy_to_xyz(0.5, 0.2, 0.5), (1.25, 0.5, 0.75))
    assert np.allclose(xyy_to_xyz(0.285, 0.4194, 0.583), (0.396173, 0.583, 0.410908), atol=1e-6)
    assert xyy_to_xyz(0.3, 0.0, 1.0) == (0.0, 0.0, 0.0)


def test_lms():
    for matrix in ("bradford", "von_kries"):
        lms = xyz_to_lms(0.3, 0.22, 0.5, matrix=matrix)
        assert np.allclose(lms_to_xyz(*lms, matrix=matrix), (0.3, 0.22, 0.5))
    # Bradford rows sum to one (to four decimals)
    assert np.allclose(xyz_to_lms(1.0, 1.0, 1.0), (1.0001, 1.0, 1.0))
    assert not np.allclose(xyz_to_lms(0.3, 0.22, 0.5), xyz_to_lms(0.3, 0.22, 0.5, matrix="von_kries"))
    with pytest.raises(ValueError):
        xyz_to_lms(0.3, 0.22, 0.5, matrix="sharp")


def test_white_points():
    assert get_white_point(None) is D65
    assert get_white_point("d50") is D50
    assert get_white_point(D50) is D50
    assert len(WHITE_POINTS) == 20
    for wp in WHITE_POINTS.values():
        assert wp.xyz[1] == 1.0
        x, y = wp.xy
        # xy chromaticity and XYZ agree to the precision of the table
        assert wp.xyz[0] == pytest.approx(x / y, abs=2e-3)
    with pytest.raises(ValueError):
        get_white_point("D93")
