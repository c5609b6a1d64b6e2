from typing import Dict, Tuple
import numpy as np

Triple = Tuple[float, float, float]

# XYZ -> LMS cone response matrices
LMS_MATRICES: Dict[str, np.ndarray] = {
    'bradford': np.array((
        (0.8951, 0.2664, -0.1614),
        (-0.7502, 1.7135, 0.0367),
        (0.0389, -0.0685, 1.0296))),
    'von_kries': np.array((
        (0.40024, 0.70760, -0.08081),
        (-0.22630, 1.16532, 0.04570),
        (0.0, 0.0, 0.91822))),
}

DEFAULT_LMS_MATRIX = 'bradford'


def _matrix(name: str) -> np.ndarray:
    try:
        return LMS_MATRICES[name]
    except KeyError:
        raise ValueError(f"Unknown LMS matrix: {name!r}") from None


def xyz_to_lms(x: float, y: float, z: float, matrix: str = DEFAULT_LMS_MATRIX) -> Triple:
    l, m, s = (float(v) for v in _matrix(matrix) @ np.array([x, y, z]))
    return l, m, s


def lms_to_xyz(l: float, m: float, s: float, matrix: str = DEFAULT_LMS_MATRIX) -> Triple:
    x, y, z = (float(v) for v in np.linalg.solve(_matrix(matrix), np.array([l, m, s])))
    return x, y, z
