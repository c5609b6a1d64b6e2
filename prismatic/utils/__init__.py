from .default import value_or_default, DEFAULT_FORMAT, DEFAULT_ANGLE_UNIT, DEFAULT_EPSILON

__all__ = [
    "value_or_default",
    "DEFAULT_FORMAT",
    "DEFAULT_ANGLE_UNIT",
    "DEFAULT_EPSILON",
]
