# No dependencies
from enum import Enum
import math
import numpy as np


class ChannelFormat(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_integer(self) -> bool:
        return self in format_bits


class AngleUnit(str, Enum):
    DEGREES = "deg"
    RADIANS = "rad"
    TURNS = "turns"
    ARC_MINUTES = "arcmin"
    ARC_SECONDS = "arcsec"

    @property
    def period(self) -> float:
        return angle_periods[self]

    @property
    def half_period(self) -> float:
        return angle_periods[self] / 2.0


INTEGER_FORMATS = (ChannelFormat.U8, ChannelFormat.U16, ChannelFormat.U32, ChannelFormat.U64)
FLOAT_FORMATS = (ChannelFormat.F32, ChannelFormat.F64)
ALL_FORMATS = INTEGER_FORMATS + FLOAT_FORMATS

format_bits = {
    ChannelFormat.U8: 8,
    ChannelFormat.U16: 16,
    ChannelFormat.U32: 32,
    ChannelFormat.U64: 64,
}

max_pos_normal = {
    ChannelFormat.U8: 0xFF,
    ChannelFormat.U16: 0xFFFF,
    ChannelFormat.U32: 0xFFFFFFFF,
    ChannelFormat.U64: 0xFFFFFFFFFFFFFFFF,
    ChannelFormat.F32: 1.0,
    ChannelFormat.F64: 1.0,
}

format_classes = {
    ChannelFormat.U8: int,
    ChannelFormat.U16: int,
    ChannelFormat.U32: int,
    ChannelFormat.U64: int,
    ChannelFormat.F32: float,
    ChannelFormat.F64: float,
}

default_format_dtypes = {
    ChannelFormat.U8: np.uint8,
    ChannelFormat.U16: np.uint16,
    ChannelFormat.U32: np.uint32,
    ChannelFormat.U64: np.uint64,
    ChannelFormat.F32: np.float32,
    ChannelFormat.F64: np.float64,
}

format_valid_dtypes = {
    ChannelFormat.U8: (int, np.integer),
    ChannelFormat.U16: (int, np.integer),
    ChannelFormat.U32: (int, np.integer),
    ChannelFormat.U64: (int, np.integer),
    ChannelFormat.F32: (int, float, np.integer, np.floating),
    ChannelFormat.F64: (int, float, np.integer, np.floating),
}

angle_periods = {
    AngleUnit.DEGREES: 360.0,
    AngleUnit.RADIANS: 2.0 * math.pi,
    AngleUnit.TURNS: 1.0,
    AngleUnit.ARC_MINUTES: 360.0 * 60.0,
    AngleUnit.ARC_SECONDS: 360.0 * 3600.0,
}

format_from_dtype = {np.dtype(dtype): fmt for fmt, dtype in default_format_dtypes.items()}
