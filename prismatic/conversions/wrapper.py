"""
Conversion layer.

Conversions are registered as directed edges between color spaces, each a
function over float tuples (hue in degrees). ``convert`` finds the shortest
route through the graph, so for example HSL -> Lab runs
HSL -> RGB -> XYZ -> Lab.

YCbCr and YIQ are attached to RGB in their own channel format, so integer
RGB <-> YCbCr stays exact; alpha rides along untouched.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..errors import InvariantViolation, UndefinedConversionError
from ..rgb_space import RgbSpace, DEFAULT_RGB_SPACE
from ..types.format_type import ChannelFormat, AngleUnit
from ..white_point import WhitePoint, get_white_point
from .lab import xyz_to_lab, lab_to_xyz
from .lch import to_lch, from_lch
from .lms import xyz_to_lms, lms_to_xyz, DEFAULT_LMS_MATRIX
from .luv import xyz_to_luv, luv_to_xyz
from .to_hsi import unit_rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, hwb_to_hsv
from .to_hwb import unit_rgb_to_hwb, hsv_to_hwb
from .to_rgb import (
    hsv_to_unit_rgb, hsl_to_unit_rgb, hsi_to_unit_rgb, hwb_to_unit_rgb, rgi_to_unit_rgb,
)
from .to_rgi import unit_rgb_to_rgi
from .xyy import xyz_to_xyy, xyy_to_xyz
from .ycbcr_model import OutOfGamutMode, YCbCrModel

logger = logging.getLogger(__name__)

Values = Tuple[float, ...]


@dataclass(frozen=True)
class ConversionOptions:
    white_point: WhitePoint
    rgb_space: RgbSpace = DEFAULT_RGB_SPACE
    model: Optional[YCbCrModel] = None
    out_of_gamut: OutOfGamutMode = OutOfGamutMode.PRESERVE
    lms_matrix: str = DEFAULT_LMS_MATRIX


Step = Callable[[Values, ConversionOptions], Values]

CONVERSION_TABLE: Dict[str, Dict[str, Step]] = {}


@lru_cache(maxsize=None)
def find_path(from_space: str, to_space: str) -> Tuple[str, ...]:
    """Shortest chain of spaces from ``from_space`` to ``to_space`` (both included)."""
    if from_space == to_space:
        return (from_space,)
    previous: Dict[str, str] = {}
    queue = deque([from_space])
    while queue:
        space = queue.popleft()
        for neighbor in CONVERSION_TABLE.get(space, {}):
            if neighbor in previous or neighbor == from_space:
                continue
            previous[neighbor] = space
            if neighbor == to_space:
                path: List[str] = [to_space]
                while path[-1] != from_space:
                    path.append(previous[path[-1]])
                return tuple(reversed(path))
            queue.append(neighbor)
    raise UndefinedConversionError(from_space, to_space)


def register(from_space: str, to_space: str, func: Step) -> None:
    CONVERSION_TABLE.setdefault(from_space, {})[to_space] = func
    CONVERSION_TABLE.setdefault(to_space, {})
    find_path.cache_clear()


def _plain(func: Callable[..., Values]) -> Step:
    return lambda values, options: func(*values)


register("rgb", "hsv", _plain(unit_rgb_to_hsv))
register("hsv", "rgb", _plain(hsv_to_unit_rgb))
register("rgb", "hsl", _plain(unit_rgb_to_hsl))
register("hsl", "rgb", _plain(hsl_to_unit_rgb))
register("hsv", "hsl", _plain(hsv_to_hsl))
register("hsl", "hsv", _plain(hsl_to_hsv))
register("rgb", "hwb", _plain(unit_rgb_to_hwb))
register("hwb", "rgb", _plain(hwb_to_unit_rgb))
register("hsv", "hwb", _plain(hsv_to_hwb))
register("hwb", "hsv", _plain(hwb_to_hsv))
register("rgb", "hsi", _plain(unit_rgb_to_hsi))
register("hsi", "rgb", _plain(hsi_to_unit_rgb))
register("rgb", "rgi", _plain(unit_rgb_to_rgi))
register("rgi", "rgb", _plain(rgi_to_unit_rgb))
register("rgb", "xyz", lambda v, o: o.rgb_space.rgb_to_xyz(*v))
register("xyz", "rgb", lambda v, o: o.rgb_space.xyz_to_rgb(*v))
register("xyz", "xyy", _plain(xyz_to_xyy))
register("xyy", "xyz", _plain(xyy_to_xyz))
register("xyy", "chromaticity", lambda v, o: v[:2])
register("xyz", "lab", lambda v, o: xyz_to_lab(*v, white_point=o.white_point))
register("lab", "xyz", lambda v, o: lab_to_xyz(*v, white_point=o.white_point))
register("xyz", "luv", lambda v, o: xyz_to_luv(*v, white_point=o.white_point))
register("luv", "xyz", lambda v, o: luv_to_xyz(*v, white_point=o.white_point))
register("lab", "lchab", _plain(to_lch))
register("lchab", "lab", _plain(from_lch))
register("luv", "lchuv", _plain(to_lch))
register("lchuv", "luv", _plain(from_lch))
register("xyz", "lms", lambda v, o: xyz_to_lms(*v, matrix=o.lms_matrix))
register("lms", "xyz", lambda v, o: lms_to_xyz(*v, matrix=o.lms_matrix))


def convert_values(values: Values, from_space: str, to_space: str,
                   options: ConversionOptions) -> Values:
    """Run float values (hue in degrees) along the registered route."""
    path = find_path(from_space, to_space)
    logger.debug(' @ Conversion path: %s', ' -> '.join(path))
    for src, dst in zip(path, path[1:]):
        values = tuple(CONVERSION_TABLE[src][dst](values, options))
        logger.debug(' |-< %s %s', dst, values)
    return values


def _options(white_point: Union[str, WhitePoint, None], rgb_space: Optional[RgbSpace],
             model: Optional[YCbCrModel], out_of_gamut: Union[str, OutOfGamutMode],
             lms_matrix: str) -> ConversionOptions:
    return ConversionOptions(
        white_point=get_white_point(white_point),
        rgb_space=rgb_space or DEFAULT_RGB_SPACE,
        model=model,
        out_of_gamut=OutOfGamutMode(out_of_gamut),
        lms_matrix=lms_matrix,
    )


def _float_values(color: Any) -> Values:
    floats = color.color_cast(ChannelFormat.F64, AngleUnit.DEGREES if color.has_hue else None)
    return tuple(floats.values)


def _exact(color: Any, target: type, options: ConversionOptions) -> Tuple[Any, bool]:
    """
    Convert ``color`` (no alpha) to ``target`` (no alpha).

    Returns the converted color and whether the exact result was in gamut.
    """
    from ..colors.rgb import Rgb
    from ..colors.ycbcr import YCbCr

    if isinstance(color, YCbCr):
        in_gamut = color.try_to_rgb() is not None
        color = color.to_rgb(options.out_of_gamut)
        if issubclass(target, Rgb) and color.format_type is target.format_type:
            return color, in_gamut
        result, rest_in_gamut = _exact(color, target, options)
        return result, in_gamut and rest_in_gamut

    if issubclass(target, YCbCr):
        rgb_target = Rgb.specialize(target.format_type)
        rgb, in_gamut = _exact(color, rgb_target, options)
        model = options.model or (color.model if isinstance(color, YCbCr) else None)
        return target.from_rgb(rgb, model), in_gamut

    values = convert_values(_float_values(color), color.space, target.space, options)
    generic = target._generic
    exact = generic(*values)
    in_gamut = exact.is_normalized()
    if options.out_of_gamut is OutOfGamutMode.CLIP and not in_gamut:
        logger.debug(' * Clipping out of gamut %s', exact)
        exact = exact.normalize()
    return exact.color_cast(target.format_type, target.angle_unit), in_gamut


def _convert(color: Any, target: type, options: ConversionOptions) -> Tuple[Any, bool]:
    from ..colors.alpha import Alpha
    from ..colors.color_base import ColorBase
    from ..channel.cast import cast

    if not isinstance(target, type) or not issubclass(target, ColorBase):
        raise TypeError("target must be a color class")
    if issubclass(target, Alpha) and target.inner_class is None:
        raise TypeError("Convert to a concrete alpha class such as Alpha[Rgb]")

    logger.debug('Converting %s to %s', color, target.__name__)

    alpha = None
    if isinstance(color, Alpha):
        alpha = cast(color.alpha, color.format_type, ChannelFormat.F64)
        color = color.inner

    if issubclass(target, Alpha):
        inner, in_gamut = _exact(color, target.inner_class, options)
        alpha_value = 1.0 if alpha is None else alpha
        return target(inner, cast(alpha_value, ChannelFormat.F64, target.format_type)), in_gamut
    return _exact(color, target, options)


def convert(color: Any, target: type, *,
            white_point: Union[str, WhitePoint, None] = None,
            rgb_space: Optional[RgbSpace] = None,
            model: Optional[YCbCrModel] = None,
            out_of_gamut: Union[str, OutOfGamutMode] = OutOfGamutMode.PRESERVE,
            lms_matrix: str = DEFAULT_LMS_MATRIX) -> Any:
    """
    Convert ``color`` to the color class ``target``.

    :param white_point: reference white for Lab and Luv (default D65)
    :param rgb_space: RGB space used between RGB and XYZ (default sRGB)
    :param model: YCbCr model of a YCbCr target (default: the target's own)
    :param out_of_gamut: ``PRESERVE`` keeps exact results, ``CLIP`` normalizes them
    :raises UndefinedConversionError: if no route exists between the spaces
    """
    options = _options(white_point, rgb_space, model, out_of_gamut, lms_matrix)
    result, _ = _convert(color, target, options)
    return result


def try_convert(color: Any, target: type, *,
                white_point: Union[str, WhitePoint, None] = None,
                rgb_space: Optional[RgbSpace] = None,
                model: Optional[YCbCrModel] = None,
                lms_matrix: str = DEFAULT_LMS_MATRIX) -> Optional[Any]:
    """
    Like :func:`convert`, but ``None`` when the exact result is out of gamut.

    A color with no representation in the target space at all, such as an
    imaginary color with a negative tristimulus value heading for xyY, is also
    reported as ``None``.
    """
    options = _options(white_point, rgb_space, model, OutOfGamutMode.PRESERVE, lms_matrix)
    try:
        result, in_gamut = _convert(color, target, options)
    except InvariantViolation as exc:
        logger.debug(' * No %s for %s: %s', target.__name__, color, exc)
        return None
    return result if in_gamut else None
