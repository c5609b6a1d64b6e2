import numpy as np
import pytest

from prismatic.colors import Rgb, YCbCr, Yiq
from prismatic.conversions import OutOfGamutMode, CustomYCbCrModel, BT709, JPEG, YIQ
from prismatic.types.format_type import ChannelFormat

U8, U16, F32, F64 = ChannelFormat.U8, ChannelFormat.U16, ChannelFormat.F32, ChannelFormat.F64


def test_default_models():
    assert YCbCr(0.5, 0.0, 0.0).model == JPEG
    assert Yiq(0.5, 0.0, 0.0).model == YIQ
    assert YCbCr(0.5, 0.0, 0.0, model=BT709).model == BT709


def test_integer_rgb_round_trips_exactly():
    white = YCbCr.from_rgb(Rgb[U8](255, 255, 255))
    assert type(white) is YCbCr[U8]
    assert white.values == (255, 128, 128)
    assert white.to_rgb() == Rgb[U8](255, 255, 255)
    black = YCbCr.from_rgb(Rgb[U8](0, 0, 0))
    assert black.values == (0, 128, 128)
    assert black.to_rgb() == Rgb[U8](0, 0, 0)


def test_float_gray_has_no_chroma():
    gray = YCbCr.from_rgb(Rgb(0.5, 0.5, 0.5))
    assert gray.approx_eq(YCbCr(0.5, 0.0, 0.0))
    assert gray.to_rgb().approx_eq(Rgb(0.5, 0.5, 0.5))


def test_float_round_trip():
    for rgb in (Rgb(0.2, 0.4, 0.6), Rgb(1.0, 0.0, 0.0), Rgb(0.9, 0.9, 0.1)):
        for model in (JPEG, BT709, YIQ):
            assert YCbCr.from_rgb(rgb, model).to_rgb().approx_eq(rgb, epsilon=1e-3)


def test_out_of_gamut_handling():
    color = YCbCr(1.0, 1.0, 1.0)
    assert color.to_rgb(OutOfGamutMode.CLIP) == Rgb(1.0, 0.0, 1.0)
    assert YCbCr(0.5, 1.0, 1.0).to_rgb(OutOfGamutMode.CLIP) == Rgb(1.0, 0.0, 1.0)
    assert color.try_to_rgb() is None
    preserved = color.to_rgb()
    assert not preserved.is_normalized()
    assert preserved.red == pytest.approx(2.402)
    assert YCbCr(0.5, 0.0, 0.0).try_to_rgb().approx_eq(Rgb(0.5, 0.5, 0.5))


def test_integer_results_truncate():
    color = YCbCr[U8](50, 100, 150)
    assert color.try_to_rgb() == Rgb[U8](80, 43, 0)
    assert color.to_rgb() == Rgb[U8](80, 43, 0)
    # exact luma 99.22, cb 184.87, cr 71.50
    assert YCbCr.from_rgb(Rgb[U8](20, 120, 200)).values == (99, 184, 71)


def test_integer_preserve_still_saturates():
    color = YCbCr[U8](0, 255, 255)
    assert color.to_rgb().values == (178, 0, 225)
    assert color.to_rgb(OutOfGamutMode.CLIP).values == (178, 0, 225)
    assert color.try_to_rgb() is None


def test_normalize():
    assert YCbCr(-0.2, -1.3, 1.2).normalize() == YCbCr(0.0, -1.0, 1.0)
    assert YCbCr(0.2, 0.3, -0.4).is_normalized()


def test_invert():
    assert YCbCr[U8](200, 170, 50).invert().values == (55, 85, 205)
    assert YCbCr(0.33, 0.55, 0.88).invert().approx_eq(YCbCr(0.67, -0.55, -0.88))


def test_color_cast_recentres_chroma():
    assert YCbCr[F32](0.65, -0.3, 0.5).color_cast(U8).values == (166, 89, 191)
    floats = YCbCr[U8](100, 200, 100).color_cast(F64)
    assert np.allclose(floats.values, (0.39215686, 0.56862745, -0.21568627))
    assert YCbCr(0.5, 0.0, 0.0, model=BT709).color_cast(U16).model == BT709


def test_model_is_part_of_identity():
    jpeg = YCbCr(0.5, 0.1, 0.1)
    bt709 = YCbCr(0.5, 0.1, 0.1, model=BT709)
    assert jpeg != bt709
    assert not jpeg.approx_eq(bt709)
    with pytest.raises(TypeError):
        jpeg.lerp(bt709, 0.5)
    assert bt709.lerp(bt709.with_luma(0.7), 0.5).model == BT709


def test_repr_shows_non_default_model():
    assert repr(YCbCr(0.5, 0.0, 0.0)) == "YCbCr(0.5, 0.0, 0.0)"
    assert "Bt709Model" in repr(YCbCr(0.5, 0.0, 0.0, model=BT709))


def test_custom_model():
    model = CustomYCbCrModel.build_from_coefficients(0.299, 0.114)
    assert np.allclose(model.forward_transform(), JPEG.forward_transform(), atol=1e-5)
    color = YCbCr(0.5, 0.2, 0.3, model=model)
    assert np.allclose(color.to_rgb().values, (0.9206, 0.216932, 0.8544), atol=1e-5)
    assert model == CustomYCbCrModel(0.299, 0.114)
    assert model != CustomYCbCrModel(0.2126, 0.0722)
    with pytest.raises(ValueError):
        CustomYCbCrModel(0.7, 0.5)


def test_canonical_representation():
    assert np.allclose(YCbCr(0.5, 0.2, 0.1).to_canonical_representation(), (0.5, 0.0872, 0.0615))
    back = YCbCr.from_canonical_representation(0.5, 0.0872, 0.0615)
    assert back.approx_eq(YCbCr(0.5, 0.2, 0.1))


def test_yiq():
    yiq = Yiq(0.25, 0.5, 0.0)
    assert yiq.i == 0.5
    assert yiq.q == 0.0
    assert yiq.with_i(0.25).values == (0.25, 0.25, 0.0)
    assert yiq.with_q(-0.5).q == -0.5
    assert np.allclose(yiq.to_canonical_representation(), (0.25, 0.29785, 0.0))
    assert np.allclose(yiq.to_rgb().values, (0.5347446, 0.1689848, -0.0794221), atol=1e-4)
    assert Yiq.from_rgb(Rgb(0.2, 0.4, 0.6)).to_rgb().approx_eq(Rgb(0.2, 0.4, 0.6), epsilon=1e-3)
