from chromapick.colors import Color
from chromapick.conversions import ColorSpace, convert
from chromapick.types import CMY, HLS, HSV
from chromapick.types import is_hue_space
import pytest


def test_convert_rgb_to_hsv():
    result = convert((255, 0, 0), "rgb", "hsv")
    assert isinstance(result, HSV)
    assert result == pytest.approx((0.0, 1.0, 255 / 256))


def test_convert_hsv_to_rgb():
    assert convert(HSV(120, 1, 1), "hsv", "rgb") == Color(0, 255, 0)
    assert convert((240, 1, 1), ColorSpace.HSV, ColorSpace.RGB) == Color(0, 0, 255)


def test_convert_is_case_insensitive():
    assert convert((255, 0, 0), "RGB", "CMY") == CMY(0, 255, 255)


def test_convert_between_non_rgb_spaces_goes_through_rgb():
    result = convert(HSV(0, 1, 1), "hsv", "cmy")
    assert result == CMY(0, 255, 255)

    hls = convert(HSV(120, 1, 1), "hsv", "hls")
    assert isinstance(hls, HLS)
    assert hls == pytest.approx((120.0, 0.5, 1.0))


def test_convert_same_space():
    assert convert((1, 2, 3), "rgb", "rgb") == Color(1, 2, 3)
    assert convert((10, 0.5, 0.5), "hsv", "hsv") == HSV(10, 0.5, 0.5)


def test_convert_unknown_space():
    with pytest.raises(ValueError, match="Unknown space"):
        convert((0, 0, 0), "lab", "rgb")
    with pytest.raises(ValueError, match="Unknown space"):
        convert((0, 0, 0), "rgb", "xyz")


def test_is_hue_space():
    assert is_hue_space(ColorSpace.HSV)
    assert is_hue_space("hls")
    assert not is_hue_space("cmy")
    assert not is_hue_space(ColorSpace.RGB)
