from chromapick.colors import Color
from chromapick.conversions import hsv_to_rgb, np_hsv_to_rgb, rgb_to_hsv
import numpy as np
import pytest

samples_hsv_rgb = {
    (0, 1, 1): (255, 0, 0),
    (60, 1, 1): (255, 255, 0),
    (120, 1, 1): (0, 255, 0),
    (180, 1, 1): (0, 255, 255),
    (240, 1, 1): (0, 0, 255),
    (300, 1, 1): (255, 0, 255),
    (90, 1, 1): (128, 255, 0),
    (270, 1, 1): (128, 0, 255),
    (180, 0.5, 1): (128, 255, 255),
    (0, 0, 0.5): (128, 128, 128),
    (0, 0, 1): (255, 255, 255),
    (0, 0, 0): (0, 0, 0),
}

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 255 / 256),
    (0, 0, 255): (240.0, 1.0, 255 / 256),
    (255, 0, 255): (300.0, 1.0, 255 / 256),
    (128, 128, 0): (60.0, 1.0, 0.5),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (64, 64, 64): (0.0, 0.0, 0.25),
}


def test_hsv_to_rgb():
    for hsv, rgb_expected in samples_hsv_rgb.items():
        assert hsv_to_rgb(*hsv) == Color(*rgb_expected)


def test_hsv_to_rgb_wraps_and_clamps():
    assert hsv_to_rgb(-30, 1, 1) == Color(255, 0, 128)
    assert hsv_to_rgb(360, 1, 1) == hsv_to_rgb(0, 1, 1)
    assert hsv_to_rgb(720 + 120, 1, 1) == Color(0, 255, 0)
    assert hsv_to_rgb(0, 2, -1) == Color(0, 0, 0)
    assert hsv_to_rgb(0, -1, 3) == Color(255, 255, 255)


def test_hsv_to_rgb_is_opaque():
    assert hsv_to_rgb(200, 0.3, 0.7).a == 255


def test_rgb_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(rgb)
        assert h == pytest.approx(h_exp)
        assert s == pytest.approx(s_exp)
        assert v == pytest.approx(v_exp)


def test_rgb_to_hsv_accepts_color():
    assert rgb_to_hsv(Color(128, 128, 0)) == rgb_to_hsv((128, 128, 0))


def test_rgb_to_hsv_tie_break_uses_last_branch():
    # R and G tie for the maximum; the G branch decides
    h, s, v = rgb_to_hsv((128, 128, 0))
    assert (h, s, v) == (60.0, 1.0, 0.5)

    # G and B tie; the B branch decides
    h, _, _ = rgb_to_hsv((0, 255, 255))
    assert h == pytest.approx(180.0)


def test_rgb_to_hsv_ranges():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                h, s, v = rgb_to_hsv((r, g, b))
                assert 0 <= h < 360
                assert 0 <= s <= 1
                assert 0 <= v < 1


def test_np_hsv_to_rgb_matches_scalar():
    hues = np.linspace(-720, 720, 97)
    sats = np.array([-0.5, 0.0, 0.25, 0.5, 0.75, 1.0, 1.5])
    vals = np.array([-0.5, 0.0, 0.1, 0.5, 0.9, 1.0, 1.5])

    h, s, v = np.meshgrid(hues, sats, vals, indexing="ij")
    result = np_hsv_to_rgb(h, s, v)
    assert result.shape == h.shape + (3,)
    assert result.dtype == np.uint8

    for idx in np.ndindex(h.shape):
        expected = hsv_to_rgb(float(h[idx]), float(s[idx]), float(v[idx])).rgb
        assert tuple(int(c) for c in result[idx]) == expected


def test_np_hsv_to_rgb_broadcasts_scalars():
    out = np_hsv_to_rgb(np.array([0.0, 120.0, 240.0]), 1.0, 1.0)
    np.testing.assert_array_equal(out, [[255, 0, 0], [0, 255, 0], [0, 0, 255]])
