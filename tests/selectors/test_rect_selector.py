from chromapick.colors import BLACK, WHITE, Color
from chromapick.selectors import HitRegion, RectSelector
from chromapick.selectors.rect import rect_saturation_value
from chromapick.settings import RectStyle
import numpy as np
import pytest


@pytest.fixture
def events():
    return []


@pytest.fixture
def sel(events):
    return RectSelector(100, 50, on_change=lambda s, c: events.append(c))


def test_saturation_value_profile():
    s, v = rect_saturation_value(np.array([0.0, 0.25, 0.5, 0.75, 1.0]))
    np.testing.assert_allclose(s, [0.0, 0.5, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(v, [1.0, 1.0, 1.0, 0.5, 0.0])


def test_render(sel):
    pixels = sel.render()
    assert pixels.shape == (50, 100, 4)
    assert (pixels[0, :, :3] == 255).all()
    assert tuple(pixels[25, 0]) == (255, 0, 0, 255)
    assert tuple(pixels[25, 50]) == (0, 255, 255, 255)
    assert tuple(pixels[49, 0]) == (10, 0, 0, 255)
    assert (pixels[..., 3] == 255).all()


def test_pointer_maps_to_hsv(sel, events):
    assert sel.pointer_down(0, 0) == WHITE
    assert sel.pointer_move(99, 24.5) == Color(255, 0, 0)
    assert sel.pointer_move(49.5, 12.25) == Color(128, 255, 255)
    assert sel.hsv == pytest.approx((180.0, 0.5, 1.0))
    assert sel.pointer_move(33, 49) == BLACK
    assert events == [WHITE, Color(255, 0, 0), Color(128, 255, 255), BLACK]


def test_pointer_is_clamped_to_the_rect(sel):
    sel.pointer_down(-50, 500)
    assert sel.color == BLACK
    assert sel.cursor.center == (0.0, 50.0)


def test_pointer_requires_press(sel):
    assert sel.pointer_move(0, 0) is None
    sel.pointer_down(0, 0)
    sel.pointer_up(0, 0)
    assert sel.pointer_move(99, 24.5) is None
    assert sel.color == WHITE


def test_set_color_places_cursor(sel):
    sel.set_color((0, 255, 255))
    x, y = sel.cursor.center
    assert x == pytest.approx(49.5)
    assert y == pytest.approx(24.5 + (1 - 255 / 256) * 24.5)

    sel.set_color(WHITE)
    assert sel.cursor.center == pytest.approx((0.0, 0.0))


def test_hit_test(sel):
    assert sel.hit_test(10, 10) == HitRegion.HUE_SV_RECT
    assert sel.hit_test(100, 10) == HitRegion.NONE
    assert sel.hit_test(-1, 10) == HitRegion.NONE


def test_cursor_size():
    assert RectSelector(10, 10).cursor.size == 14
    assert RectSelector(10, 10, style=RectStyle(cursor_size=6)).cursor.size == 6
