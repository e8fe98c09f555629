from chromapick.colors import BLACK, Color
from chromapick.conversions import hsv_to_rgb
from chromapick.selectors import CircleSelector
from chromapick.settings import RenderSettings
import numpy as np
import pytest


@pytest.fixture
def sel():
    return CircleSelector(200, 200)


def pixel(pixels, x, y):
    return tuple(int(c) for c in pixels[y, x])


def test_render_shape_and_ownership(sel):
    pixels = sel.render()
    assert pixels.shape == (200, 200, 4)
    assert pixels.dtype == np.uint8
    pixels[:] = 0
    assert pixel(sel.render(), 0, 0) == (255, 255, 255, 255)


def test_background_and_alpha(sel):
    pixels = sel.render()
    assert pixel(pixels, 0, 0) == (255, 255, 255, 255)
    assert pixel(pixels, 199, 199) == (255, 255, 255, 255)
    assert (pixels[..., 3] == 255).all()


def test_ring_colors(sel):
    pixels = sel.render()
    assert pixel(pixels, 180, 100) == (255, 0, 0, 255)
    assert pixel(pixels, 100, 180) == (128, 255, 0, 255)
    assert pixel(pixels, 20, 100) == hsv_to_rgb(180, 1, 1).rgba


def test_ring_edges_are_blended(sel):
    pixels = sel.render()
    # just outside the outer radius the ring fades into the background
    r, g, b, _ = pixel(pixels, 100 + 92, 100)
    assert r == 255 and 0 < g < 255 and g == b


def test_ring_inner_edge_is_blended(sel):
    pixels = sel.render()
    # hue 180 along the left axis; the inner radius is 65
    assert pixel(pixels, 100 - 66, 100) == (0, 255, 255, 255)
    assert pixel(pixels, 100 - 65, 100) == (128, 255, 255, 255)
    assert pixel(pixels, 100 - 64, 100) == (255, 255, 255, 255)


def mix(fg, bg, a):
    return tuple((f * a + b * (255 - a)) // 255 for f, b in zip(fg, bg))


def test_triangle_interior_follows_barycentric(sel):
    pixels = sel.render()
    geo = sel.geometry
    for x, y in [(100, 100), (120, 90), (90, 120), (140, 100)]:
        w0, w1, w2 = geo.barycentric(x, y)
        value = w0 + w1
        saturation = w0 / value
        assert pixel(pixels, x, y)[:3] == hsv_to_rgb(0, saturation, value).rgb


def test_triangle_follows_hue(sel):
    sel.set_color(Color(0, 0, 255))
    pixels = sel.render()
    w0, w1, _ = sel.geometry.barycentric(100, 100)
    hue = sel.hsv.hue
    assert pixel(pixels, 100, 100)[:3] == hsv_to_rgb(hue, w0 / (w0 + w1), w0 + w1).rgb


def test_hue_drag_redraws_triangle_only(sel):
    before = sel.render()
    sel.pointer_down(100, 180)
    after = sel.render()
    geo = sel.geometry
    left, top, right, bottom = geo.rect

    outside = np.ones(before.shape[:2], dtype=bool)
    outside[top:bottom + 1, left:right + 1] = False
    np.testing.assert_array_equal(before[outside], after[outside])
    assert not np.array_equal(before[100, 100], after[100, 100])


def test_base_color_redraws(sel):
    sel.base_color = BLACK
    pixels = sel.render()
    assert pixel(pixels, 0, 0) == (0, 0, 0, 255)
    assert sel.border_color == Color(255, 255, 255)


def test_parallel_matches_serial():
    serial = CircleSelector(160, 120, settings=RenderSettings(parallel=False))
    parallel = CircleSelector(
        160,
        120,
        settings=RenderSettings(parallel=True, max_workers=4, min_parallel_rows=1),
    )
    np.testing.assert_array_equal(serial.render(), parallel.render())

    serial.set_color(Color(12, 200, 99))
    parallel.set_color(Color(12, 200, 99))
    np.testing.assert_array_equal(serial.render(), parallel.render())


def test_render_into_bytearray(sel):
    buf = bytearray(200 * 200 * 4)
    sel.render_into(buf, 200, 200)
    assert bytes(buf) == sel.render().tobytes()


def test_render_into_ndarray(sel):
    out = np.zeros((200, 200, 4), dtype=np.uint8)
    sel.render_into(out, 200, 200)
    np.testing.assert_array_equal(out, sel.render())


def test_render_into_errors(sel):
    with pytest.raises(ValueError):
        sel.render_into(bytearray(10), 200, 200)
    with pytest.raises(ValueError):
        sel.render_into(bytearray(100 * 100 * 4), 100, 100)
    with pytest.raises(TypeError):
        sel.render_into(bytes(200 * 200 * 4), 200, 200)


def test_render_with_cursors(sel):
    plain = sel.render()
    stamped = sel.render(include_cursors=True)

    # hue cursor sits on the ring at hue 0
    region = (slice(90, 111), slice(168, 189))
    assert not (plain[region][..., :3] == 0).all(axis=-1).any()
    assert (stamped[region][..., :3] == 0).all(axis=-1).any()
    np.testing.assert_array_equal(plain, sel.render())


def test_triangle_border_blends_over_fill(sel):
    pixels = sel.render()
    geo = sel.geometry
    # 73/112 px inside the P0-P1 edge: border alpha (1 - 0.652) * 2, A = 177
    w0, w1, w2 = geo.barycentric(110, 69)
    assert min(w0, w1, w2) * 97 == pytest.approx(73 / 112)
    fill = hsv_to_rgb(0, w0 / (w0 + w1), w0 + w1).rgb
    assert sel.border_color == BLACK
    assert pixel(pixels, 110, 69)[:3] == mix(BLACK.rgb, fill, 177)


def test_triangle_edge_fades_border_into_background(sel):
    pixels = sel.render()
    # on the P1-P2 edge: half border, half background
    assert pixel(pixels, 68, 100) == (128, 128, 128, 255)
    # 39/112 px outside the P0-P1 edge: A = trunc((0.5 - 0.348) * 255) = 38
    assert pixel(pixels, 112, 69) == (217, 217, 217, 255)
    # more than half a pixel outside only the background remains
    assert pixel(pixels, 111, 68) == (255, 255, 255, 255)
    assert pixel(pixels, 67, 100) == (255, 255, 255, 255)


def test_triangle_edge_uses_inverted_background():
    sel = CircleSelector(200, 200)
    sel.base_color = BLACK
    pixels = sel.render()
    assert sel.border_color == Color(255, 255, 255)
    assert pixel(pixels, 68, 100) == (127, 127, 127, 255)
