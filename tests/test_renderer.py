import numpy as np

from mandelview.color import get_color
from mandelview.core.escape import escape_time
from mandelview.core.viewport import DEFAULT_VIEWPORT, Viewport
from mandelview.renderers.cpu import render_rgba


def test_buffer_length_and_dtype():
    buf = render_rgba(DEFAULT_VIEWPORT, 10, 7, 5)
    assert buf.shape == (7 * 5 * 4,)
    assert buf.dtype == np.uint8


def test_render_is_deterministic():
    a = render_rgba(DEFAULT_VIEWPORT, 12, 16, 9)
    b = render_rgba(DEFAULT_VIEWPORT, 12, 16, 9)
    assert np.array_equal(a, b)


def test_each_call_gets_its_own_buffer():
    a = render_rgba(DEFAULT_VIEWPORT, 5, 4, 4)
    b = render_rgba(DEFAULT_VIEWPORT, 5, 4, 4)
    a[:] = 0
    assert b[3] == 255


def test_pixels_are_row_major_rgba():
    width, height, max_iter = 11, 6, 15
    buf = render_rgba(DEFAULT_VIEWPORT, max_iter, width, height)
    for px, py in [(0, 0), (10, 0), (3, 5), (7, 2)]:
        n = escape_time(DEFAULT_VIEWPORT.pixel_to_complex(px, py, width, height), max_iter)
        offset = (py * width + px) * 4
        assert tuple(buf[offset:offset + 4]) == get_color(n, max_iter)


def test_alpha_is_opaque():
    buf = render_rgba(DEFAULT_VIEWPORT, 10, 8, 8).reshape(-1, 4)
    assert (buf[:, 3] == 255).all()


def test_gray_palette_interior_is_black():
    # c = -0.5 + 0i is inside the main cardioid
    buf = render_rgba(Viewport(-0.5, -0.4, 0.0, 0.1), 20, 2, 2, palette="gray")
    assert tuple(buf[:4]) == (0, 0, 0, 255)


def test_center_of_default_view_is_in_set():
    c = DEFAULT_VIEWPORT.pixel_to_complex(250, 250, 500, 500)
    assert escape_time(c, 10) == 0


def test_far_pixel_escapes_at_zero():
    viewport = Viewport(2.0, 3.0, 2.0, 3.0)
    c = viewport.pixel_to_complex(0, 0, 4, 4)
    assert (c.re, c.im) == (2.0, 2.0)
    assert escape_time(c, 10) == 0
    buf = render_rgba(viewport, 10, 4, 4)
    assert tuple(buf[:4]) == get_color(0, 10)
