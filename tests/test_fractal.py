import pytest

from fractview.fractal import (
    COLOR_EVEN,
    COLOR_INSIDE,
    COLOR_ODD,
    SIZE,
    Camera,
    julia_escape,
    mandelbrot_escape,
    pixel_color,
)


def test_default_camera_centre_maps_to_origin():
    cam = Camera()
    assert cam.to_complex(SIZE // 2, SIZE // 2) == 0j


def test_default_camera_bounds_cover_four_units():
    x_min, x_max, y_min, y_max = Camera().bounds()
    assert x_min == pytest.approx(-2.0)
    assert x_max == pytest.approx(2.0)
    assert y_min == pytest.approx(-2.0)
    assert y_max == pytest.approx(2.0)


def test_corner_pixel_is_bounds_corner():
    cam = Camera(zx=0.3, zy=-0.7, scale=0.01)
    x_min, _, y_min, _ = cam.bounds()
    z = cam.to_complex(0, 0)
    assert z.real == pytest.approx(x_min)
    assert z.imag == pytest.approx(y_min)


@pytest.mark.parametrize("x,y", [(0, 0), (100, 600), (699, 1), (350, 350)])
def test_zoom_keeps_point_under_cursor(x, y):
    cam = Camera(zx=0.25, zy=-0.5)
    before = cam.to_complex(x, y)
    cam.zoom(x, y, True)
    after = cam.to_complex(x, y)
    assert after.real == pytest.approx(before.real)
    assert after.imag == pytest.approx(before.imag)


def test_zoom_in_then_out_restores_scale():
    cam = Camera()
    original = cam.scale
    cam.zoom(10, 20, True)
    assert cam.scale < original
    cam.zoom(10, 20, False)
    assert cam.scale == pytest.approx(original)


def test_mandelbrot_origin_never_escapes():
    assert mandelbrot_escape(Camera(), SIZE // 2, SIZE // 2, 40) == 40


def test_mandelbrot_far_corner_escapes_at_once():
    assert mandelbrot_escape(Camera(), 0, 0, 40) == 0


def test_julia_zero_start_and_zero_constant_stops_on_fixed_point():
    assert julia_escape(Camera(), SIZE // 2, SIZE // 2, 0j, 40) == 0


def test_counts_stay_within_limit():
    cam = Camera()
    for x in range(0, SIZE, 70):
        for y in range(0, SIZE, 70):
            m = mandelbrot_escape(cam, x, y, 25)
            j = julia_escape(cam, x, y, complex(0.285, 0.01), 25)
            assert 0 <= m <= 25
            assert 0 <= j <= 25


def test_non_positive_iterations_give_zero():
    assert mandelbrot_escape(Camera(), 350, 350, -4) == 0
    assert julia_escape(Camera(), 350, 350, 0.1j, 0) == 0


def test_pixel_color_values():
    assert pixel_color(40, 40) == COLOR_INSIDE == 0x00000000
    assert pixel_color(2, 40) == COLOR_EVEN == 0x008B1A1A
    assert pixel_color(3, 40) == COLOR_ODD == 0x00FF0000