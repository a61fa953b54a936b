import pytest

from fractview.canvas import Canvas
from fractview.zoomdemo import (
    BACKGROUND,
    CIRCLE_COLOR,
    GRID_COLOR,
    ZOOM_FACTOR,
    View,
    draw_circle,
    draw_dot,
    draw_grid,
    draw_hline,
    draw_vline,
    main,
    render,
)


def test_center_maps_to_screen_middle():
    view = View()
    assert view.to_screen(0.0, 0.0) == (360, 240)


def test_to_screen_rounds_halves_away_from_zero():
    view = View(scale=1.0)
    assert view.to_screen(-0.5, 0.5) == (359, 241)


def test_to_world_of_middle_is_center():
    view = View(cx=1.5, cy=-2.0)
    assert view.to_world(360, 240) == (pytest.approx(1.5), pytest.approx(-2.0))


@pytest.mark.parametrize("sx,sy", [(0, 0), (100, 50), (719, 479), (360, 240)])
def test_screen_world_round_trip(sx, sy):
    view = View(cx=0.3, cy=-0.7, scale=0.02)
    assert view.to_screen(*view.to_world(sx, sy)) == (sx, sy)


def test_bounds_of_default_view():
    x_min, x_max, y_min, y_max = View().bounds()
    assert x_min == pytest.approx(-3.6)
    assert x_max == pytest.approx(3.6)
    assert y_min == pytest.approx(-2.4)
    assert y_max == pytest.approx(2.4)


def test_zoom_in_keeps_point_under_cursor():
    view = View()
    before = view.to_world(100, 50)
    view.zoom(100, 50, True)
    after = view.to_world(100, 50)
    assert view.scale == pytest.approx(0.01 * ZOOM_FACTOR)
    assert after == (pytest.approx(before[0]), pytest.approx(before[1]))


def test_zoom_out_then_in_restores_view():
    view = View()
    view.zoom(600, 400, False)
    view.zoom(600, 400, True)
    assert view.scale == pytest.approx(0.01)
    assert view.cx == pytest.approx(0.0, abs=1e-12)
    assert view.cy == pytest.approx(0.0, abs=1e-12)


def test_vline_and_hline():
    canvas = Canvas(5, 4)
    draw_vline(canvas, 2, GRID_COLOR)
    draw_hline(canvas, 1, CIRCLE_COLOR)
    assert canvas.get_pixel(2, 3) == GRID_COLOR
    assert canvas.get_pixel(2, 1) == CIRCLE_COLOR
    assert canvas.get_pixel(0, 1) == CIRCLE_COLOR
    assert canvas.get_pixel(0, 0) == 0


def test_lines_off_canvas_are_ignored():
    canvas = Canvas(5, 4)
    draw_vline(canvas, -1, GRID_COLOR)
    draw_hline(canvas, 4, GRID_COLOR)
    assert canvas.to_bytes() == bytes(5 * 4 * 4)


def test_dot_is_a_small_disk():
    canvas = Canvas(20, 20)
    draw_dot(canvas, 10, 10, CIRCLE_COLOR)
    assert canvas.get_pixel(12, 10) == CIRCLE_COLOR
    assert canvas.get_pixel(11, 11) == CIRCLE_COLOR
    assert canvas.get_pixel(12, 11) == 0
    assert canvas.get_pixel(13, 10) == 0


def test_grid_lines_at_integer_world_coordinates():
    canvas = Canvas(720, 480)
    draw_grid(canvas, View())
    assert canvas.get_pixel(60, 10) == GRID_COLOR
    assert canvas.get_pixel(360, 10) == GRID_COLOR
    assert canvas.get_pixel(10, 40) == GRID_COLOR
    assert canvas.get_pixel(10, 10) == 0


def test_circle_passes_through_radius_point():
    canvas = Canvas(720, 480)
    draw_circle(canvas, View())
    assert canvas.get_pixel(420, 240) == CIRCLE_COLOR
    assert canvas.get_pixel(360, 240) == 0


def test_render_draws_background_grid_and_circle():
    canvas = Canvas(720, 480)
    result = render(canvas, View())
    assert result is canvas
    assert canvas.get_pixel(10, 10) == BACKGROUND
    assert canvas.get_pixel(60, 10) == GRID_COLOR
    assert canvas.get_pixel(420, 240) == CIRCLE_COLOR


def test_render_follows_zoom():
    view = View()
    view.zoom(360, 240, True)
    canvas = render(Canvas(720, 480), view)
    expected_x = view.to_screen(1.0, 0.0)[0]
    assert canvas.get_pixel(expected_x, 10) == GRID_COLOR
    assert canvas.get_pixel(expected_x + 2, 10) == BACKGROUND


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2