import pytest

from fractscope.formulas import FractalKind
from fractscope.view import HEIGHT, WIDTH, View, julia_view, view_from_args


def test_default_mandelbrot_view():
    view = view_from_args(["Mandelbrot"])
    assert view.kind is FractalKind.MANDELBROT
    assert view.x_span == 2.65
    assert view.y_span == 2.5
    assert view.x_offset == 2.1
    assert view.y_offset == 1.25
    assert view.iterations == 50


def test_burning_ship_view():
    view = view_from_args(["Burning_ship"])
    assert view.kind is FractalKind.BURNING_SHIP
    assert view.x_offset == 3
    assert view.y_offset == 1.25


def test_julia_view_from_args_parses_both_separators():
    view = view_from_args(["Julia", "-0.5", "0,25"])
    assert view.kind is FractalKind.JULIA
    assert view.c_real == pytest.approx(-0.5)
    assert view.c_imag == pytest.approx(0.25)
    assert view.x_offset == 1.325


def test_julia_view_matches_function():
    assert view_from_args(["Julia", "0.3", "0.5"]) == julia_view(0.3, 0.5)


def test_julia_without_parameters_raises():
    with pytest.raises(ValueError):
        view_from_args(["Julia", "0.3"])


def test_unknown_name_falls_back_to_mandelbrot():
    assert view_from_args(["Something"]) == View()


def test_zoom_in_then_out_restores_view():
    view = View()
    view.zoom(1)
    view.zoom(-1)
    assert view.x_span == pytest.approx(2.65)
    assert view.y_span == pytest.approx(2.5)
    assert view.x_offset == pytest.approx(2.1)
    assert view.y_offset == pytest.approx(1.25)


@pytest.mark.parametrize("direction", [1, -1])
def test_zoom_keeps_centre_fixed(direction):
    view = View()
    before = view.pixel_to_complex(WIDTH / 2, HEIGHT / 2)
    view.zoom(direction)
    after = view.pixel_to_complex(WIDTH / 2, HEIGHT / 2)
    assert after == pytest.approx(before)


def test_zoom_in_shrinks_spans():
    view = View()
    view.zoom(1)
    assert view.x_span < 2.65
    assert view.y_span < 2.5


def test_zoom_rejects_bad_direction():
    with pytest.raises(ValueError):
        View().zoom(2)


@pytest.mark.parametrize("direction", [1, -1])
def test_mouse_zoom_keeps_cursor_point_fixed(direction):
    view = View()
    before = view.pixel_to_complex(300, 700)
    view.mouse_zoom(300, 700, direction)
    after = view.pixel_to_complex(300, 700)
    assert after == pytest.approx(before)


def test_mouse_zoom_in_shrinks_spans():
    view = View()
    view.mouse_zoom(10, 10, -1)
    assert view.x_span < 2.65
    assert view.y_span < 2.5


def test_mouse_zoom_rejects_bad_direction():
    with pytest.raises(ValueError):
        View().mouse_zoom(1, 1, 0)


def test_pan_and_back_restores():
    view = View()
    view.pan(1, -1)
    view.pan(-1, 1)
    assert view.x_offset == pytest.approx(2.1)
    assert view.y_offset == pytest.approx(1.25)


def test_pan_moves_pixel_by_fraction_of_span():
    view = View()
    real_before, imag_before = view.pixel_to_complex(0, 0)
    view.pan(1, 1, 10)
    real_after, imag_after = view.pixel_to_complex(0, 0)
    assert real_before - real_after == pytest.approx(view.x_span / 10)
    assert imag_after - imag_before == pytest.approx(view.y_span / 10)


def test_pan_zero_divide_raises():
    with pytest.raises(ValueError):
        View().pan(1, 0, 0)


def test_pixel_complex_round_trip():
    view = julia_view(0.1, 0.2)
    view.zoom(1)
    real, imag = view.pixel_to_complex(123, 456, 200, 500)
    assert view.complex_to_pixel(real, imag, 200, 500) == pytest.approx((123, 456))


def test_top_left_pixel_maps_to_offsets():
    view = View()
    assert view.pixel_to_complex(0, 0) == (-2.1, 1.25)


def test_iterations_step_and_minimum():
    view = View()
    assert view.more_iterations() == 100
    assert view.fewer_iterations() == 50
    assert view.fewer_iterations() == 50
    assert view.iterations == 50