import io

import pytest

from fractol.color import BLACK, ColorMode, build_color_table
from fractol.fractals import julia, phoenix
from fractol.mathing import scale
from fractol.state import (
    DEFAULT_MAX_ITER,
    ITER_STEP,
    ITER_THRESHOLD,
    FractalKind,
    FractolState,
    Key,
    MouseButton,
    QuitRequested,
)


def make_state(**kwargs):
    return FractolState(FractalKind.MANDELBROT, **kwargs)


def test_kind_accepts_string():
    state = FractolState("julia")
    assert state.kind is FractalKind.JULIA


def test_bad_kind_rejected():
    with pytest.raises(ValueError):
        FractolState("cantor")


def test_initial_color_table_matches_mode():
    state = make_state()
    assert state.max_iter == DEFAULT_MAX_ITER
    assert state.color_table == build_color_table(ColorMode.POLY_GRADIENT, DEFAULT_MAX_ITER)


def test_escape_raises_quit():
    with pytest.raises(QuitRequested):
        make_state().handle_key(Key.ESC, io.StringIO())


@pytest.mark.parametrize("key", [Key.W, Key.UP])
def test_up_moves_offset_y(key):
    state = make_state(zoom=2.0)
    state.handle_key(key, io.StringIO())
    assert state.offset_y == pytest.approx(-0.4 * 2.0)
    assert state.offset_x == 0.0


def test_opposite_moves_cancel():
    state = make_state()
    for key in (Key.A, Key.S, Key.RIGHT, Key.UP):
        state.handle_key(key, io.StringIO())
    assert state.offset_x == pytest.approx(0.0)
    assert state.offset_y == pytest.approx(0.0)


def test_plus_raises_iterations_and_table():
    state = make_state()
    state.handle_key(Key.PLUS, io.StringIO())
    assert state.max_iter == DEFAULT_MAX_ITER + ITER_STEP
    assert len(state.color_table) == state.max_iter + 1


def test_plus_at_limit_reports():
    state = make_state(max_iter=ITER_THRESHOLD)
    out = io.StringIO()
    state.handle_key(Key.PLUS, out)
    assert state.max_iter == ITER_THRESHOLD
    assert "Maximum iterations reached !" in out.getvalue()


def test_minus_lowers_iterations():
    state = make_state()
    state.handle_key(Key.MINUS, io.StringIO())
    assert state.max_iter == DEFAULT_MAX_ITER - ITER_STEP
    assert len(state.color_table) == state.max_iter + 1


def test_minus_at_zero_reports():
    state = make_state(max_iter=0)
    out = io.StringIO()
    state.handle_key(Key.MINUS, out)
    assert state.max_iter == 0
    assert "Minimum iterations reached !" in out.getvalue()


def test_color_key_cycles_back():
    state = make_state()
    seen = []
    for _ in range(len(ColorMode)):
        state.handle_key(Key.C, io.StringIO())
        seen.append(state.color_mode)
    assert state.color_mode == ColorMode.POLY_GRADIENT
    assert sorted(seen) == sorted(int(m) for m in ColorMode)
    assert state.color_table == build_color_table(state.color_mode, state.max_iter)


def test_help_key_prints_commands():
    out = io.StringIO()
    make_state().handle_key(Key.H, out)
    assert "Press ESC to quit" in out.getvalue()


def test_zoom_keeps_point_under_cursor():
    state = make_state(offset_x=0.3, offset_y=-0.2)
    x, y, w, h = 37, 91, 200, 150

    def point():
        re = scale(x, -2.0 * state.zoom + state.offset_x, 2.0 * state.zoom + state.offset_x, w)
        im = scale(y, -2.0 * state.zoom + state.offset_y, 2.0 * state.zoom + state.offset_y, h)
        return re, im

    before = point()
    state.zoom_at(x, y, 0.5, w, h)
    assert state.zoom == pytest.approx(0.5)
    assert point() == pytest.approx(before)


def test_mouse_wheels_zoom():
    state = make_state()
    state.handle_mouse(MouseButton.WHEEL_UP, 10, 10, 100, 100)
    assert state.zoom == pytest.approx(0.8)
    state.handle_mouse(MouseButton.WHEEL_DOWN, 10, 10, 100, 100)
    assert state.zoom == pytest.approx(0.8 * 1.2)


def test_other_button_does_nothing():
    state = make_state()
    state.handle_mouse(MouseButton.LEFT, 3, 4, 100, 100)
    assert (state.zoom, state.offset_x, state.offset_y) == (1.0, 0.0, 0.0)


def test_mandelbrot_origin_in_set():
    state = make_state()
    assert state.iterations_at(0j) == state.max_iter
    assert state.color_table[state.iterations_at(0j)] == BLACK


def test_julia_uses_parameter():
    state = FractolState(FractalKind.JULIA, julia_c=complex(-0.8, 0.156))
    point = complex(0.1, -0.3)
    assert state.iterations_at(point) == julia(state.julia_c, point, state.max_iter)


def test_phoenix_uses_parameters():
    state = FractolState(FractalKind.PHOENIX, phoenix_k=complex(-0.5, 0), phoenix_c=complex(0.5666, 0))
    point = complex(0.2, 0.2)
    assert state.iterations_at(point) == phoenix(point, state.phoenix_k, state.phoenix_c, state.max_iter)