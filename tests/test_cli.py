import pytest

from fractol.cli import UsageError, main, parse_args, usage_text
from fractol.state import FractalKind


def test_mandelbrot():
    assert parse_args(["mandelbrot"]).kind is FractalKind.MANDELBROT


def test_name_is_matched_by_prefix():
    assert parse_args(["mandelbrotx"]).kind is FractalKind.MANDELBROT


def test_burningship():
    assert parse_args(["burningship"]).kind is FractalKind.BURNINGSHIP


def test_julia_parameters():
    state = parse_args(["julia", "0.285", "0.01"])
    assert state.kind is FractalKind.JULIA
    assert state.julia_c == complex(0.285, 0.01)


def test_phoenix_parameters():
    state = parse_args(["phoenix", "-0.5", "0", "0.5666", "0"])
    assert state.kind is FractalKind.PHOENIX
    assert state.phoenix_k == complex(-0.5, 0)
    assert state.phoenix_c == complex(0.5666, 0)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["julia", "3", "0"],
        ["julia", "0.1"],
        ["phoenix", "1.5", "0", "0", "0"],
        ["phoenix", "0", "0", "0"],
        ["mandelbrot", "1"],
        ["sierpinski"],
    ],
)
def test_bad_arguments(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_usage_mentions_commands():
    text = usage_text()
    assert "./fractol mandelbrot" in text
    assert "./fractol burningship" in text


def test_main_prints_usage_on_bad_input(capsys):
    assert main([]) == 0
    assert usage_text() in capsys.readouterr().out