import pytest

from fractol.fractals import burningship, julia, mandelbrot, phoenix

POINTS = [
    complex(-0.75, 0.1),
    complex(0.3, 0.5),
    complex(-1.2, 0.0),
    complex(0.4, -0.3),
    complex(-0.1, 0.65),
    complex(1.0, 1.0),
]


def test_origin_never_escapes_mandelbrot():
    assert mandelbrot(0j, 50) == 50


def test_zero_iterations_limit():
    assert mandelbrot(0j, 0) == 0
    assert julia(0j, 0j, 0) == 0
    assert burningship(0j, 0) == 0
    assert phoenix(0j, 0j, 0j, 0) == 0


@pytest.mark.parametrize("c", POINTS)
def test_counts_never_exceed_limit(c):
    for limit in (1, 10, 80):
        assert 0 <= mandelbrot(c, limit) <= limit
        assert 0 <= burningship(c, limit) <= limit
        assert 0 <= julia(c, c, limit) <= limit
        assert 0 <= phoenix(c, 0.5j, c, limit) <= limit


@pytest.mark.parametrize("c", POINTS)
def test_julia_from_origin_matches_mandelbrot(c):
    assert julia(c, 0j, 60) == mandelbrot(c, 60)


@pytest.mark.parametrize("c", [0.1, 0.25, 0.3, 1.0, 2.0])
def test_burningship_matches_mandelbrot_on_positive_reals(c):
    assert burningship(complex(c, 0), 60) == mandelbrot(complex(c, 0), 60)


@pytest.mark.parametrize("z", POINTS)
def test_phoenix_without_memory_is_julia(z):
    c = complex(-0.8, 0.156)
    assert phoenix(z, 0j, c, 70) == julia(c, z, 70)


def test_points_outside_radius_escape_immediately():
    far = complex(10, 10)
    assert julia(0j, far, 100) == 0
    assert phoenix(far, 0.5, 0.1, 100) == 0


def test_julia_inside_unit_disk_with_zero_c_stays_bounded():
    assert julia(0j, complex(0.5, 0.5), 40) == 40


def test_escape_count_grows_with_limit_only_when_bounded():
    c = complex(1.0, 1.0)
    assert mandelbrot(c, 10) == mandelbrot(c, 100)