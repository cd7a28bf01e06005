import pytest

from fractol.mathing import c_abs, scale


def test_c_abs_pythagorean_triple():
    assert c_abs(complex(3, 4)) == 5


def test_c_abs_truncates_towards_zero():
    assert c_abs(complex(0.5, 0.5)) == 0


@pytest.mark.parametrize("z", [complex(1.5, -2.25), complex(-3.9, 0.1), complex(0, 7.7)])
def test_c_abs_is_integer_part_of_modulus(z):
    result = c_abs(z)
    assert isinstance(result, int)
    assert result <= abs(z) < result + 1


def test_c_abs_ignores_sign():
    z = complex(2.5, -1.5)
    assert c_abs(z) == c_abs(-z) == c_abs(z.conjugate())


def test_scale_endpoints():
    assert scale(0, -2.0, 2.0, 800) == -2.0
    assert scale(800, -2.0, 2.0, 800) == 2.0


def test_scale_midpoint():
    assert scale(400, -2.0, 2.0, 800) == pytest.approx(0.0)


def test_scale_is_monotonic():
    values = [scale(x, -1.5, 3.0, 100) for x in range(101)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_scale_zero_range_raises():
    with pytest.raises(ZeroDivisionError):
        scale(1, 0.0, 1.0, 0)