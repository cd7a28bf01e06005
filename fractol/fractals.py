"""Escape-time iteration counts for the supported fractals."""

from __future__ import annotations

from fractol.mathing import c_abs

ESCAPE_RADIUS = 4.0


def mandelbrot(c: complex, max_iter: int) -> int:
    """Iterations of ``z -> z*z + c`` from ``z = 0`` before escaping."""
    c = complex(c)
    z = 0j
    n = 0
    while n < max_iter and c_abs(z) < ESCAPE_RADIUS:
        z = z * z + c
        n += 1
    return n


def julia(c: complex, z: complex, max_iter: int) -> int:
    """Iterations of ``z -> z*z + c`` from the given ``z`` before escaping."""
    c = complex(c)
    z = complex(z)
    n = 0
    while n < max_iter and c_abs(z) < ESCAPE_RADIUS:
        z = z * z + c
        n += 1
    return n


def burningship(c: complex, max_iter: int) -> int:
    """Mandelbrot iteration with both parts of ``z`` folded to non-negative."""
    c = complex(c)
    z = 0j
    n = 0
    while n < max_iter and c_abs(z) < ESCAPE_RADIUS:
        z = complex(abs(z.real), abs(z.imag))
        z = z * z + c
        n += 1
    return n


def phoenix(z: complex, k: complex, c: complex, max_iter: int) -> int:
    """Iterations of ``z -> z*z + k*z_prev + c`` before escaping."""
    z = complex(z)
    k = complex(k)
    c = complex(c)
    z_prev = 0j
    n = 0
    while n < max_iter and c_abs(z) < ESCAPE_RADIUS:
        z, z_prev = z * z + k * z_prev + c, z
        n += 1
    return n