"""Small numeric helpers shared by the fractal kernels and the renderer."""

from __future__ import annotations

import math


def c_abs(z: complex) -> int:
    """Return the modulus of ``z`` truncated towards zero to an integer."""
    return int(math.sqrt(z.real * z.real + z.imag * z.imag))


def scale(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``value`` from the range ``[0, old_max]`` onto ``[new_min, new_max]``."""
    return new_min + (new_max - new_min) * (value - 0) / (old_max - 0)