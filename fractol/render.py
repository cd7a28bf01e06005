"""Draw the current fractal view into an image."""

from __future__ import annotations

from fractol.color import colorize
from fractol.image import Image
from fractol.mathing import scale
from fractol.state import FractolState

WIDTH = 800
HEIGHT = 800


def point_at(state: FractolState, x: float, y: float, width: int, height: int) -> complex:
    """The point of the complex plane shown at pixel (x, y)."""
    real = scale(x, -2.0 * state.zoom + state.offset_x, 2.0 * state.zoom + state.offset_x, width)
    imag = scale(y, -2.0 * state.zoom + state.offset_y, 2.0 * state.zoom + state.offset_y, height)
    return complex(real, imag)


def render(state: FractolState, image: Image) -> Image:
    """Colour every pixel of ``image`` from the state and return it."""
    width, height = image.width, image.height
    table = state.color_table
    for y in range(height):
        for x in range(width):
            count = state.iterations_at(point_at(state, x, y, width, height))
            image.put_pixel(x, y, colorize(count, table))
    return image