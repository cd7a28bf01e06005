"""Palettes that turn iteration counts into 0xRRGGBB colours."""

from __future__ import annotations

import math
from enum import IntEnum

BLACK = 0x000000


class ColorMode(IntEnum):
    """Available palettes, in the order they are cycled through."""

    POLY_GRADIENT = 0
    SIN_TRIPPY = 1
    FIRE = 2
    PURPLE_TRIP = 3


def _rgb(r: int, g: int, b: int) -> int:
    return (r << 16) | (g << 8) | b


def poly_gradient(iteration: int, max_iter: int) -> int:
    """Smooth polynomial gradient; black inside the set."""
    if iteration == max_iter:
        return BLACK
    t = iteration / max_iter
    r = int(9 * (1 - t) * t * t * t * 255)
    g = int(15 * (1 - t) * (1 - t) * t * t * 255)
    b = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return _rgb(r, g, b)


def sin_trippy(iteration: int, max_iter: int) -> int:
    """Phase-shifted sine waves per channel; black inside the set."""
    if iteration == max_iter:
        return BLACK
    r = int(math.sin(0.1 * iteration + 0) * 127 + 128)
    g = int(math.sin(0.1 * iteration + 2) * 127 + 128)
    b = int(math.sin(0.1 * iteration + 4) * 127 + 128)
    return _rgb(r, g, b)


def fire(iteration: int, max_iter: int) -> int:
    """Red-to-yellow ramp; black inside the set."""
    if iteration == max_iter:
        return BLACK
    t = iteration / max_iter
    r = int(t * 255)
    g = int(t * t * 128)
    b = int(t * t * t * 64)
    return _rgb(r, g, b)


def purple_trip(iteration: int, max_iter: int) -> int:
    """Oscillating red/blue mix with no green; black inside the set."""
    if iteration == max_iter:
        return BLACK
    r = int(math.sin(0.1 * iteration + 2.0) * 60 + 120)
    b = int(math.sin(0.1 * iteration + 0.5) * 60 + 155)
    return _rgb(r, 0, b)


_PALETTES = {
    ColorMode.POLY_GRADIENT: poly_gradient,
    ColorMode.SIN_TRIPPY: sin_trippy,
    ColorMode.FIRE: fire,
    ColorMode.PURPLE_TRIP: purple_trip,
}


def build_color_table(mode: int, max_iter: int) -> list[int]:
    """Precompute colours for every count from 0 to ``max_iter`` inclusive.

    An unknown mode yields an all-black table.
    """
    palette = _PALETTES.get(mode)
    if palette is None:
        return [BLACK] * (max_iter + 1)
    return [palette(i, max_iter) for i in range(max_iter + 1)]


def colorize(iteration: int, table: list[int]) -> int:
    """Look up a count in a colour table, clamping to the table's last entry."""
    return table[min(iteration, len(table) - 1)]