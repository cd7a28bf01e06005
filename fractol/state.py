"""Viewer state: which fractal is shown, where, and how it is coloured."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TextIO

from fractol.color import ColorMode, build_color_table
from fractol.fractals import burningship, julia, mandelbrot, phoenix
from fractol.mathing import scale

DEFAULT_MAX_ITER = 100
ITER_THRESHOLD = 1000
ITER_STEP = 10
PAN_STEP = 0.4
ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.2

HELP_TEXT = (
    "\nCommands :\n"
    " - Zoom with mouse and move with arrows or WASD\n"
    " - Press + and - to increase or decrease precision\n"
    " - Press c to change color\n"
    " - Press ESC to quit\n"
)


class FractalKind(str, Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNINGSHIP = "burningship"
    PHOENIX = "phoenix"


class Key(Enum):
    """Keyboard commands understood by the viewer."""

    ESC = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PLUS = auto()
    MINUS = auto()
    C = auto()
    H = auto()


class MouseButton(Enum):
    """Mouse buttons the viewer distinguishes."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    WHEEL_UP = auto()
    WHEEL_DOWN = auto()


class QuitRequested(Exception):
    """Raised when the user asks the viewer to close."""


_PAN = {
    Key.W: (0.0, -PAN_STEP),
    Key.UP: (0.0, -PAN_STEP),
    Key.A: (-PAN_STEP, 0.0),
    Key.LEFT: (-PAN_STEP, 0.0),
    Key.S: (0.0, PAN_STEP),
    Key.DOWN: (0.0, PAN_STEP),
    Key.D: (PAN_STEP, 0.0),
    Key.RIGHT: (PAN_STEP, 0.0),
}


@dataclass
class FractolState:
    """Everything needed to compute one frame of a fractal view."""

    kind: FractalKind
    julia_c: complex = 0j
    phoenix_k: complex = 0j
    phoenix_c: complex = 0j
    max_iter: int = DEFAULT_MAX_ITER
    color_mode: int = ColorMode.POLY_GRADIENT
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    color_table: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.kind = FractalKind(self.kind)
        self.update_color_table()

    def update_color_table(self) -> None:
        """Rebuild the colour table for the current mode and iteration limit."""
        self.color_table = build_color_table(self.color_mode, self.max_iter)

    def iterations_at(self, point: complex) -> int:
        """Escape-time count of the current fractal at ``point``."""
        if self.kind is FractalKind.MANDELBROT:
            return mandelbrot(point, self.max_iter)
        if self.kind is FractalKind.JULIA:
            return julia(self.julia_c, point, self.max_iter)
        if self.kind is FractalKind.BURNINGSHIP:
            return burningship(point, self.max_iter)
        return phoenix(point, self.phoenix_k, self.phoenix_c, self.max_iter)

    def handle_key(self, key: Key, out: TextIO | None = None) -> None:
        """Apply a keyboard command; raise QuitRequested on escape."""
        out = sys.stdout if out is None else out
        if key is Key.ESC:
            raise QuitRequested
        if key in _PAN:
            dx, dy = _PAN[key]
            self.offset_x += dx * self.zoom
            self.offset_y += dy * self.zoom
        elif key is Key.PLUS:
            if self.max_iter < ITER_THRESHOLD:
                self.max_iter += ITER_STEP
                self.update_color_table()
            else:
                out.write("Maximum iterations reached !\n")
        elif key is Key.MINUS:
            if self.max_iter > 0:
                self.max_iter -= ITER_STEP
                self.update_color_table()
            else:
                out.write("Minimum iterations reached !\n")
        elif key is Key.C:
            self.color_mode = (self.color_mode + 1) % len(ColorMode)
            self.update_color_table()
        elif key is Key.H:
            out.write(HELP_TEXT)

    def zoom_at(self, x: float, y: float, factor: float, width: int, height: int) -> None:
        """Scale the view by ``factor`` keeping the point under pixel (x, y) fixed."""
        re = scale(x, -2.0 * self.zoom + self.offset_x, 2.0 * self.zoom + self.offset_x, width)
        im = scale(y, -2.0 * self.zoom + self.offset_y, 2.0 * self.zoom + self.offset_y, height)
        self.zoom *= factor
        self.offset_x = re - (re - self.offset_x) * factor
        self.offset_y = im - (im - self.offset_y) * factor

    def handle_mouse(self, button: MouseButton, x: float, y: float, width: int, height: int) -> None:
        """Zoom in on wheel up and out on wheel down; other buttons do nothing."""
        if button is MouseButton.WHEEL_UP:
            self.zoom_at(x, y, ZOOM_IN_FACTOR, width, height)
        elif button is MouseButton.WHEEL_DOWN:
            self.zoom_at(x, y, ZOOM_OUT_FACTOR, width, height)