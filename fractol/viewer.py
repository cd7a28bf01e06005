"""An interactive window that shows the fractal and reacts to input."""

from __future__ import annotations

import base64
import sys
from typing import Any, TextIO

from fractol.image import Image
from fractol.render import HEIGHT, WIDTH, render
from fractol.state import FractolState, Key, MouseButton, QuitRequested

_KEYSYMS = {
    "Escape": Key.ESC,
    "w": Key.W,
    "a": Key.A,
    "s": Key.S,
    "d": Key.D,
    "Up": Key.UP,
    "Down": Key.DOWN,
    "Left": Key.LEFT,
    "Right": Key.RIGHT,
    "plus": Key.PLUS,
    "KP_Add": Key.PLUS,
    "minus": Key.MINUS,
    "KP_Subtract": Key.MINUS,
    "c": Key.C,
    "h": Key.H,
}

_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    4: MouseButton.WHEEL_UP,
    5: MouseButton.WHEEL_DOWN,
}


def keysym_to_key(keysym: str) -> Key | None:
    """Map a key symbol name to a viewer command, or None if it has none."""
    if len(keysym) == 1:
        keysym = keysym.lower()
    return _KEYSYMS.get(keysym)


def button_to_mouse(number: int) -> MouseButton | None:
    """Map a pointer button number to a mouse button, or None."""
    return _BUTTONS.get(number)


def image_to_ppm(image: Image) -> bytes:
    """Encode an image of 0xRRGGBB pixels as binary PPM."""
    out = bytearray(f"P6\n{image.width} {image.height}\n255\n".encode("ascii"))
    for y in range(image.height):
        for x in range(image.width):
            value = image.get_pixel(x, y)
            out += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return bytes(out)


class FractolWindow:
    """Displays a fractal view and updates it from keyboard and mouse input."""

    def __init__(
        self,
        state: FractolState,
        width: int = WIDTH,
        height: int = HEIGHT,
        out: TextIO | None = None,
    ) -> None:
        self.state = state
        self.width = width
        self.height = height
        self.out = sys.stdout if out is None else out
        self.image: Image | None = None
        self._root: Any = None
        self._photo: Any = None

    def redraw(self) -> Image:
        """Render the current view, show it if the window is open, and return it."""
        self.image = render(self.state, Image(self.width, self.height))
        if self._photo is not None:
            encoded = base64.b64encode(image_to_ppm(self.image)).decode("ascii")
            self._photo.configure(data=encoded, format="PPM")
        return self.image

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title(self.state.kind.value)
        root.resizable(False, False)
        self._root = root
        self._photo = tk.PhotoImage(width=self.width, height=self.height)
        label = tk.Label(root, image=self._photo, borderwidth=0)
        label.pack()
        root.bind("<KeyRelease>", self._on_key)
        label.bind("<ButtonPress>", self._on_button)
        label.bind("<MouseWheel>", self._on_wheel)
        root.protocol("WM_DELETE_WINDOW", self._close)
        self.redraw()
        try:
            root.mainloop()
        finally:
            self._root = None
            self._photo = None

    def _on_key(self, event: Any) -> None:
        key = keysym_to_key(event.keysym)
        if key is None:
            return
        try:
            self.state.handle_key(key, self.out)
        except QuitRequested:
            self._close()
            return
        self.redraw()

    def _on_button(self, event: Any) -> None:
        button = button_to_mouse(event.num)
        if button is not None:
            self.state.handle_mouse(button, event.x, event.y, self.width, self.height)
        self.redraw()

    def _on_wheel(self, event: Any) -> None:
        button = MouseButton.WHEEL_UP if event.delta > 0 else MouseButton.WHEEL_DOWN
        self.state.handle_mouse(button, event.x, event.y, self.width, self.height)
        self.redraw()

    def _close(self) -> None:
        self.out.write("\nProgram closing...")
        self.out.write("Program terminated successfully :) ")
        self.out.flush()
        if self._root is not None:
            self._root.destroy()