# fractol

An interactive fractal explorer. It draws the Mandelbrot set, Julia sets,
the Burning Ship and Phoenix fractals in a window. You can pan and zoom
with the keyboard and mouse, and you can switch between four colour palettes.

The window uses `tkinter` from the standard library, so Python needs Tk
support and a display. There are no other dependencies.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Running

    fractol mandelbrot
    fractol julia <cr> <ci>
    fractol burningship
    fractol phoenix <kr> <ki> <cr> <ci>

- **Julia:** the two parameters are the real and imaginary parts of the constant. Each must lie between -2.0 and 2.0.
- **Phoenix:** the four parameters are the feedback constant `k` (`kr`, `ki`) and the constant `c` (`cr`, `ci`). Each part must lie between -1.0 and 1.0.

Some parameters worth trying:

- Julia: `0.285 0.01`, `-0.8 0.156`, `-0.4 0.6`, `-0.097 -0.841`
- Phoenix: `-0.5 0 0.5666 0`, `0.2955 0 -0.4 0.1`, `-0.35 0 0.1 0.6`

If the arguments are missing, wrong in number, or out of range, `fractol` prints a usage message that lists these forms. It then exits with status 0.

The window is 800×800 pixels, and the view starts over the square from -2 to 2 on both axes.

## Controls

| Input                    | Action                                            |
|--------------------------|---------------------------------------------------|
| Mouse wheel              | Zoom in (×0.8) or out (×1.2) around the pointer   |
| Arrow keys or W A S D    | Move the view by 0.4 times the current zoom       |
| `+` / `-`                | Raise or lower the iteration limit by 10          |
| `c`                      | Cycle through the colour palettes                 |
| `h`                      | Print a short help text                           |
| `Esc` or closing window  | Quit                                              |

- **Iteration limit:** it starts at 100 and can be raised up to 1000. It cannot be lowered once it reaches 0.
- **When input takes effect:** keys act when they are released. After every key or mouse action the view is drawn again.

## Using it as a library

The escape-time functions in `fractol.fractals` take Python complex numbers. Each returns the number of iterations before the orbit escapes, capped at the limit given:

```python
from fractol.fractals import mandelbrot, julia, burningship, phoenix

mandelbrot(complex(0, 0), 50)                       # 50: the origin never escapes
julia(complex(-0.8, 0.156), complex(0.1, 0.2), 100)  # constant c, starting z
```

### Modules

| Module | What it provides |
|--------|------------------|
| `fractol.color` | The palettes `poly_gradient`, `sin_trippy`, `fire` and `purple_trip`, and the `ColorMode` enumeration. Also `build_color_table(mode, max_iter)`, which precomputes colours for every count, and `colorize(iteration, table)`. |
| `fractol.state` | `FractolState`, which holds the fractal kind (`FractalKind`), its parameters, zoom, offsets and palette. It handles `Key` and `MouseButton` input; `Esc` raises `QuitRequested`. |
| `fractol.image` | `Image`, an in-memory packed-pixel buffer with `put_pixel`, `get_pixel` and `clear`. Also `rgb_shifts` and `color_value`, which turn 0xRRGGBB into pixel values for visuals shallower than 24 bits. |
| `fractol.render` | `render(state, image)` fills an image from a state. `point_at` gives the complex point shown at a pixel. |
| `fractol.viewer` | The Tk window, `FractolWindow`. Also `image_to_ppm`, which encodes an `Image` as binary PPM. |
| `fractol.xpm` | XPM reading: `load_xpm(path)`, `parse_xpm_text(text)` and `xpm_from_lines(lines)`. Malformed data raises `XpmError`. |
| `fractol.colornames` | X11 colour names, used by `fractol.xpm`. `lookup_color(name)` resolves a name, ignoring case. |

Rendering without a window:

```python
from fractol.image import Image
from fractol.render import render
from fractol.state import FractalKind, FractolState
from fractol.viewer import image_to_ppm

state = FractolState(FractalKind.MANDELBROT)
image = render(state, Image(200, 200))
with open("mandelbrot.ppm", "wb") as handle:
    handle.write(image_to_ppm(image))
```

## What it does not do

- **No saving from the viewer:** it cannot save images from the window. To write a frame to a file, use the library as shown above.
- **XPM images are only read:** `fractol.xpm` produces in-memory images, which the viewer never displays.
- **No rendering speed-ups:** rendering is plain Python. Each redraw of the full window takes noticeable time, especially at high iteration limits.