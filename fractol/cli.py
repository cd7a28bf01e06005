"""Command line entry point: pick a fractal and open the viewer."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from fractol.state import FractalKind, FractolState
from fractol.viewer import FractolWindow

_FLOAT = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_USAGE = (
    "Bad Input try this :\n"
    "    ./fractol mandelbrot\n"
    "    ./fractol julia <cr> <ci> (where cr and ci are numbers included between "
    "-2.0 et 2.0)\n"
    "    ./fractol burningship\n"
    "    ./fractol phoenix <kr> <ki> <cr> <ci> (where numbers included between "
    "-1.0 et 1.0)\n"
    "\n"
    "Here some cool examples of params :\n"
    "  Julia\n"
    "(0.285 0.01), (-1.476 0), (-0.8 0.156), (-0.4 0.6),\n"
    "(-0.8696 0.26), (-0.78 -0.13), (-0.097 -0.841), (0.234 0.543)\n"
    "  Phoenix\n"
    "(-0.5 0 0.5666 0), (0.2955 0 -0.4 0.1),\n"
    "(-0.25 0 0.4 0), (-0.35 0 0.1 0.6),\n"
    "(-0.8 0 0.6 -0.1), (0 -0.01 0.269 0),\n"
    "(-0.53 0 0.55 -0.1), (0.855 0 0.1 0.1)"
)


class UsageError(ValueError):
    """Raised when the command line does not describe a known fractal."""


def usage_text() -> str:
    """Help shown when the arguments are not understood."""
    return _USAGE


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group()) if match else 0.0


def _within(limit: float, *values: float) -> bool:
    return all(-limit <= value <= limit for value in values)


def parse_args(argv: Sequence[str]) -> FractolState:
    """Build the initial viewer state from the arguments after the program name."""
    args = list(argv)
    if not args:
        raise UsageError("no fractal given")
    name, params = args[0], [_atof(arg) for arg in args[1:]]
    if len(args) == 1 and name.startswith("mandelbrot"):
        return FractolState(FractalKind.MANDELBROT)
    if len(args) == 3 and name.startswith("julia") and _within(2.0, *params):
        return FractolState(FractalKind.JULIA, julia_c=complex(params[0], params[1]))
    if len(args) == 1 and name.startswith("burningship"):
        return FractolState(FractalKind.BURNINGSHIP)
    if len(args) == 5 and name.startswith("phoenix") and _within(1.0, *params):
        return FractolState(
            FractalKind.PHOENIX,
            phoenix_k=complex(params[0], params[1]),
            phoenix_c=complex(params[2], params[3]),
        )
    raise UsageError(f"cannot understand arguments {args!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; print usage and return 0 on bad arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        state = parse_args(args)
    except UsageError:
        sys.stdout.write(usage_text())
        return 0
    print("Program launched, press h for help")
    FractolWindow(state).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())