[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractol"
version = "1.0.0"
description = "Interactive explorer for Mandelbrot, Julia, Burning Ship and Phoenix fractals"
requires-python = ">=3.10"
dependencies = []
keywords = ["fractal", "mandelbrot", "julia", "burning ship", "phoenix", "xpm", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fractol = "fractol.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fractol"]

[tool.pytest.ini_options]
addopts = "-ra"
