[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractview"
version = "0.1.0"
description = "Interactive Mandelbrot, Julia and Burning Ship fractal viewer"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "burning-ship", "viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractview = "fractview.app:main"
fractview-extended = "fractview.app:main_extended"

[tool.hatch.build.targets.wheel]
packages = ["fractview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
