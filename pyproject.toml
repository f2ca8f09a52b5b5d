[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Small command-line tools: a GCD calculator and web form, Mandelbrot and Julia renderers, regex replacement and a few demos"
requires-python = ">=3.10"
keywords = ["gcd", "mandelbrot", "julia", "fractal", "regex", "replace", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
workbench-gcd = "workbench.gcd:main"
workbench-gcd-server = "workbench.gcd_server:main"
workbench-mandelbrot = "workbench.mandelbrot:main"
workbench-julia = "workbench.julia:main"
quickreplace = "workbench.quickreplace:main"
workbench-rectangles = "workbench.rectangles:main"
workbench-catalog = "workbench.catalog:main"
workbench-guess = "workbench.guessing:main"
workbench-basics = "workbench.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
