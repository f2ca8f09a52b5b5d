"""Render a region of the Mandelbrot set to a grayscale PNG."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from PIL import Image

T = TypeVar("T")

Bounds = tuple[int, int]


def parse_pair(
    s: str, separator: str, kind: Callable[[str], T]
) -> tuple[T, T] | None:
    """Parse ``s`` as ``<left><separator><right>``, each side converted by ``kind``.

    Return ``None`` when the separator is missing or either side fails to parse.
    """
    index = s.find(separator)
    if index < 0:
        return None
    try:
        return kind(s[:index]), kind(s[index + 1:])
    except (ValueError, TypeError):
        return None


def parse_complex(s: str) -> complex | None:
    """Parse a pair of floats separated by a comma as a complex number."""
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    re_part, im_part = pair
    return complex(re_part, im_part)


def escape_time(c: complex, limit: int) -> int | None:
    """Return the iteration at which ``c`` leaves radius 2, or ``None`` if it never does."""
    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > 4.0:
            return i
        z = z * z + c
    return None


def pixel_to_point(
    bounds: Bounds, pixel: Bounds, upper_left: complex, lower_right: complex
) -> complex:
    """Map a (column, row) pixel to its point on the complex plane."""
    width = lower_right.real - upper_left.real
    height = upper_left.imag - lower_right.imag
    return complex(
        upper_left.real + pixel[0] * width / bounds[0],
        # Rows grow downwards while the imaginary axis grows upwards.
        upper_left.imag - pixel[1] * height / bounds[1],
    )


def render(bounds: Bounds, upper_left: complex, lower_right: complex) -> bytearray:
    """Render a rectangle of the set as one grayscale byte per pixel, row-major."""
    width, height = bounds
    pixels = bytearray(width * height)
    for row in range(height):
        for column in range(width):
            point = pixel_to_point(bounds, (column, row), upper_left, lower_right)
            count = escape_time(point, 255)
            pixels[row * width + column] = 0 if count is None else 255 - count
    return pixels


def render_parallel(
    bounds: Bounds, upper_left: complex, lower_right: complex, threads: int = 8
) -> bytearray:
    """Render the image in horizontal bands, one worker per band."""
    if threads < 1:
        raise ValueError("threads must be at least 1")
    width, height = bounds
    if width == 0 or height == 0:
        return bytearray()

    rows_per_band = height // threads + 1
    bands = []
    for top in range(0, height, rows_per_band):
        band_height = min(rows_per_band, height - top)
        band_upper_left = pixel_to_point(bounds, (0, top), upper_left, lower_right)
        band_lower_right = pixel_to_point(
            bounds, (width, top + band_height), upper_left, lower_right
        )
        bands.append(((width, band_height), band_upper_left, band_lower_right))

    with ThreadPoolExecutor(max_workers=threads) as pool:
        rendered = pool.map(lambda band: render(*band), bands)
        pixels = bytearray()
        for chunk in rendered:
            pixels.extend(chunk)
    return pixels


def write_image(filename: str, pixels: bytes | bytearray, bounds: Bounds) -> None:
    """Write grayscale ``pixels`` of size ``bounds`` to ``filename`` as PNG."""
    if len(pixels) != bounds[0] * bounds[1]:
        raise ValueError("pixel buffer does not match image bounds")
    image = Image.frombytes("L", bounds, bytes(pixels))
    image.save(filename, format="PNG")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``FILE PIXELS UPPERLEFT LOWERRIGHT``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print("Usage: mandelbrot FILE PIXELS UPPERLEFT LOWERRIGHT", file=sys.stderr)
        print(
            "Example: mandelbrot mandel.png 100x750 -1.20,0.35 -1,0.20",
            file=sys.stderr,
        )
        return 1

    filename, pixels_arg, upper_left_arg, lower_right_arg = args
    bounds = parse_pair(pixels_arg, "x", int)
    if bounds is None or bounds[0] < 0 or bounds[1] < 0:
        print("error parsing image dimensions", file=sys.stderr)
        return 1
    upper_left = parse_complex(upper_left_arg)
    if upper_left is None:
        print("error parsing upper left corner point", file=sys.stderr)
        return 1
    lower_right = parse_complex(lower_right_arg)
    if lower_right is None:
        print("error parsing lower right corner point", file=sys.stderr)
        return 1

    pixels = render_parallel(bounds, upper_left, lower_right, threads=8)
    try:
        write_image(filename, pixels, bounds)
    except OSError as exc:
        print(f"error writing PNG file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())