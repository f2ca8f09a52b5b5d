"""Generate a colourful Julia set image."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from PIL import Image

JULIA_CONSTANT = complex(-0.4, 0.6)


def julia_iterations(cx: float, cy: float, c: complex = JULIA_CONSTANT, limit: int = 255) -> int:
    """Count iterations of ``z*z + c`` from ``cx + cy*i`` until it leaves radius 2."""
    z = complex(cx, cy)
    i = 0
    while i < limit and abs(z) <= 2.0:
        z = z * z + c
        i += 1
    return i


def julia_image(width: int = 800, height: int = 800) -> Image.Image:
    """Build the RGB image: red and blue gradients, green from the Julia iterations."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    scale_x = 3.0 / width
    scale_y = 3.0 / height

    def pixel(x: int, y: int) -> tuple[int, int, int]:
        red = min(int(0.3 * x), 255)
        blue = min(int(0.3 * y), 255)
        cx = y * scale_x - 1.5
        cy = x * scale_y - 1.5
        green = min(julia_iterations(cx, cy), 255)
        return red, green, blue

    image = Image.new("RGB", (width, height))
    image.putdata([pixel(x, y) for y in range(height) for x in range(width)])
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Write the Julia image to a PNG file (``fractal.png`` by default)."""
    parser = argparse.ArgumentParser(prog="julia", description=__doc__)
    parser.add_argument("output", nargs="?", default="fractal.png")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=800)
    args = parser.parse_args(argv)

    image = julia_image(args.width, args.height)
    image.save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())