# workbench

A handful of small command-line tools and helpers, bundled in one package.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Commands

### Greatest common divisor

```
workbench-gcd 42 56 70
```

This prints `The greatest common divisor of [42, 56, 70] is 14`. Every argument
must be an unsigned integer that fits in 64 bits. If there are no arguments, it
prints a usage message and exits with status 1. It does the same for an argument
it cannot parse or for a zero.

### GCD web form

```
workbench-gcd-server
```

This serves on `127.0.0.1:3000`:

- `GET /` returns an HTML form with fields `n` and `m`.
- `POST /gcd` with form fields `n` and `m` returns the greatest common divisor
  as HTML.

If either value is zero, the reply is `400` with "Computing the GCD with 0 is
boring.". If a field is missing or is not an unsigned 64-bit integer, the reply
is `400` with a plain-text parse error. `workbench.gcd_server.create_app()`
returns the Flask application, so you can test it or mount it yourself.

### Mandelbrot renderer

```
workbench-mandelbrot mandel.png 1000x750 -1.20,0.35 -1,0.20
```

The arguments are:

1. the output file
2. the image size as `WIDTHxHEIGHT`
3. the upper-left corner on the complex plane, as `re,im`
4. the lower-right corner on the complex plane, as `re,im`

It writes a grayscale PNG, rendered in horizontal bands on 8 worker threads.

### Julia fractal

```
workbench-julia [OUTPUT] [--width W] [--height H]
```

This writes a colour Julia-set image for the constant `-0.4 + 0.6i`. By default
it is 800x800 and goes to `fractal.png`. Red and blue are gradients across the
image; green is the iteration count.

### Regex replace

```
quickreplace <target> <replacement> <INPUT> <OUTPUT>
```

This replaces every match of the regular expression `target` in `INPUT` and
writes the result to `OUTPUT`. Both files are read and written as UTF-8.

The replacement can refer to groups:

- `$1` refers to a group by number.
- `$name` and `${name}` refer to a named group.
- `$$` is a literal dollar sign.

A group that does not exist expands to nothing. If there is the wrong number of
arguments, an invalid pattern, or a file error, it prints a message and exits
with status 1.

### Small demos

```
workbench-rectangles   # rectangle area and containment
workbench-catalog      # catalogue of artists with their works sorted
workbench-guess        # guess a number between 1 and 100 on standard input
workbench-basics       # a few simple function results
```

`workbench-guess` ignores lines that are not unsigned integers. It exits with
status 1 if the input ends before you guess the number.

## Library use

```python
from workbench.gcd import gcd, gcd_all
from workbench.mandelbrot import parse_pair, parse_complex, escape_time, pixel_to_point
from workbench.quickreplace import replace
from workbench.rectangles import Rectangle
from workbench.guessing import play

gcd(14, 15)                                 # 1
gcd_all([12, 18, 30])                       # 6
parse_pair("10,20", ",", int)               # (10, 20)
parse_complex("1.25, -0.0625")              # (1.25-0.0625j)
escape_time(complex(1, 1), 255)             # iterations to escape, or None
replace(r"(\w+)@", "$1 at ", "me@home")     # "me at home"

Rectangle(30, 50).area                      # 1500
Rectangle(30, 50).can_hold(Rectangle(10, 40))  # True
Rectangle.square(40)

list(play(50, ["10", "50"]))                # the game's messages
```

Other modules:

- `workbench.mandelbrot` also provides `render`, `render_parallel` and
  `write_image`.
- `workbench.julia` provides `julia_iterations` and `julia_image`, which returns
  a Pillow image.
- `workbench.catalog` provides `sort_works` and `show`.
- `workbench.restaurant` has `Breakfast` (see `Breakfast.summer`), the
  `Appetizer` enum, `add_to_waitlist` (returns the next waitlist position) and
  `eat_at_restaurant`.
- `workbench.basics` has `five`, `plus_one` (raises `OverflowError` outside the
  signed 32-bit range), `labeled_measurement` and `add_suffix`.

## Tests

```
pytest
```