import pytest
from PIL import Image

from workbench.mandelbrot import (
    escape_time,
    main,
    parse_complex,
    parse_pair,
    pixel_to_point,
    render,
    render_parallel,
    write_image,
)


@pytest.mark.parametrize(
    "text, sep, kind, expected",
    [
        ("", ",", int, None),
        ("10,", ",", int, None),
        (",10", ",", int, None),
        ("10,20", ",", int, (10, 20)),
        ("10,20xy", ",", int, None),
        ("0.5x", "x", float, None),
        ("0.5x1.5", "x", float, (0.5, 1.5)),
    ],
)
def test_parse_pair(text, sep, kind, expected):
    assert parse_pair(text, sep, kind) == expected


def test_parse_complex():
    assert parse_complex("1.25, -0.0625") == complex(1.25, -0.0625)
    assert parse_complex(",-0.0625") is None


def test_pixel_to_point():
    result = pixel_to_point((100, 200), (25, 175), complex(-1.0, 1.0), complex(1.0, -1.0))
    assert result == complex(-0.5, -0.75)


def test_escape_time_member_returns_none():
    assert escape_time(0j, 255) is None
    assert escape_time(complex(-1.0, 0.0), 255) is None


def test_escape_time_far_point():
    assert escape_time(complex(10.0, 10.0), 255) == 1


def test_escape_time_zero_limit():
    assert escape_time(complex(10.0, 10.0), 0) is None


def test_render_inside_set_is_black():
    pixels = render((4, 3), complex(-0.1, 0.1), complex(0.1, -0.1))
    assert pixels == bytearray(12)


def test_render_far_outside_is_bright():
    pixels = render((3, 2), complex(10.0, 11.0), complex(11.0, 10.0))
    assert list(pixels) == [254] * 6


def test_render_parallel_size_and_regions():
    inside = render_parallel((5, 9), complex(-0.1, 0.1), complex(0.1, -0.1), threads=4)
    assert inside == bytearray(45)
    outside = render_parallel((5, 9), complex(10.0, 11.0), complex(11.0, 10.0), threads=3)
    assert list(outside) == [254] * 45


def test_render_parallel_length_on_mixed_region():
    pixels = render_parallel((20, 13), complex(-1.2, 0.35), complex(-1.0, 0.2), threads=8)
    assert len(pixels) == 20 * 13


def test_render_parallel_rejects_no_threads():
    with pytest.raises(ValueError):
        render_parallel((2, 2), 0j, 1 + 1j, threads=0)


def test_write_image_round_trip(tmp_path):
    path = tmp_path / "out.png"
    pixels = bytes(range(12))
    write_image(str(path), pixels, (4, 3))
    with Image.open(path) as image:
        assert image.size == (4, 3)
        assert image.mode == "L"
        assert image.tobytes() == pixels


def test_write_image_size_mismatch(tmp_path):
    with pytest.raises(ValueError):
        write_image(str(tmp_path / "bad.png"), b"\x00\x01", (4, 3))


def test_main_writes_png(tmp_path):
    path = tmp_path / "mandel.png"
    assert main([str(path), "16x12", "-1.20,0.35", "-1,0.20"]) == 0
    with Image.open(path) as image:
        assert image.size == (16, 12)


def test_main_usage(capsys):
    assert main(["only", "two"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_bad_dimensions(tmp_path, capsys):
    assert main([str(tmp_path / "x.png"), "16by12", "-1,1", "1,-1"]) == 1
    assert "error parsing image dimensions" in capsys.readouterr().err


def test_main_bad_corner(tmp_path, capsys):
    assert main([str(tmp_path / "x.png"), "16x12", "nope", "1,-1"]) == 1
    assert "error parsing upper left corner point" in capsys.readouterr().err