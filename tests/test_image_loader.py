import struct

import pytest

from almondshell.image_loader import ImageData, ImageFormatError, load_bmp, load_image


def _bmp(width, height, bpp, rows, magic=b"BM"):
    pixel_data = b"".join(rows)
    header = struct.pack(
        "<2sIHHIIiiHHIIiiII",
        magic,
        54 + len(pixel_data),
        0,
        0,
        54,
        40,
        width,
        height,
        1,
        bpp,
        0,
        len(pixel_data),
        0,
        0,
        0,
        0,
    )
    return header + pixel_data


def test_24_bit_image_is_flipped_and_gains_alpha(tmp_path):
    bottom = bytes([1, 2, 3, 4, 5, 6]) + b"\x00\x00"
    top = bytes([7, 8, 9, 10, 11, 12]) + b"\x00\x00"
    path = tmp_path / "img.bmp"
    path.write_bytes(_bmp(2, 2, 24, [bottom, top]))

    image = load_image(path)

    assert (image.width, image.height, image.channels) == (2, 2, 4)
    assert image.pixels == bytes(
        [7, 8, 9, 255, 10, 11, 12, 255, 1, 2, 3, 255, 4, 5, 6, 255]
    )


def test_32_bit_image_keeps_pixels(tmp_path):
    bottom = bytes([1, 2, 3, 4])
    top = bytes([5, 6, 7, 8])
    path = tmp_path / "img.bmp"
    path.write_bytes(_bmp(1, 2, 32, [bottom, top]))

    image = load_bmp(path)

    assert image == ImageData(1, 2, 4, top + bottom)


def test_pixel_count_matches_dimensions(tmp_path):
    row = bytes(range(9)) + b"\x00\x00\x00"
    path = tmp_path / "wide.bmp"
    path.write_bytes(_bmp(3, 3, 24, [row, row, row]))

    image = load_bmp(path)

    assert len(image.pixels) == image.width * image.height * image.channels
    assert image.pixels[3::4] == b"\xff" * 9


def test_bad_magic_rejected(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(_bmp(1, 1, 32, [b"\x00" * 4], magic=b"XX"))
    with pytest.raises(ImageFormatError):
        load_bmp(path)


def test_short_header_rejected(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(b"BM123")
    with pytest.raises(ImageFormatError):
        load_bmp(path)


def test_unsupported_bit_depth(tmp_path):
    path = tmp_path / "gray.bmp"
    path.write_bytes(_bmp(4, 1, 8, [b"\x00" * 4]))
    with pytest.raises(ImageFormatError):
        load_bmp(path)


def test_truncated_pixel_data(tmp_path):
    path = tmp_path / "cut.bmp"
    path.write_bytes(_bmp(2, 2, 32, [b"\x00" * 8]))
    with pytest.raises(ImageFormatError):
        load_bmp(path)


def test_png_and_unknown_extensions_rejected(tmp_path):
    with pytest.raises(ImageFormatError):
        load_image(tmp_path / "picture.png")
    with pytest.raises(ImageFormatError):
        load_image(tmp_path / "picture.gif")


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "missing.bmp")