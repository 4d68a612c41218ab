import io
import struct

import pytest

from dfcommon.image import CIF_OFFSETLIST_SIZE, ImgImage, decode_rle, load_img


def header(x, y, w, h, unknown, size):
    return struct.pack("<5hH", x, y, w, h, unknown, size)


def test_decode_rle_run_and_literal():
    stream = io.BytesIO(bytes([0x81, 7, 0x01, 1, 2]))
    assert decode_rle(stream, 4) == bytes([7, 7, 1, 2])


def test_decode_rle_stops_at_size():
    stream = io.BytesIO(bytes([0x80, 9, 0x80, 5]))
    assert decode_rle(stream, 1) == bytes([9])
    assert stream.tell() == 2


def test_decode_rle_truncated_raises():
    with pytest.raises(ValueError):
        decode_rle(io.BytesIO(bytes([0x03, 1, 2])), 4)


def test_decode_rle_empty_stream_raises():
    with pytest.raises(ValueError):
        decode_rle(io.BytesIO(b""), 1)


def test_read_uncompressed_with_header():
    pixels = bytes(range(6))
    stream = io.BytesIO(header(5, -3, 3, 2, 0, 6) + pixels)
    image = ImgImage()
    image.read(stream)
    assert (image.x_offset, image.y_offset) == (5, -3)
    assert (image.width, image.height) == (3, 2)
    assert image.image_size == 6
    assert not image.is_compressed()
    assert image.data == pixels


def test_read_compressed_when_unknown_is_two():
    stream = io.BytesIO(header(0, 0, 2, 2, 2, 4) + bytes([0x83, 42]))
    image = ImgImage()
    image.read(stream)
    assert image.is_compressed()
    assert image.data == bytes([42]) * 4


def test_read_compressed_when_size_differs():
    stream = io.BytesIO(header(0, 0, 2, 2, 0, 3) + bytes([0x03, 1, 2, 3, 4]))
    image = ImgImage()
    image.read(stream)
    assert image.data == bytes([1, 2, 3, 4])


def test_read_weapon_header_order():
    pixels = bytes([1, 2])
    stream = io.BytesIO(header(2, 1, 10, 20, 0, 2) + pixels)
    image = ImgImage(has_cif_weapon_header=True)
    image.read(stream)
    # Weapon headers store width, height, x offset, y offset.
    assert (image.width, image.height) == (2, 1)
    assert (image.x_offset, image.y_offset) == (10, 20)
    assert image.data == pixels


def test_read_skips_offset_list():
    pixels = bytes([9, 8, 7, 6])
    stream = io.BytesIO(
        header(0, 0, 2, 2, 0, 4) + b"\xff" * CIF_OFFSETLIST_SIZE + pixels
    )
    image = ImgImage(has_offset_list=True)
    image.read(stream)
    assert image.data == pixels


def test_read_headerless_needs_size():
    with pytest.raises(ValueError):
        ImgImage(has_no_header=True).read(io.BytesIO(b"\x00" * 8))


def test_read_headerless_uses_given_dimensions():
    pixels = bytes([3, 4, 5, 6])
    image = ImgImage(has_no_header=True, width=2, height=2, image_size=4)
    image.read(io.BytesIO(pixels))
    assert image.data == pixels


def test_read_truncated_header_raises():
    with pytest.raises(ValueError):
        ImgImage().read(io.BytesIO(b"\x00" * 5))


def test_read_truncated_data_raises():
    stream = io.BytesIO(header(0, 0, 4, 4, 0, 16) + b"\x01" * 10)
    with pytest.raises(ValueError):
        ImgImage().read(stream)


def test_read_none_stream_raises():
    with pytest.raises(ValueError):
        ImgImage().read(None)


def test_destroy_on_read_resets_settings():
    image = ImgImage(destroy_on_read=True, has_no_header=True, width=1, height=1)
    image.read(io.BytesIO(header(0, 0, 1, 1, 0, 1) + b"\x05"))
    assert image.has_no_header is False
    assert image.data == b"\x05"
    assert image.destroy_on_read is True


def test_load_special_headerless_size(tmp_path):
    payload = bytes(i % 256 for i in range(720))
    path = tmp_path / "small.img"
    path.write_bytes(payload)
    image = load_img(path)
    assert image.has_no_header
    assert (image.width, image.height) == (9, 80)
    assert image.data == payload


def test_load_64768_reads_first_64000(tmp_path):
    payload = bytes(i % 251 for i in range(64768))
    path = tmp_path / "pic.img"
    path.write_bytes(payload)
    image = ImgImage()
    image.load(path)
    assert (image.width, image.height) == (320, 200)
    assert image.image_size == 64000
    assert image.data == payload[:64000]


def test_load_regular_file(tmp_path):
    pixels = bytes([10, 20, 30])
    path = tmp_path / "regular.img"
    path.write_bytes(header(1, 2, 3, 1, 0, 3) + pixels)
    image = load_img(path)
    assert image.has_no_header is False
    assert image.data == pixels
    assert (image.x_offset, image.y_offset) == (1, 2)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_img(tmp_path / "absent.img")