import pytest

from bmp565 import (BINARY, C_ARRAY, HEX_TEXT, RLE_GLOBAL, RLE_OFF, RLE_ROWS, convert_to_rgb565,
                    export_image, export_rgb565)
from bmp565.export import build_payload, default_output_name

from .conftest import bgra_image

RED = (255, 0, 0)


@pytest.mark.parametrize("big_endian,expected", [(False, b"\x00\xF8"), (True, b"\xF8\x00")])
def test_raw_binary_drops_row_padding(big_endian, expected):
    result = export_image(bgra_image(3, 2, RED), big_endian=big_endian, fmt=BINARY)
    assert result.data == expected * 6
    assert result.byte_length == 12
    assert not result.is_text


@pytest.mark.parametrize("big_endian", [False, True])
def test_raw_hex_words_are_pixel_values(big_endian):
    result = export_image(bgra_image(3, 1, RED), big_endian=big_endian, fmt=HEX_TEXT)
    assert result.data == "0xF800, 0xF800, 0xF800"


def test_rle_hex_words_read_little_endian():
    # fields are little-endian on the wire, so the words read back as numbers
    result = export_image(bgra_image(3, 2, RED), big_endian=True, fmt=HEX_TEXT, rle=RLE_ROWS)
    assert result.data == "0x0003, 0x0002, 0x0003, 0xF800, 0x0000, 0x0003, 0xF800, 0x0000"
    assert result.byte_length == 16


def test_global_rle_c_array():
    result = export_image(bgra_image(4, 4, RED), fmt=C_ARRAY, rle=RLE_GLOBAL, name="splash")
    assert "#define IMG_FORMAT  RLE" in result.data
    assert "#define IMG_WORDS  2" in result.data
    assert "const unsigned short splash[IMG_WORDS] = {\n  0x0010, 0xF800\n};" in result.data


def test_raw_c_array_labels_endianness():
    result = export_image(bgra_image(2, 2, RED), big_endian=True, fmt=C_ARRAY, name="logo")
    assert "#define IMG_ENDIAN  BE" in result.data
    assert "#define IMG_PIXELS  4" in result.data
    assert "#define IMG_WIDTH   2" in result.data


def test_byte_oriented_text():
    result = export_image(bgra_image(1, 1, RED), big_endian=True, fmt=HEX_TEXT, byte_oriented=True)
    assert result.data == "0xF8, 0x00"


def test_payload_modes():
    buf = convert_to_rgb565(bgra_image(2, 2, RED))
    assert len(build_payload(buf, RLE_OFF)) == 8
    assert len(build_payload(buf, RLE_ROWS)) == 4 + 2 * 6
    assert len(build_payload(buf, RLE_GLOBAL)) == 4


def test_unknown_options():
    buf = convert_to_rgb565(bgra_image(1, 1))
    with pytest.raises(ValueError):
        export_rgb565(buf, rle="zlib")
    with pytest.raises(ValueError):
        export_rgb565(buf, fmt="png")


def test_describe():
    result = export_image(bgra_image(3, 2, RED), big_endian=True, fmt=BINARY, rle=RLE_ROWS)
    assert result.describe() == "3x2 BE RLE rows, 16 bytes"


@pytest.mark.parametrize("fmt,rle,big_endian,name", [
    (C_ARRAY, RLE_OFF, False, "logo_rgb565_raw_le.h"),
    (HEX_TEXT, RLE_ROWS, True, "logo_rgb565_rle_be.txt"),
    (BINARY, RLE_GLOBAL, False, "logo_rgb565_rle_le.bin"),
])
def test_default_output_name(fmt, rle, big_endian, name):
    assert default_output_name("logo", fmt, rle, big_endian) == name


@pytest.mark.parametrize("fmt,kind", [(BINARY, bytes), (HEX_TEXT, str), (C_ARRAY, str)])
def test_result_data_type_follows_format(fmt, kind):
    result = export_image(bgra_image(2, 1, RED), fmt=fmt)
    assert type(result.data) is kind
    assert result.is_text == (kind is str)
