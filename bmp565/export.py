"""One export request: RGB565 buffer -> payload -> rendered output."""

from dataclasses import dataclass
from typing import Union

from .buffers import Rgb565Buffer, SourcePixelBuffer
from .convert import convert_to_rgb565, extract_words, pack_words
from .rle import encode_global, encode_rows
from .serialize import (BINARY, BYTES_PER_LINE, C_ARRAY, FORMATS, HEX_TEXT, WORDS_PER_LINE,
                        render_c_array, render_c_byte_array, render_hex_bytes, render_hex_text)

RLE_OFF = "off"
RLE_ROWS = "rows"
RLE_GLOBAL = "global"
RLE_MODES = (RLE_OFF, RLE_ROWS, RLE_GLOBAL)

EXTENSIONS = {BINARY: "bin", HEX_TEXT: "txt", C_ARRAY: "h"}


@dataclass(frozen=True)
class ExportResult:
    data: Union[bytes, str]
    fmt: str
    rle: str
    big_endian: bool
    width: int
    height: int
    byte_length: int  # size of the payload before rendering

    @property
    def is_text(self) -> bool:
        return self.fmt != BINARY

    def describe(self) -> str:
        kind = "RAW" if self.rle == RLE_OFF else f"RLE {self.rle}"
        return (f"{self.width}x{self.height} {'BE' if self.big_endian else 'LE'} {kind}, "
                f"{self.byte_length} bytes")


def build_payload(buf: Rgb565Buffer, rle: str = RLE_OFF) -> bytes:
    """Raw pixels without row padding, or one of the RLE streams."""
    if rle == RLE_OFF:
        return pack_words(extract_words(buf), buf.big_endian)
    if rle == RLE_ROWS:
        return encode_rows(buf)
    if rle == RLE_GLOBAL:
        return encode_global(buf)
    raise ValueError(f"unknown RLE mode {rle!r} (expected one of {', '.join(RLE_MODES)})")


def export_rgb565(buf: Rgb565Buffer, fmt: str = C_ARRAY, rle: str = RLE_OFF, name: str = "image",
                  words_per_line: int = WORDS_PER_LINE, byte_oriented: bool = False) -> ExportResult:
    if fmt not in FORMATS:
        raise ValueError(f"unknown output format {fmt!r} (expected one of {', '.join(FORMATS)})")
    payload = build_payload(buf, rle)
    is_rle = rle != RLE_OFF
    # RLE fields are little-endian on the wire; raw pixels keep the export byte order.
    little_endian = is_rle or not buf.big_endian

    if fmt == BINARY:
        data = payload
    elif byte_oriented:
        if fmt == HEX_TEXT:
            data = render_hex_bytes(payload, BYTES_PER_LINE)
        else:
            data = render_c_byte_array(name, payload, buf.width, buf.height, is_rle,
                                       buf.endian_label, BYTES_PER_LINE)
    elif fmt == HEX_TEXT:
        data = render_hex_text(payload, little_endian, words_per_line)
    else:
        data = render_c_array(name, payload, buf.width, buf.height, is_rle,
                              buf.endian_label, little_endian, words_per_line)

    return ExportResult(data, fmt, rle, buf.big_endian, buf.width, buf.height, len(payload))


def export_image(src: SourcePixelBuffer, big_endian: bool = False, **kwargs) -> ExportResult:
    """Convert a decoded BGRA image and export it in one go."""
    return export_rgb565(convert_to_rgb565(src, big_endian), **kwargs)


def default_output_name(stem: str, fmt: str = C_ARRAY, rle: str = RLE_OFF, big_endian: bool = False) -> str:
    return (f"{stem}_rgb565_{'raw' if rle == RLE_OFF else 'rle'}_{'be' if big_endian else 'le'}"
            f".{EXTENSIONS[fmt]}")
