"""RGB888 -> RGB565 conversion.

Source pixels are B,G,R,A quads (the layout a 32bpp BMP decodes to);
alpha is dropped, channels are truncated to 5/6/5 bits.
"""

import struct
from pathlib import Path

from PIL import Image

from .buffers import SOURCE_BPP, Rgb565Buffer, SourcePixelBuffer, rgb565_stride


def pack_rgb565(r: int, g: int, b: int) -> int:
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


def convert_to_rgb565(src: SourcePixelBuffer, big_endian: bool = False) -> Rgb565Buffer:
    """Convert a BGRA buffer to a 4-byte aligned RGB565 buffer in the given byte order."""
    w, h = src.width, src.height
    stride = rgb565_stride(w)
    fmt = ">H" if big_endian else "<H"
    out = bytearray(stride * h)
    data = src.data
    for y in range(h):
        si = y * src.stride
        di = y * stride
        for x in range(w):
            b, g, r = data[si], data[si + 1], data[si + 2]
            struct.pack_into(fmt, out, di, pack_rgb565(r, g, b))
            si += SOURCE_BPP
            di += 2
    return Rgb565Buffer(w, h, stride, big_endian, bytes(out))


def extract_words(buf: Rgb565Buffer, big_endian=None) -> list:
    """Flatten a strided RGB565 buffer to row-major pixel values, padding removed.

    big_endian defaults to the buffer's own byte order. Passing a value that
    does not match it yields byte-swapped pixels; that is not checked.
    """
    return [buf.pixel(x, y, big_endian) for y in range(buf.height) for x in range(buf.width)]


def pack_words(words, big_endian: bool = False) -> bytes:
    """Tightly packed bytes for a word sequence (no row padding)."""
    fmt = ">%dH" if big_endian else "<%dH"
    return struct.pack(fmt % len(words), *words)


def source_from_image(img: Image.Image) -> SourcePixelBuffer:
    """Decode a Pillow image into a tightly packed BGRA buffer."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    r, g, b, a = img.split()
    w, h = img.size
    return SourcePixelBuffer.packed(w, h, Image.merge("RGBA", (b, g, r, a)).tobytes())


def load_image(path) -> SourcePixelBuffer:
    with Image.open(Path(path)) as img:
        return source_from_image(img)
