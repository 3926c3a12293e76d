from bmp565 import SourcePixelBuffer, convert_to_rgb565


def bgra_image(width, height, color=(0, 0, 0), stride=None):
    """Build a BGRA source buffer filled with one (r, g, b) color."""
    r, g, b = color
    stride = stride or width * 4
    row = bytes([b, g, r, 0xFF]) * width + b"\xAA" * (stride - width * 4)
    return SourcePixelBuffer(width, height, stride, row * height)


def rgb565_row(values, big_endian=False):
    """Single-row RGB565 buffer holding the given pixel values."""
    pixels = [(((v >> 11) & 0x1F) << 3, ((v >> 5) & 0x3F) << 2, (v & 0x1F) << 3) for v in values]
    data = b"".join(bytes([b, g, r, 0xFF]) for r, g, b in pixels)
    return convert_to_rgb565(SourcePixelBuffer.packed(len(values), 1, data), big_endian)
