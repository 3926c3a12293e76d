from dataclasses import dataclass

from .errors import MalformedSourceBuffer

SOURCE_BPP = 4  # B, G, R, A


def rgb565_stride(width: int) -> int:
    """Row size of a 16bpp buffer, rounded up to a 4-byte boundary."""
    return ((width * 16 + 31) // 32) * 4


@dataclass(frozen=True)
class SourcePixelBuffer:
    """Decoded 32bpp image, one B,G,R,A quad per pixel."""

    width: int
    height: int
    stride: int
    data: bytes

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise MalformedSourceBuffer(f"negative size {self.width}x{self.height}")
        if self.stride < self.width * SOURCE_BPP:
            raise MalformedSourceBuffer(
                f"stride {self.stride} < {self.width * SOURCE_BPP} (W={self.width} * 4)")
        if len(self.data) < self.stride * self.height:
            raise MalformedSourceBuffer(
                f"data size {len(self.data)} < {self.stride * self.height} (stride={self.stride}, H={self.height})")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def packed(cls, width: int, height: int, data) -> "SourcePixelBuffer":
        return cls(width, height, width * SOURCE_BPP, data)


@dataclass(frozen=True)
class Rgb565Buffer:
    """16bpp RGB565 image; each pixel is two bytes, high byte first if big_endian."""

    width: int
    height: int
    stride: int
    big_endian: bool
    data: bytes

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise MalformedSourceBuffer(f"negative size {self.width}x{self.height}")
        if self.stride % 4 or self.stride < self.width * 2:
            raise MalformedSourceBuffer(
                f"stride {self.stride} must be a multiple of 4 and >= {self.width * 2}")
        if len(self.data) < self.stride * self.height:
            raise MalformedSourceBuffer(
                f"data size {len(self.data)} < {self.stride * self.height} (stride={self.stride}, H={self.height})")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def endian_label(self) -> str:
        return "BE" if self.big_endian else "LE"

    def pixel(self, x: int, y: int, big_endian=None) -> int:
        """Reassemble the 16-bit value at (x, y)."""
        if big_endian is None:
            big_endian = self.big_endian
        i = y * self.stride + x * 2
        if big_endian:
            return (self.data[i] << 8) | self.data[i + 1]
        return self.data[i] | (self.data[i + 1] << 8)
