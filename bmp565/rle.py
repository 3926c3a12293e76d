"""Run-length coding of RGB565 pixel streams.

Row-scoped stream:  u16 W | u16 H | per row: {u16 run, u16 value}* u16 0
Global stream:      {u16 run, u16 value}*

Stream fields are always little-endian. The big_endian argument only
selects how pixel values are read back out of the source buffer.
"""

import struct

from .buffers import Rgb565Buffer
from .errors import InvalidPayload

MAX_RUN = 0xFFFF
ROW_END = 0x0000

_TOKEN = struct.Struct("<HH")
_WORD = struct.Struct("<H")


def encode_rows(buf: Rgb565Buffer, big_endian=None) -> bytes:
    """Encode one row at a time; runs never cross a row boundary."""
    w, h = buf.width, buf.height
    # header fields are truncated to 16 bits; rows are encoded in full
    out = bytearray(_TOKEN.pack(w & 0xFFFF, h & 0xFFFF))
    for y in range(h):
        x = 0
        while x < w:
            value = buf.pixel(x, y, big_endian)
            run = 1
            while x + run < w and run < MAX_RUN:
                if buf.pixel(x + run, y, big_endian) != value:
                    break
                run += 1
            out += _TOKEN.pack(run, value)
            x += run
        out += _WORD.pack(ROW_END)
    return bytes(out)


def encode_global(buf: Rgb565Buffer, big_endian=None) -> bytes:
    """Encode the whole image as one pixel stream, ignoring row boundaries."""
    out = bytearray()
    pending = False
    prev = 0
    run = 0
    for y in range(buf.height):
        for x in range(buf.width):
            value = buf.pixel(x, y, big_endian)
            if not pending:
                prev, run, pending = value, 1, True
            elif value == prev and run < MAX_RUN:
                run += 1
            else:
                out += _TOKEN.pack(run, prev)
                prev, run = value, 1
    if pending:
        out += _TOKEN.pack(run, prev)
    return bytes(out)


# Decoders are only used to validate encoder output; nothing in the export
# path produces or consumes their results.

def iter_tokens(payload: bytes):
    if len(payload) % _TOKEN.size:
        raise InvalidPayload(f"global RLE payload size {len(payload)} is not a multiple of 4")
    return _TOKEN.iter_unpack(payload)


def decode_global(payload: bytes) -> list:
    pixels = []
    for run, value in iter_tokens(payload):
        if run == 0:
            raise InvalidPayload("zero-length run in global RLE payload")
        pixels.extend([value] * run)
    return pixels


def decode_rows(payload: bytes):
    """Return (width, height, rows) where rows is a list of per-row pixel lists."""
    if len(payload) < _TOKEN.size:
        raise InvalidPayload("row RLE payload shorter than its header")
    w, h = _TOKEN.unpack_from(payload, 0)
    pos = _TOKEN.size
    rows = []
    for y in range(h):
        row = []
        while True:
            if pos + _WORD.size > len(payload):
                raise InvalidPayload(f"row {y}: payload truncated at byte {pos}")
            (run,) = _WORD.unpack_from(payload, pos)
            pos += _WORD.size
            if run == ROW_END:
                break
            if pos + _WORD.size > len(payload):
                raise InvalidPayload(f"row {y}: run without value at byte {pos}")
            (value,) = _WORD.unpack_from(payload, pos)
            pos += _WORD.size
            row.extend([value] * run)
        if len(row) != w:
            raise InvalidPayload(f"row {y}: decoded {len(row)} pixels, expected {w}")
        rows.append(row)
    if pos != len(payload):
        raise InvalidPayload(f"{len(payload) - pos} trailing bytes after {h} rows")
    return w, h, rows
