"""Render pixel or RLE payloads as binary, hex text or C arrays."""

import re
import struct

from .errors import InvalidPayload

BINARY = "bin"
HEX_TEXT = "hex"
C_ARRAY = "c"
FORMATS = (BINARY, HEX_TEXT, C_ARRAY)

WORDS_PER_LINE = 12
BYTES_PER_LINE = 16

_SUFFIX_FORMATS = {
    ".h": C_ARRAY,
    ".c": C_ARRAY,
    ".txt": HEX_TEXT,
    ".csv": HEX_TEXT,
}

_NOT_IDENT = re.compile(r"[^0-9A-Za-z_]")


def format_for_suffix(suffix: str) -> str:
    """.h/.c -> C array, .txt/.csv -> hex text, anything else -> binary."""
    return _SUFFIX_FORMATS.get(suffix.lower(), BINARY)


def safe_c_identifier(name: str) -> str:
    ident = _NOT_IDENT.sub("_", name)
    if not name or not (name[0].isalpha() or name[0] == "_"):
        ident = "_" + ident
    return ident


def bytes_to_words(data: bytes, little_endian: bool = True) -> list:
    if len(data) % 2:
        raise InvalidPayload(f"payload size {len(data)} is odd, cannot split into 16-bit words")
    fmt = "<%dH" if little_endian else ">%dH"
    return list(struct.unpack(fmt % (len(data) // 2), data))


def _join_hex(values, digits: int, per_line: int, indent: str = "") -> str:
    parts = []
    last = len(values) - 1
    for i, v in enumerate(values):
        if indent and i % per_line == 0:
            parts.append(indent)
        parts.append(f"0x{v:0{digits}X}")
        if i != last:
            parts.append(", ")
        if (i + 1) % per_line == 0:
            parts.append("\n")
    return "".join(parts)


def render_hex_text(data: bytes, little_endian: bool = True, words_per_line: int = WORDS_PER_LINE) -> str:
    """Comma separated 0xXXXX words, a line break after every words_per_line words."""
    return _join_hex(bytes_to_words(data, little_endian), 4, words_per_line)


def render_c_array(name: str, data: bytes, width: int, height: int, is_rle: bool = False,
                   endian_label: str = "LE", little_endian: bool = True,
                   words_per_line: int = WORDS_PER_LINE) -> str:
    """Self-contained C source declaring data as an unsigned short array."""
    words = bytes_to_words(data, little_endian)
    count = "IMG_WORDS" if is_rle else "IMG_PIXELS"
    lines = [
        "/* Auto-generated from RGB565 data */",
        "#include <stdint.h>",
        "",
        f"#define IMG_WIDTH   {width}",
        f"#define IMG_HEIGHT  {height}",
        f"#define IMG_FORMAT  {'RLE' if is_rle else 'RAW'}  /* payload format */",
        f"#define IMG_ENDIAN  {endian_label}   /* BE or LE (source) */",
        f"#define {count}  {len(words)}  /* uint16 elements */",
        "",
        f"const unsigned short {safe_c_identifier(name)}[{count}] = {{",
    ]
    body = _join_hex(words, 4, words_per_line, indent="  ")
    if words and len(words) % words_per_line:
        body += "\n"
    return "\n".join(lines) + "\n" + body + "};\n"


def render_hex_bytes(data: bytes, bytes_per_line: int = BYTES_PER_LINE) -> str:
    return _join_hex(data, 2, bytes_per_line)


def render_c_byte_array(name: str, data: bytes, width: int, height: int, is_rle: bool = False,
                        endian_label: str = "LE", bytes_per_line: int = BYTES_PER_LINE) -> str:
    lines = [
        "/* Auto-generated from RGB565 data */",
        "#include <stdint.h>",
        "",
        f"#define IMG_WIDTH   {width}",
        f"#define IMG_HEIGHT  {height}",
        f"#define IMG_FORMAT  {'RLE' if is_rle else 'RAW'}  /* payload format */",
        f"#define IMG_ENDIAN  {endian_label}   /* BE or LE */",
        f"#define IMG_SIZE    {len(data)}  /* bytes */",
        "",
        f"const uint8_t {safe_c_identifier(name)}[] = {{",
    ]
    body = _join_hex(data, 2, bytes_per_line, indent="  ")
    if data and len(data) % bytes_per_line:
        body += "\n"
    return "\n".join(lines) + "\n" + body + "};\n"
