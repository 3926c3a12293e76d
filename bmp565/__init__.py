from .buffers import Rgb565Buffer, SourcePixelBuffer, rgb565_stride
from .convert import convert_to_rgb565, extract_words, load_image, pack_rgb565, pack_words, source_from_image
from .errors import Bmp565Error, InvalidPayload, MalformedSourceBuffer
from .export import RLE_GLOBAL, RLE_OFF, RLE_ROWS, ExportResult, export_image, export_rgb565
from .rle import encode_global, encode_rows
from .serialize import (BINARY, C_ARRAY, HEX_TEXT, render_c_array, render_hex_text,
                        safe_c_identifier)

__version__ = "0.1.0"
