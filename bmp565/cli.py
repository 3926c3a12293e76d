import argparse
import pathlib
import sys

from PIL import UnidentifiedImageError

from .convert import load_image
from .errors import Bmp565Error
from .export import RLE_MODES, RLE_OFF, default_output_name, export_image
from .serialize import C_ARRAY, FORMATS, WORDS_PER_LINE, format_for_suffix

# bmp565 logo.bmp -b --rle rows -o logo.h


def output_path(src: pathlib.Path, args) -> pathlib.Path:
    if args.output:
        return pathlib.Path(args.output)
    return src.with_name(default_output_name(src.stem, args.format or C_ARRAY, args.rle, args.big_endian))


def export_one(src: pathlib.Path, args) -> bool:
    out = output_path(src, args)
    if out.exists() and not args.overwrite:
        print(f"skip: {out.name} already exists (use --overwrite to replace)")
        return True

    fmt = args.format or format_for_suffix(out.suffix)
    result = export_image(
        load_image(src),
        big_endian=args.big_endian,
        fmt=fmt,
        rle=args.rle,
        name=args.name or out.stem,
        words_per_line=args.words_per_line,
        byte_oriented=args.bytes,
    )
    # rendered in full before anything is written, so a failure leaves no partial file
    if result.is_text:
        out.write_text(result.data, encoding="ascii")
    else:
        out.write_bytes(result.data)
    print(f"ok: {src.name} -> {out.name}  {result.describe()}")
    return True


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bmp565",
        description="Convert images to RGB565 raw/RLE data as binary, hex text or a C array")
    ap.add_argument("images", nargs="+", type=pathlib.Path, help="input images (BMP or anything Pillow opens)")
    ap.add_argument("-o", "--output", help="output file (single input only); format follows its suffix")
    ap.add_argument("-b", "--big-endian", action="store_true", help="high byte first (default little-endian)")
    ap.add_argument("--rle", choices=RLE_MODES, default=RLE_OFF,
                    help="run-length encode per row or across the whole image (default off)")
    ap.add_argument("-f", "--format", choices=FORMATS,
                    help="bin, hex or c (default: from --output suffix, else c)")
    ap.add_argument("-w", "--words-per-line", type=int, default=WORDS_PER_LINE,
                    help=f"hex values per text line (default {WORDS_PER_LINE})")
    ap.add_argument("-n", "--name", help="C array identifier (default: output file stem)")
    ap.add_argument("--bytes", action="store_true", help="render text output as 8-bit values instead of 16-bit words")
    ap.add_argument("--overwrite", action="store_true", help="overwrite existing output files")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.words_per_line < 1:
        print("words per line must be >= 1")
        sys.exit(2)
    if args.output and len(args.images) > 1:
        print("--output needs exactly one input image")
        sys.exit(2)

    ok = 0
    for src in args.images:
        try:
            if export_one(src, args):
                ok += 1
        except (Bmp565Error, UnidentifiedImageError, OSError) as e:
            print(f"fail: {src.name}: {e}")

    print(f"done: {ok}/{len(args.images)} files processed.")
    sys.exit(0 if ok == len(args.images) else 1)


if __name__ == "__main__":
    main()
