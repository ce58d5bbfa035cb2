from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..bmp import BitmapError, load_image, read_image_info, save_image
from ..settings import AppSettings, CodecSettings
from ..transform import ALGORITHMS, sort_columns

logger = logging.getLogger(__name__)

USAGE = (
    "usage: imgsort <input file> [<output file>]\n"
    "<input file> has to be a file path to an uncompressed 24 bit BMP image file"
)


def pixels_per_meter(value: str) -> int:
    resolution = int(value)
    if not -(2**31) <= resolution < 2**31:
        raise argparse.ArgumentTypeError(f"{value} does not fit a signed 32 bit header field")
    return resolution


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="imgsort",
        description="Sort the pixels of every column of a 24 bit BMP image by brightness.",
    )
    parser.add_argument("input", help="Uncompressed 24 bit BMP file to read")
    parser.add_argument("output", nargs="?", default=defaults.output_path, help="Output BMP path (default: %(default)s)")
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default=defaults.algorithm,
        help="Column sort implementation (default: %(default)s)",
    )
    parser.add_argument(
        "--resolution",
        nargs=2,
        type=pixels_per_meter,
        metavar=("HORZ", "VERT"),
        help="Resolution written to the output header, in pixels per meter",
    )
    parser.add_argument("--no-atomic", action="store_true", help="Write the output file in place")
    parser.add_argument("--info", action="store_true", help="Print the input headers and exit")
    parser.add_argument("--preview", action="store_true", help="Open the sorted image in the system viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.algorithm not in ALGORITHMS:
        parser.error(f"unknown sort algorithm '{args.algorithm}' (choose from {', '.join(sorted(ALGORITHMS))})")
    return args


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_info(path: str) -> int:
    file_header, info_header = read_image_info(path)
    print(f"file_size: {file_header.file_size}")
    print(f"data_offset: {file_header.data_offset}")
    print(f"width: {info_header.width}")
    print(f"height: {info_header.height}")
    print(f"image_size: {info_header.image_size}")
    print(f"resolution: {info_header.res_horz}x{info_header.res_vert}")
    return 0


def build_codec_settings(args: argparse.Namespace) -> CodecSettings:
    settings = CodecSettings(atomic=not args.no_atomic)
    if args.resolution:
        settings.resolution_horz, settings.resolution_vert = args.resolution
    return settings


def preview(buffer) -> None:
    from ..rendering import buffer_to_image

    buffer_to_image(buffer).show()


def run(args: argparse.Namespace) -> int:
    if args.info:
        return print_info(args.input)
    image = load_image(args.input)
    logger.info("sorting %dx%d image with %s", image.width, image.height, args.algorithm)
    sorted_image = sort_columns(image, args.algorithm)
    save_image(args.output, sorted_image, build_codec_settings(args))
    logger.info("wrote %s", args.output)
    if args.preview:
        preview(sorted_image)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE)
        return 0
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except BitmapError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
