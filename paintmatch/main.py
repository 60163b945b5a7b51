from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from paintmatch.src.mix_engine.conversions import (
    InvalidColorFormat,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
)
from paintmatch.src.mix_engine.io import read_image_rgb, sample_hex, write_result_json
from paintmatch.src.mix_engine.palette import PAINT_COLORS
from paintmatch.src.mix_engine.search import MixSearchEngine

log = logging.getLogger("paintmatch")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paintmatch",
        description="Find a practical CMY + white/black paint mix for a target color.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-pass search details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    match = subparsers.add_parser(
        "match",
        help="Find the closest practical mix of the base paints for a color.",
    )
    source = match.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--color", help="Target color as 3- or 6-digit hex, e.g. '#3399cc'."
    )
    source.add_argument(
        "--rgb",
        nargs=3,
        type=int,
        metavar=("R", "G", "B"),
        help="Target color as RGB channels in 0..255.",
    )
    source.add_argument(
        "--hsl",
        nargs=3,
        type=float,
        metavar=("H", "S", "L"),
        help="Target color as hue (degrees), saturation and lightness (percent).",
    )
    source.add_argument(
        "--image", help="Path or URL to an image to pick the target color from."
    )
    match.add_argument("--x", type=int, default=None, help="Pixel column for --image.")
    match.add_argument("--y", type=int, default=None, help="Pixel row for --image.")
    match.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )

    subparsers.add_parser("palette", help="Print the base paint palette.")

    return parser


def _resolve_target(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if args.image is not None:
        if args.x is None or args.y is None:
            parser.error("--image requires --x and --y")
        image_rgb = read_image_rgb(args.image)
        try:
            return sample_hex(image_rgb, args.x, args.y)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        if args.rgb is not None:
            return rgb_to_hex(*args.rgb)
        if args.hsl is not None:
            return rgb_to_hex(*hsl_to_rgb(*args.hsl))
        return normalize_hex(args.color)
    except InvalidColorFormat as exc:
        parser.error(str(exc))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "palette":
        print(json.dumps([paint.to_dict() for paint in PAINT_COLORS], indent=2))
        return

    if args.command == "match":
        target = _resolve_target(args, parser)
        result = MixSearchEngine().run(target)

        if args.out:
            write_result_json(result, args.out)
            log.info("wrote mix for %s to %s", target, Path(args.out))
        else:
            print(json.dumps(result.to_dict(), indent=2))
        return

    parser.error("unknown command")


if __name__ == "__main__":
    main()
