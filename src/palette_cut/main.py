from __future__ import annotations

import argparse
import json
from pathlib import Path

from .colors import pack_rgb, rgb_to_hex
from .io import write_result_json
from .log import configure_logging
from .pipeline import PaletteExtractor
from .settings import ExtractorSettings


def _add_common_arguments(
    parser: argparse.ArgumentParser, settings: ExtractorSettings
) -> None:
    parser.add_argument(
        "--image", required=True, help="Path or URL to the input image."
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=settings.quality,
        help="Sample every Nth pixel. 1 is the highest quality, larger is faster.",
    )
    parser.add_argument(
        "--keep-white",
        action="store_true",
        default=not settings.ignore_white,
        help="Keep near-white pixels instead of filtering them out.",
    )


def _build_parser(settings: ExtractorSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-cut",
        description="Median cut palette extraction for raster images.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level for messages written to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    palette = subparsers.add_parser(
        "palette", help="Extract a palette of representative colors."
    )
    _add_common_arguments(palette, settings)
    palette.add_argument(
        "--count",
        type=int,
        default=settings.color_count,
        help="Maximum number of colors to return (2-256).",
    )
    palette.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )

    color = subparsers.add_parser("color", help="Print the dominant color.")
    _add_common_arguments(color, settings)

    return parser


def main(argv: list[str] | None = None) -> None:
    settings = ExtractorSettings.from_env()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    extractor = PaletteExtractor(
        quality=args.quality,
        ignore_white=not args.keep_white,
        request_timeout=settings.request_timeout,
    )

    if args.command == "palette":
        result = extractor.run(args.image, color_count=args.count)
        if args.out:
            write_result_json(result, Path(args.out))
        else:
            print(json.dumps(result.to_dict(), indent=2))
        return

    if args.command == "color":
        rgb = extractor.dominant_color(args.image)
        payload = {"hex": rgb_to_hex(rgb), "rgb": list(rgb), "packed": pack_rgb(rgb)}
        print(json.dumps(payload, indent=2))
        return

    parser.error("unknown command")


if __name__ == "__main__":
    main()
