"""Command-line interface for halftone.

Builds a sample image, halftones it, and depicts the result in the
terminal (TUI), prints it (headless), or reports a JSON summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from halftone.config import SETTINGS, configure_logging
from halftone.core.image import GrayImage
from halftone.core.processor import Method, Settings, ink, process
from halftone.core.samples import SampleName, make_sample
from halftone.utils.terminal import canvas_size

logger = logging.getLogger(__name__)


def _add_image_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--sample",
        choices=[s.value for s in SampleName],
        default="gradient",
        help="Sample image to start from (default: gradient).",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Image width in pixels (default: terminal width).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Image height in pixels (default: twice the terminal height).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=SETTINGS.seed,
        help="Random seed for dithering (default: $HALFTONE_SEED or random).",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=SETTINGS.duration,
        help="Seconds to show each image, 0 to wait for q (default: %(default)s).",
    )
    parser.add_argument(
        "--no-tui",
        action="store_true",
        help="Print to the terminal instead of opening the viewer.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="halftone",
        description="Halftone grayscale images by thresholding, dithering or error diffusion.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- show subcommand ---
    show = subparsers.add_parser(
        "show",
        help="Halftone a sample image and show it.",
    )
    _add_image_arguments(show)
    show.add_argument(
        "--method",
        choices=[m.value for m in Method],
        default="none",
        help="Halftoning method (default: none).",
    )
    show.add_argument(
        "--threshold",
        type=float,
        default=0.5,
        help="Threshold fraction for --method threshold (default: 0.5).",
    )
    show.add_argument(
        "--invert",
        action="store_true",
        help="Invert gray levels before halftoning.",
    )
    show.add_argument(
        "--json",
        action="store_true",
        help="Output a JSON summary instead of the image.",
    )

    # --- demo subcommand ---
    demo = subparsers.add_parser(
        "demo",
        help="Show the original, thresholded, dithered and error-diffused versions.",
    )
    _add_image_arguments(demo)

    return parser


def _json_error(message: str, code: str) -> None:
    """Print JSON error to stderr and exit with code 1."""
    err = {"status": "error", "error": message, "code": code}
    print(json.dumps(err), file=sys.stderr)
    sys.exit(1)


def _load_sample(args: argparse.Namespace) -> GrayImage:
    width, height = canvas_size(args.width, args.height)
    return make_sample(args.sample, width, height)


def _show(image: GrayImage, args: argparse.Namespace, title: str) -> None:
    if args.no_tui:
        from halftone.app import print_image

        print_image(image)
    else:
        from halftone.app import depict

        depict(image, duration=args.duration or None, title=title)


def _run_show(args: argparse.Namespace) -> None:
    settings = Settings(
        method=Method(args.method),
        threshold=args.threshold,
        invert=args.invert,
        seed=args.seed,
    )

    try:
        image = process(_load_sample(args), settings)
    except ValueError as e:
        if args.json:
            _json_error(str(e), "INVALID_IMAGE")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        result = {
            "status": "success",
            "sample": args.sample,
            "method": settings.method.value,
            "invert": settings.invert,
            "width": image.width,
            "height": image.height,
            "ink": round(ink(image), 4),
        }
        print(json.dumps(result, indent=2))
        return

    try:
        _show(image, args, title=f"{args.sample} ({settings.method.value})")
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run_demo(args: argparse.Namespace) -> None:
    """Original, thresholded at 75%, dithered, then error-diffused."""
    steps = [
        ("original", Settings()),
        ("threshold 0.75", Settings(method=Method.THRESHOLD, threshold=0.75)),
        ("dither", Settings(method=Method.DITHER, seed=args.seed)),
        ("error diffusion", Settings(method=Method.ERROR_DIFFUSE)),
    ]
    try:
        source = _load_sample(args)
        for title, settings in steps:
            logger.info("demo step: %s", title)
            _show(process(source, settings), args, title=title)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Routing:
      halftone show [opts]  → halftone a sample and show it
      halftone demo [opts]  → show every method in turn
      halftone              → help
    """
    configure_logging()
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "show":
        _run_show(args)
    elif args.command == "demo":
        _run_demo(args)
    else:
        parser.print_help()
