from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from ..config import DEFAULT_AGENT_URL, DEFAULT_HEIGHT, DEFAULT_WIDTH, DisplayConfig
from ..push_job import PushJobBuilder
from ..transport import HttpTransport


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="impbadge: push a 1-bit image to an Electric Imp e-paper badge."
    )
    parser.add_argument("path", help="Image to send (.png/.jpg/.gif/.bmp)")
    parser.add_argument("--agent-url", default=DEFAULT_AGENT_URL, help="Agent image endpoint")
    parser.add_argument("--fit", action="store_true", help="Scale and pad the image to the canvas")
    parser.add_argument("--no-rotate", action="store_true", help="Skip the 180 degree rotation")
    parser.add_argument("--invert", action="store_true", help="Send white pixels as set bits")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--output", metavar="FILE", help="Also write the packed bitmap to FILE")
    parser.add_argument("--preview", metavar="FILE", help="Save the processed image as PNG")
    parser.add_argument("--dry-run", action="store_true", help="Build the bitmap but do not send it")
    parser.add_argument(
        "-v",
        action="count",
        default=0,
        help="Increase verbosity",
        dest="verbosity",
    )
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="{0}:%(levelname)-8s %(message)s".format(os.path.basename(sys.argv[0])),
    )
    if verbosity >= 2:
        logging.getLogger().setLevel(logging.DEBUG)
    elif verbosity >= 1:
        logging.getLogger().setLevel(logging.INFO)


def build_config(args: argparse.Namespace) -> DisplayConfig:
    return DisplayConfig(
        width=args.width,
        height=args.height,
        agent_url=args.agent_url,
        fit_to_canvas=args.fit,
        rotate=not args.no_rotate,
        invert=args.invert,
    )


def push(args: argparse.Namespace) -> int:
    builder = PushJobBuilder(build_config(args))
    img = builder.load(args.path)
    if args.preview:
        img.save(args.preview, format="PNG")
    data = builder.build_from_image(img)
    if args.output:
        with open(args.output, "wb") as handle:
            handle.write(data)
    if args.dry_run:
        return 0
    HttpTransport(builder.config.agent_url).send(data)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbosity)
    try:
        return push(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
