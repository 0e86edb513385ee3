"""
Command line interface for camera files.

Usage:
    python -m vision_camera show cam0.yaml
    python -m vision_camera convert cam0.yaml cam0.h5
    python -m vision_camera validate cam0.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from vision_camera.core.types import CameraModelError
from vision_camera.io.camera_file import CameraFile
from vision_camera.io.codec import decode
from vision_camera.io.formats.yaml_format import YAMLFormat
from vision_camera.utils.logging import get_logger, setup_logging

logger = get_logger("cli")


def _show(args: argparse.Namespace) -> int:
    camera = CameraFile.load(args.input)
    print(YAMLFormat.to_string(camera), end="")
    return 0


def _convert(args: argparse.Namespace) -> int:
    camera = CameraFile.load(args.input)
    output = CameraFile.save(args.output, camera)
    print(output)
    return 0


def _validate(args: argparse.Namespace) -> int:
    # Read the raw node so the decode status can be reported
    node = CameraFile.read_node(args.input)
    result = decode(node)
    if result.ok:
        print(f"{args.input}: ok ({result.camera.type.value})")
        return 0
    print(f"{args.input}: {result.status.value}: {result.message}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vision-camera",
        description="Inspect and convert camera model files.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log file operations (-v) and decode diagnostics (-vv)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print a camera file as YAML")
    show.add_argument("input")
    show.set_defaults(func=_show)

    convert = subparsers.add_parser("convert", help="Convert between file formats")
    convert.add_argument("input")
    convert.add_argument("output")
    convert.set_defaults(func=_convert)

    validate = subparsers.add_parser(
        "validate", help="Check a camera file and report why it does not decode"
    )
    validate.add_argument("input")
    validate.set_defaults(func=_validate)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(verbosity=args.verbose, log_file=args.log_file)

    try:
        return args.func(args)
    except CameraModelError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
