"""CLI for creating a rolling shutter image from a numbered frame sequence."""

import argparse
import logging
import sys
from pathlib import Path

from rollshutter import __version__
from rollshutter.core import ShutterConfig, RollingShutterError
from rollshutter.generators import ShutterGenerator

logger = logging.getLogger("rollshutter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rollshutter",
        description="Creates a rolling shutter simulation of a set of frames.",
    )
    parser.add_argument(
        "mask", nargs="?",
        help="File mask for input, e.g. frames/%%03d.png. Only one sequential placeholder "
             "of the form %%3d or %%03d is supported.",
    )
    parser.add_argument("-o", "--output", help="Output filename; the format follows the extension")
    parser.add_argument(
        "-d", "--direction",
        help="Cardinal direction the shutter starts from: N, S, W or E (or 0-3, or a name "
             "such as top-to-bottom). Default: N",
    )
    parser.add_argument("-s", "--start", type=int, help="First frame index. Default: 0")
    parser.add_argument("-w", "--workers", type=int, help="Number of decode threads. Default: 1")
    parser.add_argument("--backend", choices=["pil", "cv2"], help="Image codec backend. Default: pil")
    parser.add_argument("--mode", help="Convert frames to this Pillow mode before compositing, e.g. RGB")
    parser.add_argument("--map", dest="map_path", type=Path, help="Also save the scanline map (.npy)")
    parser.add_argument("-c", "--config", type=Path, help="YAML file with default settings")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress and info output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = ShutterConfig.from_yaml(args.config) if args.config else ShutterConfig()
    except RollingShutterError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    overrides = {
        "template": args.mask,
        "output": args.output,
        "direction": args.direction,
        "start": args.start,
        "workers": args.workers,
        "backend": args.backend,
        "mode": args.mode,
        "map_path": args.map_path,
    }
    merged = cfg.to_dict()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    if args.quiet:
        merged["progress"] = False
    cfg = ShutterConfig.from_dict(merged)

    if not cfg.template:
        parser.error("a file mask is required (positional argument or 'template' in --config)")
    if not cfg.output:
        parser.error("an output path is required (-o/--output or 'output' in --config)")

    try:
        result = ShutterGenerator(cfg).generate()
    except RollingShutterError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        H, W = result["shape"][:2]
        print(f"Saved {result['output']} ({W}x{H}) from {result['frames']} frames, {result['direction']}")
        if result["map"] is not None:
            print(f"Scanline map: {result['map']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
