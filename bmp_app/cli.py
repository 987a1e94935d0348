import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConversionConfig
from .converter import convert_batch

USAGE = "Usage: inverse_bmp [--debug] [img1.bmp]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inverse_bmp",
        description="Invert the colors of 24-bit bitmap images, writing INV_<name> copies.",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Print the decoded header of each file.")
    parser.add_argument("--config", help="JSON file with conversion settings.")
    parser.add_argument("--prefix", help="Output file prefix (default: INV_).")
    parser.add_argument(
        "--basename",
        dest="naming",
        action="store_const",
        const="basename",
        help="Put the prefix in front of the file name instead of the whole path.",
    )
    parser.add_argument(
        "--aligned-stride",
        dest="stride",
        action="store_const",
        const="aligned",
        help="Pad rows to 4 bytes like standard BMP files instead of a fixed 2 bytes.",
    )
    parser.add_argument("--strict", action="store_true", default=None, help="Also reject non 24-bit or compressed files.")
    parser.add_argument(
        "--cleanup-partial",
        action="store_true",
        default=None,
        help="Delete the output file if inverting the pixels fails.",
    )
    parser.add_argument("--verify", action="store_true", default=None, help="Decode each output and compare it to the input.")
    parser.add_argument(
        "--fail-exit-code",
        action="store_true",
        help="Exit with status 2 if any file could not be inverted.",
    )
    parser.add_argument("paths", nargs="*")
    return parser


def load_config(args: argparse.Namespace) -> ConversionConfig:
    config = ConversionConfig()
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise SystemExit(f"Config not found: {config_path}")
        try:
            config = ConversionConfig.load(config_path)
        except (ValueError, TypeError) as exc:
            raise SystemExit(f"Invalid config {config_path}: {exc}")

    overrides = {
        name: getattr(args, name)
        for name in ("debug", "prefix", "naming", "stride", "strict", "cleanup_partial", "verify")
        if getattr(args, name) is not None
    }
    return replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        print(USAGE, file=sys.stderr)
        return 1

    config = load_config(args)
    results = convert_batch(args.paths, config)

    if args.fail_exit_code and not all(result.ok for result in results):
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
