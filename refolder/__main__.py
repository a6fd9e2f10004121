#!/usr/bin/env python3
"""
refolder - CLI Entry Point
==========================

Usage:
    python -m refolder ~/Pictures -m "*.jpg" -s 4 -p batch
    python -m refolder ~/Pictures -s 6 -p batch --dry-run
    python -m refolder ~/Pictures -s 3 -p batch --suffix letters --force
"""

import argparse
import sys

from . import __version__
from .config import load_defaults
from .errors import RefolderError
from .planning import SUFFIX_STYLES
from .runner import run
from .utils import print_error, print_header, print_success, print_warning


def create_parser() -> argparse.ArgumentParser:
    defaults = load_defaults()

    parser = argparse.ArgumentParser(
        prog="refolder",
        description="Move matching files into equally-sized subfolders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("path", help="Path to the directory to search")
    parser.add_argument("-m", "--matching", default=defaults.matching,
                        help=f"Glob pattern for matching files (shell-style, default: {defaults.matching!r})")
    parser.add_argument("-s", "--subfolders", type=int, required=True,
                        help="Number of subfolders to split into")
    parser.add_argument("-p", "--prefix", default=defaults.prefix,
                        help=f"Prefix for created subfolders (default: {defaults.prefix!r})")
    parser.add_argument("--suffix", default=defaults.suffix, choices=SUFFIX_STYLES,
                        help=f"Suffix style (default: {defaults.suffix})")
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="Recurse into subdirectories")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print actions without performing them")
    parser.add_argument("-f", "--force", action="store_true",
                        help="Overwrite existing files in destination")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.subfolders < 1:
        parser.error("--subfolders must be greater than zero")

    mode = "dry-run" if args.dry_run else "apply"
    print_header(
        f"refolder v{__version__}",
        f"Root: {args.path}\nMatching: {args.matching}\nSubfolders: {args.subfolders} ({args.suffix})\nMode: {mode}",
    )

    try:
        run(
            args.path,
            args.matching,
            args.subfolders,
            args.prefix,
            args.suffix,
            recursive=args.recursive,
            dry_run=args.dry_run,
            force=args.force,
        )
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except RefolderError as e:
        print_error(str(e))
        return 1

    if args.dry_run:
        print_warning("This was a DRY-RUN. No files were actually moved.")
    else:
        print_success("Operation Complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
