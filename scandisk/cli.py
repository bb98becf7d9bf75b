from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import OUTPUT_MODES, Settings, get_settings
from .drives import make_exclusion
from .errors import ConfigError, ScanDiskError
from .render import render_text, write_html
from .scanner import scan_path

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="scandisk",
        description="Show disk usage of a directory tree as text or as an HTML tree view.",
    )
    p.add_argument("-root", "--root", default=settings.root,
                   help="Set the directory to scan from (default: %(default)s)")
    p.add_argument("-output", "--output", default=settings.output, choices=OUTPUT_MODES,
                   help="Set the output destination, html or text (default: %(default)s)")
    p.add_argument("-filename", "--filename", default=settings.filename,
                   help="If the output is html, the page is written to FILENAME.html "
                        "(default: %(default)s)")
    p.add_argument("--block-size", type=int, default=settings.block_size,
                   help="Override the filesystem block size in bytes")
    p.add_argument("--log-level", default=settings.log_level,
                   help="Logging level for messages on stderr (default: %(default)s)")
    p.add_argument("-v", "--verbose", action="store_true", help="Same as --log-level DEBUG")
    return p


def validate_root(root: str) -> str:
    if not os.path.isdir(root):
        raise ConfigError("The root argument should be a directory")
    return root


def run(args: argparse.Namespace) -> None:
    root = validate_root(args.root)
    if args.block_size is not None and args.block_size <= 0:
        raise ConfigError("The block-size argument should be positive")

    def progress(cur: str, files: int, dirs: int):
        logger.debug("%s: %d files, %d dirs", cur, files, dirs)

    result = scan_path(root, block_size=args.block_size,
                       is_excluded=make_exclusion(), progress=progress)
    if args.output == "text":
        # undecodable name bytes go back out unchanged
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")
        render_text(result.root, sys.stdout)
    else:
        path = write_html(result.root, args.filename)
        logger.info("HTML report written to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"invalid SCANDISK_* settings: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    _setup_logging("DEBUG" if args.verbose else args.log_level)

    try:
        run(args)
    except ScanDiskError as e:
        logger.debug("fatal %s", e.code)
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
