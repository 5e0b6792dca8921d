import os
import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional, TextIO

from json_walker.core.config.settings import settings
from json_walker.core.log_setup import configure_logging
from json_walker.features.json_files.service.api import walk_json_files

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Raised when the command line does not name a root directory."""


class _ArgumentParser(argparse.ArgumentParser):
    # argparse would print its own usage and exit 2
    def error(self, message):
        raise UsageError(settings.USAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=settings.PROGRAM_NAME, add_help=False)
    parser.add_argument("root_dir", type=str)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    # Only the first argument names the root; anything after it is ignored
    args, _ = build_parser().parse_known_args(argv)
    return args


def render_path(path: Path) -> str:
    """
    Decodes the raw path bytes as UTF-8, replacing invalid sequences with U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", errors="replace")


def write_path(path: Path, stream: TextIO) -> None:
    """
    Writes one path per line as UTF-8 bytes, whatever encoding the stream was opened with.
    """
    stream.buffer.write(render_path(path).encode("utf-8") + b"\n")


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()

    try:
        args = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    logger.info(f"Walking: {args.root_dir}")
    sys.stdout.flush()
    for path in walk_json_files(args.root_dir):
        write_path(path, sys.stdout)
    sys.stdout.buffer.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
