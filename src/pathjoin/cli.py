"""Command line front end for join_name() and relative_name().

Usage:
    python -m pathjoin join PATH NAME [NAME ...]
    python -m pathjoin relname [--dir DIR] PATH [PATH ...]
"""

import argparse
import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from pathjoin import __version__
from pathjoin.config import PathjoinConfig
from pathjoin.exceptions import PathjoinError
from pathjoin.join import join_name
from pathjoin.relative import relative_names

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="pathjoin",
        description="Join and split pathnames without touching the filesystem",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON config file",
    )
    parser.add_argument(
        "-0",
        "--null",
        dest="null_terminated",
        action="store_true",
        default=None,
        help="Separate records with NUL instead of newline",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Log each transformation to stderr",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    join_cmd = sub.add_parser("join", help="Join a base directory with names")
    join_cmd.add_argument("path", help="Base directory")
    join_cmd.add_argument("names", nargs="+", metavar="NAME", help="Sub-path or file name")

    rel_cmd = sub.add_parser("relname", help="Strip a base directory from paths")
    rel_cmd.add_argument(
        "--dir",
        dest="base_dir",
        default=None,
        help="Base directory (default: config base_dir)",
    )
    rel_cmd.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Paths to break; a single '-' reads them from stdin",
    )
    return parser


def _read_records(stream: BinaryIO, null_terminated: bool) -> Iterator[str]:
    """Yield one path per input record, keeping empty records.

    Records are raw bytes decoded with os.fsdecode(), so names that are not
    valid in the locale encoding survive the round trip.
    """
    if null_terminated:
        records = stream.read().split(b"\0")
        # Nothing follows the final terminator
        if records[-1] == b"":
            records.pop()
        for record in records:
            yield os.fsdecode(record)
        return
    for line in stream:
        yield os.fsdecode(line.removesuffix(b"\n"))


def _write_record(stream: BinaryIO, text: str, end: str) -> None:
    stream.write(os.fsencode(text + end))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = PathjoinConfig.load(
            config_path=args.config,
            null_terminated=args.null_terminated,
            verbose=args.verbose,
            base_dir=getattr(args, "base_dir", None),
        )
    except (PathjoinError, ValueError) as e:
        print(f"pathjoin: {e}", file=sys.stderr)
        return EXIT_USAGE

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    logger.debug("Using %s", config)

    end = "\0" if config.null_terminated else "\n"

    if args.command == "join":
        for name in args.names:
            joined = join_name(args.path, name)
            logger.debug("join %r + %r -> %r", args.path, name, joined)
            _write_record(sys.stdout.buffer, joined, end)
        return EXIT_OK

    paths = args.paths
    if paths == ["-"]:
        paths = _read_records(sys.stdin.buffer, config.null_terminated)
    for relname in relative_names(paths, config.base_dir):
        logger.debug("relname under %r -> %r", config.base_dir, relname)
        _write_record(sys.stdout.buffer, relname, end)
    return EXIT_OK
