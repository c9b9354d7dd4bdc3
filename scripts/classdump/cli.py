"""Command-line interface for the class-dump formatter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import NoReturn, Optional

from scripts.classdump.errors import ArgumentError, ExitCode, FormatterError
from scripts.classdump.formatter import format_binary

USAGE = (
    "Usage: classdump-formatter [path to class-dump executable] "
    "[path to Mach-O file] [path to output directory]"
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message, usage=USAGE)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="classdump-formatter",
        description="Split class-dump output into one header file per declaration",
        usage=USAGE,
        add_help=False,
    )
    parser.add_argument("class_dump_executable", help="Path to a class-dump executable")
    parser.add_argument("macho_file", help="Path to a Mach-O file to class-dump")
    parser.add_argument("output_dir", help="Directory the header files are created in")
    return parser


def parse_arguments(argv: list[str]) -> argparse.Namespace:
    """Parse exactly three positional arguments.

    Arguments are taken as paths even when they start with "-".

    Raises:
        ArgumentError: If the arguments are not exactly three paths.
    """
    if len(argv) != 3:
        raise ArgumentError(f"expected 3 arguments, got {len(argv)}", usage=USAGE)
    return _build_parser().parse_args(["--", *argv])


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        args = parse_arguments(argv)
        result = format_binary(args.class_dump_executable, args.macho_file, args.output_dir)
    except ArgumentError as e:
        print(e.usage)
        return e.exit_code
    except FormatterError as e:
        print(json.dumps(e.to_json()), file=sys.stderr)
        return e.exit_code

    print(f"Wrote {len(result.declarations)} declarations to {result.output_dir}")
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
