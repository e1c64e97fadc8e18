"""
Command line entry point for hexsed.
"""

import sys
import logging
import argparse
from typing import Callable, Dict, List, Optional

from .errors import HexsedError
from .core.engine import apply_edits, edit_bytes
from .core.expression import EditSpec, parse_expression
from .ui.hexdump import render_hexdump
from .utils.convert import (
    char_to_hex,
    escape_to_hex,
    int_to_hex,
    octal_to_hex,
    string_to_hex
)
from .utils.source import load_source

logger = logging.getLogger("hexsed")

CONVERTERS: Dict[str, Callable[[str], str]] = {
    'char': char_to_hex,
    'escape': escape_to_hex,
    'decimal': int_to_hex,
    'octal': octal_to_hex,
    'string': string_to_hex,
}

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""

    parser = argparse.ArgumentParser(
        prog="hexsed",
        description="hexsed - a stream editor for hex values",
        epilog=(
            "expressions: /hex to find/d deletes, /hex to find/hex to replace/s "
            "substitutes, a leading =N limits the edit to the first N matches"
        )
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Edit expression, e.g. /0d0a/0a/s or =1/00/d"
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File to edit, the result is written to standard output"
    )
    parser.add_argument(
        "-n", "--count",
        action="store_true",
        help="Report the number of edits applied on standard error"
    )
    parser.add_argument(
        "-x", "--hexdump",
        action="store_true",
        help="Write a hexdump of the edited output instead of raw bytes"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information on standard error"
    )

    converters = parser.add_mutually_exclusive_group()
    converters.add_argument("-a", dest="char", metavar="CHAR",
                            help="Output the hex value of CHAR")
    converters.add_argument("-e", dest="escape", metavar="\\CHAR",
                            help="Output the hex value of an escape sequence such as \\n")
    converters.add_argument("-i", dest="decimal", metavar="DIGITS",
                            help="Output the hex value of decimal DIGITS, range 0-255")
    converters.add_argument("-o", dest="octal", metavar="DIGITS",
                            help="Output the hex value of octal DIGITS, range 0-377")
    converters.add_argument("-s", dest="string", metavar="STRING",
                            help="Output the hex pairs of every byte in STRING")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send hexsed log records to standard error, keeping standard output for edited data."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replaces the handler of any earlier call
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def run_converter(args: argparse.Namespace) -> Optional[str]:
    """Run the requested single value converter, if any."""

    for name, converter in CONVERTERS.items():
        value = getattr(args, name)
        if value is not None:
            return converter(value)

    return None


def run_edit(spec: EditSpec, args: argparse.Namespace) -> int:
    """
    Edit the file named on the command line to standard output.

    Returns:
        int: Number of edits applied
    """

    with load_source(args.file) as source:
        if args.hexdump:
            edited, count = edit_bytes(spec, source)
            sys.stdout.write(render_hexdump(edited, color=sys.stdout.isatty()))
            sys.stdout.flush()
        else:
            out = sys.stdout.buffer
            count = apply_edits(spec, source, out)
            out.flush()

    if args.count:
        print(f"Did {count} {spec.noun}.", file=sys.stderr)

    return count


def fail(parser: argparse.ArgumentParser, message: str, show_usage: bool = False) -> None:
    """Print a diagnostic on standard error and exit with status 1."""

    if show_usage:
        parser.print_usage(sys.stderr)

    print(f"hexsed: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the application."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        result = run_converter(args)
        if result is not None:
            print(result)
            return

        if not args.expression:
            fail(parser, "No expression provided", show_usage=True)

        # A bad expression is reported before the file is looked at.
        spec = parse_expression(args.expression)

        if not args.file:
            fail(parser, "No file name provided", show_usage=True)

        run_edit(spec, args)

    except HexsedError as e:
        logger.debug("Aborting", exc_info=True)
        fail(parser, str(e))


if __name__ == "__main__":
    main()
