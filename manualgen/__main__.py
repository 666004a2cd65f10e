"""
manualgen: Markdown manuals from a command-line tool's own help output.

Calls `<command> --help` for the tool and, recursively, for every subcommand
it lists, then writes the result as one Markdown document.
"""

from __future__ import annotations

import argparse
import logging
import sys

from manualgen.core import (
    DEFAULT_HELP_FLAG,
    DEFAULT_OUTPUT,
    DEFAULT_TITLE,
    __version__,
    generate_manual,
    print_output,
    write_manual,
)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manualgen",
        description="Generate a Markdown manual for an external command by recursively calling its --help flag.",
        epilog="Options must come before the command, everything after it is passed to the tool.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="The command to document, with any fixed leading arguments (e.g., ./target/release/pmv-cli).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"File the manual is written to (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the manual instead of writing it to a file.",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="With --stdout, render the Markdown in the terminal (needs rich).",
    )
    parser.add_argument(
        "--help-flag",
        default=DEFAULT_HELP_FLAG,
        help=f"Flag that makes the tool print its help (default: {DEFAULT_HELP_FLAG}).",
    )
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help=f"Heading of the root section (default: {DEFAULT_TITLE}).",
    )
    parser.add_argument(
        "--no-links",
        dest="links",
        action="store_false",
        help="Show command names as plain code instead of links to their sections.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for each call to the tool.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Fail if subcommands nest deeper than this.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every call to the tool."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None) -> None:
    """Console script entry point for manualgen."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.error("a command to document is required")

    try:
        doc = generate_manual(
            args.command,
            help_flag=args.help_flag,
            title=args.title,
            links=args.links,
            timeout=args.timeout,
            max_depth=args.max_depth,
        )
        if args.stdout:
            print_output(doc, preview=args.preview)
        else:
            target = write_manual(doc, args.output)
            print(f"Manual written to: {target}", file=sys.stderr)
    except Exception as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
