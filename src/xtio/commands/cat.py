"""xtio cat — print a file's contents."""

import argparse
import asyncio

from xtio.output import by_line, get_filesystem


def register(subparsers, parents):
    """Register the 'cat' subcommand."""
    p = subparsers.add_parser(
        "cat",
        parents=parents,
        help="Print a file",
        description=(
            "Read PATH (or PATH/FILENAME) as UTF-8 and print it.\n"
            "An unreadable file prints a warning and no content."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("path", help="File, or directory containing FILENAME")
    p.add_argument("filename", nargs="?", default=None,
                   help="File name inside PATH")
    p.add_argument("--lines", action="store_true", default=False,
                   help="Number each line")
    p.set_defaults(func=run)


def run(args):
    """Execute the cat command."""
    text = asyncio.run(get_filesystem().read_file(args.path, args.filename))

    if not args.lines:
        if text:
            print(text, end="" if text.endswith("\n") else "\n")
        return 0

    lines = by_line(text)
    width = len(str(len(lines)))
    for n, line in enumerate(lines, start=1):
        print(f"{n:>{width}}  {line}")
    return 0
