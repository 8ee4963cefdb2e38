"""xtio ls — list the files in a directory.

Lists names sorted alphabetically, optionally only those ending in an
extension. A directory that cannot be read prints a warning and nothing
else (or fails with --policy raise).
"""

import argparse
import asyncio
import os

from xtio.lib.fs_lib import DEFAULT_SHORTEN_MAX
from xtio.output import debug, get_filesystem, shorten


def register(subparsers, parents):
    """Register the 'ls' subcommand."""
    p = subparsers.add_parser(
        "ls",
        parents=parents,
        help="List files in a directory",
        description=(
            "List the files in PATH. With --ext, keep only names ending\n"
            "in that extension. With --shorten, print shortened full paths."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("path", nargs="?", default=".",
                   help="Directory to list (default: current directory)")
    p.add_argument("--ext", metavar="EXT", default=None,
                   help="Only list files ending in EXT (e.g. .js)")
    p.add_argument("--shorten", type=int, nargs="?", metavar="N",
                   const=-1, default=None,
                   help="Print paths shortened to N slashes "
                        f"(default: config shorten_max or {DEFAULT_SHORTEN_MAX})")
    p.set_defaults(func=run)


async def _list(args):
    fs = get_filesystem()
    debug("ls", fs.normalize(args.path), "ext:", args.ext)
    return await fs.list_files(args.path, args.ext)


def run(args):
    """Execute the ls command."""
    names = asyncio.run(_list(args))

    limit = args.shorten
    if limit == -1:
        resolved = getattr(args, "resolved", None) or {}
        limit = resolved.get("shorten_max")
        if limit is None:
            limit = DEFAULT_SHORTEN_MAX

    for name in names:
        if limit is None:
            print(name)
        else:
            full = os.path.join(os.path.abspath(args.path), name)
            print(shorten(full.replace(os.sep, "/"), limit))
    return 0
