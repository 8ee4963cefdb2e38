"""xtio shorten — shorten a path for display."""

from xtio.lib.fs_lib import DEFAULT_SHORTEN_MAX
from xtio.output import normalize, shorten


def register(subparsers, parents):
    """Register the 'shorten' subcommand."""
    p = subparsers.add_parser(
        "shorten",
        parents=parents,
        help="Shorten a long path to its last few segments",
    )
    p.add_argument("path", help="Path to shorten")
    p.add_argument("--max", type=int, metavar="N", default=None,
                   help="Slashes to keep (default: config shorten_max "
                        f"or {DEFAULT_SHORTEN_MAX})")
    p.add_argument("--normalize", action="store_true", default=False,
                   help="Normalize the path first")
    p.set_defaults(func=run)


def run(args):
    """Execute the shorten command."""
    limit = args.max
    if limit is None:
        resolved = getattr(args, "resolved", None) or {}
        limit = resolved.get("shorten_max")
        if limit is None:
            limit = DEFAULT_SHORTEN_MAX

    path = normalize(args.path) if args.normalize else args.path
    print(shorten(path, limit))
    return 0
