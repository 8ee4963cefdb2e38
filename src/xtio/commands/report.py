"""xtio report — print a bordered key/value report.

Pairs are given as KEY=VALUE. A pair with nothing after '=' counts as
absent and is left out of the block.
"""

from xtio.output import err, report


def register(subparsers, parents):
    """Register the 'report' subcommand."""
    p = subparsers.add_parser(
        "report",
        parents=parents,
        help="Print KEY=VALUE pairs as a report block",
    )
    p.add_argument("pairs", nargs="*", metavar="KEY=VALUE",
                   help="Report entries")
    p.add_argument("--title", default=None,
                   help="Report title (default: 'reported content')")
    p.add_argument("--description", default=None,
                   help="Report description (default: 'auto-generated report')")
    p.set_defaults(func=run)


def parse_pairs(pairs):
    """Parse KEY=VALUE strings into an ordered dict. Empty VALUE -> None.

    Raises ValueError for an entry without '='.
    """
    data = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        data[key] = value if value else None
    return data


def run(args):
    """Execute the report command."""
    try:
        data = parse_pairs(args.pairs)
    except ValueError as e:
        err(str(e))
        return 2
    report(data, args.title, args.description)
    return 0
