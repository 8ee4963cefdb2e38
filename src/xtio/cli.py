"""Main CLI entry point for xtio.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--debug, --no-color, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  xtio --debug ls src --ext .py      # works
  xtio ls src --ext .py --debug      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from xtio._version import BASE_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--debug": {"aliases": ["-d"], "action": "store_const", "const": True,
                "default": None, "dest": "debugging",
                "help": "Show debug output"},
    "--no-color": {"action": "store_const", "const": False, "default": None,
                   "dest": "color",
                   "help": "Disable colored output"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.xtio/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for output and error flags.

    These are inherited by every subcommand.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--max-depth", type=int, metavar="N", default=None,
                        help="Nesting depth for inspected values")
    common.add_argument("--policy", choices=["suppress-and-log", "raise"],
                        default=None,
                        help="How failed file operations are handled")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in xtio.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from xtio.commands import cat, ls, report, shorten
    return [ls, cat, shorten, report]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="xtio",
        description="xtio — foundation I/O: listings, file reads, reports",
        epilog=(
            "Run 'xtio <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--debug, --no-color, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"xtio {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for xtio CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    # Initialize output and filesystem from the resolved config
    from xtio.config import build_output_config, resolve_config, resolve_policy
    from xtio.output import err, init_filesystem, init_output, FileSystemError
    resolved = resolve_config(args)
    init_output(config=build_output_config(resolved))
    init_filesystem(policy=resolve_policy(resolved))
    args.resolved = resolved

    # Dispatch
    try:
        return args.func(args) or 0
    except FileSystemError as e:
        err(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
