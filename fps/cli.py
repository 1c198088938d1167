"""
fps CLI - Flex plugin scripts.

Flag-style interface for preflight checks.

Usage:
    fps [-C]                     Run preflight checks
    fps -Q                       List registered plugins
    fps --init-config            Write a default preflight.toml
"""

import argparse
import sys

from flexcheck.errors import PreflightError


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="fps",
        description="Flex plugin scripts - preflight checks for plugin projects",
        add_help=False,
    )

    # Operation flags (mutually exclusive)
    ops = parser.add_mutually_exclusive_group()
    ops.add_argument("-C", "--check", action="store_true", help="Run preflight checks")
    ops.add_argument("-Q", "--query", action="store_true", help="List registered plugins")
    ops.add_argument(
        "--init-config", action="store_true", help="Write a default preflight.toml"
    )
    ops.add_argument("-h", "--help", action="store_true", help="Show help")

    # Common options
    parser.add_argument("-d", "--dir", default=".", help="Plugin project directory")
    parser.add_argument(
        "--noconfirm", action="store_true", help="Skip confirmation prompts"
    )
    parser.add_argument("--force", action="store_true", help="Overwrite on --init-config")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    return parser


def print_help():
    """Print help message."""
    help_text = """
fps - Flex plugin scripts

Usage:
    fps [-C]                     Run preflight checks
    fps -Q                       List registered plugins
    fps --init-config            Write a default preflight.toml

Options:
    -d, --dir <path>             Plugin project directory (default: .)
    --noconfirm                  Skip confirmation prompts
    --force                      Overwrite an existing preflight.toml
    -v, --verbose                Verbose output
    -h, --help                   Show this help

Environment:
    SKIP_PREFLIGHT_CHECK=true    Downgrade version mismatches to warnings
    UNBUNDLED_REACT=true         Allow React not bundled with Flex UI (>=1.19.0)
"""
    print(help_text.strip())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for fps CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        if args.help:
            print_help()
            return 0

        if args.query:
            from fps.commands.query import query_command

            return query_command(args)

        if args.init_config:
            from fps.commands.init_config import init_config_command

            return init_config_command(args)

        # -C is the default operation
        from fps.commands.check import check_command

        return check_command(args)

    except PreflightError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
