"""Main CLI entry point for avatargraph.

Provides commands: check, cores
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from avatargraph.cli.check import check_command
from avatargraph.cli.cores import cores_command

logger = logging.getLogger("avatargraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "graph",
        help="Graph document (JSON with ordered nodes and [parent, child] edges)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional check configuration. Can be a path to a TOML/JSON file "
            "or an inline TOML/JSON string. When omitted, built-in defaults "
            "are used."
        ),
    )
    parser.add_argument(
        "--fail-on-invalid",
        action="store_true",
        help="Exit with non-zero status when the graph is not an Avatar Graph",
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Avatargraph - Avatar Graph analysis tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Compute avatar distances and validate the graph from one core",
    )
    _add_common_arguments(check_parser)
    check_parser.add_argument(
        "--core",
        type=int,
        required=True,
        help="Core candidate node id",
    )

    # Cores command
    cores_parser = subparsers.add_parser(
        "cores",
        help="List every node the graph is an Avatar Graph from",
    )
    _add_common_arguments(cores_parser)

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "check":
        return check_command(args)
    elif args.command == "cores":
        return cores_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
