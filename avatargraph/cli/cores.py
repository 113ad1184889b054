"""Cores command: list every core candidate with its highest avatar."""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from avatargraph.config import load_check_config
from avatargraph.errors import AvatarGraphError
from avatargraph.graph import load_graph

from .display import make_console, node_name

logger = logging.getLogger("avatargraph.cli.cores")


def cores_command(args, console: Optional[Console] = None) -> int:
    """Execute cores command.

    Args:
        args: Parsed command-line arguments containing:
            - graph: Graph document path
            - config: Optional config path or inline TOML/JSON
            - fail_on_invalid: Exit non-zero when no core is found
        console: Rich console to render to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        config = load_check_config(getattr(args, "config", None))
        if getattr(args, "fail_on_invalid", False):
            config = config.model_copy(update={"fail_on_invalid": True})

        graph = load_graph(args.graph)
        cores = graph.corify(config)

        console = make_console(console)
        if not cores:
            console.print("No core candidates found")
            return 1 if config.fail_on_invalid else 0

        table = Table(title=f"Cores ({len(cores)} of {graph.node_count()} nodes)")
        table.add_column("Core")
        table.add_column("Highest avatar")
        for core, highest in cores.items():
            table.add_row(node_name(graph, core), node_name(graph, highest))
        console.print(table)
        return 0

    except (AvatarGraphError, OSError, ValueError) as e:
        logger.error("Cores command failed: %s", e)
        return 1
