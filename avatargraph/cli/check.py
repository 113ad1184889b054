"""Check command: distances, highest avatar and invariants for one core."""

import logging
from typing import Optional

from rich.console import Console

from avatargraph.config import load_check_config
from avatargraph.errors import AvatarGraphError
from avatargraph.graph import load_graph

from .display import distances_table, make_console, node_name, report_table

logger = logging.getLogger("avatargraph.cli.check")


def check_command(args, console: Optional[Console] = None) -> int:
    """Execute check command.

    Args:
        args: Parsed command-line arguments containing:
            - graph: Graph document path
            - core: Core candidate node id
            - config: Optional config path or inline TOML/JSON
            - fail_on_invalid: Exit non-zero when the graph is not valid
        console: Rich console to render to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        config = load_check_config(getattr(args, "config", None))
        if getattr(args, "fail_on_invalid", False):
            config = config.model_copy(update={"fail_on_invalid": True})

        graph = load_graph(args.graph)
        core = args.core
        logger.info("Checking %r from core %s", graph, core)

        distances = graph.avatar_distances(core)
        report = graph.validate(core, distances)
        avatar_graph = graph.is_avatar_graph(core, config)

        console = make_console(console)
        console.print(distances_table(graph, core, distances, report.highest_avatar))
        console.print(report_table(graph, report))
        console.print(
            f"Highest avatar: {node_name(graph, report.highest_avatar)}"
        )
        console.print(
            f"Avatar Graph from core {node_name(graph, core)}: "
            f"{'yes' if avatar_graph else 'no'}"
        )

        if config.fail_on_invalid and not avatar_graph:
            logger.error("Graph is not an Avatar Graph from core %s", core)
            return 1
        return 0

    except (AvatarGraphError, OSError, ValueError) as e:
        logger.error("Check command failed: %s", e)
        return 1
