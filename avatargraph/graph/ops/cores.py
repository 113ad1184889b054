"""Core candidate discovery.

A node is a core when the graph is an Avatar Graph seen from it. Each core
is paired with its highest avatar.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

from ...config.schema import CheckConfig
from .highest import highest_avatar
from .validation import is_avatar_graph

if TYPE_CHECKING:
    from ..core.manager import AvatarGraph

logger = logging.getLogger("avatargraph.graph.ops.cores")


def corify(graph: "AvatarGraph", config: Optional[CheckConfig] = None) -> Dict[int, int]:
    """Find every core candidate and its highest avatar.

    Args:
        graph: Graph to inspect. It is not modified.
        config: Check options. ``config.cores`` restricts the candidates that
            are evaluated; by default every node is tried.

    Returns:
        Dict[int, int]: ``{core: highest_avatar}`` for each node the graph is
        an Avatar Graph from, in node-index order.

    Raises:
        UnknownCoreCandidate: If ``config.cores`` names a node not in the graph.
    """
    config = config or CheckConfig.default()
    candidates = config.cores if config.cores is not None else graph.nodes()

    cores: Dict[int, int] = {}
    for candidate in candidates:
        if is_avatar_graph(graph, candidate, config):
            cores[candidate] = highest_avatar(graph, candidate)

    logger.info(
        "Found %d core(s) among %d candidate(s)", len(cores), len(candidates)
    )
    return dict(sorted(cores.items()))
