"""Avatar distance computation.

Avatar distances are computed in two passes relative to a core candidate:

1. Shortest distance: breadth-first search from the core, ignoring edge
   direction. Nodes without any path to the core get no entry at all.
2. Relaxation: nodes are finalized closest-first. A node's avatar distance
   is the sum of the avatar distances of its distinct, already finalized,
   non-core children, but never below its shortest distance. A node with no
   such children is a 1-avatar.

The order in which nodes at the same shortest distance are finalized decides
whether they can count one another as children. That order is fixed by graph
construction order, so results are reproducible but construction-order
dependent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Tuple

import networkx as nx

from ...errors import UnknownCoreCandidate
from ...utils.ordering import distinct_in_order
from ..models.results import AvatarDistances

if TYPE_CHECKING:
    from ..core.manager import AvatarGraph

logger = logging.getLogger("avatargraph.graph.ops.distance")


def require_core(graph: "AvatarGraph", core: int) -> None:
    """Raise UnknownCoreCandidate unless ``core`` is a graph member."""
    if not graph.has_node(core):
        raise UnknownCoreCandidate(core)


def shortest_distances(graph: "AvatarGraph", core: int) -> AvatarDistances:
    """Minimum number of edges between each node and the core.

    Args:
        graph: Graph to inspect.
        core: Core candidate.

    Returns:
        AvatarDistances: Reachable nodes only, ordered by node index.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
    """
    require_core(graph, core)
    lengths = nx.single_source_shortest_path_length(graph.backend.undirected_view(), core)
    return {node: lengths[node] for node in graph.nodes() if node in lengths}


def unreachable_nodes(graph: "AvatarGraph", core: int) -> List[int]:
    """Nodes with no path to the core, in node-index order."""
    reachable = shortest_distances(graph, core)
    return [node for node in graph.nodes() if node not in reachable]


def _relaxation_order(
    graph: "AvatarGraph", shortest: Dict[int, int]
) -> List[int]:
    """Order in which nodes get their avatar distance finalized.

    Closest to the core first. Among nodes at the same shortest distance,
    those with more children strictly closer to the core go first, then the
    lowest node index.
    """
    closer_children: Dict[int, int] = {}
    for node, level in shortest.items():
        closer_children[node] = sum(
            1
            for child in distinct_in_order(graph.children(node))
            if shortest.get(child, level) < level
        )

    def sort_key(node: int) -> Tuple[int, int, int]:
        return (shortest[node], -closer_children[node], node)

    return sorted(shortest, key=sort_key)


def avatar_distances(graph: "AvatarGraph", core: int) -> AvatarDistances:
    """Compute the avatar distance of every node reachable from ``core``.

    Args:
        graph: Graph to inspect.
        core: Core candidate.

    Returns:
        AvatarDistances: ``{node: distance}`` ordered by node index; the core
        maps to 0 and every other reachable node to a value >= 1.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
    """
    shortest = shortest_distances(graph, core)
    order = _relaxation_order(graph, shortest)

    avatar: Dict[int, int] = {}
    for node in order:
        if node == core:
            avatar[node] = 0
            continue

        # Children not yet finalized are further out (or later among equals)
        # and do not contribute.
        contributions = [
            avatar[child]
            for child in distinct_in_order(graph.children(node))
            if child != core and child in avatar
        ]
        if not contributions:
            avatar[node] = 1
        else:
            avatar[node] = max(shortest[node], sum(contributions))

    logger.debug(
        "Avatar distances from core %d: %d reachable node(s), max %d",
        core,
        len(avatar),
        max(avatar.values()),
    )
    return {node: avatar[node] for node in graph.nodes() if node in avatar}
