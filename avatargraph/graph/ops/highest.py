"""Highest avatar extraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ...errors import InvalidNode, NoReachableNodes
from ..models.results import AvatarDistances, MaxAvatars
from .distance import avatar_distances, require_core

if TYPE_CHECKING:
    from ..core.manager import AvatarGraph

logger = logging.getLogger("avatargraph.graph.ops.highest")


def resolve_distances(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances]
) -> AvatarDistances:
    """Return ``distances`` after checking it, computing it when missing.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
        InvalidNode: If ``distances`` names a node the graph does not have,
            or does not place ``core`` at distance 0.
    """
    require_core(graph, core)
    if distances is None:
        return avatar_distances(graph, core)
    for node in distances:
        if not graph.has_node(node):
            raise InvalidNode(node)
    if distances.get(core) != 0:
        raise InvalidNode(core, f"Avatar distances do not place core {core} at 0")
    return distances


def _avatars(graph: "AvatarGraph", core: int, distances: AvatarDistances) -> List[int]:
    # Node-index order, so that the first maximum seen is the lowest index.
    return [node for node in graph.nodes() if node in distances and node != core]


def highest_avatar(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances] = None
) -> int:
    """Return the node with maximal avatar distance relative to ``core``.

    Ties go to the node created first.

    Args:
        graph: Graph to inspect.
        core: Core candidate.
        distances: Precomputed avatar distances for ``core``. Computed when
            omitted.

    Returns:
        int: The highest avatar.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
        NoReachableNodes: If ``core`` has no avatars.
    """
    distances = resolve_distances(graph, core, distances)
    best: Optional[int] = None
    for node in _avatars(graph, core, distances):
        if best is None or distances[node] > distances[best]:
            best = node
    if best is None:
        raise NoReachableNodes(core)

    logger.debug("Highest avatar of core %d: %d (distance %d)", core, best, distances[best])
    return best


def max_avatars(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances] = None
) -> MaxAvatars:
    """Return every node sharing the maximal avatar distance.

    A graph that is an Avatar Graph from ``core`` has exactly one.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
        NoReachableNodes: If ``core`` has no avatars.
    """
    distances = resolve_distances(graph, core, distances)
    avatars = _avatars(graph, core, distances)
    if not avatars:
        raise NoReachableNodes(core)

    top = max(distances[node] for node in avatars)
    return MaxAvatars(value=top, nodes=tuple(n for n in avatars if distances[n] == top))
