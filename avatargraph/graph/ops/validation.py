"""Structural checks that make a graph an Avatar Graph.

Three invariants are checked for a (graph, core candidate, avatar distances)
triple:

* Non-contractability: no avatar above level 1 has exactly one child.
* Avatar connectivity: no avatar points to another avatar on its own level,
  and above level 1 an n-avatar only points to avatars below level n.
* Universal reachability: every node lies on a strictly decreasing path
  from the highest avatar down to the core.

Each check returns ``Valid`` or ``Invalid(offenders)``; nothing here raises
for a structural violation and nothing mutates the graph.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Optional, Set

from ...config.schema import CheckConfig
from ...utils.ordering import distinct_in_order
from ..models.results import (
    AvatarDistances,
    CheckResult,
    Edge,
    ValidationReport,
    check_result,
)
from .distance import avatar_distances, require_core
from .highest import highest_avatar, max_avatars, resolve_distances

if TYPE_CHECKING:
    from ..core.manager import AvatarGraph

logger = logging.getLogger("avatargraph.graph.ops.validation")


def _avatar_children(graph: "AvatarGraph", core: int, node: int) -> List[int]:
    """Distinct children of ``node``, the core excluded."""
    return [child for child in distinct_in_order(graph.children(node)) if child != core]


def check_non_contractability(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances] = None
) -> CheckResult:
    """Report avatars above level 1 that have exactly one child.

    Args:
        graph: Graph to inspect.
        core: Core candidate; never counted as a child.
        distances: Avatar distances for ``core``. Computed when omitted.

    Returns:
        CheckResult: ``Invalid`` lists the contractible nodes.
    """
    distances = resolve_distances(graph, core, distances)
    offenders: List[int] = []
    for node in graph.nodes():
        level = distances.get(node)
        if node == core or level is None or level <= 1:
            continue
        if len(_avatar_children(graph, core, node)) == 1:
            offenders.append(node)

    if offenders:
        logger.debug("Contractible nodes for core %d: %s", core, offenders)
    return check_result(offenders)


def check_avatar_connectivity(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances] = None
) -> CheckResult:
    """Report edges from an n-avatar to a child at level n or above.

    Two 1-avatars may not point at each other either, but a 1-avatar may
    point up to a higher level. Several children may share a level; only the
    parent/child ordering is checked.

    Returns:
        CheckResult: ``Invalid`` lists offending ``(parent, child)`` edges.
    """
    distances = resolve_distances(graph, core, distances)
    offenders: List[Edge] = []
    for node in graph.nodes():
        level = distances.get(node)
        if node == core or level is None:
            continue
        for child in _avatar_children(graph, core, node):
            child_level = distances.get(child, 0)
            # 1-avatars may still point up to higher levels.
            if child_level == level or (level > 1 and child_level > level):
                offenders.append((node, child))

    if offenders:
        logger.debug("Avatar connectivity failures for core %d: %s", core, offenders)
    return check_result(offenders)


def _descend(graph: "AvatarGraph", start: int, distances: AvatarDistances) -> Set[int]:
    """Nodes reachable from ``start`` along strictly decreasing children."""
    seen = {start}
    queue: Deque[int] = deque([start])
    while queue:
        node = queue.popleft()
        for child in distinct_in_order(graph.children(node)):
            if child in seen or child not in distances:
                continue
            if distances[child] < distances[node]:
                seen.add(child)
                queue.append(child)
    return seen


def _ascend(graph: "AvatarGraph", core: int, distances: AvatarDistances) -> Set[int]:
    """Nodes with a strictly decreasing path down to ``core``."""
    seen = {core}
    queue: Deque[int] = deque([core])
    while queue:
        node = queue.popleft()
        for parent in graph.parents(node):
            if parent in seen or parent not in distances:
                continue
            if distances[parent] > distances[node]:
                seen.add(parent)
                queue.append(parent)
    return seen


def check_universal_reachability(
    graph: "AvatarGraph",
    core: int,
    distances: Optional[AvatarDistances] = None,
    highest: Optional[int] = None,
) -> CheckResult:
    """Report nodes not on a strictly decreasing highest-avatar-to-core path.

    Nodes unreachable from the core are always reported.

    Args:
        graph: Graph to inspect.
        core: Core candidate.
        distances: Avatar distances for ``core``. Computed when omitted.
        highest: Highest avatar. Computed when omitted.

    Returns:
        CheckResult: ``Invalid`` lists the uncovered nodes.

    Raises:
        NoReachableNodes: If ``core`` has no avatars.
    """
    distances = resolve_distances(graph, core, distances)
    if highest is None:
        highest = highest_avatar(graph, core, distances)

    covered = _descend(graph, highest, distances) & _ascend(graph, core, distances)
    offenders = [node for node in graph.nodes() if node not in covered]

    if offenders:
        logger.debug(
            "Nodes not covered from highest avatar %d to core %d: %s",
            highest,
            core,
            offenders,
        )
    return check_result(offenders)


def validate(
    graph: "AvatarGraph", core: int, distances: Optional[AvatarDistances] = None
) -> ValidationReport:
    """Run all three invariant checks for ``core``.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
        NoReachableNodes: If ``core`` has no avatars.
    """
    distances = resolve_distances(graph, core, distances)
    highest = highest_avatar(graph, core, distances)

    report = ValidationReport(
        core=core,
        highest_avatar=highest,
        non_contractability=check_non_contractability(graph, core, distances),
        avatar_connectivity=check_avatar_connectivity(graph, core, distances),
        universal_reachability=check_universal_reachability(
            graph, core, distances, highest
        ),
    )
    logger.debug("Validation for core %d: valid=%s", core, report.is_valid)
    return report


def is_avatar_graph(
    graph: "AvatarGraph", core: int, config: Optional[CheckConfig] = None
) -> bool:
    """Return True if ``graph`` is an Avatar Graph seen from ``core``.

    A core without avatars never forms an Avatar Graph.

    Raises:
        UnknownCoreCandidate: If ``core`` is not in the graph.
    """
    config = config or CheckConfig.default()
    require_core(graph, core)

    distances = avatar_distances(graph, core)
    if len(distances) < 2:
        return False

    # The whole graph must be connected.
    connected = len(distances) == graph.node_count()
    if config.require_connected and not connected:
        return False

    # There must exist only one max avatar.
    if config.require_unique_maximum and not max_avatars(graph, core, distances).is_unique:
        return False

    report = validate(graph, core, distances)
    if not (report.non_contractability.is_valid and report.avatar_connectivity.is_valid):
        return False

    reachability = report.universal_reachability
    if reachability.is_valid:
        return True
    if config.require_connected:
        return False
    # Disconnected nodes are tolerated; everything reachable must be covered.
    return all(node not in distances for node in reachability.offenders)
