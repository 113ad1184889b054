"""Public graph API surface."""

from avatargraph.graph.core import AvatarGraph, GraphBackend, NetworkXBackend
from avatargraph.graph.io import (
    graph_from_document,
    graph_to_document,
    load_graph,
    save_graph,
)
from avatargraph.graph.models import (
    AvatarDistances,
    CheckResult,
    GraphDocument,
    Invalid,
    MaxAvatars,
    NodeRecord,
    Valid,
    ValidationReport,
)
from avatargraph.graph.ops import (
    avatar_distances,
    check_avatar_connectivity,
    check_non_contractability,
    check_universal_reachability,
    corify,
    highest_avatar,
    is_avatar_graph,
    max_avatars,
    shortest_distances,
    unreachable_nodes,
    validate,
)

__all__ = [
    "AvatarDistances",
    "AvatarGraph",
    "CheckResult",
    "GraphBackend",
    "GraphDocument",
    "Invalid",
    "MaxAvatars",
    "NetworkXBackend",
    "NodeRecord",
    "Valid",
    "ValidationReport",
    "avatar_distances",
    "check_avatar_connectivity",
    "check_non_contractability",
    "check_universal_reachability",
    "corify",
    "graph_from_document",
    "graph_to_document",
    "highest_avatar",
    "is_avatar_graph",
    "load_graph",
    "max_avatars",
    "save_graph",
    "shortest_distances",
    "unreachable_nodes",
    "validate",
]
