"""Algorithms built on top of the avatar graph core."""

from .cores import corify
from .distance import avatar_distances, shortest_distances, unreachable_nodes
from .highest import highest_avatar, max_avatars
from .validation import (
    check_avatar_connectivity,
    check_non_contractability,
    check_universal_reachability,
    is_avatar_graph,
    validate,
)

__all__ = [
    "avatar_distances",
    "check_avatar_connectivity",
    "check_non_contractability",
    "check_universal_reachability",
    "corify",
    "highest_avatar",
    "is_avatar_graph",
    "max_avatars",
    "shortest_distances",
    "unreachable_nodes",
    "validate",
]
