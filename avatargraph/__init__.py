"""avatargraph - construct and validate Avatar Graphs.

An Avatar Graph relates a chosen core node to extension nodes (avatars) at
increasing levels of indirection. Build an ``AvatarGraph``, pick a core
candidate, then query avatar distances, the highest avatar and the three
structural invariants.
"""

from avatargraph.errors import (
    AvatarGraphError,
    GraphDocumentError,
    InvalidEdge,
    InvalidNode,
    NoReachableNodes,
    UnknownCoreCandidate,
)
from avatargraph.graph import (
    AvatarGraph,
    Invalid,
    MaxAvatars,
    Valid,
    ValidationReport,
    load_graph,
    save_graph,
)

__version__ = "0.1.0"

__all__ = [
    "AvatarGraph",
    "AvatarGraphError",
    "GraphDocumentError",
    "Invalid",
    "InvalidEdge",
    "InvalidNode",
    "MaxAvatars",
    "NoReachableNodes",
    "UnknownCoreCandidate",
    "Valid",
    "ValidationReport",
    "load_graph",
    "save_graph",
]
