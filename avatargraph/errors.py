"""Exception hierarchy for avatargraph.

Lookup failures are terminal for the operation that raised them. Structural
problems found by the validator are never raised; they are returned as
``Invalid`` results instead.
"""

from typing import Any


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================

class AvatarGraphError(Exception):
    """Base class for all avatargraph errors."""
    pass


class InvalidNode(AvatarGraphError):
    """An operation referenced a node identifier not present in the graph."""

    def __init__(self, node: Any, message: str = "") -> None:
        self.node = node
        super().__init__(message or f"Unknown node: {node!r}")


class InvalidEdge(AvatarGraphError):
    """Edge rejected at construction time.

    Raised for self-loops, which would leave the shortest distance of the
    node to a core undefined.
    """

    def __init__(self, parent: int, child: int, message: str = "") -> None:
        self.parent = parent
        self.child = child
        super().__init__(message or f"Invalid edge {parent} -> {child}")


class UnknownCoreCandidate(InvalidNode):
    """The core candidate passed to a query is not a graph member."""

    def __init__(self, node: Any) -> None:
        super().__init__(node, f"Unknown core candidate: {node!r}")


class NoReachableNodes(AvatarGraphError):
    """The core candidate has no avatars, so no highest avatar exists."""

    def __init__(self, core: int) -> None:
        self.core = core
        super().__init__(f"Core candidate {core} has no reachable avatars")


class GraphDocumentError(AvatarGraphError):
    """Raised when a serialized graph document is malformed."""

    pass
