"""Avatar graph container.

AvatarGraph owns the node/edge arena that every avatar algorithm reads.
Nodes are integer indices assigned at creation time and never reused, so
"lowest index wins" is a stable tie-break across runs. Distances, highest
avatars and validation reports are derived views computed on demand; none of
them is stored on the graph.
"""

import logging
from typing import Any, Dict, List, Optional

from ...config.schema import CheckConfig
from ...errors import InvalidEdge, InvalidNode
from ..models.results import AvatarDistances, MaxAvatars, ValidationReport
from ..ops.cores import corify as _corify
from ..ops.distance import avatar_distances as _avatar_distances
from ..ops.distance import shortest_distances as _shortest_distances
from ..ops.highest import highest_avatar as _highest_avatar
from ..ops.highest import max_avatars as _max_avatars
from ..ops.validation import is_avatar_graph as _is_avatar_graph
from ..ops.validation import validate as _validate
from .backend import GraphBackend, NetworkXBackend

logger = logging.getLogger("avatargraph.graph.core.manager")


class AvatarGraph:
    """Directed graph of avatar relations.

    An edge ``parent -> child`` means the parent passes information to the
    child, oriented from higher avatar levels toward the core. Graphs are
    built once and then queried with any number of core candidates.
    """

    def __init__(self, backend: Optional[GraphBackend] = None) -> None:
        """Initialize an empty graph.

        Args:
            backend: Optional graph backend. Defaults to NetworkXBackend.
        """
        self._backend: GraphBackend = backend or NetworkXBackend()
        self._edge_seq = 0

    @property
    def backend(self) -> GraphBackend:
        """Return the underlying graph backend."""
        return self._backend

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, **attributes: Any) -> int:
        """Allocate a new node.

        Args:
            **attributes: Optional caller metadata (for example ``label``).
                The avatar algorithms never read it.

        Returns:
            int: The new node index.
        """
        node_id = self._backend.node_count()
        self._backend.add_node(node_id, **attributes)
        logger.debug("Added node %d", node_id)
        return node_id

    def add_edge(self, parent: int, child: int) -> int:
        """Append ``child`` to the ordered child list of ``parent``.

        Duplicate edges are accepted and kept in the child list.

        Args:
            parent: Source node.
            child: Target node, one step closer to the core.

        Returns:
            int: Insertion sequence number of the new edge.

        Raises:
            InvalidNode: If either endpoint is unknown.
            InvalidEdge: If ``parent == child``.
        """
        self._require_node(parent)
        self._require_node(child)
        if parent == child:
            raise InvalidEdge(parent, child, f"Self-loop on node {parent} is not allowed")

        seq = self._edge_seq
        self._backend.add_edge(parent, child, seq)
        self._edge_seq += 1
        logger.debug("Added edge %d -> %d (seq=%d)", parent, child, seq)
        return seq

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------

    def children(self, node: int) -> List[int]:
        """Return the targets of ``node``'s outgoing edges in insertion order."""
        self._require_node(node)
        return self._backend.successors(node)

    def parents(self, node: int) -> List[int]:
        """Return the distinct sources of ``node``'s incoming edges."""
        self._require_node(node)
        return self._backend.predecessors(node)

    def nodes(self) -> List[int]:
        """Return all nodes in insertion order."""
        return self._backend.nodes()

    def edges(self) -> List[tuple]:
        """Return all ``(parent, child)`` edges in insertion order."""
        return self._backend.edges()

    def has_node(self, node: Any) -> bool:
        # bool is an int subclass but never a valid node handle
        if not isinstance(node, int) or isinstance(node, bool):
            return False
        return self._backend.has_node(node)

    def node_count(self) -> int:
        return self._backend.node_count()

    def edge_count(self) -> int:
        return self._backend.edge_count()

    def node_attributes(self, node: int) -> Dict[str, Any]:
        """Return a copy of the caller metadata attached to ``node``."""
        self._require_node(node)
        return dict(self._backend.get_node_data(node) or {})

    def matrix(self) -> List[List[int]]:
        """Return the adjacency matrix.

        ``matrix()[p][c]`` is the number of ``p -> c`` edges, so duplicate
        edges show up as counts above one.
        """
        n = self.node_count()
        mat = [[0] * n for _ in range(n)]
        for parent, child in self.edges():
            mat[parent][child] += 1
        return mat

    def _require_node(self, node: Any) -> None:
        if not self.has_node(node):
            raise InvalidNode(node)

    # ------------------------------------------------------------------
    # Avatar queries
    # ------------------------------------------------------------------

    def shortest_distances(self, core: int) -> AvatarDistances:
        return _shortest_distances(self, core)

    def avatar_distances(self, core: int) -> AvatarDistances:
        return _avatar_distances(self, core)

    def highest_avatar(self, core: int, distances: Optional[AvatarDistances] = None) -> int:
        return _highest_avatar(self, core, distances)

    def max_avatars(self, core: int, distances: Optional[AvatarDistances] = None) -> MaxAvatars:
        return _max_avatars(self, core, distances)

    def validate(self, core: int, distances: Optional[AvatarDistances] = None) -> ValidationReport:
        return _validate(self, core, distances)

    def is_avatar_graph(self, core: int, config: Optional[CheckConfig] = None) -> bool:
        return _is_avatar_graph(self, core, config)

    def corify(self, config: Optional[CheckConfig] = None) -> Dict[int, int]:
        return _corify(self, config)

    def __repr__(self) -> str:
        return f"AvatarGraph(nodes={self.node_count()}, edges={self.edge_count()})"
