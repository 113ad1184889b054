"""Graph backend abstraction layer.

Wraps NetworkX for easy backend replacement in the future. Edges carry a
``seq`` attribute so that per-node child order is the exact insertion order,
duplicates included, independent of how the native graph groups parallel
edges.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import networkx as nx

from ...utils.ordering import distinct_in_order

logger = logging.getLogger("avatargraph.graph.core.backend")


class GraphBackend(ABC):
    """Abstract graph backend protocol.

    Nodes are integer indices handed out by the caller in creation order.
    Implementations must preserve node insertion order and edge insertion
    order per source node.
    """

    @abstractmethod
    def add_node(self, node_id: int, **attributes: Any) -> None:
        """Add node to graph."""
        pass

    @abstractmethod
    def add_edge(self, source: int, target: int, seq: int) -> None:
        """Add edge to graph with its global insertion sequence number."""
        pass

    @abstractmethod
    def has_node(self, node_id: int) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def get_node_data(self, node_id: int) -> Optional[Dict[str, Any]]:
        """Get node attributes."""
        pass

    @abstractmethod
    def nodes(self) -> List[int]:
        """List nodes in insertion order."""
        pass

    @abstractmethod
    def edges(self) -> List[tuple]:
        """List ``(source, target)`` pairs in global insertion order."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def edge_count(self) -> int:
        """Get number of edges."""
        pass

    @abstractmethod
    def successors(self, node_id: int) -> List[int]:
        """Get edge targets of a node in insertion order, duplicates kept."""
        pass

    @abstractmethod
    def predecessors(self, node_id: int) -> List[int]:
        """Get distinct edge sources of a node in insertion order."""
        pass

    @abstractmethod
    def undirected_view(self) -> Any:
        """Return a read-only view that ignores edge direction."""
        pass


class NetworkXBackend(GraphBackend):
    """NetworkX-based in-memory graph backend.

    This is the default implementation used for analysis.
    """

    def __init__(self) -> None:
        """Initialize backend with NetworkX MultiDiGraph."""
        self._graph = nx.MultiDiGraph()
        logger.debug("NetworkXBackend initialized")

    def add_node(self, node_id: int, **attributes: Any) -> None:
        self._graph.add_node(node_id, **attributes)

    def add_edge(self, source: int, target: int, seq: int) -> None:
        self._graph.add_edge(source, target, seq=seq)

    def has_node(self, node_id: int) -> bool:
        return self._graph.has_node(node_id)

    def get_node_data(self, node_id: int) -> Optional[Dict[str, Any]]:
        return self._graph.nodes.get(node_id)

    def nodes(self) -> List[int]:
        return list(self._graph.nodes)

    def edges(self) -> List[tuple]:
        ordered = sorted(self._graph.edges(data="seq"), key=lambda edge: edge[2])
        return [(source, target) for source, target, _seq in ordered]

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def successors(self, node_id: int) -> List[int]:
        # MultiDiGraph groups parallel edges by target; seq restores the
        # order in which the edges were actually added.
        out_edges = self._graph.out_edges(node_id, data="seq")
        return [target for _src, target, _seq in sorted(out_edges, key=lambda e: e[2])]

    def predecessors(self, node_id: int) -> List[int]:
        in_edges = sorted(self._graph.in_edges(node_id, data="seq"), key=lambda e: e[2])
        return distinct_in_order(source for source, _dst, _seq in in_edges)

    def undirected_view(self) -> nx.MultiGraph:
        return self._graph.to_undirected(as_view=True)
