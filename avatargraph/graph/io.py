"""JSON load/save for avatar graphs.

Documents follow ``GraphDocument``: ordered node records and ordered
``[parent, child]`` edges. Saving and loading preserves node and edge
insertion order, so a reloaded graph makes the same tie-breaks.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from ..errors import GraphDocumentError
from .core.manager import AvatarGraph
from .models.schema import GraphDocument, NodeRecord

logger = logging.getLogger("avatargraph.graph.io")


def graph_from_document(document: Union[GraphDocument, Dict[str, Any]]) -> AvatarGraph:
    """Build an AvatarGraph from a document or its parsed mapping.

    Raises:
        GraphDocumentError: If the mapping does not validate.
    """
    if not isinstance(document, GraphDocument):
        try:
            document = GraphDocument.model_validate(document)
        except ValidationError as exc:
            raise GraphDocumentError(f"Invalid graph document: {exc}") from exc

    graph = AvatarGraph()
    for record in document.nodes:
        attributes = record.model_dump(exclude={"id"}, exclude_none=True)
        graph.add_node(**attributes)
    for parent, child in document.edges:
        graph.add_edge(parent, child)

    logger.debug(
        "Built graph from document: %d nodes, %d edges",
        graph.node_count(),
        graph.edge_count(),
    )
    return graph


def graph_to_document(graph: AvatarGraph) -> GraphDocument:
    """Snapshot ``graph`` into a GraphDocument."""
    nodes = [
        NodeRecord(id=node, **graph.node_attributes(node)) for node in graph.nodes()
    ]
    return GraphDocument(nodes=nodes, edges=graph.edges())


def load_graph(path: Union[str, Path]) -> AvatarGraph:
    """Load a graph from a JSON file.

    Raises:
        GraphDocumentError: If the file is not valid JSON or not a valid
            graph document.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    logger.info("Loading graph from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise GraphDocumentError(f"{path}: not valid JSON: {exc}") from exc
    return graph_from_document(data)


def save_graph(graph: AvatarGraph, path: Union[str, Path]) -> None:
    """Write ``graph`` to ``path`` as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = graph_to_document(graph).model_dump(exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(
        "Graph saved to %s: %d nodes, %d edges",
        path,
        graph.node_count(),
        graph.edge_count(),
    )
