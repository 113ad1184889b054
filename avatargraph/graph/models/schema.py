"""Serialized graph document schema.

Graph files are JSON documents validated with Pydantic before any node or
edge reaches an ``AvatarGraph``:

    {"nodes": [{"id": 0, "label": "core"}, {"id": 1}], "edges": [[1, 0]]}
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("avatargraph.graph.models.schema")


class NodeRecord(BaseModel):
    """One node entry of a graph document."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(ge=0)
    label: Optional[str] = None


class GraphDocument(BaseModel):
    """Full graph document: ordered nodes and ordered ``[parent, child]`` edges.

    Order is significant. Node ids must be ``0..n-1`` in list order and edges
    are replayed in list order, which fixes every tie-break the algorithms
    make.
    """

    model_config = ConfigDict(extra="forbid")

    nodes: List[NodeRecord] = Field(default_factory=list)
    edges: List[Tuple[int, int]] = Field(default_factory=list)

    @field_validator("nodes")
    @classmethod
    def validate_node_order(cls, v: List[NodeRecord]) -> List[NodeRecord]:
        """Node ids must match their position in the list."""
        for index, record in enumerate(v):
            if record.id != index:
                raise ValueError(
                    f"Node ids must be contiguous from 0; found id {record.id} at position {index}"
                )
        return v

    @model_validator(mode="after")
    def validate_edges(self) -> "GraphDocument":
        """Reject edges that reference missing nodes or loop on themselves."""
        count = len(self.nodes)
        for parent, child in self.edges:
            if not (0 <= parent < count and 0 <= child < count):
                raise ValueError(f"Edge [{parent}, {child}] references an unknown node")
            if parent == child:
                raise ValueError(f"Self-loop on node {parent} is not allowed")
        return self
