"""Core graph storage APIs."""

from .backend import GraphBackend, NetworkXBackend
from .manager import AvatarGraph

__all__ = [
    "AvatarGraph",
    "GraphBackend",
    "NetworkXBackend",
]
