"""Graph data models: result containers and the serialized document schema."""

from .results import (
    AvatarDistances,
    CheckResult,
    Edge,
    Invalid,
    MaxAvatars,
    Valid,
    ValidationReport,
    check_result,
)
from .schema import GraphDocument, NodeRecord

__all__ = [
    "AvatarDistances",
    "CheckResult",
    "Edge",
    "GraphDocument",
    "Invalid",
    "MaxAvatars",
    "NodeRecord",
    "Valid",
    "ValidationReport",
    "check_result",
]
