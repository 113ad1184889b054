"""Configuration schema definitions using Pydantic for validation.

Using Pydantic ensures configuration errors are caught early with clear
error messages, before any graph is analysed.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class CheckConfig(BaseModel):
    """Options controlling what counts as an Avatar Graph.

    Attributes:
        cores: Core candidates to evaluate when searching for cores. ``None``
            evaluates every node.
        require_connected: Every node must be reachable from the core.
        require_unique_maximum: Exactly one node may sit at the maximal
            avatar distance, before any tie-break.
        fail_on_invalid: CLI exits non-zero when a checked graph is invalid.
    """

    cores: Optional[List[int]] = None
    require_connected: bool = True
    require_unique_maximum: bool = True
    fail_on_invalid: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("cores")
    @classmethod
    def validate_cores(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        """Node ids are non-negative; duplicates are dropped, order kept."""
        if v is None:
            return v
        seen = []
        for node in v:
            if node < 0:
                raise ValueError(f"Invalid core candidate id: {node}")
            if node not in seen:
                seen.append(node)
        return seen

    @classmethod
    def default(cls) -> "CheckConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
