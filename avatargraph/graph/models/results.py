"""Result containers returned by the avatar graph algorithms.

Validation outcomes are data, not exceptions: a candidate graph can fail
several invariants at once and the caller usually wants all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

AvatarDistances = Dict[int, int]
Edge = Tuple[int, int]
Offender = Union[int, Edge]


@dataclass(frozen=True)
class Valid:
    """The invariant holds."""

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """The invariant is violated.

    Attributes:
        offenders: Offending nodes, or ``(parent, child)`` edges for the
            connectivity check, in node-index order.
    """

    offenders: Tuple[Offender, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return False


CheckResult = Union[Valid, Invalid]


def check_result(offenders: List[Offender]) -> CheckResult:
    """Wrap a list of offenders into ``Valid`` or ``Invalid``."""
    if offenders:
        return Invalid(tuple(offenders))
    return Valid()


@dataclass(frozen=True)
class ValidationReport:
    """Per-invariant outcome for one (graph, core candidate) pair."""

    core: int
    highest_avatar: int
    non_contractability: CheckResult
    avatar_connectivity: CheckResult
    universal_reachability: CheckResult

    @property
    def is_valid(self) -> bool:
        return (
            self.non_contractability.is_valid
            and self.avatar_connectivity.is_valid
            and self.universal_reachability.is_valid
        )

    def checks(self) -> Dict[str, CheckResult]:
        """Return the three results keyed by invariant name."""
        return {
            "non_contractability": self.non_contractability,
            "avatar_connectivity": self.avatar_connectivity,
            "universal_reachability": self.universal_reachability,
        }


@dataclass(frozen=True)
class MaxAvatars:
    """All nodes sharing the maximal avatar distance.

    Attributes:
        value: The maximal avatar distance.
        nodes: Nodes at that distance, in node-index order.
    """

    value: int
    nodes: Tuple[int, ...]

    @property
    def is_unique(self) -> bool:
        return len(self.nodes) == 1
