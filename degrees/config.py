"""Graph settings: boundary behavior for traversal queries."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


# ── Constants ─────────────────────────────────────────────

# Returned by minimum_degree_of_separation when no path exists
UNREACHABLE = -1


# ── GraphConfig ───────────────────────────────────────────


@dataclass
class GraphConfig:
    """Settings for a SocialGraph.

    Attributes:
        empty_is_connected: Answer for is_fully_connected() on a graph with
            no people. When False the check raises EmptyGraph instead.
        unreachable_degree: Degree reported for two people with no path
            between them.
        max_chain_depth: Default hop limit for get_connection_chain().
            None means unbounded.
    """
    empty_is_connected: bool = True
    unreachable_degree: int = UNREACHABLE
    max_chain_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_chain_depth is not None and self.max_chain_depth < 0:
            raise ValueError(
                f"max_chain_depth must be >= 0, got {self.max_chain_depth}"
            )

    def to_dict(self) -> dict:
        return {
            "empty_is_connected": self.empty_is_connected,
            "unreachable_degree": self.unreachable_degree,
            "max_chain_depth": self.max_chain_depth,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> GraphConfig:
        """Build a config from a plain mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})
