"""Degree-based node sizing.

Hubs are drawn larger than leaf pages: a node's radius grows linearly with
its total degree, from ``min_radius`` for unlinked pages to ``max_radius``
for the best-linked page of the graph. Sizing does not affect positions.
"""

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from linkmap.config.settings import sizing_overrides
from linkmap.models.graph_metadata import GraphNode


class NodeSizing(BaseModel):
    """Radius range for rendered nodes."""

    model_config = ConfigDict(frozen=True)

    min_radius: float = Field(default=5.0, ge=0, description="Radius at degree 0")
    max_radius: float = Field(default=20.0, ge=0, description="Radius at max degree")

    @model_validator(mode="after")
    def validate_range(self) -> "NodeSizing":
        if self.max_radius < self.min_radius:
            raise ValueError(
                f"max_radius ({self.max_radius}) must not be smaller than "
                f"min_radius ({self.min_radius})"
            )
        return self

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "NodeSizing":
        """Build sizing from environment settings; kwargs take precedence."""
        return cls(**{**sizing_overrides(), **kwargs})


def max_total_degree(nodes: Iterable[GraphNode]) -> int:
    """Largest ``in_degree + out_degree`` over ``nodes`` (0 when empty)."""
    return max((node.total_degree for node in nodes), default=0)


def get_node_radius(
    node: GraphNode,
    max_degree: int,
    sizing: Optional[NodeSizing] = None,
) -> float:
    """Radius of ``node`` interpolated between the sizing bounds.

    Args:
        node: Node to size
        max_degree: Largest total degree in the graph
        sizing: Radius range (defaults if None)

    Returns:
        ``min_radius`` when the graph has no links, otherwise
        ``min_radius + (max_radius - min_radius) * degree / max_degree``
    """
    sizing = sizing or NodeSizing()
    if max_degree <= 0:
        return sizing.min_radius

    ratio = node.total_degree / max_degree
    return sizing.min_radius + (sizing.max_radius - sizing.min_radius) * ratio
