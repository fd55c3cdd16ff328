"""Layout metadata for positioned link graphs.

This module provides the envelope a finished layout is handed over in:
- Node positions (x, y canvas coordinates) keyed by node ID
- The canvas the positions were computed for
- A bounding box over all positions
- A content etag, so callers can compare two layouts without walking them

Coordinates use the renderer's convention: top-left origin, y grows
downwards, units are SVG user units.
"""

import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from linkmap.models.graph_metadata import SimNode

logger = logging.getLogger(__name__)


class NodePosition(BaseModel):
    """Position of a single node on the canvas.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

    @classmethod
    def from_list(cls, pos: List[float]) -> "NodePosition":
        """Create NodePosition from [x, y] list.

        Raises:
            ValueError: If pos doesn't have exactly 2 elements
        """
        if len(pos) != 2:
            raise ValueError(f"Position must be [x, y], got {len(pos)} elements")
        return cls(x=pos[0], y=pos[1])

    def to_list(self) -> List[float]:
        return [self.x, self.y]


class BoundingBox(BaseModel):
    """Bounding box around a set of positions."""

    min_x: float = Field(..., description="Minimum x coordinate")
    max_x: float = Field(..., description="Maximum x coordinate")
    min_y: float = Field(..., description="Minimum y coordinate")
    max_y: float = Field(..., description="Maximum y coordinate")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )

    @classmethod
    def from_positions(cls, positions: Dict[str, NodePosition]) -> "BoundingBox":
        """Compute bounding box from node positions.

        Args:
            positions: Dictionary of node_id -> NodePosition

        Returns:
            BoundingBox encompassing all positions

        Raises:
            ValueError: If positions is empty
        """
        if not positions:
            raise ValueError("Cannot compute bounding box from empty positions")

        x_coords = [pos.x for pos in positions.values()]
        y_coords = [pos.y for pos in positions.values()]

        return cls(
            min_x=min(x_coords),
            max_x=max(x_coords),
            min_y=min(y_coords),
            max_y=max(y_coords)
        )


class LayoutMetadata(BaseModel):
    """Positions computed for one layout request.

    Attributes:
        algorithm: Layout engine name (e.g. 'force')
        layout_options: Engine parameters the layout was computed with
        positions: Dictionary of node_id -> NodePosition
        canvas_size: Canvas dimensions (width, height)
        bounding_box: Bounding box over positions (auto-computed)
        etag: SHA-256 over the canonical content (auto-computed)
        created_at: ISO 8601 timestamp, not part of the etag
    """

    algorithm: str = Field(..., description="Layout engine name")
    layout_options: Dict[str, Any] = Field(
        default_factory=dict, description="Engine parameters"
    )
    positions: Dict[str, NodePosition] = Field(
        default_factory=dict, description="Node positions keyed by node ID"
    )
    canvas_size: Tuple[float, float] = Field(
        ..., description="Canvas dimensions (width, height)"
    )
    bounding_box: Optional[BoundingBox] = Field(
        default=None, description="Bounding box (auto-computed if not provided)"
    )
    etag: Optional[str] = Field(
        default=None, description="SHA-256 hash of the layout content"
    )
    created_at: Optional[str] = Field(
        default=None, description="ISO 8601 creation timestamp"
    )

    def model_post_init(self, __context) -> None:
        """Compute bounding box, timestamp and etag if not provided."""
        if self.bounding_box is None and self.positions:
            object.__setattr__(
                self, "bounding_box", BoundingBox.from_positions(self.positions)
            )

        if self.created_at is None:
            object.__setattr__(
                self, "created_at", datetime.now(timezone.utc).isoformat()
            )

        if self.etag is None:
            object.__setattr__(self, "etag", self.compute_etag())

    def compute_etag(self) -> str:
        """Compute SHA-256 etag from canonical content (excludes timestamps).

        Returns:
            64-character hex string
        """
        canonical = {
            "algorithm": self.algorithm,
            "canvas_size": list(self.canvas_size),
            "layout_options": dict(sorted(self.layout_options.items())),
            "positions": {
                k: v.to_list() for k, v in sorted(self.positions.items())
            },
        }
        canonical_json = json.dumps(canonical, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical_json.encode()).hexdigest()

    @classmethod
    def from_sim_nodes(
        cls,
        nodes: Sequence[SimNode],
        algorithm: str,
        canvas_size: Tuple[float, float],
        layout_options: Optional[Dict[str, Any]] = None,
    ) -> "LayoutMetadata":
        """Collect the positions of laid-out nodes.

        Args:
            nodes: Output of a layout engine
            algorithm: Engine name to record
            canvas_size: Canvas the layout was computed for
            layout_options: Engine parameters to record

        Returns:
            LayoutMetadata instance
        """
        positions = {node.id: NodePosition(x=node.x, y=node.y) for node in nodes}
        return cls(
            algorithm=algorithm,
            layout_options=layout_options or {},
            positions=positions,
            canvas_size=canvas_size,
        )

    def apply_to_networkx_graph(self, graph) -> None:
        """Write positions to a NetworkX graph as 'pos' attributes.

        Only nodes present in both the layout and the graph are updated;
        a warning is logged for the rest.
        """
        for node_id, position in self.positions.items():
            if node_id not in graph.nodes:
                logger.warning(f"Layout has position for {node_id} but node not in graph")
                continue

            graph.nodes[node_id]['pos'] = position.to_list()

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Export to dict with deterministic key ordering."""
        data = self.model_dump(exclude_none=exclude_none)

        if 'positions' in data:
            data['positions'] = {
                node_id: [pos_data['x'], pos_data['y']]
                for node_id, pos_data in sorted(data['positions'].items())
            }

        return dict(sorted(data.items()))


__all__ = [
    "NodePosition",
    "BoundingBox",
    "LayoutMetadata",
]
