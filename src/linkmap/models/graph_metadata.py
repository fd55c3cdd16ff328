"""Graph records exchanged with the link-graph data source and renderer.

The data source supplies pages/posts as ``GraphNode`` records and internal
hyperlinks as ``GraphEdge`` records. The layout engine returns ``SimNode``
records, which are the input nodes extended with a position and a velocity.

These schemas are permissive: any metadata the data source attaches
(title, collection, slug, orphan/hub flags) is carried through unchanged so
the renderer receives exactly what it sent.

Example payload from the link-graph endpoint:
    {
        "id": "pages:12",
        "title": "Pricing",
        "collection": "pages",
        "inDegree": 4,
        "outDegree": 9,
        "isOrphan": false,
        "isHub": false
    }
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class GraphNode(BaseModel):
    """A content page in the internal-link graph.

    Attributes:
        id: Unique node identifier
        in_degree: Number of incoming links (alias ``inDegree``)
        out_degree: Number of outgoing links (alias ``outDegree``)
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: str = Field(..., description="Unique node identifier")
    in_degree: int = Field(
        default=0, ge=0, alias="inDegree", description="Incoming link count"
    )
    out_degree: int = Field(
        default=0, ge=0, alias="outDegree", description="Outgoing link count"
    )

    @property
    def total_degree(self) -> int:
        """Sum of incoming and outgoing links."""
        return self.in_degree + self.out_degree

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Export with the data source's key names and sorted keys."""
        data = self.model_dump(by_alias=True, exclude_none=exclude_none)
        return dict(sorted(data.items()))


class GraphEdge(BaseModel):
    """An internal hyperlink from ``source`` to ``target``.

    Self-loops and repeated pairs are legal.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    source: str = Field(..., description="Source node ID")
    target: str = Field(..., description="Target node ID")
    anchor_text: Optional[str] = Field(
        default=None, alias="anchorText", description="Link anchor text"
    )

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Export with the data source's key names and sorted keys."""
        data = self.model_dump(by_alias=True, exclude_none=exclude_none)
        return dict(sorted(data.items()))


class SimNode(GraphNode):
    """A ``GraphNode`` positioned by the layout engine.

    Attributes:
        x: Horizontal canvas coordinate
        y: Vertical canvas coordinate
        vx: Final horizontal velocity
        vy: Final vertical velocity
    """

    x: float = Field(..., description="Horizontal canvas coordinate")
    y: float = Field(..., description="Vertical canvas coordinate")
    vx: float = Field(default=0.0, description="Final horizontal velocity")
    vy: float = Field(default=0.0, description="Final vertical velocity")

    @classmethod
    def from_node(
        cls,
        node: GraphNode,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
    ) -> "SimNode":
        """Extend a node with simulation state, keeping all of its metadata.

        Args:
            node: Source node (declared and extra fields are copied)
            x: Horizontal position
            y: Vertical position
            vx: Horizontal velocity
            vy: Vertical velocity

        Returns:
            SimNode instance
        """
        # Shallow copy keeps nested metadata objects as they are
        data = dict(node)
        data.update(node.model_extra or {})
        data.update(x=x, y=y, vx=vx, vy=vy)
        return cls.model_validate(data)


__all__ = [
    "GraphNode",
    "GraphEdge",
    "SimNode",
]
