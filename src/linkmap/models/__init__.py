"""Data models for link-graph layout.

Graph records (nodes, edges, positioned nodes) and the layout metadata
envelope a finished layout is returned in.
"""

from .graph_metadata import (
    GraphNode,
    GraphEdge,
    SimNode,
)
from .layout_metadata import (
    NodePosition,
    BoundingBox,
    LayoutMetadata,
)

__all__ = [
    # Graph records
    "GraphNode",
    "GraphEdge",
    "SimNode",

    # Layout metadata
    "NodePosition",
    "BoundingBox",
    "LayoutMetadata",
]
