"""Force-directed layout for internal-link graphs.

The layout call itself is ``linkmap.layout.layout``.
"""

from linkmap.layout import (
    ForceLayoutConfig,
    ForceLayoutEngine,
    NodeSizing,
    get_node_radius,
    layout_graph,
    max_total_degree,
)
from linkmap.models import GraphEdge, GraphNode, LayoutMetadata, SimNode

__version__ = "0.1.0"

__all__ = [
    "layout_graph",
    "ForceLayoutConfig",
    "ForceLayoutEngine",
    "NodeSizing",
    "get_node_radius",
    "max_total_degree",
    "GraphNode",
    "GraphEdge",
    "SimNode",
    "LayoutMetadata",
]
