"""Layout module for positioning internal-link graphs.

This module provides:
- Layout engine abstraction (LayoutEngine)
- Force-directed layout engine with injectable parameters
- Degree-based node sizing
- NetworkX adapter
"""

from typing import Iterable, List, Optional

from linkmap.layout.engines import ENGINES, get_engine
from linkmap.layout.engines.base import EdgeLike, LayoutEngine, NodeLike
from linkmap.layout.engines.force import ForceLayoutConfig, ForceLayoutEngine
from linkmap.layout.graph_adapter import graph_to_records, layout_graph
from linkmap.layout.sizing import NodeSizing, get_node_radius, max_total_degree
from linkmap.models.graph_metadata import SimNode


def layout(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    width: float,
    height: float,
    config: Optional[ForceLayoutConfig] = None,
) -> List[SimNode]:
    """Position a link graph with the force-directed engine.

    Args:
        nodes: Graph nodes
        edges: Graph edges
        width: Canvas width
        height: Canvas height
        config: Simulation parameters (environment settings if None)

    Returns:
        One SimNode per input node, in input order
    """
    engine = ForceLayoutEngine(config or ForceLayoutConfig.from_settings())
    return engine.layout(nodes, edges, width, height)


__all__ = [
    "layout",
    "LayoutEngine",
    "ForceLayoutConfig",
    "ForceLayoutEngine",
    "ENGINES",
    "get_engine",
    "NodeSizing",
    "get_node_radius",
    "max_total_degree",
    "graph_to_records",
    "layout_graph",
]
