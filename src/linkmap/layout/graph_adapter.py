"""NetworkX adapter for the layout engines.

Lets callers that already hold the link graph as a ``networkx.DiGraph`` lay
it out without building node and edge records by hand.
"""

import logging
from typing import List, Optional, Tuple

import networkx as nx

from linkmap.layout.engines.base import LayoutEngine
from linkmap.layout.engines.force import ForceLayoutEngine
from linkmap.models.graph_metadata import GraphEdge, GraphNode
from linkmap.models.layout_metadata import LayoutMetadata

logger = logging.getLogger(__name__)


def graph_to_records(graph: nx.Graph) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """Convert a NetworkX graph to node and edge records.

    Node and edge attributes become record metadata. Node IDs are the
    string form of the NetworkX node keys. Degrees come from the node
    attributes when present (``inDegree``/``outDegree``), else from the
    graph; undirected graphs report each node's degree as ``out_degree``.

    Args:
        graph: NetworkX graph

    Returns:
        (nodes, edges) in graph iteration order
    """
    directed = graph.is_directed()

    nodes = []
    for node_id, attrs in graph.nodes(data=True):
        data = dict(attrs)
        data["id"] = str(node_id)
        if directed:
            data.setdefault("inDegree", graph.in_degree(node_id))
            data.setdefault("outDegree", graph.out_degree(node_id))
        else:
            data.setdefault("inDegree", 0)
            data.setdefault("outDegree", graph.degree(node_id))
        nodes.append(GraphNode.model_validate(data))

    edges = []
    for source, target, attrs in graph.edges(data=True):
        data = dict(attrs)
        data["source"] = str(source)
        data["target"] = str(target)
        edges.append(GraphEdge.model_validate(data))

    return nodes, edges


def layout_graph(
    graph: nx.Graph,
    width: float,
    height: float,
    engine: Optional[LayoutEngine] = None,
    apply: bool = False,
) -> LayoutMetadata:
    """Lay out a NetworkX graph.

    Args:
        graph: NetworkX graph
        width: Canvas width
        height: Canvas height
        engine: Layout engine (ForceLayoutEngine with defaults if None)
        apply: If True, also write 'pos' attributes back to the graph

    Returns:
        LayoutMetadata keyed by string node IDs
    """
    engine = engine or ForceLayoutEngine()
    nodes, edges = graph_to_records(graph)
    sim_nodes = engine.layout(nodes, edges, width, height)

    options = {}
    if isinstance(engine, ForceLayoutEngine):
        options = engine.config.model_dump(exclude_none=True)

    layout = LayoutMetadata.from_sim_nodes(
        sim_nodes,
        algorithm=engine.name,
        canvas_size=(width, height),
        layout_options=options,
    )

    if apply:
        keys = {str(key): key for key in graph.nodes}
        for node_id, position in layout.positions.items():
            graph.nodes[keys[node_id]]['pos'] = position.to_list()

    logger.info(f"Laid out {len(sim_nodes)} nodes with '{engine.name}' engine")
    return layout
