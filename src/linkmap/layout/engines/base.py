"""Base layout engine protocol.

Defines the interface that all layout engines must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Union

from linkmap.models.graph_metadata import GraphEdge, GraphNode, SimNode

NodeLike = Union[GraphNode, Mapping[str, Any]]
EdgeLike = Union[GraphEdge, Mapping[str, Any]]


class LayoutEngine(ABC):
    """Abstract base class for layout engines.

    Layout engines place every node of a link graph on a 2D canvas. They
    are synchronous and hold no state between calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'force')."""
        ...

    @abstractmethod
    def layout(
        self,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike],
        width: float,
        height: float,
    ) -> List[SimNode]:
        """Compute positions for a graph.

        Args:
            nodes: Graph nodes (records or plain dicts)
            edges: Graph edges (records or plain dicts)
            width: Canvas width
            height: Canvas height

        Returns:
            One SimNode per input node, in input order
        """
        ...


def coerce_nodes(nodes: Iterable[NodeLike]) -> List[GraphNode]:
    """Validate plain dicts into GraphNode records, keeping records as-is."""
    return [
        node if isinstance(node, GraphNode) else GraphNode.model_validate(node)
        for node in nodes
    ]


def coerce_edges(edges: Iterable[EdgeLike]) -> List[GraphEdge]:
    """Validate plain dicts into GraphEdge records, keeping records as-is."""
    return [
        edge if isinstance(edge, GraphEdge) else GraphEdge.model_validate(edge)
        for edge in edges
    ]
