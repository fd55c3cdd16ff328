"""Tests for the layout metadata envelope."""

import json

import networkx as nx
import pytest

from linkmap.models.graph_metadata import GraphNode, SimNode
from linkmap.models.layout_metadata import BoundingBox, LayoutMetadata, NodePosition


def sim(node_id, x, y):
    return SimNode.from_node(GraphNode(id=node_id), x=x, y=y)


class TestNodePosition:
    """Test NodePosition model."""

    def test_from_list(self):
        """Test creating from [x, y] list."""
        pos = NodePosition.from_list([100.0, 200.0])
        assert pos.x == 100.0
        assert pos.y == 200.0

    def test_from_list_invalid_length(self):
        """Test that invalid list length raises error."""
        with pytest.raises(ValueError, match="must be \\[x, y\\]"):
            NodePosition.from_list([100.0])

    def test_to_list(self):
        """Test converting position to list."""
        assert NodePosition(x=1.5, y=2.5).to_list() == [1.5, 2.5]


class TestBoundingBox:
    """Test BoundingBox model."""

    def test_from_positions(self):
        """Test computing bounding box from positions."""
        bbox = BoundingBox.from_positions({
            "a": NodePosition(x=30, y=50),
            "b": NodePosition(x=130, y=250),
        })
        assert bbox.width == 100
        assert bbox.height == 200
        assert bbox.center == (80, 150)

    def test_from_empty_positions(self):
        """Test empty positions raise error."""
        with pytest.raises(ValueError, match="empty positions"):
            BoundingBox.from_positions({})


class TestLayoutMetadata:
    """Test LayoutMetadata envelope."""

    def test_from_sim_nodes(self):
        """Test collecting positions from laid-out nodes."""
        layout = LayoutMetadata.from_sim_nodes(
            [sim("a", 40, 60), sim("b", 200, 100)],
            algorithm="force",
            canvas_size=(600, 400),
            layout_options={"iterations": 120},
        )
        assert layout.algorithm == "force"
        assert layout.positions["b"].to_list() == [200, 100]
        assert layout.canvas_size == (600.0, 400.0)
        assert layout.bounding_box.min_x == 40
        assert layout.bounding_box.max_y == 100
        assert layout.created_at is not None

    def test_empty_layout(self):
        """Test an empty graph gives an empty envelope without bounding box."""
        layout = LayoutMetadata.from_sim_nodes([], algorithm="force", canvas_size=(600, 400))
        assert layout.positions == {}
        assert layout.bounding_box is None
        assert layout.etag is not None

    def test_etag_stable(self):
        """Test same content gives same etag regardless of timestamps."""
        first = LayoutMetadata.from_sim_nodes([sim("a", 1, 2)], "force", (600, 400))
        second = LayoutMetadata.from_sim_nodes([sim("a", 1, 2)], "force", (600, 400))
        assert first.etag == second.etag
        assert len(first.etag) == 64

    def test_etag_changes_with_content(self):
        """Test etag changes when a position changes."""
        first = LayoutMetadata.from_sim_nodes([sim("a", 1, 2)], "force", (600, 400))
        second = LayoutMetadata.from_sim_nodes([sim("a", 1, 3)], "force", (600, 400))
        assert first.etag != second.etag

    def test_etag_changes_with_canvas(self):
        """Test etag covers the canvas size."""
        first = LayoutMetadata.from_sim_nodes([sim("a", 1, 2)], "force", (600, 400))
        second = LayoutMetadata.from_sim_nodes([sim("a", 1, 2)], "force", (800, 400))
        assert first.etag != second.etag

    def test_apply_to_networkx_graph(self, caplog):
        """Test positions written as 'pos' attributes, unknown nodes warned about."""
        graph = nx.DiGraph()
        graph.add_node("a")
        layout = LayoutMetadata.from_sim_nodes(
            [sim("a", 10, 20), sim("ghost", 5, 5)], "force", (600, 400)
        )
        layout.apply_to_networkx_graph(graph)
        assert graph.nodes["a"]["pos"] == [10, 20]
        assert "ghost" not in graph.nodes
        assert "ghost" in caplog.text

    def test_to_dict_deterministic(self):
        """Test to_dict produces sorted, list-based positions."""
        layout = LayoutMetadata.from_sim_nodes(
            [sim("b", 3, 4), sim("a", 1, 2)], "force", (600, 400)
        )
        data = layout.to_dict()
        assert list(data["positions"].keys()) == ["a", "b"]
        assert data["positions"]["a"] == [1, 2]
        assert list(data.keys()) == sorted(data.keys())
        json.dumps(data)
