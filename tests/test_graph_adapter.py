"""Tests for the NetworkX adapter."""

import networkx as nx

from linkmap.layout.engines.force import ForceLayoutConfig, ForceLayoutEngine
from linkmap.layout.graph_adapter import graph_to_records, layout_graph


def site_graph():
    graph = nx.DiGraph()
    graph.add_node("home", title="Home", collection="pages")
    graph.add_node("blog", title="Blog", collection="pages")
    graph.add_node("post", title="Post", collection="posts")
    graph.add_edge("home", "blog", anchorText="Blog")
    graph.add_edge("blog", "post")
    graph.add_edge("post", "home")
    graph.add_edge("home", "post")
    return graph


class TestGraphToRecords:
    """Test conversion of NetworkX graphs to records."""

    def test_nodes_and_edges(self):
        """Test node metadata and edges carried over."""
        nodes, edges = graph_to_records(site_graph())
        assert [n.id for n in nodes] == ["home", "blog", "post"]
        assert nodes[0].title == "Home"
        assert len(edges) == 4
        assert edges[0].source == "home"
        assert edges[0].anchor_text == "Blog"

    def test_degrees_from_graph(self):
        """Test degrees taken from the directed graph."""
        nodes, _ = graph_to_records(site_graph())
        home = nodes[0]
        assert home.in_degree == 1
        assert home.out_degree == 2

    def test_degree_attributes_win(self):
        """Test degrees supplied by the data source are kept."""
        graph = nx.DiGraph()
        graph.add_node("a", inDegree=7, outDegree=1)
        nodes, _ = graph_to_records(graph)
        assert nodes[0].in_degree == 7

    def test_undirected_degree(self):
        """Test undirected degree reported as out_degree."""
        graph = nx.Graph()
        graph.add_edge(1, 2)
        graph.add_edge(1, 3)
        nodes, edges = graph_to_records(graph)
        assert nodes[0].id == "1"
        assert nodes[0].total_degree == 2
        assert edges[0].target == "2"


class TestLayoutGraph:
    """Test laying out NetworkX graphs."""

    def test_layout_graph(self):
        """Test every node gets an in-bounds position."""
        layout = layout_graph(site_graph(), 600, 400)
        assert layout.algorithm == "force"
        assert set(layout.positions) == {"home", "blog", "post"}
        for pos in layout.positions.values():
            assert 30 <= pos.x <= 570
            assert 30 <= pos.y <= 370
        assert layout.layout_options["iterations"] == 120

    def test_apply_writes_positions(self):
        """Test positions written back to the graph on request."""
        graph = site_graph()
        layout = layout_graph(graph, 600, 400, apply=True)
        assert graph.nodes["post"]["pos"] == layout.positions["post"].to_list()

    def test_custom_engine(self):
        """Test custom engine parameters are recorded."""
        engine = ForceLayoutEngine(ForceLayoutConfig(iterations=5))
        layout = layout_graph(site_graph(), 600, 400, engine=engine)
        assert layout.layout_options["iterations"] == 5

    def test_deterministic_etag(self):
        """Test repeated layouts of the same graph share an etag."""
        assert layout_graph(site_graph(), 600, 400).etag == layout_graph(site_graph(), 600, 400).etag

    def test_apply_with_integer_keys(self, caplog):
        """Test positions written back to graphs keyed by non-string IDs."""
        graph = nx.path_graph(3, create_using=nx.DiGraph)
        layout = layout_graph(graph, 600, 400, apply=True)
        for key in (0, 1, 2):
            assert graph.nodes[key]["pos"] == layout.positions[str(key)].to_list()
        assert "not in graph" not in caplog.text
