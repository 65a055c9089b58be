"""
Tests for detection of corrupted adjacency records.

The public API never breaks the symmetry invariant, so these tests corrupt the
private adjacency mapping directly.
"""

import pytest

from peelgraph.core.config import GraphConfig
from peelgraph.core.exceptions import IntegrityError, InternalInconsistencyError
from peelgraph.core.graph import UndirectedGraph


@pytest.fixture
def one_sided_graph():
    """Fixture providing a graph where 0 lists 1 but 1 does not list 0."""
    graph = UndirectedGraph()
    graph.insert(0, {1, 2})
    del graph._adjacency[1][0]
    return graph


def test_is_edge_detects_asymmetry(one_sided_graph):
    """Test that is_edge reports one-sided records in both argument orders."""
    with pytest.raises(InternalInconsistencyError):
        one_sided_graph.is_edge(0, 1)
    with pytest.raises(InternalInconsistencyError):
        one_sided_graph.is_edge(1, 0)
    assert one_sided_graph.is_edge(0, 2)


def test_symmetry_check_can_be_disabled(one_sided_graph):
    """Test that the reciprocal check follows the configuration."""
    graph = UndirectedGraph(config=GraphConfig(check_symmetry=False))
    graph._adjacency = one_sided_graph._adjacency
    assert graph.is_edge(0, 1)
    assert not graph.is_edge(1, 0)


def test_edge_weight_detects_weight_mismatch():
    """Test that different weights at both endpoints are reported."""
    graph = UndirectedGraph()
    graph.insert(0, {1: 3})
    graph._adjacency[1][0] = 4
    with pytest.raises(InternalInconsistencyError):
        graph.edge_weight(0, 1)


def test_add_edge_detects_asymmetry(one_sided_graph):
    """Test that add_edge refuses to build on a one-sided record."""
    with pytest.raises(InternalInconsistencyError):
        one_sided_graph.add_edge(1, 0)


def test_remove_edge_detects_asymmetry(one_sided_graph):
    """Test that remove_edge reports one-sided records without changing them."""
    with pytest.raises(InternalInconsistencyError):
        one_sided_graph.remove_edge(0, 1)
    assert 1 in one_sided_graph._adjacency[0]


def test_remove_node_leaves_graph_intact(one_sided_graph):
    """Test that a failed node removal changes nothing."""
    before = {node: dict(record) for node, record in one_sided_graph._adjacency.items()}
    with pytest.raises(InternalInconsistencyError) as exc_info:
        one_sided_graph.remove(0)
    assert exc_info.value.state_intact
    assert one_sided_graph._adjacency == before


def test_remove_node_dangling_neighbor():
    """Test that a neighbor missing from the graph is reported."""
    graph = UndirectedGraph()
    graph.insert(0, {1, 2})
    del graph._adjacency[2]
    with pytest.raises(InternalInconsistencyError, match="non-existent node"):
        graph.remove(0)
    assert set(graph.neighbors(1)) == {0}


def test_integrity_error_message():
    """Test integrity error message formatting."""
    error = IntegrityError("test message")
    assert str(error) == "Integrity Error: test message"
    assert error.state_intact
    assert not IntegrityError("partial", state_intact=False).state_intact


def test_integrity_errors_are_logged(one_sided_graph, caplog):
    """Test that integrity faults are logged before being raised."""
    with caplog.at_level("ERROR", logger="peelgraph.core.graph"):
        with pytest.raises(InternalInconsistencyError):
            one_sided_graph.is_edge(0, 1)
    assert any("adjacency list" in record.message for record in caplog.records)
