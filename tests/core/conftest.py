"""Shared test fixtures."""

import pytest

from peelgraph.core.graph import UndirectedGraph
from peelgraph.core.incremental import IncrementalGraph


@pytest.fixture(params=[UndirectedGraph, IncrementalGraph], ids=["undirected", "incremental"])
def graph_class(request):
    """Fixture providing both graph types that share the insertion API."""
    return request.param


@pytest.fixture
def star_graph(graph_class):
    """Fixture providing node 0 connected to 1, 5 and 6."""
    graph = graph_class()
    graph.insert(0, {1, 5, 6})
    return graph


@pytest.fixture
def segmented_edges():
    """Fixture providing the insertions of a graph with two components."""
    return [
        (1, {4, 5, 2}),
        (4, {5, 3}),
        (5, {3}),
        (3, {2, 6}),
        (2, {6}),
        (7, {9, 8}),
    ]


@pytest.fixture
def segmented_graph(graph_class, segmented_edges):
    """Fixture providing a graph whose components are {1..6} and {7, 8, 9}."""
    graph = graph_class()
    for node, neighbors in segmented_edges:
        graph.insert(node, neighbors)
    return graph
