"""
Undirected graph with online connected components.

IncrementalGraph only grows: nodes and edges can be added but never removed. In
exchange, its connected components are maintained on every insertion through a
disjoint-set structure, so component queries cost no traversal.
"""

from typing import List, Optional, Set

from .config import GraphConfig
from .disjoint_sets import DisjointSets
from .exceptions import NodeNotFoundError, NoSuchElementError, StructuralViolationError
from .graph import NeighborSpec, UndirectedGraph
from .types import N, Weight


class IncrementalGraph(UndirectedGraph[N]):
    """
    Grow-only undirected graph that tracks its connected components online.

    Every insert() and add_edge() registers new nodes in a DisjointSets instance
    and joins the sets of the endpoints it connects. Removing nodes or edges is
    rejected, since disjoint sets cannot be split.

    Example:
        >>> graph = IncrementalGraph()
        >>> graph.insert(1, {2})
        >>> graph.insert(3)
        >>> graph.same_component(1, 2), graph.same_component(1, 3)
        (True, False)
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config=config)
        self._components: DisjointSets[N] = DisjointSets()

    def _register(self, node: N) -> None:
        """Add a node to the disjoint sets if it is not tracked yet."""
        if node not in self._components:
            self._components.add(node)

    def insert(self, node: N, neighbors: Optional[NeighborSpec] = None) -> None:
        """Insert a node and merge its component with those of its new neighbors."""
        known = set(self._adjacency.get(node, ()))
        super().insert(node, neighbors)
        self._register(node)
        # Existing neighbors already share the node's component
        for neighbor in self._adjacency[node].keys() - known:
            self._register(neighbor)
            self._components.join(node, neighbor)

    def add_edge(self, n1: N, n2: N, weight: Optional[Weight] = None) -> None:
        """Add an edge and merge the components of its endpoints."""
        super().add_edge(n1, n2, weight)
        self._register(n1)
        self._register(n2)
        self._components.join(n1, n2)

    def remove(self, node: N) -> None:
        """
        Reject node removal.

        Raises:
            StructuralViolationError: Always
        """
        raise StructuralViolationError("remove node", "incremental graphs only grow")

    def remove_edge(self, n1: N, n2: N) -> None:
        """
        Reject edge removal.

        Raises:
            StructuralViolationError: Always
        """
        raise StructuralViolationError("remove edge", "incremental graphs only grow")

    def connected_components(self) -> List[Set[N]]:
        """Get a copy of every connected component, without traversing the graph."""
        return self._components.sets()

    def component_count(self) -> int:
        """Get the number of connected components."""
        return self._components.set_count()

    def same_component(self, n1: N, n2: N) -> bool:
        """
        Check whether two nodes are connected.

        Raises:
            NodeNotFoundError: If either node is not in the graph
        """
        try:
            return self._components.same_set(n1, n2)
        except NoSuchElementError as exc:
            raise NodeNotFoundError(exc.element) from exc

    def component(self, node: N) -> Set[N]:
        """
        Get the connected component of a node.

        The returned set is the live internal set. It is only valid until the next
        insert() or add_edge() call and must not be modified.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        try:
            return self._components.set(node)
        except NoSuchElementError as exc:
            raise NodeNotFoundError(exc.element) from exc

    def copy(self) -> "IncrementalGraph[N]":
        """Get an independent copy of the graph, components included."""
        result: IncrementalGraph[N] = IncrementalGraph(config=self._config)
        for node, record in self._adjacency.items():
            result.insert(node, record)
        return result
