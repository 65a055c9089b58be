"""
Weighted undirected graph with symmetric adjacency records.

This module provides the UndirectedGraph class. The graph maps every node to its
adjacency record, a mapping from neighbor to edge weight. Every edge is stored at
both endpoints, which keeps neighbor, degree and edge lookups at dictionary speed.

The central invariant is symmetry: whenever node A lists B with weight W, node B
lists A with the same weight W. The public API never breaks it. Operations that
read both records check it anyway and raise InternalInconsistencyError when the
records disagree; such an error means the graph was corrupted and is meant to be
caught by tests, not handled at runtime.

Destructive operations are two-phase: every edit is computed and validated first,
then applied. A failing operation therefore leaves the graph unchanged.
"""

import logging
from collections.abc import Mapping as MappingABC
from types import MappingProxyType
from typing import (
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
)

from .config import DEFAULT_CONFIG, GraphConfig
from .exceptions import (
    EdgeExistsError,
    EdgeNotFoundError,
    InternalInconsistencyError,
    NodeNotFoundError,
    TrivialEdgeError,
    ZeroWeightEdgeError,
)
from .traversal import TraversalVisitor
from .types import N, Weight

logger = logging.getLogger(__name__)

EMPTY_NEIGHBORS: Mapping = MappingProxyType({})

NeighborSpec = Union[Iterable, Mapping]


def format_node_set(nodes: Iterable) -> str:
    """
    Render a node collection in sorted order.

    Example:
        >>> format_node_set({3, 1, 2})
        '{ 1, 2, 3 }'
        >>> format_node_set(set())
        '{ }'
    """
    ordered = sorted(nodes)
    if not ordered:
        return "{ }"
    return "{ " + ", ".join(str(node) for node in ordered) + " }"


class UndirectedGraph(Generic[N]):
    """
    Mutable weighted undirected graph without loops or parallel edges.

    Nodes are arbitrary hashable values. Edges carry a positive integer weight,
    which defaults to the configured default weight (1).

    Attributes:
        _adjacency (Dict[N, Dict[N, int]]): Adjacency record of every node
        _config (GraphConfig): Behaviour settings shared with derived graphs
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Create an empty graph.

        Args:
            config (Optional[GraphConfig]): Graph settings (default: DEFAULT_CONFIG)
        """
        self._config = config if config is not None else DEFAULT_CONFIG
        self._adjacency: Dict[N, Dict[N, Weight]] = {}

    @property
    def config(self) -> GraphConfig:
        """Configuration of this graph."""
        return self._config

    def size(self) -> int:
        """Get the number of nodes."""
        return len(self._adjacency)

    def empty(self) -> bool:
        """Check whether the graph has no nodes."""
        return not self._adjacency

    def nodes(self) -> Set[N]:
        """Get a set with all the nodes of the graph."""
        return set(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[N]:
        return iter(self._adjacency)

    def __eq__(self, other: object) -> bool:
        """
        Compare two graphs by their adjacency mappings.

        This is not an isomorphism check: node labels and weights must match.
        """
        if not isinstance(other, UndirectedGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def _record(self, node: N) -> Dict[N, Weight]:
        """Get the adjacency record of a node or raise NodeNotFoundError."""
        try:
            return self._adjacency[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def _check_weight(self, n1: N, n2: N, weight: Weight) -> Weight:
        """Reject weights that are not positive integers."""
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise TypeError(f"Weight of edge '{n1}'-'{n2}' must be an integer, got {weight!r}")
        if weight <= 0:
            raise ZeroWeightEdgeError(n1, n2, weight)
        return weight

    def _resolve_weight(self, n1: N, n2: N, weight: Optional[Weight]) -> Weight:
        """Apply the default weight, then validate it."""
        if weight is None:
            return self._config.default_weight
        return self._check_weight(n1, n2, weight)

    def _corrupted(self, n1: N, n2: N) -> InternalInconsistencyError:
        """Build the error for an edge stored at n2 but not at n1."""
        message = f"Node '{n1}' doesn't have node '{n2}' in its adjacency list, but '{n2}' does"
        logger.error(message)
        return InternalInconsistencyError(message)

    def _edge_state(self, n1: N, n2: N) -> bool:
        """Tell whether the edge n1-n2 exists, checking both adjacency records."""
        r1 = self._record(n1)
        r2 = self._record(n2)
        n1_has_n2 = n2 in r1
        if not self._config.check_symmetry:
            return n1_has_n2
        n2_has_n1 = n1 in r2
        if n1_has_n2 != n2_has_n1:
            raise self._corrupted(n1, n2) if n2_has_n1 else self._corrupted(n2, n1)
        return n1_has_n2

    def degree(self, node: N) -> int:
        """
        Get the number of neighbors of a node.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        return len(self._record(node))

    def is_edge(self, n1: N, n2: N) -> bool:
        """
        Check whether an edge exists between two nodes.

        Raises:
            NodeNotFoundError: If either node is not in the graph
            InternalInconsistencyError: If the adjacency records disagree
        """
        return self._edge_state(n1, n2)

    def edge_weight(self, n1: N, n2: N) -> Weight:
        """
        Get the weight of the edge between two nodes.

        Raises:
            NodeNotFoundError: If either node is not in the graph
            EdgeNotFoundError: If there is no edge between the nodes
            InternalInconsistencyError: If the adjacency records disagree
        """
        if not self._edge_state(n1, n2):
            raise EdgeNotFoundError(n1, n2)
        weight = self._adjacency[n1][n2]
        if self._config.check_symmetry and self._adjacency[n2][n1] != weight:
            message = (
                f"Edge between '{n1}' and '{n2}' has weight {weight} at '{n1}' "
                f"but {self._adjacency[n2][n1]} at '{n2}'"
            )
            logger.error(message)
            raise InternalInconsistencyError(message)
        return weight

    def neighbors(self, node: N) -> Mapping[N, Weight]:
        """
        Get a read-only view of a node's adjacency record.

        The view maps every neighbor to the weight of the connecting edge and
        follows later changes to the graph. Iterating it yields the neighbors.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        return MappingProxyType(self._record(node))

    def edges(self) -> Iterator[Tuple[N, N, Weight]]:
        """Iterate over every edge once as (n1, n2, weight)."""
        seen: Set[N] = set()
        for node, record in self._adjacency.items():
            for neighbor, weight in record.items():
                if neighbor not in seen:
                    yield node, neighbor, weight
            seen.add(node)

    def edge_count(self) -> int:
        """Get the total number of edges."""
        return sum(len(record) for record in self._adjacency.values()) // 2

    def _normalize_neighbors(self, node: N, neighbors: Optional[NeighborSpec]) -> Dict[N, Weight]:
        """Turn a neighbor iterable or mapping into a validated neighbor-to-weight dict."""
        if neighbors is None:
            return {}
        if isinstance(neighbors, MappingABC):
            requested = dict(neighbors)
        else:
            requested = dict.fromkeys(neighbors)
        if node in requested:
            raise TrivialEdgeError(node)
        return {
            neighbor: self._resolve_weight(node, neighbor, weight)
            for neighbor, weight in requested.items()
        }

    def insert(self, node: N, neighbors: Optional[NeighborSpec] = None) -> None:
        """
        Insert a node, optionally connecting it to a set of neighbors.

        Neighbors that are not in the graph yet are created. If the node already
        exists, the new neighbors are merged into its adjacency record; edges that
        already exist keep their weight.

        Args:
            node: The node to insert
            neighbors: Iterable of neighbor nodes, or a mapping from neighbor to
                edge weight. Edges given as an iterable get the default weight.

        Raises:
            TrivialEdgeError: If node is among its own neighbors
            TypeError: If a mapping gives a weight that is not an integer
            ZeroWeightEdgeError: If a mapping gives a non-positive weight
        """
        requested = self._normalize_neighbors(node, neighbors)
        record = self._adjacency.setdefault(node, {})
        for neighbor, weight in requested.items():
            if neighbor in record:
                continue
            record[neighbor] = weight
            self._adjacency.setdefault(neighbor, {})[node] = weight

    def add_edge(self, n1: N, n2: N, weight: Optional[Weight] = None) -> None:
        """
        Add a new edge between two existing nodes.

        Args:
            n1: First endpoint
            n2: Second endpoint
            weight (Optional[int]): Edge weight (default: the configured default weight)

        Raises:
            TrivialEdgeError: If n1 == n2
            TypeError: If weight is not an integer
            ZeroWeightEdgeError: If weight is not positive
            NodeNotFoundError: If either node is not in the graph
            EdgeExistsError: If the edge already exists
            InternalInconsistencyError: If the adjacency records disagree
        """
        if n1 == n2:
            raise TrivialEdgeError(n1)
        weight = self._resolve_weight(n1, n2, weight)
        if self._edge_state(n1, n2):
            raise EdgeExistsError(n1, n2)
        self._adjacency[n1][n2] = weight
        self._adjacency[n2][n1] = weight

    def set_weight(self, n1: N, n2: N, weight: Weight) -> None:
        """
        Overwrite the weight of an existing edge at both endpoints.

        Raises:
            TrivialEdgeError: If n1 == n2
            TypeError: If weight is not an integer
            ZeroWeightEdgeError: If weight is not positive
            NodeNotFoundError: If either node is not in the graph
            EdgeNotFoundError: If there is no edge between the nodes
        """
        if n1 == n2:
            raise TrivialEdgeError(n1)
        weight = self._check_weight(n1, n2, weight)
        if not self._edge_state(n1, n2):
            raise EdgeNotFoundError(n1, n2)
        self._adjacency[n1][n2] = weight
        self._adjacency[n2][n1] = weight

    def remove(self, node: N) -> None:
        """
        Remove a node and all its edges.

        Every reciprocal entry is validated before anything is removed, so on
        failure the graph is left exactly as it was.

        Raises:
            NodeNotFoundError: If the node is not in the graph
            InternalInconsistencyError: If a neighbor does not list the node back,
                or lists it with another weight
        """
        record = self._record(node)
        for neighbor, weight in record.items():
            neighbor_record = self._adjacency.get(neighbor)
            if neighbor_record is None:
                message = f"The adjacency list of removed node '{node}' contains non-existent node '{neighbor}'"
            elif node not in neighbor_record:
                message = (
                    f"Adjacency list of removed node '{node}' contains node '{neighbor}' "
                    f"whose adjacency list doesn't contain '{node}'"
                )
            elif neighbor_record[node] != weight:
                message = f"Edge between '{node}' and '{neighbor}' has different weights at its endpoints"
            else:
                continue
            logger.error(message)
            raise InternalInconsistencyError(message, state_intact=True)

        for neighbor in record:
            del self._adjacency[neighbor][node]
        del self._adjacency[node]
        logger.debug(f"Removed node '{node}' and {len(record)} incident edges")

    def remove_edge(self, n1: N, n2: N) -> None:
        """
        Remove an existing edge.

        Raises:
            TrivialEdgeError: If n1 == n2
            NodeNotFoundError: If either node is not in the graph
            EdgeNotFoundError: If there is no edge between the nodes
            InternalInconsistencyError: If the adjacency records disagree
        """
        if n1 == n2:
            raise TrivialEdgeError(n1)
        r1 = self._record(n1)
        r2 = self._record(n2)
        n1_has_n2 = n2 in r1
        n2_has_n1 = n1 in r2
        if n1_has_n2 and n2_has_n1:
            del r1[n2]
            del r2[n1]
        elif not n1_has_n2 and not n2_has_n1:
            raise EdgeNotFoundError(n1, n2)
        elif n2_has_n1:
            raise self._corrupted(n1, n2)
        else:
            raise self._corrupted(n2, n1)

    def induced(self, nodes: Iterable[N]) -> "UndirectedGraph[N]":
        """
        Build the subgraph induced by a node set.

        Nodes that are not in this graph are ignored. The result is a new, plain
        UndirectedGraph holding the requested nodes and every edge of this graph
        whose endpoints are both requested, with its weight.

        Args:
            nodes (Iterable): The nodes to keep

        Returns:
            UndirectedGraph: The induced subgraph
        """
        kept = [node for node in dict.fromkeys(nodes) if node in self._adjacency]
        kept_set = set(kept)
        result: UndirectedGraph[N] = UndirectedGraph(config=self._config)
        for node in kept:
            record = self._adjacency[node]
            if len(record) <= len(kept_set):
                neighbors = {n: w for n, w in record.items() if n in kept_set}
            else:
                neighbors = {n: record[n] for n in kept_set if n in record}
            result._adjacency[node] = neighbors
        return result

    def copy(self) -> "UndirectedGraph[N]":
        """Get an independent copy of the graph."""
        result: UndirectedGraph[N] = UndirectedGraph(config=self._config)
        result._adjacency = {node: dict(record) for node, record in self._adjacency.items()}
        return result

    def connected_components(self) -> List[Set[N]]:
        """
        Partition the nodes into connected components.

        The components are computed with one full traversal (breadth first by
        default), starting a new group at every component boundary.

        Returns:
            List[Set]: One set of nodes per component, in no particular order
        """
        components: List[Set[N]] = []
        for step in TraversalVisitor(self, self._config.component_strategy):
            if step.new_component:
                components.append(set())
            components[-1].add(step.node)
        return components

    def __str__(self) -> str:
        return "\n".join(
            f"{node} -> {format_node_set(self._adjacency[node])}" for node in sorted(self._adjacency)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.size()}, edges={self.edge_count()})"
