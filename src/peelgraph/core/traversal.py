"""
Whole-graph traversal with component boundaries.

A traversal visits every node of a graph exactly once, one connected component
after another. Each call to TraversalVisitor.next() returns the next node together
with a flag telling whether that node opened a new component, which happens exactly
when the frontier ran dry and the node was picked from the remaining nodes.

The two strategies only differ in how the frontier orders not-yet-visited
neighbors:

- Breadth first: a FIFO queue. Unvisited neighbors of the node just emitted are
  appended to the back.
- Depth first: a LIFO stack. Neighbors of the node just emitted are pushed, then
  entries are popped until an unvisited node is found, dropping stale entries.

A single driver serves both strategies; the strategy selects the function that
pushes the next candidates.

The visitor works over anything exposing nodes() and neighbors(node). The graph
must not be mutated while a visitor built over it is still in use.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Deque, Dict, Generic, Hashable, Iterator, List, Optional

from .types import N, GraphProtocol


class TraversalStrategy(Enum):
    """Frontier discipline of a traversal."""

    BREADTH_FIRST = auto()
    DEPTH_FIRST = auto()


@dataclass(frozen=True)
class TraversalStep(Generic[N]):
    """
    One element of a traversal.

    Attributes:
        node: The visited node
        new_component (bool): True when this node is the first of its connected component
    """

    node: N
    new_component: bool


@dataclass
class _TraversalCursor:
    """Per-traversal state: emitted order, pending frontier and unvisited nodes."""

    graph: GraphProtocol
    remaining: Dict[Hashable, None]
    order: List[Hashable] = field(default_factory=list)
    position: int = 0
    stack: Deque[Hashable] = field(default_factory=deque)


def _push_breadth_first(cursor: _TraversalCursor, node: Hashable) -> None:
    """Queue every unvisited neighbor of node."""
    for neighbor in cursor.graph.neighbors(node):
        if neighbor in cursor.remaining:
            del cursor.remaining[neighbor]
            cursor.order.append(neighbor)


def _push_depth_first(cursor: _TraversalCursor, node: Hashable) -> None:
    """Stack the neighbors of node and schedule the first unvisited one on top."""
    cursor.stack.extend(cursor.graph.neighbors(node))
    while cursor.stack:
        candidate = cursor.stack.pop()
        if candidate in cursor.remaining:
            del cursor.remaining[candidate]
            cursor.order.append(candidate)
            return


_PUSH_STRATEGIES: Dict[TraversalStrategy, Callable[[_TraversalCursor, Hashable], None]] = {
    TraversalStrategy.BREADTH_FIRST: _push_breadth_first,
    TraversalStrategy.DEPTH_FIRST: _push_depth_first,
}


class TraversalVisitor(Generic[N]):
    """
    Lazy, one-shot traversal over every node of a graph.

    The visitor snapshots the node set when it is created. Nodes that start a new
    component are taken from the remaining nodes in the order nodes() reported them.

    Example:
        >>> class AdjacencyGraph:
        ...     adjacency = {1: [2], 2: [1], 3: []}
        ...     def nodes(self):
        ...         return list(self.adjacency)
        ...     def neighbors(self, node):
        ...         return self.adjacency[node]
        >>> [(s.node, s.new_component) for s in TraversalVisitor(AdjacencyGraph())]
        [(1, True), (2, False), (3, True)]
    """

    def __init__(
        self,
        graph: GraphProtocol,
        strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST,
    ):
        """
        Initialize the visitor over a graph.

        Args:
            graph (GraphProtocol): Graph-like object exposing nodes() and neighbors()
            strategy (TraversalStrategy): Frontier discipline (default: breadth first)

        Raises:
            TypeError: If strategy is not a TraversalStrategy
        """
        if not isinstance(strategy, TraversalStrategy):
            raise TypeError("strategy must be a TraversalStrategy enum")
        self.strategy = strategy
        self._push = _PUSH_STRATEGIES[strategy]
        self._cursor = _TraversalCursor(graph=graph, remaining=dict.fromkeys(graph.nodes()))

    def next(self) -> Optional[TraversalStep[N]]:
        """
        Advance the traversal.

        Returns:
            Optional[TraversalStep]: The next node and its component-boundary flag,
            or None once every node has been visited. Further calls keep returning None.
        """
        cursor = self._cursor
        new_component = False
        if cursor.position == len(cursor.order):
            if not cursor.remaining:
                return None
            new_component = True
            start = next(iter(cursor.remaining))
            del cursor.remaining[start]
            cursor.order.append(start)
        node = cursor.order[cursor.position]
        self._push(cursor, node)
        cursor.position += 1
        return TraversalStep(node, new_component)

    def __iter__(self) -> Iterator[TraversalStep[N]]:
        """Iterate over the remaining steps of the traversal."""
        step = self.next()
        while step is not None:
            yield step
            step = self.next()

    @property
    def visited(self) -> List[N]:
        """Nodes emitted so far, in traversal order."""
        return list(self._cursor.order[: self._cursor.position])

    @property
    def exhausted(self) -> bool:
        """Whether every node has been emitted."""
        return self._cursor.position == len(self._cursor.order) and not self._cursor.remaining


def breadth_first(graph: GraphProtocol) -> Iterator[TraversalStep]:
    """Traverse a whole graph in breadth-first order."""
    return iter(TraversalVisitor(graph, TraversalStrategy.BREADTH_FIRST))


def depth_first(graph: GraphProtocol) -> Iterator[TraversalStep]:
    """Traverse a whole graph in depth-first order."""
    return iter(TraversalVisitor(graph, TraversalStrategy.DEPTH_FIRST))
