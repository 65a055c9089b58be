"""
K-core decomposition by degeneracy peeling.

The k-core of a graph is the largest node set in which every node has at least k
neighbors inside the set. It is found by repeatedly removing a node of degree below
k; each removal lowers the degree of its neighbors, which may push them below k in
turn. The nodes left when no low-degree node remains form the k-core.
"""

import logging
from typing import Generic, Optional, Set, Tuple

from .graph import UndirectedGraph
from .types import N

logger = logging.getLogger(__name__)


class KCore(Generic[N]):
    """
    One-shot k-core computation.

    The graph is copied on construction, so later changes to it do not affect the
    result and the peeling never touches the caller's graph. Calling the instance
    runs the peeling once; later calls return a copy of the same result.

    Example:
        >>> graph = UndirectedGraph()
        >>> graph.insert(1, {2, 3})
        >>> graph.insert(4, {1, 2, 3})
        >>> sorted(KCore(graph, 2)())
        [1, 2, 3, 4]
    """

    def __init__(self, graph: UndirectedGraph[N], k: int):
        """
        Initialize the computation.

        Args:
            graph (UndirectedGraph): The graph to decompose
            k (int): Minimum degree inside the core

        Raises:
            TypeError: If k is not an integer
            ValueError: If k is negative
        """
        if not isinstance(k, int) or isinstance(k, bool):
            raise TypeError("k must be an integer")
        if k < 0:
            raise ValueError("k must be non-negative")
        self.k = k
        # induced() on every node is a plain, removable copy even for grow-only graphs
        self._graph: UndirectedGraph[N] = graph.induced(graph.nodes())
        self._result: Optional[Set[N]] = None

    def _sieve(self) -> Tuple[Set[N], Set[N]]:
        """Split the nodes into those with degree >= k and the rest."""
        good: Set[N] = set()
        bad: Set[N] = set()
        for node in self._graph.nodes():
            (bad if self._graph.degree(node) < self.k else good).add(node)
        return good, bad

    def _peel(self) -> Set[N]:
        good, bad = self._sieve()
        removed = 0
        while bad:
            node = bad.pop()
            for neighbor in self._graph.neighbors(node):
                # degree == k now means k - 1 once node is gone
                if neighbor in good and self._graph.degree(neighbor) == self.k:
                    good.remove(neighbor)
                    bad.add(neighbor)
            self._graph.remove(node)
            removed += 1
        logger.debug(f"{self.k}-core keeps {len(good)} nodes after peeling {removed}")
        return good

    def __call__(self) -> Set[N]:
        """
        Compute the k-core.

        Returns:
            Set: The nodes of the k-core; empty when every node peels away
        """
        if self._result is None:
            self._result = self._peel()
        return set(self._result)


def k_core(graph: UndirectedGraph[N], k: int) -> Set[N]:
    """Compute the k-core node set of a graph."""
    return KCore(graph, k)()
