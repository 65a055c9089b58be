"""
Core type definitions and protocols.

This module provides the type variables and protocols shared by the graph,
traversal and k-core modules.
"""

from typing import Hashable, Iterable, Protocol, TypeVar

N = TypeVar("N", bound=Hashable)

Weight = int


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations traversals rely on."""

    def nodes(self) -> Iterable:
        """Get all nodes of the graph."""
        ...

    def neighbors(self, node) -> Iterable:
        """Get an iterable over the neighbors of a node."""
        ...
