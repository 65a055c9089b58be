"""
peelgraph - In-memory graph processing engine

This package provides mutable graph structures and the algorithms that run on them:

- A weighted undirected graph with symmetric adjacency records
- Disjoint sets (union-find) with union by rank and path compression
- A grow-only graph that maintains its connected components online
- Depth-first and breadth-first whole-graph traversal with component boundaries
- K-core decomposition by degeneracy peeling
"""

__version__ = "0.1.0"
__author__ = "peelgraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("peelgraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.disjoint_sets import DisjointSets
from .core.graph import UndirectedGraph
from .core.incremental import IncrementalGraph
from .core.kcore import KCore, k_core
from .core.traversal import TraversalStrategy, TraversalVisitor

__all__ = [
    "DisjointSets",
    "IncrementalGraph",
    "KCore",
    "TraversalStrategy",
    "TraversalVisitor",
    "UndirectedGraph",
    "k_core",
]
