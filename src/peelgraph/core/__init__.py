"""Core graph structures and algorithms."""

from .config import DEFAULT_CONFIG, GraphConfig
from .disjoint_sets import DisjointSets
from .exceptions import (
    CorruptedParentError,
    DuplicateResourceError,
    EdgeExistsError,
    EdgeNotFoundError,
    ElementExistsError,
    GraphError,
    IntegrityError,
    InternalInconsistencyError,
    InvalidOperationError,
    NodeNotFoundError,
    NoSuchElementError,
    ResourceNotFoundError,
    StructuralViolationError,
    TrivialEdgeError,
    ZeroWeightEdgeError,
)
from .graph import EMPTY_NEIGHBORS, UndirectedGraph, format_node_set
from .incremental import IncrementalGraph
from .kcore import KCore, k_core
from .traversal import (
    TraversalStep,
    TraversalStrategy,
    TraversalVisitor,
    breadth_first,
    depth_first,
)
from .types import GraphProtocol

__all__ = [
    "CorruptedParentError",
    "DEFAULT_CONFIG",
    "DisjointSets",
    "DuplicateResourceError",
    "EMPTY_NEIGHBORS",
    "EdgeExistsError",
    "EdgeNotFoundError",
    "ElementExistsError",
    "GraphConfig",
    "GraphError",
    "GraphProtocol",
    "IncrementalGraph",
    "IntegrityError",
    "InternalInconsistencyError",
    "InvalidOperationError",
    "KCore",
    "NoSuchElementError",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "StructuralViolationError",
    "TraversalStep",
    "TraversalStrategy",
    "TraversalVisitor",
    "TrivialEdgeError",
    "UndirectedGraph",
    "ZeroWeightEdgeError",
    "breadth_first",
    "depth_first",
    "format_node_set",
    "k_core",
]
