"""
Graph configuration.

Graphs accept an optional GraphConfig at construction time. Graphs derived from
another graph (induced subgraphs, copies, the k-core working copy) inherit the
configuration of their source.
"""

from dataclasses import dataclass

from .traversal import TraversalStrategy


@dataclass(frozen=True)
class GraphConfig:
    """
    Tunable behaviour of a graph instance.

    Attributes:
        default_weight (int): Weight given to edges created without an explicit
            weight (default: 1)
        check_symmetry (bool): Verify the reciprocal adjacency record on edge
            queries and report asymmetry as an integrity error (default: True)
        component_strategy (TraversalStrategy): Traversal driven by
            connected_components() on traversal-based graphs (default: breadth first)
    """

    default_weight: int = 1
    check_symmetry: bool = True
    component_strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.default_weight, int) or isinstance(self.default_weight, bool):
            raise TypeError("default_weight must be an integer")
        if self.default_weight < 1:
            raise ValueError("default_weight must be positive")
        if not isinstance(self.component_strategy, TraversalStrategy):
            raise TypeError("component_strategy must be a TraversalStrategy enum")


DEFAULT_CONFIG = GraphConfig()
