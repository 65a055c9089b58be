"""
Custom exceptions for the graph processing engine.

This module defines the hierarchy of exceptions raised by the graph, disjoint-set,
traversal and k-core modules. Errors fall into two tiers:

- User errors (missing nodes, duplicate edges, self loops, ...) that callers are
  expected to catch and react to. Each one carries the offending node, edge or
  element so the caller can report it precisely.
- Integrity errors that signal a broken internal invariant. These are never raised
  through correct use of the public API and exist to catch implementation bugs
  in tests.
"""

from typing import Any, Hashable, Tuple


class GraphError(Exception):
    """Base class for every error raised by peelgraph."""


class ResourceNotFoundError(GraphError):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
        * Disjoint-set element not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node is not part of the graph.

    Attributes:
        node: The node that was looked up
    """

    def __init__(self, node: Hashable):
        super().__init__(f"Node '{node}' not found in the graph")
        self.node = node


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when an edge between two existing nodes does not exist.

    Attributes:
        edge (Tuple): The pair of nodes, in the order the caller passed them
    """

    def __init__(self, n1: Hashable, n2: Hashable):
        super().__init__(f"No edge exists between '{n1}' and '{n2}'")
        self.edge: Tuple[Any, Any] = (n1, n2)


class NoSuchElementError(ResourceNotFoundError):
    """
    Raised by disjoint sets when an element used in a lookup was never added.

    Attributes:
        element: The missing element
    """

    def __init__(self, element: Hashable):
        super().__init__(f"Element '{element}' not found in the disjoint sets")
        self.element = element


class DuplicateResourceError(GraphError):
    """
    Raised when attempting to create a resource that already exists.

    Examples:
        * Duplicate edge creation
        * Re-adding a disjoint-set element
    """


class EdgeExistsError(DuplicateResourceError):
    """
    Raised when adding an edge that is already part of the graph.

    Attributes:
        edge (Tuple): The pair of nodes, in the order the caller passed them
    """

    def __init__(self, n1: Hashable, n2: Hashable):
        super().__init__(f"Edge between '{n1}' and '{n2}' already exists")
        self.edge: Tuple[Any, Any] = (n1, n2)


class ElementExistsError(DuplicateResourceError):
    """
    Raised when adding an element that is already part of the disjoint sets.

    Attributes:
        element: The duplicate element
    """

    def __init__(self, element: Hashable):
        super().__init__(f"Element '{element}' already exists in the disjoint sets")
        self.element = element


class InvalidOperationError(GraphError):
    """
    Raised when an operation is invalid for its arguments or for the target object.

    Examples:
        * Self loops
        * Zero weights
        * Removal from a graph that only grows
    """


class TrivialEdgeError(InvalidOperationError):
    """
    Raised when a loop edge from a node to itself is attempted.

    A single node is involved, so the error carries a node rather than an edge.

    Attributes:
        node: The node that would have been connected to itself
    """

    def __init__(self, node: Hashable):
        super().__init__(f"Loop edge on node '{node}' is not allowed")
        self.node = node


class ZeroWeightEdgeError(InvalidOperationError):
    """
    Raised when an edge would be created or updated with a non-positive weight.

    Attributes:
        edge (Tuple): The pair of nodes, in the order the caller passed them
        weight (int): The rejected weight
    """

    def __init__(self, n1: Hashable, n2: Hashable, weight: int):
        super().__init__(f"Edge between '{n1}' and '{n2}' must have a positive weight, got {weight}")
        self.edge: Tuple[Any, Any] = (n1, n2)
        self.weight = weight


class StructuralViolationError(InvalidOperationError):
    """
    Raised when an operation would break the structural contract of a graph type.

    Attributes:
        operation (str): Name of the rejected operation
    """

    def __init__(self, operation: str, reason: str):
        super().__init__(f"Illegal {operation} operation: {reason}")
        self.operation = operation


class IntegrityError(GraphError):
    """
    Raised when an internal invariant is found broken.

    These errors are not expected through the public API. Code using the graph
    should not catch them; they are useful for testing.

    Attributes:
        state_intact (bool): True when the failing operation made no change
            before the fault was detected
    """

    def __init__(self, message: str, state_intact: bool = True):
        super().__init__(message)
        self.state_intact = state_intact

    def __str__(self) -> str:
        """Format integrity error message."""
        return f"Integrity Error: {super().__str__()}"


class InternalInconsistencyError(IntegrityError):
    """
    Raised when the two adjacency records of an edge disagree.

    Examples:
        * Node A lists B as a neighbor but B does not list A
        * The weights stored at both endpoints differ
        * A neighbor entry points to a node that is not in the graph
    """


class CorruptedParentError(IntegrityError):
    """
    Raised when a disjoint-set element points to a parent that does not exist.

    Attributes:
        element: The element whose parent link is dangling
    """

    def __init__(self, element: Hashable):
        super().__init__(f"Element '{element}' has a dangling parent link")
        self.element = element
