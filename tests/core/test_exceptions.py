"""
Tests for custom exceptions and configuration validation.
"""

import pytest

from peelgraph.core.config import DEFAULT_CONFIG, GraphConfig
from peelgraph.core.exceptions import (
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
from peelgraph.core.traversal import TraversalStrategy


@pytest.mark.parametrize(
    "error, base",
    [
        (NodeNotFoundError(1), ResourceNotFoundError),
        (EdgeNotFoundError(1, 2), ResourceNotFoundError),
        (NoSuchElementError(1), ResourceNotFoundError),
        (EdgeExistsError(1, 2), DuplicateResourceError),
        (ElementExistsError(1), DuplicateResourceError),
        (TrivialEdgeError(1), InvalidOperationError),
        (ZeroWeightEdgeError(1, 2, 0), InvalidOperationError),
        (StructuralViolationError("remove node", "grow only"), InvalidOperationError),
        (InternalInconsistencyError("broken"), IntegrityError),
        (CorruptedParentError(1), IntegrityError),
    ],
)
def test_exception_hierarchy(error, base):
    """Test that every error sits under its category and GraphError."""
    assert isinstance(error, base)
    assert isinstance(error, GraphError)


def test_errors_carry_offending_values():
    """Test the attributes exposed for programmatic handling."""
    assert NodeNotFoundError("a").node == "a"
    assert TrivialEdgeError("a").node == "a"
    assert EdgeNotFoundError("a", "b").edge == ("a", "b")
    assert EdgeExistsError("b", "a").edge == ("b", "a")
    zero = ZeroWeightEdgeError("a", "b", 0)
    assert zero.edge == ("a", "b") and zero.weight == 0
    assert NoSuchElementError(3).element == 3
    assert ElementExistsError(3).element == 3
    assert CorruptedParentError(3).element == 3


def test_error_messages():
    """Test error message formatting."""
    assert str(NodeNotFoundError(7)) == "Node '7' not found in the graph"
    assert str(EdgeExistsError(1, 2)) == "Edge between '1' and '2' already exists"
    assert str(StructuralViolationError("remove edge", "grow only")) == (
        "Illegal remove edge operation: grow only"
    )
    assert str(InternalInconsistencyError("x")) == "Integrity Error: x"


def test_default_config():
    """Test the default configuration values."""
    assert DEFAULT_CONFIG.default_weight == 1
    assert DEFAULT_CONFIG.check_symmetry
    assert DEFAULT_CONFIG.component_strategy is TraversalStrategy.BREADTH_FIRST


def test_config_validation():
    """Test configuration validation."""
    with pytest.raises(ValueError, match="default_weight must be positive"):
        GraphConfig(default_weight=0)
    with pytest.raises(TypeError, match="default_weight must be an integer"):
        GraphConfig(default_weight=1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="component_strategy"):
        GraphConfig(component_strategy="bfs")  # type: ignore[arg-type]
