"""Graph ingestion and hierarchy traversal modules."""

from .nodes import (
    # Errors
    MalformedInputError,
    InputNotFoundError,
    # Data structures
    IngestedGraph,
    # Normalization
    normalize_node,
    extract_name,
    # Classification
    is_class_node,
    is_property_node,
    is_enum_value_node,
    # Builders
    build_property_models,
    build_enum_member,
    # Orchestrator
    ingest_graph,
)

from .traversal import (
    ancestors,
    descendants,
    resolved_ancestors,
    resolved_descendants,
)

__all__ = [
    # Errors
    "MalformedInputError",
    "InputNotFoundError",
    # Data structures
    "IngestedGraph",
    # Normalization
    "normalize_node",
    "extract_name",
    # Classification
    "is_class_node",
    "is_property_node",
    "is_enum_value_node",
    # Builders
    "build_property_models",
    "build_enum_member",
    # Orchestrator
    "ingest_graph",
    # Traversal
    "ancestors",
    "descendants",
    "resolved_ancestors",
    "resolved_descendants",
]
