"""
Schema modules for the vocabulary model.

This package hosts the frozen dataclasses that define the contract between the
ingestion/resolution stages and the code emitter.
"""

from schemaorg_codegen.schemas.vocabulary import (
    ClassModel,
    EnumMember,
    GraphNode,
    PropertyModel,
    ResolvedModel,
    build_hierarchy_graph,
)

__all__ = [
    "ClassModel",
    "EnumMember",
    "GraphNode",
    "PropertyModel",
    "ResolvedModel",
    "build_hierarchy_graph",
]
