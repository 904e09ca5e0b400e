"""Class resolution, property materialization and type projection."""

from .resolution import (
    parent_ids,
    is_enumeration,
    build_classes,
    resolve_graph,
)

from .properties import (
    inherited_properties,
    all_properties,
    contract_properties,
    concrete_properties,
)

from .type_projection import (
    TypeUnion,
    enumeration_family,
    project_property_type,
)

__all__ = [
    # Resolution
    "parent_ids",
    "is_enumeration",
    "build_classes",
    "resolve_graph",
    # Properties
    "inherited_properties",
    "all_properties",
    "contract_properties",
    "concrete_properties",
    # Type projection
    "TypeUnion",
    "enumeration_family",
    "project_property_type",
]
