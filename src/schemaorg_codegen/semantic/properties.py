"""
Property materialization over the class hierarchy.

Precedence rules:
- inherited properties are collected from every ancestor (sorted id order),
  each ancestor contributing its own properties in declaration order
- properties are keyed by name; among ancestors the first declaration wins
- a class's own property overrides an inherited one of the same name and
  keeps the inherited position

Two distinct property ids sharing a name cannot both become attributes of one
Python class, so such a clash is resolved by the rules above and reported as
PROPERTY_NAME_COLLISION.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Set

from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.graph.traversal import resolved_ancestors
from schemaorg_codegen.schemas.vocabulary import ClassModel, PropertyModel


def _merge_by_name(
    target: Dict[str, PropertyModel],
    props: Iterable[PropertyModel],
    owner: ClassModel,
    override: bool,
    diagnostics: Optional[Diagnostics],
) -> None:
    for prop in props:
        existing = target.get(prop.name)
        if existing is None:
            target[prop.name] = prop
            continue
        if existing.id != prop.id and diagnostics is not None:
            kept = prop if override else existing
            dropped = existing if override else prop
            diagnostics.report(
                DiagnosticKind.PROPERTY_NAME_COLLISION,
                owner.name,
                f"property name '{prop.name}' declared by {existing.id} and {prop.id}; "
                f"keeping {kept.id}, dropping {dropped.id}",
            )
        if override:
            target[prop.name] = prop


def inherited_properties(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
) -> List[PropertyModel]:
    """
    Own properties of every ancestor, deduplicated by name.

    Returns:
        Properties in ancestor-id order, first declaration of each name kept.
    """
    merged: Dict[str, PropertyModel] = {}
    for ancestor in resolved_ancestors(class_model, all_classes):
        _merge_by_name(merged, ancestor.properties, class_model, False, diagnostics)
    return list(merged.values())


def all_properties(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
) -> List[PropertyModel]:
    """Inherited properties overridden by same-named own properties."""
    merged: Dict[str, PropertyModel] = {
        prop.name: prop for prop in inherited_properties(class_model, all_classes, diagnostics)
    }
    _merge_by_name(merged, class_model.properties, class_model, True, diagnostics)
    return list(merged.values())


def contract_properties(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    bases: Optional[Iterable[ClassModel]] = None,
) -> List[PropertyModel]:
    """
    Properties a contract declares itself.

    A contract inherits every property available on the contracts it extends,
    so it declares the rest of its full property set. With no parent dropped
    from the extends-list that is exactly its own, non-inherited properties.

    Args:
        class_model: Class whose contract is rendered.
        all_classes: Resolved class model.
        bases: Contracts it extends (default: its resolved parents).
    """
    if bases is None:
        bases = [all_classes[pid] for pid in class_model.parents if pid in all_classes]
    available: Set[str] = set()
    for base in bases:
        available.update(prop.name for prop in all_properties(base, all_classes))
    return [prop for prop in all_properties(class_model, all_classes) if prop.name not in available]


def concrete_properties(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
) -> List[PropertyModel]:
    """Every inherited and own property, flattened onto the concrete class."""
    return all_properties(class_model, all_classes, diagnostics)


__all__ = [
    "inherited_properties",
    "all_properties",
    "contract_properties",
    "concrete_properties",
]
