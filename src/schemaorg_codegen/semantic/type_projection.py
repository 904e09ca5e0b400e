"""
Property type projection.

Maps a property's range to the annotation tokens of its Python type union:
- unconstrained range -> Any
- primitive datatype -> scalar and list tokens (e.g. "str", "list[str]")
- non-enumeration class -> "Name", "list[Name]"
- enumeration -> the enumeration itself (if it has members), then every
  ancestor and every descendant enumeration that has members, scalar only

Unresolvable range targets are reported and skipped. A union that ends up
empty falls back to Any so the emitted attribute stays well-typed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from schemaorg_codegen.constants import UNCONSTRAINED_TYPE, primitive_type
from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.graph.traversal import resolved_ancestors, resolved_descendants
from schemaorg_codegen.schemas.vocabulary import ClassModel, PropertyModel

_TYPING_MODULE = "typing"


@dataclass
class TypeUnion:
    """
    Projected type of one property.

    Attributes:
        tokens: Union members in first-seen order, deduplicated.
        class_refs: Generated class names the union refers to (owner excluded).
        std_imports: (module, name) pairs needed by primitive or fallback tokens.
    """

    tokens: List[str] = field(default_factory=list)
    class_refs: List[str] = field(default_factory=list)
    std_imports: List[Tuple[str, str]] = field(default_factory=list)

    def add_token(self, token: str) -> None:
        if token not in self.tokens:
            self.tokens.append(token)

    def add_class_ref(self, name: str) -> None:
        if name not in self.class_refs:
            self.class_refs.append(name)

    def add_import(self, module: str, name: str) -> None:
        if (module, name) not in self.std_imports:
            self.std_imports.append((module, name))

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def render(self) -> str:
        """Join the tokens into a single annotation."""
        return " | ".join(self.tokens)


def enumeration_family(
    enum_class: ClassModel,
    all_classes: Mapping[str, ClassModel],
) -> List[ClassModel]:
    """
    Enumerations a value of `enum_class` may be drawn from.

    Returns:
        The class itself if it has members, then ancestor enumerations with
        members, then descendant enumerations with members (each group in id order).
    """
    family: List[ClassModel] = []
    if enum_class.has_members:
        family.append(enum_class)
    for related in resolved_ancestors(enum_class, all_classes) + resolved_descendants(enum_class, all_classes):
        if related.is_enumeration and related.has_members and related not in family:
            family.append(related)
    return family


def project_property_type(
    prop: PropertyModel,
    owner_name: str,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
) -> TypeUnion:
    """
    Compute the type union of a property as seen from its owning class.

    Args:
        prop: Property to project.
        owner_name: Name of the class the attribute is rendered on; references
            to it are not registered as imports.
        all_classes: Resolved class model.
        diagnostics: Collector for unresolved targets and empty unions.

    Returns:
        TypeUnion with at least one token.
    """
    union = TypeUnion()

    if prop.is_unconstrained:
        union.add_token(UNCONSTRAINED_TYPE)
        union.add_import(_TYPING_MODULE, UNCONSTRAINED_TYPE)
        return union

    for target_id in prop.range_includes:
        primitive = primitive_type(target_id)
        if primitive is not None:
            annotation, module = primitive
            union.add_token(annotation)
            union.add_token(f"list[{annotation}]")
            if module is not None:
                union.add_import(module, annotation)
            continue

        target = all_classes.get(target_id)
        if target is None:
            if diagnostics is not None:
                diagnostics.report(
                    DiagnosticKind.UNRESOLVED_REFERENCE,
                    prop.id,
                    f"range target {target_id} not found",
                )
            continue

        if target.is_enumeration:
            for enum_class in enumeration_family(target, all_classes):
                union.add_token(enum_class.name)
                if enum_class.name != owner_name:
                    union.add_class_ref(enum_class.name)
            continue

        union.add_token(target.name)
        union.add_token(f"list[{target.name}]")
        if target.name != owner_name:
            union.add_class_ref(target.name)

    if union.is_empty:
        if diagnostics is not None:
            diagnostics.report(
                DiagnosticKind.EMPTY_TYPE_UNION,
                prop.id,
                f"no emittable range type; falling back to {UNCONSTRAINED_TYPE}",
            )
        union.add_token(UNCONSTRAINED_TYPE)
        union.add_import(_TYPING_MODULE, UNCONSTRAINED_TYPE)

    return union


__all__ = [
    "TypeUnion",
    "enumeration_family",
    "project_property_type",
]
