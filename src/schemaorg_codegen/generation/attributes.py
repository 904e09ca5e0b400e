"""
Attribute rendering shared by contract and concrete artifacts.

Each property becomes one annotated attribute followed by its description as
an attribute docstring. Type-union class references are registered as
TYPE_CHECKING-only imports: annotations are never evaluated at runtime (every
generated module starts with `from __future__ import annotations`), and
mutually referencing classes would otherwise import each other in a cycle.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.diagnostics import Diagnostics
from schemaorg_codegen.generation.formatting import (
    ImportSet,
    python_identifier,
    quote,
    render_annotated,
    render_docstring,
)
from schemaorg_codegen.schemas.vocabulary import ClassModel, PropertyModel
from schemaorg_codegen.semantic.type_projection import project_property_type


def attribute_name(prop: PropertyModel) -> str:
    return python_identifier(prop.name, kind="property name")


def field_default(prop: PropertyModel) -> str:
    """
    Default expression of a concrete dataclass field.

    Attributes whose Python name differs from the vocabulary label keep the
    label in the field metadata, which the flattener uses as the output key.
    """
    if attribute_name(prop) == prop.label:
        return "None"
    return f'field(default=None, metadata={{"name": {quote(prop.label)}}})'


def render_attribute(
    prop: PropertyModel,
    owner: ClassModel,
    all_classes: Mapping[str, ClassModel],
    imports: ImportSet,
    interfaces_package: str,
    concrete: bool,
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Render one property as an annotated attribute plus its docstring.

    Args:
        prop: Property to render.
        owner: Class the attribute is declared on.
        all_classes: Resolved class model.
        imports: Import collector of the module being rendered.
        interfaces_package: Relative module prefix of the contracts ("." or "..interfaces.").
        concrete: True for dataclass fields (with defaults), False for protocol members.
        diagnostics: Collector for type projection diagnostics.
        config: Formatting settings.

    Returns:
        Source lines of the attribute.
    """
    name = attribute_name(prop)
    union = project_property_type(prop, owner.name, all_classes, diagnostics)

    for module, imported in union.std_imports:
        imports.add(module, imported)
    for class_name in union.class_refs:
        imports.add_type_only(f"{interfaces_package}{class_name}", class_name)

    default = None
    if concrete:
        default = field_default(prop)
        if default != "None":
            imports.add("dataclasses", "field")

    lines = render_annotated(name, union.tokens, default, level=1, config=config)
    lines.extend(render_docstring(prop.comment, level=1, config=config))
    return lines


def render_attributes(
    props: List[PropertyModel],
    owner: ClassModel,
    all_classes: Mapping[str, ClassModel],
    imports: ImportSet,
    interfaces_package: str,
    concrete: bool,
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> List[str]:
    """Render several attributes separated by blank lines."""
    lines: List[str] = []
    for prop in props:
        if lines:
            lines.append("")
        lines.extend(
            render_attribute(
                prop, owner, all_classes, imports, interfaces_package, concrete, diagnostics, config
            )
        )
    return lines


__all__ = [
    "attribute_name",
    "field_default",
    "render_attribute",
    "render_attributes",
]
