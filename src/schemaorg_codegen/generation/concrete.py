"""
Concrete artifact rendering.

A concrete class is a dataclass named <Name>Schema, written to
classes/<Name>_schema.py. It implements the runtime metadata capability and
the class's contract, carries a metadata record (id, label, parent ids) and
flattens every inherited and own property into an optional field.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import CONCRETE_SUFFIX, INTERFACES_DIR, METADATA_FIELD, SCHEMA_CONTEXT_URL
from schemaorg_codegen.diagnostics import Diagnostics
from schemaorg_codegen.generation.attributes import render_attributes
from schemaorg_codegen.generation.formatting import (
    ImportSet,
    join_lines,
    module_preamble,
    python_identifier,
    quote,
    render_docstring,
    render_list_argument,
)
from schemaorg_codegen.schemas.vocabulary import ClassModel
from schemaorg_codegen.semantic.properties import concrete_properties

_INTERFACES_PACKAGE = f"..{INTERFACES_DIR}."


def concrete_class_name(class_model: ClassModel) -> str:
    return f"{python_identifier(class_model.name, kind='class name')}{CONCRETE_SUFFIX}"


def render_metadata(class_model: ClassModel, config: CodegenConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Render the schema_metadata field with its default factory.

    A non-default config.context_url is written as the metadata context.
    """
    pad = config.indent
    lines = [
        f"{pad}{METADATA_FIELD}: SchemaMetadata = field(",
        f"{pad * 2}default_factory=lambda: SchemaMetadata(",
        f"{pad * 3}id={quote(class_model.id)},",
        f"{pad * 3}label={quote(class_model.name)},",
        *render_list_argument("sub_class_of", class_model.parents, level=3, config=config),
    ]
    if config.context_url != SCHEMA_CONTEXT_URL:
        lines.append(f"{pad * 3}context={quote(config.context_url)},")
    lines.extend([f"{pad * 2})", f"{pad})"])
    return lines


def render_concrete(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> str:
    """
    Render classes/<Name>_schema.py for a non-enumeration class.

    Raises:
        InvalidIdentifierError: If the class or a property name is not a valid
            Python identifier.
    """
    name = python_identifier(class_model.name, kind="class name")
    imports = ImportSet()
    imports.add("dataclasses", "dataclass")
    imports.add("dataclasses", "field")
    imports.add(config.runtime_module, "SchemaInterface")
    imports.add(config.runtime_module, "SchemaMetadata")
    imports.add(f"{_INTERFACES_PACKAGE}{name}", name)

    body = render_docstring(class_model.comment, level=1, config=config)
    body.append("")
    body.extend(render_metadata(class_model, config))

    attributes = render_attributes(
        concrete_properties(class_model, all_classes, diagnostics),
        class_model,
        all_classes,
        imports,
        _INTERFACES_PACKAGE,
        concrete=True,
        diagnostics=diagnostics,
        config=config,
    )
    if attributes:
        body.append("")
        body.extend(attributes)

    lines = module_preamble(imports, config)
    lines.append("@dataclass")
    lines.append(f"class {concrete_class_name(class_model)}(SchemaInterface, {name}):")
    lines.extend(body)
    return join_lines(lines)


__all__ = [
    "concrete_class_name",
    "render_metadata",
    "render_concrete",
]
