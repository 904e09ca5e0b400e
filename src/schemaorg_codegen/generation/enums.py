"""Enumeration artifact rendering."""

from __future__ import annotations

from typing import List, Optional

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.generation.formatting import (
    ImportSet,
    join_lines,
    module_preamble,
    python_identifier,
    quote,
    render_docstring,
)
from schemaorg_codegen.schemas.vocabulary import ClassModel


def render_enum(
    class_model: ClassModel,
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> str:
    """
    Render interfaces/<Name>.py for an enumeration with members.

    Members keep input order; each value is the member label appended to the
    configured base URL. Members are str subclasses, so they compare and
    serialize as their URL. A member whose name repeats an earlier one is
    skipped and reported as DUPLICATE_ENUM_MEMBER.

    Raises:
        InvalidIdentifierError: If the class or a member label is not a valid
            Python identifier.
    """
    name = python_identifier(class_model.name, kind="class name")
    imports = ImportSet()
    imports.add("enum", "Enum")

    members: List[str] = []
    seen = set()
    for member in class_model.enum_members:
        member_name = python_identifier(member.label, kind="enumeration member")
        if member_name in seen:
            if diagnostics is not None:
                diagnostics.report(
                    DiagnosticKind.DUPLICATE_ENUM_MEMBER,
                    class_model.name,
                    f"member {member.id} repeats name '{member_name}'; skipped",
                )
            continue
        seen.add(member_name)
        members.append(f"{config.indent}{member_name} = {quote(config.base_url + member.label)}")

    lines = module_preamble(imports, config)
    lines.append(f"class {name}(str, Enum):")
    lines.extend(render_docstring(class_model.comment, level=1, config=config))
    lines.append("")
    lines.extend(members)
    return join_lines(lines)


__all__ = ["render_enum"]
