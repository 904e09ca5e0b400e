"""
Generated package manifest.

The manifest is the package __init__.py that re-exports every artifact of the
resolved model. It is written once, after every class finished emitting, and
summarizes the model rather than the write outcomes:
1. contracts, sorted by name
2. concrete classes, sorted by name
3. enumerations with members, sorted by name
followed by __all__ in the same order. Class names that are not Python
identifiers cannot be imported; they are listed in a trailing comment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import (
    CLASSES_DIR,
    CONCRETE_MODULE_SUFFIX,
    CONCRETE_SUFFIX,
    GENERATED_HEADER,
    INTERFACES_DIR,
)
from schemaorg_codegen.generation.formatting import (
    InvalidIdentifierError,
    join_lines,
    python_identifier,
    quote,
)
from schemaorg_codegen.schemas.vocabulary import ClassModel


@dataclass
class Manifest:
    """
    Names exported by the generated package.

    Attributes:
        contracts: Contract names.
        concretes: Class names with a concrete artifact (the Schema suffix is added on render).
        enumerations: Enumeration names.
        unexportable: Class names that are not Python identifiers.
    """

    contracts: List[str] = field(default_factory=list)
    concretes: List[str] = field(default_factory=list)
    enumerations: List[str] = field(default_factory=list)
    unexportable: List[str] = field(default_factory=list)

    def exports(self) -> List[str]:
        return (
            sorted(self.contracts)
            + [f"{name}{CONCRETE_SUFFIX}" for name in sorted(self.concretes)]
            + sorted(self.enumerations)
        )


def build_manifest(all_classes: Mapping[str, ClassModel]) -> Manifest:
    """
    Collect the names to export from the resolved model.

    Every non-enumeration class contributes a contract and a concrete class,
    every enumeration with members contributes an enumeration. Empty
    enumerations have no artifact and are left out.
    """
    manifest = Manifest()
    for class_id in sorted(all_classes):
        class_model = all_classes[class_id]
        if class_model.is_enumeration and not class_model.has_members:
            continue
        try:
            name = python_identifier(class_model.name, kind="class name")
        except InvalidIdentifierError:
            manifest.unexportable.append(class_model.name)
            continue
        if class_model.is_enumeration:
            manifest.enumerations.append(name)
        else:
            manifest.contracts.append(name)
            manifest.concretes.append(name)
    return manifest


def render_manifest(manifest: Manifest, config: CodegenConfig = DEFAULT_CONFIG) -> str:
    """Render the package __init__.py."""
    lines = [GENERATED_HEADER, "from __future__ import annotations", ""]
    lines.extend(f"from .{INTERFACES_DIR}.{name} import {name}" for name in sorted(manifest.contracts))
    lines.extend(
        f"from .{CLASSES_DIR}.{name}{CONCRETE_MODULE_SUFFIX} import {name}{CONCRETE_SUFFIX}"
        for name in sorted(manifest.concretes)
    )
    lines.extend(f"from .{INTERFACES_DIR}.{name} import {name}" for name in sorted(manifest.enumerations))

    exports = manifest.exports()
    if exports:
        lines.append("")
    lines.append("__all__ = [")
    lines.extend(f"{config.indent}{quote(name)}," for name in exports)
    lines.append("]")

    if manifest.unexportable:
        lines.append("")
        lines.append("# Not exported, not Python identifiers:")
        lines.extend(f"# - {name}" for name in sorted(manifest.unexportable))
    return join_lines(lines)


def render_package_marker(description: str) -> str:
    """Render an __init__.py for the interfaces/ or classes/ subpackage."""
    return join_lines([GENERATED_HEADER, f'"""{description}"""'])


__all__ = [
    "Manifest",
    "build_manifest",
    "render_manifest",
    "render_package_marker",
]
