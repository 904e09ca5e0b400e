"""
Contract artifact rendering.

A contract is a typing.Protocol per non-enumeration class, written to
interfaces/<Name>.py. It extends the contracts of its parents and declares
only the properties none of those contracts already provides.

Extends-list rules (parents kept in input order):
- the enumeration root, enumerations and the class itself are excluded
- a parent whose own ancestry leads back to the class (cycle) is excluded
- a parent that is a strict ancestor of another listed parent is excluded,
  it is inherited through that parent anyway
- a parent that would make the method resolution order inconsistent is
  excluded; its properties are then declared on the contract itself
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.diagnostics import Diagnostics
from schemaorg_codegen.generation.attributes import render_attributes
from schemaorg_codegen.generation.formatting import (
    ImportSet,
    join_lines,
    module_preamble,
    python_identifier,
    render_docstring,
)
from schemaorg_codegen.graph.traversal import ancestors
from schemaorg_codegen.schemas.vocabulary import ClassModel
from schemaorg_codegen.semantic.properties import contract_properties

logger = logging.getLogger(__name__)


# =============================================================================
# EXTENDS-LIST
# =============================================================================

def _c3_merge(sequences: Sequence[List[str]]) -> Optional[List[str]]:
    """C3 merge of linearizations; None when no consistent order exists."""
    pending = [list(seq) for seq in sequences if seq]
    result: List[str] = []
    while pending:
        for seq in pending:
            head = seq[0]
            if not any(head in other[1:] for other in pending):
                break
        else:
            return None
        result.append(head)
        pending = [[item for item in seq if item != head] for seq in pending]
        pending = [seq for seq in pending if seq]
    return result


def _candidate_parents(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    config: CodegenConfig,
) -> List[ClassModel]:
    candidates: List[ClassModel] = []
    for parent_id in class_model.parents:
        if parent_id in (config.enumeration_root, class_model.id):
            continue
        parent = all_classes.get(parent_id)
        if parent is None or parent.is_enumeration or parent in candidates:
            continue
        if class_model.id in ancestors(parent, all_classes):
            continue
        candidates.append(parent)

    return [
        parent
        for parent in candidates
        if not any(
            other.id != parent.id and parent.id in ancestors(other, all_classes)
            for other in candidates
        )
    ]


def _linearize(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    config: CodegenConfig,
    cache: Dict[str, tuple],
) -> tuple:
    """Return (bases, linearization) of a contract, memoized by class id."""
    cached = cache.get(class_model.id)
    if cached is not None:
        return cached

    bases: List[ClassModel] = []
    lineages: List[List[str]] = []
    for parent in _candidate_parents(class_model, all_classes, config):
        parent_lineage = list(_linearize(parent, all_classes, config, cache)[1])
        merged = _c3_merge(lineages + [parent_lineage] + [[b.id for b in bases] + [parent.id]])
        if merged is None:
            logger.debug(f"Dropping base {parent.name} of {class_model.name}: inconsistent MRO")
            continue
        bases.append(parent)
        lineages.append(parent_lineage)

    merged = _c3_merge(lineages + [[b.id for b in bases]]) or []
    result = (tuple(bases), tuple([class_model.id] + merged))
    cache[class_model.id] = result
    return result


def extends_list(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    config: CodegenConfig = DEFAULT_CONFIG,
) -> List[ClassModel]:
    """
    Parent contracts a class's contract extends.

    Returns:
        Parent ClassModels in input order, filtered by the extends-list rules.
    """
    bases, _ = _linearize(class_model, all_classes, config, {})
    return list(bases)


# =============================================================================
# RENDERING
# =============================================================================

def render_contract(
    class_model: ClassModel,
    all_classes: Mapping[str, ClassModel],
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> str:
    """
    Render interfaces/<Name>.py for a non-enumeration class.

    Raises:
        InvalidIdentifierError: If the class, a parent or a property name is not
            a valid Python identifier.
    """
    name = python_identifier(class_model.name, kind="class name")
    imports = ImportSet()
    imports.add("typing", "Protocol")

    bases = extends_list(class_model, all_classes, config)
    base_names: List[str] = []
    for parent in bases:
        parent_name = python_identifier(parent.name, kind="class name")
        imports.add(f".{parent_name}", parent_name)
        base_names.append(parent_name)
    base_names.append("Protocol")

    body = render_docstring(class_model.comment, level=1, config=config)
    attributes = render_attributes(
        contract_properties(class_model, all_classes, bases),
        class_model,
        all_classes,
        imports,
        ".",
        concrete=False,
        diagnostics=diagnostics,
        config=config,
    )
    if attributes:
        body.append("")
        body.extend(attributes)

    lines = module_preamble(imports, config)
    lines.append(f"class {name}({', '.join(base_names)}):")
    lines.extend(body)
    return join_lines(lines)


__all__ = [
    "extends_list",
    "render_contract",
]
