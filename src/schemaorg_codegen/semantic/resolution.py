"""
Class hierarchy and enumeration resolution.

Builds the immutable class model from ingested class nodes:
1. Resolve each class's parent id list (absent -> empty, single -> one-element)
2. Attach own properties from the domain index
3. Decide the enumeration predicate against the full class-node map
4. Attach enum members declared with the class as their type

Enumeration predicate:
    A class node is an enumeration iff it directly descends from the
    enumeration root, or any parent that is itself a class node is
    (recursively) an enumeration. The recursion carries the ids already on the
    current resolution path; reaching one of them again counts as
    non-enumeration, which breaks cycles in malformed graphs.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Mapping, Optional

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import RDFS_SUBCLASS_OF, is_primitive
from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.graph.nodes import IngestedGraph, extract_name, is_class_node
from schemaorg_codegen.schemas.vocabulary import (
    ClassModel,
    EnumMember,
    GraphNode,
    PropertyModel,
    ResolvedModel,
)

logger = logging.getLogger(__name__)


def parent_ids(node: GraphNode) -> List[str]:
    """Parent ids of a class node in input order."""
    return list(node.refs(RDFS_SUBCLASS_OF))


def is_enumeration(
    node: GraphNode,
    class_nodes: Mapping[str, GraphNode],
    visited: FrozenSet[str] = frozenset(),
    config: CodegenConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Decide whether a class node is an enumeration.

    Args:
        node: Class node to test.
        class_nodes: Every class node of the graph, by id.
        visited: Ids already on the current resolution path.
        config: Supplies the class type tag and the enumeration root id.

    Returns:
        True if the node is a class descending (transitively) from the enumeration root.
    """
    if node.id in visited:
        return False
    if not is_class_node(node, config):
        return False

    parents = parent_ids(node)
    if config.enumeration_root in parents:
        return True

    path = visited | {node.id}
    for parent_id in parents:
        parent = class_nodes.get(parent_id)
        if parent is not None and is_enumeration(parent, class_nodes, path, config):
            return True
    return False


def build_classes(
    class_nodes: Mapping[str, GraphNode],
    domain_map: Mapping[str, List[PropertyModel]],
    enum_map: Mapping[str, List[EnumMember]],
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> Dict[str, ClassModel]:
    """
    Build ClassModels for every class node.

    Args:
        class_nodes: Class nodes by id.
        domain_map: PropertyModels by domain class id.
        enum_map: EnumMembers by declaring class id.
        diagnostics: Collector for unresolved parents.
        config: Vocabulary tags.

    Returns:
        Dict of class id -> ClassModel, in class-node order.
    """
    classes: Dict[str, ClassModel] = {}

    for class_id, node in class_nodes.items():
        parents = parent_ids(node)
        name = extract_name(node)

        for parent_id in parents:
            if parent_id not in class_nodes and not is_primitive(parent_id):
                if diagnostics is not None:
                    diagnostics.report(
                        DiagnosticKind.UNRESOLVED_REFERENCE,
                        name,
                        f"parent class {parent_id} not found",
                    )

        classes[class_id] = ClassModel(
            id=class_id,
            name=name,
            comment=node.comment,
            parents=tuple(parents),
            properties=tuple(domain_map.get(class_id, ())),
            is_enumeration=is_enumeration(node, class_nodes, frozenset(), config),
            enum_members=tuple(enum_map.get(class_id, ())),
        )

    return classes


def resolve_graph(
    ingested: IngestedGraph,
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> ResolvedModel:
    """Resolve an ingested graph into the immutable ResolvedModel."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    classes = build_classes(
        ingested.class_nodes,
        ingested.properties_by_domain,
        ingested.members_by_class,
        diagnostics=diagnostics,
        config=config,
    )
    model = ResolvedModel(classes, diagnostics=diagnostics)

    summary = model.summary()
    logger.info(
        f"Resolved {summary['classes']} classes "
        f"({summary['enumerations']} enumerations, "
        f"{summary['non_empty_enumerations']} with members)"
    )
    return model


__all__ = [
    "parent_ids",
    "is_enumeration",
    "build_classes",
    "resolve_graph",
]
