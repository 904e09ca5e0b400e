"""
Graph node ingestion for the vocabulary graph.

This module turns raw JSON-LD @graph entries into normalized GraphNode records
and sorts them into the three kinds the resolver works with:
- class nodes: carry the class type tag (rdfs:Class)
- property nodes: carry the property type tag (rdf:Property)
- enum-value nodes: carry exactly one, vocabulary-specific type tag, which is
  the id of the enumeration class declaring them

Ingestion Strategy:
1. Normalize every raw node (scalar-or-list @type, language-tagged labels,
   reference fields) into a GraphNode
2. Classify each node by kind
3. Index properties by domain class id and enum members by declaring class id
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import (
    JSONLD_ID,
    JSONLD_TYPE,
    RDFS_COMMENT,
    RDFS_LABEL,
    SCHEMA_DOMAIN_INCLUDES,
    SCHEMA_RANGE_INCLUDES,
)
from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.schemas.vocabulary import EnumMember, GraphNode, PropertyModel
from schemaorg_codegen.utils.serialize import (
    as_list,
    is_reference_value,
    literal_text,
    reference_ids,
)
from schemaorg_codegen.utils.text import local_name, sanitize_name

logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """Raised when the input document is missing, undecodable or has no @graph."""


class InputNotFoundError(MalformedInputError, FileNotFoundError):
    """Raised when the input document does not exist."""


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class IngestedGraph:
    """
    Result of graph ingestion.

    Attributes:
        class_nodes: Class nodes by id, in input order.
        properties_by_domain: PropertyModels by domain class id.
        members_by_class: EnumMembers by declaring class id.
        ignored_count: Number of nodes that matched no kind.
    """

    class_nodes: Dict[str, GraphNode] = field(default_factory=dict)
    properties_by_domain: Dict[str, List[PropertyModel]] = field(default_factory=dict)
    members_by_class: Dict[str, List[EnumMember]] = field(default_factory=dict)
    ignored_count: int = 0


# =============================================================================
# NORMALIZATION
# =============================================================================

_LITERAL_FIELDS = {JSONLD_ID, JSONLD_TYPE, RDFS_LABEL, RDFS_COMMENT}


def normalize_node(raw: Mapping[str, Any]) -> GraphNode:
    """
    Normalize one raw @graph entry.

    Args:
        raw: Decoded JSON object of the node.

    Returns:
        GraphNode with tuple-valued types and relations.

    Raises:
        MalformedInputError: If the node is not an object or has no @id.
    """
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"Graph node is not an object: {raw!r}")
    node_id = raw.get(JSONLD_ID)
    if not node_id:
        raise MalformedInputError(f"Graph node without {JSONLD_ID}: {dict(raw)!r}")

    relations = {
        key: tuple(reference_ids(value))
        for key, value in raw.items()
        if key not in _LITERAL_FIELDS and is_reference_value(value)
    }

    return GraphNode(
        id=str(node_id),
        types=tuple(str(t) for t in as_list(raw.get(JSONLD_TYPE))),
        label=literal_text(raw.get(RDFS_LABEL)),
        comment=literal_text(raw.get(RDFS_COMMENT)) or "",
        relations=relations,
    )


def extract_name(node: GraphNode) -> str:
    """Sanitized display name from the label, falling back to the id's local name."""
    name = node.label if node.label else local_name(node.id)
    return sanitize_name(name)


# =============================================================================
# CLASSIFICATION
# =============================================================================

def is_class_node(node: GraphNode, config: CodegenConfig = DEFAULT_CONFIG) -> bool:
    return config.class_type in node.types


def is_property_node(node: GraphNode, config: CodegenConfig = DEFAULT_CONFIG) -> bool:
    return config.property_type in node.types


def is_enum_value_node(node: GraphNode, config: CodegenConfig = DEFAULT_CONFIG) -> bool:
    """Exactly one type tag, and that tag is a vocabulary-specific id."""
    return len(node.types) == 1 and node.types[0].startswith(config.vocabulary_prefix)


# =============================================================================
# BUILDERS
# =============================================================================

def build_property_models(node: GraphNode) -> Dict[str, PropertyModel]:
    """
    Build one PropertyModel per domain class of a property node.

    Returns:
        Mapping of domain class id -> PropertyModel (empty if the property has no domain).
    """
    domains = node.refs(SCHEMA_DOMAIN_INCLUDES)
    if not domains:
        return {}

    ranges = node.refs(SCHEMA_RANGE_INCLUDES)
    model = PropertyModel(
        id=node.id,
        name=extract_name(node),
        label=node.label if node.label else local_name(node.id),
        comment=node.comment,
        range_includes=ranges if ranges else None,
    )
    return {domain_id: model for domain_id in domains}


def build_enum_member(node: GraphNode) -> EnumMember:
    return EnumMember(
        id=node.id,
        class_id=node.types[0],
        label=extract_name(node),
        comment=node.comment,
    )


def ingest_graph(
    raw_nodes: Iterable[Mapping[str, Any]],
    diagnostics: Optional[Diagnostics] = None,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> IngestedGraph:
    """
    Normalize and classify raw @graph entries.

    Args:
        raw_nodes: Decoded @graph entries.
        diagnostics: Collector for ignored nodes.
        config: Vocabulary tags.

    Returns:
        IngestedGraph with class nodes, properties by domain and members by class.
    """
    result = IngestedGraph()

    for raw in raw_nodes:
        node = normalize_node(raw)

        if is_class_node(node, config):
            result.class_nodes[node.id] = node
        elif is_property_node(node, config):
            for domain_id, prop in build_property_models(node).items():
                result.properties_by_domain.setdefault(domain_id, []).append(prop)
        elif is_enum_value_node(node, config):
            member = build_enum_member(node)
            result.members_by_class.setdefault(member.class_id, []).append(member)
        else:
            result.ignored_count += 1
            if diagnostics is not None:
                diagnostics.report(
                    DiagnosticKind.IGNORED_NODE,
                    node.id,
                    f"types {list(node.types)} match no class, property or enum value",
                )

    logger.debug(
        f"Ingested {len(result.class_nodes)} class nodes, "
        f"{sum(len(v) for v in result.properties_by_domain.values())} property slots, "
        f"{sum(len(v) for v in result.members_by_class.values())} enum members "
        f"({result.ignored_count} ignored)"
    )
    return result


__all__ = [
    "MalformedInputError",
    "InputNotFoundError",
    "IngestedGraph",
    "normalize_node",
    "extract_name",
    "is_class_node",
    "is_property_node",
    "is_enum_value_node",
    "build_property_models",
    "build_enum_member",
    "ingest_graph",
]
