"""
Vocabulary model definitions.

These dataclasses describe the normalized graph nodes and the resolved class
model shared by the resolver, the type projector and the code emitter. All of
them are frozen: the resolved model is built once per run and only read
afterwards, which lets emission tasks share it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional, Tuple

import networkx as nx

from schemaorg_codegen.diagnostics import Diagnostics


@dataclass(frozen=True)
class GraphNode:
    """
    A raw @graph entry after normalization.

    Attributes:
        id: Node identifier (e.g., "schema:Event").
        types: All @type tags, always a tuple.
        label: rdfs:label text (language tags resolved), None if absent.
        comment: rdfs:comment text, "" if absent.
        relations: Reference fields (rdfs:subClassOf, schema:domainIncludes, ...)
            mapped to the tuple of referenced ids.
    """

    id: str
    types: Tuple[str, ...]
    label: Optional[str] = None
    comment: str = ""
    relations: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def refs(self, relation: str) -> Tuple[str, ...]:
        """Referenced ids for a relation field, empty when absent."""
        return self.relations.get(relation, ())


@dataclass(frozen=True)
class PropertyModel:
    """
    A property attached to a domain class.

    Attributes:
        id: Property identifier (e.g., "schema:eventStatus").
        name: Sanitized property name used for the Python attribute.
        label: Raw label, used as the JSON-LD key.
        comment: Property description.
        range_includes: Target ids (primitive tags or class ids), None when unconstrained.
    """

    id: str
    name: str
    label: str
    comment: str = ""
    range_includes: Optional[Tuple[str, ...]] = None

    @property
    def is_unconstrained(self) -> bool:
        return self.range_includes is None


@dataclass(frozen=True)
class EnumMember:
    """A named constant of an enumeration class."""

    id: str
    class_id: str
    label: str
    comment: str = ""


@dataclass(frozen=True)
class ClassModel:
    """
    A resolved ontology class.

    Attributes:
        id: Class identifier.
        name: Sanitized display name (digit-leading names are prefixed with "_").
        comment: Class description.
        parents: Parent ids in input order (empty when the class has none).
        properties: Properties whose domain includes this class.
        is_enumeration: True if the class is a closed value set.
        enum_members: Members declared with this class as their type.
    """

    id: str
    name: str
    comment: str = ""
    parents: Tuple[str, ...] = ()
    properties: Tuple[PropertyModel, ...] = ()
    is_enumeration: bool = False
    enum_members: Tuple[EnumMember, ...] = ()

    @property
    def has_members(self) -> bool:
        return len(self.enum_members) > 0


def build_hierarchy_graph(classes: Mapping[str, ClassModel]) -> nx.DiGraph:
    """
    Build the child -> parent graph of a class mapping.

    Parent ids that are not classes (datatypes, unknown ids) become leaf nodes,
    so traversal stops there.
    """
    graph = nx.DiGraph()
    for class_id, class_model in classes.items():
        graph.add_node(class_id)
        for parent_id in class_model.parents:
            graph.add_edge(class_id, parent_id)
    return graph


class ResolvedModel(Mapping[str, ClassModel]):
    """
    Read-only mapping from class id to ClassModel.

    Also carries the diagnostics produced while parsing and the prebuilt
    hierarchy graph used by ancestor/descendant traversal.
    """

    def __init__(
        self,
        classes: Mapping[str, ClassModel],
        diagnostics: Optional[Diagnostics] = None,
    ):
        self._classes: Dict[str, ClassModel] = dict(classes)
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._hierarchy = build_hierarchy_graph(self._classes)

    @property
    def diagnostics(self) -> Diagnostics:
        return self._diagnostics

    @property
    def hierarchy(self) -> nx.DiGraph:
        return self._hierarchy

    def by_name(self, name: str) -> Optional[ClassModel]:
        """Find a class by display name (first match in input order)."""
        for class_model in self._classes.values():
            if class_model.name == name:
                return class_model
        return None

    def summary(self) -> Dict[str, int]:
        """Get summary statistics."""
        enumerations = [c for c in self._classes.values() if c.is_enumeration]
        return {
            "classes": len(self._classes),
            "enumerations": len(enumerations),
            "non_empty_enumerations": sum(1 for c in enumerations if c.has_members),
            "properties": sum(len(c.properties) for c in self._classes.values()),
            "enum_members": sum(len(c.enum_members) for c in enumerations),
        }

    def __getitem__(self, class_id: str) -> ClassModel:
        return self._classes[class_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ResolvedModel({len(self._classes)} classes)"


__all__ = [
    "GraphNode",
    "PropertyModel",
    "EnumMember",
    "ClassModel",
    "ResolvedModel",
    "build_hierarchy_graph",
]
