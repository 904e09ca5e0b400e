"""
Ancestor/descendant traversal over the class hierarchy.

Parentage is modeled as an explicit list of parent ids per class, so transitive
closure is computed here instead of relying on Python inheritance. The
hierarchy is a child -> parent networkx DiGraph prebuilt by ResolvedModel:
- ancestors: nodes reachable by following parent edges
- descendants: nodes that can reach the class, i.e. the reverse closure

Both closures terminate on cyclic (malformed) graphs, exclude the class itself
and are returned sorted so emission stays deterministic.
"""

from typing import List, Mapping

import networkx as nx

from schemaorg_codegen.schemas.vocabulary import ClassModel, ResolvedModel, build_hierarchy_graph


def _hierarchy_of(all_classes: Mapping[str, ClassModel]) -> nx.DiGraph:
    if isinstance(all_classes, ResolvedModel):
        return all_classes.hierarchy
    return build_hierarchy_graph(all_classes)


def ancestors(class_model: ClassModel, all_classes: Mapping[str, ClassModel]) -> List[str]:
    """
    Transitive parent ids of a class.

    Parent ids absent from `all_classes` (datatypes, unknown ids) are included
    but not expanded further.

    Returns:
        Sorted, deduplicated ancestor ids.
    """
    graph = _hierarchy_of(all_classes)
    if class_model.id not in graph:
        return sorted(set(class_model.parents))
    found = nx.descendants(graph, class_model.id)
    found.discard(class_model.id)
    return sorted(found)


def descendants(class_model: ClassModel, all_classes: Mapping[str, ClassModel]) -> List[str]:
    """
    Transitive child ids of a class.

    Returns:
        Sorted, deduplicated ids of every class that has this class as an ancestor.
    """
    graph = _hierarchy_of(all_classes)
    if class_model.id not in graph:
        return []
    found = nx.ancestors(graph, class_model.id)
    found.discard(class_model.id)
    return sorted(found)


def resolved_ancestors(class_model: ClassModel, all_classes: Mapping[str, ClassModel]) -> List[ClassModel]:
    """Ancestors that are known classes, in ancestor-id order."""
    return [all_classes[class_id] for class_id in ancestors(class_model, all_classes) if class_id in all_classes]


def resolved_descendants(class_model: ClassModel, all_classes: Mapping[str, ClassModel]) -> List[ClassModel]:
    """Descendants as ClassModels, in descendant-id order."""
    return [all_classes[class_id] for class_id in descendants(class_model, all_classes) if class_id in all_classes]


__all__ = [
    "ancestors",
    "descendants",
    "resolved_ancestors",
    "resolved_descendants",
]
