"""
Normalization utilities for raw JSON-LD values.

JSON-LD allows most fields to hold either a single value or a list of values,
and labels to be either plain strings or language-tagged objects. These helpers
turn such variant values into one uniform shape at the ingestion boundary.
"""

from typing import Any, List, Optional

from schemaorg_codegen.constants import (
    JSONLD_ID,
    JSONLD_LANGUAGE,
    JSONLD_VALUE,
    PREFERRED_LANGUAGE,
)


def as_list(x: Any) -> List:
    """
    Normalize a scalar-or-list value to a plain Python list.

    - None -> empty list
    - list/tuple -> list (pass-through)
    - anything else -> single-element list

    Example:
        >>> as_list("rdfs:Class")
        ['rdfs:Class']
        >>> as_list(["schema:DataType", "rdfs:Class"])
        ['schema:DataType', 'rdfs:Class']
        >>> as_list(None)
        []
    """
    if x is None:
        return []

    if isinstance(x, (list, tuple)):
        return list(x)

    return [x]


def literal_text(value: Any, language: str = PREFERRED_LANGUAGE) -> Optional[str]:
    """
    Extract the text of a plain or language-tagged literal.

    Handles:
    - "Event" -> "Event"
    - {"@language": "en", "@value": "Event"} -> "Event"
    - a list of the above -> the value tagged with `language`, else the first one

    Returns:
        The literal text, or None if no text can be extracted.

    Example:
        >>> literal_text({"@language": "en", "@value": "Thing"})
        'Thing'
        >>> literal_text([{"@language": "fr", "@value": "Chose"}, {"@language": "en", "@value": "Thing"}])
        'Thing'
    """
    candidates = as_list(value)
    if not candidates:
        return None

    texts = []
    for candidate in candidates:
        if isinstance(candidate, dict):
            text = candidate.get(JSONLD_VALUE)
            if text is None:
                continue
            if candidate.get(JSONLD_LANGUAGE) == language:
                return str(text)
            texts.append(str(text))
        elif candidate is not None:
            texts.append(str(candidate))

    return texts[0] if texts else None


def reference_ids(value: Any) -> List[str]:
    """
    Extract referenced ids from a reference field.

    References appear as {"@id": "schema:Thing"} or a list of those; bare
    strings are accepted as ids too. Entries without an id are dropped.

    Example:
        >>> reference_ids({"@id": "schema:Thing"})
        ['schema:Thing']
        >>> reference_ids([{"@id": "schema:Place"}, {"@id": "schema:Organization"}])
        ['schema:Place', 'schema:Organization']
    """
    ids = []
    for item in as_list(value):
        if isinstance(item, dict):
            ref = item.get(JSONLD_ID)
            if ref:
                ids.append(str(ref))
        elif isinstance(item, str) and item:
            ids.append(item)
    return ids


def is_reference_value(value: Any) -> bool:
    """True if the value is a reference or a list made only of references."""
    items = as_list(value)
    return bool(items) and all(isinstance(item, dict) and JSONLD_ID in item for item in items)
