"""
Structured-data flattening.

Turns a populated concrete instance into a JSON-LD document:
- every set attribute becomes a key (the field's metadata "name" if present,
  else the attribute name); None values and schema_metadata are skipped
- nested schema instances are flattened recursively, in lists too
- enumeration members become their URL value
- "@type" is the instance's metadata label and comes last
- the top-level document adds "@context" (the argument, else the instance's
  metadata context) and sorts its keys

The flattener is structural: it recognizes any object carrying a
schema_metadata record with an id, not just generated classes.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from schemaorg_codegen.constants import JSONLD_CONTEXT, JSONLD_TYPE, METADATA_FIELD, SCHEMA_CONTEXT_URL


def is_schema_interface(value: Any) -> bool:
    """True if the value carries a metadata record with an id."""
    metadata = getattr(value, METADATA_FIELD, None)
    return metadata is not None and getattr(metadata, "id", None) is not None


def _attributes(instance: Any) -> Iterator[Tuple[str, Any]]:
    if dataclasses.is_dataclass(instance) and not isinstance(instance, type):
        for f in dataclasses.fields(instance):
            yield f.metadata.get("name", f.name), getattr(instance, f.name)
    else:
        for name, value in vars(instance).items():
            yield name, value


def _flatten_value(value: Any) -> Any:
    if is_schema_interface(value):
        return flatten(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_flatten_value(item) for item in value]
    return value


def flatten(instance: Any) -> Dict[str, Any]:
    """
    Flatten a schema instance into a JSON-LD object.

    Args:
        instance: Object implementing the metadata capability.

    Returns:
        Dict of set attributes in declaration order, "@type" last.

    Raises:
        TypeError: If the instance carries no metadata record.
    """
    if not is_schema_interface(instance):
        raise TypeError(f"{type(instance).__name__} does not carry {METADATA_FIELD}")

    document: Dict[str, Any] = {}
    for key, value in _attributes(instance):
        if key == METADATA_FIELD or value is None:
            continue
        document[key] = _flatten_value(value)

    document[JSONLD_TYPE] = getattr(instance, METADATA_FIELD).label
    return document


def structured_data(instance: Any, context: Optional[str] = None) -> Dict[str, Any]:
    """
    Flatten an instance and add "@context"; top-level keys are sorted.

    Without an explicit context the instance's metadata context is used,
    falling back to https://schema.org for records that carry none.
    """
    document = flatten(instance)
    if context is None:
        context = getattr(getattr(instance, METADATA_FIELD), "context", SCHEMA_CONTEXT_URL)
    document[JSONLD_CONTEXT] = context
    return {key: document[key] for key in sorted(document)}


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def structured_data_json(instance: Any, context: Optional[str] = None) -> str:
    """Compact JSON text of structured_data(instance)."""
    return json.dumps(
        structured_data(instance, context),
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    )


__all__ = [
    "is_schema_interface",
    "flatten",
    "structured_data",
    "structured_data_json",
]
