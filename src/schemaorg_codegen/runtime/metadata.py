"""
Runtime metadata capability implemented by every generated concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

from schemaorg_codegen.constants import SCHEMA_CONTEXT_URL


@dataclass
class SchemaMetadata:
    """
    Identity of a vocabulary class, carried by each concrete instance.

    Attributes:
        id: Class identifier (e.g., "schema:Event").
        label: Class name, emitted as "@type".
        sub_class_of: Parent class ids in vocabulary order.
        context: JSON-LD context the structured-data document declares.
    """

    id: str
    label: str
    sub_class_of: List[str] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT_URL


class SchemaInterface(Protocol):
    """Anything carrying a SchemaMetadata record."""

    schema_metadata: SchemaMetadata


__all__ = [
    "SchemaMetadata",
    "SchemaInterface",
]
