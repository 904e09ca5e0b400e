"""Runtime support imported by generated packages."""

from .metadata import SchemaMetadata, SchemaInterface

from .structured_data import (
    is_schema_interface,
    flatten,
    structured_data,
    structured_data_json,
)

__all__ = [
    "SchemaMetadata",
    "SchemaInterface",
    "is_schema_interface",
    "flatten",
    "structured_data",
    "structured_data_json",
]
