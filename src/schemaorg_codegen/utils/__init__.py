"""
Utility modules for schemaorg_codegen.

Submodules:
    text: Text processing utilities (name sanitization, local names, word wrapping)
    serialize: Normalization of scalar-or-list and language-tagged JSON-LD values
"""

from schemaorg_codegen.utils.text import local_name, sanitize_name, wrap_words
from schemaorg_codegen.utils.serialize import (
    as_list,
    is_reference_value,
    literal_text,
    reference_ids,
)

__all__ = [
    # Text utilities
    "local_name",
    "sanitize_name",
    "wrap_words",
    # Normalization utilities
    "as_list",
    "is_reference_value",
    "literal_text",
    "reference_ids",
]
