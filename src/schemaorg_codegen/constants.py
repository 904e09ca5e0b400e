"""
Shared constants across schemaorg_codegen modules.

This module is the single source of truth for:
- Core RDF/RDFS type tags and JSON-LD keywords
- schema.org relation fields read during ingestion
- The primitive datatype mapping used by the type projector
- Output layout names
"""

from typing import Dict, Optional, Tuple

# =============================================================================
# JSON-LD KEYWORDS
# =============================================================================

JSONLD_ID = "@id"
JSONLD_TYPE = "@type"
JSONLD_VALUE = "@value"
JSONLD_LANGUAGE = "@language"
JSONLD_GRAPH = "@graph"
JSONLD_CONTEXT = "@context"


# =============================================================================
# VOCABULARY TAGS
# =============================================================================
# Defaults for the schema.org release files; CodegenConfig can override them.

RDFS_CLASS = "rdfs:Class"
RDF_PROPERTY = "rdf:Property"
RDFS_LABEL = "rdfs:label"
RDFS_COMMENT = "rdfs:comment"
RDFS_SUBCLASS_OF = "rdfs:subClassOf"
SCHEMA_DOMAIN_INCLUDES = "schema:domainIncludes"
SCHEMA_RANGE_INCLUDES = "schema:rangeIncludes"
SCHEMA_ENUMERATION = "schema:Enumeration"

VOCABULARY_PREFIX = "schema:"
SCHEMA_BASE_URL = "https://schema.org/"
SCHEMA_CONTEXT_URL = "https://schema.org"

PREFERRED_LANGUAGE = "en"


# =============================================================================
# PRIMITIVE TYPES
# =============================================================================
# schema.org datatype id -> (python annotation, module to import it from)

PRIMITIVE_TYPES: Dict[str, Tuple[str, Optional[str]]] = {
    "schema:Text": ("str", None),
    "schema:Number": ("float", None),
    "schema:Integer": ("int", None),
    "schema:Float": ("float", None),
    "schema:Boolean": ("bool", None),
    "schema:Date": ("date", "datetime"),
    "schema:DateTime": ("datetime", "datetime"),
    "schema:Time": ("time", "datetime"),
    "schema:URL": ("str", None),
    "schema:CssSelectorType": ("str", None),
    "schema:XPathType": ("str", None),
    "schema:PronounceableText": ("str", None),
    "schema:DataTypeSchema": ("str", None),
}

UNCONSTRAINED_TYPE = "Any"


def primitive_type(type_id: str) -> Optional[Tuple[str, Optional[str]]]:
    """Return the (annotation, import module) pair for a datatype id, or None."""
    return PRIMITIVE_TYPES.get(type_id)


def is_primitive(type_id: str) -> bool:
    return type_id in PRIMITIVE_TYPES


# =============================================================================
# OUTPUT LAYOUT
# =============================================================================

INTERFACES_DIR = "interfaces"
CLASSES_DIR = "classes"
MANIFEST_FILENAME = "__init__.py"
CONCRETE_SUFFIX = "Schema"
CONCRETE_MODULE_SUFFIX = "_schema"
METADATA_FIELD = "schema_metadata"

GENERATED_HEADER = "# Generated by schemaorg_codegen. Do not edit by hand."
NO_DESCRIPTION = "No description available"
