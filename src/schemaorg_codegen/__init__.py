"""
schemaorg_codegen: typed Python artifacts from the schema.org vocabulary.

Typical use:
    model = parse("schemaorg-current-https.jsonld")
    result = generate(model, "out/schemaorg")

Subpackages:
    graph: JSON-LD node ingestion and hierarchy traversal
    semantic: class resolution, property materialization, type projection
    generation: contract, concrete, enumeration and manifest emission
    runtime: metadata capability and structured-data flattening used by generated code
"""

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from schemaorg_codegen.graph.nodes import InputNotFoundError, MalformedInputError
from schemaorg_codegen.schemas.vocabulary import (
    ClassModel,
    EnumMember,
    PropertyModel,
    ResolvedModel,
)
from schemaorg_codegen.parser import parse
from schemaorg_codegen.generation import (
    FileSystem,
    GenerationError,
    GenerationResult,
    InvalidIdentifierError,
    LocalFileSystem,
    generate,
)
from schemaorg_codegen.runtime import (
    SchemaInterface,
    SchemaMetadata,
    flatten,
    is_schema_interface,
    structured_data,
    structured_data_json,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "CodegenConfig",
    "DEFAULT_CONFIG",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    # Errors
    "MalformedInputError",
    "InputNotFoundError",
    "InvalidIdentifierError",
    "GenerationError",
    # Model
    "ClassModel",
    "EnumMember",
    "PropertyModel",
    "ResolvedModel",
    # Pipeline
    "parse",
    "generate",
    "GenerationResult",
    "FileSystem",
    "LocalFileSystem",
    # Runtime
    "SchemaInterface",
    "SchemaMetadata",
    "flatten",
    "is_schema_interface",
    "structured_data",
    "structured_data_json",
]
