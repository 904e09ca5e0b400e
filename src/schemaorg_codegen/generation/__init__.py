"""Python source emission for resolved vocabularies."""

from .formatting import (
    InvalidIdentifierError,
    python_identifier,
    render_docstring,
    ImportSet,
)

from .contracts import (
    extends_list,
    render_contract,
)

from .concrete import (
    concrete_class_name,
    render_concrete,
)

from .enums import render_enum

from .manifest import (
    Manifest,
    build_manifest,
    render_manifest,
)

from .writer import (
    FileSystem,
    LocalFileSystem,
    GenerationResult,
    GenerationError,
    generate,
)

__all__ = [
    # Formatting
    "InvalidIdentifierError",
    "python_identifier",
    "render_docstring",
    "ImportSet",
    # Artifacts
    "extends_list",
    "render_contract",
    "concrete_class_name",
    "render_concrete",
    "render_enum",
    # Manifest
    "Manifest",
    "build_manifest",
    "render_manifest",
    # Writer
    "FileSystem",
    "LocalFileSystem",
    "GenerationResult",
    "GenerationError",
    "generate",
]
