"""
Generator configuration for schemaorg_codegen.

This module defines the CodegenConfig dataclass that captures the vocabulary
tags, formatting rules and emission settings used by the parser and the code
emitter, so no stage hardcodes schema.org specifics on its own.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from schemaorg_codegen.constants import (
    RDF_PROPERTY,
    RDFS_CLASS,
    SCHEMA_BASE_URL,
    SCHEMA_CONTEXT_URL,
    SCHEMA_ENUMERATION,
    VOCABULARY_PREFIX,
)

ENV_PREFIX = "SCHEMAORG_CODEGEN_"


@dataclass(frozen=True)
class CodegenConfig:
    """
    Configuration for parsing a vocabulary and emitting Python artifacts.

    Attributes:
        vocabulary_prefix: Prefix of vocabulary-specific ids (enum-value types start with it).
        class_type: Type tag marking class nodes.
        property_type: Type tag marking property nodes.
        enumeration_root: Id of the universal enumeration root class.
        base_url: Canonical base address prepended to enumeration member labels.
        context_url: "@context" of generated classes, written into their metadata
            when it differs from the schema.org default.

        indent: Indentation unit of the emitted code.
        comment_width: Soft wrap width for docstring text.
        max_line_length: Rendered lines longer than this are split one item per line.

        max_workers: Thread pool size for class-parallel emission (None = executor default).
        show_progress: Show a tqdm progress bar while emitting.
        runtime_module: Import path of the runtime support package used by concrete classes.
    """

    # Vocabulary
    vocabulary_prefix: str = VOCABULARY_PREFIX
    class_type: str = RDFS_CLASS
    property_type: str = RDF_PROPERTY
    enumeration_root: str = SCHEMA_ENUMERATION
    base_url: str = SCHEMA_BASE_URL
    context_url: str = SCHEMA_CONTEXT_URL

    # Formatting
    indent: str = "    "
    comment_width: int = 80
    max_line_length: int = 200

    # Emission
    max_workers: Optional[int] = None
    show_progress: bool = False
    runtime_module: str = "schemaorg_codegen.runtime"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "CodegenConfig":
        """
        Create configuration from SCHEMAORG_CODEGEN_* environment variables.

        A .env file is loaded first (without overriding variables that are
        already set).

        Args:
            dotenv_path: Explicit .env file. If None, python-dotenv searches upwards.

        Returns:
            CodegenConfig with environment overrides applied to the defaults.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)
        defaults = cls()

        def _get(name: str, default: str) -> str:
            return os.environ.get(f"{ENV_PREFIX}{name}", default)

        max_workers_raw = os.environ.get(f"{ENV_PREFIX}MAX_WORKERS")
        return cls(
            vocabulary_prefix=_get("VOCABULARY_PREFIX", defaults.vocabulary_prefix),
            enumeration_root=_get("ENUMERATION_ROOT", defaults.enumeration_root),
            base_url=_get("BASE_URL", defaults.base_url),
            context_url=_get("CONTEXT_URL", defaults.context_url),
            comment_width=int(_get("COMMENT_WIDTH", str(defaults.comment_width))),
            max_line_length=int(_get("MAX_LINE_LENGTH", str(defaults.max_line_length))),
            max_workers=int(max_workers_raw) if max_workers_raw else None,
            show_progress=_get("SHOW_PROGRESS", "0").lower() in ("1", "true", "yes"),
            runtime_module=_get("RUNTIME_MODULE", defaults.runtime_module),
        )


DEFAULT_CONFIG = CodegenConfig()
