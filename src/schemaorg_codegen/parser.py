"""
Vocabulary parser facade.

Reads a JSON-LD vocabulary document (a path or an already-decoded mapping)
and returns the immutable ResolvedModel consumed by generation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import JSONLD_GRAPH
from schemaorg_codegen.diagnostics import Diagnostics
from schemaorg_codegen.graph.nodes import InputNotFoundError, MalformedInputError, ingest_graph
from schemaorg_codegen.schemas.vocabulary import ResolvedModel
from schemaorg_codegen.semantic.resolution import resolve_graph

logger = logging.getLogger(__name__)


def load_document(source: Union[str, Path]) -> Mapping[str, Any]:
    """
    Load a JSON-LD document from disk.

    Raises:
        InputNotFoundError: If the file does not exist.
        MalformedInputError: If the file is not valid UTF-8 JSON.
    """
    path = Path(source)
    if not path.is_file():
        raise InputNotFoundError(f"Vocabulary file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"Cannot decode {path}: {exc}") from exc


def parse(
    source: Union[str, Path, Mapping[str, Any]],
    config: Optional[CodegenConfig] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> ResolvedModel:
    """
    Parse a vocabulary into a ResolvedModel.

    Args:
        source: Path of a JSON-LD file, or the decoded document.
        config: Vocabulary tags (default: DEFAULT_CONFIG).
        diagnostics: Collector to report into (default: a new one, attached to the model).

    Returns:
        ResolvedModel of every class in the document.

    Raises:
        InputNotFoundError: If a path is given and does not exist.
        MalformedInputError: If the document cannot be decoded or has no @graph list.
    """
    config = config if config is not None else DEFAULT_CONFIG
    if diagnostics is None:
        diagnostics = Diagnostics()

    document = source if isinstance(source, Mapping) else load_document(source)
    graph = document.get(JSONLD_GRAPH) if isinstance(document, Mapping) else None
    if not isinstance(graph, list):
        raise MalformedInputError(f"Document has no {JSONLD_GRAPH} list")

    logger.info(f"Parsing vocabulary graph with {len(graph)} nodes")
    ingested = ingest_graph(graph, diagnostics=diagnostics, config=config)
    return resolve_graph(ingested, diagnostics=diagnostics, config=config)


__all__ = [
    "load_document",
    "parse",
]
