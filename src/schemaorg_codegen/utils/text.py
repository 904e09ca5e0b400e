"""
Text processing utilities for schemaorg_codegen.

This module provides the text manipulation used by ingestion and emission:
- Name sanitization for generated identifiers
- Local-name extraction from compact or absolute ids
- Word-boundary wrapping for docstrings
"""

import re
from typing import List

_LOCAL_NAME_RX = re.compile(r"[:/#]")


def sanitize_name(name: str) -> str:
    """
    Make a display name usable as the start of an identifier.

    Names that start with a digit are prefixed with an underscore.

    Example:
        >>> sanitize_name("3DModel")
        '_3DModel'
        >>> sanitize_name("Event")
        'Event'
    """
    if name[:1].isdigit():
        return "_" + name
    return name


def local_name(node_id: str) -> str:
    """
    Return the part of an id after its last ':', '/' or '#'.

    Example:
        >>> local_name("schema:Event")
        'Event'
        >>> local_name("https://schema.org/Event")
        'Event'
    """
    parts = _LOCAL_NAME_RX.split(node_id)
    return parts[-1] if parts[-1] else node_id


def wrap_words(text: str, width: int = 80) -> List[str]:
    """
    Wrap text on word boundaries at a soft width.

    Words are never split, so a single word longer than `width` occupies its
    own line. Lines are trimmed and empty lines are dropped.

    Args:
        text: Text to wrap (newlines count as word boundaries).
        width: Soft maximum line width.

    Returns:
        List of wrapped lines.

    Example:
        >>> wrap_words("The subject matter of the content.", width=20)
        ['The subject matter', 'of the content.']
    """
    lines: List[str] = []
    line = ""
    for word in text.split():
        if line and len(line) + 1 + len(word) > width:
            lines.append(line)
            line = word
        else:
            line = f"{line} {word}" if line else word
    lines.append(line)

    return [ln.strip() for ln in lines if ln.strip()]
