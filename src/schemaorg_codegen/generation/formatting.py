"""
Source formatting primitives shared by the artifact renderers.

Formatting rules:
- four-space indentation (CodegenConfig.indent)
- docstrings wrapped on word boundaries at CodegenConfig.comment_width;
  empty text becomes NO_DESCRIPTION
- imports deduplicated, one line per imported identifier, sorted
- a line longer than CodegenConfig.max_line_length is re-rendered one item
  per line (union members get a "| " prefix, list items a trailing comma)
"""

from __future__ import annotations

import json
import keyword
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set, Tuple

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import GENERATED_HEADER, NO_DESCRIPTION
from schemaorg_codegen.utils.text import wrap_words


class InvalidIdentifierError(ValueError):
    """Raised when a class, member or attribute name cannot be a Python identifier."""


# =============================================================================
# NAMES AND LITERALS
# =============================================================================

def python_identifier(name: str, kind: str = "name") -> str:
    """
    Turn a sanitized vocabulary name into a Python identifier.

    Keywords get a trailing underscore (e.g. "yield" -> "yield_").

    Raises:
        InvalidIdentifierError: If the result is still not an identifier.
    """
    candidate = f"{name}_" if keyword.iskeyword(name) else name
    if not candidate.isidentifier():
        raise InvalidIdentifierError(f"Invalid {kind} '{name}': not a Python identifier")
    return candidate


def quote(text: str) -> str:
    """Render text as a double-quoted string literal."""
    return json.dumps(text, ensure_ascii=False)


def comment_or_default(comment: str) -> str:
    return comment if comment and comment.strip() else NO_DESCRIPTION


def _escape_docstring(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def render_docstring(text: str, level: int = 1, config: CodegenConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Render a wrapped, triple-quoted docstring block.

    Args:
        text: Raw description (empty -> NO_DESCRIPTION).
        level: Indentation level of the block.
        config: Supplies indentation and wrap width.

    Returns:
        Source lines, opening and closing quotes on their own lines.
    """
    pad = config.indent * level
    body = wrap_words(_escape_docstring(comment_or_default(text)), config.comment_width)
    return [f'{pad}"""'] + [f"{pad}{line}" for line in body] + [f'{pad}"""']


# =============================================================================
# IMPORTS
# =============================================================================

@dataclass
class ImportSet:
    """
    Imports collected while rendering one module.

    Attributes:
        runtime: (module, name) pairs imported unconditionally.
        type_checking: (module, name) pairs imported only under TYPE_CHECKING.
    """

    runtime: Set[Tuple[str, str]] = field(default_factory=set)
    type_checking: Set[Tuple[str, str]] = field(default_factory=set)

    def add(self, module: str, name: str) -> None:
        self.runtime.add((module, name))

    def add_type_only(self, module: str, name: str) -> None:
        self.type_checking.add((module, name))

    def render(self, config: CodegenConfig = DEFAULT_CONFIG) -> List[str]:
        """
        Render the import block.

        A name imported at runtime is not repeated under TYPE_CHECKING. The
        TYPE_CHECKING guard (and its typing import) appears only when needed.
        """
        runtime = set(self.runtime)
        deferred = {pair for pair in self.type_checking if pair not in runtime}
        if deferred:
            runtime.add(("typing", "TYPE_CHECKING"))

        lines = sorted({f"from {module} import {name}" for module, name in runtime})
        if deferred:
            lines.append("")
            lines.append("if TYPE_CHECKING:")
            lines.extend(
                f"{config.indent}{line}"
                for line in sorted({f"from {module} import {name}" for module, name in deferred})
            )
        return lines


def module_preamble(imports: ImportSet, config: CodegenConfig = DEFAULT_CONFIG) -> List[str]:
    """Header comment, future import and the import block of a generated module."""
    lines = [GENERATED_HEADER, "from __future__ import annotations", ""]
    import_lines = imports.render(config)
    if import_lines:
        lines.extend(import_lines)
        lines.append("")
    lines.append("")
    return lines


# =============================================================================
# LONG LINES
# =============================================================================

def render_annotated(
    name: str,
    tokens: Sequence[str],
    default: str | None,
    level: int = 1,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Render `name: A | B | None` (with an optional `= default`).

    Over-long lines wrap the union in parentheses, one member per line.
    """
    pad = config.indent * level
    members = list(tokens) + ["None"]
    suffix = f" = {default}" if default is not None else ""

    line = f"{pad}{name}: {' | '.join(members)}{suffix}"
    if len(line) <= config.max_line_length:
        return [line]

    inner = pad + config.indent
    lines = [f"{pad}{name}: ("]
    lines.append(f"{inner}{members[0]}")
    lines.extend(f"{inner}| {member}" for member in members[1:])
    lines.append(f"{pad}){suffix}")
    return lines


def render_list_argument(
    keyword_name: str,
    items: Iterable[str],
    level: int,
    config: CodegenConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Render `keyword=["a", "b"],` as a call argument.

    Over-long lines put each item on its own line with a trailing comma.
    """
    pad = config.indent * level
    quoted = [quote(item) for item in items]

    line = f"{pad}{keyword_name}=[{', '.join(quoted)}],"
    if len(line) <= config.max_line_length:
        return [line]

    inner = pad + config.indent
    return [f"{pad}{keyword_name}=["] + [f"{inner}{item}," for item in quoted] + [f"{pad}],"]


def join_lines(lines: Iterable[str]) -> str:
    """Join source lines, with exactly one trailing newline."""
    return "\n".join(lines).rstrip("\n") + "\n"


__all__ = [
    "InvalidIdentifierError",
    "python_identifier",
    "quote",
    "comment_or_default",
    "render_docstring",
    "ImportSet",
    "module_preamble",
    "render_annotated",
    "render_list_argument",
    "join_lines",
]
