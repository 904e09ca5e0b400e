"""
Diagnostics collection for parse and generation runs.

Non-fatal problems (unresolved references, empty type unions, skipped empty
enumerations, property name collisions) are recorded here instead of halting
the run. The collector is returned to callers so tests and tools can assert on
warnings deterministically; every entry is also logged.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Kinds of non-fatal diagnostics."""
    UNRESOLVED_REFERENCE = "unresolved_reference"
    EMPTY_TYPE_UNION = "empty_type_union"
    EMPTY_ENUMERATION_SKIPPED = "empty_enumeration_skipped"
    PROPERTY_NAME_COLLISION = "property_name_collision"
    IGNORED_NODE = "ignored_node"
    DUPLICATE_ENUM_MEMBER = "duplicate_enum_member"


# Kinds that are expected noise on real vocabularies
_DEBUG_KINDS = {DiagnosticKind.IGNORED_NODE, DiagnosticKind.EMPTY_ENUMERATION_SKIPPED}


@dataclass(frozen=True)
class Diagnostic:
    """
    A single diagnostic entry.

    Attributes:
        kind: Diagnostic category.
        subject: Identifier the diagnostic is about (class name, property id, node id).
        message: Human-readable description.
    """

    kind: DiagnosticKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.subject}: {self.message}"


class Diagnostics:
    """
    Thread-safe, deduplicating diagnostics collector.

    Identical entries (same kind, subject and message) are stored once, in
    first-reported order, because emission reports the same unresolved range
    from both the contract and the concrete artifact.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[DiagnosticKind, str, str], Diagnostic] = {}
        self._lock = threading.Lock()

    def report(self, kind: DiagnosticKind, subject: str, message: str) -> None:
        entry = Diagnostic(kind=kind, subject=subject, message=message)
        key = (kind, subject, message)
        with self._lock:
            if key in self._entries:
                return
            self._entries[key] = entry
        if kind in _DEBUG_KINDS:
            logger.debug(str(entry))
        else:
            logger.warning(str(entry))

    def extend(self, other: "Diagnostics") -> None:
        """Merge entries of another collector, keeping order. Merged entries are not logged again."""
        for entry in other:
            with self._lock:
                self._entries.setdefault((entry.kind, entry.subject, entry.message), entry)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [entry for entry in self if entry.kind == kind]

    def summary(self) -> Dict[str, int]:
        """Count entries per kind."""
        counts: Dict[str, int] = {}
        for entry in self:
            counts[entry.kind.value] = counts.get(entry.kind.value, 0) + 1
        return counts

    def __iter__(self) -> Iterator[Diagnostic]:
        with self._lock:
            entries = list(self._entries.values())
        return iter(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "Diagnostics",
]
