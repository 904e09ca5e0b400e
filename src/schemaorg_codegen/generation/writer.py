"""
Artifact writer.

Emits every class of a ResolvedModel under an output root:
    output_root/interfaces/<Name>.py          contracts and enumerations
    output_root/classes/<Name>_schema.py      concrete classes
    output_root/__init__.py                   manifest

Emission Strategy:
1. Create the directory layout and subpackage markers
2. Render and write each class's artifacts as one thread-pool task; tasks
   share the read-only model and write disjoint paths
3. Wait for every task, then write the manifest from the classes that
   succeeded
4. Raise GenerationError if any task failed (artifacts already written stay)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from tqdm import tqdm

from schemaorg_codegen.config import DEFAULT_CONFIG, CodegenConfig
from schemaorg_codegen.constants import (
    CLASSES_DIR,
    CONCRETE_MODULE_SUFFIX,
    INTERFACES_DIR,
    MANIFEST_FILENAME,
)
from schemaorg_codegen.diagnostics import DiagnosticKind, Diagnostics
from schemaorg_codegen.generation.concrete import render_concrete
from schemaorg_codegen.generation.contracts import render_contract
from schemaorg_codegen.generation.enums import render_enum
from schemaorg_codegen.generation.formatting import python_identifier
from schemaorg_codegen.generation.manifest import (
    build_manifest,
    render_manifest,
    render_package_marker,
)
from schemaorg_codegen.schemas.vocabulary import ClassModel, ResolvedModel

logger = logging.getLogger(__name__)


# =============================================================================
# FILE SYSTEM
# =============================================================================

class FileSystem(Protocol):
    """Write capability used by the writer."""

    def makedirs(self, path: Path) -> None:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...


class LocalFileSystem:
    """Writes UTF-8 files with LF line endings to the local disk."""

    def makedirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class GenerationResult:
    """
    Outcome of a generation run.

    Attributes:
        class_count: Concrete classes written.
        interface_count: Contracts written.
        enum_count: Enumerations written.
        diagnostics: Parse and generation diagnostics.
    """

    class_count: int = 0
    interface_count: int = 0
    enum_count: int = 0
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class GenerationError(RuntimeError):
    """
    Raised after the manifest is written when one or more classes failed.

    Attributes:
        failures: (class name, exception) pairs, in class name order.
        result: Counts and diagnostics of the artifacts that were written.
    """

    def __init__(
        self,
        failures: List[Tuple[str, Exception]],
        result: Optional[GenerationResult] = None,
    ):
        self.failures = sorted(failures, key=lambda item: item[0])
        self.result = result
        names = ", ".join(name for name, _ in self.failures)
        super().__init__(f"Failed to generate {len(self.failures)} class(es): {names}")


# =============================================================================
# EMISSION
# =============================================================================

def _emit_class(
    class_model: ClassModel,
    model: ResolvedModel,
    root: Path,
    fs: FileSystem,
    diagnostics: Diagnostics,
    config: CodegenConfig,
) -> Tuple[int, int, int]:
    """Render and write one class. Returns (contracts, concretes, enumerations) written."""
    name = python_identifier(class_model.name, kind="class name")

    if class_model.is_enumeration:
        if not class_model.has_members:
            diagnostics.report(
                DiagnosticKind.EMPTY_ENUMERATION_SKIPPED,
                class_model.name,
                "enumeration has no members; no artifact emitted",
            )
            return 0, 0, 0
        fs.write_text(root / INTERFACES_DIR / f"{name}.py", render_enum(class_model, diagnostics, config))
        return 0, 0, 1

    contract = render_contract(class_model, model, diagnostics, config)
    concrete = render_concrete(class_model, model, diagnostics, config)
    fs.write_text(root / INTERFACES_DIR / f"{name}.py", contract)
    fs.write_text(root / CLASSES_DIR / f"{name}{CONCRETE_MODULE_SUFFIX}.py", concrete)
    return 1, 1, 0


def generate(
    model: ResolvedModel,
    output_root: Union[str, Path],
    fs: Optional[FileSystem] = None,
    config: Optional[CodegenConfig] = None,
) -> GenerationResult:
    """
    Generate all artifacts of a resolved model.

    Args:
        model: Resolved class model.
        output_root: Directory that becomes the generated package.
        fs: File system capability (default: LocalFileSystem).
        config: Formatting and emission settings (default: DEFAULT_CONFIG).

    Returns:
        GenerationResult with artifact counts and diagnostics.

    Raises:
        GenerationError: If any class failed; carries every failure and the
            partial result.
    """
    config = config if config is not None else DEFAULT_CONFIG
    fs = fs if fs is not None else LocalFileSystem()
    root = Path(output_root)

    diagnostics = Diagnostics()
    diagnostics.extend(model.diagnostics)

    fs.makedirs(root / INTERFACES_DIR)
    fs.makedirs(root / CLASSES_DIR)
    fs.write_text(root / INTERFACES_DIR / MANIFEST_FILENAME, render_package_marker("Generated contracts and enumerations."))
    fs.write_text(root / CLASSES_DIR / MANIFEST_FILENAME, render_package_marker("Generated concrete classes."))

    result = GenerationResult(diagnostics=diagnostics)
    failures: List[Tuple[str, Exception]] = []

    logger.info(f"Generating {len(model)} classes into {root}")
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        futures = {
            executor.submit(_emit_class, class_model, model, root, fs, diagnostics, config): class_model
            for class_model in model.values()
        }
        for future in tqdm(
            as_completed(futures),
            total=len(futures),
            desc="Generating classes",
            disable=not config.show_progress,
        ):
            class_model = futures[future]
            try:
                contracts, concretes, enums = future.result()
            except Exception as exc:
                logger.error(f"Error generating class for {class_model.name}: {exc}")
                failures.append((class_model.name, exc))
                continue

            result.interface_count += contracts
            result.class_count += concretes
            result.enum_count += enums

    fs.write_text(root / MANIFEST_FILENAME, render_manifest(build_manifest(model), config))

    logger.info(
        f"Generated {result.interface_count} contracts, {result.class_count} classes, "
        f"{result.enum_count} enumerations ({len(diagnostics)} diagnostics)"
    )

    if failures:
        raise GenerationError(failures, result)
    return result


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "GenerationResult",
    "GenerationError",
    "generate",
]
