from __future__ import annotations

import threading
from pathlib import Path

import pytest

from schemaorg_codegen import (
    CodegenConfig,
    DiagnosticKind,
    Diagnostics,
    GenerationError,
    InvalidIdentifierError,
    generate,
    parse,
)
from schemaorg_codegen.generation.concrete import render_concrete
from schemaorg_codegen.generation.contracts import extends_list, render_contract
from schemaorg_codegen.generation.enums import render_enum

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "schemaorg_subset.jsonld"
ROOT = Path("out")


class MemoryFileSystem:
    """In-memory FileSystem keyed by posix path relative to the output root."""

    def __init__(self):
        self.files = {}
        self.dirs = set()
        self._lock = threading.Lock()

    def makedirs(self, path):
        self.dirs.add(Path(path).relative_to(ROOT).as_posix())

    def write_text(self, path, content):
        with self._lock:
            self.files[Path(path).relative_to(ROOT).as_posix()] = content


def _class(node_id, *parents, comment=None):
    node = {"@id": node_id, "@type": "rdfs:Class", "rdfs:label": node_id.split(":")[-1]}
    if parents:
        node["rdfs:subClassOf"] = [{"@id": p} for p in parents]
    if comment is not None:
        node["rdfs:comment"] = comment
    return node


def _prop(node_id, domains, ranges, comment=None):
    node = {
        "@id": node_id,
        "@type": "rdf:Property",
        "rdfs:label": node_id.split(":")[-1],
        "schema:domainIncludes": [{"@id": d} for d in domains],
        "schema:rangeIncludes": [{"@id": r} for r in ranges],
    }
    if comment is not None:
        node["rdfs:comment"] = comment
    return node


def _small_model():
    return parse(
        {
            "@graph": [
                _class("schema:Thing", comment="The most generic type of item."),
                _class("schema:Enumeration", "schema:Thing", comment="Lists or enumerations."),
                _class("schema:EventStatusType", "schema:Enumeration", comment="Status of an event."),
                {"@id": "schema:EventScheduled", "@type": "schema:EventStatusType", "rdfs:label": "EventScheduled"},
                {"@id": "schema:EventCancelled", "@type": "schema:EventStatusType", "rdfs:label": "EventCancelled"},
                _class("schema:Person", "schema:Thing", comment="A person."),
                _class("schema:Event", "schema:Thing", comment="An event."),
                _prop("schema:name", ["schema:Thing"], ["schema:Text"], comment="The name."),
                _prop("schema:performer", ["schema:Event"], ["schema:Person"], comment="A performer."),
                _prop("schema:eventStatus", ["schema:Event"], ["schema:EventStatusType"], comment="The status."),
            ]
        }
    )


# =============================================================================
# ARTIFACT TEXT
# =============================================================================

def test_contract_declares_own_properties_and_defers_type_imports():
    model = _small_model()

    text = render_contract(model["schema:Event"], model)

    assert text == (
        "# Generated by schemaorg_codegen. Do not edit by hand.\n"
        "from __future__ import annotations\n"
        "\n"
        "from .Thing import Thing\n"
        "from typing import Protocol\n"
        "from typing import TYPE_CHECKING\n"
        "\n"
        "if TYPE_CHECKING:\n"
        "    from .EventStatusType import EventStatusType\n"
        "    from .Person import Person\n"
        "\n"
        "\n"
        "class Event(Thing, Protocol):\n"
        '    """\n'
        "    An event.\n"
        '    """\n'
        "\n"
        "    performer: Person | list[Person] | None\n"
        '    """\n'
        "    A performer.\n"
        '    """\n'
        "\n"
        "    eventStatus: EventStatusType | None\n"
        '    """\n'
        "    The status.\n"
        '    """\n'
    )


def test_root_contract_extends_only_protocol():
    model = _small_model()

    text = render_contract(model["schema:Thing"], model)

    assert "class Thing(Protocol):\n" in text
    assert "TYPE_CHECKING" not in text
    assert "    name: str | list[str] | None\n" in text


def test_concrete_flattens_all_properties_with_metadata():
    model = _small_model()

    text = render_concrete(model["schema:Event"], model)

    assert text == (
        "# Generated by schemaorg_codegen. Do not edit by hand.\n"
        "from __future__ import annotations\n"
        "\n"
        "from ..interfaces.Event import Event\n"
        "from dataclasses import dataclass\n"
        "from dataclasses import field\n"
        "from schemaorg_codegen.runtime import SchemaInterface\n"
        "from schemaorg_codegen.runtime import SchemaMetadata\n"
        "from typing import TYPE_CHECKING\n"
        "\n"
        "if TYPE_CHECKING:\n"
        "    from ..interfaces.EventStatusType import EventStatusType\n"
        "    from ..interfaces.Person import Person\n"
        "\n"
        "\n"
        "@dataclass\n"
        "class EventSchema(SchemaInterface, Event):\n"
        '    """\n'
        "    An event.\n"
        '    """\n'
        "\n"
        "    schema_metadata: SchemaMetadata = field(\n"
        "        default_factory=lambda: SchemaMetadata(\n"
        '            id="schema:Event",\n'
        '            label="Event",\n'
        '            sub_class_of=["schema:Thing"],\n'
        "        )\n"
        "    )\n"
        "\n"
        "    name: str | list[str] | None = None\n"
        '    """\n'
        "    The name.\n"
        '    """\n'
        "\n"
        "    performer: Person | list[Person] | None = None\n"
        '    """\n'
        "    A performer.\n"
        '    """\n'
        "\n"
        "    eventStatus: EventStatusType | None = None\n"
        '    """\n'
        "    The status.\n"
        '    """\n'
    )


def test_enum_members_keep_input_order_and_canonical_values():
    model = _small_model()

    text = render_enum(model["schema:EventStatusType"])

    assert text == (
        "# Generated by schemaorg_codegen. Do not edit by hand.\n"
        "from __future__ import annotations\n"
        "\n"
        "from enum import Enum\n"
        "\n"
        "\n"
        "class EventStatusType(str, Enum):\n"
        '    """\n'
        "    Status of an event.\n"
        '    """\n'
        "\n"
        '    EventScheduled = "https://schema.org/EventScheduled"\n'
        '    EventCancelled = "https://schema.org/EventCancelled"\n'
    )


def test_keyword_property_keeps_label_in_field_metadata():
    model = parse(FIXTURE)

    text = render_concrete(model["schema:HowTo"], model)

    assert '    yield_: str | list[str] | None = field(default=None, metadata={"name": "yield"})\n' in text


def test_long_parent_list_is_split_in_metadata():
    parents = [f"schema:VeryLongParentClassNameNumber{i}" for i in range(8)]
    model = parse({"@graph": [_class(p) for p in parents] + [_class("schema:Child", *parents)]})

    text = render_concrete(model["schema:Child"], model)

    assert "            sub_class_of=[\n" in text
    for parent in parents:
        assert f'                "{parent}",\n' in text
    assert "            ],\n" in text


def test_custom_context_is_written_into_metadata():
    model = _small_model()

    default_text = render_concrete(model["schema:Person"], model)
    custom_text = render_concrete(
        model["schema:Person"], model, config=CodegenConfig(context_url="https://example.org/ctx")
    )

    assert "context=" not in default_text
    assert (
        '            sub_class_of=["schema:Thing"],\n'
        '            context="https://example.org/ctx",\n'
        "        )\n"
    ) in custom_text


def test_duplicate_enum_member_is_skipped_and_reported():
    diagnostics = Diagnostics()
    model = parse(
        {
            "@graph": [
                _class("schema:Thing"),
                _class("schema:Enumeration", "schema:Thing"),
                _class("schema:Kind", "schema:Enumeration"),
                {"@id": "schema:KindA", "@type": "schema:Kind", "rdfs:label": "KindA"},
                {"@id": "ext:KindA", "@type": "schema:Kind", "rdfs:label": "KindA"},
            ]
        }
    )

    text = render_enum(model["schema:Kind"], diagnostics)

    assert text.count("    KindA = ") == 1
    duplicates = diagnostics.of_kind(DiagnosticKind.DUPLICATE_ENUM_MEMBER)
    assert [d.subject for d in duplicates] == ["Kind"]
    assert "ext:KindA" in duplicates[0].message


# =============================================================================
# EXTENDS-LIST
# =============================================================================

def test_extends_list_keeps_multiple_parents_in_input_order():
    model = parse(FIXTURE)

    assert [c.name for c in extends_list(model["schema:LocalBusiness"], model)] == ["Organization", "Place"]


def test_extends_list_drops_root_self_and_redundant_ancestors():
    model = parse(
        {
            "@graph": [
                _class("schema:Thing"),
                _class("schema:Place", "schema:Thing"),
                _class("schema:Enumeration", "schema:Thing"),
                _class("schema:Kind", "schema:Enumeration"),
                {"@id": "schema:KindA", "@type": "schema:Kind"},
                _class("schema:Spot", "schema:Thing", "schema:Place", "schema:Spot"),
            ]
        }
    )

    assert [c.name for c in extends_list(model["schema:Spot"], model)] == ["Place"]
    assert extends_list(model["schema:Kind"], model) == []


def test_extends_list_breaks_cycles():
    model = parse({"@graph": [_class("schema:A", "schema:B"), _class("schema:B", "schema:A")]})

    assert extends_list(model["schema:A"], model) == []
    assert extends_list(model["schema:B"], model) == []


def test_extends_list_drops_parent_with_inconsistent_order():
    model = parse(
        {
            "@graph": [
                _class("schema:X"),
                _class("schema:Y"),
                _class("schema:XY", "schema:X", "schema:Y"),
                _class("schema:YX", "schema:Y", "schema:X"),
                _class("schema:Both", "schema:XY", "schema:YX"),
            ]
        }
    )

    assert [c.name for c in extends_list(model["schema:Both"], model)] == ["XY"]


def test_contract_declares_properties_of_a_dropped_parent():
    model = parse(
        {
            "@graph": [
                _class("schema:A"),
                _class("schema:B"),
                _class("schema:X", "schema:A", "schema:B"),
                _class("schema:Y", "schema:B", "schema:A"),
                _class("schema:Z", "schema:X", "schema:Y"),
                _prop("schema:onlyOnY", ["schema:Y"], ["schema:Text"]),
                _prop("schema:onA", ["schema:A"], ["schema:Text"]),
            ]
        }
    )

    text = render_contract(model["schema:Z"], model)

    assert "class Z(X, Protocol):\n" in text
    assert "    onlyOnY: str | list[str] | None\n" in text
    assert "onA" not in text


# =============================================================================
# WRITER
# =============================================================================

def test_generate_writes_layout_and_counts():
    fs = MemoryFileSystem()
    model = parse(FIXTURE)

    result = generate(model, ROOT, fs=fs)

    assert {"interfaces", "classes"} <= fs.dirs
    assert "interfaces/Event.py" in fs.files
    assert "classes/Event_schema.py" in fs.files
    assert "interfaces/EventStatusType.py" in fs.files
    assert "classes/EventStatusType_schema.py" not in fs.files
    assert "interfaces/StatusEnumeration.py" not in fs.files
    assert "interfaces/__init__.py" in fs.files
    assert "classes/__init__.py" in fs.files

    non_enum = sum(1 for c in model.values() if not c.is_enumeration)
    assert result.interface_count == non_enum
    assert result.class_count == non_enum
    assert result.enum_count == 3

    skipped = result.diagnostics.of_kind(DiagnosticKind.EMPTY_ENUMERATION_SKIPPED)
    assert [d.subject for d in skipped] == ["StatusEnumeration"]
    assert [d.subject for d in result.diagnostics.of_kind(DiagnosticKind.IGNORED_NODE)] == ["schema:sameAs"]


def test_manifest_lists_contracts_then_classes_then_enums():
    fs = MemoryFileSystem()

    generate(_small_model(), ROOT, fs=fs)

    assert fs.files["__init__.py"] == (
        "# Generated by schemaorg_codegen. Do not edit by hand.\n"
        "from __future__ import annotations\n"
        "\n"
        "from .interfaces.Enumeration import Enumeration\n"
        "from .interfaces.Event import Event\n"
        "from .interfaces.Person import Person\n"
        "from .interfaces.Thing import Thing\n"
        "from .classes.Enumeration_schema import EnumerationSchema\n"
        "from .classes.Event_schema import EventSchema\n"
        "from .classes.Person_schema import PersonSchema\n"
        "from .classes.Thing_schema import ThingSchema\n"
        "from .interfaces.EventStatusType import EventStatusType\n"
        "\n"
        "__all__ = [\n"
        '    "Enumeration",\n'
        '    "Event",\n'
        '    "Person",\n'
        '    "Thing",\n'
        '    "EnumerationSchema",\n'
        '    "EventSchema",\n'
        '    "PersonSchema",\n'
        '    "ThingSchema",\n'
        '    "EventStatusType",\n'
        "]\n"
    )


def test_generation_is_idempotent_across_worker_counts():
    model = parse(FIXTURE)
    first, second = MemoryFileSystem(), MemoryFileSystem()

    generate(model, ROOT, fs=first, config=CodegenConfig(max_workers=1))
    generate(parse(FIXTURE), ROOT, fs=second, config=CodegenConfig(max_workers=8))

    assert first.files == second.files


def test_invalid_identifier_fails_one_class_and_keeps_siblings():
    fs = MemoryFileSystem()
    model = parse(
        {
            "@graph": [
                _class("schema:Thing"),
                {"@id": "schema:Bad", "@type": "rdfs:Class", "rdfs:label": "Bad-Name"},
                _class("schema:Event", "schema:Thing"),
            ]
        }
    )

    with pytest.raises(GenerationError) as excinfo:
        generate(model, ROOT, fs=fs)

    failures = excinfo.value.failures
    assert [name for name, _ in failures] == ["Bad-Name"]
    assert isinstance(failures[0][1], InvalidIdentifierError)
    assert "interfaces/Event.py" in fs.files
    assert "classes/Thing_schema.py" in fs.files
    manifest = fs.files["__init__.py"]
    assert '"EventSchema",' in manifest
    assert "import Bad" not in manifest
    assert manifest.endswith("# Not exported, not Python identifiers:\n# - Bad-Name\n")


def test_manifest_lists_a_class_whose_write_failed():
    class FailingFileSystem(MemoryFileSystem):
        def write_text(self, path, content):
            if Path(path).name == "Person.py":
                raise OSError("disk full")
            super().write_text(path, content)

    fs = FailingFileSystem()

    with pytest.raises(GenerationError) as excinfo:
        generate(_small_model(), ROOT, fs=fs)

    assert [name for name, _ in excinfo.value.failures] == ["Person"]
    assert "interfaces/Person.py" not in fs.files
    manifest = fs.files["__init__.py"]
    assert "from .interfaces.Person import Person\n" in manifest
    assert "from .classes.Person_schema import PersonSchema\n" in manifest

    partial = excinfo.value.result
    assert partial.interface_count == 3
    assert partial.class_count == 3
    assert partial.enum_count == 1


def test_generation_error_keeps_collected_diagnostics():
    model = parse(
        {
            "@graph": [
                _class("schema:Thing"),
                {"@id": "schema:Bad", "@type": "rdfs:Class", "rdfs:label": "Bad-Name"},
                _prop("schema:image", ["schema:Thing"], ["schema:ImageObject"]),
            ]
        }
    )

    with pytest.raises(GenerationError) as excinfo:
        generate(model, ROOT, fs=MemoryFileSystem())

    unresolved = excinfo.value.result.diagnostics.of_kind(DiagnosticKind.UNRESOLVED_REFERENCE)
    assert [d.subject for d in unresolved] == ["schema:image"]


def test_local_file_system_writes_utf8(tmp_path: Path):
    model = parse(FIXTURE)

    generate(model, tmp_path / "schemaorg", config=CodegenConfig(show_progress=True))

    contact = (tmp_path / "schemaorg" / "interfaces" / "ContactPoint.py").read_text(encoding="utf-8")
    assert "class ContactPoint(StructuredValue, Protocol):" in contact
    assert (tmp_path / "schemaorg" / "__init__.py").exists()
