from __future__ import annotations

import json
from pathlib import Path

import pytest

from schemaorg_codegen import DiagnosticKind, Diagnostics, parse
from schemaorg_codegen.graph.nodes import (
    InputNotFoundError,
    MalformedInputError,
    extract_name,
    ingest_graph,
    is_enum_value_node,
    normalize_node,
)
from schemaorg_codegen.utils.serialize import literal_text
from schemaorg_codegen.utils.text import local_name, sanitize_name, wrap_words

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "schemaorg_subset.jsonld"


def _class(node_id, label=None, parents=None, comment=None):
    node = {"@id": node_id, "@type": "rdfs:Class"}
    if label is not None:
        node["rdfs:label"] = label
    if comment is not None:
        node["rdfs:comment"] = comment
    if parents is not None:
        node["rdfs:subClassOf"] = parents
    return node


def _prop(node_id, label, domains, ranges=None):
    node = {
        "@id": node_id,
        "@type": "rdf:Property",
        "rdfs:label": label,
        "schema:domainIncludes": [{"@id": d} for d in domains],
    }
    if ranges is not None:
        node["schema:rangeIncludes"] = [{"@id": r} for r in ranges]
    return node


def test_normalize_node_accepts_scalar_and_list_fields():
    single = normalize_node(_class("schema:Event", "Event", {"@id": "schema:Thing"}))
    multi = normalize_node(
        {
            "@id": "schema:Text",
            "@type": ["schema:DataType", "rdfs:Class"],
            "rdfs:subClassOf": [{"@id": "schema:DataType"}],
        }
    )

    assert single.types == ("rdfs:Class",)
    assert single.refs("rdfs:subClassOf") == ("schema:Thing",)
    assert multi.types == ("schema:DataType", "rdfs:Class")
    assert multi.refs("rdfs:subClassOf") == ("schema:DataType",)
    assert multi.refs("schema:domainIncludes") == ()


def test_language_tagged_label_prefers_english():
    label = [
        {"@language": "fr", "@value": "Chose"},
        {"@language": "en", "@value": "Thing"},
    ]
    node = normalize_node(_class("schema:Thing", label))

    assert node.label == "Thing"
    assert literal_text({"@language": "de", "@value": "Ding"}) == "Ding"
    assert literal_text(None) is None


def test_normalize_node_rejects_node_without_id():
    with pytest.raises(MalformedInputError):
        normalize_node({"@type": "rdfs:Class"})


def test_name_extraction_falls_back_to_local_name_and_sanitizes():
    assert extract_name(normalize_node(_class("schema:Event"))) == "Event"
    assert extract_name(normalize_node(_class("schema:3DModel", "3DModel"))) == "_3DModel"
    assert local_name("https://schema.org/Event") == "Event"
    assert local_name("http://example.org/vocab#Widget") == "Widget"
    assert sanitize_name("Event") == "Event"


def test_enum_value_node_requires_single_vocabulary_type():
    member = normalize_node({"@id": "schema:InStock", "@type": "schema:ItemAvailability"})
    two_types = normalize_node({"@id": "schema:X", "@type": ["schema:A", "schema:B"]})
    foreign = normalize_node({"@id": "schema:sameAs", "@type": "owl:Thing"})

    assert is_enum_value_node(member)
    assert not is_enum_value_node(two_types)
    assert not is_enum_value_node(foreign)


def test_ingest_graph_indexes_properties_by_every_domain():
    diagnostics = Diagnostics()
    ingested = ingest_graph(
        [
            _class("schema:Thing", "Thing"),
            _class("schema:Place", "Place", {"@id": "schema:Thing"}),
            _class("schema:Person", "Person", {"@id": "schema:Thing"}),
            _prop("schema:address", "address", ["schema:Place", "schema:Person"], ["schema:Text"]),
            _prop("schema:orphan", "orphan", [], ["schema:Text"]),
            _prop("schema:anything", "anything", ["schema:Thing"]),
            {"@id": "schema:sameAs", "@type": "owl:Thing"},
        ],
        diagnostics=diagnostics,
    )

    assert list(ingested.class_nodes) == ["schema:Thing", "schema:Place", "schema:Person"]
    assert [p.id for p in ingested.properties_by_domain["schema:Place"]] == ["schema:address"]
    assert [p.id for p in ingested.properties_by_domain["schema:Person"]] == ["schema:address"]
    assert ingested.properties_by_domain["schema:Thing"][0].is_unconstrained
    assert all("schema:orphan" not in [p.id for p in props] for props in ingested.properties_by_domain.values())
    assert ingested.ignored_count == 1
    assert [d.subject for d in diagnostics.of_kind(DiagnosticKind.IGNORED_NODE)] == ["schema:sameAs"]


def test_parse_fixture_resolves_classes_and_members():
    model = parse(FIXTURE)

    event = model["schema:Event"]
    assert event.name == "Event"
    assert event.parents == ("schema:Thing",)
    assert [p.name for p in event.properties] == [
        "performer",
        "eventStatus",
        "eventAttendanceMode",
        "startDate",
        "offers",
        "location",
    ]
    assert model["schema:LocalBusiness"].parents == ("schema:Organization", "schema:Place")
    assert model["schema:Thing"].parents == ()

    status = model["schema:EventStatusType"]
    assert status.is_enumeration
    assert [m.label for m in status.enum_members] == ["EventScheduled", "EventCancelled", "EventPostponed"]
    assert model["schema:StatusEnumeration"].is_enumeration
    assert not model["schema:StatusEnumeration"].has_members
    assert not model["schema:Enumeration"].is_enumeration

    summary = model.summary()
    assert summary["enumerations"] == 4
    assert summary["non_empty_enumerations"] == 3
    assert model.by_name("Offer") is model["schema:Offer"]


def test_parse_accepts_decoded_mapping(tmp_path: Path):
    document = json.loads(FIXTURE.read_text(encoding="utf-8"))
    assert set(parse(document)) == set(parse(FIXTURE))


def test_parse_missing_file_raises_input_not_found(tmp_path: Path):
    with pytest.raises(InputNotFoundError):
        parse(tmp_path / "missing.jsonld")

    with pytest.raises(FileNotFoundError):
        parse(tmp_path / "missing.jsonld")


def test_parse_rejects_undecodable_or_graphless_documents(tmp_path: Path):
    broken = tmp_path / "broken.jsonld"
    broken.write_text("{not json", encoding="utf-8")
    graphless = tmp_path / "graphless.jsonld"
    graphless.write_text(json.dumps({"@context": {}}), encoding="utf-8")

    with pytest.raises(MalformedInputError):
        parse(broken)
    with pytest.raises(MalformedInputError):
        parse(graphless)
    with pytest.raises(MalformedInputError):
        parse({"@graph": {"@id": "schema:Thing"}})


def test_unresolved_parent_is_diagnosed_not_fatal():
    model = parse(
        {
            "@graph": [
                _class("schema:Thing", "Thing"),
                _class("schema:Widget", "Widget", [{"@id": "schema:Thing"}, {"@id": "schema:Missing"}]),
                _class("schema:URL", "URL", {"@id": "schema:Text"}),
            ]
        }
    )

    assert "schema:Widget" in model
    unresolved = model.diagnostics.of_kind(DiagnosticKind.UNRESOLVED_REFERENCE)
    assert [(d.subject, d.message) for d in unresolved] == [("Widget", "parent class schema:Missing not found")]


def test_wrap_words_keeps_words_whole():
    text = "An event happening at a certain time and location, such as a concert."
    lines = wrap_words(text, width=20)

    assert all(len(line) <= 20 for line in lines)
    assert " ".join(lines) == text
    assert wrap_words("   ") == []
    assert wrap_words("supercalifragilistic", width=5) == ["supercalifragilistic"]
