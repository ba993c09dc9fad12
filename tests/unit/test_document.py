from __future__ import annotations

import pytest

from src.ingest import FieldNotFoundError, FieldTypeError, IngestDocument


def test_defaults_are_independent_maps() -> None:
    a = IngestDocument()
    b = IngestDocument()
    a.data["x"] = 1
    assert b.data == {}
    assert a.metadata == {} and a.metadata is not b.metadata


def test_data_is_mutated_in_place() -> None:
    payload = {"a": {"b": 1}}
    doc = IngestDocument(payload)
    doc.set_field_value("a.c", 2)
    assert payload == {"a": {"b": 1, "c": 2}}


def test_get_field_value_nested_and_list_index() -> None:
    doc = IngestDocument({"a": {"b": [{"c": "x"}, {"c": "y"}]}})
    assert doc.get_field_value("a.b.1.c") == "y"
    assert doc.has_field("a.b.0")
    assert not doc.has_field("a.b.5")
    assert not doc.has_field("a.b.first")


def test_get_missing_field_raises() -> None:
    doc = IngestDocument({"a": {}})
    with pytest.raises(FieldNotFoundError) as exc_info:
        doc.get_field_value("a.missing")
    assert "missing" in str(exc_info.value)


def test_set_creates_intermediate_maps() -> None:
    doc = IngestDocument()
    doc.set_field_value("a.b.c", 1)
    assert doc.data == {"a": {"b": {"c": 1}}}


def test_set_through_scalar_parent_raises() -> None:
    doc = IngestDocument({"a": "text"})
    with pytest.raises(FieldTypeError):
        doc.set_field_value("a.b", 1)


def test_remove_field() -> None:
    doc = IngestDocument({"a": {"b": 1, "c": 2}})
    doc.remove_field("a.b")
    assert doc.data == {"a": {"c": 2}}
    with pytest.raises(FieldNotFoundError):
        doc.remove_field("a.b")
    with pytest.raises(FieldNotFoundError):
        doc.remove_field("x.y")


def test_append_field_value() -> None:
    doc = IngestDocument({"tags": "a", "list": [1]})
    doc.append_field_value("tags", "b")
    doc.append_field_value("list", [2, 3])
    doc.append_field_value("new", "z")
    assert doc.data == {"tags": ["a", "b"], "list": [1, 2, 3], "new": ["z"]}


def test_ingest_prefix_reads_metadata_and_is_read_only() -> None:
    doc = IngestDocument({}, {"failure_message": "boom"})
    assert doc.get_field_value("_ingest.failure_message") == "boom"
    with pytest.raises(FieldTypeError):
        doc.set_field_value("_ingest.failure_message", "x")


def test_ingest_root_read_is_a_copy() -> None:
    doc = IngestDocument({}, {"failure_message": "first"})
    doc.set_field_value("snapshot", doc.get_field_value("_ingest"))
    doc.metadata["failure_message"] = "second"

    assert doc.data["snapshot"] == {"failure_message": "first"}


def test_empty_path_rejected() -> None:
    with pytest.raises(FieldTypeError):
        IngestDocument().get_field_value("")


def test_to_dict_is_a_snapshot() -> None:
    doc = IngestDocument({"a": {"b": 1}}, {"failure_message": "m"})
    snap = doc.to_dict()
    doc.data["a"]["b"] = 2
    assert snap == {"data": {"a": {"b": 1}}, "metadata": {"failure_message": "m"}}
