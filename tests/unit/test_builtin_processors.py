from __future__ import annotations

import pytest

from src.ingest import (
    ConversionError,
    FailProcessorError,
    FieldNotFoundError,
    FieldTypeError,
    IngestDocument,
    PipelineDefinitionError,
)
from src.ingest.processors import (
    AppendProcessor,
    ConvertProcessor,
    FailProcessor,
    RemoveProcessor,
    RenameProcessor,
    SetProcessor,
)
from src.ingest.processors import convert, set_value, strings


def test_set_overrides_by_default_and_renders_templates() -> None:
    doc = IngestDocument({"a": 1, "name": "ann"})
    SetProcessor(field="a", value="hello {{ name }}").execute(doc)
    assert doc.data["a"] == "hello ann"


def test_set_without_override_keeps_existing() -> None:
    doc = IngestDocument({"a": 1})
    SetProcessor(field="a", value=2, override=False).execute(doc)
    SetProcessor(field="b", value=3, override=False).execute(doc)
    assert doc.data == {"a": 1, "b": 3}


def test_set_factory_reads_config() -> None:
    config = {"field": "x", "value": "y", "override": "false"}
    p = set_value.create(config)
    assert p == SetProcessor(field="x", value="y", override=False)
    assert config == {}


def test_set_factory_requires_field() -> None:
    with pytest.raises(PipelineDefinitionError) as exc_info:
        set_value.create({"value": 1})
    assert exc_info.value.processor_type == "set"
    assert "field" in str(exc_info.value)


def test_append() -> None:
    doc = IngestDocument({"tags": ["a"]})
    AppendProcessor(field="tags", value=["b", "c"]).execute(doc)
    assert doc.data["tags"] == ["a", "b", "c"]


def test_remove_missing_field_fails() -> None:
    doc = IngestDocument({"a": 1})
    RemoveProcessor(field="a").execute(doc)
    assert doc.data == {}
    with pytest.raises(FieldNotFoundError):
        RemoveProcessor(field="a").execute(doc)


def test_rename() -> None:
    doc = IngestDocument({"a": {"b": 1}})
    RenameProcessor(field="a.b", to="c.d").execute(doc)
    assert doc.data == {"a": {}, "c": {"d": 1}}


def test_rename_errors() -> None:
    doc = IngestDocument({"a": 1, "b": 2})
    with pytest.raises(FieldNotFoundError):
        RenameProcessor(field="missing", to="x").execute(doc)
    with pytest.raises(FieldTypeError):
        RenameProcessor(field="a", to="b").execute(doc)
    assert doc.data == {"a": 1, "b": 2}


@pytest.mark.parametrize(
    "field_name, data, metadata",
    [
        ("arr.0", {"arr": [1, 2]}, {}),
        ("_ingest.failure_message", {}, {"failure_message": "m"}),
    ],
)
def test_rename_unremovable_source_leaves_document_untouched(field_name: str, data: dict, metadata: dict) -> None:
    doc = IngestDocument(data, metadata)
    with pytest.raises(FieldTypeError):
        RenameProcessor(field=field_name, to="x").execute(doc)

    assert "x" not in doc.data
    assert doc.metadata == metadata


def test_rename_restores_source_when_target_cannot_be_set() -> None:
    doc = IngestDocument({"a": 1, "s": "scalar"})
    with pytest.raises(FieldTypeError):
        RenameProcessor(field="a", to="s.x").execute(doc)

    assert doc.data == {"a": 1, "s": "scalar"}


def test_rename_into_own_child_keeps_value() -> None:
    doc = IngestDocument({"a": {"k": 1}})
    RenameProcessor(field="a", to="a.b").execute(doc)

    assert doc.data == {"a": {"b": {"k": 1}}}


@pytest.mark.parametrize(
    "target_type,value,expected",
    [
        ("integer", "42", 42),
        ("integer", "0x1f", 31),
        ("float", "1.5", 1.5),
        ("string", 7, "7"),
        ("boolean", "TRUE", True),
        ("auto", "12", 12),
        ("auto", "2.5", 2.5),
        ("auto", "false", False),
        ("auto", "text", "text"),
    ],
)
def test_convert(target_type: str, value, expected) -> None:
    doc = IngestDocument({"f": value})
    ConvertProcessor(field="f", target_type=target_type).execute(doc)
    assert doc.data["f"] == expected


def test_convert_list_elements() -> None:
    doc = IngestDocument({"f": ["1", "2"]})
    ConvertProcessor(field="f", target_type="integer").execute(doc)
    assert doc.data["f"] == [1, 2]


def test_convert_failure() -> None:
    doc = IngestDocument({"f": "abc"})
    with pytest.raises(ConversionError) as exc_info:
        ConvertProcessor(field="f", target_type="integer").execute(doc)
    assert str(exc_info.value) == "unable to convert [abc] to integer"
    assert doc.data["f"] == "abc"


def test_convert_factory_rejects_unknown_type() -> None:
    with pytest.raises(PipelineDefinitionError):
        convert.create({"field": "f", "type": "date"})


def test_string_processors() -> None:
    doc = IngestDocument({"a": "  MiXed  "})
    strings.create_trim({"field": "a"}).execute(doc)
    assert doc.data["a"] == "MiXed"
    strings.create_lowercase({"field": "a"}).execute(doc)
    assert doc.data["a"] == "mixed"
    upper = strings.create_uppercase({"field": "a"})
    upper.execute(doc)
    assert doc.data["a"] == "MIXED"
    assert upper.type_tag() == "uppercase"


def test_string_processor_rejects_non_string() -> None:
    doc = IngestDocument({"a": 1})
    with pytest.raises(FieldTypeError):
        strings.create_lowercase({"field": "a"}).execute(doc)


def test_fail_processor_renders_message() -> None:
    doc = IngestDocument({"id": "d-1"}, {"failure_message": "inner"})
    with pytest.raises(FailProcessorError) as exc_info:
        FailProcessor(message="doc {{ id }} failed: {{ _ingest.failure_message }}").execute(doc)
    assert str(exc_info.value) == "doc d-1 failed: inner"
    assert FailProcessor(message="x").type_tag() == "fail"
