from __future__ import annotations

from src.ingest import IngestDocument
from src.ingest.template import render


def test_single_placeholder_keeps_type() -> None:
    doc = IngestDocument({"n": 3, "l": [1, 2]})
    assert render(doc, "{{ n }}") == 3
    assert render(doc, "{{l}}") == [1, 2]


def test_mixed_text_renders_strings_and_missing_as_empty() -> None:
    doc = IngestDocument({"user": {"name": "ann"}})
    assert render(doc, "hi {{ user.name }}{{ missing }}!") == "hi ann!"


def test_missing_single_placeholder_is_none() -> None:
    assert render(IngestDocument(), "{{ nope }}") is None


def test_metadata_placeholders() -> None:
    doc = IngestDocument({}, {"failure_message": "bad", "failure_processor_tag": "convert"})
    assert render(doc, "{{ _ingest.failure_processor_tag }}: {{ _ingest.failure_message }}") == "convert: bad"


def test_non_strings_and_lists() -> None:
    doc = IngestDocument({"a": "x"})
    assert render(doc, 5) == 5
    assert render(doc, ["{{ a }}", "y"]) == ["x", "y"]
