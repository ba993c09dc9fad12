from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from ..template import render
from .config import read_property, read_string_property

TYPE = "append"


@dataclass(frozen=True)
class AppendProcessor:
    field: str
    value: Any

    def type_tag(self) -> str:
        return TYPE

    def execute(self, document: IngestDocument) -> None:
        document.append_field_value(self.field, render(document, self.value))


def create(config: dict[str, Any]) -> AppendProcessor:
    return AppendProcessor(
        field=read_string_property(TYPE, config, "field"),
        value=read_property(TYPE, config, "value"),
    )
