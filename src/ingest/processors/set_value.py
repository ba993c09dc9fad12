from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from ..template import render
from .config import read_boolean_property, read_property, read_string_property

TYPE = "set"


@dataclass(frozen=True)
class SetProcessor:
    field: str
    value: Any
    override: bool = True

    def type_tag(self) -> str:
        return TYPE

    def execute(self, document: IngestDocument) -> None:
        if not self.override and document.has_field(self.field):
            return
        document.set_field_value(self.field, render(document, self.value))


def create(config: dict[str, Any]) -> SetProcessor:
    return SetProcessor(
        field=read_string_property(TYPE, config, "field"),
        value=read_property(TYPE, config, "value"),
        override=read_boolean_property(TYPE, config, "override", True),
    )
