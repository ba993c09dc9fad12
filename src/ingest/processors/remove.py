from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from .config import read_string_property

TYPE = "remove"


@dataclass(frozen=True)
class RemoveProcessor:
    field: str

    def type_tag(self) -> str:
        return TYPE

    def execute(self, document: IngestDocument) -> None:
        document.remove_field(self.field)


def create(config: dict[str, Any]) -> RemoveProcessor:
    return RemoveProcessor(field=read_string_property(TYPE, config, "field"))
