from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from ..errors import FieldNotFoundError, FieldTypeError
from .config import read_string_property

TYPE = "rename"


@dataclass(frozen=True)
class RenameProcessor:
    field: str
    to: str

    def type_tag(self) -> str:
        return TYPE

    def execute(self, document: IngestDocument) -> None:
        if not document.has_field(self.field):
            raise FieldNotFoundError(f"field [{self.field}] doesn't exist")
        if document.has_field(self.to):
            raise FieldTypeError(f"field [{self.to}] already exists")

        value = document.get_field_value(self.field)
        document.remove_field(self.field)
        try:
            document.set_field_value(self.to, value)
        except Exception:
            document.set_field_value(self.field, value)
            raise


def create(config: dict[str, Any]) -> RenameProcessor:
    return RenameProcessor(
        field=read_string_property(TYPE, config, "field"),
        to=read_string_property(TYPE, config, "to"),
    )
