from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..document import IngestDocument
from ..errors import FieldTypeError
from .config import read_string_property

LOWERCASE_TYPE = "lowercase"
UPPERCASE_TYPE = "uppercase"
TRIM_TYPE = "trim"


@dataclass(frozen=True)
class StringProcessor:
    """Applies a str -> str function to a single string field."""

    field: str
    processor_type: str
    fn: Callable[[str], str]

    def type_tag(self) -> str:
        return self.processor_type

    def execute(self, document: IngestDocument) -> None:
        value = document.get_field_value(self.field)
        if not isinstance(value, str):
            raise FieldTypeError(
                f"field [{self.field}] of type [{type(value).__name__}] cannot be cast to [str]"
            )
        document.set_field_value(self.field, self.fn(value))


def _factory(processor_type: str, fn: Callable[[str], str]) -> Callable[[dict[str, Any]], StringProcessor]:
    def create(config: dict[str, Any]) -> StringProcessor:
        field = read_string_property(processor_type, config, "field")
        return StringProcessor(field=field, processor_type=processor_type, fn=fn)

    return create


create_lowercase = _factory(LOWERCASE_TYPE, str.lower)
create_uppercase = _factory(UPPERCASE_TYPE, str.upper)
create_trim = _factory(TRIM_TYPE, str.strip)
