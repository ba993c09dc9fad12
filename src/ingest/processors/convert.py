from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..document import IngestDocument
from ..errors import ConversionError, PipelineDefinitionError
from .config import read_string_property

TYPE = "convert"


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("booleans are not integers")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text)


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("booleans are not floats")
    return float(value)


def _to_string(value: Any) -> str:
    return str(value)


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"[{value}] is not a boolean value")


def _to_auto(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    for conv in (_to_integer, _to_float, _to_boolean):
        try:
            return conv(value)
        except ValueError:
            continue
    return value


CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "integer": _to_integer,
    "float": _to_float,
    "string": _to_string,
    "boolean": _to_boolean,
    "auto": _to_auto,
}


@dataclass(frozen=True)
class ConvertProcessor:
    field: str
    target_type: str

    def type_tag(self) -> str:
        return TYPE

    def _convert(self, value: Any) -> Any:
        try:
            return CONVERTERS[self.target_type](value)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"unable to convert [{value}] to {self.target_type}") from e

    def execute(self, document: IngestDocument) -> None:
        value = document.get_field_value(self.field)
        if isinstance(value, list):
            converted: Any = [self._convert(v) for v in value]
        else:
            converted = self._convert(value)
        document.set_field_value(self.field, converted)


def create(config: dict[str, Any]) -> ConvertProcessor:
    field = read_string_property(TYPE, config, "field")
    target_type = read_string_property(TYPE, config, "type")
    if target_type not in CONVERTERS:
        raise PipelineDefinitionError(
            f"type [{target_type}] not supported, cannot convert field [{field}]", TYPE
        )
    return ConvertProcessor(field=field, target_type=target_type)
