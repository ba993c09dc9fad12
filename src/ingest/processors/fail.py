from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from ..errors import FailProcessorError
from ..template import render
from .config import read_string_property

TYPE = "fail"


@dataclass(frozen=True)
class FailProcessor:
    """Raises unconditionally with a (templated) message."""

    message: str

    def type_tag(self) -> str:
        return TYPE

    def execute(self, document: IngestDocument) -> None:
        rendered = render(document, self.message)
        raise FailProcessorError("" if rendered is None else str(rendered))


def create(config: dict[str, Any]) -> FailProcessor:
    return FailProcessor(message=read_string_property(TYPE, config, "message"))
