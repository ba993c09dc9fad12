from __future__ import annotations

from typing import Protocol, runtime_checkable

from .document import IngestDocument


@runtime_checkable
class Processor(Protocol):
    """A single transformation step over an `IngestDocument`.

    `type_tag()` is only used for diagnostics (failure metadata, span names).
    """

    def execute(self, document: IngestDocument) -> None:
        ...

    def type_tag(self) -> str:
        ...
