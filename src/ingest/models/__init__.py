from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..document import IngestDocument
from ...observability.trace.envelope import TraceEnvelope


@dataclass
class IngestResult:
    trace_id: str
    status: str  # ok|error
    document: IngestDocument
    error: BaseException | None = None
    trace: TraceEnvelope | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "status": self.status,
            "document": self.document.to_dict(),
            "error": None if self.error is None else {"type": type(self.error).__name__, "message": str(self.error)},
        }
