from __future__ import annotations

from dataclasses import dataclass

from ..observability.obs import api as obs
from ..observability.trace.context import TraceContext
from .compound import FAILURE_PROCESSOR_TAG_FIELD, CompoundProcessor
from .document import IngestDocument
from .models import IngestResult


@dataclass(frozen=True)
class Pipeline:
    id: str
    description: str | None
    compound: CompoundProcessor

    def execute(self, document: IngestDocument) -> None:
        self.compound.execute(document)

    def run(self, document: IngestDocument) -> IngestResult:
        ctx = TraceContext.new(trace_type="ingest", pipeline_id=self.id)
        with TraceContext.activate(ctx):
            try:
                with obs.span(f"pipeline.{self.id}", {"pipeline_id": self.id}):
                    self.compound.execute(document)
            except Exception as e:
                obs.event(
                    "pipeline.error",
                    {
                        "pipeline_id": self.id,
                        "exc_type": type(e).__name__,
                        "processor": document.metadata.get(FAILURE_PROCESSOR_TAG_FIELD),
                    },
                )
                envelope = ctx.finish()
                return IngestResult(
                    trace_id=ctx.trace_id,
                    status="error",
                    document=document,
                    error=e,
                    trace=envelope,
                )

            envelope = ctx.finish()
            return IngestResult(
                trace_id=ctx.trace_id,
                status="ok",
                document=document,
                trace=envelope,
            )
