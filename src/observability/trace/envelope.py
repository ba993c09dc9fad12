from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


JsonDict = dict[str, Any]

TRACE_SCHEMA_VERSION = "trace.v1"


@dataclass(frozen=True)
class EventRecord:
    ts: float
    kind: str
    attrs: JsonDict = field(default_factory=dict)

    def to_dict(self) -> JsonDict:
        return {"ts": self.ts, "kind": self.kind, "attrs": self.attrs}


@dataclass
class SpanRecord:
    span_id: str
    name: str
    parent_span_id: str | None
    start_ts: float
    end_ts: float | None = None
    status: str = "ok"  # ok|error
    attrs: JsonDict = field(default_factory=dict)
    events: list[EventRecord] = field(default_factory=list)

    def to_dict(self) -> JsonDict:
        return {
            "span_id": self.span_id,
            "name": self.name,
            "parent_span_id": self.parent_span_id,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "status": self.status,
            "attrs": self.attrs,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass
class TraceEnvelope:
    trace_id: str
    start_ts: float
    end_ts: float
    trace_type: str = "unknown"  # ingest|unknown
    status: str = "ok"  # ok|error
    pipeline_id: str = "unknown"
    spans: list[SpanRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)  # trace-level events
    aggregates: JsonDict = field(default_factory=dict)
    schema_version: str = TRACE_SCHEMA_VERSION

    def to_dict(self) -> JsonDict:
        return {
            "schema_version": self.schema_version,
            "trace_id": self.trace_id,
            "trace_type": self.trace_type,
            "status": self.status,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "pipeline_id": self.pipeline_id,
            "spans": [s.to_dict() for s in self.spans],
            "events": [e.to_dict() for e in self.events],
            "aggregates": self.aggregates,
        }

    def iter_event_kinds(self) -> Iterable[str]:
        for s in self.spans:
            for ev in s.events:
                yield ev.kind
        for ev in self.events:
            yield ev.kind


def compute_aggregates(envelope: TraceEnvelope) -> JsonDict:
    kinds = list(envelope.iter_event_kinds())
    return {
        "span_count": len(envelope.spans),
        "error_span_count": sum(1 for s in envelope.spans if s.status == "error"),
        "stage_count": sum(1 for s in envelope.spans if s.name.startswith("stage.")),
        "on_failure_count": kinds.count("ingest.on_failure"),
        "duration_ms": round((envelope.end_ts - envelope.start_ts) * 1000.0, 3),
    }
