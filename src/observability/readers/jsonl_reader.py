from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from ..sinks.jsonl import resolve_jsonl_path
from ..trace.envelope import TRACE_SCHEMA_VERSION, EventRecord, SpanRecord, TraceEnvelope


def _event_from_dict(d: dict[str, Any]) -> EventRecord:
    return EventRecord(ts=float(d["ts"]), kind=str(d["kind"]), attrs=dict(d.get("attrs", {})))


def _span_from_dict(d: dict[str, Any]) -> SpanRecord:
    return SpanRecord(
        span_id=str(d["span_id"]),
        name=str(d["name"]),
        parent_span_id=d.get("parent_span_id"),
        start_ts=float(d["start_ts"]),
        end_ts=float(d["end_ts"]) if d.get("end_ts") is not None else None,
        status=str(d.get("status", "ok")),
        attrs=dict(d.get("attrs", {})),
        events=[_event_from_dict(e) for e in d.get("events", [])],
    )


def envelope_from_dict(d: dict[str, Any]) -> TraceEnvelope:
    return TraceEnvelope(
        schema_version=str(d.get("schema_version", TRACE_SCHEMA_VERSION)),
        trace_id=str(d["trace_id"]),
        trace_type=str(d.get("trace_type", "unknown")),
        status=str(d.get("status", "ok")),
        start_ts=float(d["start_ts"]),
        end_ts=float(d["end_ts"]),
        pipeline_id=str(d.get("pipeline_id", "unknown")),
        spans=[_span_from_dict(s) for s in d.get("spans", [])],
        events=[_event_from_dict(e) for e in d.get("events", [])],
        aggregates=dict(d.get("aggregates", {})),
    )


class JsonlReader:
    def __init__(self, path_or_dir: str | Path) -> None:
        self.path = resolve_jsonl_path(path_or_dir)

    def iter_traces(self) -> Iterator[TraceEnvelope]:
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                data = json.loads(line)
                if not isinstance(data, dict):
                    continue
                yield envelope_from_dict(data)

    def get(self, trace_id: str) -> TraceEnvelope | None:
        for env in self.iter_traces():
            if env.trace_id == trace_id:
                return env
        return None
