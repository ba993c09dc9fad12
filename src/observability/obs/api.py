from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from ..trace import context as _trace
from ..trace.context import TraceContext
from ..trace.envelope import EventRecord, SpanRecord, TraceEnvelope


class ObsSink(Protocol):
    def on_event(self, record: dict[str, Any]) -> None: ...

    def on_span_end(self, record: dict[str, Any]) -> None: ...

    def on_trace_end(self, envelope: TraceEnvelope) -> None: ...


_SINK: ObsSink | None = None


def set_sink(sink: ObsSink | None) -> None:
    global _SINK
    _SINK = sink


def get_sink() -> ObsSink | None:
    return _SINK


def _notify_trace_end(envelope: TraceEnvelope) -> None:
    if _SINK is None:
        return
    # Sink errors are ignored; the envelope is still returned to the caller.
    try:
        _SINK.on_trace_end(envelope)
    except Exception:
        pass


_trace._ON_FINISH.append(_notify_trace_end)


def _span_record(trace_id: str, span: SpanRecord) -> dict[str, Any]:
    return {
        "trace_id": trace_id,
        "span_id": span.span_id,
        "parent_span_id": span.parent_span_id,
        "name": span.name,
        "status": span.status,
        "start_ts": span.start_ts,
        "end_ts": span.end_ts,
        "attrs": span.attrs,
    }


def _event_record(trace_id: str, span_id: str | None, ev: EventRecord) -> dict[str, Any]:
    return {
        "trace_id": trace_id,
        "span_id": span_id,
        "ts": ev.ts,
        "kind": ev.kind,
        "attrs": ev.attrs,
    }


@contextmanager
def span(name: str, attrs: dict[str, Any] | None = None) -> Iterator[SpanRecord | None]:
    """
    Create a span if a TraceContext is active; otherwise degrade to no-op.
    """
    ctx = TraceContext.current()
    if ctx is None:
        yield None
        return

    with ctx.start_span(name, attrs) as s:
        try:
            yield s
        finally:
            if _SINK is not None:
                _SINK.on_span_end(_span_record(ctx.trace_id, s))


def event(kind: str, attrs: dict[str, Any] | None = None) -> None:
    """
    Emit a structured event bound to the current span if present.
    """
    ctx = TraceContext.current()
    if ctx is None:
        return

    ev = ctx.add_event(kind, attrs)
    if _SINK is not None:
        cur = ctx.current_span()
        _SINK.on_event(_event_record(ctx.trace_id, cur.span_id if cur else None, ev))


@contextmanager
def with_stage(stage_name: str, attrs: dict[str, Any] | None = None) -> Iterator[SpanRecord | None]:
    """
    Wrap one processor execution with a `stage.<name>` span and
    stage.start/end/error events.
    """
    stage_key = (stage_name or "").strip()
    if stage_key.startswith("stage."):
        stage_key = stage_key[len("stage.") :]

    with span(f"stage.{stage_key}", {"stage": stage_key, **(attrs or {})}) as s:
        event("stage.start", {"stage": stage_key})
        try:
            yield s
        except Exception as e:
            event(
                "stage.error",
                {"stage": stage_key, "message": str(e), "exc_type": type(e).__name__},
            )
            raise
        finally:
            event("stage.end", {"stage": stage_key})
