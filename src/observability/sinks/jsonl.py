from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..trace.envelope import TraceEnvelope

DEFAULT_FILE_NAME = "traces.jsonl"


def resolve_jsonl_path(path_or_dir: str | Path) -> Path:
    """A `.jsonl` path is used as-is; anything else is treated as a directory."""
    p = Path(path_or_dir)
    if p.suffix == ".jsonl":
        return p
    return p / DEFAULT_FILE_NAME


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, BaseException):
        return {"type": type(obj).__name__, "message": str(obj)}
    return repr(obj)


class JsonlSink:
    """
    Append-only JSONL sink: one trace envelope per line.
    """

    def __init__(self, path_or_dir: str | Path) -> None:
        self.path = resolve_jsonl_path(path_or_dir)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, envelope: TraceEnvelope) -> None:
        line = json.dumps(envelope.to_dict(), ensure_ascii=True, default=_to_jsonable)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def on_event(self, record: dict[str, Any]) -> None:  # noqa: D401
        """No-op; only whole envelopes are persisted."""
        return

    def on_span_end(self, record: dict[str, Any]) -> None:  # noqa: D401
        """No-op; only whole envelopes are persisted."""
        return

    def on_trace_end(self, envelope: TraceEnvelope) -> None:
        self.write(envelope)
