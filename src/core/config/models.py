from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

TRACE_SINKS = {"jsonl", "none"}


def _as_path(v: Any, default: Path) -> Path:
    if v is None:
        return default
    if isinstance(v, Path):
        return v
    if isinstance(v, str):
        return Path(v)
    raise TypeError(f"expected path-like value, got {type(v).__name__}")


def _as_str(v: Any, default: str, *, name: str) -> str:
    if v is None:
        return default
    if not isinstance(v, str):
        raise TypeError(f"{name} must be str, got {type(v).__name__}")
    return v


def _as_mapping(v: Any, *, name: str) -> Mapping[str, Any] | None:
    if v is not None and not isinstance(v, Mapping):
        raise TypeError(f"{name} must be mapping, got {type(v).__name__}")
    return v


@dataclass
class PathsSettings:
    pipelines_dir: Path = Path("config/pipelines")
    logs_dir: Path = Path("logs")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "PathsSettings":
        d = d or {}
        return cls(
            pipelines_dir=_as_path(d.get("pipelines_dir"), cls.pipelines_dir),
            logs_dir=_as_path(d.get("logs_dir"), cls.logs_dir),
        )


@dataclass
class ObservabilitySettings:
    trace_sink: str = "jsonl"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ObservabilitySettings":
        d = d or {}
        sink = _as_str(d.get("trace_sink"), cls.trace_sink, name="trace_sink").strip().lower()
        if sink not in TRACE_SINKS:
            raise ValueError(f"trace_sink must be one of {sorted(TRACE_SINKS)}, got {sink!r}")
        return cls(trace_sink=sink)


@dataclass
class DefaultsSettings:
    pipeline_id: str = "default"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "DefaultsSettings":
        d = d or {}
        return cls(pipeline_id=_as_str(d.get("pipeline_id"), cls.pipeline_id, name="pipeline_id"))


@dataclass
class Settings:
    paths: PathsSettings = field(default_factory=PathsSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)
    defaults: DefaultsSettings = field(default_factory=DefaultsSettings)

    # Keep the raw mapping for debugging; must be JSON-serializable.
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "Settings":
        raw = dict(raw or {})
        return cls(
            paths=PathsSettings.from_dict(_as_mapping(raw.get("paths"), name="paths")),
            observability=ObservabilitySettings.from_dict(
                _as_mapping(raw.get("observability"), name="observability")
            ),
            defaults=DefaultsSettings.from_dict(_as_mapping(raw.get("defaults"), name="defaults")),
            raw=raw,
        )


@dataclass
class PipelineDefinition:
    """A pipeline definition as loaded from disk, before processors are built."""

    pipeline_id: str
    definition: dict[str, Any]

    @classmethod
    def from_dict(cls, pipeline_id: str, raw: Mapping[str, Any]) -> "PipelineDefinition":
        if not isinstance(raw, Mapping):
            raise TypeError("pipeline definition must be a mapping")

        raw_dict = dict(raw)
        if not isinstance(raw_dict.get("processors"), list):
            raise TypeError("pipeline definition missing 'processors' list")

        return cls(pipeline_id=pipeline_id, definition=raw_dict)

