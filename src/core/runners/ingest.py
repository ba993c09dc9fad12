from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...ingest import IngestDocument, IngestResult, Pipeline, PipelineFactory
from ...ingest.processors import register_builtin_processors
from ...libs.registry import ProcessorRegistry
from ...observability.obs import api as obs
from ...observability.sinks.jsonl import JsonlSink
from ..config import PipelineLoader, Settings, load_settings


def default_registry() -> ProcessorRegistry:
    registry = ProcessorRegistry()
    register_builtin_processors(registry)
    return registry


@dataclass
class IngestRunner:
    """User-facing ingest entry: load a pipeline definition by id and run one document through it.

    Built pipelines are cached per id; they hold no per-document state.
    """

    settings_path: str | Path = "config/settings.yaml"
    registry: ProcessorRegistry = field(default_factory=default_registry)
    _settings: Settings | None = field(default=None, init=False, repr=False)
    _pipelines: dict[str, Pipeline] = field(default_factory=dict, init=False, repr=False)

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = load_settings(self.settings_path)
        return self._settings

    def pipeline(self, pipeline_id: str | None = None) -> Pipeline:
        pid = pipeline_id or self.settings.defaults.pipeline_id
        cached = self._pipelines.get(pid)
        if cached is not None:
            return cached

        definition = PipelineLoader(self.settings.paths.pipelines_dir).load(pid)
        built = PipelineFactory(self.registry).create(pid, definition.definition)
        self._pipelines[pid] = built
        return built

    def run(self, data: dict[str, Any], *, pipeline_id: str | None = None) -> IngestResult:
        pipeline = self.pipeline(pipeline_id)
        document = IngestDocument(data)

        if self.settings.observability.trace_sink != "jsonl":
            return pipeline.run(document)

        previous = obs.get_sink()
        obs.set_sink(JsonlSink(self.settings.paths.logs_dir))
        try:
            return pipeline.run(document)
        finally:
            obs.set_sink(previous)
