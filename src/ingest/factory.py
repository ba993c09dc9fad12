from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..libs.registry import ProcessorNotFoundError, ProcessorRegistry
from .compound import CompoundProcessor
from .errors import PipelineDefinitionError
from .pipeline import Pipeline
from .processor import Processor

ON_FAILURE_KEY = "on_failure"
PROCESSORS_KEY = "processors"
DESCRIPTION_KEY = "description"


class PipelineFactory:
    """
    Build pipelines from definition mappings:

        description: ...
        processors:
          - rename: {field: a, to: b, on_failure: [{set: {field: err, value: x}}]}
        on_failure:
          - set: {field: failed, value: true}

    A processor with its own `on_failure` is wrapped in a CompoundProcessor.
    """

    def __init__(self, registry: ProcessorRegistry) -> None:
        self.registry = registry

    def create(self, pipeline_id: str, definition: Mapping[str, Any]) -> Pipeline:
        if not isinstance(definition, Mapping):
            raise PipelineDefinitionError(f"pipeline [{pipeline_id}] definition must be a mapping")

        unknown = set(definition) - {DESCRIPTION_KEY, PROCESSORS_KEY, ON_FAILURE_KEY}
        if unknown:
            raise PipelineDefinitionError(
                f"pipeline [{pipeline_id}] has unsupported keys {sorted(unknown)}"
            )

        description = definition.get(DESCRIPTION_KEY)
        if description is not None and not isinstance(description, str):
            raise PipelineDefinitionError(f"pipeline [{pipeline_id}] description must be a string")

        processors = self.read_processors(definition.get(PROCESSORS_KEY), key=PROCESSORS_KEY)
        on_failure = self.read_processors(definition.get(ON_FAILURE_KEY), key=ON_FAILURE_KEY)
        return Pipeline(
            id=pipeline_id,
            description=description,
            compound=CompoundProcessor(processors, on_failure),
        )

    def read_processors(self, entries: Any, *, key: str = PROCESSORS_KEY) -> list[Processor]:
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise PipelineDefinitionError(f"[{key}] must be a list of processor entries")
        return [self.read_processor(entry) for entry in entries]

    def read_processor(self, entry: Any) -> Processor:
        if not isinstance(entry, Mapping) or len(entry) != 1:
            raise PipelineDefinitionError(
                f"processor entry must be a mapping with exactly one processor type, got [{entry!r}]"
            )

        (processor_type, raw_config), = entry.items()
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, Mapping):
            raise PipelineDefinitionError("processor config must be a mapping", processor_type)

        try:
            ctor = self.registry.get(processor_type)
        except ProcessorNotFoundError as exc:
            raise PipelineDefinitionError(
                f"no processor type exists with name [{processor_type}], known types {self.registry.types()}",
                processor_type,
            ) from exc

        config = dict(raw_config)
        on_failure = self.read_processors(config.pop(ON_FAILURE_KEY, None), key=ON_FAILURE_KEY)
        processor = ctor(config)
        if config:
            raise PipelineDefinitionError(
                f"processor does not support one or more provided configuration parameters {sorted(config)}",
                processor_type,
            )

        if on_failure:
            return CompoundProcessor([processor], on_failure)
        return processor
