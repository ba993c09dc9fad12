from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

ProcessorFactory = Callable[[Dict[str, Any]], Any]


class ProcessorRegistryError(RuntimeError):
    pass


class ProcessorAlreadyRegisteredError(ProcessorRegistryError):
    pass


class ProcessorNotFoundError(ProcessorRegistryError):
    pass


@dataclass
class ProcessorRegistry:
    _registry: Dict[str, ProcessorFactory]

    def __init__(self) -> None:
        self._registry = {}

    def register(self, processor_type: str, factory: ProcessorFactory) -> None:
        if not isinstance(processor_type, str) or not processor_type:
            raise ValueError("processor_type must be a non-empty string")
        if not callable(factory):
            raise TypeError("factory must be callable")

        if processor_type in self._registry:
            raise ProcessorAlreadyRegisteredError(f"{processor_type} already registered")
        self._registry[processor_type] = factory

    def has(self, processor_type: str) -> bool:
        return processor_type in self._registry

    def types(self) -> list[str]:
        return sorted(self._registry)

    def get(self, processor_type: str) -> ProcessorFactory:
        try:
            return self._registry[processor_type]
        except KeyError as exc:
            raise ProcessorNotFoundError(f"{processor_type} not found") from exc

    def create(self, processor_type: str, config: Dict[str, Any] | None = None) -> Any:
        factory = self.get(processor_type)
        return factory(dict(config or {}))
