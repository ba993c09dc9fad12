"""Processor registry."""
from .registry import (
    ProcessorAlreadyRegisteredError,
    ProcessorNotFoundError,
    ProcessorRegistry,
    ProcessorRegistryError,
)

__all__ = [
    "ProcessorRegistry",
    "ProcessorRegistryError",
    "ProcessorAlreadyRegisteredError",
    "ProcessorNotFoundError",
]
