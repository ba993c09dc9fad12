from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class IngestError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ProcessorError(IngestError):
    """Raised by built-in processors; the executor treats it like any other failure."""


class FieldNotFoundError(ProcessorError):
    pass


class FieldTypeError(ProcessorError):
    pass


class ConversionError(ProcessorError):
    pass


class FailProcessorError(ProcessorError):
    pass


class PipelineDefinitionError(IngestError):
    def __init__(self, message: str, processor_type: str | None = None) -> None:
        super().__init__(message=message)
        self.processor_type = processor_type

    def __str__(self) -> str:
        if self.processor_type:
            return f"[{self.processor_type}] {self.message}"
        return self.message
