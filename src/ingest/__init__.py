"""Ingest pipeline: documents, processors and the compound (on-failure) executor."""
from .document import IngestDocument
from .processor import Processor
from .compound import (
    COMPOUND_TYPE,
    FAILURE_MESSAGE_FIELD,
    FAILURE_PROCESSOR_TAG_FIELD,
    CompoundProcessor,
    record_failure,
)
from .pipeline import Pipeline
from .factory import PipelineFactory
from .models import IngestResult
from .errors import (
    ConversionError,
    FailProcessorError,
    FieldNotFoundError,
    FieldTypeError,
    IngestError,
    PipelineDefinitionError,
    ProcessorError,
)

__all__ = [
    "IngestDocument",
    "Processor",
    "CompoundProcessor",
    "record_failure",
    "COMPOUND_TYPE",
    "FAILURE_MESSAGE_FIELD",
    "FAILURE_PROCESSOR_TAG_FIELD",
    "Pipeline",
    "PipelineFactory",
    "IngestResult",
    "IngestError",
    "ProcessorError",
    "FieldNotFoundError",
    "FieldTypeError",
    "ConversionError",
    "FailProcessorError",
    "PipelineDefinitionError",
]
