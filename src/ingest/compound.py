from __future__ import annotations

from typing import Iterable, Sequence

from ..observability.obs import api as obs
from .document import IngestDocument
from .processor import Processor

FAILURE_MESSAGE_FIELD = "failure_message"
FAILURE_PROCESSOR_TAG_FIELD = "failure_processor_tag"

COMPOUND_TYPE = "compound"


def _safe_str(value: object, fallback: str) -> str:
    try:
        text = str(value)
    except Exception:
        return fallback
    return text or fallback


def record_failure(document: IngestDocument, error: BaseException, tag: str) -> None:
    """
    Overwrite the failure snapshot on `document.metadata`.

    Only the latest failure is kept; this must never raise.
    """
    document.metadata[FAILURE_MESSAGE_FIELD] = _safe_str(error, type(error).__name__)
    document.metadata[FAILURE_PROCESSOR_TAG_FIELD] = tag if isinstance(tag, str) else _safe_str(tag, "unknown")


class CompoundProcessor:
    """
    Runs `processors` in order; on the first failure records the failure on the
    document and diverts to `on_failure_processors`.

    With no on-failure processors the original error is re-raised. The
    on-failure processors run as a fresh sequence: if one of them fails, its
    error replaces the original (which is kept as `__cause__`).

    A CompoundProcessor is itself a Processor, so on-failure chains nest.
    """

    def __init__(
        self,
        processors: Iterable[Processor] = (),
        on_failure_processors: Iterable[Processor] = (),
    ) -> None:
        self._processors: tuple[Processor, ...] = tuple(processors)
        self._on_failure_processors: tuple[Processor, ...] = tuple(on_failure_processors)

    @property
    def processors(self) -> tuple[Processor, ...]:
        return self._processors

    @property
    def on_failure_processors(self) -> tuple[Processor, ...]:
        return self._on_failure_processors

    def type_tag(self) -> str:
        return COMPOUND_TYPE

    def execute(self, document: IngestDocument) -> None:
        for processor in self._processors:
            tag = processor.type_tag()
            try:
                with obs.with_stage(tag):
                    processor.execute(document)
            except Exception as error:
                if not self._on_failure_processors:
                    record_failure(document, error, tag)
                    raise
                self.execute_on_failure(document, error, tag)
                return

    def execute_on_failure(self, document: IngestDocument, error: Exception, tag: str) -> None:
        record_failure(document, error, tag)
        obs.event(
            "ingest.on_failure",
            {"processor": document.metadata[FAILURE_PROCESSOR_TAG_FIELD], "message": document.metadata[FAILURE_MESSAGE_FIELD]},
        )
        try:
            _run_sequence(self._on_failure_processors, document)
        except Exception as fallback_error:
            if fallback_error is not error and fallback_error.__cause__ is None:
                fallback_error.__cause__ = error
            raise


def _run_sequence(processors: Sequence[Processor], document: IngestDocument) -> None:
    # Same semantics as a CompoundProcessor without on-failure processors.
    for processor in processors:
        tag = processor.type_tag()
        try:
            with obs.with_stage(tag):
                processor.execute(document)
        except Exception as error:
            record_failure(document, error, tag)
            raise
