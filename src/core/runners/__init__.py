"""User-facing runners."""
from .ingest import IngestRunner, default_registry

__all__ = ["IngestRunner", "default_registry"]
