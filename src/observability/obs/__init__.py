"""User-facing observability API (span/event)."""

from .api import event, get_sink, set_sink, span, with_stage

__all__ = ["span", "event", "set_sink", "get_sink", "with_stage"]
