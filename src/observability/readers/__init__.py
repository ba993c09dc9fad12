"""Trace readers."""

from .jsonl_reader import JsonlReader

__all__ = ["JsonlReader"]
