"""Built-in processors (1 processor type = 1 file)."""

from __future__ import annotations

from ...libs.registry import ProcessorRegistry
from . import append, convert, fail, remove, rename, set_value, strings
from .append import AppendProcessor
from .convert import ConvertProcessor
from .fail import FailProcessor
from .remove import RemoveProcessor
from .rename import RenameProcessor
from .set_value import SetProcessor
from .strings import StringProcessor


def register_builtin_processors(registry: ProcessorRegistry) -> None:
    registry.register(set_value.TYPE, set_value.create)
    registry.register(append.TYPE, append.create)
    registry.register(remove.TYPE, remove.create)
    registry.register(rename.TYPE, rename.create)
    registry.register(convert.TYPE, convert.create)
    registry.register(strings.LOWERCASE_TYPE, strings.create_lowercase)
    registry.register(strings.UPPERCASE_TYPE, strings.create_uppercase)
    registry.register(strings.TRIM_TYPE, strings.create_trim)
    registry.register(fail.TYPE, fail.create)


__all__ = [
    "register_builtin_processors",
    "SetProcessor",
    "AppendProcessor",
    "RemoveProcessor",
    "RenameProcessor",
    "ConvertProcessor",
    "StringProcessor",
    "FailProcessor",
]
