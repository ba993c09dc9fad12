from __future__ import annotations

from typing import Any

from ..errors import PipelineDefinitionError

_MISSING: Any = object()


def read_property(processor_type: str, config: dict[str, Any], key: str, default: Any = _MISSING) -> Any:
    """Pop `key` from a processor config, failing when required and absent."""
    if key in config:
        return config.pop(key)
    if default is _MISSING:
        raise PipelineDefinitionError(f"required property [{key}] is missing", processor_type)
    return default


def read_string_property(
    processor_type: str, config: dict[str, Any], key: str, default: Any = _MISSING
) -> str:
    value = read_property(processor_type, config, key, default)
    if value is default and default is not _MISSING:
        return value
    if not isinstance(value, str) or not value:
        raise PipelineDefinitionError(
            f"property [{key}] must be a non-empty string, got [{type(value).__name__}]", processor_type
        )
    return value


def read_boolean_property(processor_type: str, config: dict[str, Any], key: str, default: bool) -> bool:
    value = read_property(processor_type, config, key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in {"true", "false"}:
        return value.lower() == "true"
    raise PipelineDefinitionError(f"property [{key}] must be a boolean, got [{value!r}]", processor_type)
