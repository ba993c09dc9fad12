from __future__ import annotations

import re
from typing import Any

from .document import IngestDocument
from .errors import FieldNotFoundError, FieldTypeError

_PLACEHOLDER = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def _lookup(document: IngestDocument, path: str) -> Any:
    try:
        return document.get_field_value(path)
    except (FieldNotFoundError, FieldTypeError):
        return None


def render(document: IngestDocument, value: Any) -> Any:
    """
    Render `{{ path }}` placeholders against the document.

    `_ingest.<key>` reads failure metadata. A value that is a single placeholder
    keeps the referenced value's type; otherwise missing fields render as "".
    """
    if isinstance(value, list):
        return [render(document, v) for v in value]
    if not isinstance(value, str):
        return value

    whole = _PLACEHOLDER.fullmatch(value.strip())
    if whole is not None:
        return _lookup(document, whole.group(1))

    def _sub(m: re.Match[str]) -> str:
        found = _lookup(document, m.group(1))
        return "" if found is None else str(found)

    return _PLACEHOLDER.sub(_sub, value)
