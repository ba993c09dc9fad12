from __future__ import annotations

import copy
from typing import Any

from .errors import FieldNotFoundError, FieldTypeError

INGEST_METADATA_PREFIX = "_ingest"


def _split_path(path: str) -> list[str]:
    if not isinstance(path, str) or not path.strip():
        raise FieldTypeError("path cannot be null nor empty")
    return path.split(".")


def _resolve_child(node: Any, key: str, path: str) -> Any:
    if isinstance(node, dict):
        if key not in node:
            raise FieldNotFoundError(f"field [{key}] not present as part of path [{path}]")
        return node[key]
    if isinstance(node, list):
        try:
            index = int(key)
        except ValueError:
            raise FieldTypeError(f"[{key}] is not an integer, cannot be used as an index as part of path [{path}]") from None
        if index < 0 or index >= len(node):
            raise FieldNotFoundError(f"[{index}] is out of bounds for array with length [{len(node)}] as part of path [{path}]")
        return node[index]
    raise FieldTypeError(
        f"cannot resolve [{key}] from object of type [{type(node).__name__}] as part of path [{path}]"
    )


class IngestDocument:
    """
    Mutable unit of work flowing through processors.

    `data` is the payload; `metadata` only ever carries the failure snapshot
    written by the compound processor (see `compound.record_failure`).
    """

    def __init__(self, data: dict[str, Any] | None = None, metadata: dict[str, str] | None = None) -> None:
        self.data: dict[str, Any] = data if data is not None else {}
        self.metadata: dict[str, str] = metadata if metadata is not None else {}

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IngestDocument(data={self.data!r}, metadata={self.metadata!r})"

    def _root_for(self, keys: list[str]) -> tuple[Any, list[str]]:
        if keys[0] == INGEST_METADATA_PREFIX:
            return self.metadata, keys[1:]
        return self.data, keys

    def get_field_value(self, path: str) -> Any:
        keys = _split_path(path)
        node, keys = self._root_for(keys)
        if node is self.metadata and not keys:
            return dict(self.metadata)
        for key in keys:
            node = _resolve_child(node, key, path)
        return node

    def has_field(self, path: str) -> bool:
        try:
            self.get_field_value(path)
        except (FieldNotFoundError, FieldTypeError):
            return False
        return True

    def _parent_for_write(self, path: str, *, create: bool) -> tuple[dict[str, Any], str]:
        keys = _split_path(path)
        if keys[0] == INGEST_METADATA_PREFIX:
            raise FieldTypeError(f"cannot modify ingest metadata through path [{path}]")

        node: Any = self.data
        for key in keys[:-1]:
            if not isinstance(node, dict):
                raise FieldTypeError(
                    f"cannot set [{key}] with parent object of type [{type(node).__name__}] as part of path [{path}]"
                )
            if key not in node:
                if not create:
                    raise FieldNotFoundError(f"field [{key}] not present as part of path [{path}]")
                node[key] = {}
            node = node[key]

        leaf = keys[-1]
        if not isinstance(node, dict):
            raise FieldTypeError(
                f"cannot set [{leaf}] with parent object of type [{type(node).__name__}] as part of path [{path}]"
            )
        return node, leaf

    def set_field_value(self, path: str, value: Any) -> None:
        parent, leaf = self._parent_for_write(path, create=True)
        parent[leaf] = value

    def append_field_value(self, path: str, value: Any) -> None:
        parent, leaf = self._parent_for_write(path, create=True)
        values = list(value) if isinstance(value, list) else [value]
        current = parent.get(leaf)
        if leaf not in parent:
            parent[leaf] = values
        elif isinstance(current, list):
            current.extend(values)
        else:
            parent[leaf] = [current, *values]

    def remove_field(self, path: str) -> None:
        parent, leaf = self._parent_for_write(path, create=False)
        if leaf not in parent:
            raise FieldNotFoundError(f"field [{leaf}] not present as part of path [{path}]")
        del parent[leaf]

    def to_dict(self) -> dict[str, Any]:
        return {"data": copy.deepcopy(self.data), "metadata": dict(self.metadata)}
