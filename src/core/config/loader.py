from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import PipelineDefinition, Settings


def _resolve_path(root: Path, p: Path) -> Path:
    return p if p.is_absolute() else (root / p).resolve()


def _load_yaml_mapping(p: Path) -> dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TypeError(f"{p.name}: root must be a mapping")
    return raw


def load_settings(path: str | Path) -> Settings:
    """
    Load `config/settings.yaml`; relative paths resolve against the repo root
    (the parent of `config/`).
    """
    p = Path(path).expanduser().resolve()
    root = p.parent.parent  # .../config/settings.yaml -> repo root

    s = Settings.from_dict(_load_yaml_mapping(p))
    s.paths.pipelines_dir = _resolve_path(root, s.paths.pipelines_dir)
    s.paths.logs_dir = _resolve_path(root, s.paths.logs_dir)
    return s


class PipelineLoader:
    def __init__(self, pipelines_dir: Path) -> None:
        self.pipelines_dir = Path(pipelines_dir)

    def load(self, pipeline_id: str) -> PipelineDefinition:
        path = self._resolve_pipeline_path(pipeline_id)
        return PipelineDefinition.from_dict(pipeline_id, _load_yaml_mapping(path))

    def _resolve_pipeline_path(self, pipeline_id: str) -> Path:
        p = Path(pipeline_id)
        if p.suffix in {".yml", ".yaml"}:
            return p if p.is_absolute() else (self.pipelines_dir / p).resolve()

        for suffix in (".yaml", ".yml"):
            candidate = (self.pipelines_dir / f"{pipeline_id}{suffix}").resolve()
            if candidate.exists():
                return candidate
        raise FileNotFoundError(f"pipeline definition not found: {pipeline_id}")
