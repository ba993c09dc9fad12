from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from src.observability.obs import api as obs


@pytest.fixture
def mock_clock(monkeypatch: pytest.MonkeyPatch) -> float:
    """Freeze time.time() to a deterministic value."""
    import time

    fixed = 1_700_000_000.0
    monkeypatch.setattr(time, "time", lambda: fixed)
    return fixed


@pytest.fixture(autouse=True)
def _isolate_obs_sink() -> Iterator[None]:
    previous = obs.get_sink()
    obs.set_sink(None)
    try:
        yield
    finally:
        obs.set_sink(previous)


@pytest.fixture
def repo_config(tmp_path: Path) -> Path:
    """
    Lay out `config/settings.yaml` + `config/pipelines/` under tmp_path and
    return the settings path.
    """
    config_dir = tmp_path / "config"
    (config_dir / "pipelines").mkdir(parents=True)
    settings = config_dir / "settings.yaml"
    settings.write_text(
        """
paths:
  pipelines_dir: config/pipelines
  logs_dir: logs
observability:
  trace_sink: jsonl
defaults:
  pipeline_id: default
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return settings


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Default behavior: only run unit tests.

    If the user explicitly provides `-m ...`, we respect it and do not apply
    any extra deselection logic.
    """
    if config.option.markexpr:
        return

    deselect: list[pytest.Item] = []
    keep: list[pytest.Item] = []

    for item in items:
        if item.get_closest_marker("integration") or item.get_closest_marker("e2e"):
            deselect.append(item)
        else:
            keep.append(item)

    if deselect:
        config.hook.pytest_deselected(items=deselect)
        items[:] = keep
