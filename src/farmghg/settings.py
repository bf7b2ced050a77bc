"""Pipeline configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

TELEMETRY_LOG_ENV = "FARMGHG_TELEMETRY_LOG"


class PipelineSettings(BaseModel):
    """Options of :class:`farmghg.results.pipeline.FarmResultsService`.

    Attributes
    ----------
    cache_results:
        Reuse the previous result of a farm whose ``results_calculated`` flag is still set.
    max_workers:
        Worker threads for batch runs; ``None`` or ``1`` processes farms sequentially.
    telemetry_log:
        JSONL file receiving one record per pipeline run.
    log_summary:
        Log the human-readable result summary after each run.
    """

    cache_results: bool = True
    max_workers: int | None = None
    telemetry_log: Path | None = None
    log_summary: bool = True

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("max_workers must be >= 1")
        return value


def settings_from_mapping(data: Mapping[str, Any] | None) -> PipelineSettings:
    """Build settings from ``data`` and apply the environment override."""

    settings = PipelineSettings.model_validate(dict(data or {}))
    env_log = os.environ.get(TELEMETRY_LOG_ENV)
    if env_log:
        settings = settings.model_copy(update={"telemetry_log": Path(env_log)})
    return settings


def load_settings(path: str | Path | None = None) -> PipelineSettings:
    """Load settings from a YAML file; a missing ``path`` yields the defaults."""

    if path is None:
        return settings_from_mapping(None)
    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if "settings" in data:
        data = data["settings"] or {}
    return settings_from_mapping(data)


__all__ = ["PipelineSettings", "TELEMETRY_LOG_ENV", "load_settings", "settings_from_mapping"]
