"""JSONL record of one farm results pipeline run."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from .jsonl import append_jsonl

RUN_RECORD_SCHEMA = "1.0"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(slots=True)
class PipelineRunLogger(AbstractContextManager["PipelineRunLogger"]):
    """Collect stage timings of a pipeline run and append one ``run`` record on exit.

    Parameters
    ----------
    log_path:
        JSONL file receiving the record.
    farm:
        Name of the evaluated farm.
    polygon_id:
        Polygon of the farm, when known.
    context:
        Free-form metadata copied into the record (CLI command, farm YAML path).

    Notes
    -----
    :meth:`finalize` writes the record with the run's summary metrics. Leaving the ``with`` block
    without it writes an ``ok`` record with empty metrics, or an ``error`` record when an
    exception escapes. Only the first record of a run is written.
    """

    log_path: Path
    farm: str
    polygon_id: int | None = None
    context: Mapping[str, Any] | None = None
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    stage_durations: dict[str, float] = field(default_factory=dict, init=False)
    _started: float | None = field(default=None, init=False)
    _started_at: str | None = field(default=None, init=False)
    _written: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)

    def __enter__(self) -> "PipelineRunLogger":
        self._started = time.perf_counter()
        self._started_at = _utc_timestamp()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self._write(status="ok")
        else:
            self._write(status="error", error=repr(exc))
        return False

    def record_stage(self, name: str, seconds: float) -> None:
        """Add ``seconds`` to the running total of stage ``name``."""
        total = self.stage_durations.get(name, 0.0) + seconds
        self.stage_durations[name] = round(total, 6)

    def finalize(
        self,
        *,
        status: str = "ok",
        metrics: Mapping[str, Any] | None = None,
        cached: bool = False,
        error: str | None = None,
    ) -> None:
        self._write(status=status, metrics=metrics, cached=cached, error=error)

    def _write(
        self,
        *,
        status: str,
        metrics: Mapping[str, Any] | None = None,
        cached: bool = False,
        error: str | None = None,
    ) -> None:
        if self._written:
            return
        seconds = 0.0 if self._started is None else time.perf_counter() - self._started
        append_jsonl(
            self.log_path,
            {
                "record_type": "run",
                "schema_version": RUN_RECORD_SCHEMA,
                "run_id": self.run_id,
                "farm": self.farm,
                "polygon_id": self.polygon_id,
                "status": status,
                "cached": cached,
                "error": error,
                "metrics": dict(metrics or {}),
                "stage_durations": dict(self.stage_durations),
                "context": dict(self.context or {}),
                "started_at": self._started_at,
                "finished_at": _utc_timestamp(),
                "duration_seconds": round(seconds, 3),
            },
        )
        self._written = True


__all__ = ["PipelineRunLogger", "RUN_RECORD_SCHEMA"]
