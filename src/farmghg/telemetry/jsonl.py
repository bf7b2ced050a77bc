"""Append pipeline run records to a JSON-lines file."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def append_jsonl(path: str | Path, record: Mapping[str, Any]) -> None:
    """Append ``record`` as one line; UUIDs, paths and enums are written as strings."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(record, ensure_ascii=False, separators=(",", ":"), default=str)
    with target.open("a", encoding="utf-8") as stream:
        stream.write(f"{line}\n")


__all__ = ["append_jsonl"]
