"""Farm loading utilities (YAML document with an optional ``settings`` block)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter

from farmghg.core.errors import FarmGHGValueError
from farmghg.farm.contract.models import Farm

__all__ = ["load_farm", "load_farm_data"]


def load_farm_data(yaml_path: str | Path) -> dict[str, Any]:
    """Return the raw farm mapping of ``yaml_path``.

    The document either nests the farm under a ``farm`` key or is the farm mapping itself; a
    top-level ``settings`` block is dropped.
    """

    path = Path(yaml_path)
    with path.open("r", encoding="utf-8") as handle:
        meta = yaml.safe_load(handle)
    if not isinstance(meta, dict):
        raise FarmGHGValueError(f"Farm document {path} must be a mapping")
    if "farm" in meta:
        data = meta["farm"]
        if not isinstance(data, dict):
            raise FarmGHGValueError(f"'farm' entry of {path} must be a mapping")
        return dict(data)
    return {key: value for key, value in meta.items() if key != "settings"}


def load_farm(yaml_path: str | Path) -> Farm:
    """
    Load and validate a farm.

    Parameters
    ----------
    yaml_path:
        Path to the ``farm.yaml`` document.

    Returns
    -------
    Farm
        The validated aggregate; invalid values raise :class:`pydantic.ValidationError`.
    """

    return TypeAdapter(Farm).validate_python(load_farm_data(yaml_path))
