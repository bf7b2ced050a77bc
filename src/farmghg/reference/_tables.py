"""Bundled default-data tables."""

from __future__ import annotations

from importlib import resources

import pandas as pd


def read_table(name: str) -> pd.DataFrame:
    """Return the bundled ``_data/<name>`` CSV as a DataFrame."""

    data_path = resources.files(__package__) / "_data" / name
    with resources.as_file(data_path) as path:
        if not path.exists():
            raise FileNotFoundError(f"Default-data table missing: {path}")
        return pd.read_csv(path)


__all__ = ["read_table"]
