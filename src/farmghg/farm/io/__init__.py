"""Farm I/O helpers."""

from .loaders import load_farm, load_farm_data

__all__ = ["load_farm", "load_farm_data"]
