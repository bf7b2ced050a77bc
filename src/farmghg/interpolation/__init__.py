"""Table-driven interpolation engine."""

from .tables import (
    BRACKET_TOLERANCE,
    EpochPartitionedTable,
    find_bracket_row,
    interpolate_between_rows,
    interpolate_linear,
)

__all__ = [
    "BRACKET_TOLERANCE",
    "EpochPartitionedTable",
    "find_bracket_row",
    "interpolate_between_rows",
    "interpolate_linear",
]
