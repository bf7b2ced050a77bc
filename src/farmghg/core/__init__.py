"""Core utilities shared across farmghg modules."""

from .errors import FarmGHGValueError, ManureTankLookupError, MissingReferenceDataError

__all__ = ["FarmGHGValueError", "MissingReferenceDataError", "ManureTankLookupError"]
