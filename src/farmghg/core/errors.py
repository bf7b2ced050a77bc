"""Common farmghg-specific exceptions."""


class FarmGHGValueError(ValueError):
    """Raised when farmghg detects invalid user-provided data."""


class MissingReferenceDataError(LookupError):
    """Raised when a mandatory default-data table has no row for the requested keys."""


class ManureTankLookupError(LookupError):
    """Raised when no manure tank exists for an animal type."""


__all__ = ["FarmGHGValueError", "MissingReferenceDataError", "ManureTankLookupError"]
