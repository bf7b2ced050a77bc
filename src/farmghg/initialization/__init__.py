"""Default-value initialization of farm entities."""

from .service import InitializationService

__all__ = ["InitializationService"]
