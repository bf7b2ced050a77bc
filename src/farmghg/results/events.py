"""In-process publish/subscribe used to announce completed pipeline runs."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .models import FarmEmissionResults

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT")


@dataclass(frozen=True, slots=True)
class FarmResultsCalculatedEvent:
    farm_emission_results: FarmEmissionResults


class EventAggregator:
    """Route published events to the handlers subscribed to their type.

    Delivery is synchronous and fire-and-forget: a failing handler is logged and the remaining
    handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_type: type[EventT], handler: Callable[[EventT], None]) -> None:
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[EventT], handler: Callable[[EventT], None]) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event: object) -> None:
        with self._lock:
            handlers = list(self._handlers.get(type(event), []))
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %r failed for %s", handler, type(event).__name__)


__all__ = ["EventAggregator", "FarmResultsCalculatedEvent"]
