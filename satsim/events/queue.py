"""
Event Queue
===========

Time-ordered queue of events processed at simulation time.
"""

import heapq
import itertools
import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from ..core.julian_date import JulianDate
from .event import Event

logger = logging.getLogger(__name__)


class EventQueue:
    """
    Priority queue of events keyed on (time, insertion sequence).

    Supports:
    - Per-event handlers and handlers registered by event type
    - Removal by id
    - Synchronous draining of due events
    """

    def __init__(self):
        self._queue: List[Event] = []
        self._sequence = itertools.count()
        self._handlers: Dict[str, Callable] = {}

    @staticmethod
    def _key(event_type: Optional[str]) -> str:
        return str(event_type).lower()

    def register_handler(self, event_type: str, handler: Callable):
        """
        Register the handler for an event type (case-insensitive).

        Args:
            event_type: Event type
            handler: Callable invoked as ``handler(universe, event)``

        Raises:
            ValueError: If the type is empty
            TypeError: If the handler is not callable
        """
        if not event_type:
            raise ValueError("EventQueue.register_handler: type is required")
        if not callable(handler):
            raise TypeError("EventQueue.register_handler: handler must be callable")
        self._handlers[self._key(event_type)] = handler

    def unregister_handler(self, event_type: str) -> bool:
        """
        Remove the handler for an event type.

        Returns:
            True if a handler was removed
        """
        if not event_type:
            raise ValueError("EventQueue.unregister_handler: type is required")
        return self._handlers.pop(self._key(event_type), None) is not None

    def get_handler(self, event_type: str) -> Optional[Callable]:
        """Get the handler registered for an event type."""
        if not event_type:
            raise ValueError("EventQueue.get_handler: type is required")
        return self._handlers.get(self._key(event_type))

    def add(self, event: Union[Event, Mapping]) -> str:
        """
        Queue an event.

        Args:
            event: Event, or a mapping of Event fields

        Returns:
            Event id
        """
        if not isinstance(event, Event):
            event = Event(**event)
        event.sequence = next(self._sequence)
        heapq.heappush(self._queue, event)
        return event.id

    def remove(self, event_id: str) -> bool:
        """
        Remove a queued event.

        Returns:
            True if found and removed
        """
        for i, event in enumerate(self._queue):
            if event.id == event_id:
                self._queue.pop(i)
                heapq.heapify(self._queue)
                return True
        return False

    def clear(self):
        """Remove all queued events."""
        self._queue.clear()

    def size(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def pending(self) -> List[Event]:
        """Queued events in firing order."""
        return sorted(self._queue)

    def process(self, current_time: JulianDate, universe=None) -> List[Event]:
        """
        Fire every event due at or before ``current_time``.

        Handlers run in time order and may queue further events; those
        fire in the same call when already due.

        Args:
            current_time: Simulation time
            universe: Passed to each handler

        Returns:
            Fired events

        Raises:
            TypeError: If ``current_time`` is not a JulianDate
            LookupError: If a due event has no handler
        """
        if not isinstance(current_time, JulianDate):
            raise TypeError("EventQueue.process: current_time must be a JulianDate")

        fired = []
        while self._queue and self._queue[0].time <= current_time:
            event = self._queue[0]
            handler = event.handler or (self.get_handler(event.type) if event.type else None)
            if handler is None:
                raise LookupError(f"EventQueue: no handler for type {event.type!r}")

            heapq.heappop(self._queue)
            logger.debug("Firing event %s (%s) due %s", event.id, event.type, event.time)
            handler(universe, event)
            event.fired = True
            fired.append(event)

        return fired
