"""
Simulation Event
================

Time-tagged action applied to the universe.
"""

import itertools
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, Union

from ..core.julian_date import JulianDate

_event_ids = itertools.count(1)


@dataclass(order=True)
class Event:
    """
    Scheduled event entry.

    Events order by time, then by the sequence number assigned when they
    are queued, so equal times fire in insertion order.
    """
    time: Union[JulianDate, datetime, str]
    type: Optional[str] = field(default=None, compare=False)
    data: Any = field(default=None, compare=False)
    handler: Optional[Callable] = field(default=None, compare=False, repr=False)
    id: Optional[str] = field(default=None, compare=False)
    sequence: int = field(default=0, repr=False)
    fired: bool = field(default=False, compare=False)

    def __post_init__(self):
        if self.time is None:
            raise ValueError("Event: missing time")
        try:
            self.time = JulianDate.coerce(self.time)
        except ValueError as e:
            raise ValueError(f"Event: invalid time {self.time!r}") from e

        if self.type is not None:
            self.type = str(self.type)
        if not callable(self.handler):
            self.handler = None
        if not self.id:
            self.id = f"evt_{next(_event_ids)}"
