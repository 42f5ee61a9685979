"""
Events Module
=============

Scheduled events that mutate the universe at simulation time.
"""

from .event import Event
from .queue import EventQueue

__all__ = [
    'Event',
    'EventQueue',
]
