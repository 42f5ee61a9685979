"""
SatSim
======

Simulation kernel for space situational awareness scenarios: a scene
graph of Earth, Sun, satellites and ground observatories advanced by a
single scheduler.
"""

__version__ = "1.0.0"

from .core.config import KernelConfig
from .core.julian_date import JulianDate
from .core.log import configure_logging
from .core.simobject import SimObject, ReferenceFrame
from .core.observatory import Observatory
from .core.universe import Universe
from .events import Event, EventQueue

__all__ = [
    'KernelConfig',
    'JulianDate',
    'configure_logging',
    'SimObject',
    'ReferenceFrame',
    'Observatory',
    'Universe',
    'Event',
    'EventQueue',
]
