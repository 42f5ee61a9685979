"""
Actuators Module
================

Gimbal models for pointing sensors.
"""

from .gimbal import TrackMode, Gimbal, AzElGimbal

__all__ = [
    'TrackMode',
    'Gimbal',
    'AzElGimbal',
]
