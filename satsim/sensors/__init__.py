"""
Sensors Module
==============

Sensor models carried by observatories.
"""

from .electro_optical import FieldOfRegard, ElectroOpticalSensor

__all__ = [
    'FieldOfRegard',
    'ElectroOpticalSensor',
]
