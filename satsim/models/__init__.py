"""
Models Module
=============

Propagated object models: SGP4, two-body, ephemeris and the Lagrange cache.
"""

from .sgp4_satellite import SGP4Satellite
from .twobody_satellite import TwoBodySatellite
from .ephemeris_object import EphemerisObject
from .lagrange_object import LagrangeInterpolatedObject

__all__ = [
    'SGP4Satellite',
    'TwoBodySatellite',
    'EphemerisObject',
    'LagrangeInterpolatedObject',
]
