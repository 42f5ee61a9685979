"""
Environment Module
==================

Earth, Sun and ground-site models, plus Earth shadow classification.
"""

from .earth import Earth, teme_to_pseudo_fixed, icrf_to_fixed
from .sun import Sun, sun_position_eci
from .ground_station import EarthGroundStation, geodetic_to_ecef
from .shadow import ShadowState, classify_shadow_state, get_shadow_status

__all__ = [
    'Earth',
    'teme_to_pseudo_fixed',
    'icrf_to_fixed',
    'Sun',
    'sun_position_eci',
    'EarthGroundStation',
    'geodetic_to_ecef',
    'ShadowState',
    'classify_shadow_state',
    'get_shadow_status',
]
