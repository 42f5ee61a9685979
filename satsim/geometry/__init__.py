"""
Geometry Module
===============

Observation geometry: photometry and observatory visibility.
"""

from .photometry import (
    mv_to_pe,
    pe_to_mv,
    lambertian_sphere_to_mv,
    calculate_target_brightness,
)
from .visibility import get_visibility, visibility_counts, visibility_color

__all__ = [
    'mv_to_pe',
    'pe_to_mv',
    'lambertian_sphere_to_mv',
    'calculate_target_brightness',
    'get_visibility',
    'visibility_counts',
    'visibility_color',
]
