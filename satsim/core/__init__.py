"""
Core Module
===========

Time, configuration and rotation primitives shared by every subsystem.
"""

from .config import KernelConfig, default_config
from .julian_date import JulianDate
from .log import configure_logging
from .rotations import (
    rotation_x,
    rotation_y,
    rotation_z,
    quaternion_to_matrix,
    matrix_to_quaternion,
)

__all__ = [
    'KernelConfig',
    'default_config',
    'JulianDate',
    'configure_logging',
    'rotation_x',
    'rotation_y',
    'rotation_z',
    'quaternion_to_matrix',
    'matrix_to_quaternion',
]
