"""
Pointing Geometry
=================

Conversions from local Cartesian vectors to azimuth, elevation and range.
"""

import math
from typing import Tuple

import numpy as np


def sez_to_az_el(vector) -> Tuple[float, float, float]:
    """
    Convert a South-East-Zenith vector to azimuth, elevation and range.

    Azimuth is measured clockwise from north (the -X axis) through east;
    elevation is measured from the horizontal plane.

    Args:
        vector: Vector in SEZ coordinates

    Returns:
        Tuple of (azimuth_deg in [0, 360), elevation_deg in [-90, 90], range)
    """
    x, y, z = (float(c) for c in vector)

    if x == 0.0 and y == 0.0:
        az = 0.0
    else:
        az = math.atan2(y, -x)
        if az < 0.0:
            az += 2 * math.pi

    mag = math.sqrt(x * x + y * y + z * z)
    if mag < 1e-9:
        el = 0.0
    else:
        el = math.asin(max(-1.0, min(1.0, z / mag)))

    return math.degrees(az), math.degrees(el), mag


def space_based_to_az_el(vector) -> Tuple[float, float, float]:
    """
    Convert a vector in a space-based sensor frame to azimuth, elevation
    and range.

    Azimuth follows the SEZ convention; elevation is the angle from the
    -Z axis, so a vector in the XY plane has 90° elevation.

    Args:
        vector: Vector in sensor coordinates

    Returns:
        Tuple of (azimuth_deg in [0, 360), elevation_deg in [0, 180], range)
    """
    x, y, z = (float(c) for c in vector)

    if x == 0.0 and y == 0.0:
        az = 0.0
    else:
        az = math.atan2(y, -x)
        if az < 0.0:
            az += 2 * math.pi

    mag = math.sqrt(x * x + y * y + z * z)
    r = math.hypot(x, y)
    if r < 1e-9 and abs(z) < 1e-9:
        el = 0.0
    else:
        el = math.atan2(r, -z)

    return math.degrees(az), math.degrees(el), mag


def az_el_to_sez(az_deg: float, el_deg: float, range_: float = 1.0) -> np.ndarray:
    """
    Inverse of :func:`sez_to_az_el`.

    Returns:
        Vector in SEZ coordinates
    """
    az = math.radians(az_deg)
    el = math.radians(el_deg)
    return range_ * np.array([
        -math.cos(el) * math.cos(az),
        math.cos(el) * math.sin(az),
        math.sin(el)
    ])
