"""
Shadow Model
============

Conical Earth shadow classification for simulated objects.
"""

from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from ..core.config import WGS84_A, SUN_RADIUS
from ..core.julian_date import JulianDate

EARTH_RADIUS = WGS84_A


class ShadowState(Enum):
    """Illumination state of an object."""
    SUNLIT = 'sunlit'
    PENUMBRA = 'penumbra'
    UMBRA = 'umbra'


def classify_shadow_state(position: np.ndarray,
                          sun_direction: np.ndarray,
                          umbra_length: float,
                          penumbra_length: float) -> ShadowState:
    """
    Classify a position against the umbra and penumbra cones.

    Args:
        position: Object position in ECI [m]
        sun_direction: Unit vector from Earth to Sun
        umbra_length: Distance from Earth center to the umbra apex [m]
        penumbra_length: Distance from Earth center to the penumbra apex,
            on the sunward side [m]

    Returns:
        Shadow state
    """
    projection = np.dot(position, sun_direction)
    if projection >= 0:
        return ShadowState.SUNLIT

    axial_distance = -projection
    radial_distance = np.linalg.norm(position - projection * sun_direction)

    # Umbra cone narrows toward its apex behind the Earth
    umbra_radius = max(0.0, EARTH_RADIUS * (umbra_length - axial_distance) / umbra_length)
    if axial_distance <= umbra_length and radial_distance <= umbra_radius:
        return ShadowState.UMBRA

    # Penumbra cone widens with distance
    penumbra_radius = EARTH_RADIUS * (penumbra_length + axial_distance) / penumbra_length
    if radial_distance <= penumbra_radius:
        return ShadowState.PENUMBRA

    return ShadowState.SUNLIT


def get_shadow_status(sun, objects: Sequence, time: JulianDate, universe=None) -> List[ShadowState]:
    """
    Shadow state of each object at a given time.

    The Sun and every object are updated to ``time`` first.

    Args:
        sun: Sun SimObject
        objects: Objects to classify; None entries are reported sunlit
        time: Evaluation time
        universe: Universe passed through to updates

    Returns:
        One shadow state per object

    Raises:
        ValueError: If the sun or time is missing
    """
    if sun is None:
        raise ValueError("Sun object is required")
    if time is None:
        raise ValueError("Time argument is required")

    sun.update(time, universe)
    sun_position = sun.world_position
    sun_distance = np.linalg.norm(sun_position)
    if sun_distance == 0:
        return [ShadowState.SUNLIT for _ in objects]

    sun_direction = sun_position / sun_distance
    umbra_length = EARTH_RADIUS * sun_distance / (SUN_RADIUS - EARTH_RADIUS)
    penumbra_length = EARTH_RADIUS * sun_distance / (SUN_RADIUS + EARTH_RADIUS)

    states = []
    for obj in objects:
        if obj is None:
            states.append(ShadowState.SUNLIT)
            continue
        obj.update(time, universe)
        states.append(classify_shadow_state(obj.world_position, sun_direction,
                                            umbra_length, penumbra_length))
    return states


def shadow_state_of(obj, universe, time: Optional[JulianDate] = None) -> ShadowState:
    """Shadow state of one object using the universe's Sun."""
    time = time if time is not None else obj.time
    return get_shadow_status(universe.sun, [obj], time, universe)[0]
