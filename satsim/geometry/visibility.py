"""
Visibility
==========

Which observatories can see a target, and how many.
"""

import logging
from typing import Iterable, List, Optional

from ..core.julian_date import JulianDate
from ..dynamics.pointing import sez_to_az_el
from .photometry import calculate_target_brightness

logger = logging.getLogger(__name__)

VISIBILITY_COLORS = {
    1: 'red',
    2: 'yellow',
}


def get_visibility(universe, time: JulianDate, observatories: Iterable, target) -> List[dict]:
    """
    Look angles and brightness of a target from each observatory.

    A target is visible when its direction lies inside any field-of-regard
    entry of the observatory's sensor.

    Args:
        universe: Universe holding the Sun
        time: Evaluation time
        observatories: Observatories to test
        target: Target object

    Returns:
        One record per observatory with ``sensor``, ``az``, ``el``, ``r``,
        ``visible``, ``phase_angle``, ``range`` and ``mv``
    """
    visibility = []
    for observatory in observatories:
        target.update(time, universe)
        local_position = observatory.site.transform_point_from_world(target.world_position)
        az, el, r = sez_to_az_el(local_position)

        record = {
            'sensor': observatory.sensor.name,
            'az': az,
            'el': el,
            'r': r,
            'visible': observatory.sensor.in_field_of_regard(az, el, r),
        }
        record.update(calculate_target_brightness(observatory.site, target, universe.sun))
        visibility.append(record)

    return visibility


def visibility_counts(universe, time: JulianDate, observatories: Iterable, targets: Iterable) -> dict:
    """
    Number of observatories that can see each target.

    Returns:
        Mapping of target name to count
    """
    observatories = list(observatories)
    counts = {}
    for target in targets:
        records = get_visibility(universe, time, observatories, target)
        counts[target.name] = sum(1 for rec in records if rec['visible'])
    logger.debug("Visibility counts at %s: %s", time, counts)
    return counts


def visibility_color(count: int) -> Optional[str]:
    """
    Display color for a visibility count.

    Returns:
        None when unseen, ``'red'`` for one observatory, ``'yellow'`` for
        two and ``'green'`` for three or more
    """
    if count <= 0:
        return None
    return VISIBILITY_COLORS.get(count, 'green')
