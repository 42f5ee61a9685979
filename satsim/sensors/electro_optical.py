"""
Electro-Optical Sensor
======================

Passive imaging sensor mounted on a gimbal.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..core.julian_date import JulianDate
from ..core.simobject import SimObject


@dataclass
class FieldOfRegard:
    """
    One reachable pointing region.

    Intervals are open. A clock interval crossing north is given as two
    entries, e.g. (350, 360) and (0, 10).
    """
    clock: Tuple[float, float]      # azimuth bounds [deg]
    elevation: Tuple[float, float]  # elevation bounds [deg]
    range: Optional[float] = None   # maximum range [m]

    @classmethod
    def from_mapping(cls, entry: Mapping) -> 'FieldOfRegard':
        """Create from a mapping with ``clock``, ``elevation`` and optional ``range``."""
        return cls(
            clock=tuple(entry['clock']),
            elevation=tuple(entry['elevation']),
            range=entry.get('range'),
        )

    def contains(self, az: float, el: float, range_: Optional[float] = None) -> bool:
        """Check whether a direction lies strictly inside this region."""
        if not (self.clock[0] < az < self.clock[1]):
            return False
        if not (self.elevation[0] < el < self.elevation[1]):
            return False
        if self.range is not None and range_ is not None and not range_ < self.range:
            return False
        return True


class ElectroOpticalSensor(SimObject):
    """
    Electro-optical sensor.

    Provides:
    - Focal plane size and fields of view
    - Instantaneous fields of view per pixel
    - Field-of-regard membership test

    The sensor frame coincides with its gimbal: boresight -Z, up +Y,
    right +X.
    """

    def __init__(self, height: int, width: int, y_fov: float, x_fov: float,
                 field_of_regard: Iterable[Union[FieldOfRegard, Mapping]] = (),
                 name: str = 'ElectroOpticalSensor'):
        """
        Initialize sensor.

        Args:
            height: Rows [pixels]
            width: Columns [pixels]
            y_fov: Vertical field of view [deg]
            x_fov: Horizontal field of view [deg]
            field_of_regard: Reachable regions
            name: Sensor name
        """
        super().__init__(name)
        self.height = height
        self.width = width
        self.y_fov = y_fov
        self.x_fov = x_fov
        self.y_ifov = self.y_fov / self.height
        self.x_ifov = self.x_fov / self.width
        self.field_of_regard: List[FieldOfRegard] = [
            f if isinstance(f, FieldOfRegard) else FieldOfRegard.from_mapping(f)
            for f in (field_of_regard or ())
        ]

    def in_field_of_regard(self, az: float, el: float, range_: Optional[float] = None) -> bool:
        """
        Check whether a site-frame direction is reachable.

        Args:
            az: Azimuth [deg]
            el: Elevation [deg]
            range_: Range to the target [m], checked against range limits

        Returns:
            True if any field-of-regard entry contains the direction
        """
        return any(f.contains(az, el, range_) for f in self.field_of_regard)

    def _update(self, time: JulianDate, universe):
        # Orientation follows the gimbal
        pass
