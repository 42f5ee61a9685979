"""
Gimbal Models
=============

Pointing mounts that slew a sensor toward a tracked object.
"""

import logging
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..core.config import DEFAULT_GIMBAL_RANGE
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject
from ..dynamics.pointing import sez_to_az_el

logger = logging.getLogger(__name__)


class TrackMode(str, Enum):
    """Gimbal tracking mode."""
    FIXED = 'fixed'        # Hold current angles
    RATE = 'rate'          # Follow the track object
    SIDEREAL = 'sidereal'  # Follow the stars (reserved)


class Gimbal(SimObject):
    """
    Base gimbal that can track another object.

    Features:
    - Fixed, rate and sidereal track modes
    - Self and child tracking guard
    - Slant range to the tracked object

    Subclasses turn the local target vector into an orientation.
    """

    def __init__(self, name: str = 'Gimbal'):
        """
        Initialize gimbal.

        Args:
            name: Gimbal name
        """
        super().__init__(name)
        self._track_object: Optional[SimObject] = None
        self._track_mode = TrackMode.FIXED
        self._range = 0.0

    @property
    def range(self) -> float:
        """Slant range to the tracked object in rate mode, else a default [m]."""
        if self._track_mode is TrackMode.RATE:
            return self._range
        return DEFAULT_GIMBAL_RANGE

    @property
    def track_mode(self) -> TrackMode:
        return self._track_mode

    @track_mode.setter
    def track_mode(self, value: Union[TrackMode, str]):
        self._track_mode = TrackMode(value)

    @property
    def track_object(self) -> Optional[SimObject]:
        return self._track_object

    @track_object.setter
    def track_object(self, value: Optional[SimObject]):
        if value is not None and (value is self or value.parent is self):
            logger.warning("%s: track object cannot be the gimbal itself or its child", self._name)
            return
        self._track_object = value

    def update(self, time: JulianDate, universe=None,
               force_update: bool = False, update_parent: bool = True):
        """Always recompute, since the gimbal can move while time is stopped."""
        super().update(time, universe, True, update_parent)

    def _track_to_local_vector(self, time: JulianDate, universe) -> Optional[np.ndarray]:
        """
        Target vector in the parent's frame for the current track mode.

        Returns:
            Local target vector, or None when the angles should be kept
        """
        if self._track_mode is TrackMode.RATE and self._track_object is not None:
            self._track_object.update(time, universe)
            return self._track_object.transform_point_to(self.parent, np.zeros(3))

        if self._track_mode is TrackMode.SIDEREAL:
            logger.info("%s: sidereal tracking not implemented", self._name)

        return None

    def _update(self, time: JulianDate, universe):
        raise NotImplementedError(
            f"{type(self).__name__}._update must be implemented in derived classes")


class AzElGimbal(Gimbal):
    """
    Azimuth-elevation gimbal on a South-East-Zenith site.

    The sensor boresight is the gimbal's -Z axis, +Y is up and +X right.
    """

    def __init__(self, name: str = 'AzElGimbal'):
        super().__init__(name)
        self.az = 0.0   # deg, clockwise from north
        self.el = 90.0  # deg, above horizon

    def _update(self, time: JulianDate, universe):
        local_vector = self._track_to_local_vector(time, universe)
        if local_vector is not None:
            self.az, self.el, self._range = sez_to_az_el(local_vector)

        # Reference orientation: X east, Y zenith, Z south
        self.reset()
        self.rotate_y(np.pi / 2)
        self.rotate_z(np.pi / 2)

        # Move gimbal axes
        self.rotate_y(-np.radians(self.az))
        self.rotate_x(np.radians(self.el))
