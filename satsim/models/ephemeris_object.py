"""
Ephemeris Object
================

Object moving along a table of state vectors.
"""

from typing import Sequence

import numpy as np

from ..core.config import MU_EARTH
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject, ReferenceFrame
from ..dynamics.lagrange import lagrange_fast
from ..dynamics.twobody import rv2period, rv2ecc


class EphemerisObject(SimObject):
    """
    Object interpolated from tabulated ephemeris samples.

    Samples are sorted by time; positions between samples come from a
    cubic Lagrange fit on the four nearest samples.
    """

    INTERPOLATION_DEGREE = 3

    def __init__(self, times: Sequence[JulianDate], positions, velocities,
                 name: str = 'EphemerisObject',
                 reference_frame: ReferenceFrame = ReferenceFrame.INERTIAL):
        """
        Initialize ephemeris.

        Args:
            times: Sample times
            positions: Sample positions [m]
            velocities: Sample velocities [m/s]
            name: Object name
            reference_frame: Frame of the samples

        Raises:
            ValueError: If the sample lists are empty or of unequal length
        """
        super().__init__(name, reference_frame)
        if not len(times) or not (len(times) == len(positions) == len(velocities)):
            raise ValueError("Ephemeris needs equally sized, non-empty sample lists")

        self._state_vectors = sorted(
            ({
                'time': JulianDate.coerce(t),
                'position': np.asarray(p, dtype=float),
                'velocity': np.asarray(v, dtype=float),
            } for t, p, v in zip(times, positions, velocities)),
            key=lambda sv: sv['time'])

        first = self._state_vectors[0]
        self._epoch = first['time']
        self._times = np.array([sv['time'].seconds_difference(self._epoch)
                                for sv in self._state_vectors])
        self._positions = np.concatenate([sv['position'] for sv in self._state_vectors])

        self._period = rv2period(MU_EARTH, first['position'], first['velocity'])
        self._eccentricity = rv2ecc(MU_EARTH, first['position'], first['velocity'])

    @property
    def epoch(self) -> JulianDate:
        return self._epoch

    @property
    def times(self) -> np.ndarray:
        """Sample times relative to the epoch [s]."""
        return self._times

    @property
    def positions(self) -> np.ndarray:
        """Flattened sample positions [m]."""
        return self._positions

    def _update(self, time: JulianDate, universe):
        delta = time.seconds_difference(self._epoch)
        self._position = lagrange_fast(self._times, self._positions, delta,
                                       self.INTERPOLATION_DEGREE)
