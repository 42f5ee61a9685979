"""
SGP4 Satellite
==============

Satellite propagated from a two-line element set.
"""

import logging
import math

import numpy as np
from sgp4.api import Satrec

from ..core.julian_date import JulianDate
from ..core.simobject import SimObject, ReferenceFrame
from ..core.config import SECONDS_PER_DAY

logger = logging.getLogger(__name__)


class SGP4Satellite(SimObject):
    """
    Satellite propagated with SGP4/SDP4.

    Positions are TEME, treated as the inertial frame, in meters.
    A failed propagation zeroes the state for that tick.
    """

    def __init__(self, line1: str, line2: str, orientation=None, name: str = 'SGP4Satellite'):
        """
        Initialize satellite.

        Args:
            line1: TLE line 1
            line2: TLE line 2
            orientation: Attitude mode label (stored, not interpreted)
            name: Satellite name
        """
        super().__init__(name, ReferenceFrame.INERTIAL)
        self._satrec = Satrec.twoline2rv(line1, line2)
        self._epoch = JulianDate.from_julian_date(self._satrec.jdsatepoch, self._satrec.jdsatepochF)
        # Un-Kozai mean motion [rad/min]
        self._period = 2 * math.pi / self._satrec.no * 60.0
        self._eccentricity = self._satrec.ecco
        self.orientation = orientation

    @property
    def satrec(self) -> Satrec:
        return self._satrec

    @property
    def epoch(self) -> JulianDate:
        return self._epoch

    def _update(self, time: JulianDate, universe):
        e, r_km, v_kms = self._satrec.sgp4(float(time.day_number),
                                           time.seconds_of_day / SECONDS_PER_DAY)

        r = np.array(r_km, dtype=float)
        v = np.array(v_kms, dtype=float)

        if e != 0 or not (np.all(np.isfinite(r)) and np.all(np.isfinite(v))):
            logger.warning("SGP4 propagation failed for %s at %s (error %s)",
                           self._name, time, e)
            self._position = np.zeros(3)
            self._velocity = np.zeros(3)
            return

        self._position = r * 1000.0
        self._velocity = v * 1000.0
