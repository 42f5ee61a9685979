"""
Earth Model
===========

Earth frame provider: rotation between the inertial and Earth-fixed frames.
"""

import logging
from typing import Optional

import erfa
import numpy as np

from ..core.config import KernelConfig
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject, ReferenceFrame

logger = logging.getLogger(__name__)


def teme_to_pseudo_fixed(time: JulianDate) -> np.ndarray:
    """
    TEME to pseudo Earth-fixed rotation (GMST about Z, no polar motion).

    Args:
        time: Julian date (UTC, taken as UT1)

    Returns:
        3x3 inertial-to-fixed rotation matrix
    """
    gmst = time.gmst()
    c, s = np.cos(gmst), np.sin(gmst)
    return np.array([
        [c, s, 0.0],
        [-s, c, 0.0],
        [0.0, 0.0, 1.0]
    ])


def icrf_to_fixed(time: JulianDate, config: KernelConfig) -> Optional[np.ndarray]:
    """
    Celestial to terrestrial rotation using IAU 2000B precession-nutation.

    The CIO-based chain is W(xp, yp) · R3(ERA) · C(X, Y, s).

    Args:
        time: Julian date (UTC)
        config: Earth orientation parameters

    Returns:
        3x3 inertial-to-fixed rotation matrix, or None when the date lies
        outside the precession-nutation data span
    """
    tt1, tt2 = time.to_tt_split()
    if not config.has_precession_nutation(tt1 + tt2):
        return None

    # Precession-nutation
    x, y, s = erfa.xys00b(tt1, tt2)
    c2i = erfa.c2ixys(x, y, s)

    # Earth rotation angle
    ut1, ut2 = time.to_ut1_split(config.dut1_seconds)
    era = erfa.era00(ut1, ut2)

    # Polar motion
    xp = config.polar_motion_x_arcsec * erfa.DAS2R
    yp = config.polar_motion_y_arcsec * erfa.DAS2R
    pom = erfa.pom00(xp, yp, erfa.sp00(tt1, tt2))

    return np.asarray(erfa.c2tcio(c2i, era, pom))


class Earth(SimObject):
    """
    The Earth, root of every Earth-fixed object.

    Its local transform is the fixed-to-inertial rotation, so children
    expressed in Earth-fixed coordinates compose into inertial world space.
    """

    def __init__(self, config: KernelConfig = None):
        """
        Initialize Earth.

        Args:
            config: Earth orientation options
        """
        super().__init__('Earth', ReferenceFrame.FIXED)
        self.config = config or KernelConfig()
        self._inertial_to_fixed = np.identity(3)
        self._fixed_to_inertial = np.identity(3)

    @property
    def inertial_to_fixed(self) -> np.ndarray:
        """Current inertial-to-fixed rotation R_if."""
        return self._inertial_to_fixed

    @property
    def fixed_to_inertial(self) -> np.ndarray:
        """Current fixed-to-inertial rotation R_fi."""
        return self._fixed_to_inertial

    @property
    def world_position(self) -> np.ndarray:
        return np.zeros(3)

    @property
    def world_velocity(self) -> np.ndarray:
        return np.zeros(3)

    def _update(self, time: JulianDate, universe):
        matrix = icrf_to_fixed(time, self.config)
        if matrix is None:
            matrix = teme_to_pseudo_fixed(time)

        self._inertial_to_fixed = matrix
        self._fixed_to_inertial = matrix.T.copy()
        self.set_rotation(self._fixed_to_inertial)
