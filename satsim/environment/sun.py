"""
Sun Model
=========

Sun position in the Earth-centered inertial frame.
"""

import numpy as np

from ..core.config import AU_M, J2000_JD, SECONDS_PER_DAY
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject, ReferenceFrame


def sun_position_eci(time: JulianDate) -> np.ndarray:
    """
    Calculate sun position in ECI frame.

    Uses low-precision solar position algorithm (about 0.01° accuracy).

    Args:
        time: Julian date

    Returns:
        Sun position in ECI [m]
    """
    # Julian centuries since J2000
    T = ((time.day_number - J2000_JD) + time.seconds_of_day / SECONDS_PER_DAY) / 36525.0

    # Mean longitude of the Sun (deg)
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T**2
    L0 = L0 % 360

    # Mean anomaly of the Sun (deg)
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T**2
    M_rad = np.radians(M % 360)

    # Eccentricity of Earth's orbit
    e = 0.016708634 - 0.000042037 * T - 0.0000001267 * T**2

    # Sun's equation of center (deg)
    C = ((1.914602 - 0.004817 * T - 0.000014 * T**2) * np.sin(M_rad) +
         (0.019993 - 0.000101 * T) * np.sin(2 * M_rad) +
         0.000289 * np.sin(3 * M_rad))

    true_lon_rad = np.radians(L0 + C)
    true_anom_rad = np.radians(M + C)

    # Distance to sun (AU)
    R = 1.000001018 * (1 - e**2) / (1 + e * np.cos(true_anom_rad))

    # Obliquity of the ecliptic (deg)
    epsilon_rad = np.radians(23.439291 - 0.0130042 * T)

    # Equatorial coordinates
    x = R * np.cos(true_lon_rad) * AU_M
    y = R * np.sin(true_lon_rad) * np.cos(epsilon_rad) * AU_M
    z = R * np.sin(true_lon_rad) * np.sin(epsilon_rad) * AU_M

    return np.array([x, y, z])


class Sun(SimObject):
    """The Sun as an inertial point; velocity is not modeled."""

    def __init__(self):
        super().__init__('Sun', ReferenceFrame.INERTIAL)

    def _update(self, time: JulianDate, universe):
        self._position = sun_position_eci(time)
