"""
Ground Station Model
====================

Earth-fixed ground site with a local South-East-Zenith frame.
"""

import numpy as np

from ..core.config import WGS84_A, WGS84_E2
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject, ReferenceFrame


def geodetic_to_ecef(latitude_deg: float, longitude_deg: float, altitude_m: float = 0.0) -> np.ndarray:
    """
    Convert geodetic coordinates to ECEF on the WGS84 ellipsoid.

    Args:
        latitude_deg: Geodetic latitude [deg]
        longitude_deg: Longitude [deg]
        altitude_m: Height above the ellipsoid [m]

    Returns:
        Position in ECEF [m]
    """
    lat = np.radians(latitude_deg)
    lon = np.radians(longitude_deg)

    sin_lat, cos_lat = np.sin(lat), np.cos(lat)

    # Prime vertical radius of curvature
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)

    return np.array([
        (N + altitude_m) * cos_lat * np.cos(lon),
        (N + altitude_m) * cos_lat * np.sin(lon),
        (N * (1.0 - WGS84_E2) + altitude_m) * sin_lat
    ])


class EarthGroundStation(SimObject):
    """
    Ground station fixed to the rotating Earth.

    Features:
    - WGS84 geodetic placement
    - Local axes X=south, Y=east, Z=zenith
    - Inertial velocity from Earth rotation
    """

    def __init__(self, latitude: float, longitude: float, altitude: float = 0.0,
                 name: str = 'EarthGroundStation'):
        """
        Initialize ground station.

        Args:
            latitude: Geodetic latitude [deg]
            longitude: Longitude [deg]
            altitude: Altitude [m]
            name: Station name
        """
        super().__init__(name, ReferenceFrame.FIXED)
        self._latitude = latitude
        self._longitude = longitude
        self._altitude = 0.0 if altitude is None else altitude
        self._period = 86400.0
        self._initialize()

    def _initialize(self):
        """Place the station and orient its South-East-Zenith axes."""
        self._position = geodetic_to_ecef(self._latitude, self._longitude, self._altitude)
        self._velocity = np.zeros(3)
        self.reset()
        self.rotate_z(np.radians(self._longitude))
        self.rotate_y(np.pi / 2 - np.radians(self._latitude))
        self.set_translation(self._position)

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float):
        self._latitude = value
        self._initialize()

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float):
        self._longitude = value
        self._initialize()

    @property
    def altitude(self) -> float:
        return self._altitude

    @altitude.setter
    def altitude(self, value: float):
        self._altitude = value
        self._initialize()

    def _update(self, time: JulianDate, universe):
        # Position and orientation are fixed in the Earth frame
        pass
