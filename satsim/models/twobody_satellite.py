"""
Two-Body Satellite
==================

Satellite propagated on an unperturbed Keplerian orbit.
"""

from ..core.config import MU_EARTH, VALLADO_MAX_ITERATIONS
from ..core.julian_date import JulianDate
from ..core.rotations import vector3
from ..core.simobject import SimObject, ReferenceFrame
from ..dynamics.twobody import vallado, rv2period, rv2ecc


class TwoBodySatellite(SimObject):
    """Satellite propagated from an epoch state with the universal-variable solver."""

    def __init__(self, position, velocity, time: JulianDate, orientation=None,
                 name: str = 'TwoBodySatellite'):
        """
        Initialize satellite.

        Args:
            position: Epoch position in ECI [m]
            velocity: Epoch velocity in ECI [m/s]
            time: Epoch
            orientation: Attitude mode label (stored, not interpreted)
            name: Satellite name
        """
        super().__init__(name, ReferenceFrame.INERTIAL)
        position = vector3(position)
        velocity = vector3(velocity)
        self._epoch = {'position': position, 'velocity': velocity, 'time': JulianDate.coerce(time)}
        self._period = rv2period(MU_EARTH, position, velocity)
        self._eccentricity = rv2ecc(MU_EARTH, position, velocity)
        self.orientation = orientation

    @property
    def epoch(self) -> dict:
        """Epoch state: position, velocity and time."""
        return self._epoch

    def _update(self, time: JulianDate, universe):
        delta_sec = time.seconds_difference(self._epoch['time'])
        state = vallado(MU_EARTH, self._epoch['position'], self._epoch['velocity'],
                        delta_sec, VALLADO_MAX_ITERATIONS)
        self._position = state.position
        self._velocity = state.velocity
