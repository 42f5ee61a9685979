"""
Observatory
===========

Site, gimbal and sensor grouped as one unit.
"""

from dataclasses import dataclass

from ..actuators.gimbal import Gimbal
from ..environment.ground_station import EarthGroundStation
from ..sensors.electro_optical import ElectroOpticalSensor


@dataclass
class Observatory:
    """Components that always move together."""
    site: EarthGroundStation
    gimbal: Gimbal
    sensor: ElectroOpticalSensor

    @property
    def name(self) -> str:
        return self.site.name
