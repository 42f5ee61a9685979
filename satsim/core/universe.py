"""
Universe
========

Top-level scheduler that owns every simulated object and advances them
in a fixed order.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from .config import KernelConfig
from .julian_date import JulianDate
from .observatory import Observatory
from .simobject import SimObject
from ..actuators.gimbal import AzElGimbal, Gimbal, TrackMode
from ..environment.earth import Earth
from ..environment.ground_station import EarthGroundStation
from ..environment.sun import Sun
from ..events.event import Event
from ..events.queue import EventQueue
from ..models.lagrange_object import LagrangeInterpolatedObject
from ..models.sgp4_satellite import SGP4Satellite
from ..models.twobody_satellite import TwoBodySatellite
from ..sensors.electro_optical import ElectroOpticalSensor, FieldOfRegard

logger = logging.getLogger(__name__)

GIMBAL_TYPES = {
    'AzElGimbal': AzElGimbal,
}


def _handle_track_object(universe: 'Universe', event: Event):
    """
    Point an observatory's gimbal at a named object.

    ``event.data`` holds ``observer`` (site name) and ``target`` (object
    name). A missing or null target stops tracking.
    """
    data = event.data or {}
    observer = data.get('observer')
    if not observer:
        return

    target_name = data.get('target')
    target = None
    if target_name:
        target = universe.get_object(target_name)
        if target is None:
            logger.debug("trackObject: unknown target %s", target_name)
            return

    for observatory in universe.observatories:
        if observatory.site.name == observer:
            observatory.gimbal.track_mode = TrackMode.RATE
            observatory.gimbal.track_object = target
            break


class Universe:
    """
    Simulation universe.

    Integrates:
    - Earth and Sun frame providers
    - Named satellites and ground sites
    - Observatories (site, gimbal and sensor)
    - Event queue processed before each update
    """

    def __init__(self, config: KernelConfig = None):
        """
        Initialize universe.

        Args:
            config: Kernel configuration
        """
        self.config = config or KernelConfig()

        self._earth = Earth(self.config)
        self._sun = Sun()
        self._objects: Dict[str, SimObject] = {}
        self._gimbals: List[Gimbal] = []
        self._sensors: List[ElectroOpticalSensor] = []
        self._trackables: List[SimObject] = []
        self._nontrackables: List[SimObject] = []
        self._observatories: List[Observatory] = []
        self._events = EventQueue()

        # Callbacks
        self.update_callbacks: List[Callable] = []

        self._events.register_handler('trackObject', _handle_track_object)

    @property
    def earth(self) -> Earth:
        return self._earth

    @property
    def sun(self) -> Sun:
        return self._sun

    @property
    def objects(self) -> Dict[str, SimObject]:
        return self._objects

    @property
    def gimbals(self) -> List[Gimbal]:
        return self._gimbals

    @property
    def sensors(self) -> List[ElectroOpticalSensor]:
        return self._sensors

    @property
    def trackables(self) -> List[SimObject]:
        return self._trackables

    @property
    def nontrackables(self) -> List[SimObject]:
        return self._nontrackables

    @property
    def observatories(self) -> List[Observatory]:
        return self._observatories

    @property
    def events(self) -> EventQueue:
        return self._events

    def has_object(self, name: str) -> bool:
        return name in self._objects

    def get_object(self, name: str) -> Optional[SimObject]:
        return self._objects.get(name)

    def add_object(self, obj: SimObject, trackable: bool = True) -> SimObject:
        """
        Index an object and classify it for updates.

        A duplicate name replaces the index entry; the earlier object stays
        in its update list.

        Args:
            obj: Object to add
            trackable: Whether gimbals may track it

        Returns:
            The added object
        """
        if obj.name in self._objects:
            logger.warning("Object with name %s already exists in universe", obj.name)

        self._objects[obj.name] = obj
        if trackable:
            self._trackables.append(obj)
        else:
            self._nontrackables.append(obj)
        return obj

    def remove_object(self, obj: Union[SimObject, str]):
        """
        Remove an object from the index, the update lists and its parent.

        Args:
            obj: Object or object name
        """
        if isinstance(obj, str):
            obj = self._objects.get(obj)
            if obj is None:
                return

        if self._objects.get(obj.name) is obj:
            del self._objects[obj.name]

        if obj in self._trackables:
            self._trackables.remove(obj)
        if obj in self._nontrackables:
            self._nontrackables.remove(obj)

        obj.detach()

    def add_ground_site(self, name: str, latitude: float, longitude: float,
                        altitude: float = 0.0, trackable: bool = False) -> EarthGroundStation:
        """
        Add a ground site attached to the Earth.

        Args:
            name: Site name
            latitude: Geodetic latitude [deg]
            longitude: Longitude [deg]
            altitude: Altitude [m]
            trackable: Whether gimbals may track it

        Returns:
            The ground site
        """
        site = EarthGroundStation(latitude, longitude, altitude, name)
        site.attach(self._earth)
        self.add_object(site, trackable)
        return site

    def add_sgp4_satellite(self, name: str, line1: str, line2: str, orientation=None,
                           lagrange_interpolated: bool = False,
                           trackable: bool = True) -> SimObject:
        """
        Add a satellite propagated from a TLE.

        Args:
            name: Satellite name
            line1: TLE line 1
            line2: TLE line 2
            orientation: Attitude mode label
            lagrange_interpolated: Wrap in a Lagrange cache
            trackable: Whether gimbals may track it

        Returns:
            The satellite, or its cache wrapper
        """
        satellite = SGP4Satellite(line1, line2, orientation, name)
        if lagrange_interpolated:
            satellite = LagrangeInterpolatedObject(satellite)
        return self.add_object(satellite, trackable)

    def add_two_body_satellite(self, name: str, r0, v0, t0: JulianDate, orientation=None,
                               lagrange_interpolated: bool = False,
                               trackable: bool = True) -> SimObject:
        """
        Add a satellite on a Keplerian orbit.

        Args:
            name: Satellite name
            r0: Epoch position in ECI [m]
            v0: Epoch velocity in ECI [m/s]
            t0: Epoch
            orientation: Attitude mode label
            lagrange_interpolated: Wrap in a Lagrange cache
            trackable: Whether gimbals may track it

        Returns:
            The satellite, or its cache wrapper
        """
        satellite = TwoBodySatellite(r0, v0, t0, orientation, name)
        if lagrange_interpolated:
            satellite = LagrangeInterpolatedObject(satellite)
        return self.add_object(satellite, trackable)

    def add_ground_electro_optical_observatory(
            self, name: str, latitude: float, longitude: float, altitude: float,
            gimbal_type: str, height: int, width: int, y_fov: float, x_fov: float,
            field_of_regard: Iterable[Union[FieldOfRegard, Mapping]] = ()) -> Observatory:
        """
        Add a ground observatory: site, gimbal and electro-optical sensor.

        The gimbal and sensor are named ``"<name> Gimbal"`` and
        ``"<name> Sensor"``; the site is indexed under ``name``.

        Args:
            name: Observatory name
            latitude: Geodetic latitude [deg]
            longitude: Longitude [deg]
            altitude: Altitude [m]
            gimbal_type: Gimbal class name, e.g. ``"AzElGimbal"``
            height: Sensor rows [pixels]
            width: Sensor columns [pixels]
            y_fov: Vertical field of view [deg]
            x_fov: Horizontal field of view [deg]
            field_of_regard: Reachable regions

        Returns:
            The observatory

        Raises:
            ValueError: If the gimbal type is unknown
        """
        gimbal_cls = GIMBAL_TYPES.get(gimbal_type or 'AzElGimbal')
        if gimbal_cls is None:
            raise ValueError(f"Unknown gimbal type: {gimbal_type}")

        site = EarthGroundStation(latitude, longitude, altitude, name)
        site.attach(self._earth)

        gimbal = gimbal_cls(f"{name} Gimbal")
        gimbal.attach(site)
        self.add_object(gimbal, False)

        sensor = ElectroOpticalSensor(height, width, y_fov, x_fov, field_of_regard,
                                      f"{name} Sensor")
        sensor.attach(gimbal)
        self.add_object(sensor, False)

        self._objects[name] = site
        self._gimbals.append(gimbal)
        self._sensors.append(sensor)

        observatory = Observatory(site, gimbal, sensor)
        self._observatories.append(observatory)
        return observatory

    def schedule_event(self, event: Union[Event, Mapping]) -> str:
        """Queue an event; returns its id."""
        return self._events.add(event)

    def add_update_callback(self, callback: Callable):
        """Add callback called as ``callback(universe, time)`` after each update."""
        self.update_callbacks.append(callback)

    def update(self, time: JulianDate, force_update: bool = False):
        """
        Advance every object to ``time``.

        Order: due events, Earth, Sun, trackables, non-trackables, then each
        observatory's site, gimbal and sensor (always forced). Update
        callbacks run last, once every object is at ``time``.

        Args:
            time: Simulation time
            force_update: Recompute objects already at ``time``
        """
        self._events.process(time, self)

        self._earth.update(time, self, force_update)
        self._sun.update(time, self, force_update)

        for obj in list(self._trackables):
            obj.update(time, self, force_update)

        for obj in list(self._nontrackables):
            obj.update(time, self, force_update)

        for observatory in list(self._observatories):
            observatory.site.update(time, self, True)
            observatory.gimbal.update(time, self, True)
            observatory.sensor.update(time, self, True)

        for callback in self.update_callbacks:
            callback(self, time)
