import logging

import numpy as np
import pytest

from satsim import Universe
from satsim.actuators.gimbal import TrackMode
from satsim.core.julian_date import JulianDate
from satsim.dynamics.pointing import sez_to_az_el
from satsim.models.lagrange_object import LagrangeInterpolatedObject
from satsim.models.sgp4_satellite import SGP4Satellite
from satsim.models.twobody_satellite import TwoBodySatellite

T0 = JulianDate.from_iso8601("2024-01-01T00:00:00Z")
R1 = np.array([-605792.21660, -5870229.51108, 3493053.19896])
V1 = np.array([-1568.25429, -3702.34891, -6479.48395])

LINE1 = '1 00005U 58002B   00179.78495062  .00000023  00000-0  28098-4 0  4753'
LINE2 = '2 00005  34.2682 348.7242 1859667 331.7664  19.3264 10.82419157413667'

FOR = [{'clock': [0, 360], 'elevation': [0, 90]}]


def _universe():
    universe = Universe()
    universe.add_two_body_satellite('SAT', R1, V1, T0)
    universe.add_ground_electro_optical_observatory(
        'OBS', 20.0, -100.0, 0.0, 'AzElGimbal', 512, 512, 1.0, 1.0, FOR)
    return universe


def test_observatory_components():
    universe = _universe()
    observatory = universe.observatories[0]

    assert observatory.name == 'OBS'
    assert universe.get_object('OBS') is observatory.site
    assert universe.get_object('OBS Gimbal') is observatory.gimbal
    assert universe.get_object('OBS Sensor') is observatory.sensor
    assert observatory.site.parent is universe.earth
    assert observatory.gimbal.parent is observatory.site
    assert observatory.sensor.parent is observatory.gimbal
    assert observatory.gimbal in universe.nontrackables
    assert observatory.sensor in universe.nontrackables
    assert universe.gimbals == [observatory.gimbal]
    assert universe.sensors == [observatory.sensor]


def test_unknown_gimbal_type():
    with pytest.raises(ValueError):
        Universe().add_ground_electro_optical_observatory(
            'OBS', 0.0, 0.0, 0.0, 'HexapodGimbal', 512, 512, 1.0, 1.0, FOR)


def test_track_event_fires_once():
    universe = _universe()
    calls = []
    handler = universe.events.get_handler('trackObject')

    def counting(u, e):
        calls.append(e.id)
        handler(u, e)

    universe.events.register_handler('trackObject', counting)
    universe.schedule_event({
        'time': T0.add_seconds(5),
        'type': 'trackObject',
        'data': {'observer': 'OBS', 'target': 'SAT'},
    })
    gimbal = universe.observatories[0].gimbal

    universe.update(T0)
    assert len(universe.events) == 1
    assert gimbal.track_mode is TrackMode.FIXED
    assert gimbal.track_object is None

    universe.update(T0.add_seconds(10))
    assert len(universe.events) == 0
    assert gimbal.track_mode is TrackMode.RATE
    assert gimbal.track_object is universe.get_object('SAT')

    universe.update(T0.add_seconds(20))
    assert len(calls) == 1


def test_gimbal_follows_target_after_update():
    universe = _universe()
    observatory = universe.observatories[0]
    universe.schedule_event({'time': T0, 'type': 'trackObject',
                             'data': {'observer': 'OBS', 'target': 'SAT'}})

    t = T0.add_seconds(60)
    universe.update(T0)
    universe.update(t)

    sat = universe.get_object('SAT')
    local = observatory.site.transform_point_from_world(sat.world_position)
    az, el, r = sez_to_az_el(local)
    assert np.isclose(observatory.gimbal.az, az)
    assert np.isclose(observatory.gimbal.el, el)
    assert np.isclose(observatory.gimbal.range, r)


def test_track_event_without_target_stops_tracking():
    universe = _universe()
    gimbal = universe.observatories[0].gimbal
    gimbal.track_mode = 'rate'
    gimbal.track_object = universe.get_object('SAT')

    universe.schedule_event({'time': T0, 'type': 'trackObject', 'data': {'observer': 'OBS'}})
    universe.update(T0)

    assert gimbal.track_object is None
    assert gimbal.track_mode is TrackMode.RATE


def test_track_event_for_unknown_observer_is_ignored():
    universe = _universe()
    universe.schedule_event({'time': T0, 'type': 'trackObject',
                             'data': {'observer': 'NOPE', 'target': 'SAT'}})
    universe.update(T0)

    gimbal = universe.observatories[0].gimbal
    assert gimbal.track_object is None
    assert len(universe.events) == 0


def test_update_order():
    universe = _universe()
    order = []
    sat = universe.get_object('SAT')
    observatory = universe.observatories[0]

    for obj in (universe.earth, universe.sun, sat, observatory.site,
                observatory.gimbal, observatory.sensor):
        obj.update_listeners.append(lambda t, u, name=obj.name: order.append(name))

    universe.update(T0)

    first = [order.index(name) for name in
             ('Earth', 'Sun', 'SAT', 'OBS', 'OBS Gimbal', 'OBS Sensor')]
    assert first == sorted(first)
    assert order[-1] == 'OBS Sensor'


def test_objects_share_update_time():
    universe = _universe()
    t = T0.add_seconds(123.0)
    universe.update(t)

    for obj in list(universe.objects.values()) + [universe.earth, universe.sun]:
        assert obj.time == t


def test_duplicate_name_warns(caplog):
    universe = _universe()
    with caplog.at_level(logging.WARNING, logger="satsim.core.universe"):
        replacement = universe.add_two_body_satellite('SAT', R1, -V1, T0)

    assert "already exists" in caplog.text
    assert universe.get_object('SAT') is replacement
    assert len(universe.trackables) == 2


def test_remove_object():
    universe = Universe()
    site = universe.add_ground_site('site', 10.0, 20.0)
    assert universe.has_object('site')
    assert site in universe.nontrackables

    universe.remove_object('site')
    assert not universe.has_object('site')
    assert site not in universe.nontrackables
    assert site.parent is None
    assert site not in universe.earth.children

    # Unknown names are ignored
    universe.remove_object('site')


def test_satellite_factories():
    universe = Universe()
    cached = universe.add_sgp4_satellite('vanguard', LINE1, LINE2, lagrange_interpolated=True)
    plain = universe.add_sgp4_satellite('plain', LINE1, LINE2)
    kepler = universe.add_two_body_satellite('kepler', R1, V1, T0, lagrange_interpolated=True)

    assert isinstance(cached, LagrangeInterpolatedObject)
    assert isinstance(cached.inner, SGP4Satellite)
    assert isinstance(plain, SGP4Satellite)
    assert isinstance(kepler.inner, TwoBodySatellite)
    assert universe.trackables == [cached, plain, kepler]

    t = JulianDate.from_julian_date(2451723.5)
    universe.update(t)
    assert np.linalg.norm(cached.position - plain.position) < 1.0


def test_update_callbacks_run_after_every_object():
    universe = _universe()
    order = []
    sensor = universe.observatories[0].sensor
    sensor.update_listeners.append(lambda t, u: order.append('sensor'))

    def callback(u, t):
        order.append('callback')
        assert all(obj.time == t for obj in u.objects.values())

    universe.add_update_callback(callback)
    universe.update(T0)
    assert order[-2:] == ['sensor', 'callback']


def test_factories_keep_orientation_label():
    universe = Universe()
    sgp4 = universe.add_sgp4_satellite('vanguard', LINE1, LINE2, orientation='nadir')
    kepler = universe.add_two_body_satellite('kepler', R1, V1, T0, orientation='sun')
    cached = universe.add_two_body_satellite('cached', R1, V1, T0, orientation='nadir',
                                             lagrange_interpolated=True)

    assert sgp4.orientation == 'nadir'
    assert kepler.orientation == 'sun'
    assert cached.inner.orientation == 'nadir'
    assert universe.get_object('vanguard') is sgp4

    universe.update(T0)
    assert np.array_equal(kepler.position, R1)
    assert np.allclose(cached.position, R1, atol=1.0)

    universe.update(sgp4.epoch)
    assert np.linalg.norm(sgp4.position) > 6.0e6


def test_world_transforms_compose_down_the_chain():
    universe = _universe()
    universe.schedule_event({'time': T0, 'type': 'trackObject',
                             'data': {'observer': 'OBS', 'target': 'SAT'}})
    universe.update(T0.add_seconds(30.0))

    observatory = universe.observatories[0]
    for node in (observatory.site, observatory.gimbal, observatory.sensor):
        expected = node.parent.local_to_world_transform @ node.transform
        assert np.array_equal(node.local_to_world_transform, expected)
