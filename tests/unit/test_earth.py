import numpy as np

from satsim.core.config import KernelConfig, OMEGA_EARTH, WGS84_A
from satsim.core.julian_date import JulianDate
from satsim.core.rotations import angle_between
from satsim.environment.earth import Earth, teme_to_pseudo_fixed
from satsim.environment.ground_station import EarthGroundStation

T0 = JulianDate.from_iso8601("2024-01-01T00:00:00Z")


def _assert_rotation(m):
    assert np.allclose(m @ m.T, np.identity(3), atol=1e-12)
    assert np.isclose(np.linalg.det(m), 1.0)


def test_earth_is_at_origin():
    earth = Earth()
    earth.update(T0)
    assert np.allclose(earth.world_position, np.zeros(3))
    assert np.allclose(earth.world_velocity, np.zeros(3))


def test_rotation_is_orthonormal():
    earth = Earth()
    earth.update(T0)
    _assert_rotation(earth.inertial_to_fixed)
    assert np.allclose(earth.fixed_to_inertial, earth.inertial_to_fixed.T)
    assert np.allclose(earth.transform[:3, :3], earth.fixed_to_inertial)


def test_precession_nutation_close_to_sidereal_rotation():
    earth = Earth()
    earth.update(T0)
    gmst_only = teme_to_pseudo_fixed(T0)

    x = np.array([1.0, 0.0, 0.0])
    # Precession since J2000 is well under a degree
    assert angle_between(earth.inertial_to_fixed @ x, gmst_only @ x) < np.radians(1.0)


def test_falls_back_outside_data_span():
    t = JulianDate.from_iso8601("2080-06-01T00:00:00Z")
    earth = Earth()
    earth.update(t)
    assert np.allclose(earth.inertial_to_fixed, teme_to_pseudo_fixed(t))


def test_falls_back_when_disabled():
    earth = Earth(KernelConfig(use_iau_precession_nutation=False))
    earth.update(T0)
    assert np.allclose(earth.inertial_to_fixed, teme_to_pseudo_fixed(T0))


def test_earth_rotates_about_pole():
    earth = Earth(KernelConfig(use_iau_precession_nutation=False))
    earth.update(T0)
    z = earth.fixed_to_inertial @ [0.0, 0.0, 1.0]
    assert np.allclose(z, [0.0, 0.0, 1.0])


def test_equator_station_velocity():
    earth = Earth()
    site = EarthGroundStation(0.0, 0.0, 0.0, 'equator')
    site.attach(earth)
    site.update(T0)

    v = site.world_velocity
    assert np.isclose(np.linalg.norm(v), OMEGA_EARTH * WGS84_A, rtol=1e-9)
    assert np.isclose(np.linalg.norm(v), 465.1, atol=0.1)
    assert abs(np.dot(v, site.world_position)) / np.linalg.norm(site.world_position) < 1e-6
