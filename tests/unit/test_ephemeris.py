import numpy as np
import pytest

from satsim.core.config import MU_EARTH
from satsim.core.julian_date import JulianDate
from satsim.core.simobject import ReferenceFrame
from satsim.dynamics.twobody import vallado
from satsim.models.ephemeris_object import EphemerisObject

T0 = JulianDate.from_iso8601("2024-01-01T00:00:00Z")
R1 = np.array([-605792.21660, -5870229.51108, 3493053.19896])
V1 = np.array([-1568.25429, -3702.34891, -6479.48395])


def _samples(offsets):
    times, positions, velocities = [], [], []
    for dt in offsets:
        state = vallado(MU_EARTH, R1, V1, dt, 350)
        times.append(T0.add_seconds(dt))
        positions.append(state.position)
        velocities.append(state.velocity)
    return times, positions, velocities


def test_reproduces_samples():
    times, positions, velocities = _samples(np.arange(0, 660, 60.0))
    eph = EphemerisObject(times, positions, velocities, 'eph')

    eph.update(times[4])
    assert np.allclose(eph.position, positions[4])
    assert eph.reference_frame is ReferenceFrame.INERTIAL


def test_interpolates_between_samples():
    times, positions, velocities = _samples(np.arange(0, 660, 60.0))
    eph = EphemerisObject(times, positions, velocities, 'eph')

    t = 275.0
    eph.update(T0.add_seconds(t))
    expected = vallado(MU_EARTH, R1, V1, t, 350).position
    assert np.linalg.norm(eph.position - expected) < 10.0


def test_samples_sorted_by_time():
    times, positions, velocities = _samples([120.0, 0.0, 60.0, 180.0])
    eph = EphemerisObject(times, positions, velocities, 'eph')

    assert eph.epoch == T0
    assert np.allclose(eph.times, [0.0, 60.0, 120.0, 180.0])
    assert np.allclose(eph.positions[:3], R1)
    assert np.isclose(eph.period, 5655.481947582134, rtol=1e-9)


def test_rejects_bad_samples():
    with pytest.raises(ValueError):
        EphemerisObject([], [], [], 'empty')

    times, positions, velocities = _samples([0.0, 60.0])
    with pytest.raises(ValueError):
        EphemerisObject(times, positions[:1], velocities, 'short')
