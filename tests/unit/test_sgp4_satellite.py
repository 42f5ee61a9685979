import logging

import numpy as np

from satsim.core.julian_date import JulianDate
from satsim.core.simobject import ReferenceFrame
from satsim.models.sgp4_satellite import SGP4Satellite

LINE1 = '1 00005U 58002B   00179.78495062  .00000023  00000-0  28098-4 0  4753'
LINE2 = '2 00005  34.2682 348.7242 1859667 331.7664  19.3264 10.82419157413667'


def test_period_and_eccentricity_from_elements():
    sat = SGP4Satellite(LINE1, LINE2, name='vanguard')
    # Period follows the un-Kozai mean motion, close to the TLE's revs/day
    assert sat.period == 2 * np.pi / sat.satrec.no_unkozai * 60.0
    assert np.isclose(sat.period, 86400.0 / 10.82419157, rtol=1e-3)
    assert np.isclose(sat.eccentricity, 0.1859667)
    assert sat.reference_frame is ReferenceFrame.INERTIAL


def test_epoch():
    sat = SGP4Satellite(LINE1, LINE2)
    # Day 179.78495062 of 2000
    assert np.isclose(sat.epoch.julian_date, 2451544.5 + 178.78495062, atol=1e-8)


def test_state_at_epoch_in_meters():
    sat = SGP4Satellite(LINE1, LINE2)
    sat.update(sat.epoch)

    assert np.allclose(sat.position, [7022465.29266, -1400082.96755, 39.95155], atol=1e-2)
    assert np.allclose(sat.velocity, [1893.841015, 6405.893759, 4534.807250], atol=1e-4)


def test_failed_propagation_zeroes_state(caplog):
    class FailingSatrec:
        def sgp4(self, jd, fr):
            return 6, (np.nan, np.nan, np.nan), (np.nan, np.nan, np.nan)

    sat = SGP4Satellite(LINE1, LINE2, name='decayed')
    sat.update(sat.epoch)
    sat._satrec = FailingSatrec()

    with caplog.at_level(logging.WARNING, logger="satsim.models.sgp4_satellite"):
        sat.update(sat.epoch.add_seconds(60.0))

    assert np.array_equal(sat.position, np.zeros(3))
    assert np.array_equal(sat.velocity, np.zeros(3))
    assert "decayed" in caplog.text


def test_time_moves_satellite():
    sat = SGP4Satellite(LINE1, LINE2)
    t = JulianDate.from_julian_date(2451723.5)
    sat.update(t)
    first = sat.position.copy()
    sat.update(t.add_seconds(60.0))
    assert 0 < np.linalg.norm(sat.position - first) < 60.0 * 10000.0
