from datetime import datetime, timezone

import numpy as np
import pytest

from satsim.core.julian_date import JulianDate


def test_j2000_epoch_from_datetime():
    jd = JulianDate.from_datetime(datetime(2000, 1, 1, 12, 0, 0))
    assert jd.day_number == 2451545
    assert jd.seconds_of_day == 0.0
    assert jd.julian_date == 2451545.0


def test_midnight_is_half_day_before_noon():
    jd = JulianDate.from_datetime(datetime(2000, 1, 1, 0, 0, 0))
    assert np.isclose(jd.julian_date, 2451544.5)


def test_iso8601_and_aware_datetime_agree():
    a = JulianDate.from_iso8601("2024-03-01T06:30:00Z")
    b = JulianDate.from_datetime(datetime(2024, 3, 1, 6, 30, tzinfo=timezone.utc))
    assert a == b


def test_seconds_normalized_into_day():
    jd = JulianDate(2451545, -10.0)
    assert jd.day_number == 2451544
    assert np.isclose(jd.seconds_of_day, 86390.0)

    jd = JulianDate(2451545, 86400.0 * 2 + 5.0)
    assert jd.day_number == 2451547
    assert np.isclose(jd.seconds_of_day, 5.0)


def test_add_seconds_and_difference_are_exact_over_years():
    start = JulianDate.from_iso8601("2020-01-01T00:00:00Z")
    later = start.add_seconds(5 * 365.25 * 86400 + 0.125)
    assert later.seconds_difference(start) == 5 * 365.25 * 86400 + 0.125
    assert start.seconds_difference(later) == -(5 * 365.25 * 86400 + 0.125)


def test_datetime_round_trip():
    dt = datetime(2023, 7, 14, 23, 59, 30)
    assert JulianDate.from_datetime(dt).to_datetime() == dt


def test_ordering():
    a = JulianDate.from_iso8601("2024-01-01T00:00:00Z")
    assert a < a.add_seconds(1)
    assert a.add_seconds(0) == a


def test_coerce_rejects_unknown_types():
    with pytest.raises(ValueError):
        JulianDate.coerce(12345)
    with pytest.raises(ValueError):
        JulianDate.coerce("not a time")


def test_gmst_at_j2000():
    # 18h 41m 50.54841s
    gmst = JulianDate(2451545, 0.0).gmst()
    assert np.isclose(np.degrees(gmst), 280.46061837, atol=1e-6)
