"""
Julian Date
===========

High-precision simulation instant.

An instant is kept as an integer Julian day number plus seconds of day
so that differences stay stable across multi-year spans.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

import numpy as np

from .config import SECONDS_PER_DAY, TAI_UTC_OFFSET, TT_TAI_OFFSET, J2000_JD


@dataclass(frozen=True, order=True)
class JulianDate:
    """
    Julian date split into whole days and seconds.

    The day number follows the astronomical convention where days begin
    at noon, so ``julian_date == day_number + seconds_of_day / 86400``.

    Provides:
    - datetime and ISO-8601 conversions
    - Exact second differencing
    - Sidereal time (GMST)
    """
    day_number: int
    seconds_of_day: float = 0.0

    def __post_init__(self):
        days, seconds = self.day_number, float(self.seconds_of_day)
        if seconds < 0.0 or seconds >= SECONDS_PER_DAY:
            whole = math.floor(seconds / SECONDS_PER_DAY)
            days += int(whole)
            seconds -= whole * SECONDS_PER_DAY
            # guard against rounding back onto the upper bound
            if seconds >= SECONDS_PER_DAY:
                days += 1
                seconds -= SECONDS_PER_DAY
        object.__setattr__(self, 'day_number', int(days))
        object.__setattr__(self, 'seconds_of_day', seconds)

    @classmethod
    def from_julian_date(cls, julian_date: float, fraction: float = 0.0) -> 'JulianDate':
        """
        Create from a (possibly split) floating point Julian date.

        Args:
            julian_date: Julian date, or its whole part
            fraction: Optional fractional part

        Returns:
            JulianDate
        """
        whole = math.floor(julian_date)
        seconds = ((julian_date - whole) + fraction) * SECONDS_PER_DAY
        return cls(int(whole), seconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'JulianDate':
        """
        Convert a datetime to a Julian date.

        Naive datetimes are taken as UTC.

        Args:
            dt: datetime object

        Returns:
            JulianDate
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc).replace(tzinfo=None)

        year = dt.year
        month = dt.month

        if month <= 2:
            year -= 1
            month += 12

        A = int(year / 100)
        B = 2 - A + int(A / 4)

        # Julian day number at noon of the civil date
        day_number = int(365.25 * (year + 4716)) + \
            int(30.6001 * (month + 1)) + \
            dt.day + B - 1524

        seconds = (dt.hour - 12) * 3600.0 + dt.minute * 60.0 + \
            dt.second + dt.microsecond / 1e6

        return cls(day_number, seconds)

    @classmethod
    def from_iso8601(cls, text: str) -> 'JulianDate':
        """
        Parse an ISO-8601 timestamp such as ``2024-01-01T00:00:00Z``.

        Raises:
            ValueError: If the text is not a valid timestamp
        """
        text = text.strip()
        if text.endswith('Z') or text.endswith('z'):
            text = text[:-1] + '+00:00'
        return cls.from_datetime(datetime.fromisoformat(text))

    @classmethod
    def coerce(cls, value: Union['JulianDate', datetime, str]) -> 'JulianDate':
        """
        Convert a JulianDate, datetime or ISO-8601 string to a JulianDate.

        Raises:
            ValueError: If the value cannot be interpreted as an instant
        """
        if isinstance(value, JulianDate):
            return value
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        if isinstance(value, str):
            return cls.from_iso8601(value)
        raise ValueError(f"Cannot interpret {value!r} as a time")

    def to_datetime(self) -> datetime:
        """
        Convert to a naive UTC datetime.

        Returns:
            datetime object
        """
        # shift to midnight-based days
        seconds = self.seconds_of_day + SECONDS_PER_DAY / 2
        Z = self.day_number
        if seconds >= SECONDS_PER_DAY:
            Z += 1
            seconds -= SECONDS_PER_DAY

        if Z < 2299161:
            A = Z
        else:
            alpha = int((Z - 1867216.25) / 36524.25)
            A = Z + 1 + alpha - int(alpha / 4)

        B = A + 1524
        C = int((B - 122.1) / 365.25)
        D = int(365.25 * C)
        E = int((B - D) / 30.6001)

        day = B - D - int(30.6001 * E)

        if E < 14:
            month = E - 1
        else:
            month = E - 13

        if month > 2:
            year = C - 4716
        else:
            year = C - 4715

        return datetime(year, month, day) + timedelta(seconds=seconds)

    @property
    def julian_date(self) -> float:
        """Julian date as float (loses sub-millisecond precision)."""
        return self.day_number + self.seconds_of_day / SECONDS_PER_DAY

    @property
    def total_days(self) -> float:
        """Alias of :attr:`julian_date`."""
        return self.julian_date

    @property
    def modified_julian_date(self) -> float:
        """Get Modified Julian Date (MJD = JD - 2400000.5)."""
        return (self.day_number - 2400000.5) + self.seconds_of_day / SECONDS_PER_DAY

    def add_seconds(self, seconds: float) -> 'JulianDate':
        """Return a new instant offset by ``seconds``."""
        return JulianDate(self.day_number, self.seconds_of_day + seconds)

    def seconds_difference(self, other: 'JulianDate') -> float:
        """
        Seconds elapsed from ``other`` to this instant (``self - other``).
        """
        return (self.day_number - other.day_number) * SECONDS_PER_DAY + \
            (self.seconds_of_day - other.seconds_of_day)

    def to_tt_split(self) -> tuple:
        """
        Terrestrial Time as a two-part Julian date.

        Returns:
            Tuple of (whole day, fraction of day)
        """
        seconds = self.seconds_of_day + TAI_UTC_OFFSET + TT_TAI_OFFSET
        return float(self.day_number), seconds / SECONDS_PER_DAY

    def to_ut1_split(self, dut1_seconds: float = 0.0) -> tuple:
        """
        UT1 as a two-part Julian date.

        Returns:
            Tuple of (whole day, fraction of day)
        """
        return float(self.day_number), (self.seconds_of_day + dut1_seconds) / SECONDS_PER_DAY

    def gmst(self) -> float:
        """
        Calculate Greenwich Mean Sidereal Time (IAU-82).

        Returns:
            GMST in radians
        """
        # Julian centuries since J2000
        t = ((self.day_number - J2000_JD) + self.seconds_of_day / SECONDS_PER_DAY) / 36525.0

        gmst_sec = 67310.54841 + \
            (876600.0 * 3600.0 + 8640184.812866) * t + \
            0.093104 * t**2 - \
            6.2e-6 * t**3

        # Convert to radians
        gmst_rad = np.radians(gmst_sec / 240.0) % (2 * np.pi)

        return float(gmst_rad)

    def __str__(self) -> str:
        return self.to_datetime().isoformat() + 'Z'
