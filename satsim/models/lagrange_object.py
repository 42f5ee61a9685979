"""
Lagrange Interpolated Object
============================

Propagator cache that interpolates between widely spaced samples.
"""

import math
from typing import Optional

import numpy as np

from ..core.config import (
    DEFAULT_LAGRANGE_INTERVAL,
    LAGRANGE_NUM_POINTS,
    LAGRANGE_SAMPLES_PER_PERIOD,
)
from ..core.julian_date import JulianDate
from ..core.simobject import SimObject
from ..dynamics.lagrange import LagrangeWindow


class LagrangeInterpolatedObject(SimObject):
    """
    Wraps another SimObject and interpolates its position and velocity.

    The wrapped object is evaluated only when the requested time leaves
    the current sample window, which bounds the per-frame propagation cost.
    """

    def __init__(self, inner: SimObject, interval: Optional[float] = None,
                 num_points: int = LAGRANGE_NUM_POINTS):
        """
        Initialize cache.

        Args:
            inner: Object to interpolate
            interval: Sample spacing [s]; defaults to a sixtieth of the
                inner period, or 100 s without a finite period
            num_points: Samples per window
        """
        super().__init__(inner.name, inner.reference_frame)
        self._object = inner

        if interval is None:
            period = inner.period
            if period is not None and math.isfinite(period):
                interval = period / LAGRANGE_SAMPLES_PER_PERIOD
            else:
                interval = DEFAULT_LAGRANGE_INTERVAL

        self._window = LagrangeWindow(interval, num_points)

    @property
    def inner(self) -> SimObject:
        return self._object

    @property
    def window(self) -> LagrangeWindow:
        return self._window

    @property
    def interval(self) -> float:
        return self._window.interval

    @property
    def period(self) -> Optional[float]:
        return self._object.period

    @property
    def eccentricity(self) -> Optional[float]:
        return self._object.eccentricity

    def _update(self, time: JulianDate, universe):
        def sample(t: JulianDate) -> np.ndarray:
            self._object.update(t, universe)
            return self._object.position

        self._position = self._window.evaluate(time, sample)
        # Velocity is the rate of the same polynomial, no extra samples
        self._velocity = self._window.evaluate_rate(time, sample)
