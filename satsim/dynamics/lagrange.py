"""
Lagrange Interpolation
======================

Polynomial interpolation of tabulated positions and the sliding sample
window used to cache expensive propagators.
"""

import logging
from typing import Callable, Optional

import numpy as np

from ..core.config import LAGRANGE_NUM_POINTS, DEFAULT_LAGRANGE_INTERVAL
from ..core.julian_date import JulianDate

logger = logging.getLogger(__name__)


def _window_samples(times, positions, t: float, degree: Optional[int]):
    """Samples used for a polynomial of ``degree`` around ``t``."""
    times = np.asarray(times, dtype=float)
    points = np.asarray(positions, dtype=float).reshape(-1, 3)
    n = len(times)

    if degree is not None and degree + 1 < n:
        count = degree + 1
        index = int(np.searchsorted(times, t))
        start = min(max(index - count // 2, 0), n - count)
        times = times[start:start + count]
        points = points[start:start + count]

    return times, points


def lagrange_fast(times, positions, t: float, degree: Optional[int] = None) -> np.ndarray:
    """
    Interpolate a 3-vector from tabulated samples.

    Args:
        times: Sample times [s], strictly increasing
        positions: Flattened positions (x, y, z interleaved)
        t: Evaluation time [s], same origin as ``times``
        degree: Polynomial degree; None uses every sample. A lower degree
            uses the ``degree + 1`` samples around ``t``.

    Returns:
        Interpolated position
    """
    times, points = _window_samples(times, positions, t, degree)
    n = len(times)

    result = np.zeros(3)
    for j in range(n):
        weight = 1.0
        for m in range(n):
            if m != j:
                weight *= (t - times[m]) / (times[j] - times[m])
        result += weight * points[j]

    return result


def lagrange_fast_derivative(times, positions, t: float,
                             degree: Optional[int] = None) -> np.ndarray:
    """
    Time derivative of the interpolating polynomial of ``lagrange_fast``.

    Uses the product form of each basis derivative, which stays finite
    on the sample times.

    Args:
        times: Sample times [s], strictly increasing
        positions: Flattened positions (x, y, z interleaved)
        t: Evaluation time [s], same origin as ``times``
        degree: Polynomial degree, as for ``lagrange_fast``

    Returns:
        Interpolated rate [units/s]
    """
    times, points = _window_samples(times, positions, t, degree)
    n = len(times)

    result = np.zeros(3)
    for j in range(n):
        rate = 0.0
        for k in range(n):
            if k == j:
                continue
            term = 1.0 / (times[j] - times[k])
            for m in range(n):
                if m != j and m != k:
                    term *= (t - times[m]) / (times[j] - times[m])
            rate += term
        result += rate * points[j]

    return result


class LagrangeWindow:
    """
    Sliding window of samples around the current evaluation time.

    Features:
    - Fixed number of equally spaced samples
    - Window re-centered only when the requested time leaves it
    - Per-instance buffers
    """

    def __init__(self, interval: float = DEFAULT_LAGRANGE_INTERVAL,
                 num_points: int = LAGRANGE_NUM_POINTS):
        """
        Initialize window.

        Args:
            interval: Sample spacing [s]
            num_points: Number of samples held
        """
        self.interval = interval
        self.num_points = num_points
        self.times = np.zeros(0)
        self.positions = np.zeros(0)
        self.epoch: Optional[JulianDate] = None

    def initialize(self, time: JulianDate, sample: Callable[[JulianDate], np.ndarray]):
        """
        Re-center the window on ``time`` and resample.

        Args:
            time: Window center
            sample: Callback returning the position at a given time
        """
        n = self.num_points
        times = np.zeros(n)
        positions = np.zeros(3 * n)

        first = time.add_seconds(-(n - 1) / 2 * self.interval)
        for i in range(n):
            t = first.add_seconds(i * self.interval)
            positions[3 * i:3 * i + 3] = sample(t)
            times[i] = i * self.interval

        self.epoch = first
        self.times = times
        self.positions = positions
        logger.debug("Lagrange window re-centered at %s (interval %.3f s)", time, self.interval)

    def contains(self, time: JulianDate) -> bool:
        """Check whether ``time`` lies within the sampled span."""
        if len(self.times) < self.num_points or self.epoch is None:
            return False
        delta = time.seconds_difference(self.epoch)
        return self.times[0] <= delta <= self.times[-1]

    def evaluate(self, time: JulianDate, sample: Callable[[JulianDate], np.ndarray],
                 degree: Optional[int] = None) -> np.ndarray:
        """
        Interpolated position at ``time``, resampling if needed.

        Args:
            time: Evaluation time
            sample: Callback returning the position at a given time
            degree: Polynomial degree, None for ``num_points - 1``

        Returns:
            Interpolated position
        """
        if not self.contains(time):
            self.initialize(time, sample)

        delta = time.seconds_difference(self.epoch)
        return lagrange_fast(self.times, self.positions, delta, degree)

    def evaluate_rate(self, time: JulianDate, sample: Callable[[JulianDate], np.ndarray],
                      degree: Optional[int] = None) -> np.ndarray:
        """
        Rate of the interpolated position at ``time``, resampling if needed.

        Args:
            time: Evaluation time
            sample: Callback returning the position at a given time
            degree: Polynomial degree, None for ``num_points - 1``

        Returns:
            Interpolated rate [units/s]
        """
        if not self.contains(time):
            self.initialize(time, sample)

        delta = time.seconds_difference(self.epoch)
        return lagrange_fast_derivative(self.times, self.positions, delta, degree)
