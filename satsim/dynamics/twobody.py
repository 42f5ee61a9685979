"""
Two-Body Dynamics
=================

Universal-variable Kepler propagation and classical orbital elements.

Implements Vallado's KEPLER algorithm (Fundamentals of Astrodynamics and
Applications, Algorithm 8) for elliptic, parabolic and hyperbolic orbits.
"""

import logging
import math
from typing import List, NamedTuple

import numpy as np

from .stumpff import findc2c3

logger = logging.getLogger(__name__)


class StateVector(NamedTuple):
    """Position [m] and velocity [m/s]."""
    position: np.ndarray
    velocity: np.ndarray


def vallado(k: float, ro, vo, dtseco: float, numiter: int) -> StateVector:
    """
    Propagate a state vector with the universal-variable formulation.

    Solves Kepler's problem for a future geocentric equatorial position
    and velocity. If the iteration does not converge within ``numiter``
    steps a warning is logged and the state from the last iterate is
    returned.

    Args:
        k: Gravitational parameter [m³/s²]
        ro: Initial position [m]
        vo: Initial velocity [m/s]
        dtseco: Time of flight [s]
        numiter: Maximum number of iterations

    Returns:
        StateVector at the new time
    """
    ro = np.asarray(ro, dtype=float)
    vo = np.asarray(vo, dtype=float)

    small = 1e-10
    infinite = 999999.9
    smu = math.sqrt(k)
    dtsec = dtseco

    if abs(dtseco) <= small:
        return StateVector(ro.copy(), vo.copy())

    magro = np.linalg.norm(ro)
    magvo = np.linalg.norm(vo)
    rdotv = np.dot(ro, vo)

    # Specific mechanical energy and reciprocal semi-major axis
    sme = magvo**2 * 0.5 - k / magro
    alpha = -sme * 2.0 / k

    if abs(sme) > small:
        a = -k / (2.0 * sme)
    else:
        a = infinite

    if abs(alpha) < small:
        alpha = 0.0

    # Initial guess for x
    if alpha >= small:
        # Ellipse
        period = 2.0 * math.pi * math.sqrt(abs(a)**3 / k)
        if abs(dtseco) > abs(period):
            dtsec = math.fmod(dtseco, period)
        xold = smu * dtsec * alpha
    elif abs(alpha) < small:
        # Parabola (Barker's method)
        h = np.cross(ro, vo)
        p = np.dot(h, h) / k
        s = 0.5 * (math.pi / 2 - math.atan(3.0 * math.sqrt(k / p**3) * dtsec))
        w = math.atan(math.tan(s)**(1.0 / 3.0))
        xold = math.sqrt(p) * (2.0 / math.tan(2.0 * w))
        alpha = 0.0
    else:
        # Hyperbola
        sign = math.copysign(1.0, dtsec)
        temp = -2.0 * k * dtsec / \
            (a * (rdotv + sign * math.sqrt(-k * a) * (1.0 - magro * alpha)))
        xold = sign * math.sqrt(-a) * math.log(temp)

    ktr = 0
    dtnew = -10.0
    xnew = xold
    znew = 0.0
    c2new, c3new = 0.5, 1.0 / 6.0

    while abs(dtnew / smu - dtsec) >= small and ktr < numiter:
        xoldsqrd = xold * xold
        znew = xoldsqrd * alpha
        c2new, c3new = findc2c3(znew)

        rval = xoldsqrd * c2new + rdotv / smu * xold * (1.0 - znew * c3new) + \
            magro * (1.0 - znew * c2new)
        dtnew = xoldsqrd * xold * c3new + rdotv / smu * xoldsqrd * c2new + \
            magro * xold * (1.0 - znew * c3new)

        # Newton correction
        xnew = xold + (dtsec * smu - dtnew) / rval

        if xnew < 0.0 and dtsec > 0.0:
            xnew = xold * 0.5

        ktr += 1
        xold = xnew

    if ktr >= numiter:
        logger.warning("Convergence not reached in %d iterations", numiter)

    # Lagrange coefficients
    xnewsqrd = xnew * xnew
    f = 1.0 - xnewsqrd * c2new / magro
    g = dtsec - xnewsqrd * xnew * c3new / smu

    r = f * ro + g * vo
    magr = np.linalg.norm(r)

    gdot = 1.0 - xnewsqrd * c2new / magr
    fdot = (smu * xnew / (magro * magr)) * (znew * c3new - 1.0)

    v = fdot * ro + gdot * vo

    return StateVector(r, v)


def eccentricity_vector(k: float, r, v) -> np.ndarray:
    """Eccentricity vector e = ((v² - k/r)·r - (r·v)·v) / k."""
    r = np.asarray(r, dtype=float)
    v = np.asarray(v, dtype=float)
    return (r * (np.dot(v, v) - k / np.linalg.norm(r)) - v * np.dot(r, v)) / k


def rv2ecc(k: float, r, v) -> float:
    """
    Eccentricity of an orbit from a state vector.

    Args:
        k: Gravitational parameter [m³/s²]
        r: Position [m]
        v: Velocity [m/s]

    Returns:
        Eccentricity
    """
    return float(np.linalg.norm(eccentricity_vector(k, r, v)))


def rv2period(k: float, r, v) -> float:
    """
    Orbital period from a state vector.

    Args:
        k: Gravitational parameter [m³/s²]
        r: Position [m]
        v: Velocity [m/s]

    Returns:
        Period [s], infinite for parabolic and hyperbolic orbits
    """
    h = np.cross(r, v)
    p = np.dot(h, h) / k
    ecc = rv2ecc(k, r, v)

    if ecc >= 1:
        return math.inf

    a = p / (1 - ecc * ecc)
    mm = math.sqrt(k / abs(a * a * a))

    return 2 * math.pi / mm


def E_to_nu(E: float, ecc: float) -> float:
    """True anomaly from eccentric anomaly."""
    return 2 * math.atan(math.sqrt((1 + ecc) / (1 - ecc)) * math.tan(E / 2))


def F_to_nu(F: float, ecc: float) -> float:
    """True anomaly from hyperbolic anomaly."""
    return 2 * math.atan(math.sqrt((ecc + 1) / (ecc - 1)) * math.tanh(F / 2))


def rv2coe(k: float, r, v, tol: float = 1e-12) -> List[float]:
    """
    Classical orbital elements from a state vector.

    For circular and/or equatorial orbits the undefined angles are zero and
    the anomaly is replaced by the argument of latitude, the longitude of
    periapsis or the true longitude.

    Args:
        k: Gravitational parameter [m³/s²]
        r: Position [m]
        v: Velocity [m/s]
        tol: Tolerance for the circular and equatorial tests

    Returns:
        [p, ecc, inc, raan, argp, nu] with angles in radians, nu in (-π, π]
    """
    r = np.asarray(r, dtype=float)
    v = np.asarray(v, dtype=float)
    two_pi = 2 * math.pi

    h = np.cross(r, v)
    n = np.cross(np.array([0.0, 0.0, 1.0]), h)
    e = eccentricity_vector(k, r, v)
    ecc = float(np.linalg.norm(e))
    p = float(np.dot(h, h) / k)
    magh = np.linalg.norm(h)
    inc = math.acos(h[2] / magh)

    circular = ecc < tol
    equatorial = abs(inc) < tol

    if equatorial and not circular:
        raan = 0.0
        argp = math.fmod(math.atan2(e[1], e[0]), two_pi)  # longitude of periapsis
        nu = math.atan2(np.dot(h, np.cross(e, r)) / magh, np.dot(r, e))
    elif not equatorial and circular:
        raan = math.fmod(math.atan2(n[1], n[0]), two_pi)
        argp = 0.0
        nu = math.atan2(np.dot(r, np.cross(h, n)) / magh, np.dot(r, n))  # argument of latitude
    elif equatorial and circular:
        raan = 0.0
        argp = 0.0
        nu = math.fmod(math.atan2(r[1], r[0]), two_pi)  # true longitude
    else:
        a = p / (1 - ecc**2)
        ka = k * a
        if a > 0:
            e_se = np.dot(r, v) / math.sqrt(ka)
            e_ce = np.linalg.norm(r) * np.dot(v, v) / k - 1
            nu = E_to_nu(math.atan2(e_se, e_ce), ecc)
        else:
            e_sh = np.dot(r, v) / math.sqrt(-ka)
            e_ch = np.linalg.norm(r) * np.linalg.norm(v)**2 / k - 1
            nu = F_to_nu(math.log((e_ch + e_sh) / (e_ch - e_sh)) / 2, ecc)

        raan = math.fmod(math.atan2(n[1], n[0]), two_pi)
        px = np.dot(r, n)
        py = np.dot(r, np.cross(h, n)) / magh
        argp = math.fmod(math.atan2(py, px) - nu, two_pi)
        if argp < 0:
            argp += two_pi

    nu = math.fmod(nu + math.pi, two_pi) - math.pi
    if nu <= -math.pi:
        nu += two_pi

    return [p, ecc, inc, float(raan), float(argp), float(nu)]
