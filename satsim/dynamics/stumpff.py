"""
Stumpff Functions
=================

Series helpers for universal-variable Kepler solvers.
"""

import math


def findc2c3(znew: float, small: float = 1e-6):
    """
    Stumpff functions c2 and c3 for the universal variable z.

    Closed forms are used away from zero; near zero the power series
    avoids cancellation.

    Args:
        znew: Universal variable z = x²·α
        small: Switch-over threshold for the series

    Returns:
        Tuple of (c2, c3)
    """
    if znew > small:
        sqrtz = math.sqrt(znew)
        c2new = (1.0 - math.cos(sqrtz)) / znew
        c3new = (sqrtz - math.sin(sqrtz)) / sqrtz**3
    elif znew < -small:
        sqrtz = math.sqrt(-znew)
        c2new = (1.0 - math.cosh(sqrtz)) / znew
        c3new = (math.sinh(sqrtz) - sqrtz) / sqrtz**3
    else:
        c2new = 0.5 - znew / 24.0 + znew**2 / 720.0 - znew**3 / 40320.0
        c3new = 1.0 / 6.0 - znew / 120.0 + znew**2 / 5040.0 - znew**3 / 362880.0

    return c2new, c3new


def _stumpff_series(psi: float, offset: int) -> float:
    """Sum (-psi)^k / (2k + offset)! until the terms stop contributing."""
    res = 1.0 / math.factorial(offset)
    k = 1
    delta = -psi / math.factorial(2 + offset)
    while res + delta != res:
        res += delta
        k += 1
        delta = (-psi)**k / math.factorial(2 * k + offset)
    return res


def stumpff_c2(psi: float) -> float:
    """Stumpff function c2(ψ)."""
    eps = 1.0
    if psi > eps:
        return (1 - math.cos(math.sqrt(psi))) / psi
    if psi < -eps:
        return (math.cosh(math.sqrt(-psi)) - 1) / (-psi)
    return _stumpff_series(psi, 2)


def stumpff_c3(psi: float) -> float:
    """Stumpff function c3(ψ)."""
    eps = 1.0
    if psi > eps:
        return (math.sqrt(psi) - math.sin(math.sqrt(psi))) / (psi * math.sqrt(psi))
    if psi < -eps:
        return (math.sinh(math.sqrt(-psi)) - math.sqrt(-psi)) / (-psi * math.sqrt(-psi))
    return _stumpff_series(psi, 3)


def hyp2f1b(x: float) -> float:
    """
    Hypergeometric function 2F1(3, 1, 5/2, x) by direct summation.

    Returns:
        Series value, or infinity for x >= 1
    """
    if x >= 1.0:
        return math.inf

    res = 1.0
    term = 1.0
    ii = 0
    while True:
        term = term * (3 + ii) * (1 + ii) / (5 / 2 + ii) * x / (ii + 1)
        res_old = res
        res += term
        if res_old == res:
            return res
        ii += 1
