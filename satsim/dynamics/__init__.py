"""
Dynamics Module
===============

Orbit propagation, interpolation and pointing geometry.
"""

from .twobody import StateVector, vallado, rv2coe, rv2ecc, rv2period
from .stumpff import findc2c3, stumpff_c2, stumpff_c3, hyp2f1b
from .lagrange import LagrangeWindow, lagrange_fast, lagrange_fast_derivative
from .pointing import sez_to_az_el, space_based_to_az_el, az_el_to_sez

__all__ = [
    'StateVector',
    'vallado',
    'rv2coe',
    'rv2ecc',
    'rv2period',
    'findc2c3',
    'stumpff_c2',
    'stumpff_c3',
    'hyp2f1b',
    'LagrangeWindow',
    'lagrange_fast',
    'lagrange_fast_derivative',
    'sez_to_az_el',
    'space_based_to_az_el',
    'az_el_to_sez',
]
