"""
Photometry
==========

Apparent brightness of resident space objects.
"""

import math
from typing import Optional

import numpy as np

from ..core.rotations import angle_between

SUN_VISUAL_MAGNITUDE = -26.74


def mv_to_pe(mv: float, zeropoint: float) -> float:
    """
    Convert visual magnitude to photoelectrons.

    Args:
        mv: Visual magnitude
        zeropoint: Magnitude producing one photoelectron

    Returns:
        Photoelectrons
    """
    return 10 ** ((zeropoint - mv) / 2.5)


def pe_to_mv(pe: float, zeropoint: float) -> float:
    """Convert photoelectrons to visual magnitude."""
    return zeropoint - 2.5 * math.log10(pe)


def lambertian_sphere_to_mv(phase_angle: float, range_: float,
                            radius: float = 1.0, albedo: float = 0.25) -> float:
    """
    Visual magnitude of a diffuse sphere.

    Args:
        phase_angle: Sun-target-observer angle [deg]
        range_: Target to observer distance [m]
        radius: Sphere radius [m]
        albedo: Diffuse reflectance

    Returns:
        Visual magnitude
    """
    phase = math.radians(phase_angle)

    phase_factor = math.sin(phase) + (math.pi - phase) * math.cos(phase)
    intensity = phase_factor * (2 * albedo * radius * radius) / \
        (3 * math.pi * range_ * range_)

    return SUN_VISUAL_MAGNITUDE - 2.5 * math.log10(intensity)


def _model_value(model, key: str, default=None):
    if isinstance(model, dict):
        return model.get(key, default)
    return getattr(model, key, default)


def calculate_target_brightness(observer, target, sun) -> dict:
    """
    Phase angle, range and magnitude of a target seen from an observer.

    The magnitude is only computed when the target carries a ``model``
    whose ``mode`` is ``'lambertianSphere'`` (with ``diameter`` and
    ``albedo``); otherwise ``mv`` is None.

    Args:
        observer: Observing object
        target: Observed object
        sun: Sun object

    Returns:
        Dict with ``phase_angle`` [deg], ``range`` [m] and ``mv``
    """
    target_position = target.world_position
    target_to_sun = sun.world_position - target_position
    target_to_observer = observer.world_position - target_position

    phase_angle = math.degrees(angle_between(target_to_sun, target_to_observer))
    range_ = float(np.linalg.norm(target_to_observer))

    mv: Optional[float] = None
    model = getattr(target, 'model', None)
    if model is not None and _model_value(model, 'mode') == 'lambertianSphere':
        mv = lambertian_sphere_to_mv(phase_angle, range_,
                                     _model_value(model, 'diameter') / 2.0,
                                     _model_value(model, 'albedo', 0.25))

    return {
        'phase_angle': phase_angle,
        'range': range_,
        'mv': mv,
    }
