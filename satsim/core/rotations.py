"""
Rotation Utilities
==================

Vector, quaternion and rigid-transform helpers shared by the scene graph
and the frame providers.

Rotations are active (they rotate vectors, not frames). Quaternions are
scalar-first ``[w, x, y, z]``.
"""

import numpy as np


def vector3(value=None) -> np.ndarray:
    """Return a float64 copy of a 3-vector (zeros when ``value`` is None)."""
    if value is None:
        return np.zeros(3)
    v = np.array(value, dtype=float).reshape(3)
    return v


def unit(v: np.ndarray) -> np.ndarray:
    """Normalize a vector, returning zeros for a zero vector."""
    n = np.linalg.norm(v)
    if n == 0.0:
        return np.zeros_like(v, dtype=float)
    return v / n


def angle_between(a: np.ndarray, b: np.ndarray) -> float:
    """Angle between two vectors [rad], robust near 0 and pi."""
    return float(np.arctan2(np.linalg.norm(np.cross(a, b)), np.dot(a, b)))


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c]
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c]
    ])


def rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0]
    ])


def quaternion_to_matrix(q: np.ndarray) -> np.ndarray:
    """Convert quaternion to rotation matrix."""
    w, x, y, z = np.asarray(q, dtype=float) / np.linalg.norm(q)

    return np.array([
        [1-2*(y*y+z*z), 2*(x*y-w*z), 2*(x*z+w*y)],
        [2*(x*y+w*z), 1-2*(x*x+z*z), 2*(y*z-w*x)],
        [2*(x*z-w*y), 2*(y*z+w*x), 1-2*(x*x+y*y)]
    ])


def matrix_to_quaternion(m: np.ndarray) -> np.ndarray:
    """
    Convert a rotation matrix to a quaternion.

    Uses Shepperd's method for numerical stability. The result has a
    non-negative scalar part.

    Args:
        m: 3x3 rotation matrix

    Returns:
        Quaternion [w, x, y, z]
    """
    trace = m[0, 0] + m[1, 1] + m[2, 2]

    if trace > 0:
        s = 2.0 * np.sqrt(trace + 1.0)
        q = np.array([
            0.25 * s,
            (m[2, 1] - m[1, 2]) / s,
            (m[0, 2] - m[2, 0]) / s,
            (m[1, 0] - m[0, 1]) / s,
        ])
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2.0 * np.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
        q = np.array([
            (m[2, 1] - m[1, 2]) / s,
            0.25 * s,
            (m[0, 1] + m[1, 0]) / s,
            (m[0, 2] + m[2, 0]) / s,
        ])
    elif m[1, 1] > m[2, 2]:
        s = 2.0 * np.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
        q = np.array([
            (m[0, 2] - m[2, 0]) / s,
            (m[0, 1] + m[1, 0]) / s,
            0.25 * s,
            (m[1, 2] + m[2, 1]) / s,
        ])
    else:
        s = 2.0 * np.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
        q = np.array([
            (m[1, 0] - m[0, 1]) / s,
            (m[0, 2] + m[2, 0]) / s,
            (m[1, 2] + m[2, 1]) / s,
            0.25 * s,
        ])

    if q[0] < 0:
        q = -q
    return q / np.linalg.norm(q)


def rigid_transform(rotation: np.ndarray = None, translation: np.ndarray = None) -> np.ndarray:
    """Build a 4x4 rigid transform from a rotation and a translation."""
    m = np.identity(4)
    if rotation is not None:
        m[:3, :3] = rotation
    if translation is not None:
        m[:3, 3] = translation
    return m


def rigid_inverse(m: np.ndarray) -> np.ndarray:
    """
    Invert a rigid transform.

    The rotation block is transposed and the translation is negated
    under the transposed rotation.
    """
    rt = m[:3, :3].T
    inv = np.identity(4)
    inv[:3, :3] = rt
    inv[:3, 3] = -rt @ m[:3, 3]
    return inv


def transform_point(m: np.ndarray, p: np.ndarray) -> np.ndarray:
    """Apply a 4x4 transform to a point."""
    return m[:3, :3] @ p + m[:3, 3]


def transform_vector(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Apply the rotation part of a 4x4 transform to a vector."""
    return m[:3, :3] @ v
