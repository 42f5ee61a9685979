"""
Transform Group
===============

Group carrying a local 4x4 rigid transform.
"""

import numpy as np

from .group import Group
from ..core.rotations import rotation_x, rotation_y, rotation_z, matrix_to_quaternion


class TransformGroup(Group):
    """
    Group with a mutable local transform.

    Rotations and translations compose on the right, so successive calls
    apply in the group's current local axes.
    """

    def __init__(self):
        super().__init__()
        self._transform = np.identity(4)

    def rotate_x(self, angle: float):
        """Rotate about the local X axis [rad]."""
        self._transform[:3, :3] = self._transform[:3, :3] @ rotation_x(angle)

    def rotate_y(self, angle: float):
        """Rotate about the local Y axis [rad]."""
        self._transform[:3, :3] = self._transform[:3, :3] @ rotation_y(angle)

    def rotate_z(self, angle: float):
        """Rotate about the local Z axis [rad]."""
        self._transform[:3, :3] = self._transform[:3, :3] @ rotation_z(angle)

    def translate(self, vector):
        """Translate along the local axes."""
        self._transform[:3, 3] = self._transform[:3, :3] @ np.asarray(vector, dtype=float) + \
            self._transform[:3, 3]

    def set_translation(self, vector):
        """Set the translation column."""
        self._transform[:3, 3] = vector

    def set_rotation(self, matrix):
        """Set the 3x3 rotation block."""
        self._transform[:3, :3] = matrix

    def set_columns(self, x, y, z):
        """Set the rotation block from its three column vectors."""
        self._transform[:3, 0] = x
        self._transform[:3, 1] = y
        self._transform[:3, 2] = z

    def reset(self):
        """Reset the local transform to identity."""
        self._transform = np.identity(4)

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, value):
        self._transform = np.array(value, dtype=float).reshape(4, 4)

    @property
    def rotation(self) -> np.ndarray:
        """Copy of the local rotation block."""
        return self._transform[:3, :3].copy()

    @property
    def quaternion(self) -> np.ndarray:
        """Local rotation as a quaternion [w, x, y, z]."""
        return matrix_to_quaternion(self._transform[:3, :3])
