"""
Simulation Object
=================

Base class for everything that moves in the simulated universe.
"""

import logging
from enum import Enum
from typing import Any, List, Optional

import numpy as np

from ..graph.transform_group import TransformGroup
from .config import OMEGA_EARTH
from .julian_date import JulianDate
from .rotations import rigid_inverse

logger = logging.getLogger(__name__)


class ReferenceFrame(Enum):
    """Frame in which a SimObject reports its position."""
    INERTIAL = 0  # Earth-centered inertial
    FIXED = 1     # Earth-centered Earth-fixed


class SimObject(TransformGroup):
    """
    Scene graph object with a time-dependent state.

    Features:
    - Position and velocity in a declared or inherited reference frame
    - Cached local-to-world transforms, recomputed lazily when dirty
    - Update listeners notified after every state refresh

    Subclasses implement ``_update(time, universe)`` to refresh
    ``_position``, ``_velocity`` and any orientation.
    """

    def __init__(self, name: str = 'undefined', reference_frame: Optional[ReferenceFrame] = None):
        """
        Initialize simulation object.

        Args:
            name: Object name, unique within a universe
            reference_frame: Declared frame, or None to inherit the parent's
        """
        super().__init__()
        self._name = name
        self._reference_frame = reference_frame

        self._position = np.zeros(3)
        self._velocity = np.zeros(3)

        self._local_to_world_transform = np.identity(4)
        self._world_to_local_transform = np.identity(4)

        self._last_update: Optional[JulianDate] = None
        self._last_universe = None
        self._transform_dirty = True

        self._period: Optional[float] = None
        self._eccentricity: Optional[float] = None

        self.visualizer: Any = {}
        self._update_listeners: List[Any] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def period(self) -> Optional[float]:
        """Orbital period [s], if the object has one."""
        return self._period

    @property
    def eccentricity(self) -> Optional[float]:
        """Orbital eccentricity, if the object has one."""
        return self._eccentricity

    @property
    def update_listeners(self) -> List[Any]:
        """Listeners called with ``(time, universe)`` after each update."""
        return self._update_listeners

    @property
    def reference_frame(self) -> Optional[ReferenceFrame]:
        """Declared frame, else the nearest ancestor's."""
        if self._reference_frame is not None:
            return self._reference_frame
        if isinstance(self.parent, SimObject):
            return self.parent.reference_frame
        return None

    @property
    def position(self) -> np.ndarray:
        """Position in the resolved reference frame [m]."""
        if self._reference_frame is None and isinstance(self.parent, SimObject):
            return self.parent.position
        return self._position

    @property
    def velocity(self) -> np.ndarray:
        """Velocity in the resolved reference frame [m/s]."""
        if self._reference_frame is None and isinstance(self.parent, SimObject):
            return self.parent.velocity
        return self._velocity

    @property
    def time(self) -> Optional[JulianDate]:
        """Time of the last update, or None before the first one."""
        return self._last_update

    @property
    def local_to_world_transform(self) -> np.ndarray:
        self._update_transforms_if_dirty()
        return self._local_to_world_transform

    @property
    def world_to_local_transform(self) -> np.ndarray:
        self._update_transforms_if_dirty()
        return self._world_to_local_transform

    @property
    def world_position(self) -> np.ndarray:
        """Position in the inertial world frame [m]."""
        if self._reference_frame is ReferenceFrame.INERTIAL:
            return self.position
        return self.transform_point_to_world(np.zeros(3))

    @property
    def world_velocity(self) -> np.ndarray:
        """
        Velocity in the inertial world frame [m/s].

        Earth-fixed objects add the transport term ω × r before rotating
        into the world frame. Objects without a declared frame move with
        their parent.
        """
        if self._reference_frame is ReferenceFrame.INERTIAL:
            return self._velocity
        if self._reference_frame is None and isinstance(self.parent, SimObject):
            return self.parent.world_velocity
        if self.parent is None:
            return self._velocity

        velocity = self._velocity
        if self.reference_frame is ReferenceFrame.FIXED:
            omega = np.array([0.0, 0.0, OMEGA_EARTH])
            velocity = velocity + np.cross(omega, self._position)
        return self.parent.transform_vector_to_world(velocity)

    # Transform mutators mark the cached transforms dirty

    def rotate_x(self, angle: float):
        super().rotate_x(angle)
        self._transform_dirty = True

    def rotate_y(self, angle: float):
        super().rotate_y(angle)
        self._transform_dirty = True

    def rotate_z(self, angle: float):
        super().rotate_z(angle)
        self._transform_dirty = True

    def translate(self, vector):
        super().translate(vector)
        self._transform_dirty = True

    def set_translation(self, vector):
        super().set_translation(vector)
        self._transform_dirty = True

    def set_rotation(self, matrix):
        super().set_rotation(matrix)
        self._transform_dirty = True

    def set_columns(self, x, y, z):
        super().set_columns(x, y, z)
        self._transform_dirty = True

    def reset(self):
        super().reset()
        self._transform_dirty = True

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, value):
        self._transform = np.array(value, dtype=float).reshape(4, 4)
        self._transform_dirty = True

    def update(self, time: JulianDate, universe=None,
               force_update: bool = False, update_parent: bool = True):
        """
        Bring the object to ``time``.

        Args:
            time: Simulation time
            universe: Owning universe, passed through to ``_update``
            force_update: Recompute even if already at ``time``
            update_parent: Update the parent first
        """
        if not force_update and time == self._last_update:
            return

        if update_parent and isinstance(self.parent, SimObject):
            self.parent.update(time, universe, force_update, update_parent)

        self._update(time, universe)

        self.set_translation(self._position)

        self._last_update = time
        self._last_universe = universe

        for listener in self._update_listeners:
            if hasattr(listener, 'update'):
                listener.update(time, universe)
            else:
                listener(time, universe)

    def _update_transforms_if_dirty(self):
        """Recompute cached transforms, catching the parent up if needed."""
        if not self._transform_dirty:
            return

        parent = self.parent
        if parent is not None:
            if isinstance(parent, SimObject) and self._last_update is not None and \
                    parent._last_update != self._last_update:
                parent.update(self._last_update, self._last_universe, True, False)
            self._local_to_world_transform = parent.local_to_world_transform @ self._transform
        else:
            self._local_to_world_transform = self._transform.copy()

        self._world_to_local_transform = rigid_inverse(self._local_to_world_transform)
        self._transform_dirty = False

    def _update(self, time: JulianDate, universe):
        """Refresh position, velocity and orientation at ``time``."""
        raise NotImplementedError(
            f"{type(self).__name__}._update must be implemented in derived classes")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
