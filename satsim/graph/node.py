"""
Scene Graph Node
================

Base element of the transform hierarchy.
"""

from typing import Optional

import numpy as np

from ..core.rotations import rigid_inverse, transform_point, transform_vector


class Node:
    """
    Scene graph node with an optional parent.

    A bare node carries an identity local transform, so it places its
    children exactly where its parent is.
    """

    def __init__(self):
        self.parent: Optional['Node'] = None

    def attach(self, parent: 'Node'):
        """
        Attach this node to a new parent, detaching it from the old one.

        Args:
            parent: Group that receives this node as a child
        """
        if self.parent is not None:
            self.parent.remove_child(self)
        parent.add_child(self)

    def detach(self):
        """Detach this node from its parent, if any."""
        if self.parent is not None:
            self.parent.remove_child(self)

    @property
    def transform(self) -> np.ndarray:
        """Local 4x4 transform (identity for a bare node)."""
        return np.identity(4)

    @property
    def local_to_world_transform(self) -> np.ndarray:
        """Transform from this node's local frame to the world frame."""
        if self.parent is not None:
            return self.parent.local_to_world_transform @ self.transform
        return self.transform.copy()

    @property
    def world_to_local_transform(self) -> np.ndarray:
        """Transform from the world frame to this node's local frame."""
        return rigid_inverse(self.local_to_world_transform)

    @property
    def world_position(self) -> np.ndarray:
        """Origin of this node expressed in the world frame."""
        return self.local_to_world_transform[:3, 3].copy()

    def transform_point_to_world(self, local_point) -> np.ndarray:
        """Transform a point from the local frame to the world frame."""
        return transform_point(self.local_to_world_transform, np.asarray(local_point, dtype=float))

    def transform_point_from_world(self, world_point) -> np.ndarray:
        """Transform a point from the world frame to the local frame."""
        return transform_point(self.world_to_local_transform, np.asarray(world_point, dtype=float))

    def transform_point_to(self, destination: 'Node', local_point) -> np.ndarray:
        """
        Transform a point from this node's frame into another node's frame.

        Args:
            destination: Node whose local frame receives the point
            local_point: Point in this node's local frame

        Returns:
            Point in the destination's local frame
        """
        world_point = self.transform_point_to_world(local_point)
        return destination.transform_point_from_world(world_point)

    def transform_vector_to_world(self, local_vector) -> np.ndarray:
        """Rotate a vector from the local frame to the world frame."""
        return transform_vector(self.local_to_world_transform, np.asarray(local_vector, dtype=float))

    def transform_vector_from_world(self, world_vector) -> np.ndarray:
        """Rotate a vector from the world frame to the local frame."""
        return transform_vector(self.world_to_local_transform, np.asarray(world_vector, dtype=float))

    def transform_vector_to(self, destination: 'Node', local_vector) -> np.ndarray:
        """Rotate a vector from this node's frame into another node's frame."""
        world_vector = self.transform_vector_to_world(local_vector)
        return destination.transform_vector_from_world(world_vector)

    def __bool__(self) -> bool:
        return True
