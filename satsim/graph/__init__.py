"""
Scene Graph Module
==================

Transform hierarchy used to place every simulated object.
"""

from .node import Node
from .group import Group
from .transform_group import TransformGroup

__all__ = [
    'Node',
    'Group',
    'TransformGroup',
]
