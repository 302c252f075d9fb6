"""Articulated rig model: a chain of joints that rotate about fixed local axes."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from pyrr import Matrix44, Quaternion, Vector3

from ..config.settings import (
    RIG_JOINT_AXES,
    RIG_JOINT_NAMES,
    RIG_POSITION,
    RIG_SEGMENT_LENGTH,
)
from .transforms import AXIS_VECTORS, normalise_quaternion


class Joint:
    """A single rig joint with an orientation relative to its parent."""

    def __init__(
        self,
        name: str,
        axis: str = "z",
        offset: Vector3 | None = None,
        parent: Optional["Joint"] = None,
    ) -> None:
        if axis not in AXIS_VECTORS:
            raise ValueError(f"Unsupported joint axis: {axis}")
        self.name = name
        self.axis = axis
        self.offset = Vector3(offset) if offset is not None else Vector3([0.0, 0.0, 0.0])
        self.parent = parent
        self.orientation = Quaternion()

    def apply_quaternion(self, quat) -> None:
        """Premultiply the joint orientation by quat (rotation in parent space)."""
        self.orientation = normalise_quaternion(Quaternion(quat) * self.orientation)

    def world_orientation(self) -> Quaternion:
        if self.parent is None:
            return self.orientation
        return self.parent.world_orientation() * self.orientation

    def world_position(self) -> Vector3:
        """Joint origin in world space: the offset is expressed in the parent frame."""
        if self.parent is None:
            return Vector3(self.offset)
        return self.parent.world_position() + self.parent.world_orientation() * self.offset

    def world_matrix(self) -> Matrix44:
        """Model matrix for rendering, in pyrr's layout."""
        matrix = Matrix44.from_translation(self.world_position())
        return matrix * Matrix44.from_quaternion(self.world_orientation())


class ArticulatedRig:
    """Named collection of joints."""

    def __init__(self) -> None:
        self.joints: Dict[str, Joint] = {}

    def add_joint(self, joint: Joint) -> Joint:
        if joint.name in self.joints:
            raise ValueError(f"Duplicate joint name: {joint.name}")
        self.joints[joint.name] = joint
        return joint

    def get(self, name: str) -> Optional[Joint]:
        return self.joints.get(name)

    def __iter__(self) -> Iterator[Joint]:
        return iter(self.joints.values())

    def __len__(self) -> int:
        return len(self.joints)

    @classmethod
    def default_arm(
        cls,
        position=RIG_POSITION,
        segment_length: float = RIG_SEGMENT_LENGTH,
    ) -> "ArticulatedRig":
        """Build the six-joint robot arm: a base followed by five stacked segments."""
        rig = cls()
        parent = None
        for index, (name, axis) in enumerate(zip(RIG_JOINT_NAMES, RIG_JOINT_AXES)):
            offset = Vector3(position) if index == 0 else Vector3([0.0, segment_length, 0.0])
            parent = rig.add_joint(Joint(name, axis=axis, offset=offset, parent=parent))
        return rig
