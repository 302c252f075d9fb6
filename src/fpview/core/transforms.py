"""
Rotation Helpers

Small pyrr conveniences shared by the camera and the articulated rig.
Quaternions are pyrr Quaternions in (x, y, z, w) order.
"""

import math

from pyrr import Quaternion, Vector3

AXIS_VECTORS = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
}


def axis_vector(axis) -> Vector3:
    """Vector3 for a named axis ("x", "y", "z") or any 3-component sequence."""
    if isinstance(axis, str):
        axis = AXIS_VECTORS[axis]
    return Vector3(axis, dtype=float)


def quaternion_from_axis_angle(axis, angle: float) -> Quaternion:
    """
    Create a rotation of angle radians around axis.

    Args:
        axis: Rotation axis (normalised internally) or one of "x", "y", "z"
        angle: Rotation angle in radians (right-handed)
    """
    axis = axis_vector(axis)
    if axis.length == 0.0:
        return Quaternion()
    return Quaternion.from_axis_rotation(axis / axis.length, angle)


def normalise_quaternion(quat) -> Quaternion:
    quat = Quaternion(quat, dtype=float)
    if quat.length == 0.0:
        return Quaternion()
    return quat.normalised


def look_rotation(direction) -> Quaternion:
    """
    Orientation whose local -Z points along direction, with world +Y as up.

    Built as yaw about +Y applied after pitch about +X, so the local X axis
    stays horizontal. Straight up or down yields zero yaw.

    Args:
        direction: Non-zero world-space direction
    """
    x, y, z = (float(c) for c in direction)
    horizontal = math.hypot(x, z)
    yaw = math.atan2(-x, -z) if horizontal > 0.0 else 0.0
    pitch = math.atan2(y, horizontal)
    yaw_rotation = Quaternion.from_axis_rotation(axis_vector("y"), yaw)
    pitch_rotation = Quaternion.from_axis_rotation(axis_vector("x"), pitch)
    return yaw_rotation * pitch_rotation
