"""
Spherical Coordinate Helpers

Angle and spherical-coordinate conversions used by the camera controls.
Conventions are y-up: phi is the polar angle measured from +Y, theta is the
azimuth measured from +Z towards +X.
"""

import math
from typing import Tuple

import numpy as np
from pyrr import Vector3


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def map_linear(value: float, a1: float, a2: float, b1: float, b2: float) -> float:
    """Linearly map value from range [a1, a2] to range [b1, b2]."""
    return b1 + (value - a1) * (b2 - b1) / (a2 - a1)


def spherical_to_vector(radius: float, phi: float, theta: float) -> Vector3:
    """
    Convert spherical coordinates to a cartesian vector.

    Args:
        radius: Distance from the origin
        phi: Polar angle from +Y in radians
        theta: Azimuth around +Y in radians (0 points along +Z)

    Returns:
        Cartesian vector
    """
    sin_phi_radius = math.sin(phi) * radius
    return Vector3([
        sin_phi_radius * math.sin(theta),
        math.cos(phi) * radius,
        sin_phi_radius * math.cos(theta),
    ])


def vector_to_spherical(vec) -> Tuple[float, float, float]:
    """
    Convert a cartesian vector to spherical coordinates.

    Args:
        vec: Any 3-component vector

    Returns:
        (radius, phi, theta); a zero vector maps to (0, 0, 0)
    """
    x, y, z = (float(c) for c in vec)
    radius = math.sqrt(x * x + y * y + z * z)

    if radius == 0.0:
        return 0.0, 0.0, 0.0

    theta = math.atan2(x, z)
    phi = math.acos(clamp(y / radius, -1.0, 1.0))
    return radius, phi, theta


def is_zero_length(vec, epsilon: float = 1e-12) -> bool:
    """True if the vector is too short to derive a direction from."""
    return float(np.dot(vec, vec)) <= epsilon
