"""
Camera Module

Scene camera with a position, a quaternion orientation, local-axis
translation and look-at targeting. Controllers drive it; it holds no input
logic of its own.
"""

import logging

import numpy as np
from pyrr import Matrix44, Quaternion, Vector3, vector

from ..config.settings import (
    DEFAULT_FOV,
    NEAR_PLANE,
    FAR_PLANE,
    WORLD_UP,
)
from .spherical import is_zero_length
from .transforms import axis_vector, look_rotation

logger = logging.getLogger(__name__)


class Camera:
    """
    Perspective camera looking down its local -Z axis.

    Features:
    - Writable position and orientation
    - Translation along the camera's own axes
    - look_at() with world +Y as up
    - View and projection matrices for rendering
    """

    def __init__(self, position: Vector3 = None, orientation: Quaternion = None, fov: float = DEFAULT_FOV):
        """
        Initialize camera.

        Args:
            position: Camera position in world space (default: origin)
            orientation: Initial orientation (default: identity, looking down -Z)
            fov: Vertical field of view in degrees
        """
        self.position = Vector3(position) if position is not None else Vector3([0.0, 0.0, 0.0])
        self.orientation = Quaternion(orientation) if orientation is not None else Quaternion()
        self.fov = fov
        self.up = Vector3(WORLD_UP)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------
    def translate_on_axis(self, axis, distance: float) -> None:
        """
        Move the camera along one of its local axes.

        Args:
            axis: Local axis as a unit vector or one of "x", "y", "z"
            distance: Signed distance in world units
        """
        self.position = self.position + self.orientation * axis_vector(axis) * distance

    def translate_x(self, distance: float) -> None:
        self.translate_on_axis("x", distance)

    def translate_y(self, distance: float) -> None:
        self.translate_on_axis("y", distance)

    def translate_z(self, distance: float) -> None:
        self.translate_on_axis("z", distance)

    # ------------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------------
    def look_at(self, target) -> bool:
        """
        Rotate the camera so it faces target.

        Args:
            target: World-space point to look at

        Returns:
            False if target coincides with the camera position (orientation
            is left unchanged), True otherwise
        """
        direction = np.asarray(target, dtype=float) - np.asarray(self.position, dtype=float)

        if is_zero_length(direction):
            logger.debug("look_at target coincides with camera position, ignoring")
            return False

        self.orientation = look_rotation(direction)
        return True

    # ------------------------------------------------------------------
    # Basis vectors
    # ------------------------------------------------------------------
    def get_forward(self) -> Vector3:
        """Get camera forward vector (local -Z in world space)"""
        return self.orientation * Vector3([0.0, 0.0, -1.0])

    def get_right(self) -> Vector3:
        """Get camera right vector"""
        return self.orientation * Vector3([1.0, 0.0, 0.0])

    def get_up(self) -> Vector3:
        """Get camera up vector"""
        return self.orientation * Vector3([0.0, 1.0, 0.0])

    def get_position(self) -> Vector3:
        """Get camera position"""
        return self.position

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------
    def get_view_matrix(self) -> Matrix44:
        """
        Get the camera view matrix.

        Returns:
            4x4 view matrix for camera transformation
        """
        forward = vector.normalise(self.get_forward())
        return Matrix44.look_at(
            self.position,
            self.position + forward,
            self.get_up()
        )

    def get_projection_matrix(self, aspect_ratio: float, fov: float = None) -> Matrix44:
        """
        Get the camera projection matrix.

        Args:
            aspect_ratio: Viewport width / height
            fov: Field of view in degrees (default: camera fov)

        Returns:
            4x4 projection matrix
        """
        return Matrix44.perspective_projection(
            fov if fov is not None else self.fov,
            aspect_ratio,
            NEAR_PLANE,
            FAR_PLANE
        )
