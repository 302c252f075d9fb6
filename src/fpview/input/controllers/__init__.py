"""
Input Controllers

Controllers translate collected input into camera and rig motion.
"""

from .orientation_controller import OrientationController
from .rig_controller import RigPoseController

__all__ = ['OrientationController', 'RigPoseController']
