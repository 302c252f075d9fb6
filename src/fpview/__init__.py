"""
fpview - First-Person Scene Viewer

A moderngl viewer with a first-person camera controller driven by
keyboard, mouse and gamepad input, plus a keyboard-posed articulated rig.
"""

# Core
from .core.camera import Camera
from .core.rig import ArticulatedRig, Joint

# Input
from .input.input_surface import InputSurface
from .input.input_commands import InputCommand
from .input.key_bindings import KeyBindings
from .input.controller_state import ControllerState
from .input.input_aggregator import InputAggregator
from .input.controllers import OrientationController, RigPoseController

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "ArticulatedRig",
    "Joint",
    "InputSurface",
    "InputCommand",
    "KeyBindings",
    "ControllerState",
    "InputAggregator",
    "OrientationController",
    "RigPoseController",
]
