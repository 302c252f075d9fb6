"""Core viewer components"""
from .camera import Camera
from .rig import ArticulatedRig, Joint

__all__ = [
    "Camera",
    "ArticulatedRig",
    "Joint",
]
