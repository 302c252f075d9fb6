"""
UI

Minimal on-window prompts for the viewer.
"""

from .overlay import ControlOverlay

__all__ = ["ControlOverlay"]
