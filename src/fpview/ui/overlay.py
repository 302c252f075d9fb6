"""
Control Overlay

Prompt shown over the viewer while first-person mode waits for the user to
click (and so capture the pointer). Rendered through the window title.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ControlOverlay:
    """Shows or hides a short prompt on an attached window."""

    def __init__(self) -> None:
        self.window = None
        self.base_title: Optional[str] = None
        self.text = ""
        self.visible = False

    def attach(self, window) -> None:
        """
        Bind the overlay to a window.

        Args:
            window: Object with a writable ``title`` (moderngl-window BaseWindow)
        """
        self.window = window
        self.base_title = window.title
        logger.debug("Overlay attached to window %r", self.base_title)

    def _require_window(self) -> None:
        if self.window is None:
            raise RuntimeError("Overlay has no window. Did you call attach()?")

    def show(self, text: str) -> None:
        self._require_window()
        self.text = text
        self.visible = True
        self.window.title = f"{self.base_title} | {text}"

    def hide(self) -> None:
        self._require_window()
        self.text = ""
        self.visible = False
        self.window.title = self.base_title

    def set_status(self, status: str) -> None:
        """Append status text (e.g. frame stats) after the prompt, if any."""
        self._require_window()
        parts = [self.base_title]
        if self.visible:
            parts.append(self.text)
        if status:
            parts.append(status)
        self.window.title = " | ".join(parts)
