"""
Stats Panel

Collects frame timing and controller statistics as text lines.
Provides real-time information about FPS, camera pose and input devices.
"""

from typing import List, Optional

from ..config.settings import STATS_FRAME_SAMPLES, STATS_REFRESH_INTERVAL
from ..core.camera import Camera
from ..input.controllers.orientation_controller import OrientationController


class StatsPanel:
    """
    Frame statistics panel.

    Averages frame times and formats them together with the camera pose.
    The host decides where the lines are shown.
    """

    def __init__(self, max_frame_samples: int = STATS_FRAME_SAMPLES, refresh_interval: float = STATS_REFRESH_INTERVAL):
        """
        Initialize stats panel.

        Args:
            max_frame_samples: Number of frames averaged for the frame time
            refresh_interval: Seconds between refreshes of the text lines
        """
        if max_frame_samples < 1:
            raise ValueError("max_frame_samples must be at least 1")
        self.max_frame_samples = max_frame_samples
        self.refresh_interval = refresh_interval
        self.frame_times: List[float] = []
        self.lines: List[str] = []
        self._since_refresh = refresh_interval

    def update(self, frametime: float, camera: Camera,
               controller: Optional[OrientationController] = None) -> bool:
        """
        Record a frame and refresh the text lines when due.

        Args:
            frametime: Frame time in seconds
            camera: Camera instance
            controller: First-person controller, if one exists

        Returns:
            True if the lines were refreshed this frame
        """
        self.frame_times.append(frametime * 1000)  # Convert to ms
        if len(self.frame_times) > self.max_frame_samples:
            self.frame_times.pop(0)

        self._since_refresh += frametime
        if self._since_refresh < self.refresh_interval:
            return False
        self._since_refresh = 0.0

        self.lines = self._gather_stats(camera, controller)
        return True

    @property
    def average_frametime(self) -> float:
        if not self.frame_times:
            return 0.0
        return sum(self.frame_times) / len(self.frame_times)

    @property
    def fps(self) -> float:
        average = self.average_frametime
        return 1000.0 / average if average > 0 else 0.0

    def _gather_stats(self, camera: Camera, controller: Optional[OrientationController]) -> List[str]:
        lines = [f"FPS: {self.fps:.1f} ({self.average_frametime:.2f}ms)"]

        cam_pos = camera.position
        lines.append(f"Cam Pos.: [{cam_pos[0]:.1f}, {cam_pos[1]:.1f}, {cam_pos[2]:.1f}]")

        if controller is not None:
            mode = "first-person" if controller.enabled else "free"
            lines.append(
                f"Lat: {controller.latitude:.1f}° | Lon: {controller.longitude:.1f}° | Mode: {mode}"
            )
            lines.append(f"Gamepads: {len(controller.aggregator.gamepads)}")

        return lines
