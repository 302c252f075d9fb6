"""
Response Curves

Shaping functions for analog input: dead zones and a cubic bezier timing
curve (the same family as CSS cubic-bezier easing) applied to stick deflection.
"""

from ..config.settings import AXIS_DEAD_ZONE, CONTROLLER_LOOK_CURVE_POINTS


class CubicBezier:
    """
    Timing curve from (0, 0) to (1, 1) with control points (x1, y1) and (x2, y2).

    Calling the curve with x in [0, 1] returns the y of the point whose
    x-coordinate is x. Inputs outside [0, 1] are clamped.
    """

    NEWTON_ITERATIONS = 8
    BISECTION_ITERATIONS = 32
    EPSILON = 1e-7

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
            raise ValueError(f"Control point x values must be in [0, 1], got {x1}, {x2}")

        self.control_points = (x1, y1, x2, y2)

        # Polynomial coefficients: B(t) = ((a*t + b)*t + c)*t
        self._cx = 3.0 * x1
        self._bx = 3.0 * (x2 - x1) - self._cx
        self._ax = 1.0 - self._cx - self._bx

        self._cy = 3.0 * y1
        self._by = 3.0 * (y2 - y1) - self._cy
        self._ay = 1.0 - self._cy - self._by

    def _sample_x(self, t: float) -> float:
        return ((self._ax * t + self._bx) * t + self._cx) * t

    def _sample_y(self, t: float) -> float:
        return ((self._ay * t + self._by) * t + self._cy) * t

    def _sample_dx(self, t: float) -> float:
        return (3.0 * self._ax * t + 2.0 * self._bx) * t + self._cx

    def _solve_t(self, x: float) -> float:
        # Newton-Raphson first; converges fast away from flat spots
        t = x
        for _ in range(self.NEWTON_ITERATIONS):
            error = self._sample_x(t) - x
            if abs(error) < self.EPSILON:
                return t
            slope = self._sample_dx(t)
            if abs(slope) < 1e-6:
                break
            t -= error / slope

        # Bisection fallback; x(t) is monotonic for x1, x2 in [0, 1]
        low, high = 0.0, 1.0
        t = x
        for _ in range(self.BISECTION_ITERATIONS):
            value = self._sample_x(t)
            if abs(value - x) < self.EPSILON:
                return t
            if value < x:
                low = t
            else:
                high = t
            t = (low + high) * 0.5
        return t

    def __call__(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return self._sample_y(self._solve_t(x))

    def __repr__(self) -> str:
        return "CubicBezier({}, {}, {}, {})".format(*self.control_points)


CONTROLLER_LOOK_CURVE = CubicBezier(*CONTROLLER_LOOK_CURVE_POINTS)


def ease_signed(value: float, curve: CubicBezier = CONTROLLER_LOOK_CURVE) -> float:
    """
    Apply curve to the magnitude of value and restore its sign.

    Odd-symmetric: ease_signed(-v) == -ease_signed(v).
    """
    eased = curve(abs(value))
    return -eased if value < 0 else eased


def apply_dead_zone(value: float, dead_zone: float = AXIS_DEAD_ZONE) -> float:
    """Return exactly 0.0 for readings inside the dead zone, value otherwise."""
    if abs(value) < dead_zone:
        return 0.0
    return float(value)
