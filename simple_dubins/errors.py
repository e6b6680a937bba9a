from __future__ import annotations


class PlanningError(RuntimeError):
    """Base class for planning failures; no path is produced."""


class UnreachableTargetError(PlanningError):
    """Target lies strictly inside the turning circle."""

    def __init__(self, distance: float, radius: float) -> None:
        super().__init__(
            f"Target not reachable with simple Dubins path: distance to turning "
            f"center {distance:.6g} < turning radius {radius:.6g}"
        )
        self.distance = distance
        self.radius = radius


class DegenerateTangentError(PlanningError):
    """No real tangent line from the target to the circle (negative discriminant)."""

    def __init__(self, discriminant: float) -> None:
        super().__init__(f"Tangent line undefined: a^2 + b^2 - R^2 = {discriminant:.6g} < 0")
        self.discriminant = discriminant


class TurningRadiusAdvisory(UserWarning):
    """Turning radius exceeds half the start-goal distance; the path is valid but may be inefficient."""
