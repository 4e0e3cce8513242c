"""Circular collision areas."""

from __future__ import annotations

import math

from strawshmup.collide_polygon import CollidePolygon, CollideRealm, Point, circle_hits_polygon


class CollideCircle(CollideRealm):
    """A collision area bounded by a circle with a whole-number radius."""

    def __init__(self, x: float, y: float, radius: float) -> None:
        self.center = Point(x, y)
        self.radius = 0
        self.set_radius(radius)

    def is_collided_with(self, other: CollideCircle | CollidePolygon) -> bool:
        """Return whether this circle overlaps another circle or a polygon."""
        if isinstance(other, CollideCircle):
            distance = math.hypot(self.center.x - other.center.x, self.center.y - other.center.y)
            return distance < self.radius + other.radius
        if isinstance(other, CollidePolygon):
            return circle_hits_polygon(self.center, self.radius, other.vertices)
        raise TypeError(f"cannot test a circle against {type(other).__name__}")

    def update(self, position: Point) -> None:
        """Move the centre to the given position."""
        self.center.x = position.x
        self.center.y = position.y

    def set_radius(self, radius: float) -> None:
        """Set the radius, dropping any fractional part."""
        if radius < 0:
            raise ValueError("radius must not be negative")
        self.radius = int(radius)