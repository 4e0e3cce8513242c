"""Polygonal collision areas and the circle-against-polygon test."""

from __future__ import annotations

import enum
import math
from abc import ABC
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol


@dataclass
class Point:
    """A position inside the playing field."""

    x: float
    y: float


class TraceSide(enum.Enum):
    """Which side of a polygon edge a point lies on while tracing it."""

    INNER = enum.auto()
    OUTER = enum.auto()


class _CircleLike(Protocol):
    center: Point
    radius: float


class CollideRealm(ABC):
    """Base for every collision area; carries the outline drawing style."""

    DRAW_COLOR: tuple[int, int, int] = (255, 0, 255)
    DRAW_THICKNESS: float = 3.0


def _edges(vertices: list[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield each edge of the closed polygon, the last one wrapping to the first."""
    yield from zip(vertices, vertices[1:] + vertices[:1])


def _cross_side(center: Point, start: Point, end: Point) -> TraceSide:
    cross = (end.x - start.x) * (center.y - start.y) - (center.x - start.x) * (end.y - start.y)
    return TraceSide.OUTER if cross < 0 else TraceSide.INNER


def circle_hits_polygon(center: Point, radius: float, vertices: Iterable[Point]) -> bool:
    """Return whether a circle overlaps a polygon given by its vertices in order."""
    corners = list(vertices)
    xc, yc = center.x, center.y
    r = float(radius)

    for start, end in _edges(corners):
        x1, y1, x2, y2 = start.x, start.y, end.x, end.y

        # Distance from the centre to the line a*x + b*y + c = 0 through the edge.
        a = y2 - y1
        b = -(x2 - x1)
        c = y2 * (x2 - x1) - x2 * (y2 - y1)
        upper = abs(a * xc + b * yc + c)
        lower = math.hypot(a, b)
        if lower and upper / lower >= r:
            continue

        dot1 = (x2 - x1) * (xc - x1) + (y2 - y1) * (yc - y1)
        dot2 = (x2 - x1) * (xc - x2) + (y2 - y1) * (yc - y2)
        if dot1 * dot2 <= 0:
            return True

        d1 = math.hypot(xc - x1, yc - y1)
        d2 = math.hypot(xc - x2, yc - y2)
        if d1 < r or d2 < r:
            return True

    # One shape may lie wholly inside the other: the centre then stays on
    # the same side of every edge.
    sides = {_cross_side(center, start, end) for start, end in _edges(corners)}
    return len(sides) <= 1


class CollidePolygon(CollideRealm):
    """A collision area bounded by a closed polygon."""

    def __init__(self, vertices: Iterable[Point]) -> None:
        self.vertices: list[Point] = list(vertices)

    def is_collided_with(self, circle: _CircleLike) -> bool:
        """Return whether the circle area (with ``center`` and ``radius``) overlaps this polygon."""
        return circle_hits_polygon(circle.center, circle.radius, self.vertices)

    def update(self, vertices: Iterable[Point]) -> None:
        """Replace the polygon's vertices."""
        self.vertices = list(vertices)