"""Shared type definitions for the rounded polygon engine."""
import math
from typing import NamedTuple

from .vector import Vector2

Point = tuple[float, float]

# Corners closer than this to 0 or pi are treated as straight/spiked.
ANGLE_EPS = 1e-9


class PolygonPoint(NamedTuple):
    vertex: Vector2
    angle: float  # interior angle, radians in [0, pi]

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.angle)

    @property
    def degenerate(self) -> bool:
        return self.angle < ANGLE_EPS or math.pi - self.angle < ANGLE_EPS


class Arc(NamedTuple):
    """Rounding arc replacing one polygon corner.

    p1 lies on the incoming edge and p2 on the outgoing edge. sweep is the
    SVG sweep-flag (1 = clockwise on a y-down canvas). offset is how far the
    arc pulls the outline back from the vertex along the bisector.
    """
    radius: float
    p1: Vector2
    p2: Vector2
    corner: PolygonPoint
    sweep: int
    offset: float
    center: Vector2


class BBox(NamedTuple):
    xmin: float; ymin: float; xmax: float; ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin
