"""Rounded polygon: a vertex list turned into corner arcs."""
import math
from collections.abc import Sequence

from .corners import compute_corners
from .errors import GeometryError, InvalidVertexCountError
from .geometry import corner_radius, compute_arc
from .path import svg_path_data, max_offset
from .types import Point, PolygonPoint, Arc
from .vector import Vector2


class RoundedPolygon:
    """Closed outline made of one rounding arc per vertex plus connecting lines.

    The vertex order defines the edges; the last vertex connects back to the
    first. ``arcs`` holds only the arcs, the lines between them are implied.
    """

    def __init__(self):
        self.points: list[PolygonPoint] = []
        self.arcs: list[Arc] = []

    @classmethod
    def from_vertices(cls, vertices: Sequence[Point], ratio: float = 1.0) -> "RoundedPolygon":
        """Create a rounded polygon.

        *ratio* is the fraction of the maximum possible corner radius to use
        (0 = sharp corners, 1 = maximal rounding).
        """
        poly = cls()
        poly.process(vertices, ratio)
        return poly

    def process(self, vertices: Sequence[Point], ratio: float = 1.0) -> None:
        """Discard the current outline and rebuild it from *vertices*."""
        if len(vertices) < 3:
            raise InvalidVertexCountError(f"Need at least 3 vertices, got {len(vertices)}")
        if not 0.0 <= ratio <= 1.0:
            raise GeometryError(f"Rounding ratio {ratio} outside [0, 1]")
        verts = [Vector2.of(v) for v in vertices]
        for v in verts:
            if not (math.isfinite(v.x) and math.isfinite(v.y)):
                raise GeometryError(f"Non-finite vertex ({v.x}, {v.y})")

        points = compute_corners(verts)
        n = len(points)
        arcs = []
        for i in range(n):
            r = corner_radius(points, i, ratio)
            arcs.append(compute_arc(points[i-1], points[i], points[(i+1) % n], r))
        self.points = points
        self.arcs = arcs

    def svg_path_data(
        self, scale: float = 1.0, translate: Point = (0.0, 0.0), precision: int = 2,
    ) -> str:
        """SVG path data (M/L/A commands); scale applies before translate."""
        return svg_path_data(self.arcs, scale, translate, precision)

    def max_offset(self) -> float:
        return max_offset(self.arcs)
