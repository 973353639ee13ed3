"""Corner model: interior angle of every polygon vertex."""
import logging
import math
from collections.abc import Sequence

from .errors import DegenerateVectorError, InvalidVertexCountError
from .types import PolygonPoint
from .vector import Vector2

logger = logging.getLogger(__name__)


def corner_angle(prev: Vector2, p: Vector2, nxt: Vector2) -> float:
    """Interior angle at p between the edges to prev and nxt, in [0, pi].

    Raises DegenerateVectorError if p coincides with a neighbour.
    """
    return prev.sub(p).angle(nxt.sub(p))


def compute_corners(vertices: Sequence[Vector2]) -> list[PolygonPoint]:
    """Precompute one PolygonPoint per vertex, in vertex order.

    The polygon is implicitly closed. Each angle is computed exactly once and
    shared by the two corner pairs that use it. A vertex coinciding with a
    neighbour is recorded as a straight corner (angle pi) so it stays sharp.
    """
    n = len(vertices)
    if n < 3:
        raise InvalidVertexCountError(f"Need at least 3 vertices, got {n}")
    corners = []
    for i in range(n):
        p = vertices[i]
        try:
            angle = corner_angle(vertices[i-1], p, vertices[(i+1) % n])
        except DegenerateVectorError:
            logger.debug("Vertex %d at (%g, %g) coincides with a neighbour", i, p.x, p.y)
            angle = math.pi
        corners.append(PolygonPoint(p, angle))
    return corners
