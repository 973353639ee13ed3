"""Corner radius limits and rounding arc construction."""
import logging
import math
from collections.abc import Sequence

from .errors import DegenerateCornerError, DegenerateVectorError
from .types import PolygonPoint, Arc

logger = logging.getLogger(__name__)

# ============================================================
# Radius Constraint Solver
# ============================================================
def max_corner_radius(a: PolygonPoint, b: PolygonPoint) -> float:
    """Largest radius two consecutive corners a, b can share without their arcs overlapping.

    An arc of radius r at a corner with half-angle h touches each edge at
    r/tan(h) from the vertex. Both arcs fit on the shared edge of length s when
    r/tan(alpha) + r/tan(beta) <= s, i.e. r = s*sin(alpha)*sin(beta)/sin(pi-alpha-beta).
    Returns inf when both corners are straight (the edge imposes no limit).
    """
    s = a.vertex.sub(b.vertex).length()
    alpha = a.angle/2; beta = b.angle/2
    num = s*math.sin(alpha)*math.sin(beta)
    if num == 0.0:
        return 0.0
    den = math.sin(math.pi - alpha - beta)
    if den <= 1e-12:
        return math.inf
    return num/den


def corner_radius(corners: Sequence[PolygonPoint], i: int, ratio: float) -> float:
    """Rounding radius of corner i: the tighter of its two edge limits, times ratio."""
    p = corners[i]
    if p.degenerate:
        return 0.0
    mr = min(max_corner_radius(p, corners[i-1]),
             max_corner_radius(p, corners[(i+1) % len(corners)]))
    if math.isinf(mr):
        return 0.0
    return mr*ratio

# ============================================================
# Arc Constructor
# ============================================================
def _sweep(a: PolygonPoint, p: PolygonPoint, c: PolygonPoint) -> int:
    """SVG sweep-flag from the turn direction incoming edge -> outgoing edge."""
    return 0 if p.vertex.sub(a.vertex).cross(c.vertex.sub(p.vertex)) < 0 else 1


def degenerate_arc(a: PolygonPoint, p: PolygonPoint, c: PolygonPoint) -> Arc:
    """Zero-radius arc sitting on the vertex; the corner stays sharp."""
    v = p.vertex
    return Arc(0.0, v, v, p, _sweep(a, p, c), 0.0, v)


def _arc_geometry(a: PolygonPoint, p: PolygonPoint, c: PolygonPoint, radius: float) -> Arc:
    if p.degenerate:
        raise DegenerateCornerError(f"Corner angle {p.angle_deg:.9f} deg has no bisector")
    vP = p.vertex
    u_pa = a.vertex.sub(vP).normalize()
    u_pc = c.vertex.sub(vP).normalize()
    # distance from the vertex to the arc center along the bisector
    q = radius/math.sin(p.angle/2)
    v_pq = u_pa.add(u_pc).normalize().scale(q)
    # tangent points: the center projected onto both edges
    t1 = vP.add(u_pa.scale(v_pq.dot(u_pa)))
    t2 = vP.add(u_pc.scale(v_pq.dot(u_pc)))
    return Arc(radius, t1, t2, p, _sweep(a, p, c), q - radius, vP.add(v_pq))


def compute_arc(a: PolygonPoint, p: PolygonPoint, c: PolygonPoint, radius: float) -> Arc:
    """Arc rounding corner p between incoming neighbour a and outgoing neighbour c.

    Degenerate corners (angle 0 or pi, coincident neighbours) and zero radii
    yield degenerate_arc() instead of non-finite coordinates.
    """
    if radius <= 0.0:
        return degenerate_arc(a, p, c)
    try:
        return _arc_geometry(a, p, c, radius)
    except (DegenerateCornerError, DegenerateVectorError) as e:
        logger.debug("Leaving corner at (%g, %g) sharp: %s", p.vertex.x, p.vertex.y, e)
        return degenerate_arc(a, p, c)
