"""SVG path assembly, compensation scaling, and outline sampling."""
import math
from collections.abc import Callable, Sequence

import numpy as np

from .errors import GeometryError
from .types import Point, Arc, BBox

# ============================================================
# Transform and Number Formatting
# ============================================================
def make_transform(scale: float = 1.0, translate: Point = (0.0, 0.0)) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure: uniform scale first, then translate."""
    tx, ty = translate
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (x*scale + tx, y*scale + ty)
    return to_svg


def fmt_num(value: float, precision: int = 2) -> str:
    """Round half up to *precision* decimals, e.g. 0.50004 -> '0.5', -0.00001 -> '0'."""
    if not math.isfinite(value):
        raise GeometryError(f"Non-finite path coordinate: {value}")
    f = 10**precision
    s = f"{math.floor(value*f + 0.5)/f:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s

# ============================================================
# Path Assembly
# ============================================================
def svg_path_data(
    arcs: Sequence[Arc], scale: float = 1.0, translate: Point = (0.0, 0.0), precision: int = 2,
) -> str:
    """Closed SVG path through all arcs in order.

    M to the first arc start, then per arc an optional L to its start and an
    A to its end, and a final L back to the first arc start.
    """
    if not arcs:
        return ""
    to_svg = make_transform(scale, translate)

    def pt(v) -> str:
        x, y = to_svg(v.x, v.y)
        return f"{fmt_num(x, precision)},{fmt_num(y, precision)}"

    d = []
    for i, a in enumerate(arcs):
        d.append(("M" if i == 0 else "L") + pt(a.p1))
        r = fmt_num(abs(a.radius*scale), precision)
        d.append(f"A{r},{r},0,0,{a.sweep},{pt(a.p2)}")
    d.append("L" + pt(arcs[0].p1))
    return "".join(d)

# ============================================================
# Compensation Scaling
# ============================================================
def max_offset(arcs: Sequence[Arc]) -> float:
    """Largest inward pull of any arc (0 for sharp corners)."""
    return max([0.0] + [a.offset for a in arcs])


def compensation_scale(arcs: Sequence[Arc], half_extent: float, margin: float = 0.99) -> float:
    """Uniform scale that re-expands the rounded outline to *half_extent*.

    *margin* (< 1) keeps the rescaled shape off the viewport edge.
    """
    off = max_offset(arcs)
    if off == 0.0:
        return margin
    if half_extent - off <= 0.0:
        raise GeometryError(f"Offset {off:.6f} exceeds half extent {half_extent:.6f}")
    return half_extent/(half_extent - off)*margin

# ============================================================
# Outline Sampling
# ============================================================
def arc_polyline(arc: Arc, n_pts: int = 20) -> np.ndarray:
    """n_pts+1 points along the arc from p1 to p2; a single point for a sharp corner."""
    if arc.radius == 0.0:
        return np.array([[arc.p1.x, arc.p1.y]])
    c = arc.center
    sa = math.atan2(arc.p1.y-c.y, arc.p1.x-c.x)
    ea = math.atan2(arc.p2.y-c.y, arc.p2.x-c.x)
    # sweep 1 runs toward increasing angle in path coordinates
    if arc.sweep == 1:
        sweep = (ea - sa) % (2*math.pi)
    else:
        sweep = -((sa - ea) % (2*math.pi))
    t = np.linspace(sa, sa + sweep, n_pts + 1)
    return np.column_stack((c.x + arc.radius*np.cos(t), c.y + arc.radius*np.sin(t)))


def outline_polygon(
    arcs: Sequence[Arc], n_pts: int = 20, scale: float = 1.0, translate: Point = (0.0, 0.0),
) -> np.ndarray:
    """Dense (N, 2) vertex array of the closed outline, transformed like the path data."""
    if not arcs:
        raise GeometryError("Outline has no arcs")
    poly = np.concatenate([arc_polyline(a, n_pts) for a in arcs])
    return poly*scale + np.asarray(translate, dtype=float)


def poly_area(verts) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    v = np.asarray(verts, dtype=float)
    x, y = v[:, 0], v[:, 1]
    return abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))/2


def outline_bbox(
    arcs: Sequence[Arc], n_pts: int = 20, scale: float = 1.0, translate: Point = (0.0, 0.0),
) -> BBox:
    """Bounding box of the sampled outline."""
    poly = outline_polygon(arcs, n_pts, scale, translate)
    lo = poly.min(axis=0); hi = poly.max(axis=0)
    return BBox(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))
