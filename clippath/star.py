"""Star polygon vertices and their rounded outline path."""
import math
from typing import NamedTuple

from roundpoly import Point, Vector2, RoundedPolygon, compensation_scale
from clippath.config import ClipPathConfig
from clippath.constants import VIEWPORT_SIZE, PATH_PRECISION, SIZE_MARGIN


class Shape(NamedTuple):
    """Rounded star outline fitted into the viewport."""
    polygon: RoundedPolygon
    scale: float          # compensation scale
    translate: Point      # viewport centre
    path_d: str


def star_vertices(corner_count: int, outer_radius: float, inner_radius: float,
                  tilt: float) -> list[Vector2]:
    """2*corner_count vertices alternating outer/inner radius, starting at *tilt* radians.

    An inner radius equal to the outer radius gives a regular polygon.
    """
    n = corner_count*2
    gamma = 2*math.pi/n
    verts = []
    for i in range(n):
        r = outer_radius if i % 2 == 0 else inner_radius
        a = tilt + i*gamma
        verts.append(Vector2(math.cos(a)*r, math.sin(a)*r))
    return verts


def build_shape(
    config: ClipPathConfig, viewport_size: float = VIEWPORT_SIZE,
    precision: int = PATH_PRECISION, margin: float = SIZE_MARGIN,
) -> Shape:
    """Round the configured star and scale it back up to fill the viewport.

    Rounding pulls the outline inward; the largest arc offset sets a uniform
    re-expansion scale (see compensation_scale).
    """
    half = viewport_size/2
    outer = config.outer_radius*half
    inner = config.outer_radius*config.inner_radius_ratio*half
    verts = star_vertices(config.corner_count, outer, inner, math.radians(config.tilt))

    rp = RoundedPolygon.from_vertices(verts, config.corner_radius)
    scale = compensation_scale(rp.arcs, half, margin)
    translate = (half, half)
    return Shape(rp, scale, translate, rp.svg_path_data(scale, translate, precision))


def shape_path(config: ClipPathConfig, viewport_size: float = VIEWPORT_SIZE,
               precision: int = PATH_PRECISION, margin: float = SIZE_MARGIN) -> str:
    """SVG path data of the rounded star in [0, viewport_size] coordinates."""
    return build_shape(config, viewport_size, precision, margin).path_d
