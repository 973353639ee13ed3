"""Rounded polygon engine: corner arcs and SVG path data from a vertex list."""

from .errors import (
    GeometryError, DegenerateVectorError, DegenerateCornerError, InvalidVertexCountError,
)
from .vector import Vector2
from .types import Point, PolygonPoint, Arc, BBox
from .corners import corner_angle, compute_corners
from .geometry import max_corner_radius, corner_radius, compute_arc, degenerate_arc
from .path import (
    make_transform, fmt_num, svg_path_data,
    max_offset, compensation_scale,
    arc_polyline, outline_polygon, poly_area, outline_bbox,
)
from .polygon import RoundedPolygon
