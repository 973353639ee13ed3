"""Star shaped rounded polygon clip paths built on the roundpoly engine."""

from .config import ClipPathConfig, ConfigWarning, FIELD_ALIASES, clamp_config
from .star import Shape, star_vertices, build_shape, shape_path
from .svg import (
    IdSource, ClipPath, clip_path_style,
    render_clip_path_svg, build_clip_path, render_preview_svg,
)
