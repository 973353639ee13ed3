"""Typed clip path configuration with clamping of user supplied options."""
import logging
import math
from collections.abc import Mapping
from typing import Any, NamedTuple

from clippath.constants import (
    DEFAULT_CORNER_COUNT, DEFAULT_OUTER_RADIUS, DEFAULT_INNER_RADIUS_RATIO,
    DEFAULT_CORNER_RADIUS, DEFAULT_TILT,
    MIN_CORNER_COUNT, UNIT_RANGE, TILT_RANGE,
)

logger = logging.getLogger(__name__)


class ClipPathConfig(NamedTuple):
    """Star polygon clip path options, all within their valid ranges."""
    corner_count: int = DEFAULT_CORNER_COUNT
    outer_radius: float = DEFAULT_OUTER_RADIUS
    inner_radius_ratio: float = DEFAULT_INNER_RADIUS_RATIO
    corner_radius: float = DEFAULT_CORNER_RADIUS
    tilt: float = DEFAULT_TILT


class ConfigWarning(NamedTuple):
    """Field-level problem found while clamping. applied is None if the value was ignored."""
    field: str
    value: Any
    applied: Any
    reason: str


# Accepted option names -> ClipPathConfig field. Three schemes are accepted:
# snake_case, camelCase, and the legacy corners/radius/ratio names.
FIELD_ALIASES = {
    "corner_count": "corner_count", "cornerCount": "corner_count", "corners": "corner_count",
    "outer_radius": "outer_radius", "outerRadius": "outer_radius", "radius": "outer_radius",
    "inner_radius_ratio": "inner_radius_ratio", "innerRadiusRatio": "inner_radius_ratio",
    "ratio": "inner_radius_ratio",
    "corner_radius": "corner_radius", "cornerRadius": "corner_radius",
    "tilt": "tilt",
}

_RANGES = {
    "corner_count": (MIN_CORNER_COUNT, None),
    "outer_radius": UNIT_RANGE,
    "inner_radius_ratio": UNIT_RANGE,
    "corner_radius": UNIT_RANGE,
    "tilt": TILT_RANGE,
}


def _clamp(x: float, lo: float | None, hi: float | None) -> tuple[float, str]:
    if lo is not None and x < lo:
        return lo, f"below minimum {lo:g}"
    if hi is not None and x > hi:
        return hi, f"above maximum {hi:g}"
    return x, ""


def clamp_config(raw: Mapping[str, Any] | None = None) -> tuple[ClipPathConfig, list[ConfigWarning]]:
    """Merge *raw* over the defaults and clamp every field into its range.

    Range violations are not errors: the clamped value is used and a
    ConfigWarning is reported. Unknown keys and non-numeric values are
    ignored with a warning. If several aliases name the same field, the last
    one wins. Non-integral corner counts are truncated.
    """
    values = ClipPathConfig()._asdict()
    warnings: list[ConfigWarning] = []
    for key, value in (raw or {}).items():
        field = FIELD_ALIASES.get(key)
        if field is None:
            warnings.append(ConfigWarning(key, value, None, "unknown option"))
            continue
        if isinstance(value, bool):
            warnings.append(ConfigWarning(field, value, None, "not a number"))
            continue
        try:
            x = float(value)
        except (TypeError, ValueError):
            warnings.append(ConfigWarning(field, value, None, "not a number"))
            continue
        if not math.isfinite(x):
            warnings.append(ConfigWarning(field, value, None, "not finite"))
            continue

        applied, reason = _clamp(x, *_RANGES[field])
        if field == "corner_count":
            applied = int(applied)
            if not reason and applied != x:
                reason = "truncated to integer"
        if reason:
            warnings.append(ConfigWarning(field, value, applied, reason))
        values[field] = applied

    for w in warnings:
        if w.applied is None:
            logger.warning("Ignoring option %s=%r: %s", w.field, w.value, w.reason)
        else:
            logger.warning("Option %s=%r %s, using %r", w.field, w.value, w.reason, w.applied)
    return ClipPathConfig(**values), warnings
