"""Clip path option defaults, valid ranges, and output constants.

Radii are fractions of half the viewport; tilt is in degrees.
"""

# Option defaults
DEFAULT_CORNER_COUNT = 4
DEFAULT_OUTER_RADIUS = 1.0          # 100% of the available space
DEFAULT_INNER_RADIUS_RATIO = 0.4    # inner radius / outer radius
DEFAULT_CORNER_RADIUS = 1.0         # fraction of the maximal corner radius
DEFAULT_TILT = 0.0                  # degrees

# Valid ranges (None = unbounded)
MIN_CORNER_COUNT = 3
UNIT_RANGE = (0.0, 1.0)
TILT_RANGE = (0.0, 360.0)

# Output
VIEWPORT_SIZE = 1.0                 # clipPathUnits="objectBoundingBox"
PATH_PRECISION = 4                  # decimals in path data
SIZE_MARGIN = 0.99                  # keeps the shape off the viewport edge
ID_PREFIX = "rounded-polygon-clip-path"

# Preview document
PREVIEW_SIZE = 200                  # px
PREVIEW_FILL = "#4682B4"
