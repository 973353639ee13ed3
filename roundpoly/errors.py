"""Error types raised by the rounded polygon engine."""


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class DegenerateVectorError(GeometryError):
    """Zero-length vector passed to normalize or angle."""


class DegenerateCornerError(GeometryError):
    """Corner angle of 0 or pi; the bisector is undefined."""


class InvalidVertexCountError(GeometryError):
    """Polygon with fewer than 3 vertices."""
