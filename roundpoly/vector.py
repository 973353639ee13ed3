"""2D vector arithmetic."""
import math
from typing import NamedTuple


from .errors import DegenerateVectorError


class Vector2(NamedTuple):
    x: float
    y: float

    @classmethod
    def of(cls, p) -> "Vector2":
        """Coerce any (x, y) pair into a Vector2."""
        if isinstance(p, Vector2):
            return p
        return cls(float(p[0]), float(p[1]))

    def add(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x+v.x, self.y+v.y)

    def sub(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x-v.x, self.y-v.y)

    def scale(self, s: float) -> "Vector2":
        return Vector2(self.x*s, self.y*s)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction. Raises DegenerateVectorError for zero length."""
        ln = self.length()
        if ln == 0.0 or not math.isfinite(ln):
            raise DegenerateVectorError(f"Cannot normalize vector ({self.x}, {self.y})")
        return Vector2(self.x/ln, self.y/ln)

    def dot(self, v: "Vector2") -> float:
        return self.x*v.x + self.y*v.y

    def cross(self, v: "Vector2") -> float:
        """2D scalar cross product; only its sign (turn direction) is meaningful."""
        return self.x*v.y - self.y*v.x

    def angle(self, v: "Vector2") -> float:
        """Unsigned angle between self and v in [0, pi]."""
        d = self.normalize().dot(v.normalize())
        return math.acos(max(-1.0, min(1.0, d)))

    def rotate(self, angle: float) -> "Vector2":
        """Rotate clockwise by *angle* radians (y-up axes).

        On a y-down SVG canvas the rotation appears counter-clockwise.
        """
        c = math.cos(angle); s = math.sin(angle)
        return Vector2(c*self.x + s*self.y, c*self.y - s*self.x)
