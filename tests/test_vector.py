"""Tests for roundpoly/vector.py."""
import math
import pytest
from roundpoly.errors import DegenerateVectorError, GeometryError
from roundpoly.vector import Vector2


# --- arithmetic ---

def test_add_sub_scale():
    a = Vector2(1, 2); b = Vector2(3, -1)
    assert a.add(b) == (4, 1)
    assert a.sub(b) == (-2, 3)
    assert a.scale(2.5) == (2.5, 5.0)


def test_operations_return_new_vectors():
    a = Vector2(1, 2)
    a.add(Vector2(1, 1))
    assert a == (1, 2)


def test_of_coerces_pairs():
    v = Vector2.of((3, 4))
    assert isinstance(v, Vector2)
    assert v.x == 3.0 and v.y == 4.0
    assert Vector2.of(v) is v


def test_length():
    assert abs(Vector2(3, 4).length() - 5.0) < 1e-12


def test_dot_cross():
    assert Vector2(1, 2).dot(Vector2(3, 4)) == 11
    assert Vector2(1, 0).cross(Vector2(0, 1)) == 1
    assert Vector2(0, 1).cross(Vector2(1, 0)) == -1


# --- normalize / angle ---

def test_normalize():
    n = Vector2(0, -5).normalize()
    assert abs(n.x) < 1e-12
    assert abs(n.y + 1.0) < 1e-12


def test_normalize_zero_raises():
    with pytest.raises(DegenerateVectorError, match="normalize"):
        Vector2(0, 0).normalize()


def test_degenerate_vector_is_geometry_error():
    assert issubclass(DegenerateVectorError, GeometryError)
    assert issubclass(GeometryError, ValueError)


def test_angle_right():
    assert abs(Vector2(2, 0).angle(Vector2(0, 3)) - math.pi/2) < 1e-12


def test_angle_is_unsigned():
    assert abs(Vector2(1, 0).angle(Vector2(0, -1)) - math.pi/2) < 1e-12


def test_angle_parallel_clamped():
    # normalized dot can land a hair above 1.0
    v = Vector2(1e8, 1)
    a = v.angle(v.scale(3))
    assert 0.0 <= a < 1e-7


def test_angle_antiparallel():
    assert abs(Vector2(1, 1).angle(Vector2(-2, -2)) - math.pi) < 1e-7


def test_angle_zero_raises():
    with pytest.raises(DegenerateVectorError):
        Vector2(1, 0).angle(Vector2(0, 0))


# --- rotate ---

def test_rotate_quarter_turn():
    r = Vector2(1, 0).rotate(math.pi/2)
    assert abs(r.x) < 1e-12
    assert abs(r.y + 1.0) < 1e-12


def test_rotate_keeps_length():
    r = Vector2(3, 4).rotate(1.234)
    assert abs(r.length() - 5.0) < 1e-12
