"""Shared test fixtures for rounded polygon tests."""
import pytest
from roundpoly import RoundedPolygon, Vector2


@pytest.fixture(scope="session")
def diamond_vertices():
    """Unit square rotated 45 degrees."""
    return [(1, 0), (0, 1), (-1, 0), (0, -1)]


@pytest.fixture(scope="session")
def square_vertices():
    return [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture(scope="session")
def triangle_vertices():
    """3-4-5 right triangle; its incircle has radius 1 and center (1, 1)."""
    return [(0, 0), (4, 0), (0, 3)]


@pytest.fixture(scope="session")
def star_vertices():
    """5-corner star, outer radius 1, inner radius 0.4 (reflex inner corners)."""
    from clippath.star import star_vertices
    return star_vertices(5, 1.0, 0.4, 0.0)


@pytest.fixture(scope="session")
def diamond(diamond_vertices):
    return RoundedPolygon.from_vertices(diamond_vertices, 1.0)


@pytest.fixture(scope="session")
def square(square_vertices):
    return RoundedPolygon.from_vertices(square_vertices, 1.0)


@pytest.fixture(scope="session")
def triangle(triangle_vertices):
    return RoundedPolygon.from_vertices(triangle_vertices, 1.0)


def close(p, q, tol=1e-9):
    """True if two (x, y) points agree within tol."""
    p = Vector2.of(p); q = Vector2.of(q)
    return abs(p.x - q.x) < tol and abs(p.y - q.y) < tol
