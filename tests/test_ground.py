import math

import pytest

from cityblock.geometry import Point2D, SurfacePolygon
from cityblock.ground import SurfaceType, flatten

SQUARE = SurfacePolygon(
    rings=[[Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)]]
)

L_SHAPE = SurfacePolygon(
    rings=[
        [
            Point2D(0, 0),
            Point2D(20, 0),
            Point2D(20, 10),
            Point2D(10, 10),
            Point2D(10, 20),
            Point2D(0, 20),
        ]
    ]
)


def _cross(o, a, b):
    return (a.x - o.x) * (b.z - o.z) - (a.z - o.z) * (b.x - o.x)


def test_square_position_and_radius():
    mesh, pos, radius = flatten(SQUARE, SurfaceType.ROADBED)
    assert pos == pytest.approx((5.0, 0.01, 5.0))
    assert radius == pytest.approx(math.sqrt(50))
    assert len(mesh.vertices) == 4
    assert mesh.index_count == 6


@pytest.mark.parametrize(
    "kind, color, y",
    [
        (SurfaceType.ROADBED, (45, 42, 40), 0.01),
        (SurfaceType.SIDEWALK, (70, 65, 60), 0.05),
        (SurfaceType.PARK, (35, 50, 35), 0.10),
    ],
)
def test_colors_and_offsets(kind, color, y):
    mesh, pos, _ = flatten(SQUARE, kind)
    assert pos[1] == pytest.approx(y)
    assert all((v.r, v.g, v.b, v.a) == (*color, 255) for v in mesh.vertices)


def test_vertices_are_centered_and_face_up():
    mesh, _, _ = flatten(L_SHAPE, SurfaceType.PARK)
    assert sum(v.x for v in mesh.vertices) == pytest.approx(0.0)
    assert sum(v.z for v in mesh.vertices) == pytest.approx(0.0)
    assert all((v.y, v.nx, v.ny, v.nz) == (0.0, 0.0, 1.0, 0.0) for v in mesh.vertices)


def test_triangles_are_wound_clockwise_on_the_ground_plane():
    mesh, _, _ = flatten(L_SHAPE, SurfaceType.SIDEWALK)
    pts = [Point2D(v.x, v.z) for v in mesh.vertices]
    assert mesh.index_count == 3 * (len(pts) - 2)
    for i in range(0, mesh.index_count, 3):
        a, b, c = (pts[j] for j in mesh.indices[i : i + 3])
        assert _cross(a, b, c) < 0


def test_triangle_area_covers_polygon():
    mesh, _, _ = flatten(L_SHAPE, SurfaceType.ROADBED)
    pts = [Point2D(v.x, v.z) for v in mesh.vertices]
    total = sum(
        abs(_cross(*(pts[j] for j in mesh.indices[i : i + 3]))) / 2
        for i in range(0, mesh.index_count, 3)
    )
    assert total == pytest.approx(300.0)


def test_accepts_plain_int_surface_type():
    _, pos, _ = flatten(SQUARE, 2)
    assert pos[1] == pytest.approx(SurfaceType.PARK.y_offset)


def test_too_few_vertices():
    poly = SurfacePolygon(rings=[[Point2D(0, 0), Point2D(1, 0)]])
    with pytest.raises(ValueError, match="fewer than 3"):
        flatten(poly, SurfaceType.ROADBED)


def test_no_rings():
    with pytest.raises(ValueError):
        flatten(SurfacePolygon(rings=[]), SurfaceType.ROADBED)


def test_invalid_surface_type():
    with pytest.raises(ValueError):
        flatten(SQUARE, 7)