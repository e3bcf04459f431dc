"""Flat ground-surface meshes (roadbed, sidewalk, park) from polygons."""

from __future__ import annotations

import math
from enum import IntEnum

from .geometry import Point2D, SurfacePolygon, triangulate
from .mesh import LitVertex, Mesh

_MAX_VERTICES = 65535


class SurfaceType(IntEnum):
    """Kinds of ground surface, each with its own colour and height."""

    ROADBED = 0
    SIDEWALK = 1
    PARK = 2

    @property
    def color(self) -> tuple[int, int, int]:
        return _COLORS[self]

    @property
    def y_offset(self) -> float:
        return _Y_OFFSETS[self]


_COLORS = {
    SurfaceType.ROADBED: (45, 42, 40),
    SurfaceType.SIDEWALK: (70, 65, 60),
    SurfaceType.PARK: (35, 50, 35),
}

_Y_OFFSETS = {
    SurfaceType.ROADBED: 0.01,
    SurfaceType.SIDEWALK: 0.05,
    SurfaceType.PARK: 0.10,
}


def flatten(
    poly: SurfacePolygon, surf_type: SurfaceType
) -> tuple[Mesh, tuple[float, float, float], float]:
    """Build an upward-facing, centroid-relative mesh for a surface polygon.

    Returns the mesh, its world position (centroid raised by the surface's
    Y offset) and its bounding radius on the ground plane. Raises
    ``ValueError`` if the polygon cannot be meshed.
    """
    surf_type = SurfaceType(surf_type)
    if not poly.rings or len(poly.rings[0]) < 3:
        raise ValueError("surface polygon has fewer than 3 vertices")
    outer = poly.rings[0]
    n = len(outer)

    cx = sum(p.x for p in outer) / n
    cz = sum(p.z for p in outer) / n
    red, green, blue = surf_type.color

    centered = [Point2D(p.x - cx, p.z - cz) for p in outer]
    radius = math.sqrt(max(p.x * p.x + p.z * p.z for p in centered))

    vertices = [
        LitVertex(p.x, 0.0, p.z, 0.0, 1.0, 0.0, red, green, blue, 255) for p in centered
    ]

    tri = triangulate(centered)
    if not tri:
        raise ValueError("triangulation produced no triangles")

    # Reverse winding so the faces point up when seen from above.
    indices: list[int] = []
    for a, b, c in zip(tri[0::3], tri[1::3], tri[2::3]):
        indices.extend((a, c, b))

    if len(vertices) > _MAX_VERTICES:
        raise ValueError(
            f"surface exceeds uint16 vertex limit ({len(vertices)} vertices)"
        )

    position = (cx, surf_type.y_offset, cz)
    return Mesh(vertices, indices), position, radius