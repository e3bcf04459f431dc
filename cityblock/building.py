"""Extrusion of building footprints into lit meshes, and per-cell merging."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from .geometry import Footprint, Point2D, triangulate
from .mesh import LitVertex, Mesh

_MAX_VERTICES = 65535


@dataclass
class RawMesh:
    """Centroid-relative vertex and index data for one building."""

    vertices: list[LitVertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 0.0


def extrude_raw(fp: Footprint, red: int, green: int, blue: int) -> RawMesh:
    """Build walls and a flat roof for a footprint, relative to its centroid.

    Raises ``ValueError`` if the outer ring has fewer than three points or
    the result would not fit 16-bit indices.
    """
    if not fp.rings or len(fp.rings[0]) < 3:
        raise ValueError("footprint has fewer than 3 vertices")
    outer = fp.rings[0]
    n = len(outer)

    cx = sum(p.x for p in outer) / n
    cz = sum(p.z for p in outer) / n
    height = fp.height

    centered = [Point2D(p.x - cx, p.z - cz) for p in outer]
    xz_radius = math.sqrt(max(p.x * p.x + p.z * p.z for p in centered))
    bound_radius = math.sqrt(xz_radius * xz_radius + height * height)

    def vertex(x: float, y: float, z: float, nx: float, ny: float, nz: float) -> LitVertex:
        return LitVertex(x, y, z, nx, ny, nz, red, green, blue, 255)

    vertices: list[LitVertex] = []
    indices: list[int] = []

    for a, b in zip(centered, centered[1:] + centered[:1]):
        nx, nz = b.z - a.z, -(b.x - a.x)
        length = math.hypot(nx, nz)
        if length > 0:
            nx, nz = nx / length, nz / length
        base = len(vertices)
        vertices.extend(
            (
                vertex(a.x, 0.0, a.z, nx, 0.0, nz),
                vertex(b.x, 0.0, b.z, nx, 0.0, nz),
                vertex(b.x, height, b.z, nx, 0.0, nz),
                vertex(a.x, height, a.z, nx, 0.0, nz),
            )
        )
        indices.extend((base, base + 2, base + 1, base, base + 3, base + 2))

    roof_base = len(vertices)
    vertices.extend(vertex(p.x, height, p.z, 0.0, 1.0, 0.0) for p in centered)

    roof = triangulate(centered)
    for i0, i1, i2 in zip(roof[0::3], roof[1::3], roof[2::3]):
        indices.extend((roof_base + i0, roof_base + i2, roof_base + i1))

    if len(vertices) > _MAX_VERTICES:
        raise ValueError(
            f"building exceeds uint16 vertex limit ({len(vertices)} vertices)"
        )

    return RawMesh(vertices, indices, (cx, 0.0, cz), bound_radius)


def to_mesh(raw: RawMesh) -> Mesh:
    """Wrap raw building data as a 16-bit indexed mesh."""
    return Mesh(list(raw.vertices), list(raw.indices))


def extrude(
    fp: Footprint, red: int, green: int, blue: int
) -> tuple[Mesh, tuple[float, float, float], float]:
    """Extrude a footprint; return its mesh, centroid position and bounding radius."""
    raw = extrude_raw(fp, red, green, blue)
    return to_mesh(raw), raw.position, raw.radius


def merge_meshes(raws: Iterable[RawMesh]) -> Mesh:
    """Combine raw meshes into one world-space mesh with 32-bit indices.

    Raises ``ValueError`` if there are no vertices to merge.
    """
    vertices: list[LitVertex] = []
    indices: list[int] = []
    for raw in raws:
        base = len(vertices)
        cx, cz = raw.position[0], raw.position[2]
        vertices.extend(
            dataclasses.replace(v, x=v.x + cx, z=v.z + cz) for v in raw.vertices
        )
        indices.extend(base + idx for idx in raw.indices)
    if not vertices:
        raise ValueError("no vertices to merge")
    return Mesh(vertices, indices, index_32=True)