"""CPU-side mesh data and generators for primitive shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True, slots=True)
class Vertex:
    """Unlit vertex: position and RGBA colour."""

    x: float
    y: float
    z: float
    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True, slots=True)
class LitVertex:
    """Lit vertex: position, normal and RGBA colour."""

    x: float
    y: float
    z: float
    nx: float
    ny: float
    nz: float
    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class Mesh:
    """Vertices plus a triangle-list index array."""

    vertices: list = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    index_32: bool = False

    @property
    def index_count(self) -> int:
        return len(self.indices)


# (normal, corners, shade for the unlit cube) in face order front, back, top,
# bottom, right, left.
_CUBE_FACES = (
    ((0, 0, 1), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5)), None),
    ((0, 0, -1), ((0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5)), 0.8),
    ((0, 1, 0), ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5)), 0.9),
    ((0, -1, 0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5)), 0.6),
    ((1, 0, 0), ((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5)), 0.85),
    ((-1, 0, 0), ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5)), 0.7),
)


def _cube_indices() -> list[int]:
    indices: list[int] = []
    for face in range(len(_CUBE_FACES)):
        base = face * 4
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    return indices


def _shade(channel: int, factor: float | None) -> int:
    if factor is None:
        return channel
    return int(np.float32(channel) * np.float32(factor))


def new_cube(red: int, green: int, blue: int) -> Mesh:
    """Unit cube with per-face shading baked into vertex colours."""
    vertices = [
        Vertex(x, y, z, _shade(red, shade), _shade(green, shade), _shade(blue, shade), 255)
        for _, corners, shade in _CUBE_FACES
        for x, y, z in corners
    ]
    return Mesh(vertices, _cube_indices())


def new_lit_cube(red: int, green: int, blue: int) -> Mesh:
    """Unit cube with face normals and a single colour."""
    vertices = [
        LitVertex(x, y, z, float(nx), float(ny), float(nz), red, green, blue, 255)
        for (nx, ny, nz), corners, _ in _CUBE_FACES
        for x, y, z in corners
    ]
    return Mesh(vertices, _cube_indices())


def new_ground_plane(size: float, red: int, green: int, blue: int) -> Mesh:
    """Upward-facing square spanning ``-size..size`` on X and Z at Y=0."""
    corners = ((-size, size), (size, size), (size, -size), (-size, -size))
    vertices = [
        LitVertex(x, 0.0, z, 0.0, 1.0, 0.0, red, green, blue, 255) for x, z in corners
    ]
    return Mesh(vertices, [0, 1, 2, 0, 2, 3])


def new_sky_dome(
    radius: float,
    horizon_r: int,
    horizon_g: int,
    horizon_b: int,
    zenith_r: int,
    zenith_g: int,
    zenith_b: int,
) -> Mesh:
    """Inward-facing sphere with a horizon-to-zenith colour gradient.

    All normals point down so only ambient light affects it.
    """
    rings, segments = 16, 24
    vertices: list[LitVertex] = []
    for ring in range(rings + 1):
        phi = math.pi * (1.0 - ring / rings)
        y = radius * math.cos(phi)
        ring_radius = radius * math.sin(phi)
        t = ring / rings
        t = t * t * (3 - 2 * t)
        cr = int(horizon_r * (1 - t) + zenith_r * t)
        cg = int(horizon_g * (1 - t) + zenith_g * t)
        cb = int(horizon_b * (1 - t) + zenith_b * t)
        for seg in range(segments + 1):
            theta = 2 * math.pi * seg / segments
            vertices.append(
                LitVertex(
                    ring_radius * math.sin(theta),
                    y,
                    ring_radius * math.cos(theta),
                    0.0,
                    -1.0,
                    0.0,
                    cr,
                    cg,
                    cb,
                    255,
                )
            )

    indices: list[int] = []
    for ring in range(rings):
        for seg in range(segments):
            curr = ring * (segments + 1) + seg
            nxt = curr + segments + 1
            indices.extend((curr, nxt, curr + 1, curr + 1, nxt, nxt + 1))
    return Mesh(vertices, indices)