"""Planar geometry, projection and the record types shared by the map data code."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

METERS_PER_DEG_LAT = 111_320.0


@dataclass(frozen=True, slots=True)
class Point2D:
    """A point on the ground plane, in world meters."""

    x: float
    z: float


@dataclass(frozen=True)
class Projection:
    """Equirectangular projection of WGS84 lat/lon onto local meters."""

    ref_lat: float
    ref_lon: float
    cos_lat: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cos_lat", math.cos(math.radians(self.ref_lat)))

    def to_local(self, lat: float, lon: float) -> Point2D:
        """Project a latitude/longitude pair to local X/Z meters."""
        x = -(lon - self.ref_lon) * METERS_PER_DEG_LAT * self.cos_lat
        z = (lat - self.ref_lat) * METERS_PER_DEG_LAT
        return Point2D(x, z)


@dataclass
class PLUTOData:
    """Building attributes from the PLUTO land-use dataset."""

    bldg_class: str = ""
    land_use: str = ""
    year_built: int = 0
    num_floors: float = 0.0


@dataclass
class Footprint:
    """A projected building footprint: outer ring first (CCW), then holes (CW)."""

    rings: list[list[Point2D]]
    height: float
    bbl: str = ""
    pluto: PLUTOData = field(default_factory=PLUTOData)


@dataclass(frozen=True)
class DatasetConfig:
    """Describes an open-data resource queried by bounding box."""

    endpoint: str
    geom_column: str
    extra_select: str = ""
    cache_prefix: str = ""


@dataclass
class SurfacePolygon:
    """A ground-level polygon: outer ring (CCW), then holes (CW)."""

    rings: list[list[Point2D]]
    name: str = ""
    kind: str = ""


@dataclass
class StreetSegment:
    """A projected street centerline with its traffic direction and label."""

    points: list[Point2D]
    traf_dir: str = ""
    name: str = ""


@dataclass
class PointLocation:
    """A projected point with optional string attributes."""

    point: Point2D
    fields: dict[str, str] = field(default_factory=dict)


def _signed_area2(points: Sequence[Point2D]) -> float:
    n = len(points)
    return sum(
        points[i].x * points[(i + 1) % n].z - points[(i + 1) % n].x * points[i].z
        for i in range(n)
    )


def is_ccw(points: Sequence[Point2D]) -> bool:
    """Return True if the ring winds counter-clockwise (positive shoelace area)."""
    return _signed_area2(points) > 0


def build_rings(
    rings: Iterable[Iterable[Sequence[float]]], proj: Projection
) -> list[list[Point2D]]:
    """Project raw ``[lon, lat]`` rings and normalise their winding.

    The closing duplicate vertex is dropped, rings with fewer than three
    points are skipped, the first ring is made CCW and the others CW.
    """
    result: list[list[Point2D]] = []
    for i, ring in enumerate(rings):
        pts = [proj.to_local(coord[1], coord[0]) for coord in ring]
        if len(pts) > 1 and pts[0] == pts[-1]:
            pts.pop()
        if len(pts) < 3:
            continue
        want_ccw = i == 0
        if is_ccw(pts) != want_ccw:
            pts.reverse()
        result.append(pts)
    return result


def _cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    return (a.x - o.x) * (b.z - o.z) - (a.z - o.z) * (b.x - o.x)


def _point_in_triangle(p: Point2D, a: Point2D, b: Point2D, c: Point2D) -> bool:
    d = (_cross(a, b, p), _cross(b, c, p), _cross(c, a, p))
    has_neg = any(v < 0 for v in d)
    has_pos = any(v > 0 for v in d)
    return not (has_neg and has_pos)


def triangulate(points: Sequence[Point2D]) -> list[int]:
    """Ear-clip a CCW polygon, returning a flat list of triangle indices.

    If no ear can be found (degenerate or wrongly wound input), the
    remaining vertices are emitted as a fan.
    """
    if len(points) < 3:
        return []

    active = list(range(len(points)))
    indices: list[int] = []

    while len(active) > 2:
        m = len(active)
        for i, curr in enumerate(active):
            prev = active[i - 1]
            nxt = active[(i + 1) % m]
            a, b, c = points[prev], points[curr], points[nxt]
            if _cross(a, b, c) <= 0:
                continue
            neighbours = {(i - 1) % m, i, (i + 1) % m}
            if any(
                _point_in_triangle(points[v], a, b, c)
                for j, v in enumerate(active)
                if j not in neighbours
            ):
                continue
            indices.extend((prev, curr, nxt))
            del active[i]
            break
        else:
            first = active[0]
            for u, v in zip(active[1:-1], active[2:]):
                indices.extend((first, u, v))
            break

    return indices