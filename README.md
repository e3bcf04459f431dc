# cityblock

Geometry for a small city scene, built entirely on the CPU. Building
footprints given as projected polygons are extruded into lit meshes, ground
polygons are flattened into coloured slabs, street-name signs are drawn with
a 3x5 pixel font, snowflakes drift around a moving centre, and a fly camera
produces view/projection matrices and frustum planes for culling. Results
are plain Python data (vertex lists, index lists) and numpy matrices, ready
to hand to any renderer.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cityblock.geometry`: `Point2D`; `Projection`, which maps WGS84
  latitude/longitude to local metres with `to_local(lat, lon)`; the record
  types `PLUTOData`, `Footprint`, `DatasetConfig`, `SurfacePolygon`,
  `StreetSegment` and `PointLocation`; `is_ccw`; `build_rings`, which
  projects raw `[lon, lat]` rings, drops the closing duplicate, skips rings
  under three points and makes the outer ring CCW and holes CW; and
  `triangulate`, an ear-clipper that falls back to a fan for degenerate
  input.
- `cityblock.building`: `RawMesh`; `extrude_raw` builds walls and a flat
  roof relative to the footprint's centroid and returns its position and
  bounding radius; `to_mesh` and `extrude` wrap the result as a `Mesh`;
  `merge_meshes` combines several raw meshes into one world-space mesh with
  32-bit indices. Bad input raises `ValueError`.
- `cityblock.style`: `Color` and `style_color`, which picks a building
  colour from the first letter of the PLUTO building class, then from land
  use, then a neutral default.
- `cityblock.ground`: `SurfaceType` (`ROADBED`, `SIDEWALK`, `PARK`, each
  with a `color` and `y_offset`) and `flatten`, which returns an
  upward-facing mesh, its position and its radius, or raises `ValueError`.
- `cityblock.mesh`: `Vertex`, `LitVertex`, `Mesh` (with `index_count` and
  `index_32`), and the primitives `new_cube`, `new_lit_cube`,
  `new_ground_plane` and `new_sky_dome`.
- `cityblock.camera`: `Camera` (yaw/pitch in degrees, `move`, `look`,
  `view_matrix`, `projection_matrix`, `view_projection_matrix`),
  `look_at`, `perspective`, `Plane`, `Frustum` and `extract_frustum`.
- `cityblock.snow`: `Particle` and `SnowSystem`, with `set_center`,
  `update`, `set_count`, `set_fall_speed` and `set_particle_size`; pass a
  `random.Random` as `rng` for repeatable runs.
- `cityblock.sign`: `new_mesh(text)` returns a double-sided sign mesh and
  its width in metres.

## Examples

```python
from cityblock.geometry import Footprint, Point2D
from cityblock.building import extrude_raw
from cityblock.style import style_color

square = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)]
fp = Footprint(rings=[square], height=30.0, bbl="1000010001")
c = style_color(fp.pluto)
raw = extrude_raw(fp, c.r, c.g, c.b)
print(raw.position, raw.radius, len(raw.indices))  # (5.0, 0.0, 5.0) ... 30
```

```python
from cityblock.camera import Camera, extract_frustum

cam = Camera(aspect_ratio=16 / 9)
frustum = extract_frustum(cam.view_projection_matrix())
print(frustum.sphere_visible((0.0, 0.0, 0.0), 1.0))  # True
```

```python
from cityblock.geometry import Projection, build_rings

proj = Projection(40.72, -74.0)
rings = build_rings([[[-74.0, 40.72], [-73.999, 40.72], [-73.999, 40.721], [-74.0, 40.72]]], proj)
```

## What it does not do

- It does not download anything. Footprints, surface polygons, street
  segments and points must be built by the caller (for instance with
  `Projection` and `build_rings` on GeoJSON coordinates already in hand).
- It has no scene container, spatial grid or traffic-signal model.
- It opens no window, talks to no GPU and reads no keyboard or mouse; there
  is no command to run. It only produces mesh data and matrices.