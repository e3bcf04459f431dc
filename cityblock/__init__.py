"""City scene geometry: footprint extrusion, ground slabs, meshes, signs, snow and camera culling."""

__version__ = "0.1.0"

__all__ = [
    "building",
    "camera",
    "geometry",
    "ground",
    "mesh",
    "sign",
    "snow",
    "style",
]