[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cityblock"
version = "0.1.0"
description = "City scene geometry on the CPU: footprint extrusion, ground slabs, primitive meshes, street signs, snow particles, camera and frustum culling"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["gis", "city", "mesh", "extrusion", "triangulation", "ear-clipping", "frustum", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cityblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
