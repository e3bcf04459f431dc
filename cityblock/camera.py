"""First-person camera, view/projection matrices and view-frustum culling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_PITCH_LIMIT = 89.0


def _vec3(v) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye, target, up) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` toward ``target``."""
    eye, target, up = _vec3(eye), _vec3(target), _vec3(up)
    f = _normalize(target - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(s @ eye)
    m[1, 3] = -float(u @ eye)
    m[2, 3] = float(f @ eye)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return an OpenGL-style perspective matrix; ``fovy`` is in radians."""
    f = 1.0 / math.tan(fovy / 2.0)
    nmf = near - far
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (near + far) / nmf
    m[2, 3] = 2.0 * far * near / nmf
    m[3, 2] = -1.0
    return m


@dataclass
class Camera:
    """A yaw/pitch fly camera; angles are in degrees."""

    aspect_ratio: float
    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 5.0]))
    yaw: float = -90.0
    pitch: float = 0.0
    move_speed: float = 20.0
    look_speed: float = 0.1
    fov: float = 45.0
    near: float = 0.1
    far: float = 1000.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position).copy()

    def forward(self) -> np.ndarray:
        """Unit vector the camera looks along."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        v = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        return _normalize(v)

    def right(self) -> np.ndarray:
        """Unit vector to the camera's right, parallel to the ground."""
        return _normalize(np.cross(self.forward(), _WORLD_UP))

    def up(self) -> np.ndarray:
        """Unit vector pointing up out of the top of the view."""
        return _normalize(np.cross(self.right(), self.forward()))

    def move(self, forward: float, right: float, up: float, delta_time: float) -> None:
        """Move along forward/right and world up, scaled by speed and time."""
        speed = self.move_speed * delta_time
        self.position = (
            self.position
            + self.forward() * (forward * speed)
            + self.right() * (right * speed)
            + np.array([0.0, up * speed, 0.0])
        )

    def look(self, delta_x: float, delta_y: float) -> None:
        """Turn by a mouse delta, clamping pitch to avoid flipping over."""
        self.yaw += delta_x * self.look_speed
        self.pitch -= delta_y * self.look_speed
        self.pitch = min(_PITCH_LIMIT, max(-_PITCH_LIMIT, self.pitch))

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.forward(), _WORLD_UP)

    def projection_matrix(self) -> np.ndarray:
        return perspective(math.radians(self.fov), self.aspect_ratio, self.near, self.far)

    def view_projection_matrix(self) -> np.ndarray:
        return self.projection_matrix() @ self.view_matrix()


@dataclass(frozen=True)
class Plane:
    """Plane ``normal . p + d = 0``; normalised unless degenerate."""

    normal: np.ndarray
    d: float

    def distance(self, point) -> float:
        return float(self.normal @ _vec3(point)) + self.d


def _normalize_plane(row: np.ndarray) -> Plane:
    n = row[:3]
    length = float(np.linalg.norm(n))
    if length < 1e-8:
        return Plane(n.copy(), float(row[3]))
    return Plane(n / length, float(row[3]) / length)


@dataclass(frozen=True)
class Frustum:
    """Six inward-facing planes: left, right, bottom, top, near, far."""

    planes: tuple[Plane, ...]

    def sphere_visible(self, center, radius: float) -> bool:
        """True if the sphere is at least partly inside every plane."""
        c = _vec3(center)
        return all(plane.distance(c) >= -radius for plane in self.planes)


def extract_frustum(vp) -> Frustum:
    """Extract the frustum planes from a view-projection matrix."""
    m = np.asarray(vp, dtype=float).reshape(4, 4)
    r0, r1, r2, r3 = m
    rows = (r3 + r0, r3 - r0, r3 + r1, r3 - r1, r3 + r2, r3 - r2)
    return Frustum(tuple(_normalize_plane(r) for r in rows))