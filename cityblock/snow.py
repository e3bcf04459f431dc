"""A snowfall particle system that follows a moving centre."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field


@dataclass
class Particle:
    """One snowflake."""

    pos: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    vel_y: float = 0.0
    phase: float = 0.0
    size: float = 0.0
    aspect: float = 1.0


class SnowSystem:
    """Snowflakes drifting in a box around a centre point."""

    def __init__(self, count: int = 200, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.wind_time = 0.0
        self.wind_strength = 0.4
        self.fall_speed = 1.5
        self.particle_size = 0.06
        self.radius = 30.0
        self.height_range = 15.0
        self.center_x = 0.0
        self.center_y = 0.0
        self.center_z = 0.0
        self.particles: list[Particle] = []
        for _ in range(count):
            p = Particle()
            self._spawn(p, random_y=True)
            self.particles.append(p)

    def _spawn(self, p: Particle, random_y: bool) -> None:
        rand = self._rng.random
        p.pos = [
            self.center_x - self.radius + rand() * 2 * self.radius,
            0.0,
            self.center_z - self.radius + rand() * 2 * self.radius,
        ]
        min_y = self.center_y - self.height_range
        max_y = self.center_y + self.height_range
        if random_y:
            p.pos[1] = min_y + rand() * (max_y - min_y)
        else:
            p.pos[1] = max_y + rand() * 3
        p.vel_y = -(self.fall_speed * (0.6 + rand() * 0.8))
        p.phase = rand() * math.pi * 2
        p.size = self.particle_size * (0.5 + rand())
        p.aspect = 0.75 + rand() * 0.25

    def set_fall_speed(self, speed: float) -> None:
        """Change the base fall speed, rescaling every particle's speed."""
        if speed == self.fall_speed:
            return
        old, self.fall_speed = self.fall_speed, speed
        for p in self.particles:
            p.vel_y = p.vel_y / old * speed

    def set_particle_size(self, size: float) -> None:
        """Change the base size, rescaling every particle."""
        if size == self.particle_size:
            return
        old, self.particle_size = self.particle_size, size
        for p in self.particles:
            p.size = p.size / old * size

    def set_count(self, count: int) -> None:
        """Drop particles or spawn new ones to reach ``count``."""
        old = len(self.particles)
        if count <= old:
            del self.particles[count:]
            return
        for _ in range(count - old):
            p = Particle()
            self._spawn(p, random_y=True)
            self.particles.append(p)

    def set_center(self, x: float, y: float, z: float) -> None:
        self.center_x, self.center_y, self.center_z = x, y, z

    def update(self, dt: float) -> None:
        """Move particles by wind and gravity, respawning any that leave the box."""
        self.wind_time += dt
        ws = self.wind_strength
        t = self.wind_time
        min_x = self.center_x - self.radius
        max_x = self.center_x + self.radius
        min_z = self.center_z - self.radius
        max_z = self.center_z + self.radius
        min_y = self.center_y - self.height_range

        for p in self.particles:
            wind_x = ws * (
                math.sin(t * 0.7 + p.phase) + 0.5 * math.sin(t * 1.3 + p.phase * 1.7)
            )
            wind_z = ws * 0.3 * math.sin(t * 0.5 + p.phase * 2.1)
            p.pos[0] += wind_x * dt
            p.pos[1] += p.vel_y * dt
            p.pos[2] += wind_z * dt

            if p.pos[1] < min_y:
                self._spawn(p, random_y=False)
            elif not (
                min_x - 3 <= p.pos[0] <= max_x + 3 and min_z - 3 <= p.pos[2] <= max_z + 3
            ):
                self._spawn(p, random_y=True)