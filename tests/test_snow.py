import random

import pytest

from cityblock.snow import SnowSystem


def _make(count=100, seed=1):
    return SnowSystem(count, random.Random(seed))


def test_initial_particles_within_bounds():
    s = _make()
    assert len(s.particles) == 100
    for p in s.particles:
        assert -s.radius <= p.pos[0] <= s.radius
        assert -s.radius <= p.pos[2] <= s.radius
        assert -s.height_range <= p.pos[1] <= s.height_range
        assert 0.75 <= p.aspect <= 1.0
        assert s.particle_size * 0.5 <= p.size <= s.particle_size * 1.5
        assert -s.fall_speed * 1.4 <= p.vel_y <= -s.fall_speed * 0.6


def test_seeded_systems_are_identical():
    a, b = _make(seed=7), _make(seed=7)
    assert [p.pos for p in a.particles] == [p.pos for p in b.particles]


def test_set_count_shrinks_and_grows():
    s = _make(50)
    first = s.particles[0]
    s.set_count(10)
    assert len(s.particles) == 10
    assert s.particles[0] is first
    s.set_count(25)
    assert len(s.particles) == 25


def test_set_fall_speed_rescales():
    s = _make(20)
    before = [p.vel_y for p in s.particles]
    s.set_fall_speed(s.fall_speed * 2)
    assert [p.vel_y for p in s.particles] == pytest.approx([v * 2 for v in before])


def test_set_particle_size_rescales():
    s = _make(20)
    before = [p.size for p in s.particles]
    s.set_particle_size(s.particle_size / 2)
    assert [p.size for p in s.particles] == pytest.approx([v / 2 for v in before])


def test_update_advances_wind_time_and_falls():
    s = _make(30)
    s.wind_strength = 0.0
    before = [p.pos[1] for p in s.particles]
    s.update(0.01)
    assert s.wind_time == pytest.approx(0.01)
    for old, p in zip(before, s.particles):
        assert p.pos[1] < old


def test_update_keeps_particles_in_box():
    s = _make(200)
    for _ in range(300):
        s.update(0.1)
    for p in s.particles:
        assert p.pos[1] >= -s.height_range
        assert -s.radius - 3 <= p.pos[0] <= s.radius + 3
        assert -s.radius - 3 <= p.pos[2] <= s.radius + 3


def test_moving_center_respawns_around_it():
    s = _make(100)
    s.set_center(1000.0, 0.0, 0.0)
    s.update(0.001)
    for p in s.particles:
        assert 1000.0 - s.radius - 3 <= p.pos[0] <= 1000.0 + s.radius + 3