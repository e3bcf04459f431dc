import math

import numpy as np
import pytest

from cityblock.camera import Camera, extract_frustum, look_at, perspective


def test_default_camera_looks_toward_negative_z():
    cam = Camera(16 / 9)
    assert np.allclose(cam.forward(), [0, 0, -1], atol=1e-9)


def test_basis_is_orthonormal():
    cam = Camera(1.5, yaw=33.0, pitch=-20.0)
    f, r, u = cam.forward(), cam.right(), cam.up()
    for v in (f, r, u):
        assert math.isclose(np.linalg.norm(v), 1.0, rel_tol=1e-9)
    assert abs(f @ r) < 1e-9
    assert abs(f @ u) < 1e-9
    assert abs(r @ u) < 1e-9
    assert abs(r[1]) < 1e-9


def test_pitch_is_clamped():
    cam = Camera(1.0)
    cam.look(0, -100000)
    assert cam.pitch == 89.0
    cam.look(0, 100000)
    assert cam.pitch == -89.0


def test_look_changes_yaw_by_look_speed():
    cam = Camera(1.0)
    cam.look(100, 0)
    assert math.isclose(cam.yaw, -90.0 + 100 * cam.look_speed)


def test_move_forward_travels_speed_times_time():
    cam = Camera(1.0)
    start = cam.position.copy()
    fwd = cam.forward()
    cam.move(1, 0, 0, 0.5)
    delta = cam.position - start
    assert np.allclose(delta, fwd * cam.move_speed * 0.5)


def test_move_up_is_world_vertical():
    cam = Camera(1.0, pitch=30.0)
    start = cam.position.copy()
    cam.move(0, 0, 1, 1.0)
    assert np.allclose(cam.position - start, [0, cam.move_speed, 0])


def test_view_matrix_puts_camera_at_origin():
    cam = Camera(1.0, position=[3.0, 4.0, -7.0], yaw=12.0, pitch=5.0)
    v = cam.view_matrix() @ np.append(cam.position, 1.0)
    assert np.allclose(v, [0, 0, 0, 1])
    ahead = cam.view_matrix() @ np.append(cam.position + cam.forward() * 10, 1.0)
    assert np.allclose(ahead[:3], [0, 0, -10])


def test_look_at_rotation_is_orthonormal():
    m = look_at([1, 2, 3], [4, 0, -2], [0, 1, 0])
    rot = m[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 1000.0
    p = perspective(math.radians(45), 1.0, near, far)
    for z, expected in ((-near, -1.0), (-far, 1.0)):
        clip = p @ np.array([0.0, 0.0, z, 1.0])
        assert math.isclose(clip[2] / clip[3], expected, rel_tol=1e-6)


def test_identity_frustum_is_unit_cube():
    frustum = extract_frustum(np.identity(4))
    assert len(frustum.planes) == 6
    for plane in frustum.planes:
        assert math.isclose(np.linalg.norm(plane.normal), 1.0)
    assert frustum.sphere_visible([0, 0, 0], 0.1)
    assert frustum.sphere_visible([1.5, 0, 0], 1.0)
    assert not frustum.sphere_visible([5, 0, 0], 1.0)
    assert not frustum.sphere_visible([0, 0, -3], 0.5)


def test_camera_frustum_culls_behind():
    cam = Camera(1.0)
    frustum = extract_frustum(cam.view_projection_matrix())
    front = cam.position + cam.forward() * 50
    behind = cam.position - cam.forward() * 50
    assert frustum.sphere_visible(front, 1.0)
    assert not frustum.sphere_visible(behind, 1.0)
    beyond = cam.position + cam.forward() * (cam.far + 100)
    assert not frustum.sphere_visible(beyond, 1.0)


@pytest.mark.parametrize("yaw", [0.0, 45.0, 180.0, 270.0])
def test_frustum_contains_point_ahead_any_yaw(yaw):
    cam = Camera(1.0, yaw=yaw)
    frustum = extract_frustum(cam.view_projection_matrix())
    assert frustum.sphere_visible(cam.position + cam.forward() * 20, 0.0)