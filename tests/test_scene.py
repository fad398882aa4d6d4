import math

import numpy as np
import pytest

from rotinterp.rotations import Quaternion, euler_matrix, euler_to_quaternion
from rotinterp.scene import (
    Pose,
    Scene,
    interpolate_angle,
    lerp_position,
    nlerp,
    slerp,
)


def _close_quat(q1, q2):
    return np.allclose(tuple(q1), tuple(q2)) or np.allclose(tuple(q1), tuple(-q2))


def test_interpolate_angle_endpoints():
    assert interpolate_angle(0.3, 1.2, 0.0) == pytest.approx(0.3)
    assert interpolate_angle(0.3, 1.2, 1.0) == pytest.approx(1.2)


def test_interpolate_angle_wraps_shorter_way():
    result = interpolate_angle(3.0, -3.0, 1.0)
    assert math.cos(result) == pytest.approx(math.cos(-3.0))
    assert math.sin(result) == pytest.approx(math.sin(-3.0))
    half = interpolate_angle(3.0, -3.0, 0.5)
    assert half > 3.0


def test_lerp_position():
    mid = lerp_position((0.0, 0.0, 0.0), (2.0, 4.0, -6.0), 0.5)
    assert np.allclose(mid, (1.0, 2.0, -3.0))
    assert np.allclose(lerp_position((1, 2, 3), (4, 5, 6), 0.0), (1, 2, 3))


@pytest.mark.parametrize("method", [nlerp, slerp])
def test_quaternion_interpolation_endpoints(method):
    q1 = euler_to_quaternion(0.1, 0.2, 0.3)
    q2 = euler_to_quaternion(-0.5, 0.4, 1.0)
    assert _close_quat(method(q1, q2, 0.0), q1)
    assert _close_quat(method(q1, q2, 1.0), q2)
    assert method(q1, q2, 0.37).norm() == pytest.approx(1.0)


def test_slerp_midpoint_about_z():
    q1 = Quaternion()
    q2 = euler_to_quaternion(0.0, 0.0, math.pi / 2)
    mid = slerp(q1, q2, 0.5)
    expected = euler_to_quaternion(0.0, 0.0, math.pi / 4)
    assert abs(mid.dot(expected)) == pytest.approx(1.0)
    assert np.allclose(mid.to_matrix(), expected.to_matrix())


def test_slerp_identical_quaternions():
    q = euler_to_quaternion(0.4, -0.2, 0.9)
    result = slerp(q, q, 0.5)
    assert abs(result.dot(q)) == pytest.approx(1.0)
    assert np.allclose(result.to_matrix(), q.to_matrix())


def test_interpolation_takes_shorter_arc():
    q = euler_to_quaternion(0.4, -0.2, 0.9)
    linear = nlerp(q, -q, 0.5)
    spherical = slerp(q, -q, 0.5)
    assert abs(linear.dot(q)) == pytest.approx(1.0)
    assert abs(spherical.dot(q)) == pytest.approx(1.0)
    assert np.allclose(linear.to_matrix(), q.to_matrix())
    assert np.allclose(spherical.to_matrix(), q.to_matrix())


def _scene(use_quaternions=True, duration=2.0):
    scene = Scene(use_quaternions)
    scene.start_pose = Pose((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), Quaternion())
    scene.end_pose = Pose(
        (2.0, 4.0, 6.0), (0.0, 0.0, 1.0), euler_to_quaternion(0.0, 0.0, 1.0)
    )
    scene.duration = duration
    return scene


def test_update_without_duration_does_nothing():
    scene = _scene(duration=0.0)
    scene.start()
    scene.update(1.0)
    assert np.allclose(scene.cursor.position, (0.0, 0.0, 0.0))
    assert scene.elapsed == 0.0


def test_update_progresses_and_clamps():
    scene = _scene()
    scene.start()
    scene.update(1.0)
    assert np.allclose(scene.cursor.position, (1.0, 2.0, 3.0))
    scene.update(5.0)
    assert np.allclose(scene.cursor.position, (2.0, 4.0, 6.0))
    assert scene.elapsed == pytest.approx(scene.duration)
    assert np.allclose(scene.cursor.rotation, euler_to_quaternion(0, 0, 1.0).to_matrix())


def test_euler_scene_rotation():
    scene = _scene(use_quaternions=False)
    scene.start()
    scene.update(2.0)
    assert np.allclose(scene.cursor.rotation, euler_matrix((0.0, 0.0, 1.0)))


def test_spherical_and_linear_agree_at_end():
    linear = _scene()
    spherical = _scene()
    spherical.use_spherical = True
    for scene in (linear, spherical):
        scene.start()
        scene.update(2.0)
    assert np.allclose(linear.cursor.rotation, spherical.cursor.rotation)


def test_start_places_cursor_at_start_pose():
    scene = _scene()
    scene.start_pose = Pose((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), euler_to_quaternion(0.3, 0, 0))
    scene.elapsed = 1.5
    scene.start()
    assert scene.elapsed == 0.0
    assert np.allclose(scene.cursor.position, (1.0, 1.0, 1.0))
    assert np.allclose(scene.cursor.rotation, euler_matrix((0.3, 0.0, 0.0)))


def test_samples_cover_start_and_end_and_restore_cursor():
    scene = _scene()
    scene.start()
    scene.update(0.5)
    saved = scene.cursor.position.copy()
    frames = scene.samples(3)
    assert len(frames) == 5
    assert np.allclose(frames[0].position, (0.0, 0.0, 0.0))
    assert np.allclose(frames[-1].position, (2.0, 4.0, 6.0))
    assert np.allclose(scene.cursor.position, saved)


def test_samples_negative_frames():
    scene = _scene()
    assert len(scene.samples(-4)) == 2