"""Timed interpolation of a cursor between two poses."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .geometry import Cursor
from .rotations import Quaternion, euler_matrix

log = logging.getLogger(__name__)

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Pose:
    """Position with orientation given both as Euler angles and as a quaternion."""

    position: Vector3 = (0.0, 0.0, 0.0)
    euler: Vector3 = (0.0, 0.0, 0.0)
    quaternion: Quaternion = Quaternion()


def interpolate_angle(a0: float, a1: float, t: float) -> float:
    """Interpolate from ``a0`` towards ``a1`` along the shorter way round."""
    delta = math.fmod(a1 - a0 + math.pi, 2.0 * math.pi)
    if delta < 0:
        delta += 2.0 * math.pi
    delta -= math.pi
    return a0 + delta * t


def lerp_position(start: Iterable[float], end: Iterable[float], alpha: float) -> np.ndarray:
    """Component-wise linear interpolation of two points."""
    s = np.asarray(start, dtype=float)
    e = np.asarray(end, dtype=float)
    return s + (e - s) * alpha


def _same_hemisphere(q1: Quaternion, q2: Quaternion) -> tuple[Quaternion, float]:
    dot = q1.dot(q2)
    if dot < 0.0:
        return -q2, -dot
    return q2, dot


def nlerp(q1: Quaternion, q2: Quaternion, alpha: float) -> Quaternion:
    """Normalized linear interpolation along the shorter arc."""
    q2, _ = _same_hemisphere(q1, q2)
    return (q1 * (1.0 - alpha) + q2 * alpha).normalized()


def slerp(q1: Quaternion, q2: Quaternion, alpha: float) -> Quaternion:
    """Spherical linear interpolation along the shorter arc."""
    q2, dot = _same_hemisphere(q1, q2)
    theta_0 = math.acos(min(dot, 1.0))
    ortho = q2 + q1 * (-dot)
    if ortho.norm() == 0.0:
        return q1.normalized()
    q3 = ortho.normalized()
    theta = theta_0 * alpha
    return (q1 * math.cos(theta) + q3 * math.sin(theta)).normalized()


class Scene:
    """A cursor moving from ``start_pose`` to ``end_pose`` over ``duration`` seconds."""

    def __init__(self, use_quaternions: bool = True) -> None:
        self.use_quaternions = use_quaternions
        self.use_spherical = False
        self.start_pose = Pose()
        self.end_pose = Pose()
        self.duration = 0.0
        self.elapsed = 0.0
        self.cursor = Cursor()

    def update(self, dt: float) -> None:
        """Advance the animation clock by ``dt`` seconds and move the cursor."""
        if self.duration <= 0.0:
            return
        self.elapsed += dt
        alpha = min(max(self.elapsed / self.duration, 0.0), 1.0)
        self.interpolate(alpha)
        if self.elapsed >= self.duration:
            self.elapsed = self.duration

    def start(self) -> None:
        """Reset the clock and place the cursor at the start pose."""
        self.elapsed = 0.0
        self.cursor.position = np.asarray(self.start_pose.position, dtype=float)
        if self.use_quaternions:
            self.cursor.rotation = self.start_pose.quaternion.to_matrix()
        else:
            self.cursor.rotation = euler_matrix(self.start_pose.euler)

    def interpolate(self, alpha: float) -> None:
        """Place the cursor at fraction ``alpha`` of the way, using the scene's method."""
        self.cursor.position = lerp_position(
            self.start_pose.position, self.end_pose.position, alpha
        )
        if not self.use_quaternions:
            angles = tuple(
                interpolate_angle(a0, a1, alpha)
                for a0, a1 in zip(self.start_pose.euler, self.end_pose.euler)
            )
            log.debug("Interpolated Euler angles: (%g, %g, %g)", *angles)
            self.cursor.rotation = euler_matrix(angles)
            return
        method = slerp if self.use_spherical else nlerp
        q = method(self.start_pose.quaternion, self.end_pose.quaternion, alpha)
        self.cursor.rotation = q.to_matrix()

    def samples(self, intermediate_frames: int) -> list[Cursor]:
        """Cursors at the start, the end and evenly spaced frames in between.

        The scene's own cursor is left as it was.
        """
        total = max(intermediate_frames, 0) + 2
        saved_position = self.cursor.position.copy()
        saved_rotation = self.cursor.rotation.copy()
        result = []
        try:
            for i in range(total):
                self.interpolate(i / (total - 1))
                result.append(Cursor(self.cursor.position.copy(), self.cursor.rotation.copy()))
        finally:
            self.cursor.position = saved_position
            self.cursor.rotation = saved_rotation
        return result