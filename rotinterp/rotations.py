"""Quaternions and 4x4 transformation matrices (column-vector convention)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

import numpy as np


@dataclass(frozen=True)
class Quaternion:
    """Quaternion a + b*i + c*j + d*k, where ``a`` is the scalar part."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.a, self.b, self.c, self.d))

    def dot(self, other: Quaternion) -> float:
        """Four-dimensional dot product."""
        return self.a * other.a + self.b * other.b + self.c * other.c + self.d * other.d

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Quaternion:
        """Return the unit quaternion pointing the same way."""
        n = self.norm()
        if n == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(self.a / n, self.b / n, self.c / n, self.d / n)

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.a + other.a, self.b + other.b, self.c + other.c, self.d + other.d)

    def __mul__(self, scalar: object) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Quaternion(self.a * s, self.b * s, self.c * s, self.d * s)

    __rmul__ = __mul__

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.a, -self.b, -self.c, -self.d)

    def to_matrix(self) -> np.ndarray:
        """4x4 rotation matrix of this (unit) quaternion."""
        w, x, y, z = self.a, self.b, self.c, self.d
        m = identity()
        m[:3, :3] = [
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ]
        return m


def euler_to_quaternion(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Quaternion of the rotation Rz(yaw) * Ry(pitch) * Rx(roll)."""
    cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
    cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
    cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
    return Quaternion(
        cr * cp * cy + sr * sp * sy,
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
    )


def quaternion_to_euler(q: Quaternion) -> tuple[float, float, float]:
    """Tait-Bryan angles (roll, pitch, yaw) of ``q``; ``q`` is normalized first."""
    w, x, y, z = q.normalized()
    roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
    sinp = 2.0 * (w * y - z * x)
    if abs(sinp) >= 1.0:
        pitch = math.copysign(math.pi / 2, sinp)
    else:
        pitch = math.asin(sinp)
    yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
    return roll, pitch, yaw


def identity() -> np.ndarray:
    return np.eye(4)


def translate(x: float, y: float, z: float) -> np.ndarray:
    m = identity()
    m[:3, 3] = (x, y, z)
    return m


def rotate_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = identity()
    m[1:3, 1:3] = [[c, -s], [s, c]]
    return m


def rotate_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotate_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = identity()
    m[0:2, 0:2] = [[c, -s], [s, c]]
    return m


def euler_matrix(angles: Iterable[float]) -> np.ndarray:
    """Rz(z) * Ry(y) * Rx(x) for angles given as (x, y, z)."""
    x, y, z = angles
    return rotate_z(z) @ rotate_y(y) @ rotate_x(x)


def _normalize(v: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    if n == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return v / n


def look_at(eye: Iterable[float], target: Iterable[float], up: Iterable[float]) -> np.ndarray:
    """View matrix of a camera at ``eye`` looking at ``target``."""
    eye_v = np.asarray(eye, dtype=float)
    forward = _normalize(np.asarray(target, dtype=float) - eye_v)
    side = _normalize(np.cross(forward, np.asarray(up, dtype=float)))
    upward = np.cross(side, forward)
    m = identity()
    m[0, :3], m[0, 3] = side, -side @ eye_v
    m[1, :3], m[1, 3] = upward, -upward @ eye_v
    m[2, :3], m[2, 3] = -forward, forward @ eye_v
    return m


def projection(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection mapping the view frustum to clip space."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fov / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = 2.0 * far * near / (near - far)
    m[3, 2] = -1.0
    return m