"""Orbiting camera around a target point."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .rotations import look_at

SENSITIVITY = 0.01
MIN_DISTANCE = 0.01
_PITCH_LIMIT = math.pi / 2
_UP = (0.0, 1.0, 0.0)


class Camera:
    """Camera orbiting ``target`` at ``distance`` with yaw and pitch angles."""

    def __init__(self, distance: float, target: Iterable[float]) -> None:
        self.distance = float(distance)
        self.target = np.asarray(target, dtype=float)
        self.pitch = 0.0
        self.yaw = 0.0
        self._recalculate()

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    def _recalculate(self) -> None:
        offset = np.array([
            self.distance * math.cos(self.pitch) * math.cos(self.yaw),
            self.distance * math.sin(self.pitch),
            self.distance * math.cos(self.pitch) * math.sin(self.yaw),
        ])
        self._position = offset + self.target
        self._view = look_at(self._position, self.target, _UP)

    def inverse_view(self) -> np.ndarray:
        """Inverse of the rigid view transform."""
        m = self._view.copy()
        rot_t = self._view[:3, :3].T
        m[:3, :3] = rot_t
        m[:3, 3] = -(rot_t @ self._view[:3, 3])
        return m

    def rotate(self, dx: float, dy: float) -> None:
        """Orbit by mouse deltas; pitch stays just short of the poles."""
        self.yaw += SENSITIVITY * dx
        self.pitch += SENSITIVITY * dy
        if self.pitch >= _PITCH_LIMIT:
            self.pitch = _PITCH_LIMIT - 0.01
        if self.pitch <= -_PITCH_LIMIT:
            self.pitch = -_PITCH_LIMIT + 0.01
        self._recalculate()

    def set_target(self, target: Iterable[float]) -> None:
        """Aim at ``target`` from the current position; the view is not rebuilt."""
        self.target = np.asarray(target, dtype=float)
        delta = self.target - self._position
        xz_length = math.hypot(delta[0], delta[2])
        self.distance = float(np.linalg.norm(delta))
        self.yaw = math.atan2(delta[0], delta[1])
        self.pitch = math.atan2(delta[1], xz_length)

    def move_target(self, offset: Iterable[float]) -> None:
        self.target = self.target + np.asarray(offset, dtype=float)
        self._recalculate()

    def change_distance(self, delta: float) -> None:
        self.distance = max(self.distance + delta, MIN_DISTANCE)
        self._recalculate()