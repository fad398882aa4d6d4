"""Cursor and ground-grid geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from .rotations import identity, rotate_x, rotate_y, translate

CURSOR_RADIUS = 0.02
CURSOR_LENGTH = 0.2
RADIUS_SEGMENTS = 16

GRID_SIZE = 10.0
GAP_SIZE = 1.0

BLUE = (0.0, 0.0, 1.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)
WHITE = (1.0, 1.0, 1.0, 1.0)


class AxisModel(NamedTuple):
    """Model matrix and colour of one cursor axis."""

    model: np.ndarray
    color: tuple[float, float, float, float]


@dataclass
class Cursor:
    """Three-axis cursor placed by a position and a 4x4 rotation matrix."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=identity)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)
        self.rotation = np.asarray(self.rotation, dtype=float)

    def model_matrix(self) -> np.ndarray:
        x, y, z = self.position
        return translate(x, y, z) @ self.rotation

    def axis_models(self) -> list[AxisModel]:
        """Z (blue), Y (green) and X (red) cylinders, in drawing order."""
        model = self.model_matrix()
        return [
            AxisModel(model, BLUE),
            AxisModel(model @ rotate_x(-math.pi / 2), GREEN),
            AxisModel(model @ rotate_y(math.pi / 2), RED),
        ]


def cursor_vertices() -> np.ndarray:
    """Two rings of a cylinder along +Z, each closing on its first point."""
    angles = 2.0 * math.pi * np.arange(RADIUS_SEGMENTS + 1) / RADIUS_SEGMENTS
    rings = [
        np.column_stack([
            CURSOR_RADIUS * np.cos(angles),
            CURSOR_RADIUS * np.sin(angles),
            np.full(angles.shape, CURSOR_LENGTH * i),
        ])
        for i in range(2)
    ]
    return np.vstack(rings)


def cursor_indices() -> list[int]:
    """Triangle indices of the cursor cylinder."""
    indices: list[int] = []
    for i in range(2):
        for j in range(RADIUS_SEGMENTS):
            first = i * (RADIUS_SEGMENTS + 1) + j
            second = first + RADIUS_SEGMENTS + 1
            indices.extend((first, second, first + 1, second, second + 1, first + 1))
    return indices


def ground_grid() -> np.ndarray:
    """Line-segment endpoints of the ground grid in the y = 0 plane."""
    points: list[tuple[float, float, float]] = []
    i = -GRID_SIZE
    while i <= GRID_SIZE:
        points.extend([
            (i, 0.0, -GRID_SIZE),
            (i, 0.0, GRID_SIZE),
            (-GRID_SIZE, 0.0, i),
            (GRID_SIZE, 0.0, i),
        ])
        i += GAP_SIZE
    return np.array(points)


def ground_vertex_count() -> int:
    """Number of vertices submitted when the ground is drawn."""
    return int((GRID_SIZE * 4 / GAP_SIZE + 1) * 4)