"""Interpolation of 3D poses with Euler angles, nlerp and slerp."""

__version__ = "0.1.0"

__all__ = ["camera", "geometry", "rotations", "scene", "session"]