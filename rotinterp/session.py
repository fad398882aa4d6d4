"""Side-by-side comparison of quaternion and Euler-angle interpolation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from .camera import Camera
from .geometry import Cursor
from .rotations import Quaternion, euler_to_quaternion, quaternion_to_euler
from .scene import Pose, Scene

DEFAULT_DURATION = 5.0
DEFAULT_INTERMEDIATE_FRAMES = 5


@dataclass
class PoseInput:
    """Editable pose whose Euler angles and quaternion are kept in step."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    euler: tuple[float, float, float] = (0.0, 0.0, 0.0)
    quaternion: Quaternion = field(default_factory=Quaternion)

    def set_euler(self, roll: float, pitch: float, yaw: float) -> None:
        """Set the Euler angles and derive the unit quaternion from them."""
        self.euler = (roll, pitch, yaw)
        self.quaternion = euler_to_quaternion(roll, pitch, yaw).normalized()

    def set_quaternion(self, a: float, b: float, c: float, d: float) -> None:
        """Set the quaternion as given and derive the Euler angles from it."""
        q = Quaternion(a, b, c, d)
        self.euler = quaternion_to_euler(q)
        self.quaternion = q

    def to_pose(self) -> Pose:
        return Pose(tuple(self.position), tuple(self.euler), self.quaternion)


class Comparison:
    """Two scenes running the same motion: quaternion-based and Euler-based."""

    def __init__(self) -> None:
        self.quaternion_scene = Scene(True)
        self.euler_scene = Scene(False)
        self.camera = Camera(1.0, (0.0, 0.0, 0.0))
        self.show_all_frames = False
        self.intermediate_frames = DEFAULT_INTERMEDIATE_FRAMES

    @property
    def scenes(self) -> tuple[Scene, Scene]:
        return self.quaternion_scene, self.euler_scene

    def start(
        self,
        start: PoseInput,
        end: PoseInput,
        duration: float = DEFAULT_DURATION,
        spherical: bool = False,
    ) -> None:
        """Normalize the inputs' quaternions and restart both scenes."""
        for pose in (start, end):
            pose.quaternion = pose.quaternion.normalized()
        for scene in self.scenes:
            scene.start_pose = start.to_pose()
            scene.end_pose = end.to_pose()
            scene.duration = duration
        self.quaternion_scene.use_spherical = spherical
        for scene in self.scenes:
            scene.start()

    def update(self, dt: float) -> None:
        for scene in self.scenes:
            scene.update(dt)

    def samples(self, intermediate_frames: int) -> tuple[list[Cursor], list[Cursor]]:
        """Sampled cursors of the quaternion scene and of the Euler scene."""
        return (
            self.quaternion_scene.samples(intermediate_frames),
            self.euler_scene.samples(intermediate_frames),
        )


def _format_cursor(alpha: float, cursor: Cursor) -> str:
    pos = ", ".join(f"{v:.3f}" for v in cursor.position)
    rot = " ".join(f"{v:.3f}" for v in cursor.rotation[:3, :3].ravel())
    return f"  t={alpha:.3f} pos=({pos}) rot=[{rot}]"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare quaternion and Euler-angle interpolation of a pose."
    )
    for which in ("start", "end"):
        parser.add_argument(f"--{which}-pos", nargs=3, type=float, metavar=("X", "Y", "Z"),
                            default=(0.0, 0.0, 0.0))
        parser.add_argument(f"--{which}-euler", nargs=3, type=float,
                            metavar=("ROLL", "PITCH", "YAW"))
        parser.add_argument(f"--{which}-quat", nargs=4, type=float,
                            metavar=("A", "B", "C", "D"))
    parser.add_argument("--duration", type=float, default=DEFAULT_DURATION)
    parser.add_argument("--frames", type=int, default=DEFAULT_INTERMEDIATE_FRAMES)
    parser.add_argument("--spherical", action="store_true")
    return parser


def _pose_from_args(args: argparse.Namespace, which: str) -> PoseInput:
    pose = PoseInput(position=tuple(getattr(args, f"{which}_pos")))
    euler = getattr(args, f"{which}_euler")
    if euler is not None:
        pose.set_euler(*euler)
    quat = getattr(args, f"{which}_quat")
    if quat is not None:
        pose.set_quaternion(*quat)
    return pose


def main(argv: list[str] | None = None) -> int:
    """Print sampled frames of both interpolation methods."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        start = _pose_from_args(args, "start")
        end = _pose_from_args(args, "end")
    except ValueError as exc:
        parser.error(str(exc))
    comparison = Comparison()
    comparison.start(start, end, args.duration, args.spherical)
    quat_frames, euler_frames = comparison.samples(args.frames)
    method = "spherical" if args.spherical else "linear"
    total = len(quat_frames)
    for title, frames in ((f"quaternion ({method})", quat_frames), ("euler", euler_frames)):
        print(title)
        for i, cursor in enumerate(frames):
            print(_format_cursor(i / (total - 1), cursor))
    return 0