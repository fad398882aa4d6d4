# rotinterp

Compare three ways of carrying a 3D pose (position plus orientation) from a
start state to an end state:

- **Euler angles**, each angle interpolated separately along its shorter
  wrap-around path (`interpolate_angle`) and then composed as
  Rz · Ry · Rx (`euler_matrix`);
- **normalized linear quaternion interpolation** (`nlerp`);
- **spherical linear quaternion interpolation** (`slerp`).

In every case the position moves linearly between the two points
(`lerp_position`). The quaternion methods take the shorter arc: when the two
quaternions have a negative dot product, the end quaternion is negated first.

## Installation

```
pip install .
```

The only runtime dependency is numpy. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
rotinterp [--start-pos X Y Z] [--start-euler ROLL PITCH YAW] [--start-quat A B C D]
          [--end-pos X Y Z] [--end-euler ROLL PITCH YAW] [--end-quat A B C D]
          [--duration SECONDS] [--frames N] [--spherical]
```

The command sets up a start and an end pose, runs both a quaternion scene and
an Euler scene between them, and prints the sampled frames of each: first a
block titled `quaternion (linear)` (or `quaternion (spherical)` with
`--spherical`), then a block titled `euler`. Each frame is one line giving
the fraction `t`, the cursor position and the nine entries of its 3×3
rotation matrix, row by row, to three decimals.

- Positions default to the origin and orientations to the identity.
- Angles are in radians. If a pose is given only as Euler angles, its
  quaternion is derived from them; if only as a quaternion, its Euler angles
  are derived from it. If both are given, the quaternion wins and the Euler
  angles are recomputed from it.
- Quaternions are normalized before the scenes start; a zero quaternion is
  rejected with a usage error.
- `--frames` is the number of intermediate frames between start and end
  (default 5; negative values count as 0), so `N + 2` lines are printed per
  method.
- `--duration` (default 5 seconds) sets the scenes' duration; it does not
  change the printed samples.

## Library overview

`rotinterp.rotations`
: The immutable `Quaternion` (`a` is the scalar part) with `dot`, `norm`,
  `normalized` (raises `ValueError` for a zero quaternion), addition,
  multiplication by a number, negation and `to_matrix`. Conversions
  `euler_to_quaternion(roll, pitch, yaw)` and `quaternion_to_euler(q)`
  (Tait–Bryan angles: X = roll, Y = pitch, Z = yaw; pitch saturates at ±π/2).
  4×4 numpy matrix helpers: `identity`, `translate`, `rotate_x`, `rotate_y`,
  `rotate_z`, `euler_matrix`, `look_at` and `projection`.

`rotinterp.scene`
: `interpolate_angle`, `lerp_position`, `nlerp` and `slerp`, the frozen
  `Pose` (position, Euler angles, quaternion), and `Scene`. A `Scene` is
  built for quaternions or for Euler angles, has `start_pose`, `end_pose`,
  `duration` and `use_spherical`, and a `cursor`. `start()` resets the clock
  and puts the cursor at the start pose; `update(dt)` advances the clock,
  clamps progress to `[0, 1]` and moves the cursor (a non-positive duration
  leaves it where it is); `interpolate(alpha)` places the cursor at a given
  fraction; `samples(intermediate_frames)` returns copies of the cursor at
  the start, the intermediate frames and the end, leaving the scene's own
  cursor unchanged. Euler scenes log the interpolated angles at debug level.

`rotinterp.session`
: `PoseInput` keeps a pose's Euler angles and quaternion in step through
  `set_euler` and `set_quaternion`. `Comparison` drives a quaternion scene
  and an Euler scene from the same inputs with `start`, `update` and
  `samples`, and holds a `Camera`. `main` is the command above.

`rotinterp.camera`
: `Camera` orbits a target point at a given distance and exposes `view` and
  `position`. `rotate(dx, dy)` turns it by mouse-style deltas with pitch kept
  just inside ±90°, `change_distance` zooms without going nearer than 0.01,
  `move_target` shifts the target, `set_target` re-aims from the current
  position, and `inverse_view()` returns the inverse of the view matrix.

`rotinterp.geometry`
: `Cursor` (position and rotation matrix) with `model_matrix` and
  `axis_models`, which gives the model matrix and colour of its Z (blue),
  Y (green) and X (red) axes. Mesh data: `cursor_vertices`, `cursor_indices`,
  `ground_grid` and `ground_vertex_count`.

## Example

```python
import math

from rotinterp.rotations import euler_to_quaternion, quaternion_to_euler
from rotinterp.scene import nlerp, slerp

start = euler_to_quaternion(0.0, 0.0, 0.0)
end = euler_to_quaternion(0.0, 0.0, math.pi / 2)

halfway = slerp(start, end, 0.5)
print(quaternion_to_euler(halfway))   # yaw close to pi / 4

approx = nlerp(start, end, 0.5)
print(approx.to_matrix())
```

## What it does not do

The package computes poses, matrices and mesh data but draws nothing: there
is no window, no 3D view and no interactive editor. The camera, cursor axes
and ground grid are provided as numbers for a renderer of your own, and the
`rotinterp` command reports results as text only.