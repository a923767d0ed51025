################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for projection and view matrix constructors."""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import NDArray

from oasis_linmath.mat4x4 import Matrix4


def _project(m: Matrix4, point: list[float]) -> NDArray[np.float64]:
    clip: NDArray[np.float64] = m.multiply_vec4(point + [1.0])
    return clip[:3] / clip[3]


def test_ortho_unit_volume() -> None:
    """Checks ortho(-1, 1, -1, 1, 1, 100) entry by entry."""
    m: Matrix4 = Matrix4()
    m.ortho(-1.0, 1.0, -1.0, 1.0, 1.0, 100.0)

    expected: dict[tuple[int, int], float] = {
        (0, 0): 1.0,
        (1, 1): 1.0,
        (2, 2): -2.0 / 99.0,
        (3, 2): -101.0 / 99.0,
        (3, 3): 1.0,
    }
    for c in range(4):
        for r in range(4):
            assert m[c][r] == expected.get((c, r), 0.0)


def test_ortho_maps_box_to_clip_cube() -> None:
    """Checks the view volume corners land on the clip cube."""
    m: Matrix4 = Matrix4()
    m.ortho(-4.0, 2.0, -1.0, 3.0, 0.5, 10.0)
    assert np.allclose(_project(m, [-4.0, -1.0, -0.5]), [-1.0, -1.0, -1.0])
    assert np.allclose(_project(m, [2.0, 3.0, -10.0]), [1.0, 1.0, 1.0])


def test_frustum_maps_near_and_far_planes() -> None:
    """Checks near corners map to z=-1 and far center maps to z=1."""
    m: Matrix4 = Matrix4()
    m.frustum(-1.0, 2.0, -0.5, 1.5, 1.0, 50.0)
    assert np.allclose(_project(m, [-1.0, -0.5, -1.0]), [-1.0, -1.0, -1.0])
    assert np.allclose(_project(m, [2.0, 1.5, -1.0]), [1.0, 1.0, -1.0])
    assert math.isclose(float(_project(m, [0.0, 0.0, -50.0])[2]), 1.0)


def test_perspective_matches_glu_perspective() -> None:
    """Checks perspective against the gluPerspective closed form."""
    fovy: float = math.radians(60.0)
    aspect: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 200.0
    m: Matrix4 = Matrix4()
    m.perspective(fovy, aspect, near, far)

    f: float = 1.0 / math.tan(fovy / 2.0)
    expected: NDArray[np.float64] = np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far)],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )
    assert np.allclose(m.to_row_major(), expected.ravel(), atol=1e-12)


def test_perspective_takes_radians() -> None:
    """Checks a 90 degree field of view given in radians."""
    m: Matrix4 = Matrix4()
    m.perspective(math.pi / 2.0, 1.0, 1.0, 10.0)
    assert math.isclose(float(m[1][1]), 1.0, abs_tol=1e-15)
    assert math.isclose(float(m[0][0]), 1.0, abs_tol=1e-15)


def test_perspective_matches_symmetric_frustum() -> None:
    """Checks perspective equals the equivalent frustum."""
    fovy: float = 0.9
    aspect: float = 1.5
    near: float = 0.5
    far: float = 80.0
    top: float = near * math.tan(fovy / 2.0)
    right: float = top * aspect

    persp: Matrix4 = Matrix4()
    persp.perspective(fovy, aspect, near, far)
    frustum: Matrix4 = Matrix4()
    frustum.frustum(-right, right, -top, top, near, far)
    assert persp.allclose(frustum, atol=1e-12)


def test_projection_overwrites_receiver() -> None:
    """Checks every entry is written, not just the non-zero ones."""
    reference: Matrix4 = Matrix4()
    reference.frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
    m: Matrix4 = Matrix4.from_columns(np.full((4, 4), 42.0))
    m.frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
    assert m == reference


def test_degenerate_bounds_are_not_finite() -> None:
    """Checks equal bounds produce non-finite values without raising."""
    m: Matrix4 = Matrix4()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        m.ortho(1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        assert not m.is_finite()
        m.frustum(-1.0, 1.0, 2.0, 2.0, 1.0, 10.0)
        assert not m.is_finite()
        m.perspective(0.0, 1.0, 1.0, 10.0)
        assert not m.is_finite()


def test_look_at_moves_eye_to_origin() -> None:
    """Checks the world origin lands 5 units down the view axis."""
    m: Matrix4 = Matrix4()
    m.look_at([0.0, 0.0, 5.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    result: NDArray[np.float64] = m.multiply_vec4([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(result, [0.0, 0.0, -5.0, 1.0], atol=1e-15)


def test_look_at_general_pose() -> None:
    """Checks eye maps to the origin and center onto the -z axis."""
    eye: list[float] = [3.0, 4.0, -2.0]
    center: list[float] = [-1.0, 0.5, 1.0]
    m: Matrix4 = Matrix4()
    m.look_at(eye, center, [0.0, 1.0, 0.0])

    assert np.allclose(m.multiply_vec4(eye + [1.0]), [0.0, 0.0, 0.0, 1.0], atol=1e-12)

    distance: float = float(np.linalg.norm(np.array(center) - np.array(eye)))
    target: NDArray[np.float64] = m.multiply_vec4(center + [1.0])
    assert np.allclose(target, [0.0, 0.0, -distance, 1.0], atol=1e-12)

    block: NDArray[np.float64] = np.asarray(m)[:3, :3]
    assert np.allclose(block @ block.T, np.eye(3), atol=1e-12)


def test_look_at_matches_glu_look_at() -> None:
    """Checks look_at against the gluLookAt closed form."""
    eye: NDArray[np.float64] = np.array([1.0, 2.0, 3.0])
    center: NDArray[np.float64] = np.array([0.0, 0.5, -1.0])
    up: NDArray[np.float64] = np.array([0.0, 0.0, 1.0])

    f: NDArray[np.float64] = (center - eye) / np.linalg.norm(center - eye)
    s: NDArray[np.float64] = np.cross(f, up)
    s = s / np.linalg.norm(s)
    u: NDArray[np.float64] = np.cross(s, f)
    rotation: NDArray[np.float64] = np.eye(4)
    rotation[0, :3] = s
    rotation[1, :3] = u
    rotation[2, :3] = -f
    translation: NDArray[np.float64] = np.eye(4)
    translation[:3, 3] = -eye
    expected: NDArray[np.float64] = rotation @ translation

    m: Matrix4 = Matrix4()
    m.look_at(eye, center, up)
    assert np.allclose(m.to_row_major(), expected.ravel(), atol=1e-12)
