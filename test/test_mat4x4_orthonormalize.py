################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for Gram-Schmidt orthonormalization."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_linmath.mat4x4 import Matrix4
from oasis_linmath.mat4x4 import mat_identity


def _skewed() -> Matrix4:
    return Matrix4.from_columns(
        [
            [2.0, 0.3, -0.1, 0.25],
            [0.4, 1.5, 0.2, 0.5],
            [0.1, -0.2, 3.0, 0.75],
            [7.0, 8.0, 9.0, 1.0],
        ]
    )


def test_result_is_orthonormal() -> None:
    """Checks the upper 3x3 block becomes orthonormal."""
    m: Matrix4 = Matrix4()
    m.orthonormalize(_skewed())
    block: NDArray[np.float64] = np.asarray(m)[:3, :3]
    assert np.allclose(block @ block.T, np.eye(3), atol=1e-12)


def test_column_order_is_two_one_zero() -> None:
    """Checks column 2 keeps its direction and column 1 stays in its plane."""
    src: Matrix4 = _skewed()
    m: Matrix4 = Matrix4()
    m.orthonormalize(src)

    z: NDArray[np.float64] = src.column(2)[:3]
    assert np.allclose(m.column(2)[:3], z / np.linalg.norm(z), atol=1e-15)

    # Column 1 lies in span(column 1, column 2) of the source
    y_src: NDArray[np.float64] = src.column(1)[:3]
    normal: NDArray[np.float64] = np.cross(y_src, z)
    assert abs(float(np.dot(m.column(1)[:3], normal))) < 1e-12
    assert float(np.dot(m.column(1)[:3], y_src)) > 0.0


def test_fourth_column_and_row_untouched() -> None:
    """Checks translation and the bottom row are preserved."""
    src: Matrix4 = _skewed()
    m: Matrix4 = Matrix4()
    m.orthonormalize(src)
    assert np.array_equal(m.column(3), src.column(3))
    assert np.array_equal(m.row(3), src.row(3))


def test_idempotent_on_orthonormal_input() -> None:
    """Checks an already orthonormal matrix is unchanged."""
    rotation: Matrix4 = Matrix4()
    rotation.translate(1.0, 2.0, 3.0)
    rotation.rotate(rotation, 0.5, -1.0, 2.0, 0.8)

    once: Matrix4 = Matrix4()
    once.orthonormalize(rotation)
    assert once.allclose(rotation, atol=1e-12)

    twice: Matrix4 = Matrix4()
    twice.orthonormalize(once)
    assert twice.allclose(once, atol=1e-12)


def test_identity_is_fixed_point() -> None:
    """Checks the identity is already orthonormal."""
    m: Matrix4 = Matrix4()
    m.orthonormalize(mat_identity())
    assert m == mat_identity()


def test_orthonormalize_in_place() -> None:
    """Checks the receiver may be its own source."""
    expected: Matrix4 = Matrix4()
    expected.orthonormalize(_skewed())
    m: Matrix4 = _skewed()
    m.orthonormalize(m)
    assert m == expected
