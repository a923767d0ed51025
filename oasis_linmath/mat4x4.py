################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
4x4 transform matrices for rendering

A Matrix4 holds four columns of four float64 rows. Element access is always
``m[col][row]``, which matches the OpenGL column-major memory layout, so
``to_column_major()`` is exactly the sequence a GL uniform upload expects with
``transpose=GL_FALSE``.

Mutating methods write through the receiver and may safely read the receiver
as an operand, e.g. ``m.multiply(m, n)`` or ``m.invert(m)``. Inputs are
snapshotted before the receiver is written.

Numeric preconditions are the caller's responsibility and are never raised:

    - invert() on a singular matrix yields inf/NaN entries
    - frustum(), ortho() and perspective() with degenerate bounds yield inf/NaN
    - rotate() about an axis of length <= ROTATE_AXIS_EPS copies the source
      matrix unchanged

Angles are in radians throughout, including the vertical field of view taken
by perspective().
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_linmath.math_utils.constants import MATRIX_ATOL
from oasis_linmath.math_utils.constants import ROTATE_AXIS_EPS
from oasis_linmath.math_utils.validation import check_index
from oasis_linmath.math_utils.validation import nested_matrix
from oasis_linmath.math_utils.validation import reshape_matrix
from oasis_linmath.math_utils.vec import Vec3
from oasis_linmath.math_utils.vec import Vec4
from oasis_linmath.math_utils.vec import VecLike
from oasis_linmath.math_utils.vec import as_vector


_LOG: logging.Logger = logging.getLogger(__name__)


class Matrix4:
    """Column-major 4x4 matrix of float64 values."""

    __slots__ = ("_m",)

    def __init__(self, columns: Optional[Sequence[Sequence[float]]] = None) -> None:
        self._m: NDArray[np.float64]
        if columns is None:
            self._m = np.zeros((4, 4), dtype=np.float64)
        else:
            self._m = nested_matrix(columns, (4, 4), "columns")

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[float]]) -> "Matrix4":
        """Create a matrix from four columns of four values."""
        return cls(columns)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix4":
        """Create a matrix from four rows of four values."""
        return cls(nested_matrix(rows, (4, 4), "rows").T)

    @classmethod
    def from_column_major(cls, values: Sequence[float]) -> "Matrix4":
        """Create a matrix from 16 values, columns outer and rows inner."""
        return cls(reshape_matrix(values, (4, 4), "values"))

    #
    # Value semantics
    #

    def __getitem__(self, key: Any) -> Any:
        return self._m[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._m[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        columns: str = ", ".join(
            "[" + ", ".join(repr(float(x)) for x in col) + "]" for col in self._m
        )
        return f"Matrix4([{columns}])"

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> Any:
        return np.array(self._m, dtype=dtype)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix4):
            result: Matrix4 = Matrix4()
            result.multiply(self, other)
            return result
        if isinstance(other, (str, bytes)) or not isinstance(
            other, (Sequence, np.ndarray)
        ):
            return NotImplemented
        return self.multiply_vec4(other)

    def __copy__(self) -> "Matrix4":
        return self.copy()

    def copy(self) -> "Matrix4":
        """Return an independent copy of this matrix."""
        return Matrix4(self._m)

    def allclose(self, other: "Matrix4", atol: float = MATRIX_ATOL) -> bool:
        """Return True if every entry is within ``atol`` of ``other``."""
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=atol))

    def is_finite(self) -> bool:
        """Return True if no entry is inf or NaN."""
        return bool(np.all(np.isfinite(self._m)))

    #
    # Rendering boundary
    #

    def to_column_major(self) -> list[float]:
        """Return the 16 entries with columns outer and rows inner."""
        return [float(x) for x in self._m.ravel()]

    def to_row_major(self) -> list[float]:
        """Return the 16 entries with rows outer and columns inner."""
        return [float(x) for x in self._m.T.ravel()]

    def as_gl_array(self, dtype: Any = np.float32) -> NDArray[Any]:
        """Return a contiguous column-major array converted to ``dtype``."""
        return np.ascontiguousarray(self._m.ravel(), dtype=dtype)

    #
    # Construction and basic algebra
    #

    def identity(self) -> None:
        """Set this matrix to the identity."""
        self._m[:, :] = np.eye(4, dtype=np.float64)

    def duplicate(self, a: "Matrix4") -> None:
        """Overwrite this matrix with the contents of ``a``."""
        self._m[:, :] = a._m

    def row(self, i: int) -> NDArray[np.float64]:
        """Return row ``i``, gathered across the four columns."""
        return self._m[:, check_index(i, "row")].copy()

    def column(self, i: int) -> NDArray[np.float64]:
        """Return a copy of column ``i``."""
        return self._m[check_index(i, "column")].copy()

    def transpose(self, a: "Matrix4") -> None:
        """Set this matrix to the transpose of ``a``."""
        src: NDArray[np.float64] = a._m.copy()
        self._m[:, :] = src.T

    def add(self, a: "Matrix4", b: "Matrix4") -> None:
        self._m[:, :] = a._m + b._m

    def subtract(self, a: "Matrix4", b: "Matrix4") -> None:
        self._m[:, :] = a._m - b._m

    def scale(self, a: "Matrix4", s: float) -> None:
        self._m[:, :] = a._m * float(s)

    def scale_anisotropic(self, a: "Matrix4", x: float, y: float, z: float) -> None:
        """Scale the three basis columns of ``a``, keeping its translation."""
        src: NDArray[np.float64] = a._m.copy()
        src[0] *= float(x)
        src[1] *= float(y)
        src[2] *= float(z)
        self._m[:, :] = src

    def multiply(self, a: "Matrix4", b: "Matrix4") -> None:
        """Set this matrix to the product a * b."""
        # Accumulate into a scratch matrix so a or b may be this matrix
        temp: NDArray[np.float64] = np.zeros((4, 4), dtype=np.float64)
        for c in range(4):
            for r in range(4):
                acc: float = 0.0
                for k in range(4):
                    acc += a._m[k, r] * b._m[c, k]
                temp[c, r] = acc
        self._m[:, :] = temp

    def multiply_vec4(self, v: VecLike) -> NDArray[np.float64]:
        """Return the product of this matrix and the 4-vector ``v``."""
        vec: NDArray[np.float64] = as_vector(v, 4, "v")
        result: NDArray[np.float64] = np.zeros(4, dtype=np.float64)
        for j in range(4):
            acc: float = 0.0
            for i in range(4):
                acc += self._m[i, j] * vec[i]
            result[j] = acc
        return result

    #
    # Affine transforms
    #

    def translate(self, x: float, y: float, z: float) -> None:
        """Set this matrix to a translation by (x, y, z)."""
        self.identity()
        self._m[3, 0] = x
        self._m[3, 1] = y
        self._m[3, 2] = z

    def translate_in_place(self, x: float, y: float, z: float) -> None:
        """Append a translation expressed in this matrix's local frame."""
        t: NDArray[np.float64] = np.array([x, y, z, 0.0], dtype=np.float64)
        for i in range(4):
            self._m[3, i] += Vec4.dot(self.row(i), t)

    def from_vec3_outer(self, a: VecLike, b: VecLike) -> None:
        """Set the upper 3x3 block to the outer product of a and b."""
        u: NDArray[np.float64] = as_vector(a, 3, "a")
        v: NDArray[np.float64] = as_vector(b, 3, "b")
        self._m[:, :] = 0.0
        for i in range(3):
            for j in range(3):
                self._m[i, j] = u[i] * v[j]

    def rotate(self, a: "Matrix4", x: float, y: float, z: float, angle: float) -> None:
        """
        Set this matrix to ``a`` rotated by ``angle`` about the axis (x, y, z)

        Uses Rodrigues' formula R = u u^T + cos(angle) (I - u u^T)
        + sin(angle) [u]_x for the normalized axis u. An axis no longer than
        ROTATE_AXIS_EPS leaves ``a`` unrotated.
        """
        s: float = float(np.sin(angle))
        c: float = float(np.cos(angle))
        u: NDArray[np.float64] = np.array([x, y, z], dtype=np.float64)

        if Vec3.length(u) <= ROTATE_AXIS_EPS:
            _LOG.debug(
                "Rotation axis (%g, %g, %g) below %g, copying source",
                x,
                y,
                z,
                ROTATE_AXIS_EPS,
            )
            self.duplicate(a)
            return

        u = Vec3.normalize(u)

        T: Matrix4 = Matrix4()
        T.from_vec3_outer(u, u)

        S: Matrix4 = Matrix4(
            [
                [0.0, u[2], -u[1], 0.0],
                [-u[2], 0.0, u[0], 0.0],
                [u[1], -u[0], 0.0, 0.0],
                [0.0, 0.0, 0.0, 0.0],
            ]
        )
        S.scale(S, s)

        C: Matrix4 = mat_identity()
        C.subtract(C, T)
        C.scale(C, c)

        T.add(T, C)
        T.add(T, S)

        T[3][3] = 1.0
        self.multiply(a, T)

    def rotate_x(self, a: "Matrix4", angle: float) -> None:
        s: float = float(np.sin(angle))
        c: float = float(np.cos(angle))
        R: Matrix4 = Matrix4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        self.multiply(a, R)

    def rotate_y(self, a: "Matrix4", angle: float) -> None:
        s: float = float(np.sin(angle))
        c: float = float(np.cos(angle))
        R: Matrix4 = Matrix4(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        self.multiply(a, R)

    def rotate_z(self, a: "Matrix4", angle: float) -> None:
        s: float = float(np.sin(angle))
        c: float = float(np.cos(angle))
        R: Matrix4 = Matrix4(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        self.multiply(a, R)

    #
    # Inversion and orthonormalization
    #

    def invert(self, a: "Matrix4") -> None:
        """
        Set this matrix to the inverse of ``a``

        Closed-form cofactor expansion over the 2x2 minors of columns 0-1 (s)
        and columns 2-3 (c). The input must be non-singular; a zero
        determinant produces inf/NaN entries instead of an error.
        """
        m: NDArray[np.float64] = a._m.copy()

        s: list[np.float64] = [
            m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1],
            m[0, 0] * m[1, 2] - m[1, 0] * m[0, 2],
            m[0, 0] * m[1, 3] - m[1, 0] * m[0, 3],
            m[0, 1] * m[1, 2] - m[1, 1] * m[0, 2],
            m[0, 1] * m[1, 3] - m[1, 1] * m[0, 3],
            m[0, 2] * m[1, 3] - m[1, 2] * m[0, 3],
        ]
        c: list[np.float64] = [
            m[2, 0] * m[3, 1] - m[3, 0] * m[2, 1],
            m[2, 0] * m[3, 2] - m[3, 0] * m[2, 2],
            m[2, 0] * m[3, 3] - m[3, 0] * m[2, 3],
            m[2, 1] * m[3, 2] - m[3, 1] * m[2, 2],
            m[2, 1] * m[3, 3] - m[3, 1] * m[2, 3],
            m[2, 2] * m[3, 3] - m[3, 2] * m[2, 3],
        ]

        det: np.float64 = (
            s[0] * c[5]
            - s[1] * c[4]
            + s[2] * c[3]
            + s[3] * c[2]
            - s[4] * c[1]
            + s[5] * c[0]
        )

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            idet: np.float64 = np.float64(1.0) / det

            self._m[0, 0] = (m[1, 1] * c[5] - m[1, 2] * c[4] + m[1, 3] * c[3]) * idet
            self._m[0, 1] = (-m[0, 1] * c[5] + m[0, 2] * c[4] - m[0, 3] * c[3]) * idet
            self._m[0, 2] = (m[3, 1] * s[5] - m[3, 2] * s[4] + m[3, 3] * s[3]) * idet
            self._m[0, 3] = (-m[2, 1] * s[5] + m[2, 2] * s[4] - m[2, 3] * s[3]) * idet

            self._m[1, 0] = (-m[1, 0] * c[5] + m[1, 2] * c[2] - m[1, 3] * c[1]) * idet
            self._m[1, 1] = (m[0, 0] * c[5] - m[0, 2] * c[2] + m[0, 3] * c[1]) * idet
            self._m[1, 2] = (-m[3, 0] * s[5] + m[3, 2] * s[2] - m[3, 3] * s[1]) * idet
            self._m[1, 3] = (m[2, 0] * s[5] - m[2, 2] * s[2] + m[2, 3] * s[1]) * idet

            self._m[2, 0] = (m[1, 0] * c[4] - m[1, 1] * c[2] + m[1, 3] * c[0]) * idet
            self._m[2, 1] = (-m[0, 0] * c[4] + m[0, 1] * c[2] - m[0, 3] * c[0]) * idet
            self._m[2, 2] = (m[3, 0] * s[4] - m[3, 1] * s[2] + m[3, 3] * s[0]) * idet
            self._m[2, 3] = (-m[2, 0] * s[4] + m[2, 1] * s[2] - m[2, 3] * s[0]) * idet

            self._m[3, 0] = (-m[1, 0] * c[3] + m[1, 1] * c[1] - m[1, 2] * c[0]) * idet
            self._m[3, 1] = (m[0, 0] * c[3] - m[0, 1] * c[1] + m[0, 2] * c[0]) * idet
            self._m[3, 2] = (-m[3, 0] * s[3] + m[3, 1] * s[1] - m[3, 2] * s[0]) * idet
            self._m[3, 3] = (m[2, 0] * s[3] - m[2, 1] * s[1] + m[2, 2] * s[0]) * idet

    def orthonormalize(self, a: "Matrix4") -> None:
        """
        Set this matrix to ``a`` with an orthonormal upper 3x3 basis

        Gram-Schmidt in the fixed order column 2, then 1, then 0. Column 2
        keeps its direction, column 1 is made perpendicular to it, and column
        0 to both. Column 3 and row 3 are left as they are in ``a``.
        """
        self.duplicate(a)

        z: NDArray[np.float64] = Vec3.normalize(Vec4.truncate(self._m[2]))
        self._m[2, :3] = z

        y: NDArray[np.float64] = Vec4.truncate(self._m[1])
        y = Vec3.sub(y, Vec3.scale(z, Vec3.dot(y, z)))
        self._m[1, :3] = y
        y = Vec3.normalize(y)
        self._m[1, :3] = y

        x: NDArray[np.float64] = Vec4.truncate(self._m[0])
        x = Vec3.sub(x, Vec3.scale(z, Vec3.dot(x, z)))
        self._m[0, :3] = x
        x = Vec3.sub(x, Vec3.scale(y, Vec3.dot(x, y)))
        self._m[0, :3] = Vec3.normalize(x)

    #
    # Projection and view
    #

    def frustum(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> None:
        """Set this matrix to an off-axis perspective projection (glFrustum)."""
        l, r, b, t, n, f = _as_float64(left, right, bottom, top, near, far)

        with np.errstate(divide="ignore", invalid="ignore"):
            self._m[0, :] = [2.0 * n / (r - l), 0.0, 0.0, 0.0]
            self._m[1, :] = [0.0, 2.0 * n / (t - b), 0.0, 0.0]
            self._m[2, :] = [
                (r + l) / (r - l),
                (t + b) / (t - b),
                -(f + n) / (f - n),
                -1.0,
            ]
            self._m[3, :] = [0.0, 0.0, -2.0 * (f * n) / (f - n), 0.0]

    def ortho(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> None:
        """Set this matrix to an orthographic projection (glOrtho)."""
        l, r, b, t, n, f = _as_float64(left, right, bottom, top, near, far)

        with np.errstate(divide="ignore", invalid="ignore"):
            self._m[0, :] = [2.0 / (r - l), 0.0, 0.0, 0.0]
            self._m[1, :] = [0.0, 2.0 / (t - b), 0.0, 0.0]
            self._m[2, :] = [0.0, 0.0, -2.0 / (f - n), 0.0]
            self._m[3, :] = [
                -(r + l) / (r - l),
                -(t + b) / (t - b),
                -(f + n) / (f - n),
                1.0,
            ]

    def perspective(
        self, y_fov_rad: float, aspect: float, near: float, far: float
    ) -> None:
        """
        Set this matrix to a symmetric perspective projection

        Args:
            y_fov_rad: Vertical field of view in radians, not degrees
            aspect: Viewport width divided by height
            near: Distance to the near clip plane
            far: Distance to the far clip plane
        """
        fov, w_over_h, n, f = _as_float64(y_fov_rad, aspect, near, far)

        with np.errstate(divide="ignore", invalid="ignore"):
            a: np.float64 = np.float64(1.0) / np.tan(fov / 2.0)

            self._m[0, :] = [a / w_over_h, 0.0, 0.0, 0.0]
            self._m[1, :] = [0.0, a, 0.0, 0.0]
            self._m[2, :] = [0.0, 0.0, -((f + n) / (f - n)), -1.0]
            self._m[3, :] = [0.0, 0.0, -((2.0 * f * n) / (f - n)), 0.0]

    def look_at(self, eye: VecLike, center: VecLike, up: VecLike) -> None:
        """
        Set this matrix to a right-handed view transform (gluLookAt)

        The camera sits at ``eye`` looking toward ``center``. ``up`` only
        selects the roll; it need not be perpendicular to the view direction.
        """
        eye_vec: NDArray[np.float64] = as_vector(eye, 3, "eye")

        f: NDArray[np.float64] = Vec3.normalize(Vec3.sub(center, eye_vec))
        s: NDArray[np.float64] = Vec3.normalize(Vec3.cross(f, up))
        t: NDArray[np.float64] = Vec3.cross(s, f)

        # Basis vectors are the rows of the rotation block
        for i in range(3):
            self._m[i, :] = [s[i], t[i], -f[i], 0.0]
        self._m[3, :] = [0.0, 0.0, 0.0, 1.0]

        self.translate_in_place(-eye_vec[0], -eye_vec[1], -eye_vec[2])


def mat_identity() -> Matrix4:
    """Return a new identity matrix."""
    result: Matrix4 = Matrix4()
    result.identity()
    return result


def _as_float64(*values: float) -> tuple[np.float64, ...]:
    # numpy scalars turn division by zero into inf/NaN instead of raising
    return tuple(np.float64(v) for v in values)
