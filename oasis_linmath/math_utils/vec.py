################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""3- and 4-component vector helpers.

Vectors are plain float64 numpy arrays of shape (3,) or (4,). Any sequence of
floats is accepted as input. Normalizing a zero-length vector yields NaN
components rather than raising; callers own that precondition.
"""

from __future__ import annotations

from typing import Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray


VecLike = Union[Sequence[float], NDArray[np.float64]]


def as_vector(v: VecLike, size: int, name: str) -> NDArray[np.float64]:
    """Return a float64 copy of ``v`` after checking its length."""
    vec: NDArray[np.float64] = np.array(v, dtype=float)
    if vec.shape != (size,):
        raise ValueError(f"{name} must be shape ({size},)")
    return vec


def _normalize(vec: NDArray[np.float64]) -> NDArray[np.float64]:
    # Zero-length input divides by zero and produces NaN
    with np.errstate(divide="ignore", invalid="ignore"):
        return vec / float(np.sqrt(np.dot(vec, vec)))


class Vec3:
    """Vector utilities for 3D vectors."""

    @staticmethod
    def add(a: VecLike, b: VecLike) -> NDArray[np.float64]:
        """Return the component-wise sum a + b."""
        return as_vector(a, 3, "a") + as_vector(b, 3, "b")

    @staticmethod
    def sub(a: VecLike, b: VecLike) -> NDArray[np.float64]:
        """Return the component-wise difference a - b."""
        return as_vector(a, 3, "a") - as_vector(b, 3, "b")

    @staticmethod
    def scale(v: VecLike, s: float) -> NDArray[np.float64]:
        """Return v multiplied by the scalar s."""
        return as_vector(v, 3, "v") * float(s)

    @staticmethod
    def dot(a: VecLike, b: VecLike) -> float:
        """Return the inner product of two 3-vectors."""
        return float(np.dot(as_vector(a, 3, "a"), as_vector(b, 3, "b")))

    @staticmethod
    def cross(a: VecLike, b: VecLike) -> NDArray[np.float64]:
        """Return the cross product a x b."""
        u: NDArray[np.float64] = as_vector(a, 3, "a")
        v: NDArray[np.float64] = as_vector(b, 3, "b")
        return np.array(
            [
                u[1] * v[2] - u[2] * v[1],
                u[2] * v[0] - u[0] * v[2],
                u[0] * v[1] - u[1] * v[0],
            ],
            dtype=float,
        )

    @staticmethod
    def length(v: VecLike) -> float:
        """Return the Euclidean length of a 3-vector."""
        vec: NDArray[np.float64] = as_vector(v, 3, "v")
        return float(np.sqrt(np.dot(vec, vec)))

    @staticmethod
    def normalize(v: VecLike) -> NDArray[np.float64]:
        """Return v divided by its length."""
        return _normalize(as_vector(v, 3, "v"))


class Vec4:
    """Vector utilities for homogeneous 4D vectors."""

    @staticmethod
    def add(a: VecLike, b: VecLike) -> NDArray[np.float64]:
        """Return the component-wise sum a + b."""
        return as_vector(a, 4, "a") + as_vector(b, 4, "b")

    @staticmethod
    def sub(a: VecLike, b: VecLike) -> NDArray[np.float64]:
        """Return the component-wise difference a - b."""
        return as_vector(a, 4, "a") - as_vector(b, 4, "b")

    @staticmethod
    def scale(v: VecLike, s: float) -> NDArray[np.float64]:
        """Return v multiplied by the scalar s."""
        return as_vector(v, 4, "v") * float(s)

    @staticmethod
    def dot(a: VecLike, b: VecLike) -> float:
        """Return the inner product of two 4-vectors."""
        return float(np.dot(as_vector(a, 4, "a"), as_vector(b, 4, "b")))

    @staticmethod
    def length(v: VecLike) -> float:
        """Return the Euclidean length of a 4-vector."""
        vec: NDArray[np.float64] = as_vector(v, 4, "v")
        return float(np.sqrt(np.dot(vec, vec)))

    @staticmethod
    def normalize(v: VecLike) -> NDArray[np.float64]:
        """Return v divided by its length."""
        return _normalize(as_vector(v, 4, "v"))

    @staticmethod
    def truncate(v: VecLike) -> NDArray[np.float64]:
        """Drop the fourth component of a 4-vector."""
        return as_vector(v, 4, "v")[:3].copy()
