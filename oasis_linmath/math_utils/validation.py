################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shape and value validation helpers for boundary inputs."""

from __future__ import annotations

import math
import numbers
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def reshape_matrix(
    values: Sequence[float],
    shape: tuple[int, int],
    name: str,
) -> NDArray[np.float64]:
    """Return a float64 copy of flat values reshaped to the target shape."""
    array: NDArray[np.float64] = np.array(values, dtype=np.float64).ravel()
    if array.size != shape[0] * shape[1]:
        raise ValueError(f"{name} must have {shape[0] * shape[1]} elements")

    return array.reshape(shape)


def nested_matrix(
    values: Sequence[Sequence[float]] | Any,
    shape: tuple[int, int],
    name: str,
) -> NDArray[np.float64]:
    """Return a float64 copy of nested values with an exact shape."""
    array: NDArray[np.float64] = np.array(values, dtype=np.float64)
    if array.shape != shape:
        raise ValueError(f"{name} must be shape {shape}")

    return array


def check_index(i: int, name: str) -> int:
    """Return ``i`` if it addresses one of the four rows or columns."""
    index: int = int(i)
    if not 0 <= index < 4:
        raise IndexError(f"{name} index {i} out of range 0..3")

    return index


def require_float(value: object, name: str) -> float:
    """Ensure the value is a finite real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a number")
    result: float = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite")

    return result


def require_vec3(value: object, name: str) -> tuple[float, float, float]:
    """Ensure the value is a sequence of three finite real numbers."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValueError(f"{name} must be a sequence of 3 numbers")
    if len(value) != 3:
        raise ValueError(f"{name} must have 3 elements")
    x: float = require_float(value[0], f"{name}[0]")
    y: float = require_float(value[1], f"{name}[1]")
    z: float = require_float(value[2], f"{name}[2]")

    return (x, y, z)
