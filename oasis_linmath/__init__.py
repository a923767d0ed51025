################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""4x4 matrix algebra for 3D graphics transforms."""

from __future__ import annotations

from oasis_linmath.mat4x4 import Matrix4
from oasis_linmath.mat4x4 import mat_identity
from oasis_linmath.math_utils.constants import ROTATE_AXIS_EPS
from oasis_linmath.math_utils.vec import Vec3
from oasis_linmath.math_utils.vec import Vec4


__all__ = [
    "Matrix4",
    "ROTATE_AXIS_EPS",
    "Vec3",
    "Vec4",
    "mat_identity",
]
