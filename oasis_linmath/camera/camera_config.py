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
Configuration data for camera view and projection matrices
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import replace

import numpy as np
from numpy.typing import NDArray

from oasis_linmath.math_utils.constants import VIEW_BASIS_EPS
from oasis_linmath.math_utils.validation import require_float
from oasis_linmath.math_utils.validation import require_vec3
from oasis_linmath.math_utils.vec import Vec3


# Supported projection kinds
PROJECTION_PERSPECTIVE: str = "perspective"
PROJECTION_ORTHO: str = "ortho"

PROJECTIONS: tuple[str, ...] = (PROJECTION_PERSPECTIVE, PROJECTION_ORTHO)


@dataclass(frozen=True)
class CameraConfig:
    """
    Camera placement and lens values

    Fields:
        eye: Camera position in world coordinates
        center: Point the camera looks at, in world coordinates
        up: World up hint used to fix the camera roll
        projection: Either "perspective" or "ortho"
        y_fov_rad: Vertical field of view in radians, perspective only
        aspect: Viewport width divided by height
        near: Distance to the near clip plane
        far: Distance to the far clip plane
        ortho_half_height: Half the view volume height, ortho only
    """

    eye: tuple[float, float, float] = (0.0, 0.0, 1.0)
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)

    projection: str = PROJECTION_PERSPECTIVE
    y_fov_rad: float = math.pi / 4.0
    aspect: float = 1.0
    near: float = 0.1
    far: float = 100.0
    ortho_half_height: float = 1.0

    def __post_init__(self) -> None:
        """Validate and coerce field values."""
        object.__setattr__(self, "eye", require_vec3(self.eye, "eye"))
        object.__setattr__(self, "center", require_vec3(self.center, "center"))
        object.__setattr__(self, "up", require_vec3(self.up, "up"))

        # look_at needs a view direction and an up hint that are not parallel
        forward: NDArray[np.float64] = Vec3.sub(self.center, self.eye)
        distance: float = Vec3.length(forward)
        if distance <= VIEW_BASIS_EPS:
            raise ValueError("center must differ from eye")
        up_length: float = Vec3.length(self.up)
        if up_length <= VIEW_BASIS_EPS:
            raise ValueError("up must be non-zero")
        sine: float = Vec3.length(Vec3.cross(forward, self.up)) / (
            distance * up_length
        )
        if sine <= VIEW_BASIS_EPS:
            raise ValueError("up must not be parallel to the view direction")

        if self.projection not in PROJECTIONS:
            raise ValueError(f"projection must be one of {', '.join(PROJECTIONS)}")

        for name in ("y_fov_rad", "aspect", "near", "far", "ortho_half_height"):
            object.__setattr__(self, name, require_float(getattr(self, name), name))

        if self.aspect <= 0.0:
            raise ValueError("aspect must be positive")
        if self.far <= self.near:
            raise ValueError("far must be greater than near")
        if self.projection == PROJECTION_PERSPECTIVE:
            if self.near <= 0.0:
                raise ValueError("near must be positive for perspective")
            if not 0.0 < self.y_fov_rad < math.pi:
                raise ValueError("y_fov_rad must be in (0, pi)")
        elif self.ortho_half_height <= 0.0:
            raise ValueError("ortho_half_height must be positive")

    def with_aspect(self, aspect: float) -> "CameraConfig":
        """Return a copy with a new aspect ratio, e.g. after a resize."""
        return replace(self, aspect=aspect)

