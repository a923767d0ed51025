################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""View and projection matrices derived from a camera configuration."""

from __future__ import annotations

import logging

from oasis_linmath.camera.camera_config import PROJECTION_PERSPECTIVE
from oasis_linmath.camera.camera_config import CameraConfig
from oasis_linmath.mat4x4 import Matrix4


_LOG: logging.Logger = logging.getLogger(__name__)


class CameraMatrices:
    """
    Builds the matrices a renderer uploads for one camera

    The view matrix maps world coordinates to eye coordinates with gluLookAt
    conventions. The projection maps eye coordinates to clip space with a
    depth range of [-1, 1]. Every accessor returns a new Matrix4 that the
    caller owns.
    """

    def __init__(self, config: CameraConfig) -> None:
        self._config: CameraConfig = config

        self._view: Matrix4 = Matrix4()
        self._view.look_at(config.eye, config.center, config.up)

        self._projection: Matrix4 = Matrix4()
        if config.projection == PROJECTION_PERSPECTIVE:
            self._projection.perspective(
                config.y_fov_rad, config.aspect, config.near, config.far
            )
        else:
            half_height: float = config.ortho_half_height
            half_width: float = half_height * config.aspect
            self._projection.ortho(
                -half_width,
                half_width,
                -half_height,
                half_height,
                config.near,
                config.far,
            )

        self._view_projection: Matrix4 = Matrix4()
        self._view_projection.multiply(self._projection, self._view)

        _LOG.debug(
            "Built %s camera at eye %s looking at %s",
            config.projection,
            config.eye,
            config.center,
        )

    @property
    def config(self) -> CameraConfig:
        return self._config

    def view(self) -> Matrix4:
        """Return the world-to-eye matrix."""
        return self._view.copy()

    def projection(self) -> Matrix4:
        """Return the eye-to-clip matrix."""
        return self._projection.copy()

    def view_projection(self) -> Matrix4:
        """Return projection * view, mapping world coordinates to clip space."""
        return self._view_projection.copy()

    def inverse_view(self) -> Matrix4:
        """Return the eye-to-world matrix (the camera pose)."""
        result: Matrix4 = Matrix4()
        result.invert(self._view)
        return result

    def resized(self, width: int, height: int) -> "CameraMatrices":
        """Return matrices for the same camera on a viewport of a new size."""
        if width <= 0 or height <= 0:
            raise ValueError("viewport width and height must be positive")
        return CameraMatrices(self._config.with_aspect(width / height))
