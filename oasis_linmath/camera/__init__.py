################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Camera configuration and matrices."""

from __future__ import annotations

from oasis_linmath.camera.camera_config import CameraConfig
from oasis_linmath.camera.camera_matrices import CameraMatrices
from oasis_linmath.camera.camera_yaml import CameraYamlError
from oasis_linmath.camera.camera_yaml import load_camera_config
from oasis_linmath.camera.camera_yaml import save_camera_config


__all__ = [
    "CameraConfig",
    "CameraMatrices",
    "CameraYamlError",
    "load_camera_config",
    "save_camera_config",
]
