################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML schema utilities for camera configuration.

Documents are a flat mapping whose keys are the CameraConfig fields. Every key
is optional and falls back to the CameraConfig default. The vertical field of
view may be given as ``y_fov_deg`` instead of ``y_fov_rad``, but not both.

Example:

    eye: [0.0, 2.0, 5.0]
    center: [0.0, 0.0, 0.0]
    up: [0.0, 1.0, 0.0]
    projection: perspective
    y_fov_deg: 60.0
    aspect: 1.7778
    near: 0.1
    far: 500.0
"""

from __future__ import annotations

import math
import os
from dataclasses import fields
from pathlib import Path
from typing import Any
from typing import cast

import yaml

from oasis_linmath.camera.camera_config import CameraConfig
from oasis_linmath.math_utils.validation import require_float


class CameraYamlError(Exception):
    """Raised when a camera YAML document is invalid."""


_ALLOWED_KEYS: set[str] = {f.name for f in fields(CameraConfig)} | {"y_fov_deg"}


def config_from_dict(data: dict[Any, object]) -> CameraConfig:
    """Build a CameraConfig from a parsed YAML mapping."""
    bad_keys: list[str] = sorted(
        repr(key) for key in data.keys() if not isinstance(key, str)
    )
    if bad_keys:
        raise CameraYamlError(
            f"Camera keys must be strings: {', '.join(bad_keys)}"
        )
    unknown: set[str] = {key for key in data.keys() if key not in _ALLOWED_KEYS}
    if unknown:
        raise CameraYamlError(
            f"Unexpected keys in camera: {', '.join(sorted(unknown))}"
        )
    if "y_fov_rad" in data and "y_fov_deg" in data:
        raise CameraYamlError("Only one of y_fov_rad and y_fov_deg may be given")

    kwargs: dict[str, Any] = dict(data)
    try:
        if "y_fov_deg" in kwargs:
            y_fov_deg: float = require_float(kwargs.pop("y_fov_deg"), "y_fov_deg")
            kwargs["y_fov_rad"] = math.radians(y_fov_deg)
        return CameraConfig(**kwargs)
    except ValueError as exc:
        raise CameraYamlError(str(exc)) from exc


def config_to_dict(config: CameraConfig) -> dict[str, object]:
    """Convert a CameraConfig to a YAML-ready mapping."""
    return {
        "eye": list(config.eye),
        "center": list(config.center),
        "up": list(config.up),
        "projection": config.projection,
        "y_fov_rad": config.y_fov_rad,
        "aspect": config.aspect,
        "near": config.near,
        "far": config.far,
        "ortho_half_height": config.ortho_half_height,
    }


def dumps_yaml(config: CameraConfig) -> str:
    """Serialize a camera configuration to deterministic YAML."""
    data: dict[str, object] = config_to_dict(config)
    safe_dump: Any = cast(Any, yaml.safe_dump)
    return safe_dump(
        data,
        sort_keys=False,
        indent=2,
        default_flow_style=None,
    )


def loads_yaml(text: str) -> CameraConfig:
    """Parse a camera configuration from YAML text."""
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CameraYamlError("Camera YAML is not well formed") from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise CameraYamlError("YAML root must be a mapping")
    return config_from_dict(loaded)


def load_camera_config(path: str | os.PathLike[str]) -> CameraConfig:
    """Load a camera configuration from a YAML file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CameraYamlError(
            f"Failed to read camera config from {path_obj}"
        ) from exc
    return loads_yaml(text)


def save_camera_config(path: str | os.PathLike[str], config: CameraConfig) -> None:
    """Save a camera configuration to a YAML file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        path_obj.write_text(dumps_yaml(config), encoding="utf-8")
    except OSError as exc:
        raise CameraYamlError(
            f"Failed to write camera config to {path_obj}"
        ) from exc

