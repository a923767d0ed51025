################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric thresholds shared by the matrix engine."""

from __future__ import annotations


# Rotation axes at or below this length leave the source matrix unchanged
ROTATE_AXIS_EPS: float = 1e-4

# Default absolute tolerance for approximate matrix comparison
MATRIX_ATOL: float = 1e-9

# Smallest camera view distance, and smallest sine between view direction and
# up hint, that still yields a well-defined look-at basis
VIEW_BASIS_EPS: float = 1e-9
