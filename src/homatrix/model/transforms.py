from __future__ import annotations

import logging
import math

from homatrix.model.matrix import Matrix

logger = logging.getLogger(__name__)


def translation(dx: float, dy: float, dz: float) -> Matrix:
    """Make a 4x4 matrix moving points by (dx, dy, dz)."""
    return Matrix.new4x4(
        1.0, 0.0, 0.0, dx,
        0.0, 1.0, 0.0, dy,
        0.0, 0.0, 1.0, dz,
        0.0, 0.0, 0.0, 1.0)


def rotation_x(angle_rad: float) -> Matrix:
    """Rotate about the X axis (right-handed)."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return Matrix.new4x4(
        1.0, 0.0, 0.0, 0.0,
        0.0, cos_a, -sin_a, 0.0,
        0.0, sin_a, cos_a, 0.0,
        0.0, 0.0, 0.0, 1.0)


def rotation_y(angle_rad: float) -> Matrix:
    """Rotate about the Y axis."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return Matrix.new4x4(
        cos_a, 0.0, sin_a, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -sin_a, 0.0, cos_a, 0.0,
        0.0, 0.0, 0.0, 1.0)


def rotation_z(angle_rad: float) -> Matrix:
    """Rotate about the Z axis."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return Matrix.new4x4(
        cos_a, -sin_a, 0.0, 0.0,
        sin_a, cos_a, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0)


def compose(*matrices: Matrix) -> Matrix:
    """
    Multiply transforms left to right: `compose(a, b, c) == a * b * c`.

    All but the last must be 4x4; the last may be a point or edge list,
    in which case the result is that list transformed. No arguments gives
    the identity.

    Raises:
        BoundsError: If a non-final matrix is not 4x4.
    """
    logger.debug(f"Composing {len(matrices)} matrices.")
    result = Matrix.identity()
    for matrix in matrices:
        result = result * matrix
    return result
