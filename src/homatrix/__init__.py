"""
homatrix
========
4xN matrices in homogeneous coordinates for 3D transform pipelines.

Transforms are 4x4 matrices, point and edge lists are 4xN matrices whose
columns are (x, y, z, w) points with w = 1.
"""
from homatrix.model.matrix import BoundsError, Column, Matrix, scale
from homatrix.model.transforms import compose, rotation_x, rotation_y, rotation_z, translation
from homatrix.view.rendering import render_matrix

__all__ = [
    "BoundsError",
    "Column",
    "Matrix",
    "compose",
    "render_matrix",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scale",
    "translation",
]
