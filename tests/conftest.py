import pytest

from homatrix import Matrix


@pytest.fixture
def points() -> Matrix:
    """Two affine points."""
    return Matrix([(1.0, 2.0, 3.0, 1.0), (4.0, 5.0, 6.0, 1.0)])


@pytest.fixture
def transform() -> Matrix:
    """A non-symmetric 4x4 matrix with 16 distinct cells."""
    return Matrix.new4x4(
        1.0, 2.0, 3.0, 4.0,
        5.0, 6.0, 7.0, 8.0,
        9.0, 10.0, 11.0, 12.0,
        13.0, 14.0, 15.0, 16.0)
