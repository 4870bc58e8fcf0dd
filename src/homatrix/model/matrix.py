"""
Homogeneous Coordinate Matrices
===============================
A dense 4xN matrix whose columns are points or directions in homogeneous
coordinates (x, y, z, w). Square 4x4 instances are transforms, wider ones are
point or edge lists; multiplying a transform by a point list transforms every
point at once.

Storage is a flat float64 buffer of `width * 4` values indexed by
`column * 4 + row`, so growing the matrix is a single concatenation and a
column is a contiguous slice.

Note: This module should be pure Python/NumPy.
"""
from __future__ import annotations

import logging
import numbers
import operator
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from homatrix.config import HEIGHT, DTYPE
from homatrix.view.rendering import render_matrix

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Column = tuple[float, float, float, float]


class BoundsError(IndexError):
    """A row or column index is outside the matrix."""

    def __init__(self, message: str, index: int, limit: int) -> None:
        super().__init__(message)
        self.index = index
        self.limit = limit


def _as_column(values: Sequence[float]) -> npt.NDArray[np.float64]:
    column = np.array(values, dtype=DTYPE)
    if column.shape != (HEIGHT,):
        raise ValueError(f"Expected a column of {HEIGHT} values, got shape {column.shape}.")
    return column


class Matrix:
    """
    A 4-row, N-column matrix of floats with value semantics.

    Every constructor and `append` copies its input, so two matrices never
    share storage. Mutating methods (`set`, `push_col`, `append`,
    `push_edge`) validate everything before touching the buffer.
    """

    # Keep NumPy from broadcasting over us, so `np.float64(2) * m` reaches __rmul__
    __array_ufunc__ = None

    def __init__(self, columns: Iterable[Sequence[float]] = ()) -> None:
        """
        Initialize the matrix from an ordered collection of columns.

        Args:
            columns: 4-element columns, left to right.

        Raises:
            ValueError: If a column does not hold exactly 4 values.
        """
        cols = [_as_column(col) for col in columns]
        self._data: npt.NDArray[np.float64] = (
            np.concatenate(cols) if cols else np.empty(0, dtype=DTYPE)
        )

    @classmethod
    def _from_buffer(cls, data: npt.NDArray[np.float64]) -> Matrix:
        # Takes ownership of `data`; callers pass a freshly allocated buffer.
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # ------------------------------
    # Constructors
    # ------------------------------

    @classmethod
    def new(cls, columns: Iterable[Sequence[float]]) -> Matrix:
        """Make a 4xN matrix from its columns."""
        return cls(columns)

    @classmethod
    def empty(cls) -> Matrix:
        """Make an empty (4x0) matrix."""
        return cls()

    @classmethod
    def origin(cls) -> Matrix:
        """Make the column matrix representing the origin."""
        return cls([(0.0, 0.0, 0.0, 1.0)])

    @classmethod
    def zeros(cls, width: int) -> Matrix:
        """Make a 4 x `width` matrix of zeros, the additive identity for that width."""
        width = operator.index(width)
        if width < 0:
            msg = f"Cannot make a matrix of negative width {width}"
            logger.debug(msg)
            raise BoundsError(msg, index=width, limit=0)
        return cls._from_buffer(np.zeros(width * HEIGHT, dtype=DTYPE))

    @classmethod
    def new4x4(cls, *cells: float) -> Matrix:
        """
        Make a 4x4 matrix given each cell value, listed row by row.

        Value k (0-indexed) lands at row k // 4, column k % 4.

        Raises:
            ValueError: If not exactly 16 values are given.
        """
        if len(cells) != HEIGHT * HEIGHT:
            raise ValueError(f"Expected {HEIGHT * HEIGHT} cell values, got {len(cells)}.")
        grid = np.array(cells, dtype=DTYPE).reshape(HEIGHT, HEIGHT)
        return cls._from_buffer(grid.T.flatten())

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Matrix:
        """
        Make a matrix from a (4, N) array in (row, column) orientation.

        Raises:
            ValueError: If the array is not two-dimensional with 4 rows.
        """
        arr = np.asarray(array, dtype=DTYPE)
        if arr.ndim != 2 or arr.shape[0] != HEIGHT:
            raise ValueError(f"Expected shape ({HEIGHT}, N), got {arr.shape}.")
        return cls._from_buffer(arr.T.flatten())

    @classmethod
    def identity(cls) -> Matrix:
        """Make a 4x4 identity matrix."""
        return cls._from_buffer(np.eye(HEIGHT, dtype=DTYPE).flatten())

    @classmethod
    def dilation(cls, s: float) -> Matrix:
        """Make a 4x4 matrix dilating by `s` in x, y, and z."""
        return cls.dilation_xyz(s, s, s)

    @classmethod
    def dilation_xyz(cls, sx: float, sy: float, sz: float) -> Matrix:
        """Make a 4x4 matrix dilating by `sx` in x, `sy` in y, and `sz` in z."""
        return cls.new4x4(
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0)

    # ------------------------------
    # Bounds checks
    # ------------------------------

    def _check_column(self, index: int) -> int:
        index = operator.index(index)
        width = self.width()
        if not 0 <= index < width:
            msg = f"Column {index} is out of range for a matrix of width {width}"
            logger.debug(msg)
            raise BoundsError(msg, index=index, limit=width)
        return index

    @staticmethod
    def _check_row(index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < HEIGHT:
            msg = f"Row {index} is out of range for a matrix of height {HEIGHT}"
            logger.debug(msg)
            raise BoundsError(msg, index=index, limit=HEIGHT)
        return index

    # ------------------------------
    # Accessors
    # ------------------------------

    def width(self) -> int:
        return self._data.size // HEIGHT

    def col(self, colnum: int) -> Column:
        colnum = self._check_column(colnum)
        return tuple(self._data[colnum * HEIGHT:(colnum + 1) * HEIGHT].tolist())

    def col_vec(self, colnum: int) -> list[float]:
        colnum = self._check_column(colnum)
        return self._data[colnum * HEIGHT:(colnum + 1) * HEIGHT].tolist()

    def row(self, rownum: int) -> list[float]:
        rownum = self._check_row(rownum)
        return self._data[rownum::HEIGHT].tolist()

    def get(self, row: int, col: int) -> float:
        row = self._check_row(row)
        col = self._check_column(col)
        return float(self._data[col * HEIGHT + row])

    def set(self, row: int, col: int, val: float) -> None:
        """
        Write a single cell.

        Raises:
            BoundsError: If either index is out of range.
            TypeError: If `val` is not a real number.
        """
        if not isinstance(val, numbers.Real):
            raise TypeError(f"Cell values must be real numbers, got {type(val).__name__}.")
        row = self._check_row(row)
        col = self._check_column(col)
        self._data[col * HEIGHT + row] = float(val)

    def columns(self) -> list[Column]:
        """Return every column as a tuple, left to right."""
        return [tuple(col) for col in self._data.reshape(-1, HEIGHT).tolist()]

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a (4, width) copy in (row, column) orientation."""
        return self._data.reshape(-1, HEIGHT).T.copy()

    def copy(self) -> Matrix:
        return Matrix._from_buffer(self._data.copy())

    # ------------------------------
    # Mutators
    # ------------------------------

    def push_col(self, col: Sequence[float]) -> None:
        """Push a column to the right side of `self`."""
        self._data = np.concatenate((self._data, _as_column(col)))

    def append(self, m: Matrix) -> None:
        """Push each column of `m` to `self`."""
        self._data = np.concatenate((self._data, m._data))

    def push_edge(self, col_a: Sequence[float], col_b: Sequence[float]) -> None:
        """Push an edge, i.e. two points, to `self` (think of `self` as an edge list)."""
        start = _as_column(col_a)
        end = _as_column(col_b)
        self._data = np.concatenate((self._data, start, end))

    # ------------------------------
    # Arithmetic
    # ------------------------------

    def add(self, other: Matrix) -> Matrix:
        """
        Add two matrices column by column.

        Only the columns both operands have are summed. Extra columns of
        `self` are carried through unchanged and extra columns of `other` are
        ignored, so the result is always as wide as `self`.
        """
        result = self._data.copy()
        overlap = min(self.width(), other.width()) * HEIGHT
        result[:overlap] += other._data[:overlap]
        return Matrix._from_buffer(result)

    def subtract(self, other: Matrix) -> Matrix:
        """Return `self + (-1 * other)`, with the same width rule as `add`."""
        return self.add(other.scale(-1.0))

    def scale(self, scalar: float) -> Matrix:
        """Multiply every cell by `scalar`, keeping float64 storage for any real scalar."""
        return Matrix._from_buffer(self._data * float(scalar))

    def multiply(self, other: Matrix) -> Matrix:
        """
        Standard matrix product `self * other`.

        `self` must be a 4x4 transform; the result is as wide as `other`.
        Cell (i, j) of the result is the dot product of row i of `self` with
        column j of `other`.

        Raises:
            BoundsError: If `self` is not 4x4.
        """
        width = self.width()
        if width != HEIGHT:
            msg = f"Left operand of a matrix product must be 4x4, got 4x{width}"
            logger.debug(msg)
            raise BoundsError(msg, index=width, limit=HEIGHT)

        # In column storage, (A @ B)^T == B^T @ A^T
        product = other._data.reshape(-1, HEIGHT) @ self._data.reshape(-1, HEIGHT)
        return Matrix._from_buffer(product.flatten())

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Matrix:
        return self.scale(-1.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __str__(self) -> str:
        return render_matrix(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.columns()!r})"


def scale(scalar: float, matrix: Matrix) -> Matrix:
    """Scalar-on-the-left multiplication, same as `scalar * matrix`."""
    return matrix.scale(scalar)
