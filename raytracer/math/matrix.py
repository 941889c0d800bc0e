"""
Fixed-order square matrices: Matrix1, Matrix2, Matrix3, Matrix4.

One generic implementation, SquareMatrix, is specialised per order through the
``order`` class variable. A matrix of order D finds its minor type (order D-1)
through the ``matrix_type`` dispatch table; the cofactor recursion walks that
chain down until it reaches Matrix1, the base case.

Equality is exact elementwise float equality. Use ``compare`` when a tolerance
is needed (e.g. checking ``A * A.inverse()`` against the identity).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar, Iterable, Iterator

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from raytracer.core.errors import MatrixIndexError, ShapeError
from raytracer.core.logging import get_logger

from .value import MathValue

logger = get_logger(__name__)

_SCALAR_TYPES = (int, float, np.number)


class MatrixEntry:
    """
    Writable handle on a single matrix element.

    Yielded by SquareMatrix.iter_mut(); assigning ``value`` writes through to
    the matrix the handle came from.
    """

    __slots__ = ("_matrix", "row", "col")

    def __init__(self, matrix: SquareMatrix, row: int, col: int) -> None:
        self._matrix = matrix
        self.row = row
        self.col = col

    @property
    def value(self) -> float:
        return self._matrix.data[self._matrix._index(self.row, self.col)]

    @value.setter
    def value(self, new_value: float) -> None:
        self._matrix.data[self._matrix._index(self.row, self.col)] = float(new_value)

    def __repr__(self) -> str:
        return f"MatrixEntry(row={self.row}, col={self.col}, value={self.value})"


class SquareMatrix(BaseModel, MathValue):
    """
    Square matrix of a fixed order, stored row-major.

    Not instantiable itself; use Matrix1..Matrix4 or ``SquareMatrix.of_order(d)``.
    Deserialize with ``Matrix4(**dumped)`` or ``Matrix4.model_validate(dumped)``.
    Every operator returns a new matrix. The only in-place mutation is through
    ``iter_mut()``.
    """

    model_config = ConfigDict(validate_assignment=True)

    order: ClassVar[int] = 0

    # numpy scalars defer to the reflected operators instead of iterating the matrix
    __array_ufunc__ = None

    data: list[float] = Field(default_factory=list)

    def __init__(
        self,
        rows: Iterable[Iterable[float]] | np.ndarray | SquareMatrix | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize from a D x D grid, raising ShapeError on any other shape.

        A flat row-major ``data=`` keyword is accepted in place of ``rows`` so
        that ``model_dump()`` output round-trips through the constructor.
        """
        if type(self).order == 0:
            raise TypeError(
                "SquareMatrix has no order; use Matrix1..Matrix4 or SquareMatrix.of_order()"
            )
        if rows is None:
            if "data" not in kwargs:
                raise TypeError(f"{type(self).__name__} requires rows or data")
            super().__init__(**kwargs)
            return
        super().__init__(data=self._flatten_rows(rows), **kwargs)

    @classmethod
    def _flatten_rows(cls, raw_rows: Any) -> list[Any]:
        """Check a raw grid against the class order and flatten it row-major."""
        expected = (cls.order, cls.order)

        if isinstance(raw_rows, SquareMatrix):
            raw_rows = raw_rows.rows

        if isinstance(raw_rows, np.ndarray):
            if raw_rows.shape != expected:
                raise ShapeError(cls.__name__, expected, raw_rows.shape)
            raw_rows = raw_rows.tolist()

        if not isinstance(raw_rows, Iterable) or isinstance(raw_rows, (str, bytes)):
            raise TypeError(f"{cls.__name__} rows must be iterable sequences")

        rows: list[list[Any]] = []
        for row in raw_rows:
            if not isinstance(row, Iterable) or isinstance(row, (str, bytes)):
                raise ShapeError(cls.__name__, expected, f"non-sequence row {row!r}")
            rows.append(list(row))

        if len(rows) != cls.order or any(len(row) != cls.order for row in rows):
            raise ShapeError(cls.__name__, expected, [len(row) for row in rows])

        return [value for row in rows for value in row]

    @field_validator("data")
    @classmethod
    def _validate_data(cls, value: list[float]) -> list[float]:
        if len(value) != cls.order * cls.order:
            raise ValueError(
                f"{cls.__name__} holds {cls.order * cls.order} elements, got {len(value)}"
            )
        return value

    @classmethod
    def _from_data(cls, data: Iterable[float]) -> SquareMatrix:
        """Wrap already-validated row-major floats without re-checking them."""
        return cls.model_construct(data=list(data))

    @staticmethod
    def of_order(order: int) -> type[SquareMatrix]:
        """Matrix class for the given order."""
        return matrix_type(order)

    # Constructors

    @classmethod
    def zero(cls) -> SquareMatrix:
        """Matrix with every element 0."""
        return cls._from_data([0.0] * (cls.order * cls.order))

    @classmethod
    def one(cls) -> SquareMatrix:
        """Matrix with every element 1."""
        return cls._from_data([1.0] * (cls.order * cls.order))

    @classmethod
    def identity(cls) -> SquareMatrix:
        """Matrix with 1 on the diagonal and 0 elsewhere."""
        n = cls.order
        return cls._from_data([1.0 if r == c else 0.0 for r in range(n) for c in range(n)])

    # Element access

    def _index(self, row: int, col: int) -> int:
        return col + row * self.order

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.order and 0 <= col < self.order):
            raise MatrixIndexError(row, col, self.order)

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self.order, self.order)

    @property
    def rows(self) -> list[list[float]]:
        """Elements as a list of rows."""
        n = self.order
        return [self.data[r * n:(r + 1) * n] for r in range(n)]

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col), or a whole row as a tuple."""
        if isinstance(index, tuple):
            row, col = index
            self._check_index(row, col)
            return self.data[self._index(row, col)]

        self._check_index(index, 0)
        n = self.order
        return tuple(self.data[index * n:(index + 1) * n])

    def __len__(self) -> int:
        """Number of elements (order squared)."""
        return len(self.data)

    def iter(self) -> Iterator[float]:
        """Lazy row-major traversal of every element."""
        return (value for value in self.data)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return self.iter()

    def iter_mut(self) -> Iterator[MatrixEntry]:
        """Lazy row-major traversal of writable element handles."""
        n = self.order
        return (MatrixEntry(self, r, c) for r in range(n) for c in range(n))

    def row_sums(self) -> tuple[float, ...]:
        """Sum of each row."""
        return tuple(sum(row) for row in self.rows)

    def col_sums(self) -> tuple[float, ...]:
        """Sum of each column."""
        n = self.order
        return tuple(sum(self.data[self._index(r, c)] for r in range(n)) for c in range(n))

    # Conversions

    def components(self) -> tuple[float, ...]:
        return tuple(self.data)

    def to_string(self) -> str:
        """Convert to string."""
        rows_str = ", ".join(
            "[" + ", ".join(repr(el) for el in row) + "]" for row in self.rows
        )
        return f"[{rows_str}]"

    def to_python(self) -> list[list[float]]:
        """Convert to Python nested list."""
        return self.rows

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.rows, dtype=np.float64)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"

    def __eq__(self, other: Any) -> bool:
        """Exact elementwise equality; matrices of different orders are never equal."""
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return type(self) is type(other) and self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    # Matrix operations

    def transposed(self) -> SquareMatrix:
        """Return the transpose; self is unchanged."""
        n = self.order
        return self._from_data(self.data[self._index(c, r)] for r in range(n) for c in range(n))

    @abstractmethod
    def determinant(self) -> float:
        """Determinant of the matrix."""

    @abstractmethod
    def _adjugate(self) -> SquareMatrix:
        """Transposed cofactor matrix."""

    def inverse(self) -> SquareMatrix | None:
        """
        Calculate the inverse as adjugate / determinant.

        The only singularity guard is an exact ``determinant() == 0`` test, so a
        near-singular matrix yields a badly scaled inverse rather than None.

        Returns:
            Inverse matrix, or None if the determinant is exactly zero
        """
        det = self.determinant()
        if det == 0:
            logger.debug(
                "%s is singular; no inverse",
                type(self).__name__,
                extra={"extra_data": {"order": self.order}},
            )
            return None

        return self._adjugate() / det

    # Arithmetic operators

    def _check_same_order(self, other: SquareMatrix) -> None:
        if type(other) is not type(self):
            raise ShapeError(type(self).__name__, self.shape, other.shape)

    def __neg__(self) -> SquareMatrix:
        """Negation."""
        return self._from_data(-el for el in self.data)

    def __pos__(self) -> SquareMatrix:
        """Unary positive."""
        return self._from_data(self.data)

    def __add__(self, other: Any) -> SquareMatrix:
        """Matrix addition."""
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self._check_same_order(other)
        return self._from_data(a + b for a, b in zip(self.data, other.data))

    def __sub__(self, other: Any) -> SquareMatrix:
        """Matrix subtraction, a + (-b)."""
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Any) -> SquareMatrix:
        """Matrix product with a matrix of the same order, or scalar multiplication."""
        if isinstance(other, _SCALAR_TYPES):
            return self._from_data(el * float(other) for el in self.data)
        if not isinstance(other, SquareMatrix):
            return NotImplemented

        self._check_same_order(other)
        result = np.matmul(self.to_numpy(), other.to_numpy())
        return self._from_data(result.ravel().tolist())

    def __rmul__(self, other: Any) -> SquareMatrix:
        """Right multiplication (scalar only)."""
        if isinstance(other, _SCALAR_TYPES):
            return self._from_data(float(other) * el for el in self.data)
        return NotImplemented

    def __truediv__(self, other: Any) -> SquareMatrix:
        """
        Scalar division.

        Follows IEEE 754: dividing by zero gives +/-inf or NaN elements instead
        of raising.
        """
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented

        with np.errstate(divide="ignore", invalid="ignore"):
            result = np.divide(np.asarray(self.data, dtype=np.float64), np.float64(other))
        return self._from_data(result.tolist())

    def __rtruediv__(self, other: Any) -> SquareMatrix:
        """Right division not supported."""
        raise TypeError("Cannot divide scalar by matrix")


class Matrix1(SquareMatrix):
    """Order 1 matrix; the base case of the cofactor recursion."""

    order: ClassVar[int] = 1

    def determinant(self) -> float:
        return self.data[0]

    def _adjugate(self) -> SquareMatrix:
        return Matrix1.one()


class _CofactorMatrix(SquareMatrix):
    """Square matrix of order 2 or more, with minors and cofactors."""

    def delete(self, row: int, col: int) -> SquareMatrix:
        """
        Remove one row and one column.

        Args:
            row: Row to remove, in [0, order)
            col: Column to remove, in [0, order)

        Returns:
            Matrix of order - 1

        Raises:
            MatrixIndexError: If row or col is out of range
        """
        self._check_index(row, col)
        n = self.order
        return matrix_type(n - 1)._from_data(
            self.data[self._index(r, c)]
            for r in range(n) if r != row
            for c in range(n) if c != col
        )

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix with row and col removed."""
        return self.delete(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor signed by the checkerboard pattern: negative when row + col is odd."""
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def cofactor_matrix(self) -> SquareMatrix:
        """Matrix of the cofactor of every element."""
        n = self.order
        return self._from_data(self.cofactor(r, c) for r in range(n) for c in range(n))

    def determinant(self) -> float:
        """Laplace expansion along the first row."""
        return sum(self.data[c] * self.cofactor(0, c) for c in range(self.order))

    def _adjugate(self) -> SquareMatrix:
        return self.cofactor_matrix().transposed()


class Matrix2(_CofactorMatrix):
    """Order 2 matrix."""

    order: ClassVar[int] = 2


class Matrix3(_CofactorMatrix):
    """Order 3 matrix."""

    order: ClassVar[int] = 3


class Matrix4(_CofactorMatrix):
    """Order 4 matrix, the order used for ray tracer transforms."""

    order: ClassVar[int] = 4


_MATRIX_TYPES: dict[int, type[SquareMatrix]] = {
    1: Matrix1,
    2: Matrix2,
    3: Matrix3,
    4: Matrix4,
}


def matrix_type(order: int) -> type[SquareMatrix]:
    """
    Look up the matrix class of an order.

    Raises:
        ValueError: If no matrix type exists for the order
    """
    try:
        return _MATRIX_TYPES[order]
    except KeyError:
        raise ValueError(
            f"No square matrix type of order {order}; supported orders are 1-4"
        ) from None
