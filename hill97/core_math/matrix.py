"""
Matrix over a Prime Field

A dense, dynamically sized matrix whose entries are elements of a prime
field (Z/97Z by default). Dimensions are fixed at construction; reshaping
or transposing produces a new matrix.

Features:
- Element access with strict bounds checking (no negative-index wraparound)
- Addition, subtraction, negation, scalar and matrix multiplication
- Elementary row operations used by Gauss-Jordan elimination
- Structural equality (same shape, same field, same entries)
"""

from typing import Iterable, List, Sequence, Tuple, Type, Union

from .zp import Z97, Zp
from ..exceptions import DimensionMismatchError, IndexOutOfRangeError


Scalar = Union[int, Zp]


class Matrix:
    """
    Rows x columns matrix of field elements.
    
    Example:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m[0, 1]
        Zp(2 mod 97)
        >>> (m * Matrix.identity(2)) == m
        True
    """
    
    def __init__(self, rows: int, cols: int, field: Type[Zp] = Z97):
        """
        Create a matrix with every entry set to the field's zero.
        
        Args:
            rows: Number of rows (positive)
            cols: Number of columns (positive)
            field: Element type (Z97 or a prime_field() subclass)
            
        Raises:
            ValueError: If a dimension is not a positive integer
        """
        for name, dim in (("rows", rows), ("cols", cols)):
            if not isinstance(dim, int) or dim <= 0:
                raise ValueError(f"Matrix {name} must be a positive integer, got {dim!r}")
        
        self._rows = rows
        self._cols = cols
        self._field = field
        self._data: List[List[Zp]] = [
            [field.zero() for _ in range(cols)] for _ in range(rows)
        ]
    
    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]], field: Type[Zp] = Z97) -> "Matrix":
        """
        Build a matrix from nested rows; ints are reduced into the field.
        
        Raises:
            ValueError: If there are no rows or the first row is empty
            DimensionMismatchError: If rows have different lengths
        """
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise ValueError("Matrix must have at least one row and one column")
        
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise DimensionMismatchError(
                    f"Row {index} has {len(row)} entries, expected {width}"
                )
        
        matrix = cls(len(rows), width, field)
        matrix._data = [[field(v) for v in row] for row in rows]
        return matrix
    
    @classmethod
    def identity(cls, n: int, field: Type[Zp] = Z97) -> "Matrix":
        """n x n identity matrix."""
        matrix = cls(n, n, field)
        for i in range(n):
            matrix._data[i][i] = field.one()
        return matrix
    
    @classmethod
    def column(cls, values: Iterable[Scalar], field: Type[Zp] = Z97) -> "Matrix":
        """Column vector (n x 1 matrix) from a sequence of values."""
        return cls.from_rows([[v] for v in values], field)
    
    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    
    @property
    def row_count(self) -> int:
        return self._rows
    
    @property
    def column_count(self) -> int:
        return self._cols
    
    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns)."""
        return self._rows, self._cols
    
    @property
    def field(self) -> Type[Zp]:
        """Element type of the entries."""
        return self._field
    
    @property
    def is_square(self) -> bool:
        return self._rows == self._cols
    
    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    
    def _check_index(self, i: int, j: int) -> None:
        if not (isinstance(i, int) and isinstance(j, int)):
            raise TypeError("Matrix indices must be integers")
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfRangeError(
                f"Index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix"
            )
    
    def get(self, i: int, j: int) -> Zp:
        """
        Element at row i, column j.
        
        Raises:
            IndexOutOfRangeError: If i >= rows, j >= columns or either is negative
        """
        self._check_index(i, j)
        return self._data[i][j]
    
    def set(self, i: int, j: int, value: Scalar) -> None:
        """
        Replace the element at row i, column j (ints are reduced).
        
        Raises:
            IndexOutOfRangeError: If the position is outside the matrix
        """
        self._check_index(i, j)
        self._data[i][j] = self._field(value)
    
    def __getitem__(self, key: Tuple[int, int]) -> Zp:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        return self.get(*key)
    
    def __setitem__(self, key: Tuple[int, int], value: Scalar) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        self.set(key[0], key[1], value)
    
    def row(self, i: int) -> List[Zp]:
        """Copy of row i."""
        self._check_index(i, 0)
        return list(self._data[i])
    
    def column_values(self, j: int) -> List[Zp]:
        """Copy of column j."""
        self._check_index(0, j)
        return [row[j] for row in self._data]
    
    def to_lists(self) -> List[List[int]]:
        """Entries as nested lists of canonical ints."""
        return [[int(v) for v in row] for row in self._data]
    
    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------
    
    def copy(self) -> "Matrix":
        """Independent copy (elements are immutable, rows are not shared)."""
        clone = Matrix(self._rows, self._cols, self._field)
        clone._data = [list(row) for row in self._data]
        return clone
    
    def transpose(self) -> "Matrix":
        result = Matrix(self._cols, self._rows, self._field)
        result._data = [list(col) for col in zip(*self._data)]
        return result
    
    def reshape(self, rows: int, cols: int) -> "Matrix":
        """
        New matrix with the same entries in row-major order.
        
        Raises:
            DimensionMismatchError: If rows * cols differs from the element count
        """
        if rows * cols != self._rows * self._cols:
            raise DimensionMismatchError(
                f"Cannot reshape {self._rows}x{self._cols} matrix into {rows}x{cols}"
            )
        flat = [v for row in self._data for v in row]
        result = Matrix(rows, cols, self._field)
        result._data = [flat[r * cols:(r + 1) * cols] for r in range(rows)]
        return result
    
    # ------------------------------------------------------------------
    # Elementary row operations
    # ------------------------------------------------------------------
    
    def swap_rows(self, i: int, k: int) -> None:
        """Exchange rows i and k in place."""
        self._check_index(i, 0)
        self._check_index(k, 0)
        self._data[i], self._data[k] = self._data[k], self._data[i]
    
    def scale_row(self, i: int, factor: Scalar) -> None:
        """Multiply every entry of row i by factor in place."""
        self._check_index(i, 0)
        self._data[i] = [v * factor for v in self._data[i]]
    
    def subtract_scaled_row(self, target: int, source: int, factor: Scalar) -> None:
        """row[target] -= factor * row[source], in place."""
        self._check_index(target, 0)
        self._check_index(source, 0)
        src = self._data[source]
        self._data[target] = [t - factor * s for t, s in zip(self._data[target], src)]
    
    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    
    def _check_same_field(self, other: "Matrix") -> None:
        if other._field is not self._field:
            raise TypeError(
                f"Cannot combine matrices over {self._field.__name__} "
                f"and {other._field.__name__}"
            )
    
    def _check_same_shape(self, other: "Matrix", op: str) -> None:
        self._check_same_field(other)
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot {op} {self._rows}x{self._cols} and "
                f"{other._rows}x{other._cols} matrices"
            )
    
    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self * other.
        
        result[i][j] = sum over k of self[i][k] * other[k][j]
        
        Raises:
            DimensionMismatchError: If self.column_count != other.row_count
        """
        self._check_same_field(other)
        if self._cols != other._rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self._rows}x{self._cols} by "
                f"{other._rows}x{other._cols} matrix"
            )
        
        p = self._field.modulus
        other_cols = list(zip(*other._data))
        result = Matrix(self._rows, other._cols, self._field)
        # Accumulate on plain ints and reduce once per entry
        result._data = [
            [
                self._field(sum(a.value * b.value for a, b in zip(row, col)) % p)
                for col in other_cols
            ]
            for row in self._data
        ]
        return result
    
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        result = Matrix(self._rows, self._cols, self._field)
        result._data = [
            [a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)
        ]
        return result
    
    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        result = Matrix(self._rows, self._cols, self._field)
        result._data = [
            [a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)
        ]
        return result
    
    def __neg__(self) -> "Matrix":
        result = Matrix(self._rows, self._cols, self._field)
        result._data = [[-v for v in row] for row in self._data]
        return result
    
    def _scaled(self, factor: Scalar) -> "Matrix":
        factor = self._field(factor)
        result = Matrix(self._rows, self._cols, self._field)
        result._data = [[v * factor for v in row] for row in self._data]
        return result
    
    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (int, Zp)):
            return self._scaled(other)
        return NotImplemented
    
    def __rmul__(self, other):
        if isinstance(other, (int, Zp)):
            return self._scaled(other)
        return NotImplemented
    
    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)
    
    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._field is other._field
            and self._data == other._data
        )
    
    __hash__ = None  # mutable
    
    def __repr__(self) -> str:
        return (
            f"Matrix({self._rows}x{self._cols} over {self._field.__name__}, "
            f"{self.to_lists()})"
        )
    
    def __str__(self) -> str:
        width = len(str(self._field.modulus - 1))
        lines = [
            "[" + " ".join(str(int(v)).rjust(width) for v in row) + "]"
            for row in self._data
        ]
        return "\n".join(lines)
