"""
Matrix Inversion over a Prime Field

Computes the multiplicative inverse of a square matrix over Z/pZ:
- 2x2 keys: closed form, (1/det) * [[d, -b], [-c, a]]
- every other size: Gauss-Jordan elimination on the augmented system
  [key | identity] with partial pivoting

Because the field is exact, any nonzero pivot works. The default
"largest" strategy picks the row whose pivot has the largest canonical
representative (ties go to the lowest row index); it reproduces the row
swap sequence of the classic floating-point formulation. The
"first_nonzero" strategy is the minimal algebraic rule. Both produce the
same inverse, since a matrix inverse is unique.

The caller's matrix is never modified; elimination runs on a copy.
"""

import logging
from typing import Callable, Dict

from .matrix import Matrix
from .zp import Zp
from ..exceptions import DimensionMismatchError, NotInvertibleError


logger = logging.getLogger(__name__)

PIVOT_LARGEST = "largest"
PIVOT_FIRST_NONZERO = "first_nonzero"
DEFAULT_PIVOTING = PIVOT_LARGEST


# ============================================================================
# Pivot selection
# ============================================================================

def _largest_pivot_row(work: Matrix, col: int) -> int:
    """Row in [col, n) with the largest representative in column col."""
    best_row = col
    best_value = work[col, col].value
    for k in range(col + 1, work.row_count):
        candidate = work[k, col].value
        if candidate > best_value:
            best_value = candidate
            best_row = k
    return best_row


def _first_nonzero_pivot_row(work: Matrix, col: int) -> int:
    """First row in [col, n) with a nonzero entry in column col."""
    for k in range(col, work.row_count):
        if work[k, col]:
            return k
    return col


PIVOT_STRATEGIES: Dict[str, Callable[[Matrix, int], int]] = {
    PIVOT_LARGEST: _largest_pivot_row,
    PIVOT_FIRST_NONZERO: _first_nonzero_pivot_row,
}


def _pivot_strategy(pivoting: str) -> Callable[[Matrix, int], int]:
    try:
        return PIVOT_STRATEGIES[pivoting]
    except KeyError:
        raise ValueError(
            f"Unknown pivoting strategy {pivoting!r}; "
            f"expected one of {sorted(PIVOT_STRATEGIES)}"
        ) from None


def _require_square(matrix: Matrix) -> None:
    if not matrix.is_square:
        rows, cols = matrix.shape
        raise DimensionMismatchError(f"Only square matrices are invertible, got {rows}x{cols}")


# ============================================================================
# Inversion
# ============================================================================

def invert_2x2(matrix: Matrix) -> Matrix:
    """
    Closed-form inverse of a 2x2 matrix.
    
    Args:
        matrix: 2x2 matrix [[a, b], [c, d]]
        
    Returns:
        (1/det) * [[d, -b], [-c, a]] where det = a*d - b*c
        
    Raises:
        NotInvertibleError: If the determinant is zero
    """
    if matrix.shape != (2, 2):
        raise DimensionMismatchError(f"Expected a 2x2 matrix, got {matrix.shape}")
    
    a, b = matrix[0, 0], matrix[0, 1]
    c, d = matrix[1, 0], matrix[1, 1]
    
    if a * d == b * c:
        raise NotInvertibleError("The matrix is not invertible (determinant is 0)")
    
    det = a * d - b * c
    return Matrix.from_rows(
        [[d / det, -b / det],
         [-c / det, a / det]],
        matrix.field,
    )


def gauss_jordan_inverse(matrix: Matrix, pivoting: str = DEFAULT_PIVOTING) -> Matrix:
    """
    Inverse of an n x n matrix by Gauss-Jordan elimination.
    
    Algorithm:
    1. Augment a working copy of the matrix with the identity
    2. Forward phase: for each column, swap the chosen pivot row into
       place, then clear every entry below the pivot
    3. Backward phase: from the last row up, normalise the pivot to 1
       and clear every entry above it
    4. The augmented half now holds the inverse
    
    Every row operation is mirrored on both halves.
    
    Args:
        matrix: Square matrix over a prime field
        pivoting: "largest" or "first_nonzero"
        
    Returns:
        New matrix M with matrix * M == identity
        
    Raises:
        NotInvertibleError: If a zero pivot shows the matrix is singular
        DimensionMismatchError: If the matrix is not square
    """
    _require_square(matrix)
    select_pivot = _pivot_strategy(pivoting)
    
    n = matrix.row_count
    key = matrix.copy()
    inverse = Matrix.identity(n, matrix.field)
    
    # Forward elimination
    for i in range(n):
        pivot_row = select_pivot(key, i)
        if pivot_row != i:
            logger.debug("Pivot column %d: swapping rows %d and %d", i, i, pivot_row)
            key.swap_rows(i, pivot_row)
            inverse.swap_rows(i, pivot_row)
        
        for k in range(i + 1, n):
            if not key[i, i]:
                raise NotInvertibleError(
                    f"The matrix is not invertible (no nonzero pivot in column {i})"
                )
            d = key[k, i] / key[i, i]
            key.subtract_scaled_row(k, i, d)
            inverse.subtract_scaled_row(k, i, d)
    
    # Back substitution
    for i in reversed(range(n)):
        pivot = key[i, i]
        if not pivot:
            raise NotInvertibleError(
                f"The matrix is not invertible (zero pivot in row {i})"
            )
        
        inverse.scale_row(i, pivot.inverse())
        key[i, i] = 1
        
        for row in reversed(range(i)):
            inverse.subtract_scaled_row(row, i, key[row, i])
            key[row, i] = 0
    
    return inverse


def invert(matrix: Matrix, pivoting: str = DEFAULT_PIVOTING) -> Matrix:
    """
    Multiplicative inverse of a square matrix over its field.
    
    2x2 matrices use the closed form; all other sizes use Gauss-Jordan.
    
    Raises:
        NotInvertibleError: If the matrix is singular
        DimensionMismatchError: If the matrix is not square
        ValueError: If the pivoting strategy is unknown
    """
    _require_square(matrix)
    _pivot_strategy(pivoting)
    
    if matrix.row_count == 2:
        return invert_2x2(matrix)
    return gauss_jordan_inverse(matrix, pivoting)


def determinant(matrix: Matrix) -> Zp:
    """
    Determinant over the matrix's field by forward elimination.
    
    Raises:
        DimensionMismatchError: If the matrix is not square
    """
    _require_square(matrix)
    
    n = matrix.row_count
    work = matrix.copy()
    det = matrix.field.one()
    
    for i in range(n):
        pivot_row = _first_nonzero_pivot_row(work, i)
        if not work[pivot_row, i]:
            return matrix.field.zero()
        if pivot_row != i:
            work.swap_rows(i, pivot_row)
            det = -det
        
        det = det * work[i, i]
        for k in range(i + 1, n):
            work.subtract_scaled_row(k, i, work[k, i] / work[i, i])
    
    return det


def is_invertible(matrix: Matrix) -> bool:
    """True iff the square matrix has a nonzero determinant."""
    return bool(determinant(matrix))
