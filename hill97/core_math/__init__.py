# Core Math Module
"""
Modular linear algebra over Z/97Z:
- Integer helpers (extended Euclid, modular inverse, square-and-multiply)
- Prime field element type (Zp)
- Matrix over a prime field
- Matrix inversion (closed-form 2x2, Gauss-Jordan n x n)
"""

from .zp import Zp, Z97, prime_field
from .matrix import Matrix
from .inverse import invert, determinant, is_invertible

__all__ = [
    'Zp',
    'Z97',
    'prime_field',
    'Matrix',
    'invert',
    'determinant',
    'is_invertible',
]
