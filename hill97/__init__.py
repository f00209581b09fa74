# hill97
"""
Hill cipher modulo 97.

Because 97 is prime, Z/97Z is a field and every key matrix with a nonzero
determinant can be inverted, unlike the classical Z/26Z cipher.

Subpackages:
- core_math: prime field elements, matrices, matrix inversion
- cipher: character table and the Hill cipher engine
"""

__version__ = "1.0.0"

from .exceptions import (
    HillCipherError,
    NotInvertibleError,
    FieldDivisionByZeroError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnknownCharacterError,
)
from .core_math import Zp, Z97, prime_field, Matrix, invert, determinant, is_invertible
from .cipher import HillCipher, encrypt, decrypt, is_valid_key, make_key

__all__ = [
    'HillCipherError',
    'NotInvertibleError',
    'FieldDivisionByZeroError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',
    'UnknownCharacterError',
    'Zp',
    'Z97',
    'prime_field',
    'Matrix',
    'invert',
    'determinant',
    'is_invertible',
    'HillCipher',
    'encrypt',
    'decrypt',
    'is_valid_key',
    'make_key',
]
