"""
Hill Cipher over Z/97Z

A classical block cipher: the plaintext is padded, split into blocks the
size of the key, each block is mapped into Z/97Z as a column vector and
multiplied by the key matrix. Decryption repeats the process with the
inverse key.

This is for EDUCATIONAL/HISTORICAL purposes only - not secure!

Security Note:
    The Hill cipher is linear. n known plaintext/ciphertext block pairs
    are enough to solve for an n x n key, so it offers no protection
    against a known-plaintext attacker.

Components:
- encrypt / decrypt / is_valid_key: stateless functions over a key matrix
- HillCipher: binds a validated key and caches its inverse
- key_fingerprint: short SHA-256 digest identifying a key in logs
"""

import logging
from typing import List, Sequence

from cryptography.hazmat.primitives import hashes

from .alphabet import PAD_SYMBOL, fields_to_text, text_to_fields, char_to_field
from ..core_math.inverse import DEFAULT_PIVOTING, determinant, invert
from ..core_math.matrix import Matrix
from ..core_math.zp import Z97, Zp
from ..exceptions import DimensionMismatchError, NotInvertibleError


logger = logging.getLogger(__name__)

FINGERPRINT_LENGTH = 16  # hex characters


# ============================================================================
# Key helpers
# ============================================================================

def _require_key_shape(key: Matrix) -> None:
    if not isinstance(key, Matrix):
        raise TypeError(f"Key must be a Matrix, got {type(key).__name__}")
    if not key.is_square:
        rows, cols = key.shape
        raise DimensionMismatchError(f"Hill key must be square, got {rows}x{cols}")
    if key.field.modulus != Z97.modulus:
        raise ValueError(
            f"Hill key must be over Z/{Z97.modulus}Z to match the character table, "
            f"got Z/{key.field.modulus}Z"
        )


def make_key(rows: Sequence[Sequence[int]]) -> Matrix:
    """
    Build a key matrix from nested integer rows.
    
    Negative and large values are reduced modulo 97. The key is only
    checked for shape here; use is_valid_key to check invertibility.
    
    Args:
        rows: Square nested list, e.g. [[0, -3], [5, 6]]
        
    Returns:
        Key matrix over Z/97Z
        
    Raises:
        DimensionMismatchError: If rows are ragged or the key is not square
    """
    key = Matrix.from_rows(rows, Z97)
    _require_key_shape(key)
    return key


def key_fingerprint(key: Matrix) -> str:
    """
    Short SHA-256 fingerprint of a key.
    
    Lets log records and reprs identify a key without exposing its
    entries.
    
    Returns:
        First 16 hex characters of SHA-256("<n>:<e00>,<e01>,...")
    """
    encoded = f"{key.row_count}:" + ",".join(
        str(v) for row in key.to_lists() for v in row
    )
    digest = hashes.Hash(hashes.SHA256())
    digest.update(encoded.encode("ascii"))
    return digest.finalize().hex()[:FINGERPRINT_LENGTH]


def pad_plaintext(text: str, size: int, pad_symbol: str = PAD_SYMBOL) -> str:
    """
    Right-pad text with pad_symbol to a multiple of size.
    
    Appends (size - len(text) % size) % size symbols; the padding is not
    removed by decryption.
    """
    if size <= 0:
        raise ValueError("Block size must be positive")
    if len(pad_symbol) != 1:
        raise ValueError("Pad symbol must be a single character")
    char_to_field(pad_symbol)  # must be encodable
    return text + pad_symbol * ((size - len(text) % size) % size)


# ============================================================================
# Cipher operations
# ============================================================================

def _transform(key: Matrix, text: str, pad_symbol: str) -> str:
    size = key.row_count
    values = text_to_fields(pad_plaintext(text, size, pad_symbol), key.field)
    
    output: List[Zp] = []
    for start in range(0, len(values), size):
        block = Matrix.column(values[start:start + size], key.field)
        output.extend((key * block).column_values(0))
    
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Transformed %d block(s) of size %d with key %s",
            len(values) // size, size, key_fingerprint(key),
        )
    return fields_to_text(output)


def encrypt(key: Matrix, plaintext: str, pad_symbol: str = PAD_SYMBOL) -> str:
    """
    Encrypt plaintext with a Hill key.
    
    Args:
        key: Square key matrix over Z/97Z
        plaintext: Text made of character-table symbols
        pad_symbol: Symbol appended until the length is a multiple of the key size
        
    Returns:
        Ciphertext, as long as the padded plaintext
        
    Raises:
        UnknownCharacterError: If plaintext contains a symbol outside the table
        DimensionMismatchError: If the key is not square
    """
    _require_key_shape(key)
    return _transform(key, plaintext, pad_symbol)


def decrypt(
    key: Matrix,
    ciphertext: str,
    pad_symbol: str = PAD_SYMBOL,
    pivoting: str = DEFAULT_PIVOTING,
) -> str:
    """
    Decrypt ciphertext: encrypt with the inverse of the key.
    
    Trailing padding added at encryption time is kept.
    
    Raises:
        NotInvertibleError: If the key has no inverse
        UnknownCharacterError: If ciphertext contains a symbol outside the table
        DimensionMismatchError: If the key is not square
    """
    _require_key_shape(key)
    return _transform(invert(key, pivoting), ciphertext, pad_symbol)


def is_valid_key(key: Matrix, pivoting: str = DEFAULT_PIVOTING) -> bool:
    """
    Determine whether a key matrix is usable (invertible).
    
    Only NotInvertibleError is turned into False; any other error
    (e.g. a non-square key) propagates.
    """
    _require_key_shape(key)
    try:
        invert(key, pivoting)
    except NotInvertibleError:
        return False
    return True


# ============================================================================
# Bound cipher
# ============================================================================

class HillCipher:
    """
    Hill cipher bound to one key.
    
    The key is validated and inverted once, at construction.
    
    Example:
        >>> cipher = HillCipher.from_rows([[0, -3], [5, 6]])
        >>> cipher.encrypt("Hill Cipher!")
        '`t.T?f^cH2\\\\d'
        >>> cipher.decrypt(cipher.encrypt("Hi!"))
        'Hi! '
    """
    
    def __init__(
        self,
        key: Matrix,
        pad_symbol: str = PAD_SYMBOL,
        pivoting: str = DEFAULT_PIVOTING,
    ):
        """
        Args:
            key: Square key matrix over Z/97Z (copied)
            pad_symbol: Padding symbol for incomplete blocks
            pivoting: Pivot strategy used to invert the key
            
        Raises:
            NotInvertibleError: If the key has no inverse
            DimensionMismatchError: If the key is not square
        """
        _require_key_shape(key)
        char_to_field(pad_symbol)
        self._key = key.copy()
        self._inverse = invert(self._key, pivoting)
        self._pad_symbol = pad_symbol
        self._fingerprint = key_fingerprint(self._key)
        logger.debug("Initialised %dx%d Hill cipher with key %s",
                     self.block_size, self.block_size, self._fingerprint)
    
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], **kwargs) -> "HillCipher":
        """Build a cipher from nested integer rows (see make_key)."""
        return cls(make_key(rows), **kwargs)
    
    @property
    def key(self) -> Matrix:
        """Copy of the encryption key."""
        return self._key.copy()
    
    @property
    def inverse_key(self) -> Matrix:
        """Copy of the decryption key."""
        return self._inverse.copy()
    
    @property
    def block_size(self) -> int:
        return self._key.row_count
    
    @property
    def fingerprint(self) -> str:
        return self._fingerprint
    
    @property
    def determinant(self) -> Zp:
        """Determinant of the key (always nonzero)."""
        return determinant(self._key)
    
    def encrypt(self, plaintext: str) -> str:
        return _transform(self._key, plaintext, self._pad_symbol)
    
    def decrypt(self, ciphertext: str) -> str:
        return _transform(self._inverse, ciphertext, self._pad_symbol)
    
    def __repr__(self) -> str:
        return f"HillCipher(size={self.block_size}, key={self._fingerprint})"


# Self-test when run directly
if __name__ == "__main__":
    print("Hill Cipher (mod 97) Test")
    print("=" * 70)
    
    cipher = HillCipher.from_rows([[0, -3], [5, 6]])
    plaintext = "Hill Cipher!"
    ciphertext = cipher.encrypt(plaintext)
    print(f"  Cipher:     {cipher}")
    print(f"  Plaintext:  {plaintext!r}")
    print(f"  Ciphertext: {ciphertext!r}")
    print(f"  Decrypted:  {cipher.decrypt(ciphertext)!r}")
    print(f"  Reference vector: {'✓ PASS' if ciphertext == '`t.T?f^cH2' + chr(92) + 'd' else '✗ FAIL'}")
