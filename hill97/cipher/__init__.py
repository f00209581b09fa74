# Cipher Module
"""
Hill cipher over Z/97Z:
- 97-symbol character table
- Block encryption / decryption with a key matrix
- Key validation and fingerprinting
"""

from .alphabet import CHARACTER_TABLE, PAD_SYMBOL, char_to_field, field_to_char
from .hill import (
    HillCipher, encrypt, decrypt, is_valid_key, make_key, key_fingerprint, pad_plaintext
)

__all__ = [
    'CHARACTER_TABLE',
    'PAD_SYMBOL',
    'char_to_field',
    'field_to_char',
    'HillCipher',
    'encrypt',
    'decrypt',
    'is_valid_key',
    'make_key',
    'key_fingerprint',
    'pad_plaintext',
]
