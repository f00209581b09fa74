"""
Error hierarchy for hill97.

Every failure is an ordinary, recoverable exception raised at the point of
violation. Each error also derives from the builtin exception a Python
caller would expect for that category, so either can be caught:

- NotInvertibleError      -> ValueError
- FieldDivisionByZeroError -> ZeroDivisionError
- DimensionMismatchError  -> ValueError
- IndexOutOfRangeError    -> IndexError
- UnknownCharacterError   -> ValueError
"""

from typing import Optional


class HillCipherError(Exception):
    """Base class for all hill97 errors."""
    pass


class NotInvertibleError(HillCipherError, ValueError):
    """Raised when a matrix or field element has no multiplicative inverse."""
    pass


class FieldDivisionByZeroError(HillCipherError, ZeroDivisionError):
    """Raised when dividing a field element by zero."""
    pass


class DimensionMismatchError(HillCipherError, ValueError):
    """Raised when matrix shapes are incompatible for an operation."""
    pass


class IndexOutOfRangeError(HillCipherError, IndexError):
    """Raised when a matrix element is accessed outside its bounds."""
    pass


class UnknownCharacterError(HillCipherError, ValueError):
    """Raised when a character is not part of the 97-symbol table."""

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Character {character!r}{where} is not in the character table")
