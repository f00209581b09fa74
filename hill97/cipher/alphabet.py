"""
Hill Cipher Character Table

Fixed bijection between 97 characters and the elements of Z/97Z:

    0-25   A-Z
    26-51  a-z
    52-61  0-9
    62     space (the padding symbol)
    63-96  ~ - = ! @ # $ % ^ & * ( ) _ + [ ] ; ' , . / { } : " < > ? ` \\ | TAB LF

The table is a read-only module constant.
"""

import string
from typing import Dict, Iterable, List, Type, Union

from ..core_math.zp import Z97, Zp
from ..exceptions import IndexOutOfRangeError, UnknownCharacterError


PAD_SYMBOL = " "

CHARACTER_TABLE: str = (
    string.ascii_uppercase
    + string.ascii_lowercase
    + string.digits
    + PAD_SYMBOL
    + "~-=!@#$%^&*()_+[];',./{}:\"<>?`\\|\t\n"
)

_CHAR_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(CHARACTER_TABLE)}

if not len(CHARACTER_TABLE) == len(_CHAR_INDEX) == Z97.modulus:
    raise ValueError(
        f"Character table must hold {Z97.modulus} distinct symbols, "
        f"got {len(_CHAR_INDEX)} of {len(CHARACTER_TABLE)}"
    )


def char_to_field(c: str, field: Type[Zp] = Z97) -> Zp:
    """
    Field element assigned to character c.
    
    Raises:
        UnknownCharacterError: If c is not in the table
    """
    try:
        return field(_CHAR_INDEX[c])
    except KeyError:
        raise UnknownCharacterError(c) from None


def field_to_char(f: Union[Zp, int]) -> str:
    """
    Character assigned to field element f (total over Z/97Z).
    
    Plain ints must already be canonical, i.e. in [0, 97).
    
    Raises:
        IndexOutOfRangeError: If f is an int outside [0, 97)
        TypeError: If f is an element of another field
    """
    if isinstance(f, Zp):
        if f.modulus != Z97.modulus:
            raise TypeError(f"Expected an element of Z/{Z97.modulus}Z, got Z/{f.modulus}Z")
        return CHARACTER_TABLE[f.value]
    if not 0 <= f < len(CHARACTER_TABLE):
        raise IndexOutOfRangeError(f"{f} is not a value in [0, {len(CHARACTER_TABLE)})")
    return CHARACTER_TABLE[f]


def text_to_fields(text: str, field: Type[Zp] = Z97) -> List[Zp]:
    """
    Map every character of text into the field.
    
    Raises:
        UnknownCharacterError: With the position of the first bad character
    """
    values = []
    for position, c in enumerate(text):
        index = _CHAR_INDEX.get(c)
        if index is None:
            raise UnknownCharacterError(c, position)
        values.append(field(index))
    return values


def fields_to_text(values: Iterable[Zp]) -> str:
    return "".join(field_to_char(v) for v in values)


def is_encodable(text: str) -> bool:
    """True if every character of text is in the table."""
    return all(c in _CHAR_INDEX for c in text)
