"""
Prime Field Element (Z/pZ)

A value type for integers modulo a prime p. The default field is Z/97Z:
97 is prime, so every nonzero element has a multiplicative inverse and
any nonzero determinant makes a Hill key invertible (unlike the classical
Z/26Z cipher, where determinants sharing a factor with 26 are useless).

Components:
- Zp: element of Z/97Z with exact modular arithmetic
- prime_field(p): builds (and caches) the Zp subclass for another prime

The class-level constructors zero() and one() together with the arithmetic
operators are the capability set Matrix relies on, so any Zp subclass can
be used as a matrix element type.

Example:
    >>> Zp(96) + Zp(5)
    Zp(4 mod 97)
    >>> Zp(3) / Zp(3)
    Zp(1 mod 97)
"""

from functools import total_ordering
from typing import Dict, Iterator, Type

from .modular import is_prime, mod_exp, mod_inverse
from ..exceptions import FieldDivisionByZeroError, NotInvertibleError


DEFAULT_MODULUS = 97


@total_ordering
class Zp:
    """
    Element of the prime field Z/pZ (p = 97 unless built by prime_field).
    
    The stored value is always the canonical representative in [0, p).
    Elements are immutable; every operation returns a new element.
    Operands may be other elements of the same field or plain ints.
    """
    __slots__ = ("_value",)
    
    modulus: int = DEFAULT_MODULUS
    
    def __init__(self, value: int = 0):
        if isinstance(value, Zp):
            self._check_field(value)
            value = value._value
        elif not isinstance(value, int):
            raise TypeError(
                f"{type(self).__name__} expects an int, got {type(value).__name__}"
            )
        self._value = value % self.modulus
    
    # ------------------------------------------------------------------
    # Field capability set
    # ------------------------------------------------------------------
    
    @classmethod
    def zero(cls) -> "Zp":
        """Additive identity."""
        return cls(0)
    
    @classmethod
    def one(cls) -> "Zp":
        """Multiplicative identity."""
        return cls(1)
    
    @classmethod
    def elements(cls) -> Iterator["Zp"]:
        """Iterate over every element of the field in canonical order."""
        for v in range(cls.modulus):
            yield cls(v)
    
    @property
    def value(self) -> int:
        """Canonical representative in [0, p)."""
        return self._value
    
    def inverse(self) -> "Zp":
        """
        Multiplicative inverse via the Extended Euclidean Algorithm.
        
        Returns:
            The unique x with self * x == 1
            
        Raises:
            NotInvertibleError: If self is the zero element
        """
        if self._value == 0:
            raise NotInvertibleError(f"0 has no inverse modulo {self.modulus}")
        return type(self)(mod_inverse(self._value, self.modulus))
    
    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    
    def _check_field(self, other: "Zp") -> None:
        if other.modulus != self.modulus:
            raise TypeError(
                f"Cannot combine elements modulo {self.modulus} and {other.modulus}"
            )
    
    def _coerce(self, other):
        """Return other's canonical int in this field, or None if unsupported."""
        if isinstance(other, Zp):
            self._check_field(other)
            return other._value
        if isinstance(other, int):
            return other % self.modulus
        return None
    
    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self._value + v)
    
    __radd__ = __add__
    
    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self._value - v)
    
    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(v - self._value)
    
    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self._value * v)
    
    __rmul__ = __mul__
    
    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        if v == 0:
            raise FieldDivisionByZeroError(f"Division by zero modulo {self.modulus}")
        return type(self)(self._value * mod_inverse(v, self.modulus))
    
    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        if self._value == 0:
            raise FieldDivisionByZeroError(f"Division by zero modulo {self.modulus}")
        return type(self)(v * mod_inverse(self._value, self.modulus))
    
    def __neg__(self) -> "Zp":
        return type(self)(-self._value)
    
    def __pos__(self) -> "Zp":
        return self
    
    def __pow__(self, exponent: int) -> "Zp":
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** -exponent
        return type(self)(mod_exp(self._value, exponent, self.modulus))
    
    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------
    
    def __eq__(self, other):
        if isinstance(other, Zp):
            return self.modulus == other.modulus and self._value == other._value
        if isinstance(other, int):
            # ints are not reduced, so equal objects hash equally
            return self._value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Zp):
            self._check_field(other)
            return self._value < other._value
        if isinstance(other, int):
            return self._value < other
        return NotImplemented
    
    def __hash__(self) -> int:
        return hash(self._value)
    
    def __bool__(self) -> bool:
        return self._value != 0
    
    def __int__(self) -> int:
        return self._value
    
    def __index__(self) -> int:
        return self._value
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value} mod {self.modulus})"
    
    def __str__(self) -> str:
        return str(self._value)


Z97 = Zp

_FIELDS: Dict[int, Type[Zp]] = {DEFAULT_MODULUS: Zp}


def prime_field(p: int) -> Type[Zp]:
    """
    Return the element type for Z/pZ.
    
    Args:
        p: A prime modulus
        
    Returns:
        Zp for p == 97, otherwise a cached Zp subclass named Z<p>
        
    Raises:
        ValueError: If p is not prime
    """
    if p in _FIELDS:
        return _FIELDS[p]
    if not is_prime(p):
        raise ValueError(f"Modulus {p} is not prime; Z/{p}Z is not a field")
    field = type(f"Z{p}", (Zp,), {"__slots__": (), "modulus": p})
    _FIELDS[p] = field
    return field
