"""
Unit tests for modular arithmetic and the prime field element.

Tests:
- Integer helpers (extended gcd, modular inverse, mod_exp, is_prime)
- Zp arithmetic and comparisons
- prime_field factory
"""

import pytest

from hill97.core_math.modular import extended_gcd, mod_inverse, mod_exp, is_prime
from hill97.core_math.zp import Zp, Z97, prime_field
from hill97.exceptions import FieldDivisionByZeroError, NotInvertibleError


class TestModular:
    """Unit tests for integer helpers."""
    
    def test_extended_gcd_bezout(self):
        """a*x + b*y should equal gcd(a, b)."""
        for a, b, expected in [(240, 46, 2), (97, 15, 1), (35, 64, 1), (48, 18, 6), (1, 1, 1)]:
            g, x, y = extended_gcd(a, b)
            assert g == expected
            assert a * x + b * y == g
    
    def test_mod_inverse(self):
        """Test modular inverse."""
        # 3 * 7 ≡ 1 (mod 10)
        assert mod_inverse(3, 10) == 7
        assert (15 * mod_inverse(15, 97)) % 97 == 1
    
    def test_mod_inverse_negative_input(self):
        """Negative inputs are reduced first."""
        assert mod_inverse(-3, 97) == mod_inverse(94, 97)
    
    def test_mod_inverse_missing(self):
        """Non-coprime inputs have no inverse."""
        with pytest.raises(ValueError):
            mod_inverse(4, 10)
    
    def test_mod_exp(self):
        """Test modular exponentiation."""
        assert mod_exp(2, 10, 1000) == 24
        assert mod_exp(7, 0, 13) == 1
        assert mod_exp(5, 3, 1) == 0
        # Fermat's little theorem
        assert mod_exp(2, 96, 97) == 1
    
    def test_mod_exp_invalid(self):
        """Negative exponent or non-positive modulus should raise."""
        with pytest.raises(ValueError):
            mod_exp(2, -1, 97)
        with pytest.raises(ValueError):
            mod_exp(2, 3, 0)
    
    def test_is_prime(self):
        """Primes should be identified."""
        for p in [2, 3, 5, 7, 13, 97, 101, 7919, 2**61 - 1]:
            assert is_prime(p), f"{p} should be prime"
    
    def test_is_prime_composites(self):
        """Composites, including strong pseudoprimes, should be rejected."""
        for c in [-7, 0, 1, 4, 91, 561, 1000, 3215031751]:
            assert not is_prime(c), f"{c} should not be prime"


class TestZp:
    """Unit tests for the Z/97Z element type."""
    
    def test_reduction_on_construction(self):
        """Values are reduced into [0, 97)."""
        assert Zp(98).value == 1
        assert Zp(-3).value == 94
        assert Zp(97).value == 0
        assert Zp().value == 0
    
    def test_default_field_is_z97(self):
        """Z97 is the default element type."""
        assert Z97 is Zp
        assert Zp.modulus == 97
    
    def test_add_wraps(self):
        """96 + 5 = 101 ≡ 4 (mod 97)."""
        assert Zp(96) + Zp(5) == Zp(4)
        assert Zp(96) + 5 == 4
        assert 5 + Zp(96) == 4
    
    def test_sub_and_neg(self):
        """Subtraction and negation stay in range."""
        assert Zp(2) - Zp(5) == 94
        assert 1 - Zp(2) == 96
        assert -Zp(3) == 94
        assert -Zp(0) == 0
    
    def test_mul(self):
        """Multiplication reduces the product."""
        assert Zp(50) * Zp(2) == 3
        assert 3 * Zp(65) == 1
    
    def test_div(self):
        """Division is multiplication by the inverse."""
        assert Zp(1) / Zp(3) == Zp(3).inverse()
        assert Zp(10) / 5 == 2
        assert 10 / Zp(5) == 2
        for x in range(1, 97):
            assert Zp(x) / Zp(x) == 1
    
    def test_div_by_zero(self):
        """Dividing by the zero element fails for every numerator."""
        for x in range(97):
            with pytest.raises(FieldDivisionByZeroError):
                Zp(x) / Zp(0)
        with pytest.raises(ZeroDivisionError):
            Zp(1) / 0
        with pytest.raises(FieldDivisionByZeroError):
            5 / Zp(0)
    
    def test_inverse(self):
        """Every nonzero element has an inverse."""
        assert Zp(1).inverse() == 1
        assert Zp(3).inverse() == 65
        for x in range(1, 97):
            assert Zp(x) * Zp(x).inverse() == 1
    
    def test_inverse_of_zero(self):
        """Zero has no inverse."""
        with pytest.raises(NotInvertibleError):
            Zp(0).inverse()
    
    def test_pow(self):
        """Integer powers, including negative exponents."""
        assert Zp(2) ** 96 == 1
        assert Zp(2) ** 0 == 1
        assert Zp(2) ** -1 == 49
        assert Zp(5) ** -2 == Zp(5).inverse() * Zp(5).inverse()
    
    def test_ordering(self):
        """Elements order by canonical value."""
        assert Zp(3) < Zp(5)
        assert Zp(96) > 5
        assert Zp(100) < Zp(4)  # 100 ≡ 3
        assert sorted([Zp(9), Zp(-1), Zp(0)]) == [0, 9, 96]
    
    def test_equality_and_hash(self):
        """Equal values compare and hash equally."""
        assert Zp(98) == Zp(1)
        assert Zp(98) == 1
        assert hash(Zp(98)) == hash(Zp(1)) == hash(1)
        assert len({Zp(1), Zp(98), Zp(2)}) == 2
        assert Zp(1) != "1"

    def test_unreduced_ints_not_equal(self):
        """Ints compare by canonical value, so equality agrees with hashing."""
        assert Zp(1) != 98
        assert Zp(94) != -3
        assert Zp(-3) == 94
        for element in (Zp(0), Zp(1), Zp(50), Zp(96)):
            for other in (element.value, element.value + 97, element.value - 97):
                if element == other:
                    assert hash(element) == hash(other)

    def test_dict_and_set_lookup_with_ints(self):
        """Elements find int keys only when the values match."""
        table = {1: "one", 98: "ninety-eight"}
        assert table.get(Zp(1)) == "one"
        assert table.get(Zp(98)) == "one"
        assert {Zp(5)} == {5}
        assert 102 not in {Zp(5)}

    def test_ordering_against_ints_is_unreduced(self):
        """Comparisons with ints use the canonical value as is."""
        assert Zp(1) < 98
        assert Zp(96) > -1
    
    def test_conversions(self):
        """int(), bool(), str() and repr()."""
        assert int(Zp(-1)) == 96
        assert not Zp(97)
        assert Zp(5)
        assert str(Zp(5)) == "5"
        assert repr(Zp(5)) == "Zp(5 mod 97)"
    
    def test_zero_one(self):
        """Field identities."""
        assert Zp.zero() == 0
        assert Zp.one() == 1
        assert Zp.one() * Zp(42) == 42
        assert Zp.zero() + Zp(42) == 42
    
    def test_elements(self):
        """elements() lists the whole field."""
        values = [int(x) for x in Zp.elements()]
        assert values == list(range(97))
    
    def test_rejects_non_integers(self):
        """Only ints and field elements are accepted."""
        with pytest.raises(TypeError):
            Zp("3")
        with pytest.raises(TypeError):
            Zp(2.0)
        with pytest.raises(TypeError):
            Zp(1) + 1.5


class TestPrimeField:
    """Tests for fields with other prime moduli."""
    
    def test_default_modulus_returns_zp(self):
        assert prime_field(97) is Zp
    
    def test_small_field_arithmetic(self):
        """Z/7Z arithmetic."""
        Z7 = prime_field(7)
        assert Z7.modulus == 7
        assert Z7(3) * Z7(5) == 1
        assert Z7(3).inverse() == 5
        assert Z7(6) + 2 == 1
        assert repr(Z7(3)) == "Z7(3 mod 7)"
    
    def test_cached(self):
        """The same class is returned for the same modulus."""
        assert prime_field(7) is prime_field(7)
    
    def test_composite_rejected(self):
        """Composite moduli do not form a field."""
        with pytest.raises(ValueError):
            prime_field(91)
        with pytest.raises(ValueError):
            prime_field(26)
    
    def test_mixing_fields_rejected(self):
        """Elements of different fields cannot be combined."""
        Z7 = prime_field(7)
        with pytest.raises(TypeError):
            Z7(1) + Zp(1)
        with pytest.raises(TypeError):
            Zp(Z7(1))
        assert Zp(1) != Z7(1)
