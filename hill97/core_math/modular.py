"""
Modular Integer Arithmetic

Plain-integer helpers underlying the prime field type:
- Extended Euclidean algorithm
- Modular multiplicative inverse
- Modular exponentiation (square-and-multiply algorithm)
- Deterministic primality test for field moduli

Note: mod_exp avoids Python's built-in pow(a, b, mod) so the algorithm
      stays visible; mod_inverse uses the Extended Euclidean Algorithm.
"""

from typing import Tuple


# Witnesses that make Miller-Rabin deterministic for n < 3.3 * 10^24
_MR_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm (iterative).
    
    Finds integers x, y such that: a*x + b*y = gcd(a, b)
    
    Args:
        a: First integer
        b: Second integer
        
    Returns:
        Tuple (gcd, x, y) where a*x + b*y = gcd
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.
    
    Finds x such that (a * x) mod m = 1
    
    Args:
        a: The number to find inverse of
        m: The modulus
        
    Returns:
        Modular inverse of a mod m, in the range [0, m)
        
    Raises:
        ValueError: If inverse doesn't exist (gcd(a, m) != 1)
    """
    g, x, _ = extended_gcd(a % m, m)
    
    if g != 1:
        raise ValueError(f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})")
    
    return x % m


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.
    
    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)
        
    Returns:
        (base^exponent) mod modulus
        
    Raises:
        ValueError: If exponent < 0 or modulus <= 0
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    if modulus == 1:
        return 0
    
    base = base % modulus
    result = 1
    
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    
    return result


def is_prime(n: int) -> bool:
    """
    Deterministic primality test.
    
    Trial division by small primes, then Miller-Rabin with a fixed witness
    set, which is exact for every modulus this package will realistically
    see.
    
    Args:
        n: Number to test
        
    Returns:
        True if n is prime, False otherwise
    """
    if n < 2:
        return False
    for p in _MR_WITNESSES:
        if n == p:
            return True
        if n % p == 0:
            return False
    
    # Write n-1 as 2^r * d
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2
    
    for a in _MR_WITNESSES:
        x = mod_exp(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    
    return True
