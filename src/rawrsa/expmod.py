"""The modular exponentiation engine.

Right-to-left binary square-and-multiply over Python's arbitrary precision integers. Used by every RSA transform in
the package instead of the builtin three-argument `pow`.

Typical usage example:

    mod_pow(2, 3, 10)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rawrsa.errors import InvalidParameters


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` by repeated squaring.

    Scans the exponent from the least significant bit upwards, multiplying the running result by the current square
    whenever the bit is set. The base is reduced modulo `modulus` before the first squaring, so any integer base is
    accepted.

    Args:
        base: The integer to exponentiate. May be negative or exceed the modulus.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        The result in range [0, modulus-1].

    Raises:
        InvalidParameters: If the modulus is below 1 or the exponent is negative.
    """
    if modulus < 1:
        raise InvalidParameters("Modulus must be a positive integer.")
    if exponent < 0:
        raise InvalidParameters("Exponent must be a non-negative integer.")
    # 1 % modulus keeps x**0 mod 1 at 0.
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result
