"""The RSA key model.

Plain, immutable records carrying the integer components of RSA keys. They do no arithmetic beyond what is needed to
describe themselves and are consumed by `rawrsa.rsa`. Loading them from files is handled by `rawrsa.pem`.

Typical usage example:

    pub = PublicKey(143, 7)
    priv = PrivateKey.from_primes(11, 13, 103)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rawrsa.errors import InvalidParameters


class PublicKey(typing.NamedTuple):
    """An RSA Public Key.

    Attributes:
        modulus: The modulus N of the keypair.
        public_exponent: The public exponent E.
    """
    modulus: int
    public_exponent: int

    def validate(self) -> None:
        """Checks the key is usable for encryption.

        Raises:
            InvalidParameters: If the modulus is not above 1 or the exponent is not positive.
        """
        if self.modulus <= 1:
            raise InvalidParameters("Public key modulus must be greater than 1.")
        if self.public_exponent <= 0:
            raise InvalidParameters("Public exponent must be positive.")

    def __str__(self) -> str:
        return f"Public Key:\n  N: {self.modulus}\n  E: {self.public_exponent}"


class PrivateKey(typing.NamedTuple):
    """An RSA Private Key.

    Holds both factors of the modulus and the private exponent. The CRT components are kept as the "industry
    standard" private key layout demands, but only `rawrsa.rsa.decrypt_crt` makes use of them.

    Attributes:
        p: Private Prime 1.
        q: Private Prime 2.
        d: The private exponent.
        dp: CRT Component d mod (p-1).
        dq: CRT Component d mod (q-1).
        qinv: CRT Component q^-1 mod p.
    """
    p: int
    q: int
    d: int
    dp: int
    dq: int
    qinv: int

    @property
    def modulus(self) -> int:
        """The modulus N, derived from the two factors."""
        return self.p * self.q

    def validate(self) -> None:
        """Checks the key is usable for decryption.

        No primality test is run, the factors are trusted as loaded.

        Raises:
            InvalidParameters: If a factor is not above 1 or the private exponent is negative.
        """
        if self.p <= 1 or self.q <= 1:
            raise InvalidParameters("Private key factors must be greater than 1.")
        if self.d < 0:
            raise InvalidParameters("Private exponent must be non-negative.")

    @classmethod
    def from_primes(cls, p: int, q: int, d: int) -> "PrivateKey":
        """Builds a Private Key from its factors and private exponent, deriving the CRT components.

        Args:
            p: Private Prime 1.
            q: Private Prime 2.
            d: The private exponent.

        Returns:
            The complete Private Key.

        Raises:
            InvalidParameters: If the factors are unusable or q has no inverse modulo p.
        """
        if p <= 1 or q <= 1:
            raise InvalidParameters("Private key factors must be greater than 1.")
        try:
            qinv = pow(q, -1, p)
        except ValueError as exc:
            raise InvalidParameters("Factor q is not invertible modulo p.") from exc
        return cls(p, q, d, d % (p - 1), d % (q - 1), qinv)

    def __str__(self) -> str:
        return ("Private Key:\n"
                f"  P:    {self.p}\n"
                f"  Q:    {self.q}\n"
                f"  D:    {self.d}\n"
                f"  Dp:   {self.dp}\n"
                f"  Dq:   {self.dq}\n"
                f"  Qinv: {self.qinv}")
