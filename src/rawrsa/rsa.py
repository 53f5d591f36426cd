"""Provides the textbook RSA transforms: encryption and decryption without any padding.

The message is taken as the big-endian unsigned integer its bytes spell out and run straight through the RSA
trapdoor function, using the square-and-multiply engine from `rawrsa.expmod`. Leading zero bytes are not preserved,
outputs are minimal length byte strings (zero encodes to b"").

Typical usage example:

    c = encrypt(PublicKey(143, 7), b"\x05")
    m = decrypt(PrivateKey.from_primes(11, 13, 103), c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rawrsa.errors import MessageTooLong
from rawrsa.expmod import mod_pow
from rawrsa.keys import PrivateKey
from rawrsa.keys import PublicKey


def encrypt(public_key: PublicKey, message: bytes) -> bytes:
    """Encrypts the message with the public key, textbook style.

    Args:
        public_key: The key to encrypt with.
        message: The message bytes. Their integer value must be below the modulus.

    Returns:
        The ciphertext, minimal length big-endian.

    Raises:
        MessageTooLong: If the message representative is not below the modulus.
        InvalidParameters: If the key is malformed.
    """
    public_key.validate()
    m = bytes_to_integer(message)
    if m >= public_key.modulus:
        raise MessageTooLong()
    c = mod_pow(m, public_key.public_exponent, public_key.modulus)
    return integer_to_bytes(c)


def decrypt(private_key: PrivateKey, ciphertext: bytes) -> bytes:
    """Decrypts the ciphertext with the private key.

    The modulus is recomputed from the two factors and the ciphertext is exponentiated directly with the private
    exponent. The CRT components are not touched, see `decrypt_crt` for that. Ciphertexts at or above the modulus are
    not rejected, they are reduced like any other base.

    Args:
        private_key: The key to decrypt with.
        ciphertext: The ciphertext bytes.

    Returns:
        The recovered message, minimal length big-endian.

    Raises:
        InvalidParameters: If the key is malformed.
    """
    private_key.validate()
    c = bytes_to_integer(ciphertext)
    n = private_key.p * private_key.q
    m = mod_pow(c, private_key.d, n)
    return integer_to_bytes(m)


def decrypt_crt(private_key: PrivateKey, ciphertext: bytes) -> bytes:
    """Decrypts the ciphertext with the private key, accelerated with CRT.

    Exponentiates separately modulo each factor with the reduced exponents and recombines the halves (Garner's
    formula). Agrees with `decrypt` whenever the stored CRT components are consistent with p, q and d.

    Args:
        private_key: The key to decrypt with.
        ciphertext: The ciphertext bytes.

    Returns:
        The recovered message, minimal length big-endian.

    Raises:
        InvalidParameters: If the key is malformed.
    """
    private_key.validate()
    c = bytes_to_integer(ciphertext) % private_key.modulus
    m_1 = mod_pow(c, private_key.dp, private_key.p)
    m_2 = mod_pow(c, private_key.dq, private_key.q)
    h = ((m_1 - m_2) * private_key.qinv) % private_key.p
    return integer_to_bytes(m_2 + private_key.q * h)


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer in accordance to preset procedures.

    Args:
        msg: The bytes (AKA Octet String) to convert.

    Returns:
        The representative integer. Empty input is zero.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int | None = None) -> bytes:
    """Converts an integer to a byte string.

    Args:
        msg: The non-negative integer to unmarshal.
        fixedlen: The target length of the byte string. Defaults to the minimal length, which is 0 for zero.

    Returns:
        The representative bytes. (AKA Octet String)

    Raises:
        OverflowError: If the integer does not fit `fixedlen` bytes or is negative.
    """
    if fixedlen is None:
        fixedlen = (msg.bit_length() + 7) // 8
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)
