"""Exception types raised by rawrsa.

Every error derives from `RSAError` as well as from the builtin family it belongs to, so callers may catch either
the library specific type or the usual `ValueError`/`IOError`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(Exception):
    """Base class of all rawrsa errors."""


class MessageTooLong(RSAError, ValueError):
    """The integer representative of a message is not strictly below the modulus."""

    def __init__(self, message: str = "Message too long for the current key.") -> None:
        super().__init__(message)


class InvalidParameters(RSAError, ValueError):
    """Numeric input that no RSA operation is defined for. (Zero modulus, negative exponent etc.)"""


class KeyFormatError(RSAError, IOError):
    """Key container could not be read or recognized."""
