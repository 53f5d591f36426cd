"""Textbook RSA, by hand.

Provides unpadded RSA encryption and decryption built on a square-and-multiply modular exponentiation engine, the
plain key records these operate on, and a loader for PEM encoded keys. Strictly academic: deterministic, unpadded and
not constant-time.

Typical usage example:

    pub = load_public_key("key.pub")
    c = encrypt(pub, b"Hi there!")
    r = decrypt(load_private_key("key"), c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rawrsa.errors import InvalidParameters
from rawrsa.errors import KeyFormatError
from rawrsa.errors import MessageTooLong
from rawrsa.errors import RSAError
from rawrsa.expmod import mod_pow
from rawrsa.keys import PrivateKey
from rawrsa.keys import PublicKey
from rawrsa.pem import load_private_key
from rawrsa.pem import load_public_key
from rawrsa.rsa import decrypt
from rawrsa.rsa import decrypt_crt
from rawrsa.rsa import encrypt

__version__ = "0.0.1"
__all__ = [
    "PublicKey",
    "PrivateKey",
    "encrypt",
    "decrypt",
    "decrypt_crt",
    "mod_pow",
    "load_public_key",
    "load_private_key",
    "RSAError",
    "MessageTooLong",
    "InvalidParameters",
    "KeyFormatError",
    "setup_logging",
]


def setup_logging(level: int = logging.INFO) -> None:
    """Configures the rawrsa loggers to show messages at `level` and above.

    Args:
        level: Logging level. Defaults to logging.INFO.
    """
    logger = logging.getLogger("rawrsa")
    logger.setLevel(level)
    logger.propagate = True
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
