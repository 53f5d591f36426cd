"""Loads RSA keys from PEM encoded files into the plain key records.

Recognizes the two common containers for each key half: X.509 SubjectPublicKeyInfo (PKIX) and bare PKCS#1 for public
keys, PKCS#8 PrivateKeyInfo and bare PKCS#1 for private keys. Which one a DER blob holds is found out by attempting
each decoder in turn, the outcome is reported as a `ParsedKey` tagged with its `KeyFormat`.

Typical usage example:

    pub = load_public_key(pathlib.Path("key.pub"))
    priv = load_private_key(pathlib.Path("key"))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import enum
import logging
import pathlib
import typing

from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import base
from pyasn1_modules import rfc5208
from pyasn1_modules import rfc5280
from pyasn1_modules import rfc8017

from rawrsa.errors import KeyFormatError
from rawrsa.keys import PrivateKey
from rawrsa.keys import PublicKey

logger = logging.getLogger(__name__)

PUBLIC_LABELS = ("PUBLIC KEY", "RSA PUBLIC KEY")
PRIVATE_LABELS = ("PRIVATE KEY", "RSA PRIVATE KEY")


class KeyFormat(enum.Enum):
    PKIX = "PKIX"
    PKCS1 = "PKCS#1"
    PKCS8 = "PKCS#8"


class ParsedKey(typing.NamedTuple):
    """A key recovered from DER, along with the container it came in."""
    format: KeyFormat
    key: PublicKey | PrivateKey


def read_pem(file: pathlib.Path | str) -> tuple[str, bytes]:
    """Reads the first PEM block of a file.

    Anything before the BEGIN line is skipped, the block ends at the END line matching its label.

    Args:
        file: The file to read.

    Returns:
        Tuple of (label, decoded DER payload).

    Raises:
        KeyFormatError: If the filename is empty or the file holds no complete PEM block.
        binascii.Error: If the payload is not valid base64.
    """
    if not str(file).strip():
        raise KeyFormatError("filename cannot be empty")
    with open(file, "rb") as f:
        raw = f.read()
    try:
        lines = iter(raw.decode("ascii").splitlines())
    except UnicodeDecodeError as exc:
        raise KeyFormatError("failed to decode PEM block") from exc
    label = None
    for line in lines:
        line = line.strip()
        if line.startswith("-----BEGIN ") and line.endswith("-----"):
            label = line[len("-----BEGIN "):-len("-----")]
            break
    if label is None:
        raise KeyFormatError("failed to decode PEM block")
    footer = f"-----END {label}-----"
    parcel = []
    for line in lines:
        line = line.strip()
        if line == footer:
            break
        if line.startswith("-----END "):
            raise KeyFormatError(f"PEM footer {line} does not match {footer}")
        parcel.append(line)
    else:
        raise KeyFormatError(f"PEM File does not contain footer: {footer}")
    return label, base64.b64decode("".join(parcel))


def _decode(der: bytes, asn1_spec: base.Asn1Item) -> typing.Any:
    """Decodes `der` against `asn1_spec`, None if it does not fit exactly."""
    try:
        decoded, rest = decoder.decode(der, asn1Spec=asn1_spec)
    except error.PyAsn1Error as exc:
        logger.debug("DER does not decode as %s: %s", type(asn1_spec).__name__, exc)
        return None
    if rest:
        logger.debug("DER decodes as %s with %d trailing bytes", type(asn1_spec).__name__, len(rest))
        return None
    return decoded


def _pkcs1_public(der: bytes) -> PublicKey | None:
    keydata = _decode(der, rfc8017.RSAPublicKey())
    if keydata is None:
        return None
    pykeyd = localize.encode(keydata)
    return PublicKey(pykeyd["modulus"], pykeyd["publicExponent"])


def _pkcs1_private(der: bytes) -> PrivateKey | None:
    keydata = _decode(der, rfc8017.RSAPrivateKey())
    if keydata is None:
        return None
    if keydata["version"] != 0:
        raise KeyFormatError("invalid number of primes in RSA private key, expected 2")
    pykeyd = localize.encode(keydata)
    return PrivateKey(pykeyd["prime1"], pykeyd["prime2"], pykeyd["privateExponent"], pykeyd["exponent1"],
                      pykeyd["exponent2"], pykeyd["coefficient"])


def parse_public_der(der: bytes) -> ParsedKey:
    """Parses a DER encoded RSA public key, PKIX first, then PKCS#1.

    Args:
        der: The DER payload.

    Returns:
        The parsed key, tagged with its container format.

    Raises:
        KeyFormatError: If neither container matches, or a PKIX key is not an RSA key.
    """
    spki = _decode(der, rfc5280.SubjectPublicKeyInfo())
    if spki is not None:
        if spki["algorithm"]["algorithm"] != rfc8017.rsaEncryption:
            raise KeyFormatError("unsupported public key type")
        key = _pkcs1_public(spki["subjectPublicKey"].asOctets())
        if key is None:
            raise KeyFormatError("malformed RSA public key in PKIX wrapper")
        logger.info("parsed PKIX public key")
        return ParsedKey(KeyFormat.PKIX, key)
    key = _pkcs1_public(der)
    if key is not None:
        logger.info("parsed PKCS#1 public key")
        return ParsedKey(KeyFormat.PKCS1, key)
    raise KeyFormatError("failed to parse: unknown public key type")


def parse_private_der(der: bytes) -> ParsedKey:
    """Parses a DER encoded RSA private key, PKCS#8 first, then PKCS#1.

    Args:
        der: The DER payload.

    Returns:
        The parsed key, tagged with its container format.

    Raises:
        KeyFormatError: If neither container matches, the key is not RSA, or it is a multi-prime key.
    """
    info = _decode(der, rfc5208.PrivateKeyInfo())
    if info is not None:
        if info["version"] != 0:
            raise KeyFormatError("Unsupported version of private key information wrapper")
        if info["privateKeyAlgorithm"]["algorithm"] != rfc8017.rsaEncryption:
            raise KeyFormatError("unsupported private key type")
        key = _pkcs1_private(info["privateKey"].asOctets())
        if key is None:
            raise KeyFormatError("malformed RSA private key in PKCS#8 wrapper")
        logger.info("parsed PKCS#8 private key")
        return ParsedKey(KeyFormat.PKCS8, key)
    key = _pkcs1_private(der)
    if key is not None:
        logger.info("parsed PKCS#1 private key")
        return ParsedKey(KeyFormat.PKCS1, key)
    raise KeyFormatError("failed to parse: unknown private key type")


def load_public_key(file: pathlib.Path | str) -> PublicKey:
    """Loads a validated RSA public key from a PEM file.

    Args:
        file: The file to import the public key from.

    Returns:
        The imported public key.

    Raises:
        KeyFormatError: If the PEM block is not a public key or cannot be parsed.
        InvalidParameters: If the parsed numbers do not form a usable key.
    """
    label, der = read_pem(file)
    if label not in PUBLIC_LABELS:
        raise KeyFormatError(f"invalid public key type. Got {label}, expected PUBLIC KEY")
    key = parse_public_der(der).key
    key.validate()
    return key


def load_private_key(file: pathlib.Path | str) -> PrivateKey:
    """Loads a validated RSA private key from a PEM file.

    Args:
        file: The file to import the private key from.

    Returns:
        The imported private key.

    Raises:
        KeyFormatError: If the PEM block is not a private key or cannot be parsed.
        InvalidParameters: If the parsed numbers do not form a usable key.
    """
    label, der = read_pem(file)
    if label not in PRIVATE_LABELS:
        raise KeyFormatError(f"invalid private key type. Got {label}, expected PRIVATE KEY")
    key = parse_private_der(der).key
    key.validate()
    return key
