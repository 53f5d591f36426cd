# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from rawrsa import errors
from rawrsa.keys import PrivateKey
from rawrsa.keys import PublicKey


def test_public_fields():
    key = PublicKey(143, 7)
    assert key.modulus == 143
    assert key.public_exponent == 7
    key.validate()


def test_records_immutable():
    pub = PublicKey(143, 7)
    priv = PrivateKey.from_primes(11, 13, 103)
    with pytest.raises(AttributeError):
        pub.modulus = 221
    with pytest.raises(AttributeError):
        priv.d = 7


@pytest.mark.parametrize("modulus,exponent", [(1, 7), (0, 7), (-143, 7), (143, 0), (143, -7)])
def test_public_validates(modulus, exponent):
    with pytest.raises(errors.InvalidParameters):
        PublicKey(modulus, exponent).validate()


def test_private_from_primes():
    key = PrivateKey.from_primes(61, 53, 413)
    assert key == PrivateKey(61, 53, 413, 53, 49, 38)
    assert key.modulus == 3233
    key.validate()


def test_private_from_primes_small():
    key = PrivateKey.from_primes(11, 13, 103)
    assert (key.dp, key.dq, key.qinv) == (3, 7, 6)
    assert (key.qinv * key.q) % key.p == 1


@pytest.mark.parametrize("p,q,d", [(1, 13, 103), (11, 0, 103), (11, 13, -1)])
def test_private_validates(p, q, d):
    with pytest.raises(errors.InvalidParameters):
        PrivateKey(p, q, d, 0, 0, 0).validate()


@pytest.mark.parametrize("p,q", [(1, 13), (11, -13), (6, 4)])
def test_private_from_primes_validates(p, q):
    with pytest.raises(errors.InvalidParameters):
        PrivateKey.from_primes(p, q, 5)


def test_public_str():
    assert str(PublicKey(143, 7)) == "Public Key:\n  N: 143\n  E: 7"


def test_private_str():
    rendered = str(PrivateKey(61, 53, 413, 53, 49, 38)).splitlines()
    assert rendered == [
        "Private Key:",
        "  P:    61",
        "  Q:    53",
        "  D:    413",
        "  Dp:   53",
        "  Dq:   49",
        "  Qinv: 38",
    ]
