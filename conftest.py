"""Configures pytest further, and provides reference keys shared by the test modules."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

KEY_SIZES = [
    1024,
    2048,
    pytest.param(4096, marks=pytest.mark.slow, id="4096"),
    pytest.param(8192, marks=pytest.mark.extreme, id="8192"),
]
_generated = {}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session", params=KEY_SIZES)
def reference_key(request) -> rsa.RSAPrivateKey:
    """A `cryptography` generated private key, one per size, generated once per session."""
    if request.param not in _generated:
        _generated[request.param] = rsa.generate_private_key(public_exponent=65537, key_size=request.param)
    return _generated[request.param]


@pytest.fixture(scope="session")
def reference_files(reference_key, tmp_path_factory) -> dict[str, object]:
    """The reference key serialized to every container the loader understands."""
    folder = tmp_path_factory.mktemp(f"keys_{reference_key.key_size}")
    public = reference_key.public_key()
    payloads = {
        "private_pkcs8":
            reference_key.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.PKCS8,
                                        serialization.NoEncryption()),
        "private_pkcs1":
            reference_key.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.TraditionalOpenSSL,
                                        serialization.NoEncryption()),
        "public_pkix":
            public.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo),
        "public_pkcs1":
            public.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.PKCS1),
    }
    files = {"key": reference_key}
    for name, payload in payloads.items():
        loc = folder / f"{name}.pem"
        loc.write_bytes(payload)
        files[name] = loc
    return files
