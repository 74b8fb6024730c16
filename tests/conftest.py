import base64

import pytest

from securegen.crypto import generate_keypair


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.fixture(scope="session")
def keypair():
    return generate_keypair("Alice", email="alice@example.com", key_size=2048)


@pytest.fixture(scope="session")
def other_keypair():
    return generate_keypair("Mallory", email="mallory@example.com", key_size=2048)


@pytest.fixture(scope="session")
def protected_keypair():
    return generate_keypair("Bob", key_size=2048, passphrase="correct horse")


@pytest.fixture
def key_env(keypair):
    public_armored, private_armored = keypair
    return {
        "PGP_PUBLIC_KEY_BASE64": b64(public_armored),
        "PGP_PRIVATE_KEY_BASE64": b64(private_armored),
    }
