import random

import pytest

from cryptoprims.schemes import (
    AsymmetricEncryptionScheme,
    CommitmentScheme,
    CRHScheme,
    TwoToOneCRHScheme,
)


class PartialTwoToOne(TwoToOneCRHScheme):
    """Leaves ``compress`` unimplemented."""

    def setup(self, rng):
        return None

    def evaluate(self, parameters, left, right):
        return left + right


class XorHash(CRHScheme):
    def setup(self, rng):
        return rng.getrandbits(8)

    def evaluate(self, parameters, data):
        out = parameters
        for b in data:
            out ^= b
        return out


class AddEncryption(AsymmetricEncryptionScheme):
    def setup(self, rng):
        return 256

    def keygen(self, parameters, rng):
        k = rng.randrange(parameters)
        return k, k

    def encrypt(self, parameters, public_key, message, randomness):
        return (message + public_key) % parameters

    def decrypt(self, parameters, secret_key, ciphertext):
        return (ciphertext - secret_key) % parameters


@pytest.mark.parametrize(
    "cls", [CRHScheme, TwoToOneCRHScheme, CommitmentScheme, AsymmetricEncryptionScheme]
)
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_partial_two_to_one_is_abstract():
    with pytest.raises(TypeError):
        TwoToOneCRHScheme()
    assert issubclass(PartialTwoToOne, TwoToOneCRHScheme)
    with pytest.raises(TypeError):
        PartialTwoToOne()


def test_concrete_crh_subclass():
    with pytest.raises(TypeError):
        CRHScheme()

    scheme = XorHash()
    assert isinstance(scheme, CRHScheme)
    params = scheme.setup(random.Random(1))
    assert scheme.evaluate(params, b"") == params
    assert scheme.evaluate(params, b"ab") == scheme.evaluate(params, b"ba")


def test_concrete_encryption_round_trip():
    with pytest.raises(TypeError):
        AsymmetricEncryptionScheme()

    scheme = AddEncryption()
    assert isinstance(scheme, AsymmetricEncryptionScheme)
    rng = random.Random(2)
    params = scheme.setup(rng)
    pk, sk = scheme.keygen(params, rng)
    for message in (0, 42, 255):
        ct = scheme.encrypt(params, pk, message, None)
        assert scheme.decrypt(params, sk, ct) == message